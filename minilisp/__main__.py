"""Command-line entry point: `python -m minilisp` or the `minilisp` script."""

import argparse
import logging

from minilisp import config
from minilisp.debug_utils.pprint import COLOR_OPTIONS, DEFAULT_OPTIONS
from minilisp.interpreter import Interpreter
from minilisp.repl import repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minilisp", description="Simple LISP interpreter")
    parser.add_argument("--no-banner", action="store_true", help="do not print the startup banner")
    parser.add_argument("--color", action="store_true", help="colorize printed expressions")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="limit on nested closure calls (default: $MINILISP_MAX_DEPTH or none)")
    parser.add_argument("--set-in-current-scope", action="store_true",
                        help="evaluate the value of set! in the current scope instead of the global one")
    parser.add_argument("-v", "--verbose", action="store_true", help="log evaluation steps")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else config.get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter(
        set_evaluates_in_global=False if args.set_in_current_scope else None,
        max_depth=args.max_depth,
    )
    repl(interp, COLOR_OPTIONS if args.color else DEFAULT_OPTIONS, banner=not args.no_banner)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

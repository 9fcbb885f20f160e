"""Text rendering for tokens, parsed trees and runtime values.

Lists print with parentheses, numbers in their numpy text form, symbols
verbatim. Rendering a parsed tree and tokenizing the result gives back the
original token sequence.
"""

from __future__ import annotations

from minilisp.evaluation.special_forms import SPECIAL_FORMS as _FORM_TABLE
from minilisp.types.builtin import Builtin
from minilisp.types.lambda_fn import Lambda
from minilisp.types.nil import NilType
from minilisp.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_LAMBDA = "\033[92m"
COLOR_BUILTIN = "\033[95m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_NUMBER = "\033[93m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "color_symbols": False,
    "color_lambda": False,
    "color_builtins": False,
    "color_special_forms": False,
    "color_numbers": False,
}

COLOR_OPTIONS = {key: True for key in DEFAULT_OPTIONS}

SPECIAL_FORMS = {str(name) for name in _FORM_TABLE}


def colorize(obj, options: dict = DEFAULT_OPTIONS) -> str:
    if isinstance(obj, Symbol):
        name = str(obj)
        if name in SPECIAL_FORMS and options.get("color_special_forms"):
            return f"{COLOR_SPECIAL_FORM}{name}{RESET}"
        if options.get("color_symbols"):
            return f"{COLOR_SYMBOL}{name}{RESET}"
        return name
    if isinstance(obj, Lambda):
        text = str(obj)
        if options.get("color_lambda"):
            return f"{COLOR_LAMBDA}{text}{RESET}"
        return text
    if isinstance(obj, Builtin):
        if options.get("color_builtins"):
            return f"{COLOR_BUILTIN}{obj!r}{RESET}"
        return repr(obj)
    if isinstance(obj, NilType):
        return repr(obj)
    if options.get("color_numbers"):
        return f"{COLOR_NUMBER}{obj}{RESET}"
    return str(obj)


def pprint_expr(expr, options: dict = DEFAULT_OPTIONS) -> str:
    if isinstance(expr, list):
        return "(" + " ".join(pprint_expr(e, options) for e in expr) + ")"
    return colorize(expr, options)


def format_tokens(tokens: list[str]) -> str:
    return "[" + ", ".join(tokens) + "]"


"""Per-interpreter evaluation settings and state."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from minilisp import LispValue, config
from minilisp.errors import StackLimitExceeded


class EvalContext:
    """Options and call-depth bookkeeping threaded through the evaluator.

    set_evaluates_in_global:
        When true, `set!` evaluates its value expression in the global
        environment rather than the current scope. This is a known quirk of the
        language, kept on by default.
    max_depth:
        Bound on nested closure calls; None leaves recursion bounded only by
        Python's own recursion limit.
    output:
        Stream that `repeat` prints its results to; None means sys.stdout at
        the time of printing.
    """

    def __init__(
        self,
        *,
        set_evaluates_in_global: Optional[bool] = None,
        max_depth: Optional[int] = None,
        output: Optional[TextIO] = None,
    ):
        if set_evaluates_in_global is None:
            set_evaluates_in_global = config.get_set_evaluates_in_global()
        if max_depth is None:
            max_depth = config.get_max_depth()
        self.set_evaluates_in_global = set_evaluates_in_global
        self.max_depth = max_depth
        self.output = output
        self.depth = 0

    @contextmanager
    def call_frame(self, name: object) -> Iterator[None]:
        if self.max_depth is not None and self.depth >= self.max_depth:
            raise StackLimitExceeded(
                f"Call depth limit {self.max_depth} exceeded calling {name}"
            )
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    def emit(self, value: LispValue) -> None:
        from minilisp.debug_utils.pprint import pprint_expr

        print(pprint_expr(value), file=self.output or sys.stdout)

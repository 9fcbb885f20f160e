from __future__ import annotations

import logging
from typing import Optional, TextIO

from minilisp import SExpression, LispValue
from minilisp.builtin.env_builtin import register
from minilisp.evaluation.context import EvalContext
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import TokenStream
from minilisp.reader.tokenizer import tokenize
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating minilisp code.
    Owns one global Environment, so separate instances never share bindings.
    """

    def __init__(
        self,
        *,
        set_evaluates_in_global: Optional[bool] = None,
        max_depth: Optional[int] = None,
        output: Optional[TextIO] = None,
    ):
        self.env: Environment = Environment()
        register(self.env)
        self.context = EvalContext(
            set_evaluates_in_global=set_evaluates_in_global,
            max_depth=max_depth,
            output=output,
        )
        logger.debug(
            "interpreter ready (set! in global=%s, max depth=%s)",
            self.context.set_evaluates_in_global,
            self.context.max_depth,
        )

    def tokenize(self, code: str) -> list[str]:
        return tokenize(code)

    def read(self, tokens: list[str]) -> list[SExpression]:
        """Parse every top-level expression in `tokens` (consuming them)."""
        return list(TokenStream(tokens).parse_all())

    def evaluate(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.env, self.context)

    def eval(self, code: str) -> LispValue:
        results: list[LispValue] = []
        for expr in self.read(self.tokenize(code)):
            results.append(self.evaluate(expr))
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results

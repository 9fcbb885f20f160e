"""Lambda function representation for minilisp."""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Captured by reference: later definitions in `env` stay visible
        self.env: Environment = env

    def __str__(self) -> str:
        from minilisp.debug_utils.pprint import pprint_expr

        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(pprint_expr(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment for evaluating the body. The new scope hangs off
        the defining environment, not the caller's.
        """
        return self.env.extend(self.formals, args)

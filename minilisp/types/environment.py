"""Runtime environment for minilisp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. The global environment is the root of every
chain; each closure call gets a fresh child whose outer is the closure's
defining environment.
"""

from __future__ import annotations

from typing import Iterable, Optional

from minilisp import LispValue
from minilisp.errors import ArityMismatch, InvalidSymbol
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this scope, shadowing any outer binding.

        Raises InvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise InvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def __contains__(self, symbol: Symbol) -> bool:
        return self.find(symbol) is not None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, or Nil when it is unbound."""
        env = self.find(name)
        if env is None:
            return Nil
        return env.vars[name]

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def extend(self, params: list[Symbol], args: Iterable[LispValue]) -> Environment:
        """Return a child scope binding `params` to `args` positionally."""
        args = list(args)
        if len(params) != len(args):
            raise ArityMismatch(
                f"Expected {len(params)} argument(s), got {len(args)}: {args}"
            )
        child = Environment(outer=self)
        for param, arg in zip(params, args):
            child.define(param, arg)
        return child

    def __repr__(self) -> str:
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return f"<Environment depth={depth} {sorted(str(k) for k in self.vars)}>"

"""Native procedures with a fixed arity."""

from __future__ import annotations

from typing import Callable

from minilisp import LispValue
from minilisp.errors import ArityMismatch


class Builtin:
    __slots__ = ("name", "fn")

    arity: int = 0

    def __init__(self, name: str, fn: Callable[..., LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        if len(args) != self.arity:
            raise ArityMismatch(
                f"{self.name} expects {self.arity} argument(s), got {len(args)}: {args}"
            )
        return self.fn(*args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


class UnaryBuiltin(Builtin):
    __slots__ = ()
    arity = 1


class BinaryBuiltin(Builtin):
    __slots__ = ()
    arity = 2

"""Built-in bindings for the minilisp global environment.

Only pi and the three arithmetic procedures are pre-registered; see
minilisp.types.numeric for the width rules they follow.
"""
from __future__ import annotations

import math

from minilisp.types.builtin import BinaryBuiltin, UnaryBuiltin
from minilisp.types.environment import Environment
from minilisp.types.numeric import DOUBLE, absolute, add, multiply
from minilisp.types.symbol import Symbol


def register(env: Environment) -> Environment:
    """Install the initial global bindings into `env` and return it."""
    env.define(Symbol("pi"), DOUBLE(math.pi))
    env.define(Symbol("+"), BinaryBuiltin("+", add))
    env.define(Symbol("*"), BinaryBuiltin("*", multiply))
    env.define(Symbol("abs"), UnaryBuiltin("abs", absolute))
    return env

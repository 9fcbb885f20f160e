# Core type aliases for the minilisp data model.
# Code and runtime values share one representation: numpy scalars for numbers,
# Symbol for identifiers, plain Python lists for lists, Nil for the absent value.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., LispValue]

from minilisp.interpreter import Interpreter  # noqa: E402

__all__ = ["Interpreter", "LispValue", "SExpression", "EvaluatorFn"]

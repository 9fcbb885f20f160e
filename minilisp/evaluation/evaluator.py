"""Core evaluator for the minilisp interpreter.

Dispatches on the shape of the expression: symbols are looked up, lists whose
head is a symbol are special forms or applications, everything else evaluates
to itself.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.evaluation.apply import apply
from minilisp.evaluation.context import EvalContext
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol


def evaluate(
    expr: SExpression, env: Environment, context: EvalContext | None = None
) -> LispValue:
    if context is None:
        context = EvalContext()

    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            return []

        case [Symbol() as head, *tail_args]:
            special = SPECIAL_FORMS.get(head)
            if special is not None:
                return special(tail_args, env, context, evaluate)

            proc = env.lookup(head)
            args = [evaluate(arg, env, context) for arg in tail_args]
            return apply(proc, args, context, evaluate)

        case [_, *_]:
            # Only symbols may appear in operator position
            return Nil

    # --- Atoms return as-is ---
    return expr

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import ArityMismatch
from minilisp.evaluation.context import EvalContext
from minilisp.types.environment import Environment
from minilisp.types.numeric import is_zero


def if_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise ArityMismatch("if requires a condition, a then-expression and an else-expression")

    cond = evaluate_fn(tail[0], env, context)
    # The integer 0 is the only false value
    if not is_zero(cond):
        return evaluate_fn(tail[1], env, context)
    return evaluate_fn(tail[2], env, context)

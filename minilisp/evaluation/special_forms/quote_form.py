from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import ArityMismatch
from minilisp.evaluation.context import EvalContext
from minilisp.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise ArityMismatch("quote requires exactly 1 argument")
    return tail[0]

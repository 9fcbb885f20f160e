from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import ArityMismatch, InvalidSymbol, MiniLispTypeError
from minilisp.evaluation.context import EvalContext
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body expression, evaluated per call
    if len(tail) != 2:
        raise ArityMismatch("lambda requires a parameter list and a body")

    params, body = tail
    if not isinstance(params, list):
        raise MiniLispTypeError(f"lambda parameters must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise InvalidSymbol(f"lambda parameter must be a Symbol, got {p}")

    return Lambda(list(params), body, env)

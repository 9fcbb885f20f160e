import logging

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import ArityMismatch, InvalidSymbol
from minilisp.evaluation.context import EvalContext
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current scope and returns the bound value.
    """
    if len(tail) != 2:
        raise ArityMismatch("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise InvalidSymbol(f"define first argument must be a Symbol, got {name}")
    value = evaluate_fn(val_expr, env, context)
    env.define(name, value)
    logger.debug("define %s = %r", name, value)
    return value

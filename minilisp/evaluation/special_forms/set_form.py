import warnings

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import ArityMismatch, InvalidSymbol, UndefinedVariableWarning
from minilisp.evaluation.context import EvalContext
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (set! var value)
    Setting an unbound variable only warns. The value expression is evaluated in
    the global environment unless context.set_evaluates_in_global is off; the
    binding itself always lands in the current scope.
    """
    if len(tail) != 2:
        raise ArityMismatch("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise InvalidSymbol(f"set! first argument must be a Symbol, got {var_sym}")

    if var_sym not in env:
        warnings.warn(
            f"setting undefined variable '{var_sym}'",
            UndefinedVariableWarning,
            stacklevel=2,
        )

    scope = env.root() if context.set_evaluates_in_global else env
    value = evaluate_fn(val_expr, scope, context)
    env.define(var_sym, value)
    return value

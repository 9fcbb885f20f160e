"""(repeat count expr): evaluate `expr` count times, printing each result."""

from __future__ import annotations

import logging

import numpy as np

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import ArityMismatch, MiniLispTypeError
from minilisp.evaluation.context import EvalContext
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil

logger = logging.getLogger(__name__)


def repeat_form(
    tail: list[SExpression],
    env: Environment,
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise ArityMismatch("repeat requires a count and an expression")

    count_expr, body = tail
    count = evaluate_fn(count_expr, env, context)
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise MiniLispTypeError(f"repeat count must be an integer, got {count!r}")

    # Same env every time, so side effects carry over between iterations
    for i in range(int(count)):
        logger.debug("repeat iteration %d/%d", i + 1, count)
        context.emit(evaluate_fn(body, env, context))
    return Nil

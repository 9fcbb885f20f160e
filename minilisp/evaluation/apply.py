"""Application engine for minilisp.

Arguments arrive already evaluated. Builtins check their own fixed arity;
lambdas bind their formals in a fresh child of the defining environment.
Anything else in operator position applies to Nil.
"""

import logging

from minilisp import LispValue, EvaluatorFn
from minilisp.evaluation.context import EvalContext
from minilisp.types.builtin import Builtin
from minilisp.types.lambda_fn import Lambda
from minilisp.types.nil import Nil

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value.

    Raises ArityMismatch when the argument count differs from the formals, and
    StackLimitExceeded when the context's depth bound is hit.
    """
    new_env = fn.extend_env(args)
    with context.call_frame(fn):
        logger.debug("call %s depth=%d args=%s", fn, context.depth, args)
        return evaluate_fn(fn.body, new_env, context)


def apply(
    head: LispValue,
    args: list[LispValue],
    context: EvalContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Builtin; other values produce Nil."""
    if isinstance(head, Builtin):
        return head(args)
    if isinstance(head, Lambda):
        return apply_lambda(head, args, context, evaluate_fn)
    logger.debug("not a procedure: %r", head)
    return Nil

import numpy as np
import pytest

from minilisp.errors import ArityMismatch, StackLimitExceeded
from minilisp.evaluation.evaluator import evaluate
from minilisp.interpreter import Interpreter
from minilisp.reader.parser import parse
from minilisp.types.builtin import BinaryBuiltin, UnaryBuiltin
from minilisp.types.lambda_fn import Lambda
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol

pytestmark = pytest.mark.usefixtures("clean_config")


def run(env, *sources):
    """Evaluate each source form in order and return the last result."""
    result = None
    for source in sources:
        result = evaluate(parse(source), env)
    return result


def test_self_evaluating_numbers(env):
    assert evaluate(np.int32(1), env) == 1
    assert evaluate(np.float64(3.14), env) == 3.14


def test_symbol_lookup(env):
    assert run(env, "pi") == np.pi
    assert type(run(env, "pi")) is np.float64


def test_unbound_symbol_is_nil(env):
    assert run(env, "nothing-here") is Nil


def test_empty_list_evaluates_to_itself(env):
    assert run(env, "()") == []


@pytest.mark.parametrize(
    "source,expected,width",
    [
        ("(+ 1 2)", 3, np.int32),
        ("(+ 1.0 2)", 3.0, np.float64),
        ("(* 2 3)", 6, np.int32),
        ("(* 2.5f 2)", 5.0, np.float32),
        ("(+ (* 2 3) (* 4 5))", 26, np.int32),
        ("(abs -4)", 4, np.int32),
        ("(abs (+ -1.5 0))", 1.5, np.float64),
        ("(* pi 2)", 2 * np.pi, np.float64),
    ]
)
def test_builtin_arithmetic(env, source, expected, width):
    result = run(env, source)
    assert type(result) is width
    assert result == expected


@pytest.mark.parametrize("source", ["(+ 1)", "(+ 1 2 3)", "(*)", "(abs)", "(abs 1 2)"])
def test_builtin_arity_mismatch(env, source):
    with pytest.raises(ArityMismatch):
        run(env, source)


def test_builtins_are_registered(env):
    assert isinstance(env.lookup(Symbol("+")), BinaryBuiltin)
    assert isinstance(env.lookup(Symbol("*")), BinaryBuiltin)
    assert isinstance(env.lookup(Symbol("abs")), UnaryBuiltin)
    assert set(env.vars) == {Symbol("pi"), Symbol("+"), Symbol("*"), Symbol("abs")}


def test_lambda_application(env):
    run(env, "(define sq (lambda (x) (* x x)))")
    assert isinstance(env.lookup(Symbol("sq")), Lambda)
    assert run(env, "(sq 5)") == 25


def test_lambda_with_two_parameters(env):
    run(env, "(define add3 (lambda (a b) (+ (+ a b) 3)))")
    assert run(env, "(add3 1 2)") == 6


@pytest.mark.parametrize("call", ["(sq)", "(sq 1 2)"])
def test_closure_arity_mismatch(env, call):
    run(env, "(define sq (lambda (x) (* x x)))")
    with pytest.raises(ArityMismatch):
        run(env, call)


def test_closures_are_lexically_scoped(env):
    run(
        env,
        "(define make-adder (lambda (n) (lambda (x) (+ x n))))",
        "(define add5 (make-adder 5))",
        "(define n 100)",
        "(define call-with-n (lambda (n) (add5 1)))",
    )
    assert run(env, "(add5 1)") == 6
    # The caller's n is not visible to add5
    assert run(env, "(call-with-n 1000)") == 6


def test_closure_sees_later_global_definitions(env):
    run(env, "(define f (lambda (x) (+ x later)))", "(define later 10)")
    assert run(env, "(f 1)") == 11


def test_call_scope_does_not_leak(env):
    run(env, "(define f (lambda (tmp) tmp))", "(f 3)")
    assert run(env, "tmp") is Nil


def test_non_procedure_application_is_nil(env):
    assert run(env, "(pi 1 2)") is Nil
    assert run(env, "(undefined-fn 1)") is Nil


def test_arguments_evaluated_before_failed_application(env):
    assert run(env, "(undefined-fn (define z 3))") is Nil
    assert env.lookup(Symbol("z")) == 3


def test_non_symbol_head_is_nil(env):
    assert run(env, "(1 2 3)") is Nil
    assert run(env, "((lambda (x) x) 1)") is Nil


def test_procedures_evaluate_to_themselves(env):
    plus = env.lookup(Symbol("+"))
    assert evaluate(plus, env) is plus
    assert evaluate(Nil, env) is Nil


def test_stack_limit():
    interp = Interpreter(max_depth=50)
    interp.eval("(define loop (lambda (x) (loop x)))")
    with pytest.raises(StackLimitExceeded):
        interp.eval("(loop 1)")
    assert interp.context.depth == 0
    assert interp.eval("(+ 1 1)") == 2


def test_depth_limit_allows_shallow_calls():
    interp = Interpreter(max_depth=2)
    interp.eval("(define f (lambda (x) (g x)))")
    interp.eval("(define g (lambda (x) (+ x 1)))")
    assert interp.eval("(f 1)") == 2


def test_unbounded_recursion_hits_python_limit():
    interp = Interpreter()
    interp.eval("(define loop (lambda (x) (loop x)))")
    with pytest.raises(RecursionError):
        interp.eval("(loop 1)")

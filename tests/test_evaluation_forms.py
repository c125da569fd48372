import pytest

from felisp.errors import Reason
from felisp.evaluation.special_forms.exit_form import Halt, EXIT_STATUS
from felisp.types.environment import Environment
from felisp.types.lambda_fn import Lambda
from felisp.types.symbol import Symbol

# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if true 1 2)", 1.0),
        ("(if false 1 2)", 2.0),
        ("(if (< 1 2) (+ 1 1) (- 1 1))", 2.0),
        ("(if (> 1 2) (+ 1 1) (- 1 1))", 0.0),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_only_evaluates_chosen_branch(run):
    assert run("(if true 1 unbound)") == 1.0
    assert run("(if false unbound 2)") == 2.0


def test_if_requires_boolean_test(run):
    with pytest.raises(Reason, match="unexpected test form='\\(\\+,1,2\\)'"):
        run("(if (+ 1 2) 1 2)")


def test_if_missing_forms(run):
    with pytest.raises(Reason, match="expected test form"):
        run("(if)")
    with pytest.raises(Reason, match="expected form idx=2"):
        run("(if false 1)")
    with pytest.raises(Reason, match="expected form idx=1"):
        run("(if true)")

# ------------------ defn ------------------

def test_defn_binds_in_current_environment(run, env):
    result = run("(defn x 5)")
    assert result == Symbol("x")
    assert run("x") == 5.0
    assert env.vars["x"] == 5.0


def test_defn_evaluates_value(run):
    run("(defn y (+ 2 3))")
    assert run("(+ y 1)") == 6.0


def test_defn_last_write_wins(run):
    run("(defn x 1)")
    run("(defn x 2)")
    assert run("x") == 2.0


def test_defn_can_bind_special_form_names_without_shadowing(run):
    run("(defn if 5)")
    assert run("if") == 5.0
    assert run("(if true 1 2)") == 1.0


@pytest.mark.parametrize(
    "source,message",
    [
        ("(defn)", "expected first form"),
        ("(defn 5 1)", "expected first form to be a symbol"),
        ("(defn x)", "expected second form"),
        ("(defn x 1 2)", "defn can only have two forms"),
    ]
)
def test_defn_errors(run, source, message):
    with pytest.raises(Reason, match=message):
        run(source)

# ------------------ fn ------------------

def test_fn_builds_lambda_without_evaluating(run):
    lam = run("(fn (a b) (+ a b))")
    assert isinstance(lam, Lambda)
    assert lam.params == [Symbol("a"), Symbol("b")]
    assert lam.body == [Symbol("+"), Symbol("a"), Symbol("b")]
    # body refers to an unbound symbol: fine until called
    assert isinstance(run("(fn () nothing)"), Lambda)


def test_lambda_application(run):
    run("(defn lam (fn (a b) (+ a b)))")
    assert run("(lam 2 3)") == 5.0


def test_immediate_lambda_application(run):
    assert run("((fn (x) (- x 1)) 10)") == 9.0


def test_lambda_arity_mismatch(run):
    run("(defn lam (fn (a b) (+ a b)))")
    with pytest.raises(Reason, match="expected 2 arguments, got 1"):
        run("(lam 2)")


def test_lambda_params_must_be_symbol_list(run):
    run("(defn bad (fn x x))")
    with pytest.raises(Reason, match="expected args form to be a list"):
        run("(bad 1)")
    run("(defn bad2 (fn (1) 1))")
    with pytest.raises(Reason, match="expected symbols in the argument list"):
        run("(bad2 1)")


@pytest.mark.parametrize(
    "source,message",
    [
        ("(fn)", "expected args form"),
        ("(fn (a))", "expected second form"),
        ("(fn (a) a a)", "fn definition can only have two forms"),
    ]
)
def test_fn_errors(run, source, message):
    with pytest.raises(Reason, match=message):
        run(source)


def test_parameters_shadow_globals(run):
    run("(defn a 100)")
    run("(defn f (fn (a) (+ a 1)))")
    assert run("(f 1)") == 2.0
    assert run("a") == 100.0


def test_defn_inside_lambda_stays_local(run, env):
    run("(defn f (fn (v) (defn inner v)))")
    assert run("(f 3)") == Symbol("inner")
    assert "inner" not in env.vars


def test_free_variables_resolve_at_call_site(run):
    # lambdas do not capture where they were written
    run("(defn get-y (fn () y))")
    run("(defn with-y (fn (y) (get-y)))")
    assert run("(with-y 7)") == 7.0
    with pytest.raises(Reason, match="unexpected symbol k='y'"):
        run("(get-y)")


def test_recursion(run):
    run("(defn sum-to (fn (n) (if (<= n 0) 0 (+ n (sum-to (- n 1))))))")
    assert run("(sum-to 10)") == 55.0


def test_higher_order(run):
    run("(defn twice (fn (f x) (f (f x))))")
    run("(defn inc (fn (x) (+ x 1)))")
    assert run("(twice inc 5)") == 7.0
    assert run("(twice + 5)") == 5.0

# ------------------ exit ------------------

def test_exit_raises_halt(run):
    with pytest.raises(Halt) as info:
        run("(exit)")
    assert info.value.status == EXIT_STATUS == 0x0100
    assert info.value.status & 0xFF == 0


def test_exit_ignores_arguments(run):
    with pytest.raises(Halt):
        run("(exit unbound (1 2))")

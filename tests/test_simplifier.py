import math

import pytest

from symdiff import (
    Constant, ConstantNode, Variable, Add, Sub, Mul, Div, Sin, Cos, Exp, Log,
    ZERO, ONE, RuleSet, ExpressionSimplifier, simplify
)

X = Variable('x')
Y = Variable('y')

SAMPLES = [
    X,
    Constant(2.5),
    Add(X, Y),
    Mul(Add(X, ZERO), ONE),
    Div(Sin(X), Sub(Y, ZERO)),
    Mul(Cos(Mul(ONE, X)), Add(ZERO, Y)),
    Sub(Exp(X), Log(Add(Y, Constant(2.0)))),
]


@pytest.mark.parametrize("expr", SAMPLES)
def test_adding_zero_is_identity(expr):
    assert simplify(Add(expr, ZERO)) == simplify(expr)
    assert simplify(Add(ZERO, expr)) == simplify(expr)


@pytest.mark.parametrize("expr", SAMPLES)
def test_multiplying_by_one_is_identity(expr):
    assert simplify(Mul(expr, ONE)) == simplify(expr)
    assert simplify(Mul(ONE, expr)) == simplify(expr)


@pytest.mark.parametrize("expr", SAMPLES)
def test_dividing_by_one_and_subtracting_zero_are_identities(expr):
    assert simplify(Div(expr, ONE)) == simplify(expr)
    assert simplify(Sub(expr, ZERO)) == simplify(expr)


@pytest.mark.parametrize("expr", SAMPLES)
def test_zero_annihilates_products_and_numerators(expr):
    assert simplify(Mul(expr, ZERO)) == ZERO
    assert simplify(Mul(ZERO, expr)) == ZERO
    assert simplify(Div(ZERO, expr)) == ZERO


def test_zero_plus_zero():
    assert simplify(Add(ZERO, ZERO)) == ZERO


def test_rules_that_do_not_exist_are_not_applied():
    # only the right operand of a subtraction is checked
    assert simplify(Sub(ZERO, X)) == Sub(ZERO, X)
    # a unit numerator is kept
    assert simplify(Div(ONE, X)) == Div(ONE, X)
    # and x / 0 is left for the evaluator
    assert simplify(Div(X, ZERO)) == Div(X, ZERO)


def test_negative_zero_does_not_trigger_zero_rules():
    assert simplify(Add(X, Constant(-0.0))) == Add(X, Constant(-0.0))
    assert simplify(Mul(X, Constant(-0.0))) == Mul(X, Constant(-0.0))
    assert simplify(Div(Constant(-0.0), X)) == Div(Constant(-0.0), X)


def test_children_simplified_before_parent():
    expr = Mul(Add(X, ZERO), Sub(ONE, ZERO))
    assert simplify(expr) == X


def test_unchanged_tree_is_returned_as_is():
    expr = Add(Mul(X, Y), Sin(X))
    assert simplify(expr) is expr


def test_minimal_rules_keep_function_wrappers():
    assert simplify(Sin(Add(X, ZERO))) == Sin(X)
    assert simplify(Cos(Constant(0.0))) == Cos(Constant(0.0))
    assert simplify(Log(Mul(ONE, Y))) == Log(Y)


def test_minimal_rules_do_not_fold_constants():
    expr = Add(Constant(2.0), Constant(3.0))
    assert simplify(expr) == expr


def test_extended_rules_fold_constants():
    assert simplify(Add(Constant(2.0), Constant(3.0)), RuleSet.EXTENDED) == Constant(5.0)
    assert simplify(Sub(Constant(2.0), Constant(3.0)), RuleSet.EXTENDED) == Constant(-1.0)
    assert simplify(Mul(Constant(2.0), Constant(3.0)), RuleSet.EXTENDED) == Constant(6.0)
    assert simplify(Div(Constant(3.0), Constant(2.0)), RuleSet.EXTENDED) == Constant(1.5)
    assert simplify(Sin(Constant(0.0)), RuleSet.EXTENDED) == Constant(0.0)
    assert simplify(Cos(Constant(0.0)), RuleSet.EXTENDED) == ONE
    assert simplify(Exp(Constant(0.0)), RuleSet.EXTENDED) == ONE
    folded = simplify(Log(Mul(Constant(3.0), Constant(5.0))), RuleSet.EXTENDED)
    assert isinstance(folded, ConstantNode)
    assert folded.value == pytest.approx(math.log(15.0))


def test_extended_folding_follows_ieee():
    assert simplify(Div(ONE, ZERO), RuleSet.EXTENDED) == Constant(math.inf)
    assert simplify(Div(Constant(-1.0), ZERO), RuleSet.EXTENDED) == Constant(-math.inf)
    assert simplify(Log(ZERO), RuleSet.EXTENDED) == Constant(-math.inf)
    assert simplify(Log(Constant(-1.0)), RuleSet.EXTENDED) == Constant(math.nan)


def test_extended_identity_rules_run_before_folding():
    # 0 * inf would be nan if folded, the annihilator wins
    assert simplify(Mul(ZERO, Constant(math.inf)), RuleSet.EXTENDED) == ZERO


def test_extended_folding_cascades_bottom_up():
    expr = Mul(Add(Constant(1.0), Constant(2.0)), Sub(X, Div(Constant(4.0), Constant(2.0))))
    assert simplify(expr, RuleSet.EXTENDED) == Mul(Constant(3.0), Sub(X, Constant(2.0)))


@pytest.mark.parametrize("rule_set", list(RuleSet))
@pytest.mark.parametrize("expr", SAMPLES + [
    Add(Add(Mul(ZERO, X), Div(Y, ONE)), Sub(Sin(Add(ZERO, X)), ZERO)),
    Mul(Add(Constant(1.0), Constant(-1.0)), X),
])
def test_simplify_is_idempotent_on_rule_patterns(expr, rule_set):
    once = simplify(expr, rule_set)
    assert simplify(once, rule_set) == once


def test_simplification_is_not_a_normal_form():
    # Equivalent trees are not brought to a common shape: no cancellation,
    # no collection of like terms, no reassociation of constants.
    assert simplify(Sub(X, X)) == Sub(X, X)
    assert simplify(Add(Mul(Constant(2.0), X), Mul(Constant(3.0), X))) == \
        Add(Mul(Constant(2.0), X), Mul(Constant(3.0), X))
    nested = Add(Add(X, Constant(1.0)), Constant(2.0))
    assert simplify(nested, RuleSet.EXTENDED) == nested
    assert simplify(nested, RuleSet.EXTENDED) != simplify(Add(X, Constant(3.0)), RuleSet.EXTENDED)


def test_rule_set_from_name():
    assert RuleSet.from_name("Extended") is RuleSet.EXTENDED
    assert ExpressionSimplifier().rule_set is RuleSet.MINIMAL
    with pytest.raises(ValueError):
        RuleSet.from_name("aggressive")

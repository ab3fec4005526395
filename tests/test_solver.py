import pytest

from cellui.solver import (
    REQUIRED,
    STRONG,
    WEAK,
    Expression,
    LinearConstraint,
    Relation,
    Solver,
    UnsatisfiableConstraint,
    Variable,
)


def test_weak_preference_within_required_sum():
    x, y = Variable("x"), Variable("y")
    solver = Solver()
    solver.add_constraint(LinearConstraint(x + y, Relation.EQ, 10))
    solver.add_constraint(LinearConstraint(x, Relation.EQ, 3, WEAK))
    assert solver.value(x) == pytest.approx(3)
    assert solver.value(x) + solver.value(y) == pytest.approx(10)


def test_required_inequality_beats_weak_equality():
    x = Variable("x")
    solver = Solver()
    solver.add_constraints(
        [
            LinearConstraint(x, Relation.GE, 5),
            LinearConstraint(x, Relation.EQ, 3, WEAK),
        ]
    )
    assert solver.value(x) == pytest.approx(5)


def test_stronger_constraint_wins():
    x = Variable("x")
    solver = Solver()
    solver.add_constraint(LinearConstraint(x, Relation.EQ, 20, WEAK))
    solver.add_constraint(LinearConstraint(x, Relation.EQ, 10, STRONG))
    assert solver.value(x) == pytest.approx(10)


def test_bounds_clamp_weak_target():
    x = Variable("x")
    solver = Solver()
    solver.add_constraints(
        [
            LinearConstraint(x, Relation.GE, 0),
            LinearConstraint(x, Relation.LE, 10),
            LinearConstraint(x, Relation.EQ, 50, WEAK),
        ]
    )
    assert solver.value(x) == pytest.approx(10)


def test_conflicting_required_constraints_raise():
    x = Variable("x")
    solver = Solver()
    solver.add_constraint(LinearConstraint(x, Relation.EQ, 1))
    with pytest.raises(UnsatisfiableConstraint):
        solver.add_constraint(LinearConstraint(x, Relation.EQ, 2))


def test_constant_only_contradiction_raises():
    solver = Solver()
    with pytest.raises(UnsatisfiableConstraint):
        solver.add_constraint(LinearConstraint(1, Relation.EQ, 0))


def test_conflicting_required_inequalities_raise():
    x = Variable("x")
    solver = Solver()
    solver.add_constraint(LinearConstraint(x, Relation.GE, 10))
    with pytest.raises(UnsatisfiableConstraint):
        solver.add_constraint(LinearConstraint(x, Relation.LE, 5))


def test_duplicate_constraint_is_rejected():
    x = Variable("x")
    constraint = LinearConstraint(x, Relation.EQ, 1)
    solver = Solver()
    solver.add_constraint(constraint)
    with pytest.raises(ValueError):
        solver.add_constraint(constraint)


def test_unknown_variable_is_zero():
    assert Solver().value(Variable("unused")) == 0.0


def test_chained_positions_are_contiguous():
    a_x, a_w, b_x, b_w = (Variable(n) for n in ("ax", "aw", "bx", "bw"))
    solver = Solver()
    solver.add_constraints(
        [
            LinearConstraint(a_x, Relation.EQ, 0),
            LinearConstraint(a_x + a_w, Relation.EQ, b_x),
            LinearConstraint(b_x + b_w, Relation.EQ, 20),
            LinearConstraint(a_w, Relation.GE, 0),
            LinearConstraint(b_w, Relation.GE, 0),
            LinearConstraint(a_w, Relation.EQ, 5, WEAK),
        ]
    )
    assert solver.value(a_w) == pytest.approx(5)
    assert solver.value(a_x) + solver.value(a_w) == pytest.approx(solver.value(b_x))
    assert solver.value(b_x) + solver.value(b_w) == pytest.approx(20)


def test_expression_arithmetic():
    x, y = Variable("x"), Variable("y")
    expr = 2 * x + 3 - y
    assert expr.terms[x] == 2
    assert expr.terms[y] == -1
    assert expr.constant == 3
    halved = expr / 2
    assert halved.terms[x] == 1
    assert halved.constant == 1.5


def test_constraint_expression_moves_rhs_to_left():
    x, y = Variable("x"), Variable("y")
    constraint = LinearConstraint(x + 4, Relation.LE, y)
    expr = constraint.expression
    assert expr.terms == {x: 1.0, y: -1.0}
    assert expr.constant == 4


def test_strength_is_clipped_and_validated():
    x = Variable("x")
    assert LinearConstraint(x, Relation.EQ, 0, REQUIRED * 10).strength == REQUIRED
    with pytest.raises(ValueError):
        LinearConstraint(x, Relation.EQ, 0, -1)


def test_expression_rejects_non_numeric_operands():
    with pytest.raises(TypeError):
        Expression() + "text"
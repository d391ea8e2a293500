import math

import pytest

from drill import oracle
from drill.oracle import (
    EquationCheck, are_equivalent, check_equation_validity, classify_equation_step,
    get_equation_solution, is_factored_form, is_zero,
)


def test_sample_point_set_shape() -> None:
    points = oracle.PROBE_POINTS
    assert {0, 1, -1} <= set(points)
    assert any(p > 0 and p != int(p) for p in points)
    assert any(p < 0 and p != int(p) for p in points)
    assert math.pi in points
    assert len(points) > 4  # above the highest degree in the catalogue


@pytest.mark.parametrize(
    "expr",
    ["x", "x^2 - 4", "(x+3)(2x-5) - (x+3)(x+1)", "64x^3 + 27", "1 = 2(x+1)"],
)
def test_expression_is_equivalent_to_itself(expr: str) -> None:
    assert are_equivalent(expr, expr)


def test_expanded_and_factored_forms() -> None:
    assert are_equivalent("x^2-4", "(x-2)(x+2)")
    assert not are_equivalent("x^2-4", "(x-2)(x+3)")
    assert are_equivalent("x^2 - 7x + 12", "(x-3)(x-4)")
    assert are_equivalent("16x^2 - 24x + 9", "(4x-3)^2")
    assert not are_equivalent("16x^2 - 24x + 9", "(4x+3)^2")


def test_decimal_comma_is_accepted() -> None:
    assert are_equivalent("0,5x", "x/2")


def test_failure_at_any_sample_point_means_not_equivalent() -> None:
    # both undefined at x = 0, which must not count as agreement
    assert not are_equivalent("1/x", "1/x")
    assert not are_equivalent("x^2", "garbage(")


def test_equation_target_is_scale_sensitive_but_validity_is_not() -> None:
    assert not are_equivalent("x=-5", "2x=-10")
    assert check_equation_validity("2x=-10", -5)
    assert check_equation_validity("x=-5", -5)


@pytest.mark.parametrize("solution", [-5, -0.5, 0, 3])
def test_tautologies_are_rejected(solution: float) -> None:
    assert not check_equation_validity("0=0", solution)
    assert not check_equation_validity("x-x=0", solution)
    assert classify_equation_step("2(x+1) = 2x + 2", solution) is EquationCheck.TAUTOLOGY


def test_broken_equality() -> None:
    assert classify_equation_step("2x=-9", -5) is EquationCheck.BROKEN
    assert classify_equation_step("1/(x+5) = 1", -5) is EquationCheck.BROKEN
    assert classify_equation_step("2x = -10", -5) is EquationCheck.VALID


def test_is_zero() -> None:
    assert is_zero("x - x")
    assert is_zero("(x+1)^2 - x^2 - 2x - 1")
    assert not is_zero("x")
    assert not is_zero("0.001")


def test_get_equation_solution() -> None:
    assert get_equation_solution("x=-5") == pytest.approx(-5)
    assert get_equation_solution("x = -0,5") == pytest.approx(-0.5)
    assert get_equation_solution("x = 7/2") == pytest.approx(3.5)
    assert get_equation_solution("x") is None
    assert get_equation_solution("x = 1 = 2") is None
    assert get_equation_solution("x = y") is None
    assert get_equation_solution("x = 2x") is None


@pytest.mark.parametrize(
    "text,expected",
    [
        ("(x-3)(x-4)", True),
        ("2(x-3)(x+3)", True),
        ("(4x-3)^2", True),
        ("x(x-1)(x+4)", True),
        ("x^2 - 9", False),
        ("(x+1)(x-1) + 3", False),
        ("16x^2 - 24x + 9", False),
    ],
)
def test_is_factored_form(text: str, expected: bool) -> None:
    assert is_factored_form(text) is expected


def test_cancelled_factor_is_not_equivalent() -> None:
    # x/x is undefined at x = 0, one of the sample points
    assert not are_equivalent("1", "x/x")
    assert not are_equivalent("(x-3)(x-4)", "(x-3)(x-4)x/x")
    assert not is_zero("0/x")

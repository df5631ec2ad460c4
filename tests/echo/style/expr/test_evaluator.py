"""
Tests for the formula evaluator.
"""

import math

import pytest

from echo.style.expr import (
    ParseError,
    evaluate,
    find_identifiers,
    substitute_variables,
)


class TestArithmetic:
    """Tests for plain arithmetic."""

    @pytest.mark.parametrize(
        "formula, expected",
        [
            ("2+3*4", 14),
            ("(2+3)*4", 20),
            ("-2*-3", 6),
            ("10-4-3", 3),
            ("8/4/2", 1),
            ("-(1+2)", -3),
            (" 1 +  2 ", 3),
            ("7.", 7),
            ("1.5*2", 3),
        ],
    )
    def test_evaluates(self, formula, expected):
        assert evaluate(formula) == pytest.approx(expected)

    def test_decimal_fraction(self):
        assert evaluate("0.1+0.2") == pytest.approx(0.3)


class TestLongChains:
    """Long flat formulas evaluate without recursion limits."""

    def test_thousand_term_sum(self):
        assert evaluate("+".join(["1"] * 1000)) == 1000

    def test_long_sum_of_variables(self):
        assert evaluate("+".join(["gap"] * 1500), {"gap": 2}) == 3000

    def test_long_chain_keeps_left_associativity(self):
        assert evaluate("100" + "-1" * 2000) == -1900
        assert evaluate("1" + "*2" * 10 + "/2" * 10) == 1

    def test_mixed_precedence_chain(self):
        assert evaluate("+".join(["2*3"] * 1200)) == 7200


class TestDivisionByZero:
    """Division by zero follows floating point semantics."""

    def test_positive_over_zero_is_infinity(self):
        assert evaluate("1/0") == math.inf

    def test_negative_over_zero_is_negative_infinity(self):
        assert evaluate("-1/0") == -math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(evaluate("0/0"))


class TestVariables:
    """Tests for variable substitution."""

    def test_substitutes_variable(self):
        assert evaluate("x+1", {"x": 5}) == 6

    def test_substitutes_several_variables(self):
        assert evaluate("gap*2+border", {"gap": 4, "border": 1}) == 9

    def test_substitutes_negative_value(self):
        assert evaluate("3-x", {"x": -5.0}) == 8
        assert evaluate("2*x", {"x": -5.0}) == -10

    def test_substitutes_large_and_small_values(self):
        assert evaluate("x", {"x": 1e20}) == 1e20
        assert evaluate("x*10000000", {"x": 1e-7}) == pytest.approx(1)

    def test_nan_variable_short_circuits(self):
        assert math.isnan(evaluate("x+1", {"x": math.nan}))

    def test_nan_variable_short_circuits_before_parse_errors(self):
        assert math.isnan(evaluate("x+(", {"x": math.nan}))

    def test_unknown_variable_is_a_parse_error(self):
        with pytest.raises(ParseError):
            evaluate("y+1", {"x": 1})

    def test_without_variables_identifiers_fail(self):
        with pytest.raises(ParseError):
            evaluate("x+1")


class TestHelpers:
    """Tests for substitution helpers."""

    def test_find_identifiers_in_order(self):
        assert find_identifiers("b*2+a_1-(c)") == ["b", "a_1", "c"]

    def test_substitute_leaves_unknown_names(self):
        assert substitute_variables("a+b", {"a": 2}) == "2.0+b"

    def test_substitute_returns_none_for_nan(self):
        assert substitute_variables("a+b", {"b": math.nan}) is None

"""
Tests for the postfix evaluator.

Uses the real tokenizer to build token streams.
"""

import math
from decimal import Decimal

import pytest

from mathparser.errors import InvalidExpression
from mathparser.rpn import apply_operator, evaluate_rpn
from mathparser.tokenizer import tokenize
from mathparser.tokens import LeftParen, Number, OperatorKind, RightParen


def rpn(text):
    return evaluate_rpn(tokenize(text))


class TestEvaluateRPN:
    """Test arithmetic on well-formed postfix input."""

    def test_addition(self):
        assert rpn("1 2 +") == Decimal("3")

    def test_operand_order_subtraction(self):
        assert rpn("5 3 -") == Decimal("2")

    def test_operand_order_division(self):
        assert rpn("8 2 /") == Decimal("4")

    def test_operand_order_power(self):
        assert rpn("2 3 ^") == Decimal("8")

    def test_chained(self):
        assert rpn("1 2 + 3 4 + *") == Decimal("21")

    def test_decimal_arithmetic_is_exact(self):
        assert rpn("0.1 0.2 +") == Decimal("0.3")

    def test_division_uses_28_digits(self):
        assert rpn("1 3 /") == Decimal("0.3333333333333333333333333333")

    def test_negative_literals(self):
        assert rpn("-2 -3 *") == Decimal("6")

    def test_single_value(self):
        assert rpn("7") == Decimal("7")

    def test_fractional_power_goes_through_float(self):
        assert rpn("2 0.5 ^") == Decimal(repr(math.pow(2.0, 0.5)))


class TestEvaluateRPNErrors:
    """Test rejection of malformed postfix input."""

    def test_operator_without_operands(self):
        with pytest.raises(InvalidExpression):
            rpn("+")

    def test_operator_with_one_operand(self):
        with pytest.raises(InvalidExpression):
            rpn("1 +")

    def test_leftover_values(self):
        with pytest.raises(InvalidExpression):
            rpn("1 2")

    def test_empty(self):
        with pytest.raises(InvalidExpression):
            rpn("")

    def test_left_paren_rejected(self):
        with pytest.raises(InvalidExpression):
            evaluate_rpn([Number(Decimal("1")), LeftParen()])

    def test_right_paren_rejected(self):
        with pytest.raises(InvalidExpression):
            evaluate_rpn([RightParen(), Number(Decimal("1"))])

    def test_division_by_zero(self):
        with pytest.raises(InvalidExpression):
            rpn("1 0 /")

    def test_zero_divided_by_zero(self):
        with pytest.raises(InvalidExpression):
            rpn("0 0 /")

    def test_power_overflow(self):
        with pytest.raises(InvalidExpression):
            rpn("10 400 ^")

    def test_negative_base_fractional_exponent(self):
        with pytest.raises(InvalidExpression):
            rpn("-8 0.5 ^")

    def test_unknown_token_is_programming_error(self):
        with pytest.raises(TypeError):
            evaluate_rpn(["1"])


class TestApplyOperator:
    """Test single operations directly."""

    def test_subtract(self):
        assert apply_operator(OperatorKind.SUB, Decimal("1"), Decimal("4")) == Decimal("-3")

    def test_power_returns_decimal(self):
        result = apply_operator(OperatorKind.POW, Decimal("2"), Decimal("10"))
        assert isinstance(result, Decimal)
        assert result == 1024

"""
Custom Notation - Front-loaded operators over a flat list of values.

The n operators come first, then the values. They build a balanced binary
reduction tree: the first operator combines adjacent pairs of values, the
second combines pairs of those results, and so on up to the last
(outermost) operator, which folds the remaining groups left to right.

  custom:  / 1 2 3 4
  rpn:     1 2 / 3 / 4 /
  infix:   ((1 / 2) / 3) / 4

  custom:  +- 1 2 3 4 5 6 7 8
  rpn:     1 2 + 3 4 + - 5 6 + - 7 8 + -
  infix:   (((1 + 2) - (3 + 4)) - (5 + 6)) - (7 + 8)

  custom:  +/- 1 2 ... 16
  rpn:     1 2 + 3 4 + / 5 6 + 7 8 + / - 9 10 + 11 12 + / - 13 14 + 15 16 + / -

A full tree needs the value count to be a multiple of 2^(n-1) (and of 2^n
for the inner operators to line up). Other counts are not rejected; the
placement rule below is applied as-is and the RPN evaluator decides.
"""

from typing import Iterable

from mathparser.errors import InvalidExpression
from mathparser.tokens import LeftParen, Number, Operator, RightParen, Token


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def _operators_due(operators: list[Operator], values_seen: int) -> list[Operator]:
    """
    Operators to emit right after the `values_seen`-th value.

    Operator i (0 = leaf level) is due every 2^(i+1) values. The outermost
    operator is due every 2^(n-1) values but skips the first of those,
    where its left operand is still incomplete.
    """
    depth = _trailing_zeros(values_seen)
    outermost = len(operators) - 1
    due = []
    for level, operator in enumerate(operators):
        if level < outermost:
            if depth >= level + 1:
                due.append(operator)
        elif depth >= outermost and values_seen != 1 << outermost:
            due.append(operator)
    return due


def expand_custom(tokens: Iterable[Token]) -> list[Token]:
    """
    Expand a custom-notation token sequence into postfix.

    Raises:
        InvalidExpression: If operators and values are interleaved, either
            is missing, or the input contains parentheses.
    """
    operators: list[Operator] = []
    output: list[Token] = []
    values_seen = 0

    for token in tokens:
        if isinstance(token, Operator):
            if values_seen:
                raise InvalidExpression(f"Operator '{token}' after a value")
            operators.append(token)
        elif isinstance(token, Number):
            if not operators:
                raise InvalidExpression(f"Value {token} before any operator")
            values_seen += 1
            output.append(token)
            output.extend(_operators_due(operators, values_seen))
        elif isinstance(token, (LeftParen, RightParen)):
            raise InvalidExpression("Parentheses are not allowed in custom notation")
        else:
            raise TypeError(f"Unknown token: {token!r}")

    if not operators:
        raise InvalidExpression("Custom notation needs at least one operator")
    if not values_seen:
        raise InvalidExpression("Custom notation needs at least one value")
    return output

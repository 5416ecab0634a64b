"""
RPN Evaluator - Evaluate a postfix token sequence.

Numbers are pushed onto an operand stack. Each operator pops b (top) and
a (below it) and pushes a op b. Exactly one value must remain at the end.

Add/Sub/Mul/Div run in decimal arithmetic under DECIMAL_CONTEXT. Pow is
computed in binary floating point and converted back, so it loses precision
on large or fractional results.
"""

import math
from decimal import (
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Iterable

from mathparser.errors import InvalidExpression
from mathparser.tokens import LeftParen, Number, Operator, OperatorKind, RightParen, Token

DECIMAL_CONTEXT = Context(prec=28, traps=[DivisionByZero, InvalidOperation, Overflow])


def _power(base: Decimal, exponent: Decimal) -> Decimal:
    try:
        result = math.pow(float(base), float(exponent))
    except (OverflowError, ValueError) as e:
        raise InvalidExpression(f"Cannot compute {base} ^ {exponent}: {e}") from None
    if not math.isfinite(result):
        raise InvalidExpression(f"{base} ^ {exponent} is not finite")
    # repr gives the shortest round-tripping literal (1024.0, not 1024.00000000000002...)
    return Decimal(repr(result))


def apply_operator(kind: OperatorKind, a: Decimal, b: Decimal) -> Decimal:
    """Compute `a kind b` under the active decimal context."""
    try:
        if kind is OperatorKind.ADD:
            return a + b
        if kind is OperatorKind.SUB:
            return a - b
        if kind is OperatorKind.MUL:
            return a * b
        if kind is OperatorKind.DIV:
            return a / b
    except DecimalException as e:
        raise InvalidExpression(f"Cannot compute {a} {kind.value} {b}: {type(e).__name__}") from None
    if kind is OperatorKind.POW:
        return _power(a, b)
    raise TypeError(f"Unknown operator: {kind!r}")


def evaluate_rpn(tokens: Iterable[Token]) -> Decimal:
    """
    Evaluate a postfix expression.

    Args:
        tokens: Postfix token sequence, e.g. tokens of "1 2 + 3 *"

    Returns:
        The single resulting value.

    Raises:
        InvalidExpression: On operand underflow, a parenthesis in the stream,
            leftover operands, or an arithmetic error (division by zero).
    """
    operands: list[Decimal] = []

    with localcontext(DECIMAL_CONTEXT):
        for token in tokens:
            if isinstance(token, Number):
                operands.append(token.value)
            elif isinstance(token, Operator):
                if len(operands) < 2:
                    raise InvalidExpression(f"Not enough operands for '{token}'")
                b = operands.pop()
                a = operands.pop()
                operands.append(apply_operator(token.kind, a, b))
            elif isinstance(token, (LeftParen, RightParen)):
                raise InvalidExpression(f"Unexpected '{token}' in postfix expression")
            else:
                raise TypeError(f"Unknown token: {token!r}")

    if len(operands) != 1:
        raise InvalidExpression(f"Expression left {len(operands)} values, expected 1")
    return operands[0]

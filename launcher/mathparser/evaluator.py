"""
Expression evaluation entry point.

evaluate() picks a notation (or uses the one forced by the caller),
tokenizes, converts to postfix and evaluates. Any InvalidExpression raised
along the way becomes None: the search box shows nothing rather than an
error for half-typed input.
"""

from decimal import Decimal
from typing import Optional

from loguru import logger

from mathparser.custom import expand_custom
from mathparser.errors import InvalidExpression
from mathparser.infix import infix_to_rpn
from mathparser.notation import Notation, detect_notation
from mathparser.rpn import evaluate_rpn
from mathparser.tokenizer import tokenize
from mathparser.tokens import Token


def to_postfix(text: str, notation: Notation) -> list[Token]:
    """Tokenize `text` and reorder it into postfix according to `notation`."""
    tokens = tokenize(text)
    if notation is Notation.REVERSE_POLISH:
        return tokens
    if notation is Notation.INFIX:
        return infix_to_rpn(tokens)
    if notation is Notation.CUSTOM:
        return expand_custom(tokens)
    raise ValueError(f"Unknown notation: {notation!r}")


def evaluate(text: str, notation: Optional[Notation] = None) -> Optional[Decimal]:
    """
    Evaluate an arithmetic expression.

    Args:
        text: Expression in RPN ("1 2 +"), infix ("1 + 2") or custom
            ("+ 1 2 3 4") notation
        notation: Force a notation instead of detecting it

    Returns:
        The result, or None if the text is not a valid expression.

    Example:
        evaluate("3 4 *")                     # Decimal("12")
        evaluate("(1 + 2")                    # None
        evaluate("1 2", Notation.INFIX)       # None
    """
    if notation is None:
        notation = detect_notation(text)

    try:
        return evaluate_rpn(to_postfix(text, notation))
    except InvalidExpression as e:
        logger.debug(f"Could not evaluate {text!r} as {notation.name}: {e}")
        return None

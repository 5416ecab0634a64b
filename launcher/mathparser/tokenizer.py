"""
Tokenizer - Raw text to token sequence.

Digits and '.' accumulate into a numeric buffer that is flushed into a
Number token on whitespace, on an operator/paren, or at end of input.
A '-' directly followed by a digit starts a negative literal when no
number is being accumulated; otherwise it is subtraction.
"""

from decimal import Decimal, InvalidOperation

from mathparser.errors import InvalidExpression
from mathparser.tokens import (
    DIGITS,
    OPERATOR_SYMBOLS,
    LeftParen,
    Number,
    Operator,
    RightParen,
    Token,
)


def _parse_literal(literal: str) -> Number:
    try:
        value = Decimal(literal)
    except InvalidOperation:
        raise InvalidExpression(f"Invalid number: {literal!r}") from None
    return Number(value)


def tokenize(text: str) -> list[Token]:
    """
    Split an expression into tokens.

    Args:
        text: Raw expression text, e.g. "1 2 +" or "(3 - -2) * 4"

    Returns:
        Ordered list of tokens.

    Raises:
        InvalidExpression: On an unrecognized character or a malformed number.
    """
    tokens: list[Token] = []
    buffer = ""

    def flush():
        nonlocal buffer
        if buffer:
            tokens.append(_parse_literal(buffer))
            buffer = ""

    for i, character in enumerate(text):
        next_character = text[i + 1] if i + 1 < len(text) else ""

        if character == "-" and not buffer and next_character in DIGITS:
            buffer = character
            continue

        if character in DIGITS or character == ".":
            buffer += character
            continue

        if character.isspace():
            flush()
            continue

        flush()
        if character in OPERATOR_SYMBOLS:
            tokens.append(Operator(OPERATOR_SYMBOLS[character]))
        elif character == "(":
            tokens.append(LeftParen())
        elif character == ")":
            tokens.append(RightParen())
        else:
            raise InvalidExpression(f"Unexpected character: {character!r}")

    flush()
    return tokens

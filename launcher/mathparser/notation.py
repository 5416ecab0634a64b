"""
Notation Detector - Guess which grammar an expression is written in.

  Custom          first non-space character is an operator ("+- 1 2 3 4")
  ReversePolish   two numbers side by side with no operator between ("1 2 +")
  Infix           everything else ("1 + 2")

This is a heuristic rather than a grammar check. Pathological input such as
"-5 + 3" is classified as Custom and then rejected by the Custom grammar.
"""

from enum import Enum
from typing import Optional

from mathparser.tokens import DIGITS, OPERATOR_SYMBOLS


class Notation(Enum):
    REVERSE_POLISH = "rpn"
    INFIX = "infix"
    CUSTOM = "custom"


AUTO = "auto"


def detect_notation(text: str) -> Notation:
    """Classify raw text as ReversePolish, Infix or Custom."""
    stripped = text.lstrip()
    if stripped and stripped[0] in OPERATOR_SYMBOLS:
        return Notation.CUSTOM

    # Count numbers separated only by whitespace. Anything else between two
    # numbers (an operator, a paren) breaks the run, and a leading "." starts
    # a number, so "(1) (2)" and ".5 .5" are judged on what sits between them.
    consecutive = 0
    inside_number = False
    for character in text:
        if character in DIGITS or character == ".":
            if not inside_number:
                consecutive += 1
                inside_number = True
        elif character.isspace():
            inside_number = False
        else:
            inside_number = False
            consecutive = 0

        if consecutive > 1:
            return Notation.REVERSE_POLISH

    return Notation.INFIX


def parse_notation(name: str) -> Optional[Notation]:
    """
    Map a settings value to a notation override.

    Args:
        name: "auto", "rpn", "infix" or "custom" (case-insensitive)

    Returns:
        The forced Notation, or None for "auto".

    Raises:
        ValueError: If the name is not a known notation.
    """
    name = name.strip().lower()
    if name == AUTO:
        return None
    return Notation(name)

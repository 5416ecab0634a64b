"""
Token model shared by every stage of the expression pipeline.

A token is one of four immutable variants:
  Number(value)   decimal literal
  Operator(kind)  one of + - * / ^
  LeftParen()     (
  RightParen()    )

Consumers dispatch on all four explicitly and raise TypeError on anything else.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from string import digits
from typing import Iterable, Union


class OperatorKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


PRECEDENCE = {
    OperatorKind.POW: 4,
    OperatorKind.MUL: 3,
    OperatorKind.DIV: 3,
    OperatorKind.ADD: 2,
    OperatorKind.SUB: 2,
}

RIGHT_ASSOCIATIVE = frozenset({OperatorKind.POW})

OPERATOR_SYMBOLS = {kind.value: kind for kind in OperatorKind}

DIGITS = frozenset(digits)


@dataclass(frozen=True)
class Number:
    value: Decimal

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Operator:
    kind: OperatorKind

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.kind]

    @property
    def right_associative(self) -> bool:
        return self.kind in RIGHT_ASSOCIATIVE

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class LeftParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class RightParen:
    def __str__(self) -> str:
        return ")"


Token = Union[Number, Operator, LeftParen, RightParen]


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render a token sequence space-separated, e.g. "1 2 + 3 *"."""
    return " ".join(str(token) for token in tokens)

"""
Infix to RPN conversion using the shunting-yard algorithm.

Operators wait on a stack and are moved to the output once an operator of
lower precedence (or equal precedence, for left-associative operators)
arrives. '^' is the only right-associative operator, so "2 ^ 3 ^ 2" groups
as 2 ^ (3 ^ 2).

An unmatched '(' is not reported here. It is left in the output, where
the RPN evaluator rejects it.
"""

from typing import Iterable

from mathparser.errors import InvalidExpression
from mathparser.tokens import LeftParen, Number, Operator, RightParen, Token


def _should_pop(top: Token, incoming: Operator) -> bool:
    if not isinstance(top, Operator):
        return False
    if top.precedence > incoming.precedence:
        return True
    return top.precedence == incoming.precedence and not incoming.right_associative


def infix_to_rpn(tokens: Iterable[Token]) -> list[Token]:
    """
    Reorder an infix token sequence into postfix.

    Raises:
        InvalidExpression: On a ')' without a matching '('.
    """
    output: list[Token] = []
    pending: list[Token] = []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Operator):
            while pending and _should_pop(pending[-1], token):
                output.append(pending.pop())
            pending.append(token)
        elif isinstance(token, LeftParen):
            pending.append(token)
        elif isinstance(token, RightParen):
            while True:
                if not pending:
                    raise InvalidExpression("Mismatched parentheses")
                top = pending.pop()
                if isinstance(top, LeftParen):
                    break
                output.append(top)
        else:
            raise TypeError(f"Unknown token: {token!r}")

    while pending:
        output.append(pending.pop())
    return output

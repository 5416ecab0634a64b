"""
Math parser package - Inline arithmetic for the launcher search box.

Evaluates "+ - * / ^" expressions in three notations, detected automatically:
  RPN      1 2 +
  Infix    (1 + 2) * 3
  Custom   +- 1 2 3 4      (operators first, balanced reduction over values)
"""

from .errors import InvalidExpression
from .evaluator import evaluate
from .notation import Notation, detect_notation, parse_notation

__version__ = "0.1.0"

__all__ = [
    "evaluate",
    "detect_notation",
    "parse_notation",
    "Notation",
    "InvalidExpression",
]

"""
Search handlers - Pluggable query processors.

Each handler checks if it can handle a query and returns typed results.
"""

from .calculator import CalculatorHandler

__all__ = [
    "CalculatorHandler",
]

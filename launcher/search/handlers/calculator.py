"""
Calculator Handler - Inline math evaluation in search.

Triggers whenever the query consists only of numbers, operators,
parentheses and spaces. The notation (RPN, infix or custom) is detected
from the text unless settings.toml forces one:

    [calculator]
    notation = "auto"          # auto | rpn | infix | custom
    max_fraction_digits = 10
    group_digits = true
    clipboard_command = "wl-copy"

Prefix the query with "?" to search for it instead of evaluating it.
"""

import unicodedata
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Optional

from loguru import logger
from mathparser import Notation, evaluate, parse_notation
from search.router import ResultItem
from utils.helpers import copy_to_clipboard, load_settings

MATH_CHARACTERS = frozenset("0123456789.+-*/^() ")
FORCE_SEARCH_PREFIX = "?"
DEFAULT_FRACTION_DIGITS = 10


def format_result(value: Decimal, max_fraction_digits: int = 10, group_digits: bool = True) -> str:
    """
    Format a result for display.

    Rounds half-even to at most `max_fraction_digits`, drops trailing zeros
    and optionally groups thousands: Decimal("1234.50") -> "1,234.5".
    """
    with localcontext() as ctx:
        # Enough precision that quantize never runs out of digits.
        ctx.prec = max(ctx.prec, value.adjusted() + max_fraction_digits + 2)
        rounded = value.quantize(Decimal(1).scaleb(-max_fraction_digits), rounding=ROUND_HALF_EVEN)
        rounded = rounded.normalize()

    if rounded.is_zero():
        rounded = abs(rounded)

    return f"{rounded:,f}" if group_digits else f"{rounded:f}"


def _normalize(query: str) -> str:
    """NFKC-normalize so full-width digits and operators count as math."""
    return unicodedata.normalize("NFKC", query)


class CalculatorHandler:
    """Evaluate arithmetic expressions typed into the search box."""

    name = "calculator"
    priority = 100

    def __init__(self, settings: Optional[dict] = None):
        if settings is None:
            settings = load_settings()
        calculator = settings.get("calculator", {})
        if not isinstance(calculator, dict):
            logger.warning(f"Ignoring calculator settings: expected a table, got {calculator!r}")
            calculator = {}

        self.notation = self._notation_from_settings(calculator.get("notation", "auto"))
        self.max_fraction_digits = self._fraction_digits_from_settings(
            calculator.get("max_fraction_digits", DEFAULT_FRACTION_DIGITS)
        )
        self.group_digits = bool(calculator.get("group_digits", True))
        self.clipboard_command = calculator.get("clipboard_command", "wl-copy")

    def matches(self, query: str) -> bool:
        q = _normalize(query).strip()
        if not q or q.startswith(FORCE_SEARCH_PREFIX):
            return False
        return all(c in MATH_CHARACTERS or c.isspace() for c in q)

    def get_results(self, query: str) -> list[ResultItem]:
        expr = _normalize(query).strip()

        value = evaluate(expr, self.notation)
        if value is None:
            # Not (yet) a complete expression - clear the calculator row
            return []

        display = format_result(value, self.max_fraction_digits, self.group_digits)
        plain = format_result(value, self.max_fraction_digits, group_digits=False)

        return [ResultItem(
            title=display,
            description=f"= {expr}",
            icon="accessories-calculator",
            result_type="calculator",
            on_activate=lambda r=plain: copy_to_clipboard(r, self.clipboard_command),
        )]

    @staticmethod
    def _notation_from_settings(value) -> Optional[Notation]:
        """Resolve the configured notation, falling back to auto-detection."""
        try:
            return parse_notation(str(value))
        except ValueError:
            logger.warning(f"Unknown calculator notation '{value}', using auto-detection")
            return None

    @staticmethod
    def _fraction_digits_from_settings(value) -> int:
        """Resolve max_fraction_digits, falling back to the default on bad values."""
        try:
            digits = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid max_fraction_digits '{value}', using {DEFAULT_FRACTION_DIGITS}")
            return DEFAULT_FRACTION_DIGITS
        if digits < 0:
            logger.warning(f"Negative max_fraction_digits {digits}, using {DEFAULT_FRACTION_DIGITS}")
            return DEFAULT_FRACTION_DIGITS
        return digits

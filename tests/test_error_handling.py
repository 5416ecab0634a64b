"""
Tests for error handling across the evaluator and handlers.

Verifies graceful degradation when input is malformed:
- Every InvalidExpression source collapses to None
- Rejections are logged at debug level, not raised
- Programming errors are not swallowed
"""

from decimal import Decimal

import pytest
from loguru import logger

from mathparser import InvalidExpression, evaluate
from mathparser.rpn import evaluate_rpn
from mathparser.tokens import Number


@pytest.fixture
def log_messages():
    """Capture loguru output for the duration of a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(handler_id)


class TestInvalidExpressionSources:
    """Each kind of malformed input yields None at the entry point."""

    def test_unparsable_literal(self):
        assert evaluate("1.2.3 + 1") is None

    def test_unrecognized_character(self):
        assert evaluate("2 # 3") is None

    def test_stack_underflow(self):
        assert evaluate("1 2 + *") is None

    def test_leftover_values(self):
        assert evaluate("1 2 3 +") is None

    def test_mismatched_parentheses(self):
        assert evaluate("(1 + 2)) * 3") is None

    def test_custom_ordering_violation(self):
        assert evaluate("+ 1 2 - 3 4") is None

    def test_parentheses_in_postfix(self):
        assert evaluate("1 2 ( +") is None

    def test_parentheses_in_custom(self):
        assert evaluate("+ (1 2)") is None


class TestErrorReporting:
    """Test how failures surface."""

    def test_rejection_is_logged_at_debug(self, log_messages):
        evaluate("1 +")
        assert len(log_messages) == 1
        assert log_messages[0].startswith("DEBUG")
        assert "1 +" in log_messages[0]

    def test_success_logs_nothing(self, log_messages):
        evaluate("1 + 1")
        assert log_messages == []

    def test_invalid_expression_is_value_error(self):
        assert issubclass(InvalidExpression, ValueError)

    def test_bad_token_type_propagates(self):
        with pytest.raises(TypeError):
            evaluate_rpn([Number(Decimal("1")), object()])

"""Error raised by every stage of the expression pipeline."""


class InvalidExpression(ValueError):
    """The input cannot be turned into a single numeric result."""

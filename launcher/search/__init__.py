"""
Search package - Query routing and handler framework.

Queries typed into the search box are dispatched to priority-ordered
handlers; the calculator handler evaluates arithmetic inline.
"""

from .router import QueryRouter, SearchHandler, ResultItem

__all__ = ["QueryRouter", "SearchHandler", "ResultItem"]

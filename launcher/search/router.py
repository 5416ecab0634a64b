"""
Query Router - Dispatches search queries to priority-ordered handlers.

Each handler declares a priority (lower = higher priority) and a matches()
method. The router finds the first matching handler and returns its results.
An empty result list tells the search box to clear that handler's rows.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Callable


@dataclass
class ResultItem:
    """A single search result from any handler."""
    title: str
    description: str = ""
    icon: str = "image-missing"
    result_type: str = "calculator"
    on_activate: Optional[Callable] = None


class SearchHandler(ABC):
    """
    Base class for all search handlers.

    The calculator is the built-in handler; the rest of the launcher may
    register others (file search, commands) behind it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier."""
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lower number = checked first."""
        ...

    @abstractmethod
    def matches(self, query: str) -> bool:
        """Return True if this handler should process the query (e.g. math mode)."""
        ...

    @abstractmethod
    def get_results(self, query: str) -> list[ResultItem]:
        """Return results for the query (empty list to clear)."""
        ...


class QueryRouter:
    """Routes queries to the appropriate handler based on priority."""

    def __init__(self):
        self._handlers: list[SearchHandler] = []

    def register(self, handler: SearchHandler) -> None:
        """Register a handler and re-sort by priority."""
        self._handlers.append(handler)
        self._handlers.sort(key=lambda h: h.priority)

    def route(self, query: str) -> tuple[str, list[ResultItem]]:
        """
        Find the first matching handler and return its results.

        Called on every keystroke with the current search text.

        Args:
            query: The search query string

        Returns:
            Tuple of (handler_name, results_list).
            Returns ("none", []) for a blank query or if no handler matches.
        """
        if not query or not query.strip():
            return "none", []

        for handler in self._handlers:
            if handler.matches(query):
                return handler.name, handler.get_results(query)

        return "none", []

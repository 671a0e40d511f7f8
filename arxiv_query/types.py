"""Data types returned by the arXiv API and the errors it raises."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass
class Author:
    """A paper author."""

    name: str
    affiliation: str = ""


@dataclass
class Link:
    """A link associated with a paper."""

    href: str
    rel: str
    type: str = ""
    title: str = ""


@dataclass
class Paper:
    """An arXiv paper."""

    id: str
    title: str
    abstract: str
    authors: list[Author] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    published_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    doi: str = ""
    journal_ref: str = ""
    comment: str = ""
    links: list[Link] = field(default_factory=list)


@dataclass
class Query:
    """Search parameters for the arXiv API.

    ``max_results`` is the page size per request and ``limit`` the total
    number of results to fetch across requests (0 means unlimited).
    """

    search_query: str = ""
    id_list: list[str] = field(default_factory=list)
    start: int = 0
    max_results: int = 0
    limit: int = 0
    sort_by: str = ""
    sort_order: str = ""
    submitted_date_from: Optional[datetime] = None
    submitted_date_to: Optional[datetime] = None


@dataclass
class SearchResults:
    """One page of results from the arXiv API."""

    papers: list[Paper] = field(default_factory=list)
    total_count: int = 0
    start_index: int = 0
    items_per_page: int = 0


class ErrorType(Enum):
    """Kind of failure reported by :class:`APIError`."""

    RATE_LIMIT = 0
    TIMEOUT = 1
    PARSING = 2
    NETWORK = 3
    NOT_FOUND = 4
    INVALID_QUERY = 5
    NO_ENTRY = 6
    UNKNOWN = 7

    def __str__(self) -> str:
        return _ERROR_TYPE_NAMES.get(self, "unknown")


_ERROR_TYPE_NAMES = {
    ErrorType.RATE_LIMIT: "rate_limit",
    ErrorType.TIMEOUT: "timeout",
    ErrorType.PARSING: "parsing",
    ErrorType.NETWORK: "network",
    ErrorType.NOT_FOUND: "not_found",
    ErrorType.INVALID_QUERY: "invalid_query",
}

_RETRYABLE = frozenset(
    {ErrorType.RATE_LIMIT, ErrorType.TIMEOUT, ErrorType.NETWORK, ErrorType.NO_ENTRY}
)


class APIError(Exception):
    """A detailed arXiv API error.

    ``retry`` tells whether the failed operation may succeed if repeated.
    """

    def __init__(
        self,
        error_type: ErrorType,
        message: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.type = error_type
        self.message = message
        self.code = 0
        self.retry = error_type in _RETRYABLE
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.type}: {self.message} (caused by: {self.cause})"
        return f"{self.type}: {self.message}"


class LegacyError(Exception):
    """Plain error carrying a numeric code and a message."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message
"""Fluent construction of arXiv search queries."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from arxiv_query.enums import SortCriterion, SortOrder
from arxiv_query.iterator import FetchAction, PaperIterator
from arxiv_query.types import APIError, ErrorType, Query, SearchResults

DEFAULT_MAX_RESULTS = 500
DEFAULT_LIMIT = 0

_MISSING_QUERY = "either search query or ID list must be provided"


def _or_group(prefix: str, values: list) -> str:
    parts = [f"{prefix}:{value}" for value in values]
    if len(parts) == 1:
        return parts[0]
    return f"({' OR '.join(parts)})"


class QueryBuilder:
    """Builds a :class:`Query` step by step; every setter returns the builder.

    Invalid arguments are remembered and reported by :meth:`build_query`,
    :meth:`execute` and :meth:`validate`.
    """

    def __init__(self, client: Any) -> None:
        self.client = client
        self._search_terms: list[str] = []
        self._categories: list[str] = []
        self._authors: list[str] = []
        self._titles: list[str] = []
        self._abstracts: list[str] = []
        self._date_from: Optional[datetime] = None
        self._date_to: Optional[datetime] = None
        self._sort_by: Any = SortCriterion.RELEVANCE
        self._sort_order: Any = SortOrder.DESCENDING
        self._max_results = DEFAULT_MAX_RESULTS
        self._limit = DEFAULT_LIMIT
        self._start = 0
        self._id_list: list[str] = []
        self._errors: list[Exception] = []

    def search_query(self, query: str) -> "QueryBuilder":
        """Add a general search term; empty terms are ignored."""
        if query:
            self._search_terms.append(query)
        return self

    def category(self, cat) -> "QueryBuilder":
        if cat:
            self._categories.append(str(cat))
        return self

    def categories(self, *args) -> "QueryBuilder":
        for cat in args:
            self.category(cat)
        return self

    def author(self, author: str) -> "QueryBuilder":
        if author:
            self._authors.append(author)
        return self

    def authors(self, *args) -> "QueryBuilder":
        for author in args:
            self.author(author)
        return self

    def title(self, title: str) -> "QueryBuilder":
        if title:
            self._titles.append(title)
        return self

    def abstract(self, abstract: str) -> "QueryBuilder":
        if abstract:
            self._abstracts.append(abstract)
        return self

    def date_range(self, date_from: datetime, date_to: datetime) -> "QueryBuilder":
        self._date_from = date_from
        self._date_to = date_to
        return self

    def date_from(self, date_from: datetime) -> "QueryBuilder":
        self._date_from = date_from
        return self

    def date_to(self, date_to: datetime) -> "QueryBuilder":
        self._date_to = date_to
        return self

    def sort_by(self, criterion, order) -> "QueryBuilder":
        self._sort_by = criterion
        self._sort_order = order
        return self

    def max_results(self, value: int) -> "QueryBuilder":
        """Set the page size of each API request."""
        if value > 0:
            self._max_results = value
        else:
            self._errors.append(ValueError(f"max results must be positive, got {value}"))
        return self

    def limit(self, value: int) -> "QueryBuilder":
        """Set the total number of results to fetch (0 means unlimited)."""
        if value >= 0:
            self._limit = value
        else:
            self._errors.append(ValueError(f"limit must be non-negative, got {value}"))
        return self

    def start(self, value: int) -> "QueryBuilder":
        if value >= 0:
            self._start = value
        else:
            self._errors.append(
                ValueError(f"start index must be non-negative, got {value}")
            )
        return self

    def id_list(self, *args) -> "QueryBuilder":
        """Add arXiv ids; an id list takes the place of the search query."""
        self._id_list.extend(args)
        return self

    def and_(self) -> "QueryBuilder":
        self._search_terms.append("AND")
        return self

    def or_(self) -> "QueryBuilder":
        self._search_terms.append("OR")
        return self

    def and_not(self) -> "QueryBuilder":
        self._search_terms.append("ANDNOT")
        return self

    def build_search_query(self) -> str:
        """The search expression assembled from all filters."""
        parts = []
        if self._search_terms:
            parts.append(f"({' '.join(self._search_terms)})")
        for prefix, values in (
            ("cat", self._categories),
            ("au", self._authors),
            ("ti", self._titles),
            ("abs", self._abstracts),
        ):
            if values:
                parts.append(_or_group(prefix, values))
        return " AND ".join(parts)

    def build_query(self) -> Query:
        """Build the :class:`Query`, raising the first recorded error."""
        if self._errors:
            raise self._errors[0]

        query = Query(
            start=self._start,
            max_results=self._max_results,
            limit=self._limit,
            sort_by=str(self._sort_by),
            sort_order=str(self._sort_order),
            submitted_date_from=self._date_from,
            submitted_date_to=self._date_to,
        )
        if self._id_list:
            query.id_list = list(self._id_list)
        else:
            search_query = self.build_search_query()
            if not search_query:
                raise APIError(ErrorType.INVALID_QUERY, _MISSING_QUERY)
            query.search_query = search_query
        return query

    def execute(self, timeout: Optional[float] = None) -> SearchResults:
        """Run the query once and return the first page of results."""
        return self.client.search(self.build_query(), timeout)

    def iterator(self, timeout: Optional[float] = None) -> PaperIterator:
        """An iterator over all pages; a build error is held in its state."""
        try:
            query = self.build_query()
        except Exception as exc:  # surfaced through the iterator's error state
            failed = PaperIterator(self.client, None, timeout)
            failed.state_manager.transition(FetchAction(None, exc))
            return failed
        return PaperIterator(self.client, query, timeout)

    def validate(self) -> None:
        """Raise if the configuration cannot produce a valid query."""
        if self._errors:
            raise self._errors[0]
        if not self._id_list and not self.build_search_query():
            raise APIError(ErrorType.INVALID_QUERY, _MISSING_QUERY)
        if self._max_results <= 0:
            raise APIError(ErrorType.INVALID_QUERY, "max results must be positive")
        if self._start < 0:
            raise APIError(ErrorType.INVALID_QUERY, "start index must be non-negative")
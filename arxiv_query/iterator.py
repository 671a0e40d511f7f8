"""Paginated iteration over arXiv search results."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from arxiv_query.types import APIError, ErrorType, Paper, Query, SearchResults

T = TypeVar("T")


class IteratorState(Enum):
    """Phase of a :class:`PaperIterator`."""

    INITIAL = 0
    FETCHING = 1
    READY = 2
    EXHAUSTED = 3
    ERROR = 4

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class State:
    """Immutable snapshot of iterator progress."""

    current: IteratorState = IteratorState.INITIAL
    current_page: int = 0
    current_index: int = 0
    total_fetched: int = 0
    error: Optional[BaseException] = None
    results: Optional[SearchResults] = None


@dataclass(frozen=True)
class FetchAction:
    """Transition after a page has been fetched (or failed to be)."""

    results: Optional[SearchResults] = None
    error: Optional[BaseException] = None

    def apply(self, state: State) -> State:
        if self.error is not None:
            return replace(state, current=IteratorState.ERROR, error=self.error)
        if self.results is None or not self.results.papers:
            return replace(
                state, current=IteratorState.EXHAUSTED, error=None, results=self.results
            )
        return replace(
            state,
            current=IteratorState.READY,
            current_page=state.current_page + 1,
            current_index=0,
            error=None,
            results=self.results,
        )


@dataclass(frozen=True)
class ConsumeAction:
    """Transition after one paper has been handed out."""

    def apply(self, state: State) -> State:
        return replace(
            state,
            current_index=state.current_index + 1,
            total_fetched=state.total_fetched + 1,
        )


class StateManager:
    """Holds the current state and applies transitions to it."""

    def __init__(self) -> None:
        self.state = State()

    def transition(self, action) -> State:
        self.state = action.apply(self.state)
        return self.state

    def reset(self) -> None:
        self.state = State()


class Paginator:
    """Computes page boundaries for a query."""

    def __init__(self, query: Optional[Query]) -> None:
        self.query = query

    def calculate_start_index(
        self, current_page: int, results: Optional[SearchResults]
    ) -> int:
        if results is not None:
            return results.start_index + len(results.papers)
        return current_page * self.query.max_results

    def calculate_max_results(self, total_fetched: int) -> int:
        max_results = self.query.max_results
        if self.query.limit > 0:
            max_results = min(max_results, self.query.limit - total_fetched)
        return max_results

    def has_more_data(self, state: State) -> bool:
        results = state.results
        if results is None:
            return True
        if self.query.limit > 0 and state.total_fetched >= self.query.limit:
            return False
        expected_total = results.start_index + len(results.papers)
        if results.total_count > 0 and expected_total >= results.total_count:
            return False
        if len(results.papers) < self.query.max_results:
            return False
        return True


class Fetcher:
    """Issues search requests through a client."""

    def __init__(self, client: Any, timeout: Optional[float] = None) -> None:
        self.client = client
        self.timeout = timeout

    def fetch(self, query: Optional[Query]) -> SearchResults:
        if query is None:
            raise APIError(ErrorType.INVALID_QUERY, "query is nil")
        return self.client.search(query, self.timeout)

    def with_timeout(self, timeout: Optional[float]) -> "Fetcher":
        return Fetcher(self.client, timeout)


class PaperIterator:
    """Iterates over papers, fetching further pages as needed.

    Iterating the object directly raises any error met while fetching;
    :meth:`all` stops silently and leaves the error in :attr:`error`.
    """

    def __init__(
        self, client: Any, query: Optional[Query], timeout: Optional[float] = None
    ) -> None:
        self.query = query
        self.state_manager = StateManager()
        self._paginator = Paginator(query)
        self._fetcher = Fetcher(client, timeout)

    @property
    def state(self) -> State:
        return self.state_manager.state

    @property
    def error(self) -> Optional[BaseException]:
        return self.state_manager.state.error

    @property
    def total_fetched(self) -> int:
        return self.state_manager.state.total_fetched

    @property
    def total_count(self) -> int:
        """Total results reported by the server, or -1 before any fetch."""
        results = self.state_manager.state.results
        return -1 if results is None else results.total_count

    @property
    def current_page(self) -> int:
        return self.state_manager.state.current_page

    def _needs_more_data(self, state: State) -> bool:
        if state.results is None:
            return True
        if state.current_index >= len(state.results.papers):
            return self._paginator.has_more_data(state)
        return False

    def _next_paper(self) -> Optional[Paper]:
        manager = self.state_manager
        state = manager.state

        if state.current is IteratorState.ERROR:
            raise state.error
        if state.current is IteratorState.EXHAUSTED:
            return None
        if state.current not in (IteratorState.INITIAL, IteratorState.READY):
            raise APIError(ErrorType.UNKNOWN, "unknown iterator state")

        if self._needs_more_data(state):
            if not self._paginator.has_more_data(state):
                manager.transition(FetchAction(state.results))
                return None

            next_query = replace(
                self.query,
                start=self._paginator.calculate_start_index(
                    state.current_page, state.results
                ),
                max_results=self._paginator.calculate_max_results(
                    state.total_fetched
                ),
            )
            results: Optional[SearchResults] = None
            error: Optional[BaseException] = None
            try:
                results = self._fetcher.fetch(next_query)
            except Exception as exc:  # stored in the state and re-raised
                error = exc
            new_state = manager.transition(FetchAction(results, error))
            if new_state.current is IteratorState.ERROR:
                raise new_state.error
            if new_state.current is IteratorState.EXHAUSTED:
                return None
            state = new_state

        if state.results is not None and state.current_index < len(state.results.papers):
            if self.query.limit > 0 and state.total_fetched >= self.query.limit:
                manager.transition(FetchAction(state.results))
                return None
            paper = state.results.papers[state.current_index]
            manager.transition(ConsumeAction())
            return paper

        manager.transition(FetchAction(state.results))
        return None

    def __iter__(self) -> Iterator[Paper]:
        return self.all_with_error()

    def all(self) -> Iterator[Paper]:
        """Yield papers until exhaustion or error; the error is kept in :attr:`error`."""
        while True:
            try:
                paper = self._next_paper()
            except Exception:
                return
            if paper is None:
                return
            yield paper

    def all_with_error(self) -> Iterator[Paper]:
        """Yield papers, raising the first error met while fetching."""
        while True:
            paper = self._next_paper()
            if paper is None:
                return
            yield paper

    def values(self) -> Iterator[Paper]:
        return self.all()

    def reset(self) -> None:
        """Start over from the beginning."""
        self.state_manager.reset()
        if self.query is not None:
            self.query.start = 0

    def with_timeout(self, timeout: Optional[float]) -> "PaperIterator":
        """A fresh iterator over the same query using another timeout."""
        fresh = PaperIterator(self._fetcher.client, self.query)
        fresh._paginator = self._paginator
        fresh._fetcher = self._fetcher.with_timeout(timeout)
        return fresh

    def for_each(self, fn: Callable[[Paper], Any]) -> None:
        """Call ``fn`` on every remaining paper, then raise any stored error."""
        for paper in self.all():
            fn(paper)
        if self.error is not None:
            raise self.error

    def collect(self) -> list[Paper]:
        """All remaining papers; raises any error met while fetching."""
        papers = list(self.all())
        if self.error is not None:
            raise self.error
        return papers

    def collect_n(self, n: int) -> list[Paper]:
        """Up to ``n`` papers; raises any error met while fetching."""
        papers: list[Paper] = []
        for paper in self.all():
            if len(papers) >= n:
                break
            papers.append(paper)
        if self.error is not None:
            raise self.error
        return papers


def for_each_seq(seq: Iterable[T], fn: Callable[[T], Any]) -> None:
    """Call ``fn`` on each item; exceptions from ``fn`` propagate."""
    for item in seq:
        fn(item)


def collect_seq(seq: Iterable[T]) -> list[T]:
    return list(seq)


def collect_n_seq(seq: Iterable[T], n: int) -> list[T]:
    result: list[T] = []
    for item in seq:
        if len(result) >= n:
            break
        result.append(item)
    return result


def take_seq(seq: Iterable[T], n: int) -> Iterator[T]:
    """Yield at most ``n`` items."""
    count = 0
    for item in seq:
        if count >= n:
            return
        yield item
        count += 1


def filter_seq(seq: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    return (item for item in seq if predicate(item))
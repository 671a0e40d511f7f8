"""HTTP client for the arXiv query API with retries and rate limiting."""

from __future__ import annotations

import http.client
import threading
import time
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Optional, TypeVar

from arxiv_query.iterator import PaperIterator
from arxiv_query.parser import parse_search_response
from arxiv_query.query_builder import DEFAULT_MAX_RESULTS, QueryBuilder
from arxiv_query.types import APIError, ErrorType, Paper, Query, SearchResults

BASE_URL = "https://export.arxiv.org/api/query"

DEFAULT_SORT_BY = "relevance"
DEFAULT_SORT_ORDER = "descending"
DEFAULT_RETRY_ATTEMPTS = 3
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_RATE_LIMIT = 1.0
DEFAULT_USER_AGENT = "arxiv-go/1.0"
DEFAULT_TIMEOUT = 30.0

_DATE_FORMAT = "%Y%m%d"

T = TypeVar("T")


@dataclass
class ClientOptions:
    """Client configuration; durations are in seconds.

    Zero values are replaced by the defaults when a :class:`Client` is built.
    """

    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS
    retry_delay: float = DEFAULT_RETRY_DELAY
    rate_limit: float = DEFAULT_RATE_LIMIT
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT


def default_client_options() -> ClientOptions:
    return ClientOptions()


def _wait(seconds: float, deadline: Optional[float]) -> None:
    """Sleep ``seconds``, raising ``TimeoutError`` if the deadline comes first."""
    if deadline is None:
        time.sleep(max(seconds, 0.0))
        return
    remaining = deadline - time.monotonic()
    if remaining <= 0 or seconds > remaining:
        time.sleep(max(remaining, 0.0))
        raise TimeoutError("deadline exceeded")
    time.sleep(max(seconds, 0.0))


def _status_error(status: int) -> APIError:
    if status in (429, 503):
        return APIError(
            ErrorType.RATE_LIMIT,
            "rate limit exceeded",
            RuntimeError(f"rate limit exceeded, status {status}"),
        )
    return APIError(
        ErrorType.NETWORK, "API error", RuntimeError(f"unexpected status code {status}")
    )


class Client:
    """arXiv API client.

    ``opener`` is the ``urllib`` opener used for requests. A ``timeout``
    passed to a call is an overall deadline for that call, covering retries
    and rate-limit waits; when it passes, ``TimeoutError`` is raised.
    """

    def __init__(
        self,
        options: Optional[ClientOptions] = None,
        opener: Optional[urllib.request.OpenerDirector] = None,
    ) -> None:
        opts = replace(options) if options is not None else ClientOptions()
        if opts.retry_attempts == 0:
            opts.retry_attempts = DEFAULT_RETRY_ATTEMPTS
        if opts.retry_delay == 0:
            opts.retry_delay = DEFAULT_RETRY_DELAY
        if opts.rate_limit == 0:
            opts.rate_limit = DEFAULT_RATE_LIMIT
        if not opts.user_agent:
            opts.user_agent = DEFAULT_USER_AGENT
        if opts.timeout == 0:
            opts.timeout = DEFAULT_TIMEOUT
        self.options = opts
        self.opener = opener if opener is not None else urllib.request.build_opener()
        self.base_url = BASE_URL
        self.last_request: Optional[float] = None
        self._rate_lock = threading.Lock()

    def search(
        self, query: Optional[Query], timeout: Optional[float] = None
    ) -> Optional[SearchResults]:
        """Fetch one page of results, retrying transient failures."""
        if query is None:
            raise APIError(ErrorType.INVALID_QUERY, "query cannot be None")
        deadline = None if timeout is None else time.monotonic() + timeout
        return self._retry_with_backoff(
            lambda: self._search_once(query, deadline), deadline
        )

    def get_by_id(self, arxiv_id: str, timeout: Optional[float] = None) -> Paper:
        """Fetch a single paper by its arXiv id."""
        if not arxiv_id:
            raise APIError(ErrorType.INVALID_QUERY, "id cannot be empty")
        results = self.search(Query(id_list=[arxiv_id], max_results=1), timeout)
        if results is None or not results.papers:
            raise APIError(ErrorType.NOT_FOUND, f"paper with ID {arxiv_id} not found")
        return results.papers[0]

    def new_query(self) -> QueryBuilder:
        return QueryBuilder(self)

    def iterator(self, query: Query, timeout: Optional[float] = None) -> PaperIterator:
        return PaperIterator(self, query, timeout)

    def build_query_params(self, query: Query) -> dict[str, str]:
        """Request parameters for ``query``, sorted by name."""
        search_query = query.search_query
        if query.submitted_date_from is not None or query.submitted_date_to is not None:
            date_filter = self.build_date_range_filter(
                query.submitted_date_from, query.submitted_date_to
            )
            search_query = (
                f"({search_query}) AND {date_filter}" if search_query else date_filter
            )

        params: dict[str, str] = {}
        if query.id_list:
            params["id_list"] = ",".join(query.id_list)
        elif search_query:
            params["search_query"] = search_query
        if query.start > 0:
            params["start"] = str(query.start)
        max_results = query.max_results if query.max_results > 0 else DEFAULT_MAX_RESULTS
        params["max_results"] = str(max_results)
        params["sortBy"] = str(query.sort_by) if query.sort_by else DEFAULT_SORT_BY
        params["sortOrder"] = (
            str(query.sort_order) if query.sort_order else DEFAULT_SORT_ORDER
        )
        return dict(sorted(params.items()))

    def build_date_range_filter(
        self, date_from: Optional[datetime], date_to: Optional[datetime]
    ) -> str:
        if date_from is not None and date_to is not None:
            return (
                f"submittedDate:[{date_from.strftime(_DATE_FORMAT)} "
                f"TO {date_to.strftime(_DATE_FORMAT)}]"
            )
        if date_from is not None:
            return f"submittedDate:[{date_from.strftime(_DATE_FORMAT)} TO *]"
        if date_to is not None:
            return f"submittedDate:[* TO {date_to.strftime(_DATE_FORMAT)}]"
        return ""

    def _search_once(self, query: Query, deadline: Optional[float]) -> SearchResults:
        url = f"{self.base_url}?{urllib.parse.urlencode(self.build_query_params(query))}"
        try:
            request = urllib.request.Request(
                url,
                headers={"User-Agent": self.options.user_agent or DEFAULT_USER_AGENT},
                method="GET",
            )
        except ValueError as exc:
            raise APIError(ErrorType.NETWORK, "failed to create request", exc) from exc

        self._apply_rate_limit(deadline)

        try:
            response = self.opener.open(request, timeout=self._request_timeout(deadline))
        except urllib.error.HTTPError as exc:
            status = exc.code
            exc.close()
            raise _status_error(status) from None
        except (OSError, http.client.HTTPException) as exc:
            raise APIError(ErrorType.NETWORK, "failed to make request", exc) from exc

        with response:
            if response.status != 200:
                raise _status_error(response.status)
            try:
                body = response.read()
            except (OSError, http.client.HTTPException) as exc:
                raise APIError(
                    ErrorType.NETWORK, "failed to read response body", exc
                ) from exc

        try:
            return parse_search_response(body)
        except ValueError as exc:
            raise APIError(ErrorType.PARSING, "failed to parse response", exc) from exc

    def _request_timeout(self, deadline: Optional[float]) -> float:
        timeout = self.options.timeout
        if deadline is not None:
            timeout = min(timeout, max(deadline - time.monotonic(), 0.001))
        return timeout

    def _retry_with_backoff(
        self, fn: Callable[[], T], deadline: Optional[float]
    ) -> Optional[T]:
        attempts = self.options.retry_attempts
        last_error: Optional[APIError] = None
        for attempt in range(attempts):
            try:
                return fn()
            except APIError as exc:
                if not exc.retry:
                    raise
                last_error = exc
            if attempt < attempts - 1:
                _wait(self.options.retry_delay if attempt else 0.0, deadline)
        if last_error is not None:
            raise last_error
        return None

    def _apply_rate_limit(self, deadline: Optional[float]) -> None:
        with self._rate_lock:
            self.last_request = time.monotonic()
            if self.options.rate_limit <= 0:
                return
            elapsed = time.monotonic() - self.last_request
            if elapsed >= self.options.rate_limit:
                return
            _wait(self.options.rate_limit - elapsed, deadline)
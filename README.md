# arxiv_query

A small client for the arXiv search API. It builds queries with a fluent
builder, sends them with retries and a minimum delay between requests,
parses the Atom feed into dataclasses, and walks paginated results lazily.

Only the standard library is used at run time.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Searching

```python
from datetime import datetime, timezone

from arxiv_query.client import Client
from arxiv_query.enums import SortCriterion, SortOrder
from arxiv_query.types import Query

client = Client()

query = Query(
    search_query="quantum computing",
    max_results=3,
    submitted_date_from=datetime(2023, 1, 1, tzinfo=timezone.utc),
    submitted_date_to=datetime(2023, 12, 31, tzinfo=timezone.utc),
    sort_by=SortCriterion.SUBMITTED_DATE,
    sort_order=SortOrder.DESCENDING,
)
results = client.search(query)
for paper in results.papers:
    print(paper.id, paper.title, paper.published_at.date())
```

`Client.search` fetches one page. A date range is added to the search
expression as `submittedDate:[YYYYMMDD TO YYYYMMDD]` (either end may be
open). Unset fields fall back to 500 results per page, sorting by relevance,
descending. `Client.build_query_params(query)` shows the request parameters
that would be sent.

A single paper by its identifier:

```python
paper = client.get_by_id("1234.5678")
```

Failures are raised as `arxiv_query.types.APIError`. Its `type` attribute
(an `ErrorType`: `RATE_LIMIT`, `NETWORK`, `PARSING`, `NOT_FOUND`,
`INVALID_QUERY`, ...) tells the failures apart, `message` holds the text,
and `retry` says whether the client retries that kind of failure. HTTP 429
and 503 are rate-limit errors; other non-200 statuses and connection
failures are network errors; both are retried. `get_by_id` raises a
`NOT_FOUND` error when the feed has no entry.

Every call takes an optional `timeout` in seconds. It is a deadline for the
whole call, retries and rate-limit waits included; when it passes,
`TimeoutError` is raised.

## Building queries

```python
from arxiv_query.enums import Category

builder = (
    client.new_query()
    .search_query("misinformation")
    .and_()
    .search_query("agent")
    .category(Category.CS_MA)
    .limit(10)
)
print(builder.build_search_query())
# (misinformation AND agent) AND cat:cs.MA
results = builder.execute()
```

Search terms and the `and_()`, `or_()` and `and_not()` markers are joined in
parentheses; several categories, authors (`author`, `authors`), titles or
abstracts of one kind are OR-ed together, and the groups are AND-ed.
`id_list(...)` takes the place of the search expression. Empty values are
ignored.

`max_results` sets the page size of each request; `limit` caps how many
papers an iterator yields in total (0 means no cap). Invalid values
(non-positive page size, negative limit or start) are remembered and raised
by `build_query()`, `execute()` and `validate()`; `validate()` also rejects a
builder with neither search terms nor ids.

## Iterating over many results

```python
from arxiv_query.iterator import collect_seq, filter_seq, take_seq

it = client.new_query().search_query("machine learning").limit(25).iterator()
for paper in it:
    print(paper.title)

it.reset()
recent = collect_seq(
    take_seq(filter_seq(it.all(), lambda p: p.published_at.year >= 2020), 3)
)
```

A `PaperIterator` fetches further pages as they are needed.

- Iterating it directly, or `all_with_error()`, raises the first error met
  while fetching.
- `all()` and its alias `values()` stop silently; the error is left in the
  `error` attribute.
- `collect()`, `collect_n(n)` and `for_each(fn)` go through `all()` and then
  raise any stored error.
- `total_fetched`, `total_count` (-1 before the first fetch) and
  `current_page` report progress; `reset()` starts over and
  `with_timeout(t)` gives a fresh iterator over the same query.

If the builder's query is invalid, `QueryBuilder.iterator()` returns an
iterator that holds the error instead of raising it.

`for_each_seq`, `collect_seq`, `collect_n_seq`, `take_seq` and `filter_seq`
work on any iterable.

## Client options

```python
from arxiv_query.client import Client, ClientOptions

client = Client(ClientOptions(
    retry_attempts=5,
    retry_delay=2.0,
    rate_limit=1.0,
    user_agent="my-app/1.0",
    timeout=60.0,
))
```

Durations are in seconds. Zero values are replaced by the defaults: 3
attempts, 1 s between retries (the first retry is immediate), 1 s rate
limit, and a 30 s timeout for each HTTP request. A custom
`urllib.request.OpenerDirector` can be passed as `opener`.

## Parsing feeds

`arxiv_query.parser.parse_search_response(data)` turns an Atom document
(bytes or str) into `SearchResults`, and raises `ValueError` for malformed
XML or timestamps. `extract_arxiv_id` strips the `http://arxiv.org/abs/`
prefix from an entry id.

## Demo

A tour of the features against the live arXiv service:

```
arxiv-query-demo            # both walk-throughs
arxiv-query-demo iter       # paged iteration only
arxiv-query-demo search     # single searches and lookups only
```

## What it does not do

The package only queries and parses search results. It does not download
PDFs or source files, keeps no cache or local store of papers, and has no
search command of its own beyond the fixed walk-throughs of the demo.
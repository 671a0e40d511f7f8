"""Walk-through of the client: paged iteration, searching and error handling."""

from __future__ import annotations

import argparse
import logging
from typing import Iterable, Optional

from arxiv_query.client import Client, ClientOptions
from arxiv_query.enums import Category, SortCriterion, SortOrder
from arxiv_query.iterator import collect_seq, filter_seq, for_each_seq, take_seq
from arxiv_query.types import APIError, Author, ErrorType, Paper, Query

_log = logging.getLogger(__name__)


def author_names(authors: Iterable[Author]) -> str:
    """Comma-separated author names, or ``"No authors"``."""
    names = [author.name for author in authors]
    if not names:
        return "No authors"
    return ", ".join(names)


def truncate_title(title: str, max_len: int) -> str:
    """Shorten ``title`` to ``max_len`` characters, ending in ``...``."""
    if len(title) <= max_len:
        return title
    return title[: max_len - 3] + "..."


def _published(paper: Paper) -> str:
    if paper.published_at is None:
        return "unknown"
    return paper.published_at.strftime("%Y-%m-%d")


def _category_list(paper: Paper) -> str:
    return f"[{' '.join(paper.categories)}]"


def _heading(title: str) -> None:
    print(title)
    print("-" * len(title))


def run_iter_examples(client: Client) -> None:
    """Show the ways of iterating over paged search results."""
    print("=== Iterator Pattern Examples ===")

    _heading("Example 1: Basic iteration with limit")
    papers = (
        client.new_query()
        .search_query("quantum computing")
        .category(Category.QUANT_PH)
        .limit(3)
        .iterator()
    )
    print("Papers on quantum computing:")
    for paper in papers.all():
        print(f"• {paper.title}")
        print(f"  Authors: {author_names(paper.authors)}")
        print(f"  Published: {_published(paper)}\n")
    if papers.error is not None:
        _log.error("Error: %s", papers.error)

    _heading("Example 2: Error handling with all_with_error")
    papers = (
        client.new_query()
        .search_query("machine learning")
        .category(Category.CS_LG)
        .limit(3)
        .iterator()
    )
    print("Papers on machine learning (with error handling):")
    try:
        for paper in papers.all_with_error():
            print(f"• {paper.title}")
    except Exception as exc:
        _log.error("Error occurred: %s", exc)

    print()
    _heading("Example 3: Using helper functions")
    papers = (
        client.new_query()
        .search_query("misinformation")
        .and_()
        .search_query("agent")
        .category(Category.CS_MA)
        .iterator()
    )
    print("First 5 papers using take_seq:")
    first5 = collect_seq(take_seq(papers.all(), 5))
    for number, paper in enumerate(first5, start=1):
        print(f"{number}. {paper.title}")
    print("total fetched:", papers.total_fetched, "total count:", papers.total_count)

    papers.reset()
    print("\nFiltered papers (containing 'debate' in title):")
    filtered = collect_seq(
        filter_seq(papers.all(), lambda paper: "debate" in paper.title.lower())
    )
    print("total fetched:", papers.total_fetched, "total count:", papers.total_count)
    if not filtered:
        print("No papers found with 'debate' in title")
    else:
        for number, paper in enumerate(filtered, start=1):
            print(f"{number}. {paper.title}")

    print()
    _heading("Example 4: Processing with for_each_seq")
    papers = (
        client.new_query()
        .search_query("computer vision")
        .category(Category.CS_CV)
        .limit(5)
        .iterator()
    )
    print("Processing papers with for_each_seq:")

    def process(paper: Paper) -> None:
        print(f"Processing: {truncate_title(paper.title, 50)}")
        print(f"  Categories: {_category_list(paper)}")
        if not paper.authors:
            raise ValueError("paper has no authors")

    try:
        for_each_seq(papers.all(), process)
    except ValueError as exc:
        _log.error("Processing error: %s", exc)

    print()
    _heading("Example 5: Chaining multiple operations")
    papers = (
        client.new_query()
        .search_query("artificial intelligence")
        .categories(Category.CS_AI, Category.CS_LG)
        .limit(15)
        .iterator()
    )
    print("Recent AI papers (filtered, limited, and processed):")
    recent = take_seq(
        filter_seq(
            papers.all(),
            lambda paper: paper.published_at is not None
            and paper.published_at.year >= 2020,
        ),
        3,
    )
    for number, paper in enumerate(recent, start=1):
        print(f"{number}. {truncate_title(paper.title, 60)}")
        print(f"   Year: {paper.published_at.year}, Authors: {len(paper.authors)}")

    print()
    _heading("Example 6: Early termination")
    papers = (
        client.new_query()
        .search_query("deep learning")
        .category(Category.CS_LG)
        .max_results(20)
        .iterator()
    )
    print("Looking for the first paper with 'attention' in title:")
    for paper in papers.all():
        print(f"Checking: {truncate_title(paper.title, 50)}")
        if "attention" in paper.title.lower():
            print(f"✓ Found! {paper.title}")
            break
    else:
        print("No paper with 'attention' in title found in the first 20 results")
    print(f"Total papers fetched: {papers.total_fetched}")

    print()
    _heading("Example 7: Demonstrating limit vs max_results")
    print("limit(5) with max_results(50) - efficient fetching:")
    papers = (
        client.new_query()
        .search_query("machine learning")
        .limit(5)
        .max_results(50)
        .iterator()
    )
    count = 0
    for paper in papers.all():
        count += 1
        print(f"{count}. {truncate_title(paper.title, 60)}")
    print(f"Total fetched: {papers.total_fetched} papers\n")

    _heading("Example 8: Using values() alias")
    papers = (
        client.new_query()
        .search_query("robotics")
        .category(Category.CS_RO)
        .limit(3)
        .iterator()
    )
    print("Robotics papers using values() alias:")
    for paper in papers.values():
        print(f"• {truncate_title(paper.title, 50)}")

    print("\n=== Iterator Pattern Examples Complete ===")


def run_search_examples(client: Client) -> None:
    """Show single-page searches, lookups by id and error handling."""
    print("=== Search with Date Range ===")
    from datetime import datetime, timezone

    query = Query(
        search_query="quantum computing",
        max_results=3,
        submitted_date_from=datetime(2023, 1, 1, tzinfo=timezone.utc),
        submitted_date_to=datetime(2023, 12, 31, tzinfo=timezone.utc),
        sort_by=str(SortCriterion.SUBMITTED_DATE),
        sort_order=str(SortOrder.DESCENDING),
    )
    try:
        results = client.search(query)
    except APIError as exc:
        print(f"API Error Type: {exc.type}")
        print(f"Retryable: {str(exc.retry).lower()}")
        print(f"Error: {exc}")
        return

    papers = results.papers if results is not None else []
    print(f"Found {len(papers)} papers from 2023:")
    for number, paper in enumerate(papers, start=1):
        print(f"\n{number}. {paper.title}")
        print(f"   ID: {paper.id}")
        print(f"   Published: {_published(paper)}")
        print(f"   Categories: {_category_list(paper)}")

    print("\n\n=== Search by Category ===")
    category_query = Query(
        search_query=f"cat:{Category.CS_AI}",
        max_results=2,
        sort_by=str(SortCriterion.RELEVANCE),
        sort_order=str(SortOrder.DESCENDING),
    )
    try:
        category_results = client.search(category_query)
    except APIError as exc:
        _log.error("Category search failed: %s", exc)
    else:
        found = category_results.papers if category_results is not None else []
        print(f"Found {len(found)} papers in {Category.CS_AI} category:")
        for number, paper in enumerate(found, start=1):
            print(f"{number}. {paper.title} (ID: {paper.id})")

    print("\n\n=== Get By ID ===")
    try:
        paper = client.get_by_id("1234.5678")
    except APIError as exc:
        if exc.type is ErrorType.NOT_FOUND:
            print(f"Paper not found (as expected): {exc.message}")
        else:
            print(f"Other API error: {exc}")
    else:
        print(f"Found paper: {paper.title}")

    print("\n\n=== Available Constants ===")
    print("Sort Criteria:")
    print(f"- Relevance: {SortCriterion.RELEVANCE}")
    print(f"- Last Updated: {SortCriterion.LAST_UPDATED_DATE}")
    print(f"- Submitted Date: {SortCriterion.SUBMITTED_DATE}")
    print("\nSort Orders:")
    print(f"- Ascending: {SortOrder.ASCENDING}")
    print(f"- Descending: {SortOrder.DESCENDING}")
    print("\nSample Categories:")
    print(f"- Computer Science AI: {Category.CS_AI}")
    print(f"- Quantum Physics: {Category.QUANT_PH}")
    print(f"- Economics: {Category.ECON_EM}")
    print(f"- Machine Learning: {Category.CS_LG}")

    print("\n\n=== Plain Query ===")
    try:
        plain = client.search(Query(search_query="machine learning", max_results=1))
    except APIError as exc:
        _log.error("Plain search failed: %s", exc)
    else:
        found = plain.papers if plain is not None else []
        print(f"Plain search found {len(found)} papers")
        if found:
            print(f"Title: {found[0].title}")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the iteration and/or search walk-throughs against the live API."""
    parser = argparse.ArgumentParser(
        prog="arxiv-query-demo",
        description="Run example queries against the arXiv API.",
    )
    parser.add_argument(
        "example",
        nargs="?",
        choices=("iter", "search", "all"),
        default="all",
        help="which walk-through to run",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.example in ("iter", "all"):
        run_iter_examples(Client())
    if args.example in ("search", "all"):
        options = ClientOptions(
            retry_attempts=5,
            retry_delay=2.0,
            rate_limit=1.0,
            user_agent="my-app/1.0",
            timeout=60.0,
        )
        run_search_examples(Client(options))
    return 0
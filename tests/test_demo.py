from urllib.parse import parse_qs, urlsplit

import pytest

from arxiv_query.client import Client, ClientOptions
from arxiv_query.demo import (
    author_names,
    main,
    run_iter_examples,
    run_search_examples,
    truncate_title,
)
from arxiv_query.types import Author


def _entry(arxiv_id, title, author, category, day):
    return f"""
  <entry>
    <id>http://arxiv.org/abs/{arxiv_id}</id>
    <title>{title}</title>
    <summary>Abstract for {title}</summary>
    <published>2023-01-0{day}T00:00:00Z</published>
    <updated>2023-01-0{day}T00:00:00Z</updated>
    <author><name>{author}</name></author>
    <category term="{category}" scheme="http://arxiv.org/schemas/atom"/>
  </entry>"""


def _feed(entries):
    body = "".join(entries)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <opensearch:totalResults xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">{len(entries)}</opensearch:totalResults>
  <opensearch:startIndex xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">0</opensearch:startIndex>
  <opensearch:itemsPerPage xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">{len(entries)}</opensearch:itemsPerPage>{body}
</feed>""".encode()


THREE_PAPERS = _feed(
    [
        _entry("1234.5678v1", "Attention Is All Around", "Author One", "cs.LG", 1),
        _entry("9876.5432v1", "A Debate Among Agents", "Author Two", "cs.MA", 2),
        _entry("1111.2222v1", "Plain Results", "Author Three", "cs.CV", 3),
    ]
)
EMPTY_FEED = _feed([])


class _Response:
    def __init__(self, status, body):
        self.status = status
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class _Opener:
    def __init__(self, status, body):
        self.status = status
        self.body = body
        self.urls = []

    def open(self, request, timeout=None):
        self.urls.append(request.full_url)
        return _Response(self.status, self.body)


def _client(opener):
    options = ClientOptions(retry_attempts=1, retry_delay=0.001, rate_limit=0.001)
    return Client(options, opener=opener)


def _params(url):
    return {key: values[0] for key, values in parse_qs(urlsplit(url).query).items()}


def test_author_names_empty():
    assert author_names([]) == "No authors"


def test_author_names_joins_in_order():
    authors = [Author(name="John Doe"), Author(name="Jane Smith")]
    assert author_names(authors) == "John Doe, Jane Smith"


def test_truncate_title_keeps_short_and_exact_titles():
    assert truncate_title("Short", 50) == "Short"
    assert truncate_title("x" * 50, 50) == "x" * 50


def test_truncate_title_shortens_long_titles():
    title = "A" * 70
    result = truncate_title(title, 50)
    assert len(result) == 50
    assert result.endswith("...")
    assert result[:-3] == title[:47]


def test_run_iter_examples_prints_papers(capsys):
    opener = _Opener(200, THREE_PAPERS)
    run_iter_examples(_client(opener))
    out = capsys.readouterr().out

    assert "• Attention Is All Around" in out
    assert "Author One" in out
    assert "✓ Found! Attention Is All Around" in out
    assert out.rstrip().endswith("=== Iterator Pattern Examples Complete ===")

    filtered = out.split("Filtered papers")[1].split("Example 4")[0]
    assert "A Debate Among Agents" in filtered
    assert "Plain Results" not in filtered

    first = _params(opener.urls[0])
    assert "cat:quant-ph" in first["search_query"]
    assert first["max_results"] == "3"


def test_run_iter_examples_reports_errors(capsys, caplog):
    opener = _Opener(500, b"Server error")
    run_iter_examples(_client(opener))
    out = capsys.readouterr().out

    assert "No papers found with 'debate' in title" in out
    assert "Total papers fetched: 0" in out
    assert "•" not in out.split("Example 2")[0]
    assert any(record.getMessage().startswith("Error") for record in caplog.records)


def test_run_search_examples_with_results(capsys):
    opener = _Opener(200, THREE_PAPERS)
    run_search_examples(_client(opener))
    out = capsys.readouterr().out

    first = _params(opener.urls[0])
    assert first["search_query"] == (
        "(quantum computing) AND submittedDate:[20230101 TO 20231231]"
    )
    assert first["sortBy"] == "submittedDate"
    assert "ID: 1234.5678v1" in out
    assert "Found paper: Attention Is All Around" in out
    assert any(_params(url).get("id_list") == "1234.5678" for url in opener.urls)


def test_run_search_examples_not_found(capsys):
    opener = _Opener(200, EMPTY_FEED)
    run_search_examples(_client(opener))
    out = capsys.readouterr().out

    assert "Paper not found (as expected): paper with ID 1234.5678 not found" in out
    assert "Plain search found 0 papers" in out


def test_run_search_examples_stops_on_api_error(capsys):
    opener = _Opener(429, b"")
    run_search_examples(_client(opener))
    out = capsys.readouterr().out

    assert "API Error Type: rate_limit" in out
    assert "Retryable: true" in out
    assert "Sample Categories" not in out
    assert len(opener.urls) == 1


def test_main_rejects_unknown_example():
    with pytest.raises(SystemExit) as info:
        main(["bogus"])
    assert info.value.code == 2
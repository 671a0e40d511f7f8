from datetime import datetime, timedelta, timezone

import pytest

from arxiv_query.parser import extract_arxiv_id, parse_search_response

MOCK_XML = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <link href="http://arxiv.org/api/query?search_query=quantum+computing&amp;id_list=&amp;start=0&amp;max_results=1" rel="self" type="application/atom+xml"/>
  <title type="html">ArXiv Query: search_query=quantum computing&amp;id_list=&amp;start=0&amp;max_results=1</title>
  <id>http://arxiv.org/api/query?search_query=quantum+computing&amp;id_list=&amp;start=0&amp;max_results=1</id>
  <updated>2023-01-01T00:00:00-05:00</updated>
  <opensearch:totalResults xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">50000</opensearch:totalResults>
  <opensearch:startIndex xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">0</opensearch:startIndex>
  <opensearch:itemsPerPage xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">1</opensearch:itemsPerPage>
  <entry>
    <id>http://arxiv.org/abs/1234.5678v1</id>
    <updated>2023-01-01T00:00:00-05:00</updated>
    <published>2023-01-01T00:00:00-05:00</published>
    <title>Test Paper on Quantum Computing</title>
    <summary>This is a test abstract for quantum computing research.</summary>
    <author>
      <name>John Doe</name>
    </author>
    <author>
      <name>Jane Smith</name>
    </author>
    <arxiv:doi xmlns:arxiv="http://arxiv.org/schemas/atom">10.1234/test.doi</arxiv:doi>
    <link href="http://arxiv.org/abs/1234.5678v1" rel="alternate" type="text/html"/>
    <link title="pdf" href="http://arxiv.org/pdf/1234.5678v1.pdf" rel="related" type="application/pdf"/>
    <arxiv:comment xmlns:arxiv="http://arxiv.org/schemas/atom">Test comment</arxiv:comment>
    <category term="quant-ph" scheme="http://arxiv.org/schemas/atom"/>
    <category term="cs.ET" scheme="http://arxiv.org/schemas/atom"/>
  </entry>
</feed>"""

EMPTY_XML = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <opensearch:totalResults xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">0</opensearch:totalResults>
  <opensearch:startIndex xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">0</opensearch:startIndex>
  <opensearch:itemsPerPage xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">0</opensearch:itemsPerPage>
</feed>"""


def _feed_with_entry(published: str, updated: str = "2023-01-01T00:00:00Z") -> str:
    return f"""<feed xmlns="http://www.w3.org/2005/Atom">
  <entry>
    <id>http://arxiv.org/abs/1111.2222v1</id>
    <title>
      Spaced Title
    </title>
    <summary>  Spaced abstract  </summary>
    <published>{published}</published>
    <updated>{updated}</updated>
  </entry>
</feed>"""


def test_parse_mock_response_feed_fields():
    results = parse_search_response(MOCK_XML.encode("utf-8"))
    assert results.total_count == 50000
    assert results.start_index == 0
    assert results.items_per_page == 1
    assert len(results.papers) == 1


def test_parse_mock_response_paper_fields():
    paper = parse_search_response(MOCK_XML).papers[0]
    assert paper.id == "1234.5678v1"
    assert paper.title == "Test Paper on Quantum Computing"
    assert paper.abstract == "This is a test abstract for quantum computing research."
    assert [a.name for a in paper.authors] == ["John Doe", "Jane Smith"]
    assert paper.doi == "10.1234/test.doi"
    assert paper.comment == "Test comment"
    assert paper.journal_ref == ""
    assert paper.categories == ["quant-ph", "cs.ET"]


def test_parse_mock_response_links_and_dates():
    paper = parse_search_response(MOCK_XML).papers[0]
    assert len(paper.links) == 2
    assert paper.links[0].href == "http://arxiv.org/abs/1234.5678v1"
    assert paper.links[0].rel == "alternate"
    assert paper.links[0].title == ""
    assert paper.links[1].title == "pdf"
    assert paper.links[1].type == "application/pdf"
    expected = datetime(2023, 1, 1, tzinfo=timezone(timedelta(hours=-5)))
    assert paper.published_at == expected
    assert paper.updated_at == expected


def test_parse_empty_feed():
    results = parse_search_response(EMPTY_XML)
    assert results.papers == []
    assert results.total_count == 0


def test_titles_and_abstracts_are_stripped():
    paper = parse_search_response(_feed_with_entry("2023-01-02T03:04:05Z")).papers[0]
    assert paper.title == "Spaced Title"
    assert paper.abstract == "Spaced abstract"
    assert paper.published_at == datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_fractional_seconds_are_accepted():
    paper = parse_search_response(
        _feed_with_entry("2023-01-02T03:04:05.5Z")
    ).papers[0]
    assert paper.published_at.microsecond == 500000


def test_malformed_xml_raises():
    with pytest.raises(ValueError, match="failed to parse XML response"):
        parse_search_response("<feed")


def test_non_atom_root_raises():
    with pytest.raises(ValueError, match="failed to parse XML response"):
        parse_search_response("<feed><entry/></feed>")


def test_bad_published_date_raises():
    with pytest.raises(ValueError, match="published date"):
        parse_search_response(_feed_with_entry("2023-01-01"))


def test_bad_updated_date_raises():
    with pytest.raises(ValueError, match="failed to convert entry 0"):
        parse_search_response(_feed_with_entry("2023-01-01T00:00:00Z", "yesterday"))


@pytest.mark.parametrize(
    "full_id, expected",
    [
        ("http://arxiv.org/abs/1234.5678v1", "1234.5678v1"),
        ("1234.5678v1", "1234.5678v1"),
        ("http://arxiv.org/abs/quant-ph/0301001", "quant-ph/0301001"),
        ("quant-ph/0301001", "quant-ph/0301001"),
    ],
)
def test_extract_arxiv_id(full_id, expected):
    assert extract_arxiv_id(full_id) == expected
"""Parsing of Atom feeds returned by the arXiv query API."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Optional, Union

from arxiv_query.types import Author, Link, Paper, SearchResults

ATOM_NS = "http://www.w3.org/2005/Atom"
OPENSEARCH_NS = "http://a9.com/-/spec/opensearch/1.1/"
ARXIV_NS = "http://arxiv.org/schemas/atom"

_ABS_PREFIX = "http://arxiv.org/abs/"

_RFC3339 = re.compile(
    r"(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(\.\d+)?(Z|[+-]\d{2}:\d{2})\Z"
)


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _matches(elem: ET.Element, name: str, namespace: Optional[str]) -> bool:
    if namespace is None:
        return _local_name(elem.tag) == name
    return elem.tag == f"{{{namespace}}}{name}"


def _children(elem: ET.Element, name: str, namespace: Optional[str] = None):
    return [child for child in elem if _matches(child, name, namespace)]


def _child_text(elem: ET.Element, name: str, namespace: Optional[str] = None) -> str:
    """Text of the last matching child, or an empty string."""
    text = ""
    for child in _children(elem, name, namespace):
        text = "".join(child.itertext())
    return text


def _child_int(elem: ET.Element, name: str, namespace: str) -> int:
    raw = _child_text(elem, name, namespace).strip()
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"invalid integer {raw!r} in <{name}>") from exc


def _parse_rfc3339(text: str) -> datetime:
    match = _RFC3339.match(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp {text!r}")
    date, clock, fraction, zone = match.groups()
    micro = (fraction[1:] + "000000")[:6] if fraction else "000000"
    if zone == "Z":
        zone = "+00:00"
    return datetime.fromisoformat(f"{date}T{clock}.{micro}{zone}")


def extract_arxiv_id(full_id: str) -> str:
    """Strip the abstract URL prefix from an entry id, if present."""
    if full_id.startswith(_ABS_PREFIX):
        return full_id[len(_ABS_PREFIX):]
    return full_id


def entry_to_paper(entry: ET.Element) -> Paper:
    """Convert an Atom ``<entry>`` element into a :class:`Paper`."""
    try:
        published_at = _parse_rfc3339(_child_text(entry, "published"))
    except ValueError as exc:
        raise ValueError(f"failed to parse published date: {exc}") from exc
    try:
        updated_at = _parse_rfc3339(_child_text(entry, "updated"))
    except ValueError as exc:
        raise ValueError(f"failed to parse updated date: {exc}") from exc

    authors = [
        Author(name=_child_text(author, "name").strip())
        for author in _children(entry, "author")
    ]
    categories = [cat.get("term", "") for cat in _children(entry, "category")]
    links = [
        Link(
            href=link.get("href", ""),
            rel=link.get("rel", ""),
            type=link.get("type", ""),
            title=link.get("title", ""),
        )
        for link in _children(entry, "link")
    ]

    return Paper(
        id=extract_arxiv_id(_child_text(entry, "id")),
        title=_child_text(entry, "title").strip(),
        abstract=_child_text(entry, "summary").strip(),
        authors=authors,
        categories=categories,
        published_at=published_at,
        updated_at=updated_at,
        doi=_child_text(entry, "doi", ARXIV_NS),
        journal_ref=_child_text(entry, "journal_ref", ARXIV_NS),
        comment=_child_text(entry, "comment", ARXIV_NS),
        links=links,
    )


def parse_search_response(data: Union[bytes, str]) -> SearchResults:
    """Parse an arXiv Atom feed into :class:`SearchResults`.

    Raises ``ValueError`` when the document is malformed.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ValueError(f"failed to parse XML response: {exc}") from exc
    if root.tag != f"{{{ATOM_NS}}}feed":
        raise ValueError(
            f"failed to parse XML response: expected Atom <feed>, got {root.tag!r}"
        )

    try:
        total_count = _child_int(root, "totalResults", OPENSEARCH_NS)
        start_index = _child_int(root, "startIndex", OPENSEARCH_NS)
        items_per_page = _child_int(root, "itemsPerPage", OPENSEARCH_NS)
    except ValueError as exc:
        raise ValueError(f"failed to parse XML response: {exc}") from exc

    papers = []
    for index, entry in enumerate(_children(root, "entry")):
        try:
            papers.append(entry_to_paper(entry))
        except ValueError as exc:
            raise ValueError(f"failed to convert entry {index}: {exc}") from exc

    return SearchResults(
        papers=papers,
        total_count=total_count,
        start_index=start_index,
        items_per_page=items_per_page,
    )
"""Client for the arXiv search API: query building, retries, rate limiting, feed parsing and paginated iteration."""

__version__ = "1.0.0"

__all__ = ["client", "demo", "enums", "iterator", "parser", "query_builder", "types"]
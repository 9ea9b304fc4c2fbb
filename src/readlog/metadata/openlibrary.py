# ABOUTME: Open Library metadata provider implementation.
# ABOUTME: Looks up a single ISBN through the openlibrary.org Books API.

import logging

from readlog.metadata.http import HttpClient, MetadataFetchError
from readlog.metadata.openlibrary_parser import bibkey, parse_books_response
from readlog.metadata.types import MetadataResult

logger = logging.getLogger(__name__)

_OL_BASE = "https://openlibrary.org"


class OpenLibraryProvider:
    """Metadata provider backed by the Open Library Books API.

    One request per lookup (`jscmd=data` already inlines author names and
    cover URLs). Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "openlibrary"

    def lookup(self, isbn: str) -> MetadataResult | None:
        """Look up a book by ISBN. Returns None on any failure or miss."""
        params = {"bibkeys": bibkey(isbn), "format": "json", "jscmd": "data"}
        try:
            data = self._http.get(f"{_OL_BASE}/api/books", params=params)
        except MetadataFetchError as exc:
            logger.warning("Open Library lookup failed for %s: %s", isbn, exc)
            return None

        result = parse_books_response(data, isbn)
        if result is None or result.is_empty:
            logger.debug("Open Library has no entry for %s", isbn)
            return None
        return result

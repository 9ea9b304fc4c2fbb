# ABOUTME: Google Books metadata provider implementation.
# ABOUTME: Looks up a single ISBN through the volumes search endpoint.

import logging

from readlog.metadata.googlebooks_parser import parse_volumes_response
from readlog.metadata.http import HttpClient, MetadataFetchError
from readlog.metadata.types import MetadataResult

logger = logging.getLogger(__name__)

_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"


class GoogleBooksProvider:
    """Metadata provider backed by the Google Books API.

    Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "googlebooks"

    def lookup(self, isbn: str) -> MetadataResult | None:
        """Look up a book by ISBN. Returns None on any failure or miss."""
        try:
            data = self._http.get(_VOLUMES_URL, params={"q": f"isbn:{isbn}"})
        except MetadataFetchError as exc:
            logger.warning("Google Books lookup failed for %s: %s", isbn, exc)
            return None

        result = parse_volumes_response(data, isbn)
        if result is None or result.is_empty:
            logger.debug("Google Books has no entry for %s", isbn)
            return None
        return result

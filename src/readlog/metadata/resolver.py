# ABOUTME: Ordered fallback chain over metadata providers for a scanned ISBN.
# ABOUTME: Tries each provider with the ISBN-13 and then its ISBN-10 form.

import logging
import threading
from collections.abc import Sequence

from readlog.core.isbn import to_isbn10
from readlog.metadata.googlebooks import GoogleBooksProvider
from readlog.metadata.http import HttpClient
from readlog.metadata.openlibrary import OpenLibraryProvider
from readlog.metadata.provider import MetadataProvider
from readlog.metadata.types import MetadataResult

logger = logging.getLogger(__name__)


class ResolutionCancelled(Exception):
    """Raised when a resolution chain is abandoned via its cancel event."""


class MetadataResolver:
    """Resolve an ISBN-13 against a prioritized list of providers.

    For each provider in order, the ISBN-13 is queried first and then, for
    978 codes, the derived ISBN-10. The first non-None result wins and no
    further provider is called. Adding a provider is a list insertion.
    """

    def __init__(self, providers: Sequence[MetadataProvider]) -> None:
        self._providers = list(providers)

    @property
    def providers(self) -> list[MetadataProvider]:
        return list(self._providers)

    def lookup_keys(self, isbn13: str) -> list[str]:
        """Keys queried per provider, in order."""
        isbn10 = to_isbn10(isbn13)
        return [isbn13, isbn10] if isbn10 else [isbn13]

    def resolve(
        self, isbn13: str, cancel: threading.Event | None = None
    ) -> MetadataResult | None:
        """Return the first provider result for isbn13, or None.

        Raises:
            ResolutionCancelled: If cancel is set before a provider call.
        """
        keys = self.lookup_keys(isbn13)
        for provider in self._providers:
            for key in keys:
                if cancel is not None and cancel.is_set():
                    raise ResolutionCancelled(f"Resolution of {isbn13} cancelled")
                result = provider.lookup(key)
                if result is not None:
                    logger.info("Resolved %s via %s (%s)", isbn13, provider.name, key)
                    return result

        logger.info("No provider could resolve %s", isbn13)
        return None


def default_resolver(http_client: HttpClient) -> MetadataResolver:
    """Google Books first, Open Library as fallback."""
    return MetadataResolver(
        [GoogleBooksProvider(http_client), OpenLibraryProvider(http_client)]
    )

# ABOUTME: Scan ingest pipeline: decoded code -> validation -> metadata -> BookStore.
# ABOUTME: Also hosts manual entry, which appends a Book without validation or lookup.

import enum
import logging
import threading
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from readlog.core.isbn import is_isbn13
from readlog.db.mapping import Book
from readlog.db.store import BookStore
from readlog.metadata.resolver import MetadataResolver, ResolutionCancelled
from readlog.metadata.types import MetadataResult

logger = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 0.8


class IngestStatus(enum.Enum):
    """Outcome of offering one decoded code to the pipeline."""

    ADDED = "added"
    NOT_RECOGNIZED = "not_recognized"
    DEBOUNCED = "debounced"
    BUSY = "busy"
    CANCELLED = "cancelled"


@dataclass
class IngestResult:
    """Result of a single ingest call. book is set only when status is ADDED."""

    status: IngestStatus
    code: str
    book: Book | None = None

    @property
    def added(self) -> bool:
        return self.status is IngestStatus.ADDED


def fallback_title(code: str) -> str:
    return f"Book ({code})"


def build_book(code: str, metadata: MetadataResult | None) -> Book:
    """Build a fresh Book for a scanned code, preferring resolved fields.

    With no metadata the record still gets a generated title and the
    scanned code as its isbn.
    """
    if metadata is None:
        return Book(title=fallback_title(code), isbn=code)
    return Book(
        title=(metadata.title or "").strip() or fallback_title(code),
        author=metadata.author,
        pages=metadata.pages,
        isbn=metadata.isbn or code,
        thumbnail=metadata.thumbnail,
        description=metadata.description,
    )


class ScanIngestPipeline:
    """Turn a stream of decoded barcodes into Books on the shelf.

    At most one ingest runs at a time; a code offered while another is
    being resolved is dropped as BUSY. Codes arriving within the debounce
    window of the previous accepted code are dropped as DEBOUNCED, so a
    video decoder reporting the same barcode on consecutive frames adds it
    once.
    """

    def __init__(
        self,
        store: BookStore,
        resolver: MetadataResolver,
        *,
        debounce_seconds: float = DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._debounce = debounce_seconds
        self._clock = clock
        self._last_accepted_at: float | None = None
        self._busy = threading.Lock()
        self._cancel = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def cancel(self) -> None:
        """Tear down: abandon any in-flight resolution and refuse new codes."""
        self._cancel.set()

    def ingest(self, raw_code: str) -> IngestResult:
        """Offer one decoded code to the pipeline."""
        if self._cancel.is_set():
            return IngestResult(IngestStatus.CANCELLED, raw_code)
        if not self._busy.acquire(blocking=False):
            logger.debug("Pipeline busy, dropping %s", raw_code)
            return IngestResult(IngestStatus.BUSY, raw_code)
        try:
            return self._ingest(raw_code)
        finally:
            self._busy.release()

    def ingest_stream(
        self, codes: Iterable[str], *, stop_after_added: bool = False
    ) -> Iterator[IngestResult]:
        """Ingest codes as they arrive, skipping blank entries."""
        for raw in codes:
            code = raw.strip()
            if not code:
                continue
            result = self.ingest(code)
            yield result
            if result.status is IngestStatus.CANCELLED:
                return
            if stop_after_added and result.added:
                return

    def _ingest(self, code: str) -> IngestResult:
        now = self._clock()
        if self._last_accepted_at is not None and now - self._last_accepted_at < self._debounce:
            return IngestResult(IngestStatus.DEBOUNCED, code)
        self._last_accepted_at = now

        if not is_isbn13(code):
            logger.info("Not a book barcode: %r", code)
            return IngestResult(IngestStatus.NOT_RECOGNIZED, code)

        try:
            metadata = self._resolver.resolve(code, cancel=self._cancel)
        except ResolutionCancelled:
            logger.info("Scan of %s cancelled during lookup", code)
            return IngestResult(IngestStatus.CANCELLED, code)
        if self._cancel.is_set():
            return IngestResult(IngestStatus.CANCELLED, code)

        book = build_book(code, metadata)
        self._store.append(book)
        logger.info("Added %r (%s)", book.title, code)
        return IngestResult(IngestStatus.ADDED, code, book)


def add_manual_entry(
    store: BookStore,
    title: str,
    *,
    author: str | None = None,
    pages: int | None = None,
    isbn: str | None = None,
) -> Book | None:
    """Append a hand-entered book. Returns None for a blank title."""
    title = title.strip()
    if not title:
        return None
    book = Book(
        title=title,
        author=author or None,
        pages=pages,
        isbn=isbn or None,
    )
    store.append(book)
    return book

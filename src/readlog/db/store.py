# ABOUTME: BookStore, the single writer of the persisted book collection.
# ABOUTME: Load, append, log pages, and total points over a KeyValueStore.

import json
import logging
import threading
from typing import Any

from readlog.db.kv import BOOKS_KEY, CORRUPT_BOOKS_KEY, KeyValueStore, StorageError
from readlog.db.mapping import Book, book_to_dict, dict_to_book

logger = logging.getLogger(__name__)


def _decode(raw: str) -> list[Any] | None:
    """Decode the stored payload into its raw entries, or None if unusable."""
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Stored book collection is not valid JSON")
        return None
    if not isinstance(data, list):
        logger.warning("Stored book collection is not a list")
        return None
    return data


class BookStore:
    """Ordered, append-only collection of Books persisted as one JSON array.

    Every read goes back to storage, so there is no cache to drift out of
    sync. Storage failures never propagate: reads degrade to an empty
    collection and writes are dropped, both with a logged warning. A write
    only ever rewrites a collection it has actually read, so a failed read
    never clobbers what is stored.
    """

    def __init__(self, kv: KeyValueStore) -> None:
        self._kv = kv
        self._lock = threading.Lock()

    def load(self) -> list[Book]:
        """Return the stored collection in insertion order.

        Missing, unreadable, or malformed data yields an empty list.
        """
        try:
            raw = self._kv.get(BOOKS_KEY)
        except StorageError as exc:
            logger.warning("Book collection unavailable, using empty shelf: %s", exc)
            return []
        if raw is None:
            return []

        entries = _decode(raw)
        if entries is None:
            return []

        books = []
        for entry in entries:
            if not isinstance(entry, dict):
                logger.warning("Skipping malformed book entry: %r", entry)
                continue
            books.append(dict_to_book(entry))
        return books

    def append(self, book: Book) -> None:
        """Append a book and persist the whole collection in one write."""
        with self._lock:
            entries = self._entries_for_update()
            if entries is None:
                return
            entries.append(book_to_dict(book))
            self._save(entries)

    def log_pages(self, index: int, pages: int) -> Book | None:
        """Add pages to the book at index.

        Returns the updated Book, or None (with nothing written) when pages
        is not a positive int, index is out of range, or the collection
        could not be read.
        """
        if isinstance(pages, bool) or not isinstance(pages, int) or pages <= 0:
            logger.info("Rejected page count %r", pages)
            return None
        if isinstance(index, bool) or not isinstance(index, int):
            logger.info("Rejected book index %r", index)
            return None

        with self._lock:
            entries = self._entries_for_update()
            if entries is None:
                return None
            # index counts books only; skipped entries keep their slots
            positions = [i for i, entry in enumerate(entries) if isinstance(entry, dict)]
            if not 0 <= index < len(positions):
                logger.info("Book index %d out of range (have %d)", index, len(positions))
                return None
            position = positions[index]
            book = dict_to_book(entries[position])
            book.read_pages += pages
            entries[position] = {**entries[position], "readPages": book.read_pages}
            self._save(entries)
        return book

    def total_points(self) -> int:
        """Sum of read_pages across the collection."""
        return sum(book.read_pages for book in self.load())

    def _entries_for_update(self) -> list[Any] | None:
        """Raw stored entries to modify, or None when writing would lose data.

        Entries load() skips are returned untouched so they survive the
        rewrite. An undecodable payload is copied to CORRUPT_BOOKS_KEY
        before the collection starts over.
        """
        try:
            raw = self._kv.get(BOOKS_KEY)
        except StorageError as exc:
            logger.warning("Book collection unavailable, not saving: %s", exc)
            return None
        if raw is None:
            return []

        entries = _decode(raw)
        if entries is not None:
            return entries
        try:
            self._kv.set(CORRUPT_BOOKS_KEY, raw)
        except StorageError as exc:
            logger.warning("Could not back up unreadable book collection: %s", exc)
            return None
        logger.warning("Unreadable book collection moved to %r", CORRUPT_BOOKS_KEY)
        return []

    def _save(self, entries: list[Any]) -> None:
        payload = json.dumps(entries, ensure_ascii=False)
        try:
            self._kv.set(BOOKS_KEY, payload)
        except StorageError as exc:
            logger.warning("Could not persist book collection: %s", exc)

# ABOUTME: Logging a reading session: pages on a book plus the streak timestamp.
# ABOUTME: The streak counter itself is left for the next session-load evaluation.

from datetime import datetime

from readlog.core.streak import StreakTracker
from readlog.db.mapping import Book
from readlog.db.store import BookStore


def log_reading(
    store: BookStore,
    tracker: StreakTracker,
    index: int,
    pages: int,
    now: datetime | None = None,
) -> Book | None:
    """Log pages for the book at index and stamp the reading date.

    Returns the updated Book, or None if the store rejected the input. A
    rejected log does not count as a reading session.
    """
    book = store.log_pages(index, pages)
    if book is not None:
        tracker.record_event(now)
    return book

# ABOUTME: The Book record and its conversion to and from stored JSON objects.
# ABOUTME: Stored keys use the camelCase names of the persisted collection format.

from dataclasses import dataclass
from typing import Any

UNTITLED = "Untitled"


@dataclass
class Book:
    """A book on the user's shelf.

    read_pages is the cumulative number of pages logged. It starts at 0
    and only ever grows through BookStore.log_pages.
    """

    title: str
    author: str | None = None
    pages: int | None = None
    isbn: str | None = None
    thumbnail: str | None = None
    description: str | None = None
    read_pages: int = 0

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("title must not be empty")
        if self.read_pages < 0:
            msg = f"read_pages must be >= 0, got {self.read_pages}"
            raise ValueError(msg)


def book_to_dict(book: Book) -> dict[str, Any]:
    """Convert a Book to the JSON object stored in the collection."""
    return {
        "title": book.title,
        "author": book.author,
        "pages": book.pages,
        "isbn": book.isbn,
        "thumbnail": book.thumbnail,
        "description": book.description,
        "readPages": book.read_pages,
    }


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _optional_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def dict_to_book(data: dict[str, Any]) -> Book:
    """Convert a stored JSON object back to a Book.

    Tolerates records written by older versions: a missing title becomes
    "Untitled" and a missing or invalid readPages becomes 0.
    """
    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        title = UNTITLED

    read_pages = _optional_int(data.get("readPages")) or 0

    return Book(
        title=title,
        author=_optional_str(data.get("author")),
        pages=_optional_int(data.get("pages")),
        isbn=_optional_str(data.get("isbn")),
        thumbnail=_optional_str(data.get("thumbnail")),
        description=_optional_str(data.get("description")),
        read_pages=max(read_pages, 0),
    )

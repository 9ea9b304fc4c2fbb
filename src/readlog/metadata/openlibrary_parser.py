# ABOUTME: Parsing functions for Open Library Books API JSON responses.
# ABOUTME: Converts OL `jscmd=data` entries into normalized MetadataResult instances.

from typing import Any

from readlog.metadata.types import MetadataResult


def bibkey(isbn: str) -> str:
    """Build the Books API bibkey for an ISBN."""
    return f"ISBN:{isbn}"


def _text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _positive_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def parse_author_names(entries: Any) -> str | None:
    """Join the `name` of each author entry with ", "."""
    if not isinstance(entries, list):
        return None
    names = [_text(e.get("name")) for e in entries if isinstance(e, dict)]
    return ", ".join(n for n in names if n) or None


def parse_cover_url(cover: Any) -> str | None:
    """Pick the medium cover, falling back to the small one."""
    if not isinstance(cover, dict):
        return None
    return _text(cover.get("medium")) or _text(cover.get("small"))


def parse_books_response(data: Any, isbn: str) -> MetadataResult | None:
    """Parse an Open Library `api/books?jscmd=data` response.

    The response is keyed by bibkey; the lookup matched only when the
    `ISBN:<isbn>` key is present. Open Library has no description in this
    view, so the subtitle stands in for it.
    """
    if not isinstance(data, dict):
        return None
    entry = data.get(bibkey(isbn))
    if not isinstance(entry, dict):
        return None

    return MetadataResult(
        title=_text(entry.get("title")),
        author=parse_author_names(entry.get("authors")),
        pages=_positive_int(entry.get("number_of_pages")),
        isbn=isbn,
        thumbnail=parse_cover_url(entry.get("cover")),
        description=_text(entry.get("subtitle")),
    )

# ABOUTME: Parsing functions for Google Books volumes API JSON responses.
# ABOUTME: Converts the first matching volume into a normalized MetadataResult.

from typing import Any

from readlog.metadata.types import MetadataResult


def _as_str(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def parse_volumes_response(data: Any, isbn: str) -> MetadataResult | None:
    """Parse a Google Books `volumes?q=isbn:` response.

    The lookup key matched only when `items` is a non-empty list. Only the
    first item's volumeInfo is used. Returns None when nothing matched or
    the body does not have the expected shape.
    """
    if not isinstance(data, dict):
        return None
    items = data.get("items")
    if not isinstance(items, list) or not items or not isinstance(items[0], dict):
        return None

    info = items[0].get("volumeInfo") or {}
    if not isinstance(info, dict):
        return None

    authors = info.get("authors")
    author = ""
    if isinstance(authors, list):
        author = ", ".join(filter(None, (_as_str(a) for a in authors)))

    image_links = info.get("imageLinks") or {}
    thumbnail = image_links.get("thumbnail") if isinstance(image_links, dict) else None

    return MetadataResult(
        title=_as_str(info.get("title")),
        author=author or None,
        pages=_as_int(info.get("pageCount")),
        isbn=isbn,
        thumbnail=_as_str(thumbnail),
        description=_as_str(info.get("description")),
    )

"""Offset/limit pagination over an in-memory ordered collection.

``offset`` counts pages, not items: page ``n`` holds the items in
``[n * limit, n * limit + limit)``. Cursors point at the adjacent page number,
or ``None`` when there is no such page.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from album_reviews.errors import InvalidRequest


class InvalidRange(ValueError):
    """The offset points past the end of the collection."""


@dataclass(frozen=True)
class Page:
    """One slice of an ordered collection plus cursors to its neighbours."""

    items: list = field(default_factory=list)
    next: int | None = None
    prev: int | None = None
    total: int = 0


def paginate(items: Sequence, offset: int, limit: int) -> Page:
    """Return page ``offset`` of ``items``, ``limit`` items per page.

    Offset 0 is always valid, even for an empty collection.
    """
    total = len(items)
    start = offset * limit
    if offset != 0 and start >= total:
        raise InvalidRange(f"Offset {offset} is out of range for {total} items with limit {limit}")

    end = min(start + limit, total)
    return Page(
        items=list(items[start:end]),
        next=offset + 1 if end < total else None,
        prev=offset - 1 if offset > 0 else None,
        total=total,
    )


def _as_int(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            try:
                return int(text)
            except ValueError:
                return None
    return None


def validate_offset_and_limit(offset, limit) -> tuple[int, int]:
    """Coerce request-supplied ``offset`` and ``limit`` into integers.

    Both must be present. ``offset`` must be a non-negative integer and
    ``limit`` a positive one; decimal strings are accepted as they arrive
    from query strings.
    """
    parsed_offset = _as_int(offset)
    parsed_limit = _as_int(limit)
    if parsed_offset is None or parsed_limit is None or parsed_offset < 0 or parsed_limit < 1:
        raise InvalidRequest(offset=offset, limit=limit)
    return parsed_offset, parsed_limit

"""Pagination primitives.

Two strategies are supported:

- Offset pagination (page/size/total) for article listings.
- Cursor pagination for comment threads. A cursor is an opaque
  base64-encoded JSON object ``{"id": ..., "createdAt": ...}`` pointing at
  the last row of the previous page; ``(created_at, id)`` gives a total
  order so pages never skip or repeat rows when new rows are inserted.
"""

import base64
import binascii
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Generic, Optional, TypeVar

from pydantic import Field

from blog.domain.value.common import ValueObject

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50

T = TypeVar("T")


def clamp_page_size(
    size: int | None,
    default: int = DEFAULT_PAGE_SIZE,
    maximum: int = MAX_PAGE_SIZE,
) -> int:
    """Bring a requested page size into [1, maximum].

    Oversized requests are capped rather than rejected. A missing or zero
    size falls back to the default.
    """
    if not size:
        return default
    return max(1, min(size, maximum))


# Offset pagination


class OffsetPagination(ValueObject):
    """Requested page of an offset-paginated listing."""

    page: int = Field(default=1, ge=1)
    size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size


class OffsetPageMeta(ValueObject):
    """Metadata describing one page of an offset-paginated listing."""

    page: int
    size: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def create(cls, page: int, size: int, total: int) -> "OffsetPageMeta":
        """Compute page metadata.

        Args:
            page: Current page (1-based)
            size: Page size (>= 1)
            total: Total number of matching rows

        Returns:
            Page metadata; total_pages is 0 when there are no rows
        """
        total_pages = -(-total // size)  # ceil without floats
        return cls(
            page=page,
            size=size,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1,
        )


@dataclass
class OffsetPage(Generic[T]):
    """One page of results plus its metadata."""

    data: list[T]
    meta: OffsetPageMeta

    @classmethod
    def create(
        cls, data: list[T], page: int, size: int, total: int
    ) -> "OffsetPage[T]":
        return cls(data=data, meta=OffsetPageMeta.create(page, size, total))


# Cursor pagination


def _format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a "Z" suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


def _parse_timestamp(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class Cursor(ValueObject):
    """Decoded position in a cursor-paginated listing."""

    id: str
    created_at: datetime

    def encode(self) -> str:
        """Encode as base64(JSON) for clients.

        The JSON is compact and keys are ordered id, createdAt, so the output
        matches cursors issued by other clients of the same wire format.
        """
        payload = {"id": self.id, "createdAt": _format_timestamp(self.created_at)}
        raw = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        return base64.b64encode(raw.encode("utf-8")).decode("ascii")

    @classmethod
    def decode(cls, cursor: str | None) -> Optional["Cursor"]:
        """Decode a cursor string.

        Returns:
            The cursor, or None if it is missing or malformed
        """
        if not cursor:
            return None
        try:
            payload = json.loads(base64.b64decode(cursor, validate=True))
            cursor_id = payload["id"]
            created_at = payload["createdAt"]
            if not isinstance(cursor_id, str) or not isinstance(created_at, str):
                return None
            return cls(id=cursor_id, created_at=_parse_timestamp(created_at))
        except (binascii.Error, ValueError, KeyError, TypeError, RecursionError):
            return None

    def admits_ascending(self, created_at: datetime, row_id: str) -> bool:
        """Whether a row belongs after this cursor in an oldest-first feed."""
        return created_at > self.created_at or (
            created_at == self.created_at and row_id > self.id
        )

    def admits_descending(self, created_at: datetime, row_id: str) -> bool:
        """Whether a row belongs after this cursor in a newest-first feed."""
        return created_at < self.created_at or (
            created_at == self.created_at and row_id < self.id
        )


def encode_cursor(row_id: str, created_at: datetime) -> str:
    """Encode a (row id, creation time) position as an opaque cursor."""
    return Cursor(id=row_id, created_at=created_at).encode()


def decode_cursor(cursor: str | None) -> Optional[Cursor]:
    """Decode an opaque cursor; malformed input yields None."""
    return Cursor.decode(cursor)


class CursorPagination(ValueObject):
    """Requested page of a cursor-paginated listing."""

    size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    after: Optional[str] = None

    @property
    def cursor(self) -> Optional[Cursor]:
        return Cursor.decode(self.after)

    @property
    def fetch_size(self) -> int:
        """Rows to fetch: one extra to detect a following page."""
        return self.size + 1


class CursorPageMeta(ValueObject):
    """Metadata for one page of a cursor-paginated listing."""

    size: int
    next_cursor: Optional[str] = None


def _default_cursor_key(row) -> tuple[str, datetime]:
    return str(row.id), row.created_at


@dataclass
class CursorPage(Generic[T]):
    """One page of results plus the cursor of the next page, if any."""

    data: list[T]
    meta: CursorPageMeta = field(default_factory=lambda: CursorPageMeta(size=0))

    @classmethod
    def from_rows(
        cls,
        rows: list[T],
        size: int,
        key: Callable[[T], tuple[str, datetime]] = _default_cursor_key,
    ) -> "CursorPage[T]":
        """Build a page from up to size + 1 fetched rows.

        Args:
            rows: Rows in feed order, fetched with limit size + 1
            size: Requested page size
            key: Extracts (id, created_at) from a row

        Returns:
            Page with at most size rows; next_cursor is set only when a
            further row was fetched
        """
        has_next = len(rows) > size
        data = rows[:size] if has_next else list(rows)

        next_cursor = None
        if has_next and data:
            last_id, last_created_at = key(data[-1])
            next_cursor = encode_cursor(last_id, last_created_at)

        return cls(data=data, meta=CursorPageMeta(size=len(data), next_cursor=next_cursor))

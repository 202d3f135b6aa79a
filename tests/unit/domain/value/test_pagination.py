"""Unit tests for offset and cursor pagination."""

import base64
import json
from dataclasses import dataclass
from datetime import datetime, timezone

import pytest

from blog.domain.value import (
    CursorPage,
    CursorPagination,
    OffsetPageMeta,
    OffsetPagination,
    clamp_page_size,
    decode_cursor,
    encode_cursor,
)


@dataclass
class Row:
    id: str
    created_at: datetime


class TestOffsetPagination:
    """Tests for offset pagination maths."""

    def test_offset_and_limit(self):
        pagination = OffsetPagination(page=3, size=10)
        assert pagination.offset == 20
        assert pagination.limit == 10

    def test_meta_for_first_of_three_pages(self):
        meta = OffsetPageMeta.create(page=1, size=10, total=25)
        assert meta.total_pages == 3
        assert meta.has_next is True
        assert meta.has_previous is False

    def test_meta_for_last_page(self):
        meta = OffsetPageMeta.create(page=3, size=10, total=25)
        assert meta.has_next is False
        assert meta.has_previous is True

    def test_meta_for_exact_multiple(self):
        assert OffsetPageMeta.create(page=1, size=10, total=20).total_pages == 2

    def test_meta_without_rows(self):
        meta = OffsetPageMeta.create(page=1, size=10, total=0)
        assert meta.total_pages == 0
        assert meta.has_next is False
        assert meta.has_previous is False

    def test_page_past_the_end(self):
        meta = OffsetPageMeta.create(page=5, size=10, total=25)
        assert meta.has_next is False
        assert meta.has_previous is True


class TestClampPageSize:
    """Tests for clamp_page_size."""

    @pytest.mark.parametrize(
        "requested,expected",
        [(None, 10), (0, 10), (1, 1), (25, 25), (50, 50), (51, 50), (1000, 50), (-3, 1)],
    )
    def test_clamps(self, requested, expected):
        assert clamp_page_size(requested) == expected

    def test_custom_bounds(self):
        assert clamp_page_size(None, default=5, maximum=20) == 5
        assert clamp_page_size(30, default=5, maximum=20) == 20


class TestCursor:
    """Tests for cursor encoding."""

    def test_round_trip_keeps_millisecond_precision(self):
        # Arrange
        created_at = datetime(2024, 5, 17, 12, 30, 45, 123456, tzinfo=timezone.utc)

        # Act
        cursor = decode_cursor(encode_cursor("row-1", created_at))

        # Assert
        assert cursor is not None
        assert cursor.id == "row-1"
        assert cursor.created_at == datetime(
            2024, 5, 17, 12, 30, 45, 123000, tzinfo=timezone.utc
        )

    def test_wire_format(self):
        created_at = datetime(2024, 1, 2, 3, 4, 5, 6000, tzinfo=timezone.utc)

        payload = json.loads(base64.b64decode(encode_cursor("abc", created_at)))

        assert payload == {"id": "abc", "createdAt": "2024-01-02T03:04:05.006Z"}

    @pytest.mark.parametrize(
        "cursor",
        [
            None,
            "",
            "not-base64-json",
            base64.b64encode(b"not json").decode(),
            base64.b64encode(b'{"id": "x"}').decode(),
            base64.b64encode(b'{"id": 1, "createdAt": "2024-01-01T00:00:00Z"}').decode(),
            base64.b64encode(b'{"id": "x", "createdAt": "yesterday"}').decode(),
            base64.b64encode(b"[" * 100000 + b"]" * 100000).decode(),
        ],
        ids=[
            "none",
            "empty",
            "not-base64",
            "not-json",
            "missing-created-at",
            "non-string-id",
            "bad-timestamp",
            "deeply-nested",
        ],
    )
    def test_malformed_cursor_decodes_to_none(self, cursor):
        assert decode_cursor(cursor) is None

    def test_ordering_predicates(self):
        # Arrange
        t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        later = datetime(2024, 1, 2, tzinfo=timezone.utc)
        cursor = decode_cursor(encode_cursor("m", t))

        # Assert
        assert cursor.admits_ascending(later, "a")
        assert cursor.admits_ascending(t, "z")
        assert not cursor.admits_ascending(t, "m")
        assert cursor.admits_descending(t, "a")
        assert not cursor.admits_descending(later, "a")

    def test_pagination_exposes_decoded_cursor(self):
        created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        pagination = CursorPagination(size=5, after=encode_cursor("x", created_at))

        assert pagination.fetch_size == 6
        assert pagination.cursor.id == "x"

    def test_pagination_rejects_oversized_request(self):
        with pytest.raises(ValueError):
            CursorPagination(size=51)


class TestCursorPage:
    """Tests for CursorPage.from_rows."""

    def _rows(self, count: int) -> list[Row]:
        return [
            Row(id=f"row-{i}", created_at=datetime(2024, 1, 1, 0, 0, i, tzinfo=timezone.utc))
            for i in range(count)
        ]

    def test_extra_row_produces_next_cursor_at_last_returned_row(self):
        # Arrange
        rows = self._rows(4)

        # Act
        page = CursorPage.from_rows(rows, size=3)

        # Assert
        assert [r.id for r in page.data] == ["row-0", "row-1", "row-2"]
        assert page.meta.size == 3
        cursor = decode_cursor(page.meta.next_cursor)
        assert cursor.id == "row-2"
        assert cursor.created_at == rows[2].created_at

    def test_no_extra_row_means_last_page(self):
        page = CursorPage.from_rows(self._rows(3), size=3)

        assert len(page.data) == 3
        assert page.meta.next_cursor is None

    def test_empty(self):
        page = CursorPage.from_rows([], size=3)

        assert page.data == []
        assert page.meta.size == 0
        assert page.meta.next_cursor is None

"""Tests for Relay edge range calculation."""

import itertools

import pytest

from relay_pagination.exceptions import InvalidArgumentError, MalformedCursorError
from relay_pagination.models.pagination import EdgeRange
from relay_pagination.services.edge_range import calculate_edge_range
from relay_pagination.utils.cursor import encode_cursor


def _bounds(edge_range: EdgeRange) -> tuple[int, int]:
    return edge_range.start_index, edge_range.end_index


class TestForwardPagination:
    """Tests for first/after."""

    def test_no_arguments_returns_everything(self) -> None:
        edge_range = calculate_edge_range(10)
        assert edge_range == EdgeRange(start_index=0, end_index=10, has_previous=False, has_next=False)

    def test_first_only(self) -> None:
        edge_range = calculate_edge_range(10, first=3)
        assert _bounds(edge_range) == (0, 3)
        assert edge_range.has_previous is False
        assert edge_range.has_next is True

    def test_after_and_first(self) -> None:
        edge_range = calculate_edge_range(10, first=3, after=encode_cursor(2))
        assert _bounds(edge_range) == (3, 6)
        assert edge_range.has_previous is True
        assert edge_range.has_next is True

    def test_first_larger_than_remaining(self) -> None:
        edge_range = calculate_edge_range(10, first=50, after=encode_cursor(7))
        assert _bounds(edge_range) == (8, 10)
        assert edge_range.has_next is False

    def test_first_zero_is_empty(self) -> None:
        edge_range = calculate_edge_range(10, first=0)
        assert _bounds(edge_range) == (0, 0)
        assert edge_range.count == 0
        assert edge_range.has_next is True

    def test_after_last_item(self) -> None:
        edge_range = calculate_edge_range(10, first=5, after=encode_cursor(9))
        assert _bounds(edge_range) == (10, 10)
        assert edge_range.has_previous is True
        assert edge_range.has_next is False

    def test_after_beyond_end_is_clamped(self) -> None:
        edge_range = calculate_edge_range(10, first=5, after=encode_cursor(42))
        assert _bounds(edge_range) == (10, 10)
        assert edge_range.has_previous is True
        assert edge_range.has_next is False


class TestBackwardPagination:
    """Tests for last/before."""

    def test_last_only(self) -> None:
        edge_range = calculate_edge_range(10, last=3)
        assert _bounds(edge_range) == (7, 10)
        assert edge_range.has_previous is True
        assert edge_range.has_next is False

    def test_before_and_last(self) -> None:
        edge_range = calculate_edge_range(10, last=3, before=encode_cursor(7))
        assert _bounds(edge_range) == (4, 7)
        assert edge_range.has_previous is True
        assert edge_range.has_next is True

    def test_last_larger_than_available(self) -> None:
        edge_range = calculate_edge_range(10, last=5, before=encode_cursor(2))
        assert _bounds(edge_range) == (0, 2)
        assert edge_range.has_previous is False

    def test_before_first_item(self) -> None:
        edge_range = calculate_edge_range(10, last=5, before=encode_cursor(0))
        assert _bounds(edge_range) == (0, 0)
        assert edge_range.has_previous is False
        assert edge_range.has_next is True

    def test_before_beyond_end_is_ignored(self) -> None:
        edge_range = calculate_edge_range(10, before=encode_cursor(99))
        assert _bounds(edge_range) == (0, 10)
        assert edge_range.has_next is False


class TestCombinedPagination:
    """Tests for forward and backward arguments together."""

    def test_first_then_last(self) -> None:
        edge_range = calculate_edge_range(10, first=5, last=2)
        assert _bounds(edge_range) == (3, 5)
        assert edge_range.has_previous is True
        assert edge_range.has_next is True

    def test_last_never_expands_past_first(self) -> None:
        edge_range = calculate_edge_range(10, first=2, last=5)
        assert _bounds(edge_range) == (0, 2)

    def test_after_and_before(self) -> None:
        edge_range = calculate_edge_range(10, after=encode_cursor(2), before=encode_cursor(6))
        assert _bounds(edge_range) == (3, 6)

    def test_after_past_before_is_empty(self) -> None:
        edge_range = calculate_edge_range(10, after=encode_cursor(6), before=encode_cursor(3))
        assert _bounds(edge_range) == (3, 3)
        assert edge_range.count == 0

    def test_all_four_arguments(self) -> None:
        edge_range = calculate_edge_range(
            20,
            first=6,
            after=encode_cursor(4),
            last=2,
            before=encode_cursor(15),
        )
        # after -> [5, 20), before -> [5, 15), first -> [5, 11), last -> [9, 11)
        assert _bounds(edge_range) == (9, 11)


class TestEmptyCollection:
    """Tests for a zero-length collection."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {},
            {"first": 5},
            {"last": 5},
            {"first": 5, "after": encode_cursor(3)},
            {"last": 5, "before": encode_cursor(3)},
        ],
    )
    def test_always_empty(self, kwargs: dict) -> None:
        edge_range = calculate_edge_range(0, **kwargs)
        assert _bounds(edge_range) == (0, 0)
        assert edge_range.has_previous is False
        assert edge_range.has_next is False


class TestInvalidArguments:
    """Tests for rejected arguments."""

    def test_negative_first(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            calculate_edge_range(10, first=-1)
        assert exc_info.value.context == {"argument": "first", "value": -1}

    def test_negative_last(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            calculate_edge_range(10, last=-1)
        assert exc_info.value.context["argument"] == "last"

    def test_negative_total(self) -> None:
        with pytest.raises(InvalidArgumentError):
            calculate_edge_range(-1)

    def test_malformed_after(self) -> None:
        with pytest.raises(MalformedCursorError):
            calculate_edge_range(10, first=2, after="bogus")

    def test_malformed_before(self) -> None:
        with pytest.raises(MalformedCursorError):
            calculate_edge_range(10, last=2, before="bogus")


def test_bounds_and_flags_hold_for_all_inputs() -> None:
    """Sweep small inputs and check range bounds and flag consistency."""
    counts = [None, 0, 1, 3, 12]
    offsets = [None, 0, 2, 5, 11]
    for total in (0, 1, 5, 10):
        for first, last, after, before in itertools.product(counts, counts, offsets, offsets):
            edge_range = calculate_edge_range(
                total,
                first=first,
                after=encode_cursor(after) if after is not None else None,
                last=last,
                before=encode_cursor(before) if before is not None else None,
            )
            assert 0 <= edge_range.start_index <= edge_range.end_index <= total
            assert edge_range.has_previous == (edge_range.start_index > 0)
            assert edge_range.has_next == (edge_range.end_index < total)

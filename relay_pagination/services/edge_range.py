"""Relay edge range calculation.

Translates the four Relay pagination arguments into a half-open index
range over a sequence of ``total_edge_count`` items. Forward arguments
(``after``/``first``) narrow the window from the left, backward arguments
(``before``/``last``) from the right, in the order of the Relay cursor
connections algorithm:

1. ``after`` moves the start past the cursor's offset.
2. ``before`` moves the end to the cursor's offset.
3. ``first`` caps the end at ``start + first``.
4. ``last`` raises the start to ``end - last``.

``first`` is applied before ``last``. When both are given the window can
only shrink; swapping the two steps changes the result.
"""

from __future__ import annotations

from relay_pagination.exceptions import InvalidArgumentError
from relay_pagination.models.pagination import EdgeRange
from relay_pagination.utils.cursor import decode_cursor


def _require_non_negative(name: str, value: int | None) -> None:
    if value is not None and value < 0:
        msg = f"{name} must be non-negative"
        raise InvalidArgumentError(msg, context={"argument": name, "value": value})


def calculate_edge_range(
    total_edge_count: int,
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
) -> EdgeRange:
    """Compute the slice bounds and page flags for a pagination request.

    Args:
        total_edge_count: Number of items in the full sequence
        first: Maximum number of items to return from the start of the window
        after: Cursor of the item to start after (exclusive)
        last: Maximum number of items to return from the end of the window
        before: Cursor of the item to end before (exclusive)

    Returns:
        EdgeRange with ``0 <= start_index <= end_index <= total_edge_count``

    Raises:
        InvalidArgumentError: If ``total_edge_count``, ``first`` or ``last`` is negative
        MalformedCursorError: If ``after`` or ``before`` cannot be decoded
    """
    _require_non_negative("total_edge_count", total_edge_count)
    _require_non_negative("first", first)
    _require_non_negative("last", last)

    start = 0
    end = total_edge_count

    if after is not None:
        start = max(start, decode_cursor(after) + 1)

    if before is not None:
        end = min(end, decode_cursor(before))

    if first is not None:
        end = min(end, start + first)

    if last is not None:
        start = max(start, end - last)

    # after beyond before, or after past the end
    if start > end:
        start = end

    return EdgeRange(
        start_index=start,
        end_index=end,
        has_previous=start > 0,
        has_next=end < total_edge_count,
    )

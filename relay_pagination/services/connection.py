"""Assemble a Relay connection from an already-sliced page of items."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from relay_pagination.exceptions import InvalidArgumentError
from relay_pagination.models.pagination import Connection, Edge, PageInfo
from relay_pagination.utils.cursor import encode_cursor

T = TypeVar("T")


def build_connection(
    items: Iterable[T],
    start_index: int,
    has_previous: bool,
    has_next: bool,
    total_count: int | None = None,
) -> Connection[T]:
    """Build a connection for a page of items.

    Args:
        items: Items already restricted to the computed range, in order
        start_index: Absolute offset of the first item in the full sequence
        has_previous: Whether items exist before the page
        has_next: Whether items exist after the page
        total_count: Caller-supplied total, passed through unchanged

    Returns:
        Connection with one edge per item; cursors encode absolute offsets
    """
    if start_index < 0:
        msg = "start_index must be non-negative"
        raise InvalidArgumentError(msg, context={"argument": "start_index", "value": start_index})

    edges = [
        Edge(node=item, cursor=encode_cursor(start_index + i))
        for i, item in enumerate(items)
    ]

    page_info = PageInfo(
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
        has_previous_page=has_previous,
        has_next_page=has_next,
    )

    return Connection(edges=edges, page_info=page_info, total_count=total_count)

"""
Pagination flows that sit between a resolver and the slicing core.

The resolver builds a PaginationRequest, the effective ``first`` is picked
(explicit value, configured page size, or the full edge count), the edge
range is calculated, the data for that range is sliced or fetched, and the
page is assembled into a Connection.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from relay_pagination.config import get_settings
from relay_pagination.models.pagination import Connection, EdgeRange, PaginationRequest
from relay_pagination.services.connection import build_connection
from relay_pagination.services.edge_range import calculate_edge_range

if TYPE_CHECKING:
    from relay_pagination.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

SliceFetcher = Callable[[int, int], Iterable[T]]
AsyncSliceFetcher = Callable[[int, int], Awaitable[Iterable[T]]]


def build_pagination_request(
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
    page_size: int | None = None,
    settings: Settings | None = None,
) -> PaginationRequest:
    """
    Build a request from raw caller arguments.

    When no page size is given, the configured ``default_page_size`` is
    used (which may itself be unset).
    """
    if page_size is None:
        page_size = (settings or get_settings()).default_page_size

    return PaginationRequest(
        first=first,
        after=after,
        last=last,
        before=before,
        page_size=page_size,
    )


def effective_first(request: PaginationRequest, edge_count: int) -> int | None:
    """
    Resolve the ``first`` value to calculate with.

    Only when ``first`` is absent and no backward pagination (``last`` or
    ``before``) was requested is a fallback substituted: the page size, or
    the whole edge count without one.
    """
    if request.first is None and not request.is_backward:
        return request.page_size if request.page_size is not None else edge_count
    return request.first


def edges_to_return(request: PaginationRequest, edge_count: int) -> EdgeRange:
    """Calculate the edge range for a request over ``edge_count`` items."""
    edge_range = calculate_edge_range(
        edge_count,
        first=effective_first(request, edge_count),
        after=request.after,
        last=request.last,
        before=request.before,
    )
    logger.debug(
        "Calculated edge range",
        extra={
            "edge_count": edge_count,
            "start_index": edge_range.start_index,
            "end_index": edge_range.end_index,
            "has_previous": edge_range.has_previous,
            "has_next": edge_range.has_next,
        },
    )
    return edge_range


@dataclass(frozen=True)
class SliceMetrics(Generic[T]):
    """The page cut out of a fully materialized sequence."""

    items: list[T]
    start_index: int
    total_count: int
    has_previous: bool
    has_next: bool

    @classmethod
    def create(
        cls,
        items: Iterable[T],
        request: PaginationRequest,
        total_count: int | None = None,
    ) -> SliceMetrics[T]:
        """
        Slice ``items`` according to ``request``.

        Args:
            items: The full ordered sequence; iterators are materialized first
            request: Pagination arguments
            total_count: Item count to paginate over; defaults to ``len(items)``
        """
        if not isinstance(items, Sequence):
            items = list(items)
        if total_count is None:
            total_count = len(items)

        edge_range = edges_to_return(request, total_count)
        return cls(
            items=list(items[edge_range.start_index:edge_range.end_index]),
            start_index=edge_range.start_index,
            total_count=total_count,
            has_previous=edge_range.has_previous,
            has_next=edge_range.has_next,
        )


def to_connection(
    request: PaginationRequest,
    items: Iterable[T],
    total_count: int | None = None,
) -> Connection[T]:
    """Paginate the full ordered sequence of items into a connection."""
    metrics = SliceMetrics.create(items, request, total_count)
    return build_connection(
        metrics.items,
        start_index=metrics.start_index,
        has_previous=metrics.has_previous,
        has_next=metrics.has_next,
        total_count=metrics.total_count,
    )


def resolve_connection(
    request: PaginationRequest,
    total_count: int,
    fetch_slice: SliceFetcher[T],
) -> Connection[T]:
    """
    Paginate a data source that is fetched per range.

    ``fetch_slice(start_index, end_index)`` must return the items of that
    half-open range in order. It is not called for an empty range.
    """
    edge_range = edges_to_return(request, total_count)
    items: Iterable[T] = []
    if edge_range.count:
        items = fetch_slice(edge_range.start_index, edge_range.end_index)

    return build_connection(
        items,
        start_index=edge_range.start_index,
        has_previous=edge_range.has_previous,
        has_next=edge_range.has_next,
        total_count=total_count,
    )


async def resolve_connection_async(
    request: PaginationRequest,
    total_count: int,
    fetch_slice: AsyncSliceFetcher[T],
) -> Connection[T]:
    """Async variant of :func:`resolve_connection` for awaitable fetchers."""
    edge_range = edges_to_return(request, total_count)
    items: Iterable[T] = []
    if edge_range.count:
        items = await fetch_slice(edge_range.start_index, edge_range.end_index)

    return build_connection(
        items,
        start_index=edge_range.start_index,
        has_previous=edge_range.has_previous,
        has_next=edge_range.has_next,
        total_count=total_count,
    )

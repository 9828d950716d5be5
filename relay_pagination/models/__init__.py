"""Models for relay-pagination."""

from relay_pagination.models.pagination import (
    Connection,
    Edge,
    EdgeRange,
    PageInfo,
    PaginationRequest,
)

__all__ = [
    "Connection",
    "Edge",
    "EdgeRange",
    "PageInfo",
    "PaginationRequest",
]

"""Relay-style cursor pagination slicing."""

from relay_pagination.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    MalformedCursorError,
    PaginationError,
    RelayPaginationError,
)
from relay_pagination.models import (
    Connection,
    Edge,
    EdgeRange,
    PageInfo,
    PaginationRequest,
)
from relay_pagination.services.connection import build_connection
from relay_pagination.services.edge_range import calculate_edge_range
from relay_pagination.services.paginator import (
    SliceMetrics,
    build_pagination_request,
    edges_to_return,
    effective_first,
    resolve_connection,
    resolve_connection_async,
    to_connection,
)
from relay_pagination.utils.cursor import decode_cursor, encode_cursor

__all__ = [
    "ConfigurationError",
    "Connection",
    "Edge",
    "EdgeRange",
    "InvalidArgumentError",
    "MalformedCursorError",
    "PageInfo",
    "PaginationError",
    "PaginationRequest",
    "RelayPaginationError",
    "SliceMetrics",
    "build_connection",
    "build_pagination_request",
    "calculate_edge_range",
    "decode_cursor",
    "edges_to_return",
    "effective_first",
    "encode_cursor",
    "resolve_connection",
    "resolve_connection_async",
    "to_connection",
]

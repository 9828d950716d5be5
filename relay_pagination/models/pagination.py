"""Models for Relay-style pagination requests and connections."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class PaginationRequest(BaseModel):
    """Forward/backward pagination arguments for a single request.

    ``None`` means the argument was not supplied; ``first=0`` is a real
    request for zero items.
    """

    first: int | None = Field(None, description="Number of items to return after `after`")
    after: str | None = Field(None, description="Cursor to start after (exclusive)")
    last: int | None = Field(None, description="Number of items to return before `before`")
    before: str | None = Field(None, description="Cursor to end before (exclusive)")
    page_size: int | None = Field(
        None,
        alias="pageSize",
        description="Default page size used when neither `first` nor `last` is supplied",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def is_backward(self) -> bool:
        """Whether backward pagination (`last`/`before`) was requested."""
        return self.last is not None or self.before is not None


class EdgeRange(BaseModel):
    """Half-open index range ``[start_index, end_index)`` to slice."""

    start_index: int = Field(..., ge=0, alias="startIndex", description="First index to return")
    end_index: int = Field(..., ge=0, alias="endIndex", description="Index after the last one to return")
    has_previous: bool = Field(..., alias="hasPrevious", description="Items exist before the range")
    has_next: bool = Field(..., alias="hasNext", description="Items exist after the range")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="after")
    def _check_order(self) -> EdgeRange:
        if self.end_index < self.start_index:
            msg = "end_index must not be smaller than start_index"
            raise ValueError(msg)
        return self

    @property
    def count(self) -> int:
        """Number of edges in the range."""
        return self.end_index - self.start_index


class Edge(BaseModel, Generic[T]):
    """A node paired with the cursor of its absolute offset."""

    node: T = Field(..., description="The paginated item")
    cursor: str = Field(..., description="Opaque cursor for this edge")

    model_config = ConfigDict(frozen=True)


class PageInfo(BaseModel):
    """Position of the current page within the full sequence."""

    start_cursor: str | None = Field(None, alias="startCursor", description="Cursor of the first edge")
    end_cursor: str | None = Field(None, alias="endCursor", description="Cursor of the last edge")
    has_previous_page: bool = Field(..., alias="hasPreviousPage", description="Items exist before this page")
    has_next_page: bool = Field(..., alias="hasNextPage", description="Items exist after this page")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Connection(BaseModel, Generic[T]):
    """Paginated result: edges, page info and an optional total count."""

    edges: list[Edge[T]] = Field(default_factory=list, description="Edges in sequence order")
    page_info: PageInfo = Field(..., alias="pageInfo", description="Page position summary")
    total_count: int | None = Field(None, alias="totalCount", description="Total number of items")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def nodes(self) -> list[T]:
        """Nodes of all edges, in order."""
        return [edge.node for edge in self.edges]

    def to_payload(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting an absent total count."""
        payload = self.model_dump(by_alias=True)
        if self.total_count is None:
            payload.pop("totalCount", None)
        return payload

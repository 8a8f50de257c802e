"""Pagination schemas for page-number pagination."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PagedResponse(BaseModel, Generic[T]):
    """Generic paginated response with page-number pagination.

    Pages are 1-based and have a fixed size chosen by the server. A page
    past the end returns no items but still reports the total.
    """

    items: list[T]
    total: int = Field(description="Number of items across all pages.")
    page: int = Field(description="1-based page number of this response.")
    per_page: int = Field(description="Maximum number of items per page.")
    pages: int = Field(description="Total number of pages.")

"""Pagination models."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageInfo(BaseModel):
    """Position of one page within a collection."""

    page_number: int = Field(..., ge=1, description="Current page number (1-indexed)")
    page_size: int = Field(..., ge=1, description="Maximum number of items on a page")
    total_count: int = Field(..., ge=0, description="Number of items in the whole collection")
    total_pages: int = Field(..., ge=0, description="Number of pages in the whole collection")
    has_previous: bool = Field(..., description="Whether a page precedes this one")
    has_next: bool = Field(..., description="Whether a page follows this one")
    previous_page_number: int | None = Field(None, description="Previous page number, if any")
    next_page_number: int | None = Field(None, description="Next page number, if any")


class Page(BaseModel, Generic[T]):
    """Slice of a collection together with its position in the whole."""

    items: list[T] = Field(default_factory=list, description="Items on this page, in collection order")
    total_count: int = Field(..., ge=0, alias="totalCount")
    page_number: int = Field(..., ge=1, alias="pageNumber")
    page_size: int = Field(..., ge=1, alias="pageSize")
    has_previous: bool = Field(..., alias="hasPrevious")
    has_next: bool = Field(..., alias="hasNext")

    model_config = ConfigDict(populate_by_name=True)


class PaginationHeader(BaseModel):
    """Payload of the X-Pagination response header."""

    previous_page_link: str | None = Field(None, alias="previousPageLink")
    next_page_link: str | None = Field(None, alias="nextPageLink")
    total_count: int = Field(..., alias="totalCount")
    page_size: int = Field(..., alias="pageSize")
    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)

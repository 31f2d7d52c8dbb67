"""Pydantic DTOs for the read side: public listing, editor search, pagination."""

from pydantic import BaseModel

from backoffice.application.schemas.article import ArticleResponse, SlugResponse
from backoffice.application.schemas.user import UserResponse


class PaginationMeta(BaseModel):
    page: int
    page_size: int
    total_items: int
    total_pages: int
    has_previous: bool
    has_next: bool


class PublicListingEntry(BaseModel):
    """One line of the public article list."""

    id: int
    slug: str
    label: str
    created_on: str
    href: str


class PublicListingResponse(BaseModel):
    items: list[PublicListingEntry]
    pagination: PaginationMeta


class SlugSearchResponse(BaseModel):
    items: list[SlugResponse]
    pagination: PaginationMeta


class ArticleSearchResponse(BaseModel):
    items: list[ArticleResponse]


class UserListResponse(BaseModel):
    items: list[UserResponse]
    pagination: PaginationMeta


class RowActionsResponse(BaseModel):
    context: str
    target: str
    actions: list[str]

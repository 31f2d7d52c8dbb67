"""Shared helpers for endpoints returning a ``Page``."""

from fastapi import HTTPException, status

from backoffice.application.schemas import PaginationMeta
from backoffice.application.services import Page
from backoffice.domain.exceptions import InputValidationError


def pagination_meta(page: Page) -> PaginationMeta:
    return PaginationMeta(
        page=page.page,
        page_size=page.page_size,
        total_items=page.total_items,
        total_pages=page.total_pages,
        has_previous=page.has_previous,
        has_next=page.has_next,
    )


def bad_request(exc: InputValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.field_errors)

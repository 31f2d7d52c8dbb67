"""Public article endpoints: the listing and the article page."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backoffice.application.schemas import (
    ArticleResponse,
    PublicListingEntry,
    PublicListingResponse,
)
from backoffice.application.services import ListingService
from backoffice.domain.exceptions import EntityNotFoundError, InputValidationError
from backoffice.infrastructure.dependencies import get_listing_service
from backoffice.presentation.api.v1.endpoints._pagination import bad_request, pagination_meta

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=PublicListingResponse)
async def list_articles(
    page: int | None = Query(None),
    page_size: int | None = Query(None),
    service: ListingService = Depends(get_listing_service),
) -> PublicListingResponse:
    """Validated articles, one page at a time."""
    try:
        result = await service.public_listing(page=page, page_size=page_size)
    except InputValidationError as e:
        raise bad_request(e)
    return PublicListingResponse(
        items=[PublicListingEntry.model_validate(entry, from_attributes=True) for entry in result.items],
        pagination=pagination_meta(result),
    )


@router.get("/{slug}", response_model=ArticleResponse)
async def get_article(
    slug: str,
    service: ListingService = Depends(get_listing_service),
) -> ArticleResponse:
    """Retrieve a published article by its slug."""
    try:
        article = await service.public_article(slug)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)

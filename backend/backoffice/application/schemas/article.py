"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from backoffice.domain.entities import UrlType


class ArticleUrlSchema(BaseModel):
    """One typed external link attached to an article."""

    type: UrlType
    url: str = Field(..., min_length=1, examples=["https://example.org/interview"])
    credits: str | None = None

    model_config = {"str_strip_whitespace": True, "from_attributes": True}

    @field_validator("url")
    @classmethod
    def _must_be_http_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("must be an absolute http(s) URL")
        return value


class ArticleCreate(BaseModel):
    """Schema for creating a new article. Slug is derived from the title."""

    title: str = Field(..., min_length=2, max_length=50, examples=["Wash the Sins!"])
    introduction: str = Field(..., min_length=20)
    main: str = Field(..., min_length=50)
    main_audio_url: str = Field(..., min_length=1)
    url_to_main_illustration: str = Field(..., min_length=1)
    urls: list[ArticleUrlSchema] = Field(default_factory=list)

    model_config = {"str_strip_whitespace": True}


class ArticleUpdate(BaseModel):
    """Schema for editing an article's content: all fields optional.

    ``title`` and ``slug`` are fixed at creation; sending either (or any
    workflow field) is rejected as an unknown field.
    """

    introduction: str | None = Field(None, min_length=20)
    main: str | None = Field(None, min_length=50)
    main_audio_url: str | None = Field(None, min_length=1)
    url_to_main_illustration: str | None = Field(None, min_length=1)
    urls: list[ArticleUrlSchema] | None = None

    model_config = {"str_strip_whitespace": True, "extra": "forbid"}


class RecordIdentifier(BaseModel):
    id: int = Field(..., ge=1)


class ValidateArticleRequest(RecordIdentifier):
    validated: bool


class ShipArticleRequest(RecordIdentifier):
    shipped: bool


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    slug: str
    title: str
    introduction: str
    main: str
    main_audio_url: str
    url_to_main_illustration: str
    urls: list[ArticleUrlSchema]
    author: str
    author_email: str
    validated: bool
    shipped: bool
    published_at: datetime | None
    created_at: datetime
    updated_at: datetime
    updated_by: str | None

    model_config = {"from_attributes": True}


class SlugResponse(BaseModel):
    id: int
    slug: str
    article_id: int
    validated: bool
    created_at: datetime

    model_config = {"from_attributes": True}

"""Domain entities for editorial articles: pure Python, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class UrlType(str, Enum):
    """Kinds of external links attached to an article."""

    WEBSITE = "website"
    VIDEOS = "videos"
    AUDIO = "audio"
    SOCIAL = "social"
    IMAGE = "image"


@dataclass
class ArticleUrl:
    """A typed external link, optionally credited."""

    type: UrlType
    url: str
    credits: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value, "url": self.url}
        if self.credits:
            data["credits"] = self.credits
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArticleUrl":
        return cls(
            type=UrlType(data["type"]),
            url=data["url"],
            credits=data.get("credits"),
        )


@dataclass
class Article:
    """Core domain entity representing an editorial article.

    ``slug`` and ``title`` are fixed at creation. ``validated`` and
    ``shipped`` carry the editorial workflow state: an article can only be
    shipped (online) once validated, and any content edit sends it back to
    draft.
    """

    slug: str
    title: str
    introduction: str
    main: str
    main_audio_url: str
    url_to_main_illustration: str
    author: str
    author_email: str
    urls: list[ArticleUrl] = field(default_factory=list)
    id: int | None = None
    validated: bool = False
    shipped: bool = False
    published_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_by: str | None = None

    @property
    def is_draft(self) -> bool:
        return not self.validated and not self.shipped

    @property
    def is_live(self) -> bool:
        return self.validated and self.shipped

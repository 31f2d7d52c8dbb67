"""Domain entity for the slug index: one row per article."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Slug:
    """Denormalized index record mirroring an article's slug and validation flag."""

    slug: str
    article_id: int
    validated: bool = False
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

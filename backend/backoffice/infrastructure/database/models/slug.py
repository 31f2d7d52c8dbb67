"""SQLAlchemy ORM model for the slug index."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.infrastructure.database.base import Base


class SlugModel(Base):
    """ORM model: maps to the 'slugs' table.

    ``article_id`` references ``articles.id`` logically only: the two rows
    are written and deleted by independent statements, so no database-level
    constraint ties their lifetimes together.
    """

    __tablename__ = "slugs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    article_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)
    validated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<SlugModel(article_id={self.article_id}, slug='{self.slug}')>"

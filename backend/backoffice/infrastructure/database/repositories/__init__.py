from .article_repository import SQLAlchemyArticleRepository
from .slug_repository import SQLAlchemySlugRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemySlugRepository",
    "SQLAlchemyUserRepository",
]

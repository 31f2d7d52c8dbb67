from .article import Article, ArticleUrl, UrlType
from .slug import Slug
from .user import Actor, User, UserRole

__all__ = [
    "Article",
    "ArticleUrl",
    "UrlType",
    "Slug",
    "Actor",
    "User",
    "UserRole",
]

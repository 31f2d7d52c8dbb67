from .article import ArticleModel
from .slug import SlugModel
from .user import UserModel

__all__ = [
    "ArticleModel",
    "SlugModel",
    "UserModel",
]

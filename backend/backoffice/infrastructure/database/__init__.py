from .base import Base
from .session import engine, async_session_factory, get_session_factory, storage_session
from .models import ArticleModel, SlugModel, UserModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_session_factory",
    "storage_session",
    "ArticleModel",
    "SlugModel",
    "UserModel",
]

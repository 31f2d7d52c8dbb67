from .article_repository import ArticleRepository
from .session_provider import SessionProvider
from .slug_repository import SlugRepository
from .user_repository import UserRepository
from .write_result import WriteResult, WriteStatus, is_written

__all__ = [
    "ArticleRepository",
    "SessionProvider",
    "SlugRepository",
    "UserRepository",
    "WriteResult",
    "WriteStatus",
    "is_written",
]

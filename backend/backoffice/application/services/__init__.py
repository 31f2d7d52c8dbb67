from .article_service import ArticleService, CreateOutcome, DeleteOutcome, ValidateOutcome
from .listing_service import ListingService, Page, PublicEntry, paginate, row_actions
from .user_service import UserService
from .action_dispatcher import ActionDispatcher

__all__ = [
    "ArticleService",
    "CreateOutcome",
    "DeleteOutcome",
    "ValidateOutcome",
    "ListingService",
    "Page",
    "PublicEntry",
    "paginate",
    "row_actions",
    "UserService",
    "ActionDispatcher",
]

from .action import ActionResult, SessionResponse
from .article import (
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    ArticleUrlSchema,
    RecordIdentifier,
    ShipArticleRequest,
    SlugResponse,
    ValidateArticleRequest,
)
from .listing import (
    ArticleSearchResponse,
    PaginationMeta,
    PublicListingEntry,
    PublicListingResponse,
    RowActionsResponse,
    SlugSearchResponse,
    UserListResponse,
)
from .user import (
    RolePermissionsResponse,
    UserCreate,
    UserEmailRequest,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "ActionResult",
    "SessionResponse",
    "ArticleCreate",
    "ArticleResponse",
    "ArticleUpdate",
    "ArticleUrlSchema",
    "RecordIdentifier",
    "ShipArticleRequest",
    "SlugResponse",
    "ValidateArticleRequest",
    "ArticleSearchResponse",
    "PaginationMeta",
    "PublicListingEntry",
    "PublicListingResponse",
    "RowActionsResponse",
    "SlugSearchResponse",
    "UserListResponse",
    "RolePermissionsResponse",
    "UserCreate",
    "UserEmailRequest",
    "UserResponse",
    "UserUpdate",
]

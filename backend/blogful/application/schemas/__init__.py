from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ErrorDetail",
    "ErrorResponse",
]

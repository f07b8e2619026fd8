from .article import (
    UPDATABLE_FIELDS,
    Article,
    ArticleDraft,
    ArticleStyle,
    ArticleUpdateCommand,
)

__all__ = [
    "UPDATABLE_FIELDS",
    "Article",
    "ArticleDraft",
    "ArticleStyle",
    "ArticleUpdateCommand",
]

from .article_service import ArticleService, parse_article_id

__all__ = [
    "ArticleService",
    "parse_article_id",
]

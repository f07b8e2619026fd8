"""Article CRUD endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from blogful.application.sanitizer import sanitize
from blogful.application.schemas import (
    ArticleCreate,
    ArticleResponse,
    ErrorResponse,
)
from blogful.application.services import ArticleService
from blogful.domain.entities import Article
from blogful.domain.exceptions import EntityNotFoundError, ValidationError
from blogful.infrastructure.dependencies import get_article_service

ARTICLES_PATH = "/api/articles"

router = APIRouter(
    prefix="/articles",
    tags=["Articles"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


def _to_response(article: Article) -> ArticleResponse:
    """Every article leaving the API goes through here."""
    return ArticleResponse.model_validate(sanitize(article), from_attributes=True)


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article."""
    articles = await service.list_articles()
    return [_to_response(a) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(article)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    response: Response,
    data: ArticleCreate | None = None,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article and point ``Location`` at it."""
    try:
        article = await service.create_article(data or ArticleCreate())
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    response.headers["Location"] = f"{ARTICLES_PATH}/{article.id}"
    return _to_response(article)


@router.patch("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_article(
    article_id: str,
    payload: Any = Body(None),
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Partially update an existing article.

    The body is taken raw and validated after the lookup, so an unknown ID
    is a 404 whatever the body looks like.
    """
    try:
        await service.update_article(article_id, payload)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

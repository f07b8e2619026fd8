"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from blogful.domain.entities import ArticleStyle


class ArticleCreate(BaseModel):
    """Schema for creating a new article.

    Fields are optional at the schema level so that presence is checked by the
    validator, which reports the first missing field in a fixed order.
    Unknown keys (including ``id`` and ``date_published``) are ignored.
    """

    title: str | None = Field(None, examples=["Getting Started"])
    style: str | None = Field(None, examples=[ArticleStyle.LISTICLE.value])
    content: str | None = Field(None, examples=["1) Chris Hemsworth 2) Liam Hemsworth"])


class ArticleUpdate(BaseModel):
    """Schema for partially updating an existing article — all fields optional."""

    title: str | None = None
    style: str | None = None
    content: str | None = None


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    style: ArticleStyle
    content: str
    date_published: datetime

    model_config = {"from_attributes": True}


class ErrorDetail(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Uniform error body: ``{"error": {"message": ...}}``."""

    error: ErrorDetail

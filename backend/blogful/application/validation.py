"""Request payload validation for article writes.

Validation always runs before the repository is touched, so a rejected
payload never causes a partial write.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError as PayloadValidationError

from blogful.application.schemas import ArticleCreate, ArticleUpdate
from blogful.domain.entities import (
    UPDATABLE_FIELDS,
    ArticleDraft,
    ArticleStyle,
    ArticleUpdateCommand,
)
from blogful.domain.exceptions import (
    EmptyUpdateError,
    InvalidFieldError,
    MissingFieldError,
    ValidationError,
)

REQUIRED_FIELDS: tuple[str, ...] = ("title", "style", "content")


def describe_payload_errors(errors: Sequence[dict]) -> str:
    """Turn the first pydantic error into a client-facing message."""
    if not errors:
        return "Invalid request body"
    loc = [part for part in errors[0].get("loc", ()) if part != "body"]
    if not loc:
        return "Request body must be a JSON object"
    return f"Invalid '{loc[0]}' in request body"


def parse_update_payload(raw: Any) -> ArticleUpdate:
    """Coerce a raw PATCH body into ``ArticleUpdate``.

    Runs after the article lookup, so an unknown ID wins over a malformed body.
    """
    if raw is None:
        return ArticleUpdate()
    if isinstance(raw, ArticleUpdate):
        return raw
    try:
        return ArticleUpdate.model_validate(raw)
    except PayloadValidationError as exc:
        raise ValidationError(describe_payload_errors(exc.errors())) from None


def _parse_style(value: str) -> ArticleStyle:
    try:
        return ArticleStyle(value)
    except ValueError:
        raise InvalidFieldError("style", ArticleStyle.values()) from None


def validate_new_article(payload: ArticleCreate) -> ArticleDraft:
    """Check that every required field is present and non-empty.

    Fields are checked in ``REQUIRED_FIELDS`` order so the first missing one
    is reported deterministically.
    """
    for name in REQUIRED_FIELDS:
        if not getattr(payload, name):
            raise MissingFieldError(name)

    return ArticleDraft(
        title=payload.title,
        style=_parse_style(payload.style),
        content=payload.content,
    )


def validate_article_update(raw: Any) -> ArticleUpdateCommand:
    """Build an update command from the supplied fields.

    ``raw`` is either an ``ArticleUpdate`` or the decoded JSON body.

    Empty strings count as "not supplied". At least one updatable field
    must remain, otherwise ``EmptyUpdateError`` is raised.
    """
    payload = parse_update_payload(raw)
    command = ArticleUpdateCommand(
        title=payload.title or None,
        style=_parse_style(payload.style) if payload.style else None,
        content=payload.content or None,
    )
    if command.is_empty():
        raise EmptyUpdateError(UPDATABLE_FIELDS)
    return command

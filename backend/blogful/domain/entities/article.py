"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


class ArticleStyle(str, Enum):
    """Fixed set of editorial categories an article can belong to."""

    LISTICLE = "Listicle"
    HOW_TO = "How-to"
    NEWS = "News"
    STORY = "Story"
    INTERVIEW = "Interview"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


UPDATABLE_FIELDS: tuple[str, ...] = ("title", "style", "content")


@dataclass
class Article:
    """Core domain entity representing a published blog article."""

    title: str
    style: ArticleStyle
    content: str
    id: int | None = None
    date_published: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class ArticleDraft:
    """A validated creation payload — storage assigns ``id`` and ``date_published``."""

    title: str
    style: ArticleStyle
    content: str


@dataclass(frozen=True)
class ArticleUpdateCommand:
    """Partial update holding only the fields the client supplied.

    ``None`` means "not supplied"; ``id`` and ``date_published`` are never
    part of an update.
    """

    title: str | None = None
    style: ArticleStyle | None = None
    content: str | None = None

    def changes(self) -> dict[str, str | ArticleStyle]:
        """Return the supplied fields as a column → value mapping."""
        return {
            name: getattr(self, name)
            for name in UPDATABLE_FIELDS
            if getattr(self, name) is not None
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def apply_to(self, article: Article) -> Article:
        """Merge the supplied fields onto ``article``, returning a new entity."""
        return replace(article, **self.changes())

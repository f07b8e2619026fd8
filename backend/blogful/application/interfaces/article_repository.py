"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blogful.domain.entities import Article, ArticleDraft


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Implementations raise ``StorageError`` for any backend failure.
    """

    @abstractmethod
    async def list_all(self) -> list[Article]:
        """Retrieve every stored article ordered by ID."""
        ...

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def insert(self, draft: ArticleDraft) -> Article:
        """Persist a new article and return it with the generated ID and publish date."""
        ...

    @abstractmethod
    async def update_by_id(self, article_id: int, changes: dict) -> int:
        """Apply ``changes`` to one article. Returns the number of affected rows."""
        ...

    @abstractmethod
    async def delete_by_id(self, article_id: int) -> int:
        """Delete an article. Returns the number of affected rows."""
        ...

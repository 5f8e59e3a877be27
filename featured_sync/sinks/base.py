from abc import ABC, abstractmethod

from featured_sync.models import ArticleRecord


class ArticleSink(ABC):
    name: str

    @abstractmethod
    def stage(self, article: ArticleRecord) -> bool:
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @property
    @abstractmethod
    def staged_count(self) -> int:
        ...

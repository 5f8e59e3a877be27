import logging
from datetime import datetime, timezone
from typing import Any, Callable

from featured_sync import config
from featured_sync.models import ArticleRecord
from featured_sync.sinks.base import ArticleSink

log = logging.getLogger("featured_sync.sinks.firestore")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FirestoreArticleSink(ArticleSink):
    """
    Stages every article into one Firestore write batch.

    Documents live at `{collection}/{id}` and are written with a plain set(),
    so a later write for the same id replaces the whole document. Nothing is
    written until commit(); the batch is all-or-nothing.
    """

    name = "firestore"

    def __init__(self, db: Any, collection: str = config.ARTICLES_COLLECTION,
                 clock: Callable[[], datetime] = _utc_now):
        self.db = db
        self.collection = collection
        self.clock = clock
        self._batch = db.batch()
        self._staged = 0

    @property
    def staged_count(self) -> int:
        return self._staged

    def stage(self, article: ArticleRecord) -> bool:
        docid = "" if article.id is None else str(article.id)
        if not docid:
            log.warning("Missing pageid for article: %s", article.title or article.fields)
            return False

        doc_ref = self.db.document(f"{self.collection}/{docid}")
        self._batch.set(doc_ref, article.to_document(self.clock()))
        self._staged += 1
        return True

    async def commit(self) -> None:
        log.info("%s: committing %d article write(s) to '%s'.", self.name, self._staged, self.collection)
        await self._batch.commit()

import sys
import asyncio
import logging

from featured_sync import config
from featured_sync.budget import RetryBudget
from featured_sync.firebase import close_firestore_client, get_firestore_client
from featured_sync.http import open_session
from featured_sync.pipeline import update_articles
from featured_sync.sinks.firestore_sink import FirestoreArticleSink

log = logging.getLogger("featured_sync")


async def run() -> int:
    config.validate_required_env()
    db = get_firestore_client()
    session = open_session(config.WIKIMEDIA_USER_AGENT, timeout=config.HTTP_TIMEOUT)
    try:
        sink = FirestoreArticleSink(db, collection=config.ARTICLES_COLLECTION)
        return await update_articles(
            session,
            sink,
            days=config.DAYS_TO_FETCH,
            enrich=config.ENRICH_CATEGORIES,
            budget=RetryBudget(config.MAX_ITERATIONS),
            wiki_api=config.WIKI_API,
            feed_api=config.FEED_API,
            retry_delay=config.RETRY_DELAY,
        )
    finally:
        await session.close()
        await close_firestore_client(db)


def main() -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")
    try:
        count = asyncio.run(run())
    except Exception:
        log.exception("sync failed!")
        return 1

    print(f"Stored {count} articles.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

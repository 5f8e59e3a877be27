import logging
from typing import Any, Optional

from featured_sync import config
from featured_sync.budget import RetryBudget
from featured_sync.feed import fetch_articles
from featured_sync.sinks.base import ArticleSink
from featured_sync.taxonomy import get_categories

log = logging.getLogger("featured_sync.pipeline")


async def update_articles(
    session: Any,
    sink: ArticleSink,
    *,
    days: int = config.DAYS_TO_FETCH,
    enrich: bool = config.ENRICH_CATEGORIES,
    budget: Optional[RetryBudget] = None,
    wiki_api: str = config.WIKI_API,
    **fetch_kwargs: Any,
) -> int:
    """
    Fetch, enrich and store the feed window. Returns the number of staged
    writes. A failed commit raises, and then nothing was stored.
    """
    if budget is None:
        budget = RetryBudget(config.MAX_ITERATIONS)

    articles = await fetch_articles(session, days, budget, **fetch_kwargs)
    log.info("Fetched %d candidate article(s) in %d request(s).", len(articles), budget.used)

    for article in articles:
        # No lookup for articles the sink will skip, nor for empty titles
        # (every category name contains "").
        if enrich and article.id and article.title:
            categories = await get_categories(session, article.title, wiki_api)
            if categories:
                article.categories = categories

        sink.stage(article)

    await sink.commit()
    return sink.staged_count

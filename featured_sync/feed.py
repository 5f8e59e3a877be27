import asyncio
import logging
from datetime import date, datetime, timezone
from typing import Any, Awaitable, Callable, Dict, List, Optional

from featured_sync import config
from featured_sync.budget import RetryBudget
from featured_sync.http import FetchError, fetch_json
from featured_sync.models import ArticleRecord
from featured_sync.utils import feed_date_path, shift_months
from featured_sync.validation import is_wiki_article

log = logging.getLogger("featured_sync.feed")

# Order matters: a day's contribution is tfa, then mostread, then featured.
LIST_FACETS = ("mostread", "featured")


def _tfa_entries(data: Dict[str, Any]) -> List[Any]:
    tfa = data.get("tfa")
    if tfa is None:
        return []
    if not is_wiki_article(tfa):
        log.debug("tfa entry rejected: %r", tfa)
        return []
    return [tfa]


def _list_facet_entries(data: Dict[str, Any], facet: str) -> List[Any]:
    block = data.get(facet)
    if block is None:
        return []
    if not isinstance(block, dict):
        log.debug("%s facet is not an object, ignored.", facet)
        return []
    entries = block.get("articles")
    if entries is None:
        return []
    if not isinstance(entries, list):
        log.debug("%s.articles is not a list, ignored.", facet)
        return []
    return [e for e in entries if is_wiki_article(e)]


def parse_feed_day(data: Any) -> List[ArticleRecord]:
    """Turn one decoded feed response into the day's ordered records."""
    if not isinstance(data, dict):
        raise FetchError(f"feed body is not an object: {type(data).__name__}")

    entries = _tfa_entries(data)
    for facet in LIST_FACETS:
        entries.extend(_list_facet_entries(data, facet))
    return [ArticleRecord.from_feed_entry(e) for e in entries]


def feed_url(day: date, feed_api: str = config.FEED_API) -> str:
    return f"{feed_api.rstrip('/')}/{feed_date_path(day)}"


async def fetch_articles(
    session: Any,
    days: int = config.DAYS_TO_FETCH,
    budget: Optional[RetryBudget] = None,
    *,
    feed_api: str = config.FEED_API,
    retry_delay: float = config.RETRY_DELAY,
    today: Optional[date] = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> List[ArticleRecord]:
    """
    Fetch `days` feed days, most recent first, into one flat list.

    The day cursor is shifted back by `i` months on iteration `i`, so the
    offsets add up (0, 1, 3, 6, ... months behind the anchor). Every request
    spends one unit of `budget`; when it runs out the remaining days are
    skipped without error.
    """
    if budget is None:
        budget = RetryBudget(config.MAX_ITERATIONS)

    cursor = today or datetime.now(timezone.utc).date()
    articles: List[ArticleRecord] = []

    for i in range(days):
        cursor = shift_months(cursor, -i)
        url = feed_url(cursor, feed_api)

        while budget.take():
            try:
                data = await fetch_json(session, url)
                day_articles = parse_feed_day(data)
            except FetchError as e:
                log.error("Error grabbing articles for %s: %s", cursor.isoformat(), e)
                await sleep(retry_delay)
                continue

            log.info("%s: %d article(s).", cursor.isoformat(), len(day_articles))
            articles.extend(day_articles)
            break

        if budget.exhausted and i < days - 1:
            log.warning("Stopping after day %d/%d: retry budget spent.", i + 1, days)
            break

    return articles

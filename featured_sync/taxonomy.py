"""Wikipedia category lookup used to enrich feed articles."""

import logging
from typing import Any, Dict, List

from featured_sync import config
from featured_sync.http import fetch_json
from featured_sync.utils import strip_prefix_once

log = logging.getLogger("featured_sync.taxonomy")

CATEGORY_PREFIX = "Category:"


def category_query_params(title: str) -> Dict[str, str]:
    return {
        "action": "query",
        "titles": title,
        "prop": "categories",
        "cllimit": "max",
        "clshow": "!hidden",
        "format": "json",
        "origin": "*",
    }


def _page_categories(data: Any) -> List[Any]:
    """Category list of the first page in a query response, [] when absent."""
    if not isinstance(data, dict):
        log.debug("Categories response is not an object.")
        return []
    query = data.get("query")
    if not isinstance(query, dict):
        log.debug("Categories response has no query block.")
        return []
    pages = query.get("pages")
    if not isinstance(pages, dict) or not pages:
        log.debug("Categories response has no pages.")
        return []
    # Pages are keyed by page id (or "-1" for a missing page): take whichever comes first.
    page = next(iter(pages.values()))
    if not isinstance(page, dict):
        return []
    categories = page.get("categories")
    if not isinstance(categories, list):
        return []
    return categories


def filter_categories(raw_categories: List[Any], title: str) -> List[str]:
    """Strip the namespace prefix and drop names that contain the article title."""
    needle = (title or "").lower()
    out: List[str] = []
    for c in raw_categories:
        if not isinstance(c, dict) or not isinstance(c.get("title"), str):
            continue
        name = strip_prefix_once(c["title"], CATEGORY_PREFIX)
        if needle in name.lower():
            continue
        out.append(name)
    return out


async def get_categories(session: Any, title: str, wiki_api: str = config.WIKI_API) -> List[str]:
    """Non-hidden categories of `title`. Never raises: failures give []."""
    try:
        data = await fetch_json(session, wiki_api, params=category_query_params(title))
        return filter_categories(_page_categories(data), title)
    except Exception as e:
        log.error('Failed to fetch categories for "%s": %s', title, e)
        return []

from typing import Any

TITLE_FIELD = "normalizedtitle"


def is_wiki_article(obj: Any) -> bool:
    """True if a decoded feed value can be turned into an ArticleRecord."""
    if not isinstance(obj, dict):
        return False
    title = obj.get(TITLE_FIELD)
    return isinstance(title, str)

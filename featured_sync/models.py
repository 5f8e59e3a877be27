from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class ArticleRecord:
    id: str
    title: str
    description: Optional[str] = None
    observed_at: Optional[str] = None  # feed "timestamp"
    categories: List[str] = field(default_factory=list)
    fields: Dict[str, Any] = field(default_factory=dict)  # raw feed entry

    @classmethod
    def from_feed_entry(cls, entry: Dict[str, Any]) -> "ArticleRecord":
        pageid = entry.get("pageid")
        description = entry.get("description")
        observed_at = entry.get("timestamp")
        return cls(
            id="" if pageid is None else str(pageid),
            title=str(entry.get("normalizedtitle") or ""),
            description=description if isinstance(description, str) else None,
            observed_at=observed_at if isinstance(observed_at, str) else None,
            fields=dict(entry),
        )

    def to_document(self, cached_at: datetime) -> Dict[str, Any]:
        """
        Full field set of the feed entry, with the typed fields written back
        over their raw counterparts, plus categories and cachedAt.
        """
        doc = dict(self.fields)
        doc["normalizedtitle"] = self.title
        if self.description is not None:
            doc["description"] = self.description
        if self.observed_at is not None:
            doc["timestamp"] = self.observed_at
        if self.categories:
            doc["categories"] = list(self.categories)
        else:
            doc.pop("categories", None)
        doc["cachedAt"] = cached_at
        return doc

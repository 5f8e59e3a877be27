"""Centralized configuration for the featured article sync."""

import os
import logging
from typing import Any, Dict

log = logging.getLogger("featured_sync.config")

# =========================
# Firestore service account (validated at startup via validate_required_env)
# =========================
FIREBASE_PROJECT_ID: str = os.environ.get("FIREBASE_PROJECT_ID", "")
FIREBASE_CLIENT_EMAIL: str = os.environ.get("FIREBASE_CLIENT_EMAIL", "")
FIREBASE_PRIVATE_KEY: str = os.environ.get("FIREBASE_PRIVATE_KEY", "")
FIREBASE_TOKEN_URI: str = os.getenv("FIREBASE_TOKEN_URI", "https://oauth2.googleapis.com/token")
ARTICLES_COLLECTION: str = os.getenv("ARTICLES_COLLECTION", "articles")

# =========================
# Sources
# =========================
FEED_API: str = os.getenv("FEED_API", "https://api.wikimedia.org/feed/v1/wikipedia/en/featured")
WIKI_API: str = os.getenv("WIKI_API", "https://en.wikipedia.org/w/api.php")
WIKIMEDIA_USER_AGENT: str = os.getenv(
    "WIKIMEDIA_USER_AGENT",
    "featured-sync/0.1 (https://github.com/featured-sync/featured-sync)",
)
HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "30"))

# =========================
# Fetch window / retry budget
# =========================
DAYS_TO_FETCH: int = int(os.getenv("DAYS_TO_FETCH", "10"))
MAX_ITERATIONS: int = int(os.getenv("MAX_ITERATIONS", "1000"))
RETRY_DELAY: float = float(os.getenv("RETRY_DELAY", "0.25"))

# =========================
# Enrichment
# =========================
ENRICH_CATEGORIES: bool = os.getenv("ENRICH_CATEGORIES", "true").lower() in ("1", "true", "yes")

# =========================
# Logging
# =========================
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def validate_required_env() -> None:
    """Validate that the store credentials are set. Call at startup."""
    missing = []
    if not FIREBASE_PROJECT_ID:
        missing.append("FIREBASE_PROJECT_ID")
    if not FIREBASE_CLIENT_EMAIL:
        missing.append("FIREBASE_CLIENT_EMAIL")
    if not FIREBASE_PRIVATE_KEY:
        missing.append("FIREBASE_PRIVATE_KEY")
    if missing:
        raise EnvironmentError(
            f"Missing required environment variables: {', '.join(missing)}"
        )
    if DAYS_TO_FETCH <= 0:
        log.warning("DAYS_TO_FETCH=%d: nothing will be fetched.", DAYS_TO_FETCH)
    if not ENRICH_CATEGORIES:
        log.info("Category enrichment disabled.")


def unescape_private_key(raw: str) -> str:
    """Env files carry the PEM key on one line with literal \\n sequences."""
    return (raw or "").replace("\\n", "\n")


def firebase_credentials_info() -> Dict[str, Any]:
    """Service account info accepted by firebase_admin.credentials.Certificate."""
    return {
        "type": "service_account",
        "project_id": FIREBASE_PROJECT_ID,
        "client_email": FIREBASE_CLIENT_EMAIL,
        "private_key": unescape_private_key(FIREBASE_PRIVATE_KEY),
        "token_uri": FIREBASE_TOKEN_URI,
    }

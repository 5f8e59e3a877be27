"""Firestore client bootstrap: built once by main.py and handed to the sink."""

import inspect
import logging
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import credentials, firestore_async

from featured_sync import config

log = logging.getLogger("featured_sync.firebase")


def init_firebase_app(credentials_info: Optional[Dict[str, Any]] = None) -> firebase_admin.App:
    """Initialize the default Firebase app from service account info."""
    info = credentials_info or config.firebase_credentials_info()
    cred = credentials.Certificate(info)
    app = firebase_admin.initialize_app(cred, {"projectId": info.get("project_id")})
    log.info("Firebase app initialized for project %s.", info.get("project_id"))
    return app


def get_firestore_client(app: Optional[firebase_admin.App] = None) -> Any:
    """Async Firestore client bound to `app` (initialized from config when omitted)."""
    if app is None:
        app = init_firebase_app()
    return firestore_async.client(app)


async def close_firestore_client(db: Any) -> None:
    """Release the client's transport; close() is a coroutine on some SDK versions."""
    close = getattr(db, "close", None)
    if close is None:
        return
    result = close()
    if inspect.isawaitable(result):
        await result

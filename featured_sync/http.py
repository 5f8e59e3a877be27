import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

log = logging.getLogger("featured_sync.http")


class FetchError(Exception):
    """A request that produced no usable JSON body."""


def open_session(user_agent: str, timeout: float = 30) -> aiohttp.ClientSession:
    return aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=timeout),
        headers={"User-Agent": user_agent, "Accept": "application/json"},
    )


async def fetch_json(session: Any, url: str, params: Optional[Dict[str, str]] = None) -> Any:
    """GET url and decode its JSON body. Raises FetchError on any failure."""
    try:
        async with session.get(url, params=params) as resp:
            if resp.status == 429 or resp.status >= 500:
                raise FetchError(f"{url} -> HTTP {resp.status}")
            if resp.status != 200:
                log.debug("%s -> HTTP %s, decoding body anyway", url, resp.status)
            return await resp.json(content_type=None)
    except FetchError:
        raise
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        raise FetchError(f"{url}: {e!r}") from e

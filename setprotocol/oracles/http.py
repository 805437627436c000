"""Shared JSON-over-HTTP helper for the third-party data services."""
from __future__ import annotations

import logging
import ssl
from typing import Any

import aiohttp
import certifi

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


async def fetch_json(
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    json_body: dict[str, Any] | None = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> Any:
    """GET ``url`` (or POST ``json_body``) and return the decoded JSON.

    Non-200 responses raise ``RuntimeError``; transport errors propagate.
    """
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    connector = aiohttp.TCPConnector(ssl=ssl_context)
    client_timeout = aiohttp.ClientTimeout(total=timeout)

    logger.debug("Requesting %s params=%s", url, params)
    async with aiohttp.ClientSession(connector=connector) as session:
        if json_body is not None:
            request = session.post(url, json=json_body, headers=headers, timeout=client_timeout)
        else:
            request = session.get(url, params=params, headers=headers, timeout=client_timeout)

        async with request as response:
            if response.status != 200:
                raise RuntimeError(f"Request to {url} failed: HTTP {response.status}")
            # Some lists are served as text/plain from raw.githubusercontent.com
            return await response.json(content_type=None)

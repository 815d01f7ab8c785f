"""Thin async wrapper around ``requests`` for JSON GET endpoints."""

from __future__ import annotations

import asyncio
from typing import Any, Mapping, Protocol

import requests

from ..logger import get_logger

logger = get_logger(__name__)


class HttpGet(Protocol):
    async def __call__(
        self, url: str, params: Mapping[str, Any] | None = None
    ) -> Any: ...


async def get_json(
    url: str,
    params: Mapping[str, Any] | None = None,
    *,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> Any:
    """GET ``url`` in a worker thread and return the decoded JSON body.

    Raises:
        requests.RequestException: On transport failures and non-2xx responses.
        ValueError: If the body is not valid JSON.
    """
    getter = session.get if session is not None else requests.get
    response = await asyncio.to_thread(
        lambda: getter(url, params=params, timeout=timeout)
    )
    logger.debug("GET %s -> %s", response.url, response.status_code)
    response.raise_for_status()
    return response.json()

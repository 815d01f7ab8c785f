"""Client for the Silicon.net public GPU earnings listing.

The listing is paginated; every page is requested sequentially until the
API signals the end of data. A failing page ends the walk and the GPUs
gathered so far are returned together with the error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, TypedDict

from ..constants import GPU_LIST_PAGE_SIZE, GPU_LIST_QUERY, GPU_LIST_URL
from ..logger import get_logger
from .http import HttpGet, get_json

logger = get_logger(__name__)


class GpuRecord(TypedDict, total=False):
    """A single GPU entry; only ``gpu_type`` is read, other fields pass through."""

    gpu_type: str


@dataclass
class GpuFetchResult:
    """GPUs gathered from the listing, with the error that stopped the walk, if any."""

    gpus: list[GpuRecord] = field(default_factory=list)
    pages_requested: int = 0
    error: Exception | None = None

    @property
    def complete(self) -> bool:
        return self.error is None


def build_page_params(
    page: int,
    page_size: int = GPU_LIST_PAGE_SIZE,
    query: Mapping[str, Any] = GPU_LIST_QUERY,
) -> dict[str, Any]:
    """Query parameters for one listing page."""
    return {"page": page, "pageSize": page_size, **query}


async def fetch_all_gpus(
    http_get: HttpGet = get_json,
    *,
    url: str = GPU_LIST_URL,
    page_size: int = GPU_LIST_PAGE_SIZE,
    query: Mapping[str, Any] | None = None,
) -> GpuFetchResult:
    """Walk every page of the GPU listing.

    Stops when a page has no ``data`` list, when a page holds fewer than
    ``page_size`` items, or when a request or parse fails. Failures are
    logged and stored on the result, never raised.

    Args:
        http_get: Async GET returning the decoded JSON body
        url: Listing endpoint
        page_size: Items requested per page
        query: Extra query parameters; defaults to the fixed listing sort/filter

    Returns:
        GpuFetchResult with all GPUs gathered before the walk stopped
    """
    extra = GPU_LIST_QUERY if query is None else query
    result = GpuFetchResult()
    page = 1

    while True:
        params = build_page_params(page, page_size, extra)
        result.pages_requested += 1
        try:
            payload = await http_get(url, params)
            if not isinstance(payload, Mapping):
                raise ValueError(
                    f"Unexpected GPU listing payload type: {type(payload).__name__}"
                )
            gpu_data = payload.get("data")
            logger.debug(
                "GPU listing page %d metadata=%s message=%s",
                page,
                payload.get("metadata"),
                payload.get("message"),
            )
        except Exception as e:
            logger.error("Error fetching GPUs at page %d: %s", page, e)
            result.error = e
            break

        if not gpu_data or not isinstance(gpu_data, list):
            break

        result.gpus.extend(gpu_data)

        if len(gpu_data) < page_size:
            break
        page += 1

    logger.info(
        "Fetched %d GPUs from %d page request(s)%s",
        len(result.gpus),
        result.pages_requested,
        "" if result.complete else " (stopped early on error)",
    )
    return result

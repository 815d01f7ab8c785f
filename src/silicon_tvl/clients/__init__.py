from __future__ import annotations

from .gpu_listing import GpuFetchResult, fetch_all_gpus
from .http import get_json

__all__ = [
    "GpuFetchResult",
    "fetch_all_gpus",
    "get_json",
]

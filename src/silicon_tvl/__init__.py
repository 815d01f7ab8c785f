"""Silicon.net TVL adapter."""

from __future__ import annotations

from .tvl import ADAPTER, gpu_tvl, pool_token_tvl, tvl

__all__ = [
    "ADAPTER",
    "gpu_tvl",
    "pool_token_tvl",
    "tvl",
]

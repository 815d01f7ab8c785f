from __future__ import annotations

from .pool_token import read_pool_token_supply

__all__ = [
    "read_pool_token_supply",
]

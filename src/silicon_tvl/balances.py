"""Collector for the values an adapter run reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from web3 import Web3


@dataclass
class TvlBalances:
    """USD-denominated value plus raw token amounts for one chain.

    Token amounts are kept in raw on-chain units and left for a downstream
    pricer; nothing here converts them to USD or combines them with
    ``usd_value``.
    """

    chain: str
    usd_value: float = 0
    tokens: dict[str, int] = field(default_factory=dict)

    def add_usd_value(self, amount: float) -> None:
        if amount < 0:
            raise ValueError(f"USD value must be non-negative, got {amount}")
        self.usd_value += amount

    def add(self, token: str, amount: int) -> None:
        """Accumulate a raw amount of ``token``, keyed by checksummed address."""
        checksummed = Web3.to_checksum_address(token)
        self.tokens[checksummed] = self.tokens.get(checksummed, 0) + int(amount)

    @property
    def is_empty(self) -> bool:
        return self.usd_value == 0 and not self.tokens

    def to_dict(self) -> dict[str, Any]:
        return {
            "chain": self.chain,
            "usd_value": self.usd_value,
            # raw amounts can exceed JSON-safe integers
            "tokens": {token: str(amount) for token, amount in self.tokens.items()},
        }

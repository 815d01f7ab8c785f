"""GPU price table and GPU type classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping

from .constants import GPU_PRICES


@dataclass(frozen=True)
class PriceTable:
    """Ordered, immutable mapping of GPU label to unit USD price.

    Label order is significant: classification returns the first label
    contained in the GPU type string.
    """

    entries: tuple[tuple[str, float], ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for label, price in self.entries:
            if not label:
                raise ValueError("Price table labels must be non-empty")
            if label in seen:
                raise ValueError(f"Duplicate price table label: {label}")
            if price <= 0:
                raise ValueError(
                    f"Price for {label} must be positive, got {price}"
                )
            seen.add(label)

    @classmethod
    def from_mapping(cls, prices: Mapping[str, float]) -> PriceTable:
        return cls(entries=tuple(prices.items()))

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(label for label, _ in self.entries)

    def price_of(self, label: str) -> float:
        for key, price in self.entries:
            if key == label:
                return price
        raise KeyError(label)

    def __iter__(self) -> Iterator[tuple[str, float]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_PRICE_TABLE = PriceTable.from_mapping(GPU_PRICES)


def classify_gpu_type(
    gpu_type: str | None, table: PriceTable = DEFAULT_PRICE_TABLE
) -> str | None:
    """Return the first table label contained in ``gpu_type``, or None.

    Matching is case-insensitive and by substring, so "H100-SXM" resolves to
    "H100". Labels are tried in table order.
    """
    if not gpu_type:
        return None

    normalized = str(gpu_type).upper()
    for label in table.labels:
        if label.upper() in normalized:
            return label
    return None

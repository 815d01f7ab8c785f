from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from ..logger import get_logger
from ..price_table import DEFAULT_PRICE_TABLE, PriceTable, classify_gpu_type

logger = get_logger(__name__)


@dataclass
class GpuValuation:
    """GPU counts per price table label and their total USD value."""

    counts: dict[str, int]
    total_usd: float
    unclassified: set[str] = field(default_factory=set)

    @property
    def total_gpus(self) -> int:
        return sum(self.counts.values())


def compute_gpu_valuation(
    gpus: Iterable[Any],
    table: PriceTable = DEFAULT_PRICE_TABLE,
) -> GpuValuation:
    """Count GPUs by model and price them from the table.

    Args:
        gpus: GPU records; only ``gpu_type`` is read. Entries that are not
            mappings count as unclassified
        table: Price table used for classification and pricing

    Returns:
        GpuValuation with a count for every table label (zero if unseen),
        the USD total, and the distinct GPU types that matched no label.
        Unmatched GPUs contribute nothing to the total.
    """
    counts: dict[str, int] = {label: 0 for label in table.labels}
    unclassified: set[str] = set()

    for gpu in gpus:
        if not isinstance(gpu, Mapping):
            unclassified.add(repr(gpu))
            continue
        gpu_type = gpu.get("gpu_type")
        label = classify_gpu_type(gpu_type, table)
        if label is None:
            unclassified.add(gpu_type if isinstance(gpu_type, str) else repr(gpu_type))
            continue
        counts[label] += 1

    total_usd = sum(counts[label] * price for label, price in table)
    valuation = GpuValuation(counts=counts, total_usd=total_usd, unclassified=unclassified)

    logger.info("GPU counts: %s (total gpus %d)", counts, valuation.total_gpus)
    logger.info("Total GPU value (USD): %s", total_usd)
    if unclassified:
        logger.warning("Uncategorized GPU types: %s", sorted(unclassified))

    return valuation

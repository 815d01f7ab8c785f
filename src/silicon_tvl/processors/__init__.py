from __future__ import annotations

from .gpu_valuation import GpuValuation, compute_gpu_valuation

__all__ = [
    "GpuValuation",
    "compute_gpu_valuation",
]

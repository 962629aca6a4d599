"""Histograms of mapped descriptor images."""
from __future__ import annotations
from typing import Dict, Mapping, Optional
import numpy as np

__all__ = ["histogram", "histograms"]


def histogram(mapped: np.ndarray, max_bin: int, x_size: Optional[int] = None,
              y_size: Optional[int] = None) -> np.ndarray:
    """Count each bin value ``0..max_bin`` over ``mapped[:x_size, :y_size]``."""
    region = np.asarray(mapped)[:x_size, :y_size]
    counts = np.bincount(region.ravel().astype(np.int64), minlength=max_bin + 1)
    return counts[:max_bin + 1].astype(np.int64)


def histograms(mapped: Mapping[str, np.ndarray], mapping: np.ndarray) -> Dict[str, np.ndarray]:
    max_bin = int(mapping.max())
    return {name: histogram(img, max_bin) for name, img in mapped.items()}

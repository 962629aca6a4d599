"""2D convolution with a centered square kernel."""
from __future__ import annotations
from typing import Optional
import numpy as np

from mrelbp.main.filtering.padding import check_policy, pad_array
from mrelbp.main.utils.errors import DescriptorError, check_kernel, first_error
from mrelbp.main.utils.parallel import map_row_bands

__all__ = ["convolve2d"]


def convolve2d(kernel: np.ndarray, image: np.ndarray, policy: str = "Nearest",
               n_jobs: Optional[int] = None) -> np.ndarray:
    """Same-size correlation of ``image`` with ``kernel`` (no kernel flip).

    Symmetric kernels are the intended use, for which correlation and
    convolution coincide.
    """
    kernel = np.asarray(kernel, dtype=np.float64)
    image = np.asarray(image, dtype=np.float64)
    if kernel.ndim != 2 or kernel.shape[0] != kernel.shape[1]:
        raise DescriptorError(f"Kernel must be square, got shape {kernel.shape}")
    width = kernel.shape[0]
    err = first_error([check_kernel(width, image.shape), check_policy(policy)])
    if err is not None:
        raise err

    distance = (width - 1) // 2
    padded = pad_array(image, distance, policy)
    rows, cols = image.shape

    def band(start: int, stop: int) -> np.ndarray:
        out = np.zeros((stop - start, cols), dtype=np.float64)
        # accumulate cell by cell in row-major kernel order
        for a in range(width):
            for b in range(width):
                out += kernel[a, b] * padded[start + a:stop + a, b:b + cols]
        return out

    return np.vstack(map_row_bands(band, rows, n_jobs))

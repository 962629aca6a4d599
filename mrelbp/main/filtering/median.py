"""Median filtering with a square window and zero padding."""
from __future__ import annotations
from typing import Optional
import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from mrelbp.main.filtering.padding import pad_array
from mrelbp.main.utils.errors import DescriptorError, check_kernel
from mrelbp.main.utils.parallel import map_row_bands

__all__ = ["MedianFilter", "median_filter"]


class MedianFilter:
    def __init__(self, kernel: int = 5):
        """
        kernel: odd window width. Validated when filtering so that the
        window can be checked against the image extent at the same time.
        """
        self.kernel = kernel
        self.distance = (kernel - 1) // 2

    def check(self, shape) -> Optional[DescriptorError]:
        return check_kernel(self.kernel, shape)

    def filter(self, image: np.ndarray, n_jobs: Optional[int] = None) -> np.ndarray:
        image = np.asarray(image, dtype=np.float64)
        err = self.check(image.shape)
        if err is not None:
            raise err

        k, dist = self.kernel, self.distance
        # zero padding is enough since descriptor images are cropped later
        padded = pad_array(image, dist, "")
        rows, cols = image.shape
        middle = (k * k) // 2

        def band(start: int, stop: int) -> np.ndarray:
            windows = sliding_window_view(padded[start:stop + 2 * dist], (k, k))
            block = np.sort(windows.reshape(stop - start, cols, k * k), axis=-1)
            return block[..., middle].copy()

        return np.vstack(map_row_bands(band, rows, n_jobs))

    def __repr__(self) -> str:
        return f"MedianFilter(kernel={self.kernel})"


def median_filter(image: np.ndarray, kernel: int = 5, n_jobs: Optional[int] = None) -> np.ndarray:
    return MedianFilter(kernel).filter(image, n_jobs=n_jobs)

"""Grayscale scaling and local (Gaussian) standardization."""
from __future__ import annotations
from typing import Optional
import numpy as np

from mrelbp.main.filtering.convolution import convolve2d
from mrelbp.main.filtering.padding import check_policy
from mrelbp.main.utils.errors import DegenerateInputError, KernelWidthError, check_kernel, first_error, raise_for

__all__ = ["scale_image", "gaussian_kernel", "LocalStandardization"]


def scale_image(image: np.ndarray) -> np.ndarray:
    """Return ``(image - mean) / std``; a constant image cannot be scaled."""
    image = np.asarray(image, dtype=np.float64)
    std = image.std()
    if std == 0:
        raise DegenerateInputError()
    return (image - image.mean()) / std


def gaussian_kernel(width: int, sigma: float) -> np.ndarray:
    """Normalised ``width`` x ``width`` Gaussian kernel."""
    if width % 2 == 0:
        raise KernelWidthError()
    c = (width - 1) / 2
    i, j = np.meshgrid(np.arange(width), np.arange(width), indexing='ij')
    kernel = np.exp(-((i - c) ** 2 + (j - c) ** 2) / (2 * sigma ** 2))
    return kernel / kernel.sum()


class LocalStandardization:
    def __init__(self, w1: int = 23, w2: int = 5, s1: float = 5, s2: float = 1):
        """
        w1 / s1: width and sigma of the kernel estimating the local mean.
        w2 / s2: width and sigma of the kernel estimating the local spread.
        """
        self.w1, self.w2 = w1, w2
        self.s1, self.s2 = s1, s2

    @classmethod
    def from_parameters(cls, params) -> "LocalStandardization":
        return cls(*params.w_stand)

    def standardize(self, image: np.ndarray, policy: str = "Reflect",
                    n_jobs: Optional[int] = None) -> np.ndarray:
        """Subtract the local Gaussian mean and divide by the local Gaussian std.

        Returns a new array, ``image`` is left untouched.
        """
        image = np.asarray(image, dtype=np.float64)
        raise_for(first_error([
            check_kernel(self.w1, image.shape),
            check_kernel(self.w2, image.shape),
            check_policy(policy),
        ]))
        kernel1 = gaussian_kernel(self.w1, self.s1)
        kernel2 = gaussian_kernel(self.w2, self.s2)
        centered = image - convolve2d(kernel1, image, policy, n_jobs=n_jobs)
        std = np.sqrt(convolve2d(kernel2, centered ** 2, policy, n_jobs=n_jobs))
        return centered / (std + 1e-9)

    def __repr__(self) -> str:
        return f"LocalStandardization(w1={self.w1}, w2={self.w2}, s1={self.s1}, s2={self.s2})"

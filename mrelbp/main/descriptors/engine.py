"""LBP / MRELBP descriptor computation.

Every valid pixel is computed independently from read-only inputs. The
pixel loop is vectorised over row bands: each band samples all neighbours
for its pixels at once and returns its own blocks of codes.

Plain LBP thresholds each neighbour against the pixel itself. MRELBP works
on median-filtered images and thresholds the small and large neighbour
sets against their own mean, plus a radial set (large minus small) against
zero.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
import math
import numpy as np

from mrelbp.main.descriptors.mapping import build_mapping
from mrelbp.main.descriptors.parameters import Parameters
from mrelbp.main.descriptors.sampling import sample_band, sample_points
from mrelbp.main.filtering.median import MedianFilter
from mrelbp.main.utils.errors import DescriptorError, first_error, raise_for
from mrelbp.main.utils.parallel import map_row_bands

__all__ = [
    "FilteredImages", "DescriptorImages", "valid_size", "check_inputs", "filter_images", "compute_descriptors",
]


@dataclass(frozen=True)
class FilteredImages:
    center: np.ndarray  # mean-subtracted over the valid region
    large: np.ndarray
    small: np.ndarray
    hist_center: np.ndarray
    margin: int


@dataclass(frozen=True)
class DescriptorImages:
    small: np.ndarray
    small_mapped: np.ndarray
    margin: int
    large: Optional[np.ndarray] = None
    large_mapped: Optional[np.ndarray] = None
    radial: Optional[np.ndarray] = None
    radial_mapped: Optional[np.ndarray] = None

    @property
    def mre(self) -> bool:
        return self.large is not None

    @property
    def shape(self) -> Tuple[int, int]:
        return self.small.shape  # type: ignore[return-value]

    def mapped(self) -> Dict[str, np.ndarray]:
        out = {'S': self.small_mapped}
        if self.mre:
            out['L'] = self.large_mapped  # type: ignore[assignment]
            out['R'] = self.radial_mapped  # type: ignore[assignment]
        return out


def valid_size(shape: Tuple[int, ...], margin: int) -> Tuple[int, int]:
    return shape[0] - 2 * margin, shape[1] - 2 * margin


def _check_region(shape: Tuple[int, ...], margin: int) -> Optional[DescriptorError]:
    x_size, y_size = valid_size(shape, margin)
    if x_size <= 0 or y_size <= 0:
        return DescriptorError(f"Image of shape {tuple(shape)} has no pixels at sampling margin {margin}")
    return None


def check_inputs(shape: Tuple[int, ...], params: Parameters, mre: bool) -> Optional[DescriptorError]:
    """All preconditions of a pipeline run, checked before anything is computed."""
    checks = [params.validate()]
    if mre:
        checks += [MedianFilter(w).check(shape) for w in (params.w_c, params.w_large, params.w_small)]
    checks.append(_check_region(shape, params.margin(mre)))
    return first_error(checks)


def filter_images(image: np.ndarray, params: Parameters, margin: Optional[int] = None,
                  n_jobs: Optional[int] = None) -> FilteredImages:
    """Median-filter ``image`` for the center, large and small neighbourhoods.

    The center image is shifted by the mean of its valid region and counted
    into a two-bin histogram: bin 0 for values ``>= -eps1``, bin 1 otherwise.
    """
    image = np.asarray(image, dtype=np.float64)
    d = params.margin(True) if margin is None else margin
    n_jobs = params.n_jobs if n_jobs is None else n_jobs
    filters = [MedianFilter(params.w_c), MedianFilter(params.w_large), MedianFilter(params.w_small)]
    raise_for(first_error([f.check(image.shape) for f in filters] + [_check_region(image.shape, d)]))

    center, large, small = (f.filter(image, n_jobs=n_jobs) for f in filters)
    x_size, y_size = valid_size(image.shape, d)
    center = center - center[d:d + x_size, d:d + y_size].mean()

    valid = center[d:d + x_size, d:d + y_size]
    positive = int(np.count_nonzero(valid >= -params.eps1))
    hist_center = np.array([positive, valid.size - positive], dtype=np.int64)
    return FilteredImages(center=center, large=large, small=small, hist_center=hist_center, margin=d)


def _codes(bits: np.ndarray) -> np.ndarray:
    # bit k weighted by 2**k, bit 0 is the first sampled angle
    code = np.zeros(bits.shape[1:], dtype=np.int64)
    for k in range(bits.shape[0]):
        code |= bits[k].astype(np.int64) << k
    return code


def compute_descriptors(image: np.ndarray, params: Parameters, mapping: Optional[np.ndarray] = None,
                        filtered: Optional[FilteredImages] = None, margin: Optional[int] = None,
                        n_jobs: Optional[int] = None) -> DescriptorImages:
    """Raw and mapped descriptor images over the valid region.

    Plain LBP when ``filtered`` is ``None``, MRELBP otherwise. ``margin``
    defaults to the filtered images' margin (MRE) or ``params.radius``.
    Output shape is ``(W - 2*margin, L - 2*margin)``.
    """
    image = np.asarray(image, dtype=np.float64)
    mre = filtered is not None
    if margin is None:
        margin = filtered.margin if filtered is not None else params.margin(False)
    if mapping is None:
        mapping = build_mapping(params.neighbours)
    n_jobs = params.n_jobs if n_jobs is None else n_jobs
    P, eps1, eps2 = params.neighbours, params.eps1, params.eps2

    reach = max(params.radius, params.large_radius) if mre else params.radius
    checks = [params.validate(), _check_region(image.shape, margin)]
    if margin < math.ceil(reach):
        checks.append(DescriptorError(f"Sampling margin {margin} is smaller than the radius {reach}"))
    if len(mapping) != 1 << P:
        checks.append(DescriptorError(f"Mapping table has {len(mapping)} entries, expected {1 << P}"))
    if filtered is not None and (filtered.small.shape != image.shape or filtered.large.shape != image.shape):
        checks.append(DescriptorError("Filtered images do not match the input shape"))
    raise_for(first_error(checks))

    x_size, y_size = valid_size(image.shape, margin)
    small_pts = sample_points(params.radius, P, eps1)
    large_pts = sample_points(params.large_radius, P, eps1) if mre else []
    small_src = filtered.small if filtered is not None else image
    large_src = filtered.large if filtered is not None else None

    def band(start: int, stop: int) -> Dict[str, np.ndarray]:
        rows = (start, stop)
        ns = np.stack([sample_band(small_src, pt, rows, margin, y_size, eps2) for pt in small_pts])
        if not mre:
            center = image[margin + start:margin + stop, margin:margin + y_size]
            return {'S': _codes(ns >= center - eps1)}
        nl = np.stack([sample_band(large_src, pt, rows, margin, y_size, eps2) for pt in large_pts])
        nr = nl - ns
        nl = nl - nl.sum(axis=0) / P
        ns = ns - ns.sum(axis=0) / P
        return {
            'S': _codes(ns >= -eps1),
            'L': _codes(nl >= -eps1),
            'R': _codes(nr >= -eps1),
        }

    blocks = map_row_bands(band, x_size, n_jobs)
    codes = {key: np.vstack([b[key] for b in blocks]) for key in blocks[0]}
    mapped = {key: mapping[c] for key, c in codes.items()}
    if not mre:
        return DescriptorImages(small=codes['S'], small_mapped=mapped['S'], margin=margin)
    return DescriptorImages(
        small=codes['S'], small_mapped=mapped['S'], margin=margin,
        large=codes['L'], large_mapped=mapped['L'],
        radial=codes['R'], radial_mapped=mapped['R'],
    )

"""Entry points: plain LBP and MRELBP pipelines.

Each stage takes its inputs as arguments and returns new arrays; nothing is
kept between runs except the cached mapping table.
"""
from __future__ import annotations
from typing import NamedTuple, Optional, Tuple
import numpy as np

from mrelbp.main.descriptors.engine import DescriptorImages, check_inputs, compute_descriptors, filter_images
from mrelbp.main.descriptors.histogram import histogram
from mrelbp.main.descriptors.mapping import build_mapping
from mrelbp.main.descriptors.parameters import Parameters
from mrelbp.main.standardization.local import scale_image
from mrelbp.main.utils.errors import raise_for

__all__ = ["MRELBPResult", "pipeline_lbp", "pipeline_mrelbp"]


class MRELBPResult(NamedTuple):
    L: np.ndarray
    S: np.ndarray
    R: np.ndarray
    hist_l: np.ndarray
    hist_s: np.ndarray
    hist_r: np.ndarray
    hist_center: np.ndarray
    descriptors: DescriptorImages


def pipeline_lbp(image: np.ndarray, params: Optional[Parameters] = None,
                 n_jobs: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """Rotation-invariant uniform LBP image and its histogram."""
    params = params or Parameters()
    raise_for(check_inputs(np.shape(image), params, mre=False))
    mapping = build_mapping(params.neighbours)
    desc = compute_descriptors(image, params, mapping, margin=params.margin(False), n_jobs=n_jobs)
    return desc.small_mapped, histogram(desc.small_mapped, int(mapping.max()))


def pipeline_mrelbp(image: np.ndarray, params: Optional[Parameters] = None,
                    n_jobs: Optional[int] = None, scale: bool = True) -> MRELBPResult:
    """Median-robust extended LBP: mapped L/S/R images and their histograms.

    The image is scaled to zero mean and unit variance first unless
    ``scale`` is False. Raw codes are available on ``result.descriptors``.
    """
    params = params or Parameters()
    raise_for(check_inputs(np.shape(image), params, mre=True))
    mapping = build_mapping(params.neighbours)
    work = scale_image(image) if scale else np.asarray(image, dtype=np.float64)
    filtered = filter_images(work, params, n_jobs=n_jobs)
    desc = compute_descriptors(work, params, mapping, filtered=filtered, n_jobs=n_jobs)

    max_bin = int(mapping.max())
    return MRELBPResult(
        L=desc.large_mapped,  # type: ignore[arg-type]
        S=desc.small_mapped,
        R=desc.radial_mapped,  # type: ignore[arg-type]
        hist_l=histogram(desc.large_mapped, max_bin),  # type: ignore[arg-type]
        hist_s=histogram(desc.small_mapped, max_bin),
        hist_r=histogram(desc.radial_mapped, max_bin),  # type: ignore[arg-type]
        hist_center=filtered.hist_center,
        descriptors=desc,
    )

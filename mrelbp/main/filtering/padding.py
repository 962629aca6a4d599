"""Boundary padding for sliding-window operations."""
from __future__ import annotations
from typing import Dict, Optional
import numpy as np

from mrelbp.main.utils.errors import DescriptorError, UnsupportedPolicy

__all__ = ["PADDING_MODES", "check_policy", "pad_array"]

# "Reflect" repeats the edge sample: [a b c | c b a], numpy's "symmetric".
PADDING_MODES: Dict[str, str] = {
    "Nearest": "edge",
    "Reflect": "symmetric",
    "": "constant",
}


def check_policy(policy: str) -> Optional[DescriptorError]:
    if policy not in PADDING_MODES:
        return UnsupportedPolicy(policy)
    return None


def pad_array(array: np.ndarray, margin: int, policy: str = "") -> np.ndarray:
    """Extend a 2D array by ``margin`` rows/cols on every side.

    ``margin`` may be as large as the array itself; reflection then folds
    back and forth across the array.
    """
    err = check_policy(policy)
    if err is not None:
        raise err
    mode = PADDING_MODES[policy]
    if mode == "constant":
        return np.pad(array, margin, mode=mode, constant_values=0)
    return np.pad(array, margin, mode=mode)

"""I/O utilities for loading images and saving descriptor results."""
from __future__ import annotations
import json
import os
import shutil
import cv2
import numpy as np
from typing import Dict, List, Mapping

__all__ = ["ensure_dir", "flush_dir", "load_grayscale", "list_images", "save_descriptor_result"]

# ---- Directory utilities ----

def ensure_dir(path: str):
    os.makedirs(path, exist_ok=True)


def flush_dir(path: str):
    """Remove all contents of a directory and recreate it.

    Safety guards:
      - Path must exist or be creatable.
      - Path length must be > 3 characters to avoid accidental root wipes.
    """
    if not path:
        return
    norm = os.path.abspath(path)
    if len(norm) <= 3:
        return
    if os.path.isdir(norm):
        shutil.rmtree(norm, ignore_errors=True)
    os.makedirs(norm, exist_ok=True)

# ---- Images ----

def load_grayscale(path: str) -> np.ndarray:
    """Read an image as a 2D float64 array indexed [row, col]."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Image not found: {path}")
    img = cv2.imread(path, cv2.IMREAD_GRAYSCALE)
    if img is None:
        raise RuntimeError(f"Could not decode image: {path}")
    return img.astype(np.float64)


def list_images(directory: str, extensions: List[str]) -> List[str]:
    exts = tuple(f".{e.lower().lstrip('.')}" for e in extensions)
    names = sorted(n for n in os.listdir(directory) if n.lower().endswith(exts))
    return [os.path.join(directory, n) for n in names]

# ---- Results ----

def save_descriptor_result(images: Mapping[str, np.ndarray], histograms: Mapping[str, np.ndarray],
                           out_dir: str, stem: str) -> Dict[str, str]:
    """Write each image as ``<stem>_<name>.npy`` and all histograms as ``<stem>_hist.json``."""
    ensure_dir(out_dir)
    written: Dict[str, str] = {}
    for name, arr in images.items():
        path = os.path.join(out_dir, f"{stem}_{name}.npy")
        np.save(path, arr)
        written[name] = path
    hist_path = os.path.join(out_dir, f"{stem}_hist.json")
    with open(hist_path, 'w', encoding='utf-8') as f:
        json.dump({k: np.asarray(v).astype(int).tolist() for k, v in histograms.items()}, f)
    written['hist'] = hist_path
    return written

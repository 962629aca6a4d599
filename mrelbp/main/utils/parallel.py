"""Row-band data-parallel map.

Work is split into contiguous, disjoint row bands. Each band is computed by
a task that only reads shared inputs and returns its own freshly allocated
block; blocks are stitched back in band order, so the output does not
depend on ``n_jobs``.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Tuple, TypeVar
import os
import numpy as np
from joblib import Parallel, delayed

__all__ = ["row_bands", "map_row_bands", "resolve_jobs"]

T = TypeVar("T")


def resolve_jobs(n_jobs: Optional[int]) -> int:
    if n_jobs is None or n_jobs == 0:
        return os.cpu_count() or 1
    if n_jobs < 0:
        return max(1, (os.cpu_count() or 1) + 1 + n_jobs)
    return n_jobs


def row_bands(n_rows: int, n_jobs: int) -> List[Tuple[int, int]]:
    if n_rows <= 0:
        return [(0, 0)]
    n_bands = max(1, min(n_rows, n_jobs * 4))
    edges = np.linspace(0, n_rows, n_bands + 1).astype(int)
    return [(int(a), int(b)) for a, b in zip(edges[:-1], edges[1:]) if b > a]


def map_row_bands(fn: Callable[[int, int], T], n_rows: int, n_jobs: Optional[int] = None) -> List[T]:
    """Call ``fn(start, stop)`` for every band and return the results in order."""
    jobs = resolve_jobs(n_jobs)
    bands = row_bands(n_rows, jobs)
    if jobs == 1 or len(bands) == 1:
        return [fn(a, b) for a, b in bands]
    # numpy releases the GIL inside the heavy kernels, threads are enough
    return Parallel(n_jobs=jobs, prefer="threads")(delayed(fn)(a, b) for a, b in bands)

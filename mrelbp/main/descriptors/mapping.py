"""Rotation-invariant uniform mapping of binary neighbour codes."""
from __future__ import annotations
from functools import lru_cache
import numpy as np

__all__ = ["transitions", "build_mapping", "nonuniform_bin"]


def transitions(code: int, neighbours: int) -> int:
    """Number of bit positions where ``code`` differs from its 1-bit left rotation."""
    mask = (1 << neighbours) - 1
    msb = (code >> (neighbours - 1)) & 1
    rotated = ((code << 1) & mask) | msb
    return (code ^ rotated).bit_count()


def nonuniform_bin(neighbours: int) -> int:
    return neighbours + 1


@lru_cache(maxsize=None)
def _mapping(neighbours: int) -> np.ndarray:
    table = np.empty(1 << neighbours, dtype=np.int64)
    catch_all = nonuniform_bin(neighbours)
    for code in range(1 << neighbours):
        if transitions(code, neighbours) <= 2:
            table[code] = code.bit_count()
        else:
            table[code] = catch_all
    table.setflags(write=False)
    return table


def build_mapping(neighbours: int) -> np.ndarray:
    """Table of length ``2**neighbours`` mapping each code to a bin in ``[0, neighbours + 1]``.

    Codes with at most two 0/1 transitions around the circle map to their
    number of set bits; every other code goes to bin ``neighbours + 1``. The
    table only depends on ``neighbours`` and is cached read-only.
    """
    if neighbours < 1:
        raise ValueError(f"neighbours must be >= 1, got {neighbours}")
    return _mapping(int(neighbours))

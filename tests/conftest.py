import numpy as np
import pytest


def make_image(pattern: str, shape=(30, 30)) -> np.ndarray:
    h, w = shape
    if pattern == "Ones":
        return np.ones(shape, dtype=np.float64)
    if pattern == "Quarters":
        i, j = np.meshgrid(np.arange(h), np.arange(w), indexing='ij')
        return 1.0 + (i >= h // 2) + 2.0 * (j >= w // 2)
    if pattern == "Running numbers":
        return np.arange(h * w, dtype=np.float64).reshape(shape)
    return np.zeros(shape, dtype=np.float64)


@pytest.fixture
def test_image():
    return make_image

import numpy as np
from mrelbp.main.descriptors.histogram import histogram, histograms
from mrelbp.main.descriptors.mapping import build_mapping


def test_counts_each_bin():
    mapped = np.array([[0, 1, 1], [9, 9, 9]])
    hist = histogram(mapped, 9)
    assert len(hist) == 10
    assert hist.tolist() == [1, 2, 0, 0, 0, 0, 0, 0, 0, 3]


def test_region_restricts_counting():
    mapped = np.array([[2, 2, 5], [2, 2, 5], [5, 5, 5]])
    hist = histogram(mapped, 9, x_size=2, y_size=2)
    assert hist[2] == 4 and hist.sum() == 4


def test_order_independent():
    rng = np.random.default_rng(1)
    mapped = rng.integers(0, 10, size=(15, 15))
    shuffled = rng.permutation(mapped.ravel()).reshape(15, 15)
    assert np.array_equal(histogram(mapped, 9), histogram(shuffled, 9))


def test_histograms_use_mapping_max():
    table = build_mapping(4)
    hists = histograms({'S': np.zeros((2, 2), dtype=int)}, table)
    assert len(hists['S']) == 6
    assert hists['S'][0] == 4

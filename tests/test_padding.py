import numpy as np
import pytest
from mrelbp.main.filtering.padding import pad_array
from mrelbp.main.utils.errors import UnsupportedPolicy


def test_nearest_replicates_edges():
    arr = np.array([[1.0, 2.0, 3.0]])
    out = pad_array(arr, 2, "Nearest")
    assert out.shape == (5, 7)
    assert out[2].tolist() == [1, 1, 1, 2, 3, 3, 3]
    # rows above and below repeat the single row
    assert np.array_equal(out[0], out[2])


def test_reflect_repeats_edge_sample():
    arr = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
    out = pad_array(arr, 2, "Reflect")
    assert out[2].tolist() == [2, 1, 1, 2, 3, 3, 2]
    assert out[:, 2].tolist() == [4, 1, 1, 4, 7, 7, 4]


def test_empty_policy_zero_fills():
    arr = np.ones((2, 2))
    out = pad_array(arr, 1, "")
    assert out.shape == (4, 4)
    assert out.sum() == 4
    assert out[0].tolist() == [0, 0, 0, 0]


@pytest.mark.parametrize("policy", ["Nearest", "Reflect", ""])
def test_margin_up_to_full_extent(policy):
    arr = np.arange(9, dtype=float).reshape(3, 3)
    out = pad_array(arr, 3, policy)
    assert out.shape == (9, 9)
    assert np.array_equal(out[3:6, 3:6], arr)


def test_reflect_folds_beyond_extent():
    arr = np.array([[1.0, 2.0, 3.0]])
    out = pad_array(arr, 3, "Reflect")
    assert out[3].tolist() == [3, 2, 1, 1, 2, 3, 3, 2, 1]


def test_input_not_modified():
    arr = np.arange(4, dtype=float).reshape(2, 2)
    before = arr.copy()
    pad_array(arr, 1, "Nearest")
    assert np.array_equal(arr, before)


def test_unknown_policy_raises():
    with pytest.raises(UnsupportedPolicy) as exc:
        pad_array(np.zeros((3, 3)), 1, "Wrap")
    assert "Wrap" in str(exc.value)

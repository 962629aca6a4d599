import numpy as np
import pytest
from mrelbp.main.descriptors.engine import compute_descriptors, filter_images, valid_size
from mrelbp.main.descriptors.mapping import build_mapping
from mrelbp.main.descriptors.parameters import Parameters
from mrelbp.main.utils.errors import DegenerateInputError, DescriptorError

REF_LBP = [
    [8, 8, 8, 5, 5, 5],
    [8, 8, 8, 5, 5, 6],
    [8, 8, 8, 5, 5, 6],
    [5, 6, 6, 3, 3, 3],
    [5, 6, 6, 3, 3, 3],
    [6, 6, 6, 3, 3, 3],
]
REF_S = [
    [3, 4, 4, 5, 5, 6],
    [4, 3, 3, 5, 5, 2],
    [4, 3, 3, 5, 5, 2],
    [6, 3, 3, 5, 5, 4],
    [6, 3, 3, 5, 5, 4],
    [2, 3, 3, 4, 4, 5],
]
REF_R = [
    [8, 8, 8, 8, 8, 9],
    [8, 8, 8, 8, 8, 5],
    [8, 8, 8, 8, 7, 5],
    [8, 8, 8, 8, 7, 9],
    [8, 8, 7, 7, 7, 9],
    [7, 6, 5, 9, 9, 9],
]
REF_L = [
    [3, 3, 3, 5, 5, 5],
    [3, 3, 3, 5, 5, 5],
    [3, 3, 3, 5, 5, 5],
    [3, 3, 3, 5, 5, 5],
    [3, 3, 3, 5, 5, 5],
    [3, 3, 3, 5, 5, 5],
]


def test_quarters_match_reference_mapped_images(test_image):
    image = test_image("Quarters", (28, 28))
    params = Parameters()
    mapping = build_mapping(params.neighbours)
    d = params.margin(True)
    assert valid_size(image.shape, d) == (6, 6)

    plain = compute_descriptors(image, params, mapping, margin=d)
    assert plain.small_mapped.tolist() == REF_LBP

    filtered = filter_images(image, params)
    mre = compute_descriptors(image, params, mapping, filtered=filtered)
    assert mre.small_mapped.tolist() == REF_S
    assert mre.radial_mapped.tolist() == REF_R
    assert mre.large_mapped.tolist() == REF_L


def test_mapped_values_come_from_raw_codes(test_image):
    image = test_image("Quarters", (28, 28))
    params = Parameters()
    mapping = build_mapping(8)
    desc = compute_descriptors(image, params, mapping, filtered=filter_images(image, params))
    assert np.array_equal(mapping[desc.small], desc.small_mapped)
    assert np.array_equal(mapping[desc.large], desc.large_mapped)
    assert np.array_equal(mapping[desc.radial], desc.radial_mapped)
    assert desc.small.min() >= 0 and desc.small.max() < 256


@pytest.mark.parametrize("mre", [False, True])
def test_thread_count_does_not_change_descriptors(mre):
    rng = np.random.default_rng(11)
    image = rng.normal(size=(48, 41))
    params = Parameters()
    filtered = filter_images(image, params, n_jobs=1) if mre else None
    one = compute_descriptors(image, params, filtered=filtered, n_jobs=1)
    for jobs in (2, 5):
        other = compute_descriptors(image, params, filtered=filtered, n_jobs=jobs)
        for a, b in zip(one.mapped().values(), other.mapped().values()):
            assert np.array_equal(a, b)
        assert np.array_equal(one.small, other.small)


def test_plain_lbp_on_constant_image_is_all_ones_code():
    image = np.full((10, 10), 3.0)
    desc = compute_descriptors(image, Parameters(radius=2))
    assert desc.shape == (6, 6)
    assert np.all(desc.small == 255)
    assert np.all(desc.small_mapped == 8)
    assert desc.large is None and not desc.mre


def test_plain_lbp_compares_against_pixel_value():
    image = np.zeros((3, 3))
    image[1, 1] = 1.0
    image[2, 1] = 1.0  # neighbour k=0 sits at +1 row
    desc = compute_descriptors(image, Parameters(radius=1, neighbours=4))
    assert desc.small.tolist() == [[1]]
    assert desc.small_mapped.tolist() == [[1]]


def test_center_histogram_counts_valid_region(test_image):
    image = test_image("Quarters", (28, 28))
    params = Parameters()
    filtered = filter_images(image, params)
    assert filtered.hist_center.sum() == 36
    d = filtered.margin
    valid = filtered.center[d:d + 6, d:d + 6]
    assert abs(valid.mean()) < 1e-12
    assert filtered.hist_center[0] == np.count_nonzero(valid >= -params.eps1)


def test_too_small_image_fails_before_computing():
    with pytest.raises(DescriptorError) as exc:
        compute_descriptors(np.ones((6, 6)), Parameters(radius=3))
    assert not isinstance(exc.value, DegenerateInputError)
    assert "no pixels" in str(exc.value)


def test_mapping_size_mismatch_rejected():
    with pytest.raises(DescriptorError):
        compute_descriptors(np.ones((10, 10)), Parameters(radius=1), mapping=build_mapping(4))

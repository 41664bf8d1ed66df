"""Unit coverage for bounding-box helpers."""

import numpy as np
import pytest

from hyperrect import DimensionMismatchError, HyperRect, PartitionConfig
from hyperrect.utils import bounding_hyper_rect, enclosing_hyper_rect


def test_bounding_box_contains_every_point():
    rng = np.random.default_rng(5)
    points = rng.normal(size=(200, 4))
    rect = bounding_hyper_rect(points)

    assert rect.dimension == 4
    assert all(rect.contains(p) for p in points)
    np.testing.assert_array_equal(rect.min_corner, points.min(axis=0))
    np.testing.assert_array_equal(rect.max_corner, points.max(axis=0))


def test_bounding_box_of_single_point_is_point():
    rect = bounding_hyper_rect([1.0, 2.0, 3.0])
    assert rect.is_point()
    assert rect.contains([1.0, 2.0, 3.0])


def test_bounding_box_padding_fraction_from_config():
    points = np.array([[0.0, 0.0], [10.0, 2.0]])
    rect = bounding_hyper_rect(points, PartitionConfig(padding_fraction=0.1))
    np.testing.assert_allclose(rect.min_corner, [-1.0, -0.2])
    np.testing.assert_allclose(rect.max_corner, [11.0, 2.2])


def test_bounding_box_min_padding_for_degenerate_cloud():
    points = np.array([[2.0, 2.0], [2.0, 2.0]])
    config = PartitionConfig(padding_fraction=0.05, min_padding=1e-6)
    rect = bounding_hyper_rect(points, config=config)
    assert not rect.is_point()
    assert np.all(rect.widths() >= 1.9e-6)


@pytest.mark.parametrize(
    "points",
    [np.empty((0, 3)), np.empty((3, 0)), np.zeros((2, 2, 2)), [[0.0, np.nan]], [[np.inf, 0.0]]],
)
def test_bounding_box_rejects_bad_points(points):
    with pytest.raises(ValueError):
        bounding_hyper_rect(points)


def test_bounding_box_applies_config_padding():
    points = np.array([[0.0, 0.0], [2.0, 2.0]])
    config = PartitionConfig(padding_fraction=0.5, min_padding=1.0)
    rect = bounding_hyper_rect(points, config)
    assert rect == HyperRect([-1.0, -1.0], [3.0, 3.0])

    # min_padding wins over a small fractional padding
    config = PartitionConfig(padding_fraction=0.1, min_padding=1.0)
    assert bounding_hyper_rect(points, config) == HyperRect([-1.0, -1.0], [3.0, 3.0])


def test_bounding_box_default_config_has_no_padding():
    rect = bounding_hyper_rect([[0.0, 0.0], [2.0, 2.0]])
    assert rect == HyperRect([0.0, 0.0], [2.0, 2.0])


def test_bounding_box_rejects_negative_padding():
    with pytest.raises(ValueError):
        bounding_hyper_rect([[0.0, 0.0]], PartitionConfig(padding_fraction=-0.1))
    with pytest.raises(ValueError):
        bounding_hyper_rect([[0.0, 0.0]], PartitionConfig(min_padding=-1.0))


def test_enclosing_box_of_boxes():
    a = HyperRect([0.0, 0.0], [1.0, 1.0])
    b = HyperRect([3.0, -2.0], [4.0, 0.5])
    rect = enclosing_hyper_rect([a, b])
    assert rect == HyperRect([0.0, -2.0], [4.0, 1.0])
    assert enclosing_hyper_rect(iter([a])) == a


def test_enclosing_box_is_independent_of_inputs():
    a = HyperRect([0.0], [1.0])
    rect = enclosing_hyper_rect([a])
    rect.set_max_corner_coord(0, 5.0)
    assert a.get_max_corner_coord(0) == 1.0


def test_enclosing_box_rejects_empty_input():
    with pytest.raises(ValueError):
        enclosing_hyper_rect([])


def test_enclosing_box_rejects_mixed_dimensions():
    with pytest.raises(DimensionMismatchError):
        enclosing_hyper_rect([HyperRect(2), HyperRect(3)])


def test_enclosing_box_rejects_non_hyper_rect():
    with pytest.raises(TypeError):
        enclosing_hyper_rect([HyperRect(2), [0.0, 0.0]])

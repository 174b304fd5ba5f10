"""Tests for the bounding-box accumulator."""

import numpy as np
import pytest

from svgraphics.engine.bounds import RectLimits
from svgraphics.svg.parser import parse_svg
from tests.conftest import TWO_BOXES_SVG


def test_two_disjoint_boxes():
    limits = RectLimits()
    limits.process_points(np.array([[0, 0], [10, 10]], dtype=float))
    limits.process_points(np.array([[20, 5], [30, 15]], dtype=float))
    assert limits.content_size == (30.0, 15.0)
    assert limits.center == (15.0, 7.5)
    assert limits.anchor_point == pytest.approx((0.0, 0.0))


def test_single_point_updates():
    limits = RectLimits()
    limits.process_point(-2, 3)
    limits.process_point(4, -1)
    assert (limits.min_x, limits.max_x, limits.min_y, limits.max_y) == (-2, 4, -1, 3)


def test_empty_accumulator():
    limits = RectLimits()
    assert limits.is_empty
    assert limits.content_size == (0.0, 0.0)
    assert limits.anchor_point == (0.5, 0.5)


def test_empty_points_ignored():
    limits = RectLimits()
    limits.process_points(np.empty((0, 2)))
    assert limits.is_empty


def test_zero_extent_axis_keeps_centered_anchor():
    limits = RectLimits()
    limits.process_points(np.array([[0, 2], [8, 2]], dtype=float))
    assert limits.content_size == (8.0, 0.0)
    assert limits.anchor_point == (0.0, 0.5)


def test_compiled_two_boxes():
    ctx = parse_svg(TWO_BOXES_SVG)
    assert len(ctx.elements) == 2
    assert ctx.content_size == pytest.approx((30.0, 15.0))
    # Drawing space is y-up, so the combined box is [0,30] x [-15,0]
    assert ctx.anchor_point == pytest.approx((0.0, 1.0))

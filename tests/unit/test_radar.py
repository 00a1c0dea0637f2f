"""
Unit Tests for Radar Geometry
"""
import math
import pytest
import numpy as np

from skincheck.core.catalog import METRIC_KEYS, BASELINE_SCORES
from skincheck.core.radar import RadarGeometry, RadarChart, GRID_LEVELS, axis_angles, polygon


@pytest.fixture
def geometry() -> RadarGeometry:
    return RadarGeometry()


def _distance(p, center=(0.0, 0.0)) -> float:
    return math.hypot(p[0] - center[0], p[1] - center[1])


def _pairwise_distances(points):
    pts = np.asarray(points)
    diffs = pts[:, None, :] - pts[None, :, :]
    return np.sort(np.sqrt((diffs ** 2).sum(axis=-1)).ravel())


class TestAxisLayout:
    """Tests for angle layout."""

    def test_first_axis_points_up(self):
        x, y = polygon([100, 100, 100], 10)[0]
        assert x == pytest.approx(0.0, abs=1e-9)
        assert y == pytest.approx(-10.0)

    def test_axes_proceed_clockwise(self):
        pts = polygon([100] * 7, 10)
        # screen coordinates: second vertex is right of the top one
        assert pts[1][0] > 0
        assert pts[-1][0] < 0

    def test_angles_evenly_spaced(self):
        angles = axis_angles(7)
        assert np.allclose(np.diff(angles), 2 * np.pi / 7)
        assert angles[0] == pytest.approx(-np.pi / 2)

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_too_few_axes(self, n):
        with pytest.raises(ValueError):
            axis_angles(n)


class TestRadarGeometry:
    """Tests for RadarGeometry.project."""

    def test_catalog_order_and_distances(self, geometry):
        chart = geometry.project(dict(BASELINE_SCORES), radius=100)
        assert chart.keys == list(METRIC_KEYS)
        assert len(chart.points) == 7
        for key, point in zip(chart.keys, chart.points):
            assert _distance(point) == pytest.approx(BASELINE_SCORES[key])

    def test_grid_levels(self, geometry):
        chart = geometry.project(dict(BASELINE_SCORES), radius=50)
        assert tuple(chart.grid) == GRID_LEVELS
        for level, poly in chart.grid.items():
            assert len(poly) == 7
            for point in poly:
                assert _distance(point) == pytest.approx(level / 100 * 50)

    def test_axes_carry_keys_at_full_radius(self, geometry):
        chart = geometry.project(dict(BASELINE_SCORES), radius=80)
        assert [k for k, _ in chart.axes] == list(METRIC_KEYS)
        assert all(_distance(p) == pytest.approx(80) for _, p in chart.axes)

    def test_center_offset(self, geometry):
        chart = geometry.project({"a": 50, "b": 50, "c": 50}, radius=100, center=(150, 150))
        assert chart.points[0] == pytest.approx((150.0, 100.0))

    def test_generalizes_to_other_sizes(self, geometry):
        for n in (3, 5, 12):
            scores = {f"m{i}": 10 * (i + 1) for i in range(n)}
            chart = geometry.project(scores, radius=10)
            assert chart.keys == list(scores)
            assert len(chart.points) == n
            assert all(len(poly) == n for poly in chart.grid.values())

    def test_rotation_stable(self, geometry):
        scores = dict(BASELINE_SCORES)
        order = list(METRIC_KEYS)
        rotated = order[3:] + order[:3]
        base = geometry.project(scores, radius=100, order=order)
        turned = geometry.project(scores, radius=100, order=rotated)
        # same radius per metric, same shape
        for key in order:
            i, j = base.keys.index(key), turned.keys.index(key)
            assert _distance(base.points[i]) == pytest.approx(_distance(turned.points[j]))
        assert np.allclose(_pairwise_distances(base.points), _pairwise_distances(turned.points))

    def test_invalid_inputs(self, geometry):
        with pytest.raises(ValueError):
            geometry.project({"a": 10, "b": 20}, radius=10)
        with pytest.raises(ValueError):
            geometry.project(dict(BASELINE_SCORES), radius=0)

    def test_to_svg_points(self):
        assert RadarChart.to_svg_points([(0.0, -50.0), (1.234, 2.0)]) == "0.00,-50.00 1.23,2.00"

    def test_to_dict(self, geometry):
        d = geometry.project({"a": 100, "b": 100, "c": 100}, radius=1).to_dict()
        assert d["keys"] == ["a", "b", "c"]
        assert set(d["grid"]) == {"20", "40", "60", "80", "100"}
        assert d["axes"][0]["key"] == "a"

"""
Radar Geometry

Projects a score vector onto 2-D polygon coordinates for a radar chart.
Index 0 sits at the top and axes proceed clockwise in screen
coordinates (y grows downward). Pure coordinate transform; no knowledge
of what the scores mean.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple
import numpy as np

from skincheck.core.catalog import METRIC_KEYS

Point = Tuple[float, float]

GRID_LEVELS: Tuple[int, ...] = (20, 40, 60, 80, 100)
MIN_AXES = 3


@dataclass
class RadarChart:
    """Polygon coordinates for one score vector."""
    keys: List[str]
    points: List[Point]
    grid: Dict[int, List[Point]] = field(default_factory=dict)
    axes: List[Tuple[str, Point]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        """Serialize to dictionary."""
        return {
            "keys": self.keys,
            "points": [list(p) for p in self.points],
            "grid": {str(level): [list(p) for p in poly] for level, poly in self.grid.items()},
            "axes": [{"key": k, "point": list(p)} for k, p in self.axes],
        }

    @staticmethod
    def to_svg_points(polygon: Sequence[Point], precision: int = 2) -> str:
        """Format a polygon as an SVG ``points`` attribute."""
        return " ".join(f"{x:.{precision}f},{y:.{precision}f}" for x, y in polygon)


def axis_angles(n: int) -> np.ndarray:
    """Angle of each axis: i * 2π/N - π/2."""
    if n < MIN_AXES:
        raise ValueError(f"Radar chart needs at least {MIN_AXES} axes, got {n}")
    return np.arange(n) * (2 * np.pi / n) - np.pi / 2


def polygon(values: Sequence[float], radius: float, center: Point = (0.0, 0.0)) -> List[Point]:
    """
    Place one vertex per value at distance ``value/100 * radius``.

    Args:
        values: Values on a 0-100 scale, one per axis
        radius: Drawing radius corresponding to a value of 100
        center: Chart origin

    Returns:
        List of (x, y) vertices in axis order
    """
    angles = axis_angles(len(values))
    distances = np.asarray(values, dtype=float) / 100.0 * radius
    xs = center[0] + distances * np.cos(angles)
    ys = center[1] + distances * np.sin(angles)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


class RadarGeometry:
    """Builds RadarChart coordinates for a caller-supplied radius."""

    def __init__(self, levels: Tuple[int, ...] = GRID_LEVELS):
        self._levels = levels

    def project(
        self,
        scores: Mapping[str, float],
        radius: float,
        center: Point = (0.0, 0.0),
        order: Optional[Sequence[str]] = None,
    ) -> RadarChart:
        """
        Project a score vector.

        ``order`` defaults to catalog order for catalog keys; any other
        keys follow in the mapping's own order.
        """
        if radius <= 0:
            raise ValueError(f"Radius must be positive, got {radius}")

        if order is None:
            order = [k for k in METRIC_KEYS if k in scores]
            order += [k for k in scores if k not in METRIC_KEYS]
        keys = list(order)
        n = len(keys)

        points = polygon([scores[k] for k in keys], radius, center)
        grid = {level: polygon([level] * n, radius, center) for level in self._levels}
        outer = polygon([100] * n, radius, center)

        return RadarChart(
            keys=keys,
            points=points,
            grid=grid,
            axes=list(zip(keys, outer)),
        )

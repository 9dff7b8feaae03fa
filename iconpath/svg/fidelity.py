"""Fidelity checks — compare normalized output against the source geometry.

Bounds are computed with svgpathtools on both sides: the source shape's
bounds are mapped through the scale frame and compared with the bounds of
the emitted path. Circles are additionally sampled along the emitted arcs
to measure how far the two-arc approximation strays from the true radius.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from svgpathtools import parse_path

from iconpath.svg.path_grammar import AxisKind, parse_numbers
from iconpath.svg.scaler import ScaleFrame
from iconpath.svg.shapes import ShapeKind, ShapeRecord

logger = logging.getLogger(__name__)

# (xmin, ymin, xmax, ymax)
BBox = tuple[float, float, float, float]

_CIRCLE_SAMPLES = 256


@dataclass
class FidelityReport:
    shape_index: int
    kind: ShapeKind
    expected_bbox: BBox
    actual_bbox: BBox
    # Largest absolute difference between matching bbox edges (target units)
    deviation: float
    # Circles only: largest |distance-to-centre - radius| over sampled points
    radial_error: float | None = None

    def within(self, tolerance: float) -> bool:
        if self.deviation > tolerance:
            return False
        return self.radial_error is None or self.radial_error <= tolerance


def path_bbox(d: str) -> BBox | None:
    """Bounding box of path data, or None for a path with no drawable segments."""
    path = parse_path(d)
    if len(path) == 0:
        return None
    xmin, xmax, ymin, ymax = path.bbox()
    return (float(xmin), float(ymin), float(xmax), float(ymax))


def _source_bbox(shape: ShapeRecord) -> BBox | None:
    if shape.kind is ShapeKind.PATH:
        return path_bbox(shape.get("d") or "")
    if shape.kind in (ShapeKind.POLYGON, ShapeKind.POLYLINE):
        values = np.array(parse_numbers(shape.get("points") or ""), dtype=np.float64).reshape(-1, 2)
        return (
            float(values[:, 0].min()),
            float(values[:, 1].min()),
            float(values[:, 0].max()),
            float(values[:, 1].max()),
        )
    return None


def _expected_bbox(shape: ShapeRecord, frame: ScaleFrame) -> BBox | None:
    if shape.kind is ShapeKind.CIRCLE:
        cx, cy, r = (parse_numbers(shape.get(n) or "")[0] for n in ("cx", "cy", "r"))
        scx, scy = frame.scale(cx, AxisKind.X), frame.scale(cy, AxisKind.Y)
        sr = frame.scale(r, AxisKind.MIN)
        return (scx - sr, scy - sr, scx + sr, scy + sr)

    src = _source_bbox(shape)
    if src is None:
        return None
    xmin, ymin, xmax, ymax = src
    return (
        frame.scale(xmin, AxisKind.X),
        frame.scale(ymin, AxisKind.Y),
        frame.scale(xmax, AxisKind.X),
        frame.scale(ymax, AxisKind.Y),
    )


def _radial_error(d: str, centre: tuple[float, float], radius: float) -> float:
    path = parse_path(d)
    ts = np.linspace(0.0, 1.0, _CIRCLE_SAMPLES)
    points = np.array([path.point(t) for t in ts])
    dist = np.abs(points - complex(*centre))
    return float(np.max(np.abs(dist - radius)))


def check_shape_fidelity(shape: ShapeRecord, normalized_d: str, frame: ScaleFrame) -> FidelityReport | None:
    """Compare a shape's normalized path with where its source geometry should land.

    Returns None when either side has nothing to measure (e.g. a lone moveto).
    """
    expected = _expected_bbox(shape, frame)
    actual = path_bbox(normalized_d)
    if expected is None or actual is None:
        return None

    deviation = float(np.max(np.abs(np.subtract(expected, actual))))
    report = FidelityReport(
        shape_index=shape.index,
        kind=shape.kind,
        expected_bbox=expected,
        actual_bbox=actual,
        deviation=deviation,
    )
    if shape.kind is ShapeKind.CIRCLE:
        xmin, ymin, xmax, ymax = expected
        report.radial_error = _radial_error(normalized_d, ((xmin + xmax) / 2, (ymin + ymax) / 2), (xmax - xmin) / 2)

    logger.debug(
        "fidelity shape %d (%s): deviation %.4f radial %s",
        shape.index,
        shape.kind.value,
        deviation,
        report.radial_error,
    )
    return report

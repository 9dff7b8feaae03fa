"""Parameter classifier & scaler — rewrites shape geometry into the target frame.

Each path command's parameters are tagged positionally by the command's
template (see ``PATH_COMMAND_TEMPLATES``) and scaled according to the tag:

    X / Y    absolute coordinate: scale by the longer viewBox edge, remove the
             viewBox offset, add the centering shift
    RX / RY  length along an axis: scale only
    MIN      circle radius: scale by the shorter viewBox edge
    NONE     literal pass-through

Coordinates of relative (lowercase) commands are deltas, so they are scaled
like lengths. In strict mode offset and shift are always zero and every rule
collapses to ``v / w * target``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from iconpath.errors import InvalidPolygonError, MissingAttributeError, UnhandledShapeError
from iconpath.svg.path_grammar import AxisKind, PathCommand, parse_numbers, parse_path
from iconpath.svg.shapes import ShapeKind, ShapeRecord
from iconpath.svg.viewbox import Axis, ViewBox

logger = logging.getLogger(__name__)

TARGET_SIZE = 24.0
MAX_DECIMALS = 3

# Nudge (target units) on the arc end point of a circle. An arc whose end
# equals its start draws nothing, so the end is moved just off the start.
# TODO: check rendering at radii below 1 unit, the nudge is visible there.
CIRCLE_EPSILON = 0.001

_AXIS_OF = {AxisKind.X: Axis.X, AxisKind.Y: Axis.Y, AxisKind.RX: Axis.X, AxisKind.RY: Axis.Y}


@dataclass(frozen=True)
class ScaleFrame:
    viewbox: ViewBox
    target_size: float = TARGET_SIZE
    max_decimals: int = MAX_DECIMALS

    def scale(self, value: float, kind: AxisKind, relative: bool = False) -> float:
        if kind is AxisKind.NONE:
            return value

        vb = self.viewbox
        if kind is AxisKind.MIN:
            result = value / vb.shortest * self.target_size
        else:
            result = value / vb.longest * self.target_size
            if kind in (AxisKind.X, AxisKind.Y) and not relative:
                axis = _AXIS_OF[kind]
                offset = vb.offset(axis) / vb.longest * self.target_size
                result = result - offset + vb.shift(axis, self.target_size)

        result = round(result, self.max_decimals)
        logger.debug("scale %s %s%s -> %s", kind.value, value, " (rel)" if relative else "", result)
        return result

    def unscale(self, value: float, kind: AxisKind) -> float:
        """Inverse of ``scale`` for absolute values (unrounded)."""
        vb = self.viewbox
        if kind is AxisKind.NONE:
            return value
        if kind is AxisKind.MIN:
            return value / self.target_size * vb.shortest
        if kind in (AxisKind.X, AxisKind.Y):
            axis = _AXIS_OF[kind]
            value = value - vb.shift(axis, self.target_size) + vb.offset(axis) / vb.longest * self.target_size
        return value / self.target_size * vb.longest


def scale_command(cmd: PathCommand, frame: ScaleFrame) -> PathCommand:
    template = cmd.template
    relative = not cmd.is_absolute
    scaled = tuple(
        frame.scale(param, template[i % len(template)], relative) for i, param in enumerate(cmd.params)
    )
    return PathCommand(cmd.letter, scaled)


# ── Per-kind conversion ───────────────────────────────────────────────────


def _require(shape: ShapeRecord, *names: str) -> list[float]:
    missing = [n for n in names if shape.get(n) is None]
    if missing:
        raise MissingAttributeError(f"{shape.kind.value} is missing required attribs: {', '.join(missing)}")
    values = []
    for name in names:
        numbers = parse_numbers(shape.get(name) or "")
        if len(numbers) != 1:
            raise MissingAttributeError(f"{shape.kind.value} attrib {name}={shape.get(name)!r} is not a number")
        values.append(numbers[0])
    return values


def _path(shape: ShapeRecord, frame: ScaleFrame) -> list[PathCommand]:
    d = shape.get("d")
    if not d:
        raise MissingAttributeError("path elem has no d attrib")
    return [scale_command(cmd, frame) for cmd in parse_path(d)]


def _circle(shape: ShapeRecord, frame: ScaleFrame) -> list[PathCommand]:
    cx, cy, r = _require(shape, "cx", "cy", "r")
    scx = frame.scale(cx, AxisKind.X)
    scy = frame.scale(cy, AxisKind.Y)
    sr = frame.scale(r, AxisKind.MIN)
    top = round(scy - sr, frame.max_decimals)
    end_x = round(scx + CIRCLE_EPSILON, frame.max_decimals)
    return [
        PathCommand("M", (scx, top)),
        PathCommand("A", (sr, sr, 0.0, 1.0, 0.0, end_x, top)),
        PathCommand("Z"),
    ]


def _points(shape: ShapeRecord, frame: ScaleFrame, close: bool) -> list[PathCommand]:
    raw = shape.get("points")
    if raw is None:
        raise MissingAttributeError(f"{shape.kind.value} elem has no points attrib")
    values = parse_numbers(raw)
    if len(values) < 4 or len(values) % 2 != 0:
        raise InvalidPolygonError(f"{shape.kind.value} needs an even count of at least 4 numbers, got {len(values)}")

    scaled = tuple(frame.scale(v, AxisKind.X if i % 2 == 0 else AxisKind.Y) for i, v in enumerate(values))
    commands = [PathCommand("M", scaled[:2]), PathCommand("L", scaled[2:])]
    if close:
        commands.append(PathCommand("Z"))
    return commands


def _polygon(shape: ShapeRecord, frame: ScaleFrame) -> list[PathCommand]:
    return _points(shape, frame, close=True)


def _polyline(shape: ShapeRecord, frame: ScaleFrame) -> list[PathCommand]:
    return _points(shape, frame, close=False)


def _unhandled(shape: ShapeRecord, frame: ScaleFrame) -> list[PathCommand]:
    raise UnhandledShapeError(f"unhandled shape tag {shape.kind.value}")


_CONVERTERS: dict[ShapeKind, Callable[[ShapeRecord, ScaleFrame], list[PathCommand]]] = {
    ShapeKind.PATH: _path,
    ShapeKind.CIRCLE: _circle,
    ShapeKind.RECT: _unhandled,
    ShapeKind.ELLIPSE: _unhandled,
    ShapeKind.LINE: _unhandled,
    ShapeKind.POLYLINE: _polyline,
    ShapeKind.POLYGON: _polygon,
}


def normalize_shape(shape: ShapeRecord, frame: ScaleFrame) -> list[PathCommand]:
    """Convert one shape into scaled, absolute-start path commands."""
    return _CONVERTERS[shape.kind](shape, frame)

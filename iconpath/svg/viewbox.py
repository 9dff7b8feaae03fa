"""ViewBox resolver — source coordinate frame of an SVG document.

Two policies:
- STRICT: the viewBox must be square (1% tolerance) with zero offset.
- CENTERING: any offset and aspect ratio. The longer edge maps onto the
  target size and the shorter axis is shifted so the content sits centred.
"""

from __future__ import annotations

import enum
import logging
import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from iconpath.errors import (
    InvalidViewBoxError,
    MissingViewBoxError,
    NonSquareViewBoxError,
    OffsetViewBoxError,
)
from iconpath.svg.dom import get_attribute

logger = logging.getLogger(__name__)

# |w - h| may differ by up to 1% of the longer edge in strict mode.
_SQUARE_TOLERANCE = 0.01

_SEPARATOR_RE = re.compile(r"[\s,]+")


class ViewBoxMode(str, enum.Enum):
    STRICT = "strict"
    CENTERING = "centering"


class Axis(enum.Enum):
    X = "x"
    Y = "y"


@dataclass(frozen=True)
class ViewBox:
    x: float
    y: float
    w: float
    h: float

    @property
    def shortest(self) -> float:
        return min(self.w, self.h)

    @property
    def longest(self) -> float:
        return max(self.w, self.h)

    def offset(self, axis: Axis) -> float:
        return self.x if axis is Axis.X else self.y

    def length(self, axis: Axis) -> float:
        return self.w if axis is Axis.X else self.h

    def shift(self, axis: Axis, target_size: float) -> float:
        """Centering shift in target units; non-zero only on the shorter axis."""
        if self.length(axis) >= self.longest:
            return 0.0
        return (self.longest - self.shortest) / self.longest * target_size / 2


def parse_viewbox(text: str | None, mode: ViewBoxMode = ViewBoxMode.STRICT) -> ViewBox:
    """Parse an ``x y w h`` viewBox string and validate it against ``mode``."""
    if text is None or not text.strip():
        raise MissingViewBoxError("no viewbox found on svg elem")

    parts = _SEPARATOR_RE.split(text.strip())
    if len(parts) != 4:
        raise InvalidViewBoxError(f"viewbox needs 4 numbers, got {text!r}")
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError as e:
        raise InvalidViewBoxError(f"viewbox is not numeric: {text!r}") from e
    if not all(math.isfinite(v) for v in (x, y, w, h)):
        raise InvalidViewBoxError(f"viewbox is not finite: {text!r}")
    if w <= 0 or h <= 0:
        raise InvalidViewBoxError(f"viewbox has non-positive size: {text!r}")

    logger.debug("viewbox x=%s y=%s w=%s h=%s (%s)", x, y, w, h, mode.value)

    if mode is ViewBoxMode.CENTERING:
        return ViewBox(x, y, w, h)

    if abs(w - h) > _SQUARE_TOLERANCE * max(w, h):
        raise NonSquareViewBoxError(f"viewbox is not square: {w} x {h}")
    if x != 0 or y != 0:
        raise OffsetViewBoxError(f"viewbox has non-zero offset: {x}, {y}")
    side = max(w, h)
    return ViewBox(0.0, 0.0, side, side)


def resolve_viewbox(svg_root: ET.Element, mode: ViewBoxMode = ViewBoxMode.STRICT) -> ViewBox:
    return parse_viewbox(get_attribute(svg_root, "viewBox"), mode)

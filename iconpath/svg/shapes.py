"""Shape extractor — SVG shape elements → ShapeRecords in a stable order."""

from __future__ import annotations

import enum
import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field

from iconpath.svg.dom import iter_tag, strip_ns

logger = logging.getLogger(__name__)


class ShapeKind(str, enum.Enum):
    # Declaration order is extraction order.
    PATH = "path"
    CIRCLE = "circle"
    RECT = "rect"
    ELLIPSE = "ellipse"
    LINE = "line"
    POLYLINE = "polyline"
    POLYGON = "polygon"


SHAPE_KINDS: tuple[ShapeKind, ...] = tuple(ShapeKind)


@dataclass
class ShapeRecord:
    kind: ShapeKind
    attributes: dict[str, str] = field(default_factory=dict)
    # Position in the extraction sequence (0-based, across all kinds)
    index: int = 0

    def get(self, name: str) -> str | None:
        return self.attributes.get(name)


def _attributes(elem: ET.Element) -> dict[str, str]:
    return {strip_ns(k): v for k, v in elem.attrib.items()}


def extract_shapes(svg_root: ET.Element) -> Iterator[ShapeRecord]:
    """Yield every shape, grouped by kind in SHAPE_KINDS order, document order within a kind."""
    index = 0
    for kind in SHAPE_KINDS:
        for elem in iter_tag(svg_root, kind.value):
            yield ShapeRecord(kind=kind, attributes=_attributes(elem), index=index)
            index += 1
    logger.debug("extracted %d shapes", index)

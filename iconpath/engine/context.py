"""ConversionContext — the per-file state flowing through the converter.

Created when a file is picked up and dropped once its IconResult is built;
nothing in it outlives the file.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from iconpath.svg.fidelity import FidelityReport
from iconpath.svg.scaler import ScaleFrame
from iconpath.svg.shapes import ShapeRecord


@dataclass
class ConversionContext:
    icon_name: str
    svg_raw: str
    # Source file, empty for in-memory input
    file_path: str = ""
    frame: ScaleFrame | None = None
    shapes: list[ShapeRecord] = field(default_factory=list)
    # One serialized path per shape, in extraction order
    paths: list[str] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)
    fidelity: list[FidelityReport] = field(default_factory=list)

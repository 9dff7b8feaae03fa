"""Converter pipeline — one SVG file in, one IconResult out.

Files are handled strictly one at a time in sorted order. A failure in any
file is logged with its path and re-raised as FileConversionError, which
stops the run; the skip list is the only way to leave a known-bad file out.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from pathlib import Path

from iconpath.engine.config import ConversionTables, ConverterConfig
from iconpath.engine.context import ConversionContext
from iconpath.errors import IconPathError
from iconpath.models.icon import IconResult
from iconpath.svg.colours import colour_classes
from iconpath.svg.dom import parse_document
from iconpath.svg.fidelity import check_shape_fidelity
from iconpath.svg.scaler import ScaleFrame, normalize_shape
from iconpath.svg.serializer import build_icon_result, serialize_path
from iconpath.svg.shapes import ShapeRecord, extract_shapes
from iconpath.svg.viewbox import resolve_viewbox

logger = logging.getLogger(__name__)

SVG_SUFFIX = ".svg"


class FileConversionError(IconPathError):
    """Wraps the failure of a single file with the file's path."""

    def __init__(self, file_path: str, cause: Exception) -> None:
        super().__init__(f"error parsing {file_path}: {cause}")
        self.file_path = file_path
        self.cause = cause


def iter_source_files(target: Path) -> list[Path]:
    """A single file, or the immediate ``*.svg`` files of a directory, sorted by name."""
    if target.is_dir():
        files = [p for p in target.iterdir() if p.is_file() and p.suffix.lower() == SVG_SUFFIX]
        return sorted(files, key=lambda p: (p.name.lower(), p.name))
    if target.is_file():
        return [target]
    raise FileNotFoundError(f"no such file or directory: {target}")


class IconConverter:
    """Runs the viewBox → shapes → scale → serialize chain for each file."""

    def __init__(
        self,
        config: ConverterConfig | None = None,
        tables: ConversionTables | None = None,
    ) -> None:
        self.config = config or ConverterConfig()
        self.tables = tables or ConversionTables()

    def convert_text(self, svg_text: str, icon_name: str, file_path: str = "") -> IconResult:
        ctx = ConversionContext(icon_name=icon_name, svg_raw=svg_text, file_path=file_path)
        self.process(ctx)
        return build_icon_result(ctx.icon_name, ctx.paths, ctx.classes)

    def convert_file(self, file_path: Path) -> IconResult:
        contents = file_path.read_text(encoding="utf-8")
        return self.convert_text(contents, self.tables.icon_name(file_path), str(file_path))

    def run(self, target: Path) -> Iterator[IconResult]:
        """Convert every file under ``target``; stops at the first failure."""
        for file_path in iter_source_files(target):
            if self.tables.is_skipped(file_path):
                logger.info("Skipping %s (skip list)", file_path)
                continue
            try:
                result = self.convert_file(file_path)
            except Exception as e:
                logger.exception("error parsing %s: %s", file_path, e)
                raise FileConversionError(str(file_path), e) from e
            yield result

    def process(self, ctx: ConversionContext) -> ConversionContext:
        """Fill in frame, shapes, paths, classes (and fidelity reports) on ``ctx``."""
        start = time.perf_counter()
        cfg = self.config

        root = parse_document(ctx.svg_raw)
        viewbox = resolve_viewbox(root, cfg.viewbox_mode)
        ctx.frame = ScaleFrame(viewbox, cfg.target_size, cfg.max_decimals)
        ctx.shapes = list(extract_shapes(root))
        if not ctx.shapes:
            logger.warning("%s: no shape elements found", ctx.icon_name)

        for shape in ctx.shapes:
            d = serialize_path(normalize_shape(shape, ctx.frame), cfg.max_decimals)
            ctx.paths.append(d)
            if cfg.verify:
                self._verify(ctx, shape, d)

        ctx.classes = colour_classes(ctx.svg_raw, self.tables.colour_classes)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Converted %s: %d shapes, %d colours in %.1fms",
            ctx.icon_name,
            len(ctx.paths),
            len(ctx.classes),
            elapsed,
        )
        return ctx

    def _verify(self, ctx: ConversionContext, shape: ShapeRecord, d: str) -> None:
        report = check_shape_fidelity(shape, d, ctx.frame)
        if report is None:
            return
        ctx.fidelity.append(report)
        if not report.within(self.config.fidelity_tolerance):
            logger.warning(
                "%s: %s #%d deviates from source by %.4f (radial %s)",
                ctx.icon_name,
                shape.kind.value,
                shape.index,
                report.deviation,
                report.radial_error,
            )

"""iconpath — convert SVG icons into normalized 24x24 path data.

Usage:
    iconpath [PATH] [--mode strict|centering] [--verify] [--preview-dir DIR]

PATH is an SVG file or a directory of them (not recursive) and defaults to
ICONPATH_SOURCE_DIR. One JSON record per icon goes to stdout; logging and
error reports go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from iconpath.config import Settings
from iconpath.engine.config import ConversionTables, ConverterConfig
from iconpath.engine.pipeline import FileConversionError, IconConverter
from iconpath.models.icon import ConversionErrorReport
from iconpath.svg.serializer import serialize_svg
from iconpath.svg.viewbox import ViewBoxMode

logger = logging.getLogger(__name__)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iconpath", description="Normalize SVG icons into 24x24 path data")
    parser.add_argument("path", nargs="?", default=settings.source_dir, help="SVG file or folder of SVGs")
    parser.add_argument(
        "-m",
        "--mode",
        choices=[m.value for m in ViewBoxMode],
        default=settings.viewbox_mode.value,
        help="viewBox policy: strict (square, zero offset) or centering",
    )
    parser.add_argument("--verify", action="store_true", help="Check output bounds against the source geometry")
    parser.add_argument("--preview-dir", help="Also write a preview SVG per icon into this folder")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (debug shows scaling traces)")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = Settings()
    args = _build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    config = ConverterConfig(
        viewbox_mode=ViewBoxMode(args.mode),
        target_size=settings.target_size,
        max_decimals=settings.max_decimals,
        verify=args.verify,
        fidelity_tolerance=settings.fidelity_tolerance,
    )
    tables = ConversionTables.build(
        colour_classes=settings.colour_classes,
        icon_renames=settings.icon_renames,
        skip_paths=settings.skip_paths,
    )
    converter = IconConverter(config, tables)

    preview_dir = Path(args.preview_dir) if args.preview_dir else None
    if preview_dir:
        preview_dir.mkdir(parents=True, exist_ok=True)

    count = 0
    try:
        for result in converter.run(Path(args.path)):
            print(result.model_dump_json(by_alias=True), flush=True)
            if preview_dir:
                out_path = preview_dir / f"{result.icon_name}.svg"
                out_path.write_text(serialize_svg(result, config.target_size), encoding="utf-8")
                logger.debug("Saved preview %s", out_path)
            count += 1
    except FileConversionError as e:
        report = ConversionErrorReport(file_path=e.file_path, error=f"{type(e.cause).__name__}: {e.cause}")
        print(report.model_dump_json(by_alias=True), file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(ConversionErrorReport(file_path=args.path, error=str(e)).model_dump_json(by_alias=True), file=sys.stderr)
        return 1

    logger.info("Done: %d icons converted", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())

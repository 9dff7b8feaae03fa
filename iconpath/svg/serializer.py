"""Path serializer — scaled commands back into path data, plus preview SVGs."""

from __future__ import annotations

from xml.sax.saxutils import escape

from iconpath.models.icon import IconResult
from iconpath.svg.path_grammar import PathCommand
from iconpath.svg.scaler import MAX_DECIMALS, TARGET_SIZE

# Joins one command's params; the letter is written straight against them.
PARAM_JOINER = ","
COMMAND_JOINER = " "


def format_number(value: float, max_decimals: int = MAX_DECIMALS) -> str:
    """Shortest decimal text: ``12.0`` → ``12``, ``-0.0`` → ``0``, ``0.5`` → ``0.5``."""
    value = round(value, max_decimals)
    if value == int(value):
        return str(int(value))
    return repr(value)


def serialize_command(cmd: PathCommand, max_decimals: int = MAX_DECIMALS) -> str:
    return cmd.letter + PARAM_JOINER.join(format_number(p, max_decimals) for p in cmd.params)


def serialize_path(commands: list[PathCommand], max_decimals: int = MAX_DECIMALS) -> str:
    return COMMAND_JOINER.join(serialize_command(cmd, max_decimals) for cmd in commands)


def build_icon_result(icon_name: str, paths: list[str], classes: list[str]) -> IconResult:
    concat = COMMAND_JOINER.join(paths) if len(paths) > 1 else None
    return IconResult(icon_name=icon_name, paths=paths, classes=classes, concat=concat)


def serialize_svg(result: IconResult, canvas_size: float = TARGET_SIZE) -> str:
    """Standalone SVG of a converted icon, for eyeballing the output."""
    size = format_number(canvas_size)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {size} {size}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img">',
        f"  <title>{escape(result.icon_name)}</title>",
    ]
    for d in result.paths:
        lines.append(f'  <path d="{d}" />')
    lines.append("</svg>")
    return "\n".join(lines)

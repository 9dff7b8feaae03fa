"""Path grammar parser — SVG ``d`` attribute → command/parameter tuples.

The scanner walks the string once: a command letter opens a parameter run,
and the run continues over digits, signs, decimal points, separators and
exponent markers until the next command letter. Numbers are then pulled out
of each run with a single anchored regex, which copes with SVG's lax
separators (``1.5.5`` is ``1.5`` and ``.5``; ``10-5`` is ``10`` and ``-5``).
"""

from __future__ import annotations

import enum
import logging
import math
import re
from dataclasses import dataclass

from iconpath.errors import (
    ParamCountMismatchError,
    PathSyntaxError,
    RelativeStartError,
    UnknownCommandError,
)

logger = logging.getLogger(__name__)


class AxisKind(enum.Enum):
    """What a single command parameter means geometrically."""

    X = "x"  # x coordinate
    Y = "y"  # y coordinate
    RX = "rx"  # length along x (arc radius)
    RY = "ry"  # length along y (arc radius)
    MIN = "min"  # radius scaled by the shorter viewBox edge
    NONE = "none"  # passed through untouched (flags, rotation)


_X, _Y, _RX, _RY, _NONE = AxisKind.X, AxisKind.Y, AxisKind.RX, AxisKind.RY, AxisKind.NONE

# One template per command, keyed by lowercase letter. Template length is the
# command's arity; longer parameter lists repeat the command implicitly.
# https://developer.mozilla.org/en-US/docs/Web/SVG/Reference/Attribute/d
PATH_COMMAND_TEMPLATES: dict[str, tuple[AxisKind, ...]] = {
    "a": (_RX, _RY, _NONE, _NONE, _NONE, _X, _Y),
    "c": (_X, _Y, _X, _Y, _X, _Y),
    "h": (_X,),
    "l": (_X, _Y),
    "m": (_X, _Y),
    "q": (_X, _Y, _X, _Y),
    "s": (_X, _Y, _X, _Y),
    "t": (_X, _Y),
    "v": (_Y,),
    "z": (),
}

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_RUN_CHARS = frozenset("0123456789.,-+ \t\r\n\f")
_EXPONENT_FOLLOW = frozenset("0123456789-+")


@dataclass(frozen=True)
class PathCommand:
    letter: str
    params: tuple[float, ...] = ()

    @property
    def is_absolute(self) -> bool:
        return self.letter.isupper()

    @property
    def template(self) -> tuple[AxisKind, ...]:
        return PATH_COMMAND_TEMPLATES[self.letter.lower()]


def parse_numbers(text: str) -> list[float]:
    """Pull every number out of a parameter run (or a ``points`` attribute)."""
    numbers = [float(m.group(0)) for m in _NUMBER_RE.finditer(text)]
    if not all(math.isfinite(n) for n in numbers):
        raise PathSyntaxError(f"number out of range in {text.strip()!r}")
    return numbers


def _is_exponent(d: str, i: int, run: list[str]) -> bool:
    if not run or d[i] not in "eE":
        return False
    prev = run[-1]
    nxt = d[i + 1] if i + 1 < len(d) else ""
    return (prev.isdigit() or prev == ".") and nxt in _EXPONENT_FOLLOW


def tokenize_path(d: str) -> list[tuple[str, list[float]]]:
    """Split path data into ``(letter, params)`` pairs without validating them."""
    tokens: list[tuple[str, list[float]]] = []
    letter: str | None = None
    run: list[str] = []

    for i, ch in enumerate(d):
        if _is_exponent(d, i, run):
            run.append(ch)
        elif ch.isascii() and ch.isalpha():
            if letter is not None:
                tokens.append((letter, parse_numbers("".join(run))))
            letter, run = ch, []
        elif ch in _RUN_CHARS:
            if letter is None:
                if ch.isspace() or ch == ",":
                    continue
                raise PathSyntaxError(f"parameters before first command in {d!r}")
            run.append(ch)
        else:
            raise PathSyntaxError(f"unexpected character {ch!r} at {i} in {d!r}")

    if letter is not None:
        tokens.append((letter, parse_numbers("".join(run))))
    return tokens


def validate_command(letter: str, params: list[float]) -> PathCommand:
    template = PATH_COMMAND_TEMPLATES.get(letter.lower())
    if template is None:
        raise UnknownCommandError(f"unhandled command {letter}")
    arity = len(template)
    if arity == 0:
        if params:
            raise ParamCountMismatchError(f"{letter} takes no params, got {len(params)}")
    elif len(params) % arity != 0:
        joined = ", ".join(f"{p:g}" for p in params)
        raise ParamCountMismatchError(f"unexpected {letter} param count {len(params)}: {joined}")
    return PathCommand(letter, tuple(params))


def require_absolute_start(commands: list[PathCommand], source: str = "") -> None:
    """The first command of a shape must be absolute so shapes can be concatenated."""
    if commands and not commands[0].is_absolute:
        raise RelativeStartError(f"path begins with a relative command {source or commands[0].letter}")


def parse_path(d: str, require_absolute: bool = True) -> list[PathCommand]:
    commands = [validate_command(letter, params) for letter, params in tokenize_path(d)]
    if require_absolute:
        require_absolute_start(commands, d)
    for cmd in commands:
        logger.debug("command %s params %s", cmd.letter, cmd.params)
    return commands

"""Conversion errors — one subclass per failure condition.

Every error is a ValueError so callers that only care about "bad input"
can catch the builtin.
"""

from __future__ import annotations


class IconPathError(ValueError):
    """Base class for all conversion failures."""


# ── Document / viewBox ────────────────────────────────────────────────────


class SvgSyntaxError(IconPathError):
    pass


class MissingSvgElementError(IconPathError):
    pass


class MissingViewBoxError(IconPathError):
    pass


class InvalidViewBoxError(IconPathError):
    pass


class NonSquareViewBoxError(IconPathError):
    pass


class OffsetViewBoxError(IconPathError):
    pass


# ── Shapes ────────────────────────────────────────────────────────────────


class UnhandledShapeError(IconPathError):
    pass


class MissingAttributeError(IconPathError):
    pass


class InvalidPolygonError(IconPathError):
    pass


# ── Path data ─────────────────────────────────────────────────────────────


class PathSyntaxError(IconPathError):
    pass


class UnknownCommandError(IconPathError):
    pass


class ParamCountMismatchError(IconPathError):
    pass


class RelativeStartError(IconPathError):
    """A shape's path starts with a lowercase (relative) command."""

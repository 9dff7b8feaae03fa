"""Colour extractor — hex literals in raw markup → CSS class names.

Works on the source text rather than the DOM, so colours set through
<style> blocks or external stylesheets using names/rgb() are not seen.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

_HEX_COLOUR_RE = re.compile(r"#[0-9a-f]{3,}", re.IGNORECASE)


def extract_colours(svg_text: str) -> list[str]:
    """Distinct hex colours in first-seen order, lower-cased."""
    seen: dict[str, None] = {}
    for match in _HEX_COLOUR_RE.finditer(svg_text):
        seen.setdefault(match.group(0).lower(), None)
    return list(seen)


def colour_classes(svg_text: str, table: Mapping[str, str]) -> list[str]:
    """Map each colour to its class name; unknown colours pass through as hex.

    Two colours sharing a class yield that class once.
    """
    return list(dict.fromkeys(table.get(colour, colour) for colour in extract_colours(svg_text)))

"""Thin ElementTree helpers — namespace-agnostic tag and attribute access."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from iconpath.errors import MissingSvgElementError, SvgSyntaxError

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


def strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def parse_document(svg_text: str) -> ET.Element:
    """Parse SVG markup and return the <svg> element.

    Comments are dropped first. DOCTYPE declarations stay in place so the
    parser can expand internal entities (Illustrator exports reference them
    in namespace attributes); external DTDs are never fetched.
    """
    svg_text = _COMMENT_RE.sub("", svg_text)
    try:
        root = ET.fromstring(svg_text.strip())
    except ET.ParseError as e:
        raise SvgSyntaxError(f"malformed SVG markup: {e}") from e

    if strip_ns(root.tag).lower() == "svg":
        return root
    for elem in root.iter():
        if strip_ns(elem.tag).lower() == "svg":
            return elem
    raise MissingSvgElementError("no svg elem found")


def get_attribute(elem: ET.Element, name: str) -> str | None:
    """Case-insensitive attribute lookup (``viewbox`` matches ``viewBox``)."""
    value = elem.get(name)
    if value is not None:
        return value
    wanted = name.lower()
    for key, val in elem.attrib.items():
        if strip_ns(key).lower() == wanted:
            return val
    return None


def iter_tag(root: ET.Element, tag: str) -> Iterator[ET.Element]:
    """Yield every descendant element with the given local tag, in document order."""
    for elem in root.iter():
        if elem is not root and strip_ns(elem.tag).lower() == tag:
            yield elem

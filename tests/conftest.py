"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="6" fill="#AFCF5A"/>
</svg>'''

SQUARE_POLYGON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <polygon points="0,0 24,0 24,24 0,24"/>
</svg>'''

# 48-unit frame: everything halves
PIN_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!-- Generator: Adobe Illustrator 24.0.0 -->
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 48 48">
  <path fill="#afcf5a" d="M24 4C16.3 4 10 10.3 10 18c0 10.5 14 26 14 26s14-15.5 14-26C38 10.3 31.7 4 24 4z"/>
  <circle fill="#ffffff" cx="24" cy="18" r="5"/>
</svg>'''

# lower-case attribute name, as written by some exporters
LOWERCASE_VIEWBOX_SVG = '''<svg viewbox="0 0 12 12"><path d="M0 0L12 12"/></svg>'''

TALL_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 20">
  <path d="M0 0L10 20"/>
</svg>'''

RELATIVE_START_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="m10 10 l5 5"/>
</svg>'''

RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <rect x="2" y="2" width="20" height="20"/>
</svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <path d="M0 0L24 24"/>
</svg>'''

# Shapes written polygon-first; extraction must still put the path first.
MIXED_ORDER_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <polygon points="0,0 2,0 2,2"/>
  <g>
    <circle cx="12" cy="12" r="2"/>
    <path d="M1 1H5"/>
  </g>
  <path d="M2 2V6"/>
</svg>'''

# Illustrator-style export: namespace URIs come from internal DTD entities
ILLUSTRATOR_SVG = '''<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd" [
	<!ENTITY ns_extend "http://ns.adobe.com/Extensibility/1.0/">
	<!ENTITY ns_ai "http://ns.adobe.com/AdobeIllustrator/10.0/">
]>
<svg version="1.1" xmlns:x="&ns_extend;" xmlns:i="&ns_ai;" xmlns="http://www.w3.org/2000/svg"
     x="0px" y="0px" viewBox="0 0 48 48" i:viewOrigin="0 48">
  <path fill="#AFCF5A" d="M4 4H44V44H4Z"/>
</svg>'''


@pytest.fixture
def icon_dir(tmp_path: Path) -> Path:
    """Folder with two convertible icons, a non-SVG file and a subfolder."""
    (tmp_path / "pin.svg").write_text(PIN_SVG, encoding="utf-8")
    (tmp_path / "Circle.SVG").write_text(CIRCLE_SVG, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not an icon", encoding="utf-8")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "square.svg").write_text(SQUARE_POLYGON_SVG, encoding="utf-8")
    return tmp_path

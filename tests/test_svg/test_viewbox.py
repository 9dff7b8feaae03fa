"""Tests for the viewBox resolver."""

from __future__ import annotations

import pytest

from iconpath.errors import (
    InvalidViewBoxError,
    MissingViewBoxError,
    NonSquareViewBoxError,
    OffsetViewBoxError,
)
from iconpath.svg.dom import parse_document
from iconpath.svg.viewbox import Axis, ViewBox, ViewBoxMode, parse_viewbox, resolve_viewbox
from tests.conftest import CIRCLE_SVG, LOWERCASE_VIEWBOX_SVG, NO_VIEWBOX_SVG


def test_parse_square():
    vb = parse_viewbox("0 0 24 24")
    assert vb == ViewBox(0.0, 0.0, 24.0, 24.0)


def test_comma_separated():
    assert parse_viewbox("0,0,48,48") == ViewBox(0.0, 0.0, 48.0, 48.0)


def test_strict_normalizes_near_square_to_longest_edge():
    vb = parse_viewbox("0 0 100 99.5")
    assert vb.w == vb.h == 100.0


def test_strict_rejects_non_square():
    with pytest.raises(NonSquareViewBoxError):
        parse_viewbox("0 0 10 20")


def test_strict_rejects_offset():
    with pytest.raises(OffsetViewBoxError):
        parse_viewbox("2 0 24 24")


@pytest.mark.parametrize("text", [None, "", "   "])
def test_missing(text):
    with pytest.raises(MissingViewBoxError):
        parse_viewbox(text)


@pytest.mark.parametrize(
    "text",
    ["0 0 24", "0 0 a b", "0 0 0 24", "0 0 24 -1", "0 0 24 nan", "0 0 inf inf", "0 0 nan nan", "-inf 0 24 24"],
)
def test_invalid(text):
    with pytest.raises(InvalidViewBoxError):
        parse_viewbox(text, ViewBoxMode.CENTERING)


@pytest.mark.parametrize("text", ["0 0 24 nan", "0 0 nan nan", "0 0 inf inf"])
def test_strict_rejects_non_finite(text):
    with pytest.raises(InvalidViewBoxError):
        parse_viewbox(text)


def test_centering_keeps_offset_and_aspect():
    vb = parse_viewbox("5 -3 10 20", ViewBoxMode.CENTERING)
    assert vb == ViewBox(5.0, -3.0, 10.0, 20.0)
    assert vb.shortest == 10.0
    assert vb.longest == 20.0


def test_shift_only_on_shorter_axis():
    vb = ViewBox(0.0, 0.0, 10.0, 20.0)
    # (20 - 10) / 20 * 24 / 2
    assert vb.shift(Axis.X, 24) == pytest.approx(6.0)
    assert vb.shift(Axis.Y, 24) == 0.0


def test_square_has_no_shift():
    vb = ViewBox(0.0, 0.0, 24.0, 24.0)
    assert vb.shift(Axis.X, 24) == 0.0
    assert vb.shift(Axis.Y, 24) == 0.0


def test_resolve_from_document():
    assert resolve_viewbox(parse_document(CIRCLE_SVG)) == ViewBox(0.0, 0.0, 24.0, 24.0)


def test_attribute_lookup_is_case_insensitive():
    assert resolve_viewbox(parse_document(LOWERCASE_VIEWBOX_SVG)).w == 12.0


def test_resolve_missing():
    with pytest.raises(MissingViewBoxError):
        resolve_viewbox(parse_document(NO_VIEWBOX_SVG))

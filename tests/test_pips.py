"""Tests for the pip layout table and pip shapes."""

import xml.etree.ElementTree as ET

import pytest

from diceforge.palette import SKINS
from diceforge.renderer import DieGeometry

CANONICAL = {
    1: {5},
    2: {1, 9},
    3: {1, 5, 9},
    4: {1, 3, 7, 9},
    5: {1, 3, 5, 7, 9},
    6: {1, 3, 4, 6, 7, 9},
}


@pytest.mark.parametrize("value", range(1, 7))
def test_layout_table(value):
    from diceforge.pips import layout_for
    assert set(layout_for(value)) == CANONICAL[value]
    assert len(layout_for(value)) == value


@pytest.mark.parametrize("value", [0, 7, -1])
def test_layout_rejects_other_values(value):
    from diceforge.pips import layout_for
    with pytest.raises(KeyError):
        layout_for(value)


def test_centre_cell_on_padded_canvas():
    from diceforge.pips import pip_position
    geometry = DieGeometry(40, 24)
    x, y = pip_position(5, geometry)
    assert x == pytest.approx(44.0)
    assert y == pytest.approx(44.0)


def test_corner_cells_are_symmetric():
    from diceforge.pips import pip_position
    geometry = DieGeometry(50)
    x1, y1 = pip_position(1, geometry)
    x9, y9 = pip_position(9, geometry)
    assert x1 == pytest.approx(50 - x9)
    assert y1 == pytest.approx(50 - y9)


@pytest.mark.parametrize("style", ["dots", "coins", "runes", "anchors",
                                   "skulls", "unknown"])
def test_one_element_per_pip(style):
    from diceforge.pips import render_pips
    parent = ET.Element("g")
    drawn = render_pips(parent, 5, DieGeometry(40), SKINS["bone"], style,
                        shadow_url="url(#s)")
    assert drawn == 5
    assert len(parent) == 5


def test_unknown_style_draws_dots():
    from diceforge.pips import render_pips
    parent = ET.Element("g")
    render_pips(parent, 1, DieGeometry(40), SKINS["ebony"], "hexagons",
                shadow_url="url(#s)")
    dot = parent[0]
    assert dot.tag == "circle"
    assert dot.get("fill") == "#e5e7eb"
    assert dot.get("filter") == "url(#s)"


def test_skull_holes_use_face_colour():
    from diceforge.pips import render_pips
    parent = ET.Element("g")
    render_pips(parent, 1, DieGeometry(40), SKINS["brass"], "skulls")
    fills = [e.get("fill") for e in parent[0]]
    assert fills[0] == "#0b0b0b"
    assert fills[1:] == ["#f3d277"] * 3


def test_halo_pips():
    from diceforge.pips import render_pips
    parent = ET.Element("g")
    render_pips(parent, 3, DieGeometry(40), SKINS["bone"], "dots",
                halo_url="url(#glow)")
    assert len(parent) == 3
    for pip in parent:
        halo, dot = list(pip)
        assert halo.get("filter") == "url(#glow)"
        assert float(halo.get("r")) == pytest.approx(40 * 0.08 * 1.25)
        assert dot.get("fill") == "#ffffff"
        assert dot.get("filter") is None

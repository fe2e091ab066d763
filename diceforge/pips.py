"""Pip layout table and pip shape painters.

Pips sit on a 3x3 keypad grid numbered 1-9 row-major::

    1 2 3
    4 5 6
    7 8 9
"""

from .svg import element, fmt

PIP_LAYOUTS = {
    1: frozenset({5}),
    2: frozenset({1, 9}),
    3: frozenset({1, 5, 9}),
    4: frozenset({1, 3, 7, 9}),
    5: frozenset({1, 3, 5, 7, 9}),
    6: frozenset({1, 3, 4, 6, 7, 9}),
}

DEFAULT_PIP_STYLE = "dots"
GHOST_PIP_COLOR = "#ffffff"


def layout_for(value):
    """Return the occupied keypad cells for a face value (1-6).

    Any other value raises KeyError; callers validate face values.
    """
    return PIP_LAYOUTS[value]


def pip_position(cell, geometry):
    """Centre of a keypad cell on the (possibly padded) canvas."""
    col = (cell - 1) % 3
    row = (cell - 1) // 3
    step = (geometry.size - 2 * geometry.inset) / 3
    origin = geometry.padding + geometry.inset
    return origin + (col + 0.5) * step, origin + (row + 0.5) * step


# ---------------------------------------------------------------------------
# Pip shapes. Each appends exactly one element for one pip.
# ---------------------------------------------------------------------------

def _dot(parent, x, y, r, fill, filter_url, palette):
    return element("circle", {
        "cx": x, "cy": y, "r": r, "fill": fill, "filter": filter_url,
    }, parent)


def _coin(parent, x, y, r, fill, filter_url, palette):
    group = element("g", {"transform": f"translate({fmt(x)},{fmt(y)})"}, parent)
    element("circle", {"r": r, "fill": fill, "filter": filter_url}, group)
    element("circle", {
        "r": r * 0.55, "fill": "none", "stroke": "#ffffffaa",
        "stroke-width": r * 0.18,
    }, group)
    return group


def _rune(parent, x, y, r, fill, filter_url, palette):
    d = r * 0.9
    return element("rect", {
        "x": x - d, "y": y - d, "width": d * 2, "height": d * 2,
        "rx": r * 0.2, "fill": fill, "filter": filter_url,
    }, parent)


def _anchor(parent, x, y, r, fill, filter_url, palette):
    group = element("g", {
        "transform": f"translate({fmt(x)},{fmt(y)}) scale({fmt(r / 4)})",
    }, parent)
    element("path", {
        "d": "M0,-3 L0,2.5 M-2,0.5 L2,0.5 M-2.5,2.5 C-2.5,3.5 -1.5,3.5 -1,2.5 "
             "M2.5,2.5 C2.5,3.5 1.5,3.5 1,2.5",
        "stroke": fill, "stroke-width": 0.8, "fill": "none",
        "filter": filter_url,
    }, group)
    return group


def _skull(parent, x, y, r, fill, filter_url, palette):
    group = element("g", {
        "transform": f"translate({fmt(x)},{fmt(y)}) scale({fmt(r / 4)})",
    }, parent)
    element("ellipse", {
        "rx": 2.5, "ry": 3, "fill": fill, "filter": filter_url,
    }, group)
    # Eye and nose holes show the face colour through.
    element("circle", {"cx": -0.8, "cy": -0.5, "r": 0.4, "fill": palette.face}, group)
    element("circle", {"cx": 0.8, "cy": -0.5, "r": 0.4, "fill": palette.face}, group)
    element("path", {"d": "M0,0.5 L-0.4,1.5 L0.4,1.5 Z", "fill": palette.face}, group)
    return group


PIP_STYLES = {
    "dots": _dot,
    "coins": _coin,
    "runes": _rune,
    "anchors": _anchor,
    "skulls": _skull,
}


def render_pips(parent, value, geometry, palette, style=DEFAULT_PIP_STYLE,
                shadow_url=None, halo_url=None):
    """Append one element per pip for ``value`` to ``parent``.

    Args:
        parent: Group element receiving the pips.
        value: Face value, 1-6.
        geometry: Die geometry (size, padding, inset, pip radius).
        palette: PaletteEntry supplying pip and face colours.
        style: Pip shape name; unknown names draw dots.
        shadow_url: Drop-shadow filter reference for regular pips.
        halo_url: Glow filter reference. When given the pips are drawn in
            white with a blurred halo, as used by the ghost material.

    Returns:
        Number of pips drawn.
    """
    draw = PIP_STYLES.get(style, _dot)
    r = geometry.pip_radius
    cells = sorted(layout_for(value))

    for cell in cells:
        x, y = pip_position(cell, geometry)
        if halo_url is None:
            draw(parent, x, y, r, palette.pip, shadow_url, palette)
            continue
        group = element("g", None, parent)
        element("circle", {
            "cx": x, "cy": y, "r": r * 1.25, "fill": GHOST_PIP_COLOR,
            "opacity": 0.25, "filter": halo_url,
        }, group)
        draw(group, x, y, r, GHOST_PIP_COLOR, None, palette)

    return len(cells)

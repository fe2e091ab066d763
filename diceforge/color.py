"""Hex colour helpers used for palette-derived gradients and tints."""

import numpy as np
from PIL import ImageColor

WHITE = "#ffffff"
BLACK = "#000000"


def parse_hex(color):
    """Parse a ``#rgb`` / ``#rrggbb`` colour into an (r, g, b) int array."""
    return np.array(ImageColor.getrgb(color)[:3], dtype=np.float64)


def to_hex(rgb):
    """Format an (r, g, b) sequence as a lower-case ``#rrggbb`` string."""
    r, g, b = (int(c) for c in np.clip(rgb, 0, 255))
    return f"#{r:02x}{g:02x}{b:02x}"


def mix_color(color_a, color_b, amount=0.5):
    """Blend two hex colours channel by channel.

    Args:
        color_a: Start colour; returned unchanged for ``amount=0``.
        color_b: End colour; returned for ``amount=1``.
        amount: Interpolation factor in [0, 1].

    Returns:
        The blended colour as ``#rrggbb``. Channels are rounded half up,
        so 0.5 always rounds toward the larger value.
    """
    a = parse_hex(color_a)
    b = parse_hex(color_b)
    mixed = np.floor(a + (b - a) * amount + 0.5)
    return to_hex(mixed)


def lighten(color, amount):
    return mix_color(color, WHITE, amount)


def darken(color, amount):
    return mix_color(color, BLACK, amount)

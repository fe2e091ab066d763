"""Tests for hex colour mixing."""

import pytest

COLORS = ["#000000", "#ffffff", "#f8f6ea", "#10b981", "#a78bfa", "#0b0e12"]


@pytest.mark.parametrize("a", COLORS)
@pytest.mark.parametrize("b", COLORS)
def test_mix_boundaries(a, b):
    from diceforge.color import mix_color
    assert mix_color(a, b, 0) == a
    assert mix_color(a, b, 1) == b


def test_mix_midpoint_rounds_half_up():
    from diceforge.color import mix_color
    assert mix_color("#000000", "#ffffff", 0.5) == "#808080"


def test_darken_face_colour():
    from diceforge.color import darken
    # 248, 246, 234 scaled by 0.88
    assert darken("#f8f6ea", 0.12) == "#dad8ce"


def test_lighten_towards_white():
    from diceforge.color import lighten
    assert lighten("#000000", 0.25) == "#404040"
    assert lighten("#123456", 1) == "#ffffff"


def test_output_is_lower_case_long_form():
    from diceforge.color import mix_color
    assert mix_color("#FFF", "#ABCDEF", 0) == "#ffffff"
    assert mix_color("#FFF", "#ABCDEF", 1) == "#abcdef"


def test_malformed_colour_raises():
    from diceforge.color import mix_color
    with pytest.raises(ValueError):
        mix_color("not-a-colour", "#ffffff", 0.5)

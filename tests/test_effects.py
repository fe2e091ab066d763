"""Tests for the effect overlay generators."""

import numpy as np
import pytest

from diceforge.defs import DefIds
from diceforge.effects import EffectConfig
from diceforge.renderer import DieGeometry

IDS = DefIds("fx")
PADDED = DieGeometry(40, 24)
PLAIN = DieGeometry(40)


@pytest.mark.parametrize("strength,blur,stroke,opacity", [
    ("high", "diceGlowHigh", "8", "1"),
    ("low", "diceGlowLow", "6", "0.7"),
    (None, "diceGlowLow", "6", "0.7"),
])
def test_glow_strength(strength, blur, stroke, opacity):
    from diceforge.effects import generate_glow
    group = generate_glow(PADDED, EffectConfig("glow", strength=strength), IDS)
    assert group.get("filter") == f"url(#{blur}-fx)"
    assert group.get("opacity") == opacity
    rect = group[0]
    assert rect.get("stroke") == "#f59e0b"
    assert rect.get("stroke-width") == stroke
    assert rect.get("fill") == "none"
    assert float(rect.get("x")) == pytest.approx(24 + int(stroke) / 2)
    assert float(rect.get("width")) == pytest.approx(40 - int(stroke))


def test_aura_pulse():
    from diceforge.effects import generate_aura
    group = generate_aura(PADDED, EffectConfig("aura", strength="high",
                                               color="#8b5cf6"), IDS)
    assert group.get("opacity") == "0.95"
    ring = group[0]
    assert ring.tag == "circle"
    assert float(ring.get("cx")) == pytest.approx(44)
    assert float(ring.get("cy")) == pytest.approx(44)
    assert float(ring.get("r")) == pytest.approx(88 * 0.3)
    assert ring.get("stroke") == "#8b5cf6"
    assert ring.get("stroke-width") == "14"
    assert ring.get("filter") == "url(#diceGlowHigh-fx)"
    animate = ring[0]
    assert animate.get("attributeName") == "opacity"
    assert animate.get("values") == "0.95;0.57;0.95"
    assert animate.get("dur") == "1.6s"


def test_aura_electric():
    from diceforge.effects import generate_aura
    group = generate_aura(PLAIN, EffectConfig("aura", style="electric"), IDS)
    assert group.get("opacity") == "0.55"
    wobble = group[0]
    assert wobble.get("filter") == "url(#diceElectric-fx)"
    ring = wobble[0]
    assert ring.get("filter") == "url(#diceGlowLow-fx)"
    assert ring.get("stroke-width") == "10"
    assert len(ring) == 0


@pytest.mark.parametrize("count,expected", [(None, 6), (3, 3), (0, 0)])
def test_sparkle_count(count, expected):
    from diceforge.effects import generate_sparkles
    rng = np.random.RandomState(0)
    group = generate_sparkles(PADDED, EffectConfig("sparkles", count=count),
                              IDS, rng)
    assert len(group) == expected


def test_sparkles_stay_in_bounds():
    from diceforge.effects import generate_sparkles
    rng = np.random.RandomState(42)
    group = generate_sparkles(PADDED, EffectConfig("sparkles", count=50),
                              IDS, rng)
    # two-decimal formatting may land a hair outside the float bounds
    low = 24 + 40 * 0.14 - 2 - 0.01
    high = 88 - low
    for sparkle in group:
        assert low <= float(sparkle.get("cx")) <= high
        assert low <= float(sparkle.get("cy")) <= high
        assert 0.6 <= float(sparkle.get("r")) <= 1.8
        assert sparkle.get("fill") == "#ffffff"
        assert sparkle.get("opacity") == "0"
        animate = sparkle[0]
        assert animate.get("values") == "0;1;0"
        assert 0 <= float(animate.get("begin").rstrip("s")) <= 1.4


def test_sparkles_staggered():
    from diceforge.effects import generate_sparkles
    rng = np.random.RandomState(7)
    group = generate_sparkles(PLAIN, EffectConfig("sparkles", count=6), IDS, rng)
    delays = {s[0].get("begin") for s in group}
    assert len(delays) > 1


@pytest.mark.parametrize("size,dash", [(40, 9), (48, 11), (10, 4)])
def test_rim_marquee_dash(size, dash):
    from diceforge.effects import generate_rim_marquee
    group = generate_rim_marquee(DieGeometry(size), EffectConfig("rim-marquee"),
                                 IDS)
    rect = group[0]
    assert rect.get("stroke-dasharray") == f"{dash} {dash}"
    assert rect.get("stroke") == "#ffffff"
    assert rect.get("x") == "1"
    animate = rect[0]
    assert animate.get("attributeName") == "stroke-dashoffset"
    assert animate.get("to") == str(dash * 2)


def test_rim_marquee_follows_padding():
    from diceforge.effects import generate_rim_marquee
    rect = generate_rim_marquee(PADDED, EffectConfig("rim-marquee"), IDS)[0]
    assert rect.get("x") == "25"
    assert rect.get("y") == "25"


def test_layers_partition_and_order():
    from diceforge.effects import generate_layers
    effects = [
        EffectConfig("rim-marquee", color="#111111"),
        EffectConfig("sparkles", count=2),
        EffectConfig("warp-drive"),
        EffectConfig("glow", color="#222222"),
        EffectConfig("rim-marquee", color="#333333"),
    ]
    behind, above = generate_layers(effects, PADDED, IDS,
                                    np.random.RandomState(1))
    assert len(behind) == 2
    assert behind[0][0].tag == "circle"
    assert behind[1].get("filter") == "url(#diceGlowLow-fx)"
    assert [g[0].get("stroke") for g in above] == ["#111111", "#333333"]


def test_effect_from_dict_drops_unknown_keys():
    effect = EffectConfig.from_dict({"type": "glow", "color": "#ef4444",
                                     "intensity": 2})
    assert effect == EffectConfig("glow", color="#ef4444")


def test_find_glow():
    from diceforge.effects import find_glow
    glow = EffectConfig("glow", strength="high")
    assert find_glow([EffectConfig("aura"), glow]) is glow
    assert find_glow([EffectConfig("aura")]) is None

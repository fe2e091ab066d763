"""Effect overlays layered behind or above the die face."""

from dataclasses import dataclass, fields

from .defs import ELECTRIC, glow_filter_id
from .logging_setup import get_logger
from .svg import element, fmt, rounded_rect

GLOW = "glow"
AURA = "aura"
SPARKLES = "sparkles"
RIM_MARQUEE = "rim-marquee"

BEHIND = frozenset({GLOW, AURA, SPARKLES})
ABOVE = frozenset({RIM_MARQUEE})

DEFAULT_GLOW_COLOR = "#f59e0b"
DEFAULT_SPARKLE_COLOR = "#ffffff"
DEFAULT_MARQUEE_COLOR = "#ffffff"
DEFAULT_SPARKLE_COUNT = 6

logger = get_logger(__name__)


@dataclass(frozen=True)
class EffectConfig:
    """One requested effect.

    ``style`` only applies to auras, ``count`` only to sparkles. A sparkle
    ``count`` of None draws six sparkles while 0 draws none.
    """

    type: str
    style: str = None
    strength: str = None
    color: str = None
    count: int = None

    @classmethod
    def from_dict(cls, raw):
        """Build from a mapping, dropping keys this class does not define."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in raw.items() if k in names})


@dataclass(frozen=True)
class Strength:
    stroke: float
    opacity: float


GLOW_STRENGTHS = {
    "high": Strength(stroke=8, opacity=1.0),
    "low": Strength(stroke=6, opacity=0.7),
}

AURA_STRENGTHS = {
    "high": Strength(stroke=7, opacity=0.95),
    "low": Strength(stroke=5, opacity=0.55),
}


def _strength_name(effect):
    return "high" if effect.strength == "high" else "low"


def generate_glow(geometry, effect, ids, rng=None):
    """Blurred stroke tracing the die outline."""
    strength = _strength_name(effect)
    cfg = GLOW_STRENGTHS[strength]
    offset = geometry.padding + cfg.stroke * 0.5

    group = element("g", {
        "filter": ids.url(glow_filter_id(strength)),
        "opacity": cfg.opacity,
    })
    rounded_rect(offset, offset, geometry.size - cfg.stroke,
                 geometry.corner_radius, group,
                 fill="none", stroke=effect.color or DEFAULT_GLOW_COLOR,
                 stroke_width=cfg.stroke)
    return group


def generate_aura(geometry, effect, ids, rng=None):
    """Blurred ring centred on the whole canvas, pulsing or electric."""
    strength = _strength_name(effect)
    cfg = AURA_STRENGTHS[strength]
    style = "electric" if effect.style == "electric" else "pulse"
    canvas = geometry.canvas_size

    group = element("g", {"opacity": cfg.opacity})
    # The displacement wraps the blurred ring; one filter per element.
    holder = group
    if style == "electric":
        holder = element("g", {"filter": ids.url(ELECTRIC)}, group)

    ring = element("circle", {
        "cx": canvas / 2,
        "cy": canvas / 2,
        "r": canvas * 0.3,
        "fill": "none",
        "stroke": effect.color or DEFAULT_GLOW_COLOR,
        "stroke-width": cfg.stroke * 2,
        "filter": ids.url(glow_filter_id(strength)),
    }, holder)
    if style == "pulse":
        o = cfg.opacity
        element("animate", {
            "attributeName": "opacity",
            "values": f"{fmt(o)};{fmt(o * 0.6)};{fmt(o)}",
            "dur": "1.6s",
            "repeatCount": "indefinite",
        }, ring)
    return group


def generate_sparkles(geometry, effect, ids, rng):
    """Twinkling points scattered over the die area.

    Positions, radii and start delays are drawn from ``rng`` (a
    ``numpy.random.RandomState``), so a seeded render is reproducible.
    """
    count = DEFAULT_SPARKLE_COUNT if effect.count is None else max(0, int(effect.count))
    color = effect.color or DEFAULT_SPARKLE_COLOR

    edge = geometry.padding + geometry.inset - 2
    span = geometry.canvas_size - 2 * edge

    group = element("g")
    for _ in range(count):
        x = edge + rng.random_sample() * span
        y = edge + rng.random_sample() * span
        r = 0.6 + rng.random_sample() * 1.2
        delay = rng.random_sample() * 1.4
        sparkle = element("circle", {
            "cx": f"{x:.2f}", "cy": f"{y:.2f}", "r": f"{r:.2f}",
            "fill": color, "opacity": 0,
        }, group)
        element("animate", {
            "attributeName": "opacity",
            "values": "0;1;0",
            "dur": "1.8s",
            "begin": f"{delay:.2f}s",
            "repeatCount": "indefinite",
        }, sparkle)
    return group


def generate_rim_marquee(geometry, effect, ids, rng=None):
    """Marching-ants dashed outline drawn over the face."""
    dash = max(4, int(geometry.size * 0.22 + 0.5))
    origin = geometry.padding + 1

    group = element("g")
    rect = rounded_rect(origin, origin, geometry.size - 2,
                        geometry.corner_radius, group,
                        fill="none",
                        stroke=effect.color or DEFAULT_MARQUEE_COLOR,
                        stroke_width=2,
                        stroke_dasharray=f"{dash} {dash}",
                        stroke_linecap="round")
    element("animate", {
        "attributeName": "stroke-dashoffset",
        "from": 0,
        "to": dash * 2,
        "dur": "2.4s",
        "repeatCount": "indefinite",
    }, rect)
    return group


GENERATORS = {
    GLOW: generate_glow,
    AURA: generate_aura,
    SPARKLES: generate_sparkles,
    RIM_MARQUEE: generate_rim_marquee,
}


def find_glow(effects):
    """First glow effect in ``effects``, or None."""
    for effect in effects:
        if effect.type == GLOW:
            return effect
    return None


def generate_layers(effects, geometry, ids, rng):
    """Run every generator and split the overlays by draw order.

    Returns:
        ``(behind, above)`` lists of elements, each in configuration
        order. Unknown effect types contribute nothing.
    """
    behind, above = [], []
    for effect in effects:
        generator = GENERATORS.get(effect.type)
        if generator is None:
            logger.debug("ignoring unknown effect type %r", effect.type,
                         extra={"event": "effect_ignored"})
            continue
        overlay = generator(geometry, effect, ids, rng)
        if effect.type in ABOVE:
            above.append(overlay)
        else:
            behind.append(overlay)
    return behind, above

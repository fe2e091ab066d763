"""Material painters: how the die face surface is filled and stroked.

Every painter draws at the die origin (0, 0); the renderer translates the
face group when the canvas is padded. Gradients a painter defines are
returned separately so the renderer can place them in the ``<defs>``
block, and their ids always carry the per-render namespace.
"""

from dataclasses import dataclass, field

from .color import darken, lighten
from .defs import BEVEL, GRAIN, glow_filter_id
from .logging_setup import get_logger
from .svg import element, gradient, rounded_rect

DEFAULT_MATERIAL = "solid"
GHOST_RIM_COLOR = "#a78bfa"

logger = get_logger(__name__)


@dataclass
class MaterialPaint:
    face: object
    defs: list = field(default_factory=list)


def paint_solid(geometry, palette, tint, ids, glow=None):
    """Opaque face: vertical shade gradient, edge stroke and bevel sheen."""
    size, rad = geometry.size, geometry.corner_radius
    face_grad = gradient("linearGradient", ids.local("faceGrad"), (
        (0, palette.face, None),
        (1, darken(palette.face, 0.12), None),
    ), x1=0, y1=0, x2=0, y2=1)

    face = element("g")
    rounded_rect(1, 1, size - 2, rad, face,
                 fill=ids.local_url("faceGrad"), stroke=palette.edge,
                 stroke_width=2)
    rounded_rect(1, 1, size - 2, rad, face,
                 fill=ids.url(BEVEL), style="mix-blend-mode:overlay")
    return MaterialPaint(face, [face_grad])


def paint_clear_glass(geometry, palette, tint, ids, glow=None):
    """Near-transparent tinted fill with a diagonal specular stripe."""
    size, rad = geometry.size, geometry.corner_radius
    env_tint = tint or palette.face

    glass_fill = gradient("linearGradient", ids.local("glassFill"), (
        (0, lighten(env_tint, 0.4), 0.18),
        (1, darken(env_tint, 0.25), 0.12),
    ), x1=0, y1=0, x2=0, y2=1)
    spec_stripe = gradient("linearGradient", ids.local("specStripe"), (
        (0, "#ffffff", 0.35),
        (0.35, "#ffffff", 0.06),
        (0.65, "#000000", 0.10),
        (1, "#000000", 0.25),
    ), x1=0, y1=0, x2=1, y2=1)

    face = element("g")
    # rim
    rounded_rect(1, 1, size - 2, rad, face,
                 fill="none", stroke=lighten(env_tint, 0.35), stroke_width=2)
    rounded_rect(1, 1, size - 2, rad, face, fill=ids.local_url("glassFill"))
    rounded_rect(1, 1, size - 2, rad, face,
                 fill=ids.local_url("specStripe"),
                 style="mix-blend-mode:screen", opacity=0.8)
    return MaterialPaint(face, [glass_fill, spec_stripe])


def paint_frosted_glass(geometry, palette, tint, ids, glow=None):
    """Clear glass plus a fractal-noise grain layer."""
    paint = paint_clear_glass(geometry, palette, tint, ids, glow)
    rounded_rect(1, 1, geometry.size - 2, geometry.corner_radius, paint.face,
                 filter=ids.url(GRAIN), style="mix-blend-mode:soft-light")
    return paint


def paint_ghost(geometry, palette, tint, ids, glow=None):
    """Outline-only silhouette: crisp inner rim plus a blurred outer rim.

    The outer rim uses the blur of the configured glow effect, or the low
    blur when there is none.
    """
    size, rad = geometry.size, geometry.corner_radius
    rim = (glow.color if glow is not None and glow.color else None) \
        or tint or GHOST_RIM_COLOR
    strength = glow.strength if glow is not None else None

    face = element("g")
    rounded_rect(2, 2, size - 4, rad, face,
                 fill="none", stroke=rim, stroke_opacity=0.65,
                 stroke_width=1.5)
    rounded_rect(1, 1, size - 2, rad, face,
                 fill="none", stroke=rim, stroke_opacity=0.15, stroke_width=6,
                 filter=ids.url(glow_filter_id(strength)),
                 opacity=0.9 if strength == "high" else 0.6)
    return MaterialPaint(face, [])


MATERIALS = {
    "solid": paint_solid,
    "clearGlass": paint_clear_glass,
    "frostedGlass": paint_frosted_glass,
    "ghost": paint_ghost,
}


def get_painter(material):
    painter = MATERIALS.get(material)
    if painter is None:
        logger.debug("unknown material %r, painting %s", material,
                     DEFAULT_MATERIAL, extra={"event": "material_fallback"})
        return MATERIALS[DEFAULT_MATERIAL]
    return painter

"""Main dice rendering pipeline.

Composes palette, material paint, pips and effect overlays into one
self-contained SVG document for a single die face.
"""

import uuid
from dataclasses import dataclass, field

import numpy as np

from .defs import DefIds, PIP_SHADOW, build_shared_resources, glow_filter_id
from .effects import EffectConfig, find_glow, generate_layers
from .materials import DEFAULT_MATERIAL, get_painter
from .palette import DEFAULT_SKIN, get_skin
from .pips import DEFAULT_PIP_STYLE, render_pips
from .svg import SVG_NS, element, fmt, to_string

GLOW_PADDING = 24
MATERIAL_GHOST = "ghost"


@dataclass(frozen=True)
class DiceConfig:
    """Configuration for one rendered die."""

    size: int = 40
    value: int = 6
    skin: str = DEFAULT_SKIN
    material: str = DEFAULT_MATERIAL
    tint: str = None
    effects: tuple = field(default_factory=tuple)
    pip_style: str = DEFAULT_PIP_STYLE

    def __post_init__(self):
        effects = tuple(
            e if isinstance(e, EffectConfig) else EffectConfig.from_dict(e)
            for e in (self.effects or ())
        )
        object.__setattr__(self, "effects", effects)


@dataclass(frozen=True)
class DieGeometry:
    """Die measurements on a canvas padded symmetrically by ``padding``."""

    size: float
    padding: float = 0

    @property
    def canvas_size(self):
        return self.size + 2 * self.padding

    @property
    def inset(self):
        return self.size * 0.14

    @property
    def corner_radius(self):
        return self.size * 0.18

    @property
    def pip_radius(self):
        return self.size * 0.08


def geometry_for(config):
    """Geometry for a config: padded on all sides when a glow is requested."""
    padding = GLOW_PADDING if find_glow(config.effects) is not None else 0
    return DieGeometry(config.size, padding)


def new_namespace():
    """Random token that keeps resource ids unique across dice on a page."""
    return uuid.uuid4().hex[:10]


def render_dice(config=None, seed=None, namespace=None, shared_defs=False):
    """Render a die face as an SVG string.

    Args:
        config: DiceConfig instance (defaults used if None).
        seed: Seed for the sparkle placement; random when None.
        namespace: Suffix for locally defined resource ids; a fresh random
            token when None.
        shared_defs: Reference the host-level resources injected by
            ``init_shared_defs`` instead of embedding per-die copies.

    Returns:
        SVG markup sized ``canvas x canvas`` with an accessible label.
    """
    if config is None:
        config = DiceConfig()
    if seed is None:
        seed = np.random.randint(0, 2**31)
    if namespace is None:
        namespace = new_namespace()

    rng = np.random.RandomState(seed)
    ids = DefIds(namespace=namespace, shared=shared_defs)

    # 1. Palette
    palette = get_skin(config.skin)

    # 2. Canvas: blurred glow needs room on every side
    glow = find_glow(config.effects)
    geometry = geometry_for(config)
    canvas = geometry.canvas_size

    root = element("svg", {
        "width": canvas,
        "height": canvas,
        "viewBox": f"0 0 {fmt(canvas)} {fmt(canvas)}",
        "xmlns": SVG_NS,
        "role": "img",
        "aria-label": f"Die showing {config.value}",
    })

    # 3. Effect overlays, split by draw order
    behind, above = generate_layers(config.effects, geometry, ids, rng)
    _append_group(root, "die-behind", behind)

    # 4. Material paint and its resources
    painter = get_painter(config.material)
    paint = painter(geometry, palette, config.tint, ids, glow)
    _append_defs(root, paint.defs, ids, canvas)

    face = paint.face
    face.set("class", "die-face")
    if geometry.padding:
        face.set("transform", f"translate({fmt(geometry.padding)} {fmt(geometry.padding)})")
    root.append(face)

    # 5. Pips
    pips = element("g", {"class": "die-pips"}, root)
    if config.material == MATERIAL_GHOST:
        strength = glow.strength if glow is not None else None
        render_pips(pips, config.value, geometry, palette, config.pip_style,
                    halo_url=ids.url(glow_filter_id(strength)))
    else:
        render_pips(pips, config.value, geometry, palette, config.pip_style,
                    shadow_url=ids.url(PIP_SHADOW))

    # 6. Overlays that must stay on top
    _append_group(root, "die-above", above)

    return to_string(root)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _append_group(root, name, children):
    group = element("g", {"class": name}, root)
    for child in children:
        group.append(child)
    return group


def _append_defs(root, material_defs, ids, canvas):
    """Emit this die's ``<defs>``: material gradients plus shared copies."""
    defs = element("defs", None, root)
    for item in material_defs:
        defs.append(item)
    if not ids.shared:
        build_shared_resources(defs, id_for=ids.local, canvas_size=canvas)
    return defs

"""Reusable SVG resources: bevel gradient and the blur / noise filters.

The same builders produce the copy the bootstrap injects once into the host
document (plain ids) and the per-render copies embedded in every die
(namespaced ids), so a die renders correctly whether or not the bootstrap
has run.
"""

from dataclasses import dataclass

from .svg import element, gradient

SHARED_DEFS_ID = "dice-shared-defs"

BEVEL = "diceBevel"
PIP_SHADOW = "dicePipShadow"
GRAIN = "diceGrain"
GLOW_LOW = "diceGlowLow"
GLOW_HIGH = "diceGlowHigh"
ELECTRIC = "diceElectric"

SHARED_IDS = (BEVEL, PIP_SHADOW, GRAIN, GLOW_LOW, GLOW_HIGH, ELECTRIC)

GLOW_BLUR = {"low": 8, "high": 12}

BEVEL_STOPS = (
    (0, "#ffffff", 0.55),
    (0.4, "#ffffff", 0.12),
    (0.6, "#000000", 0.10),
    (1, "#000000", 0.35),
)


def glow_filter_id(strength):
    return GLOW_HIGH if strength == "high" else GLOW_LOW


@dataclass(frozen=True)
class DefIds:
    """Resource id scheme for one render call.

    ``local`` ids always carry the namespace. ``ref`` resolves a shared
    resource either to this call's own copy or, when ``shared`` is set, to
    the bootstrap copy in the host document.
    """

    namespace: str
    shared: bool = False

    def local(self, base):
        return f"{base}-{self.namespace}"

    def ref(self, base):
        return base if self.shared else self.local(base)

    def url(self, base):
        return f"url(#{self.ref(base)})"

    def local_url(self, base):
        return f"url(#{self.local(base)})"


def _wide_region(canvas_size):
    # Blurred strokes reach well past the element bbox.
    if canvas_size is None:
        return {"x": "-100%", "y": "-100%", "width": "300%", "height": "300%"}
    return {
        "x": -canvas_size,
        "y": -canvas_size,
        "width": canvas_size * 3,
        "height": canvas_size * 3,
        "filterUnits": "userSpaceOnUse",
    }


def build_shared_resources(parent, id_for=None, canvas_size=None):
    """Append the shared gradient and filters to a ``<defs>`` element.

    Args:
        parent: The ``<defs>`` element to populate.
        id_for: Maps a base id to the emitted id; identity when None.
        canvas_size: Size of the canvas the glow filters must cover. When
            None (host-level copy) the filter regions are relative to the
            filtered element instead.

    Returns:
        ``parent``, for chaining.
    """
    if id_for is None:
        id_for = str
    wide = _wide_region(canvas_size)

    gradient("linearGradient", id_for(BEVEL), BEVEL_STOPS, parent,
             x1=0, y1=0, x2=1, y2=1)

    shadow = element("filter", {
        "id": id_for(PIP_SHADOW),
        "x": "-50%", "y": "-50%", "width": "200%", "height": "200%",
    }, parent)
    element("feOffset", {"dx": 0, "dy": 0.6, "result": "offset"}, shadow)
    element("feGaussianBlur", {
        "in": "offset", "stdDeviation": 0.6, "result": "blur",
    }, shadow)
    element("feColorMatrix", {
        "in": "blur",
        "type": "matrix",
        "values": "0 0 0 0 0  0 0 0 0 0  0 0 0 0 0  0 0 0 0.45 0",
    }, shadow)
    merge = element("feMerge", None, shadow)
    element("feMergeNode", None, merge)
    element("feMergeNode", {"in": "SourceGraphic"}, merge)

    grain = element("filter", {
        "id": id_for(GRAIN),
        "x": "-20%", "y": "-20%", "width": "140%", "height": "140%",
    }, parent)
    element("feTurbulence", {
        "type": "fractalNoise", "baseFrequency": 0.8, "numOctaves": 2,
        "seed": 7, "result": "turbulence",
    }, grain)
    element("feColorMatrix", {
        "type": "saturate", "values": 0, "in": "turbulence",
        "result": "monochrome",
    }, grain)
    transfer = element("feComponentTransfer", {"in": "monochrome"}, grain)
    element("feFuncA", {"type": "table", "tableValues": "0 0.06"}, transfer)

    for strength, base in (("low", GLOW_LOW), ("high", GLOW_HIGH)):
        glow = element("filter", dict(id=id_for(base), **wide), parent)
        element("feGaussianBlur", {"stdDeviation": GLOW_BLUR[strength]}, glow)

    electric = element("filter", dict(id=id_for(ELECTRIC), **wide), parent)
    element("feTurbulence", {
        "type": "fractalNoise", "baseFrequency": 0.9, "numOctaves": 1,
        "seed": 9, "result": "turbulence",
    }, electric)
    element("feDisplacementMap", {
        "in": "SourceGraphic", "in2": "turbulence", "scale": 2,
        "xChannelSelector": "R", "yChannelSelector": "G",
    }, electric)

    return parent

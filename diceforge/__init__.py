"""DiceForge - Render die faces as self-contained SVG markup."""

from .effects import EffectConfig
from .host import HostDocument, get_host_document, init_shared_defs
from .renderer import DiceConfig, render_dice

__version__ = "0.1.0"
__all__ = [
    "DiceConfig",
    "EffectConfig",
    "HostDocument",
    "generate",
    "get_host_document",
    "init_shared_defs",
    "render_dice",
]


def generate(value, size=40, seed=None, **kwargs):
    """Render one die face as SVG markup.

    Args:
        value: Face value, 1-6.
        size: Die edge length in SVG user units. A glow effect grows the
            canvas beyond this by the glow padding on each side.
        seed: Random seed for reproducible sparkle placement.
        **kwargs: Additional DiceConfig fields (skin, material, tint,
            effects, pip_style). Effects may be given as dicts.

    Returns:
        SVG markup string.
    """
    config = DiceConfig(size=size, value=value, **kwargs)
    return render_dice(config, seed=seed)

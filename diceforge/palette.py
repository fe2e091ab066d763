"""Built-in dice skins (face / edge / pip colour triples)."""

from dataclasses import dataclass

from .logging_setup import get_logger

DEFAULT_SKIN = "bone"

logger = get_logger(__name__)


@dataclass(frozen=True)
class PaletteEntry:
    """Colours for one skin."""

    face: str
    edge: str
    pip: str


SKINS = {
    "bone": PaletteEntry(face="#f8f6ea", edge="#9a8f76", pip="#111827"),
    "pearl": PaletteEntry(face="#f3f5fb", edge="#9aa5b1", pip="#3f3f46"),
    "brass": PaletteEntry(face="#f3d277", edge="#c28a13", pip="#0b0b0b"),
    "ebony": PaletteEntry(face="#1f2430", edge="#0f131a", pip="#e5e7eb"),
    "ocean": PaletteEntry(face="#b9efe6", edge="#1b8a7f", pip="#0b0b0b"),
    "obsidian": PaletteEntry(face="#0d0f14", edge="#0b0e12", pip="#a78bfa"),
}

# Older collections still store the ocean skin under this name.
SKIN_ALIASES = {
    "seaglass": "ocean",
}


def list_skins():
    return sorted(SKINS.keys())


def get_skin(skin_id):
    """Look up a skin, falling back to the default one for unknown ids."""
    if not skin_id:
        return SKINS[DEFAULT_SKIN]
    skin_id = SKIN_ALIASES.get(skin_id, skin_id)
    entry = SKINS.get(skin_id)
    if entry is None:
        logger.debug("unknown skin %r, using %s", skin_id, DEFAULT_SKIN,
                     extra={"event": "skin_fallback"})
        return SKINS[DEFAULT_SKIN]
    return entry

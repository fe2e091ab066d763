"""Build DiceConfig values from JSON-style dicts and files."""

import json
from dataclasses import fields
from pathlib import Path

from .effects import EffectConfig
from .renderer import DiceConfig

# Stored dice combos use the frontend's camelCase names.
_KEY_ALIASES = {
    "pipStyle": "pip_style",
}


def _known(dataclass_type, raw):
    names = {f.name for f in fields(dataclass_type)}
    out = {}
    for key, value in raw.items():
        key = _KEY_ALIASES.get(key, key)
        if key in names:
            out[key] = value
    return out


def effect_from_dict(raw):
    return EffectConfig.from_dict(raw)


def config_from_dict(raw, **overrides):
    """Create a DiceConfig, ignoring keys it does not know.

    Args:
        raw: Mapping such as a stored dice combo
            (``{"skin": "brass", "effects": [{"type": "glow"}]}``).
        **overrides: Fields that win over ``raw`` (e.g. ``value``, ``size``).

    Returns:
        DiceConfig instance.
    """
    data = _known(DiceConfig, raw)
    data.update(overrides)
    data["effects"] = tuple(
        e if isinstance(e, EffectConfig) else effect_from_dict(e)
        for e in (data.get("effects") or ())
    )
    return DiceConfig(**data)


def load_config(path, **overrides):
    """Read a DiceConfig from a JSON file.

    Raises:
        ValueError: If the file cannot be read or does not hold a JSON
            object.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"cannot read dice config {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"dice config {path} must be a JSON object")
    return config_from_dict(raw, **overrides)

"""CLI entry point for DiceForge."""

import argparse
import sys
from pathlib import Path

from .config import config_from_dict, load_config
from .logging_setup import configure_logging, get_logger
from .renderer import geometry_for, render_dice

SIZE_PRESETS = {"sm": 32, "md": 40, "lg": 48}


def _size(text):
    if text in SIZE_PRESETS:
        return SIZE_PRESETS[text]
    try:
        size = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"size must be an integer or one of {', '.join(SIZE_PRESETS)}"
        )
    if size <= 0:
        raise argparse.ArgumentTypeError("size must be positive")
    return size


def _face_value(text):
    value = int(text)
    if not 1 <= value <= 6:
        raise argparse.ArgumentTypeError("face value must be between 1 and 6")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="diceforge",
        description="Render a die face as a self-contained SVG"
    )
    parser.add_argument("value", type=_face_value, help="Face value (1-6)")
    parser.add_argument(
        "--size", type=_size, default=None,
        help="Die size in px or a preset sm/md/lg (default: 40)"
    )
    parser.add_argument("--skin", default=None, help="Skin id (default: bone)")
    parser.add_argument(
        "--material", default=None,
        choices=["solid", "clearGlass", "frostedGlass", "ghost"],
        help="Face material (default: solid)"
    )
    parser.add_argument("--tint", default=None,
                        help="Tint colour for glass and ghost materials")
    parser.add_argument("--pip-style", default=None,
                        help="Pip shape: dots, coins, runes, anchors, skulls")
    parser.add_argument("--glow", metavar="COLOR", default=None,
                        help="Add a glow in this colour")
    parser.add_argument("--glow-strength", choices=["low", "high"],
                        default="low", help="Glow strength (default: low)")
    parser.add_argument("--aura", metavar="COLOR", default=None,
                        help="Add an aura in this colour")
    parser.add_argument("--aura-style", choices=["pulse", "electric"],
                        default="pulse", help="Aura style (default: pulse)")
    parser.add_argument("--sparkles", type=int, metavar="N", default=None,
                        help="Add N sparkles")
    parser.add_argument("--marquee", metavar="COLOR", default=None,
                        help="Add a rim marquee in this colour")
    parser.add_argument(
        "--config", "-c", default=None,
        help="JSON file with a dice config; flags override its fields"
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducible sparkles"
    )
    parser.add_argument(
        "--output", "-o", default="die.svg",
        help="Output file path (default: die.svg)"
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log debug messages")
    parser.add_argument("--log-json", action="store_true",
                        help="Log as JSON lines")
    return parser


def _effects_from_args(args):
    effects = []
    if args.glow:
        effects.append({"type": "glow", "color": args.glow,
                        "strength": args.glow_strength})
    if args.aura:
        effects.append({"type": "aura", "color": args.aura,
                        "style": args.aura_style,
                        "strength": args.glow_strength})
    if args.sparkles is not None:
        effects.append({"type": "sparkles", "count": args.sparkles})
    if args.marquee:
        effects.append({"type": "rim-marquee", "color": args.marquee})
    return effects


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, json_format=args.log_json)
    logger = get_logger()

    overrides = {"value": args.value}
    for key in ("size", "skin", "material", "tint", "pip_style"):
        if getattr(args, key) is not None:
            overrides[key] = getattr(args, key)
    effects = _effects_from_args(args)
    if effects:
        overrides["effects"] = effects

    try:
        if args.config:
            config = load_config(args.config, **overrides)
        else:
            config = config_from_dict({}, **overrides)
    except ValueError as exc:
        logger.error(str(exc), extra={"event": "config_error"})
        return 2

    svg = render_dice(config, seed=args.seed)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(svg, encoding="utf-8")

    canvas = geometry_for(config).canvas_size
    print(f"Saved die ({canvas}x{canvas}) to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Command-line interface for generating bundled styles.

Usage:
    # List available styles
    python -m versatiles_style.cli list

    # Write the colorful style with German labels
    python -m versatiles_style.cli generate colorful style.json --language de

    # Self-hosted tiles, no labels
    python -m versatiles_style.cli generate graybeard out/graybeard.json \\
        --tiles-url "https://example.org/tiles/{z}/{x}/{y}" --hide-labels
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import StyleError
from .styles import STYLES, get_style


def _build_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect style options given on the command line."""
    options: Dict[str, Any] = {}
    if args.language:
        options["language"] = args.language
    if args.hide_labels:
        options["hide_labels"] = True
    if args.tiles_url:
        options["tiles_url"] = args.tiles_url[0] if len(args.tiles_url) == 1 else args.tiles_url
    if args.glyphs_url:
        options["glyphs_url"] = args.glyphs_url
    if args.sprite_url:
        options["sprite_url"] = args.sprite_url
    if args.source_name:
        options["source_name"] = args.source_name

    transformer: Dict[str, Any] = {}
    if args.saturate is not None:
        transformer["saturate"] = args.saturate
    if args.rotate is not None:
        transformer["rotate"] = args.rotate
    if transformer:
        options["color_transformer"] = transformer

    return options


def cmd_list(args: argparse.Namespace) -> int:
    """List bundled styles."""
    print("\nAvailable styles:")
    print("-" * 60)
    for name, factory in STYLES.items():
        print(f"  {name:12} - {factory.id}")
    print()
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a style document and write it as JSON."""
    try:
        factory = get_style(args.style)
        style = factory(_build_options(args))
    except StyleError as e:
        print(f"✗ {e}")
        return 1

    output = Path(args.output or f"{args.style}.json")
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        json.dump(style, f, indent=2)

    if args.verbose:
        print(f"\nStyle layers ({len(style['layers'])} total):")
        for layer in style["layers"]:
            source_layer = layer.get("source-layer", "-")
            print(f"  {layer['id']:25} {layer['type']:10} ({source_layer})")

    print(f"\nWrote {style['id']} to: {output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate MapLibre styles for Shortbread vector tiles"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List available styles")
    list_parser.set_defaults(func=cmd_list)

    gen = subparsers.add_parser("generate", help="Generate a style.json")
    gen.add_argument("style", help="Style name (see 'list')")
    gen.add_argument("output", nargs="?", default=None,
                     help="Output file path (default: <style>.json)")
    gen.add_argument("--language", "-l", default=None,
                     help="Label language, e.g. 'de' or 'en'")
    gen.add_argument("--hide-labels", action="store_true",
                     help="Remove all label layers")
    gen.add_argument("--tiles-url", action="append", default=None,
                     help="Tile URL template (repeatable)")
    gen.add_argument("--glyphs-url", default=None, help="Glyphs URL template")
    gen.add_argument("--sprite-url", default=None, help="Sprite URL")
    gen.add_argument("--source-name", default=None,
                     help="Name of the vector source in the style")
    gen.add_argument("--saturate", type=float, default=None,
                     help="Saturation change (-1 = grayscale)")
    gen.add_argument("--rotate", type=float, default=None,
                     help="Hue rotation in degrees")
    gen.add_argument("--verbose", "-v", action="store_true",
                     help="Print layer info and debug logging")
    gen.set_defaults(func=cmd_generate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
from pathlib import Path

from vnglyph.domain.glyph_options import OPTION_PRESETS, GlyphOptions
from vnglyph.services.glyph_generator import VietnameseGlyphGenerator
from vnglyph.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)

DEBUG_ENV_VAR = "VNGLYPH_DEBUG"

# Command-line flag -> GlyphOptions field it overrides.
GLYPH_FLAGS: dict[str, str] = {
    "--grave": "grave_accent_glyph",
    "--acute": "acute_accent_glyph",
    "--tilde": "tilde_glyph",
    "--hook-above": "hook_above_glyph",
    "--dot-below": "dot_below_glyph",
    "--circumflex": "circumflex_glyph",
    "--breve": "breve_glyph",
    "--horn-upper": "horn_glyph_uppercase",
    "--horn-lower": "horn_glyph_lowercase",
    "--secondary-grave": "secondary_grave_glyph",
    "--secondary-acute": "secondary_acute_glyph",
    "--secondary-tilde": "secondary_tilde_glyph",
    "--secondary-hook-above": "secondary_hook_above_glyph",
    "--dotless-i": "dotless_i_glyph",
    "--d-stroke-upper": "d_stroke_uppercase_glyph",
    "--d-stroke-lower": "d_stroke_lowercase_glyph",
}


def _env_debug() -> bool:
    return str(os.environ.get(DEBUG_ENV_VAR, "")).strip().lower() in ("1", "true", "yes", "on")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vnglyph",
        description="Generate Vietnamese diacritic substitution rules from a glyph list.",
    )
    parser.add_argument("glyphs", help="Slash-delimited glyph list, e.g. 'A.ss01/E.ss01'. Use '-' to read stdin.")
    parser.add_argument("--config", default=None, help="YAML options file (default: ./vnglyph.yaml or $VNGLYPH_CONFIG).")
    parser.add_argument("--mode", choices=["generate", "filter-i", "filter-horn"], default="generate")
    parser.add_argument("--format", choices=["text", "json", "groups"], default="text")
    parser.add_argument(
        "--style",
        default=None,
        dest="character_style",
        help="Character style for single-glyph input ({}).".format(", ".join(OPTION_PRESETS["character_style"])),
    )
    parser.add_argument(
        "--feature",
        default=None,
        dest="open_type_feature",
        help="OpenType feature for single-glyph input (e.g. {}).".format(
            ", ".join(OPTION_PRESETS["open_type_feature"][:3])
        ),
    )
    marks = parser.add_argument_group("glyph names")
    for flag, field in GLYPH_FLAGS.items():
        marks.add_argument(
            flag,
            default=None,
            dest=field,
            metavar="GLYPH",
            help="e.g. {}".format(", ".join(OPTION_PRESETS[field])),
        )
    parser.add_argument("--no-horn", action="store_true", help="Skip horn combinations for O/o/U/u.")
    parser.add_argument("--no-dotless-i", action="store_true", help="Skip dotless-i pairings.")
    parser.add_argument("--bare-horn", action="store_true", help="filter-horn: pair without the horn mark.")
    parser.add_argument("--output", default=None, help="Write to this file instead of stdout.")
    parser.add_argument("--save-config", action="store_true", help="Persist the effective options to --config.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def resolve_cli_options(args: argparse.Namespace, store: SettingsStore) -> GlyphOptions:
    """File options overridden by command-line flags."""
    options = store.get_glyph_options()
    overrides: dict[str, object] = {}
    for field in ("character_style", "open_type_feature", *GLYPH_FLAGS.values()):
        value = getattr(args, field)
        if value is not None:
            overrides[field] = value
    if args.no_horn:
        overrides["should_create_horn"] = False
    if args.no_dotless_i:
        overrides["should_create_dotless_i"] = False
    return dataclasses.replace(options, **overrides)


def run(args: argparse.Namespace) -> str:
    store = SettingsStore(args.config)
    options = resolve_cli_options(args, store)
    if args.save_config:
        store.set_glyph_options(options)

    glyphs = sys.stdin.read() if args.glyphs == "-" else args.glyphs
    generator = VietnameseGlyphGenerator()

    if args.mode == "filter-i":
        return generator.filter_i(glyphs)
    if args.mode == "filter-horn":
        return generator.filter_horn(glyphs, options, create_horn=not args.bare_horn)
    if args.format == "groups":
        return generator.render_groups(glyphs)

    result = generator.generate_glyphs(glyphs, options)
    if args.format == "json":
        return result.to_json()
    return result.to_string()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or _env_debug()) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    output = run(args)

    if args.output:
        try:
            Path(args.output).write_text(output, encoding="utf-8", newline="")
        except OSError as e:
            print("Failed to write {}: {}".format(args.output, e), file=sys.stderr)
            return 1
        logger.info("Wrote %s", args.output)
        return 0

    sys.stdout.write(output)
    if output and not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

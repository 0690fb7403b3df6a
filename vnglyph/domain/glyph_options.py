from __future__ import annotations

"""Glyph-name options (domain layer).

Options name the combining-mark glyphs that generated substitution rules
refer to. Every field is optional on `GlyphOptions`; `resolve_options()`
fills the gaps with the documented defaults.

Secondary tone marks (used after a circumflex or breve) fall back to their
primary counterpart first, then to the hardcoded default.
"""

from dataclasses import dataclass, fields
from typing import Any, Final, Mapping


# -----------------------------------------------------------------------------
# Presets
# -----------------------------------------------------------------------------
#
# Commonly used glyph names, offered as suggestions (CLI help, config docs).
# They never restrict what a caller may pass.

CHARACTER_STYLES: Final[tuple[str, ...]] = ("A", "E", "I", "O", "U", "Y", "i", "Ư,Ơ", "D,d")
GRAVE_ACCENT_GLYPHS: Final[tuple[str, ...]] = (
    "grave", "gravecomb", "grave.ss01", "grave.ss02", "gravecomb.ss01", "gravecomb.ss02",
)
ACUTE_ACCENT_GLYPHS: Final[tuple[str, ...]] = (
    "acute", "acutecomb", "acute.ss01", "acute.ss02", "acutecomb.ss01", "acutecomb.ss02",
)
TILDE_GLYPHS: Final[tuple[str, ...]] = (
    "tilde", "tildecomb", "tilde.ss01", "tilde.ss02", "tildecomb.ss01", "tildecomb.ss02",
)
HOOK_ABOVE_GLYPHS: Final[tuple[str, ...]] = (
    "hookabovecomb.case", "hookabovecomb", "hookabovecomb.case.ss01",
    "hookabovecomb.case.ss02", "hookabovecomb.ss01", "hookabovecomb.ss02",
)
DOT_BELOW_GLYPHS: Final[tuple[str, ...]] = (
    "dotbelowcomb.case", "dotbelowcomb", "dotbelowcomb.case.ss01",
    "dotbelowcomb.case.ss02", "dotbelowcomb.ss01", "dotbelowcomb.ss02",
)
CIRCUMFLEX_GLYPHS: Final[tuple[str, ...]] = (
    "circumflex", "circumflexcomb", "circumflex.ss01", "circumflex.ss02",
    "circumflexcomb.ss01", "circumflexcomb.ss02",
)
BREVE_GLYPHS: Final[tuple[str, ...]] = (
    "breve", "brevecomb", "breve.ss01", "breve.ss02", "brevecomb.ss01", "brevecomb.ss02",
)
HORN_GLYPHS: Final[tuple[str, ...]] = (
    "horn", "horncomb", "horn.ss01", "horn.ss02", "horncomb.ss01", "horncomb.ss02", "horncomb.ss03",
)
DOTLESS_I_GLYPHS: Final[tuple[str, ...]] = (
    "dotlessi", "dotlessi.ss01", "dotlessi.ss02", "dotlessi.ss03", "dotlessi.ss04", "dotlessi.ss05",
)
OPENTYPE_FEATURES: Final[tuple[str, ...]] = tuple("ss%02d" % n for n in range(1, 11))
D_STROKE_GLYPHS: Final[tuple[str, ...]] = (
    "hyphen.case", "hyphen.sc1", "hyphen.case.ss01", "hyphen.case.ss02", "hyphen.sc1.ss01", "hyphen.sc1.ss02",
)

# Option field -> suggested glyph names for it.
OPTION_PRESETS: Final[dict[str, tuple[str, ...]]] = {
    "character_style": CHARACTER_STYLES,
    "grave_accent_glyph": GRAVE_ACCENT_GLYPHS,
    "acute_accent_glyph": ACUTE_ACCENT_GLYPHS,
    "tilde_glyph": TILDE_GLYPHS,
    "hook_above_glyph": HOOK_ABOVE_GLYPHS,
    "dot_below_glyph": DOT_BELOW_GLYPHS,
    "circumflex_glyph": CIRCUMFLEX_GLYPHS,
    "breve_glyph": BREVE_GLYPHS,
    "horn_glyph_uppercase": HORN_GLYPHS,
    "horn_glyph_lowercase": HORN_GLYPHS,
    "secondary_grave_glyph": GRAVE_ACCENT_GLYPHS,
    "secondary_acute_glyph": ACUTE_ACCENT_GLYPHS,
    "secondary_tilde_glyph": TILDE_GLYPHS,
    "secondary_hook_above_glyph": HOOK_ABOVE_GLYPHS,
    "dotless_i_glyph": DOTLESS_I_GLYPHS,
    "open_type_feature": OPENTYPE_FEATURES,
    "d_stroke_uppercase_glyph": D_STROKE_GLYPHS,
    "d_stroke_lowercase_glyph": D_STROKE_GLYPHS,
}


# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_GRAVE: Final[str] = "grave"
DEFAULT_ACUTE: Final[str] = "acute"
DEFAULT_TILDE: Final[str] = "tilde"
DEFAULT_HOOK_ABOVE: Final[str] = "hookabovecomb"
DEFAULT_DOT_BELOW: Final[str] = "dotbelowcomb"
DEFAULT_CIRCUMFLEX: Final[str] = "circumflex"
DEFAULT_BREVE: Final[str] = "breve"
DEFAULT_HORN: Final[str] = "horn"
DEFAULT_DOTLESS_I: Final[str] = "dotlessi"
DEFAULT_FEATURE: Final[str] = "ss01"
DEFAULT_D_STROKE: Final[str] = "hyphen.case"


@dataclass(frozen=True)
class GlyphOptions:
    """Caller-supplied options. `None` means "use the default"."""

    # Base character style for single-glyph input (A, E, I, O, U, Y, i, "Ư,Ơ", "D,d")
    character_style: str | None = None

    # Primary tone marks
    grave_accent_glyph: str | None = None
    acute_accent_glyph: str | None = None
    tilde_glyph: str | None = None
    hook_above_glyph: str | None = None
    dot_below_glyph: str | None = None

    circumflex_glyph: str | None = None
    breve_glyph: str | None = None

    horn_glyph_uppercase: str | None = None
    horn_glyph_lowercase: str | None = None

    # Tone marks placed after a circumflex or breve
    secondary_grave_glyph: str | None = None
    secondary_acute_glyph: str | None = None
    secondary_tilde_glyph: str | None = None
    secondary_hook_above_glyph: str | None = None

    dotless_i_glyph: str | None = None
    open_type_feature: str | None = None

    d_stroke_uppercase_glyph: str | None = None
    d_stroke_lowercase_glyph: str | None = None

    should_create_dotless_i: bool | None = None
    should_create_horn: bool | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> GlyphOptions:
        """Build options from a config mapping.

        Accepts snake_case field names and the camelCase names used by
        existing font-build configs (e.g. `graveAccentGlyph`). Unknown keys
        and values of the wrong type are ignored.
        """
        if not isinstance(data, Mapping):
            return cls()

        values: dict[str, Any] = {}
        for f in fields(cls):
            raw = data.get(f.name)
            if raw is None:
                raw = data.get(_camel_case(f.name))
            if raw is None:
                continue
            if f.name.startswith("should_"):
                if isinstance(raw, bool):
                    values[f.name] = raw
            elif isinstance(raw, str):
                values[f.name] = raw
        return cls(**values)

    def to_mapping(self) -> dict[str, Any]:
        """Return the set fields as a snake_case mapping (for YAML)."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass(frozen=True)
class ResolvedGlyphOptions:
    """Options with every field filled in."""

    character_style: str
    grave_accent_glyph: str
    acute_accent_glyph: str
    tilde_glyph: str
    hook_above_glyph: str
    dot_below_glyph: str
    circumflex_glyph: str
    breve_glyph: str
    horn_glyph_uppercase: str
    horn_glyph_lowercase: str
    secondary_grave_glyph: str
    secondary_acute_glyph: str
    secondary_tilde_glyph: str
    secondary_hook_above_glyph: str
    dotless_i_glyph: str
    open_type_feature: str
    d_stroke_uppercase_glyph: str
    d_stroke_lowercase_glyph: str
    should_create_dotless_i: bool
    should_create_horn: bool


def _camel_case(name: str) -> str:
    # open_type_feature -> openTypeFeature; dotless_i_glyph -> dotlessIGlyph
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _pick(*values: str | None) -> str:
    for v in values:
        if v is not None:
            return v
    return ""


def resolve_options(options: GlyphOptions | None = None) -> ResolvedGlyphOptions:
    """Fill missing options with defaults.

    Secondary tone marks fall back to the primary option, then to the default.
    """
    o = options if options is not None else GlyphOptions()

    return ResolvedGlyphOptions(
        character_style=_pick(o.character_style, ""),
        grave_accent_glyph=_pick(o.grave_accent_glyph, DEFAULT_GRAVE),
        acute_accent_glyph=_pick(o.acute_accent_glyph, DEFAULT_ACUTE),
        tilde_glyph=_pick(o.tilde_glyph, DEFAULT_TILDE),
        hook_above_glyph=_pick(o.hook_above_glyph, DEFAULT_HOOK_ABOVE),
        dot_below_glyph=_pick(o.dot_below_glyph, DEFAULT_DOT_BELOW),
        circumflex_glyph=_pick(o.circumflex_glyph, DEFAULT_CIRCUMFLEX),
        breve_glyph=_pick(o.breve_glyph, DEFAULT_BREVE),
        horn_glyph_uppercase=_pick(o.horn_glyph_uppercase, DEFAULT_HORN),
        horn_glyph_lowercase=_pick(o.horn_glyph_lowercase, DEFAULT_HORN),
        secondary_grave_glyph=_pick(o.secondary_grave_glyph, o.grave_accent_glyph, DEFAULT_GRAVE),
        secondary_acute_glyph=_pick(o.secondary_acute_glyph, o.acute_accent_glyph, DEFAULT_ACUTE),
        secondary_tilde_glyph=_pick(o.secondary_tilde_glyph, o.tilde_glyph, DEFAULT_TILDE),
        secondary_hook_above_glyph=_pick(o.secondary_hook_above_glyph, o.hook_above_glyph, DEFAULT_HOOK_ABOVE),
        dotless_i_glyph=_pick(o.dotless_i_glyph, DEFAULT_DOTLESS_I),
        open_type_feature=_pick(o.open_type_feature, DEFAULT_FEATURE),
        d_stroke_uppercase_glyph=_pick(o.d_stroke_uppercase_glyph, DEFAULT_D_STROKE),
        d_stroke_lowercase_glyph=_pick(o.d_stroke_lowercase_glyph, DEFAULT_D_STROKE),
        should_create_dotless_i=True if o.should_create_dotless_i is None else bool(o.should_create_dotless_i),
        should_create_horn=True if o.should_create_horn is None else bool(o.should_create_horn),
    )

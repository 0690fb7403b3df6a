from __future__ import annotations

from vnglyph.domain.glyph_options import (
    CHARACTER_STYLES,
    D_STROKE_GLYPHS,
    HORN_GLYPHS,
    OPENTYPE_FEATURES,
    OPTION_PRESETS,
    GlyphOptions,
    resolve_options,
)


def test_defaults() -> None:
    o = resolve_options()
    assert o.grave_accent_glyph == "grave"
    assert o.acute_accent_glyph == "acute"
    assert o.tilde_glyph == "tilde"
    assert o.hook_above_glyph == "hookabovecomb"
    assert o.dot_below_glyph == "dotbelowcomb"
    assert o.circumflex_glyph == "circumflex"
    assert o.breve_glyph == "breve"
    assert o.horn_glyph_uppercase == "horn"
    assert o.horn_glyph_lowercase == "horn"
    assert o.secondary_hook_above_glyph == "hookabovecomb"
    assert o.dotless_i_glyph == "dotlessi"
    assert o.open_type_feature == "ss01"
    assert o.d_stroke_uppercase_glyph == "hyphen.case"
    assert o.d_stroke_lowercase_glyph == "hyphen.case"
    assert o.character_style == ""
    assert o.should_create_horn is True
    assert o.should_create_dotless_i is True


def test_secondary_marks_fall_back_to_primary() -> None:
    o = resolve_options(GlyphOptions(grave_accent_glyph="gravecomb", tilde_glyph="tildecomb", secondary_tilde_glyph="tilde.case"))
    assert o.secondary_grave_glyph == "gravecomb"
    assert o.secondary_tilde_glyph == "tilde.case"
    assert o.secondary_acute_glyph == "acute"


def test_flags_can_be_disabled() -> None:
    o = resolve_options(GlyphOptions(should_create_horn=False, should_create_dotless_i=False))
    assert o.should_create_horn is False
    assert o.should_create_dotless_i is False


def test_from_mapping_accepts_snake_and_camel_case() -> None:
    o = GlyphOptions.from_mapping(
        {
            "graveAccentGlyph": "gravecomb",
            "open_type_feature": "ss02",
            "shouldCreateHorn": False,
            "dotlessIGlyph": "dotlessi.ss02",
            "tildeGlyph": 5,
            "unknown": "ignored",
        }
    )
    assert o.grave_accent_glyph == "gravecomb"
    assert o.open_type_feature == "ss02"
    assert o.should_create_horn is False
    assert o.dotless_i_glyph == "dotlessi.ss02"
    assert o.tilde_glyph is None


def test_from_mapping_non_mapping() -> None:
    assert GlyphOptions.from_mapping(None) == GlyphOptions()
    assert GlyphOptions.from_mapping(["grave"]) == GlyphOptions()  # type: ignore[arg-type]


def test_to_mapping_round_trip() -> None:
    o = GlyphOptions(character_style="i", breve_glyph="brevecomb", should_create_dotless_i=False)
    assert o.to_mapping() == {"character_style": "i", "breve_glyph": "brevecomb", "should_create_dotless_i": False}
    assert GlyphOptions.from_mapping(o.to_mapping()) == o


def test_character_styles_cover_single_glyph_rules() -> None:
    assert "Ư,Ơ" in CHARACTER_STYLES
    assert "D,d" in CHARACTER_STYLES


def test_preset_contents() -> None:
    assert CHARACTER_STYLES == ("A", "E", "I", "O", "U", "Y", "i", "Ư,Ơ", "D,d")
    assert D_STROKE_GLYPHS == (
        "hyphen.case", "hyphen.sc1", "hyphen.case.ss01", "hyphen.case.ss02", "hyphen.sc1.ss01", "hyphen.sc1.ss02",
    )
    assert HORN_GLYPHS[:2] == ("horn", "horncomb")
    assert OPENTYPE_FEATURES[0] == "ss01"
    assert OPENTYPE_FEATURES[-1] == "ss10"
    assert len(OPENTYPE_FEATURES) == 10


def test_every_glyph_option_has_presets_including_its_default() -> None:
    defaults = resolve_options()
    for name, presets in OPTION_PRESETS.items():
        assert presets, name
        if name != "character_style":
            assert getattr(defaults, name) in presets, name
    assert OPTION_PRESETS["d_stroke_uppercase_glyph"] is D_STROKE_GLYPHS

# tests/conftest.py
import pytest

from vnglyph.domain.glyph_options import GlyphOptions, resolve_options
from vnglyph.services.glyph_generator import VietnameseGlyphGenerator


@pytest.fixture
def generator() -> VietnameseGlyphGenerator:
    return VietnameseGlyphGenerator()


@pytest.fixture
def options():
    """Resolved defaults (horn and dotless-i enabled)."""
    return resolve_options(GlyphOptions())


@pytest.fixture
def plain_options() -> GlyphOptions:
    """Explicit glyph names with horn and dotless-i generation switched off."""
    return GlyphOptions(
        character_style="A",
        grave_accent_glyph="grave",
        acute_accent_glyph="acute",
        tilde_glyph="tilde",
        hook_above_glyph="hookabovecomb",
        dot_below_glyph="dotbelowcomb",
        circumflex_glyph="circumflex",
        breve_glyph="breve",
        horn_glyph_uppercase="horn",
        horn_glyph_lowercase="horn",
        secondary_grave_glyph="grave",
        secondary_acute_glyph="acute",
        secondary_tilde_glyph="tilde",
        secondary_hook_above_glyph="hookabovecomb",
        dotless_i_glyph="dotlessi",
        open_type_feature="ss01",
        d_stroke_uppercase_glyph="hyphen.case",
        d_stroke_lowercase_glyph="hyphen.case",
        should_create_dotless_i=False,
        should_create_horn=False,
    )

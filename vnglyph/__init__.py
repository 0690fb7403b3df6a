"""
Vietnamese diacritic glyph-name generator.

Package exports provide a stable import surface for font-build scripts.
"""

from vnglyph.domain.glyph_options import GlyphOptions, ResolvedGlyphOptions, resolve_options  # noqa: F401
from vnglyph.domain.legacy import generate_glyph  # noqa: F401
from vnglyph.domain.results import GenerationResult, GlyphGenerationResult  # noqa: F401
from vnglyph.services.glyph_generator import VietnameseGlyphGenerator  # noqa: F401

__version__ = "1.0.0"

__all__ = [
    "GenerationResult",
    "GlyphGenerationResult",
    "GlyphOptions",
    "ResolvedGlyphOptions",
    "VietnameseGlyphGenerator",
    "generate_glyph",
    "resolve_options",
]

from __future__ import annotations

import logging

from vnglyph.domain.categories import categorize_tokens, flatten_groups, group_tokens, render_groups
from vnglyph.domain.enums import LetterCategory
from vnglyph.domain.glyph_options import GlyphOptions, ResolvedGlyphOptions, resolve_options
from vnglyph.domain.glyph_tokens import (
    clean_input,
    feature_of,
    is_valid_token,
    letter_of,
    parse_glyph_input,
    split_tokens,
)
from vnglyph.domain.results import BLOCK_BREAK, GlyphGenerationResult
from vnglyph.domain.variants import (
    bare_horn_glyph,
    basic_horn_glyph,
    dotless_i_pairing,
    generate_for_style,
    generate_variants,
)

logger = logging.getLogger(__name__)

_HORN_ORDER = ("O", "o", "U", "u")


class VietnameseGlyphGenerator:
    """Builds Vietnamese diacritic substitution rules from a glyph list.

    Responsibilities:
      - Clean and split the slash-delimited input
      - Group tokens by base letter with their horn/stroke/dotless companions
      - Expand each base into its diacritic variants

    Notes:
      - No state is kept between calls; each call owns its buckets and
        its result, so one instance can serve concurrent callers.
      - Malformed or unsupported tokens are skipped, never raised.
    """

    def generate_glyphs(
        self,
        glyphs_input: str,
        options: GlyphOptions | None = None,
    ) -> GlyphGenerationResult:
        resolved = resolve_options(options)
        cleaned = clean_input(glyphs_input)
        result = GlyphGenerationResult()

        if not cleaned:
            return result

        tokens = split_tokens(cleaned)
        if len(tokens) == 1:
            self._generate_single(cleaned, resolved, result)
        else:
            self._generate_batch(cleaned, resolved, result)

        logger.debug("Generated variants for %d base glyph(s)", len(result))
        return result

    def generate_glyphs_as_string(
        self,
        glyphs_input: str,
        options: GlyphOptions | None = None,
    ) -> str:
        return self.generate_glyphs(glyphs_input, options).to_string()

    def render_groups(self, glyphs_input: str) -> str:
        """Grouped glyph list: each base followed by its matching companions."""
        return render_groups(group_tokens(categorize_tokens(clean_input(glyphs_input))))

    def filter_i(self, glyphs_input: str) -> str:
        """One "i.<feature>=dotlessi.<feature>" block per i token."""
        blocks: list[str] = []
        for token in parse_glyph_input(glyphs_input):
            if letter_of(token) != "i" or not is_valid_token(token):
                continue
            blocks.append(dotless_i_pairing(token, feature_of(token)).to_string() + BLOCK_BREAK)
        return "".join(blocks)

    def filter_horn(
        self,
        glyphs_input: str,
        options: GlyphOptions | None = None,
        create_horn: bool = True,
    ) -> str:
        """Horn pairings for O/o/U/u tokens.

        With `create_horn` each base gets "O.ss01+horn=Ohorn.ss01";
        without it the bare "O.ss01=Ohorn.ss01".
        """
        resolved = resolve_options(options)

        by_letter: dict[str, list[str]] = {letter: [] for letter in _HORN_ORDER}
        for token in parse_glyph_input(glyphs_input):
            letter = letter_of(token)
            if letter in by_letter:
                by_letter[letter].append(token)

        blocks: list[str] = []
        for letter in _HORN_ORDER:
            for token in by_letter[letter]:
                if not is_valid_token(token):
                    continue
                features = feature_of(token)
                if create_horn:
                    pairing = basic_horn_glyph(token, features, resolved)
                else:
                    pairing = bare_horn_glyph(token, features)
                blocks.append(pairing.to_string() + BLOCK_BREAK)
        return "".join(blocks)

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def _generate_single(
        self,
        text: str,
        options: ResolvedGlyphOptions,
        result: GlyphGenerationResult,
    ) -> None:
        # The declared character style picks the rules, not the token's letter.
        logger.debug("Single glyph %r as style %r", text, options.character_style)
        variants = generate_for_style(options.character_style, text, options)
        result.merge(text, variants)

    def _generate_batch(
        self,
        cleaned: str,
        options: ResolvedGlyphOptions,
        result: GlyphGenerationResult,
    ) -> None:
        buckets = categorize_tokens(cleaned)
        ordered = flatten_groups(group_tokens(buckets))
        logger.debug("Batch of %d grouped token(s)", len(ordered))

        if options.should_create_dotless_i:
            for token in buckets.get(LetterCategory.i):
                if is_valid_token(token):
                    result.merge(token, dotless_i_pairing(token, feature_of(token)))

        buckets.clear()

        for token in ordered:
            if not is_valid_token(token):
                continue
            variants = generate_variants(token, options)
            if variants:
                result.merge(token, variants)

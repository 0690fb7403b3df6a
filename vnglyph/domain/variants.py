from __future__ import annotations

"""Vietnamese diacritic variant generation (domain layer).

Each generator takes a base token (`letter.feature`), the feature tag to
scope output names to, and resolved options, and returns a
`GenerationResult` mapping output glyph name -> input combination:

    Agrave.ss01      <- A.ss01+grave
    Acircumflexhoi.ss01 <- A.ss01+circumflex+hookabovecomb

Letter classes are dispatched through plain lookup tables. Unsupported
letters produce an empty result rather than an error.
"""

import logging
from typing import Callable, Final

from vnglyph.domain.glyph_options import ResolvedGlyphOptions
from vnglyph.domain.glyph_tokens import SEPARATOR, feature_of, is_valid_token, letter_of
from vnglyph.domain.results import COMBINE, GenerationResult

logger = logging.getLogger(__name__)

Generator = Callable[[str, str, ResolvedGlyphOptions], GenerationResult]


# -----------------------------------------------------------------------------
# Output-name suffixes
# -----------------------------------------------------------------------------

SUFFIX_GRAVE: Final[str] = "grave"
SUFFIX_ACUTE: Final[str] = "acute"
SUFFIX_TILDE: Final[str] = "tilde"
SUFFIX_HOOK_ABOVE: Final[str] = "hoi"
SUFFIX_DOT_BELOW: Final[str] = "dotbelow"
SUFFIX_CIRCUMFLEX: Final[str] = "circumflex"
SUFFIX_BREVE: Final[str] = "breve"
SUFFIX_HORN: Final[str] = "horn"
SUFFIX_STROKE: Final[str] = "croat"

DOTLESS_I_PREFIX: Final[str] = "dotlessi"


def _name(prefix: str, suffix: str, features: str) -> str:
    return "{}{}{}{}".format(prefix, suffix, SEPARATOR, features)


def _combine(*parts: str) -> str:
    return COMBINE.join(parts)


def dotless_i_name(features: str) -> str:
    return "{}{}{}".format(DOTLESS_I_PREFIX, SEPARATOR, features)


def _primary_tones(options: ResolvedGlyphOptions) -> tuple[tuple[str, str], ...]:
    return (
        (SUFFIX_GRAVE, options.grave_accent_glyph),
        (SUFFIX_ACUTE, options.acute_accent_glyph),
        (SUFFIX_TILDE, options.tilde_glyph),
        (SUFFIX_HOOK_ABOVE, options.hook_above_glyph),
        (SUFFIX_DOT_BELOW, options.dot_below_glyph),
    )


def _secondary_tones(options: ResolvedGlyphOptions) -> tuple[tuple[str, str], ...]:
    # There is no secondary dot below; the primary one is reused.
    return (
        (SUFFIX_GRAVE, options.secondary_grave_glyph),
        (SUFFIX_ACUTE, options.secondary_acute_glyph),
        (SUFFIX_TILDE, options.secondary_tilde_glyph),
        (SUFFIX_HOOK_ABOVE, options.secondary_hook_above_glyph),
        (SUFFIX_DOT_BELOW, options.dot_below_glyph),
    )


# -----------------------------------------------------------------------------
# Mark generators
# -----------------------------------------------------------------------------

def basic_tone_marks(value: str, features: str, options: ResolvedGlyphOptions) -> GenerationResult:
    """The five tone marks on the base letter."""
    base_name = letter_of(value)
    result = GenerationResult()
    for suffix, mark in _primary_tones(options):
        result.add_variant(_name(base_name, suffix, features), _combine(value, mark))
    return result


def _mark_combinations(
    value: str,
    features: str,
    options: ResolvedGlyphOptions,
    mark_suffix: str,
    mark: str,
) -> GenerationResult:
    base_name = letter_of(value)
    result = GenerationResult()
    result.add_variant(_name(base_name, mark_suffix, features), _combine(value, mark))
    for suffix, tone in _secondary_tones(options):
        result.add_variant(_name(base_name, mark_suffix + suffix, features), _combine(value, mark, tone))
    return result


def circumflex_combinations(value: str, features: str, options: ResolvedGlyphOptions) -> GenerationResult:
    """Circumflex alone, then circumflex + each tone mark (6 variants)."""
    return _mark_combinations(value, features, options, SUFFIX_CIRCUMFLEX, options.circumflex_glyph)


def breve_combinations(value: str, features: str, options: ResolvedGlyphOptions) -> GenerationResult:
    """Breve alone, then breve + each tone mark (6 variants)."""
    return _mark_combinations(value, features, options, SUFFIX_BREVE, options.breve_glyph)


def horn_glyph_for(letter: str, options: ResolvedGlyphOptions) -> str:
    """Horn mark by case: uppercase for O/U, lowercase for o/u, "" otherwise."""
    if letter in ("O", "U"):
        return options.horn_glyph_uppercase
    if letter in ("o", "u"):
        return options.horn_glyph_lowercase
    return ""


def horn_combinations(value: str, features: str, options: ResolvedGlyphOptions) -> GenerationResult:
    """Horn alone, then horn + each primary tone mark (6 variants)."""
    letter = letter_of(value)
    horn = horn_glyph_for(letter, options)
    prefix = letter + SUFFIX_HORN
    result = GenerationResult()
    result.add_variant(_name(letter, SUFFIX_HORN, features), _combine(value, horn))
    for suffix, tone in _primary_tones(options):
        result.add_variant(_name(prefix, suffix, features), _combine(value, horn, tone))
    return result


def basic_horn_glyph(value: str, features: str, options: ResolvedGlyphOptions) -> GenerationResult:
    """Only the horn-alone variant: Ohorn.ss01 <- O.ss01+horn."""
    letter = letter_of(value)
    result = GenerationResult()
    result.add_variant(_name(letter, SUFFIX_HORN, features), _combine(value, horn_glyph_for(letter, options)))
    return result


def bare_horn_glyph(value: str, features: str) -> GenerationResult:
    """Horn glyph named after the base without a mark: Ohorn.ss01 <- O.ss01."""
    result = GenerationResult()
    result.add_variant(_name(letter_of(value), SUFFIX_HORN, features), value)
    return result


def d_stroke(value: str, features: str, options: ResolvedGlyphOptions) -> GenerationResult:
    """Dcroat.ss01 <- D.ss01+<stroke>; the stroke glyph is picked by case."""
    letter = letter_of(value)
    stroke = ""
    if letter == "D":
        stroke = options.d_stroke_uppercase_glyph
    elif letter == "d":
        stroke = options.d_stroke_lowercase_glyph
    result = GenerationResult()
    result.add_variant(_name(letter, SUFFIX_STROKE, features), _combine(value, stroke))
    return result


def dotless_i_pairing(value: str, features: str) -> GenerationResult:
    """dotlessi.<feature> <- i.<feature>"""
    result = GenerationResult()
    result.add_variant(dotless_i_name(features), value)
    return result


def dotless_i_with_tones(
    value: str,
    features: str,
    options: ResolvedGlyphOptions,
    dotless_base: str,
) -> GenerationResult:
    """Tone marks on i, built on a dotless base.

    The dot below keeps the dotted `value` as its base.
    """
    letter = letter_of(value)
    result = GenerationResult()
    for suffix, mark in _primary_tones(options):
        base = value if suffix == SUFFIX_DOT_BELOW else dotless_base
        result.add_variant(_name(letter, suffix, features), _combine(base, mark))
    return result


def _feature_scoped_dotless_i(value: str, features: str, options: ResolvedGlyphOptions) -> GenerationResult:
    return dotless_i_with_tones(value, features, options, dotless_i_name(feature_of(value)))


def _configured_dotless_i(value: str, features: str, options: ResolvedGlyphOptions) -> GenerationResult:
    return dotless_i_with_tones(value, features, options, options.dotless_i_glyph)


# -----------------------------------------------------------------------------
# Letter rules
# -----------------------------------------------------------------------------

_A_RULES: Final[tuple[Generator, ...]] = (basic_tone_marks, circumflex_combinations, breve_combinations)
_E_RULES: Final[tuple[Generator, ...]] = (basic_tone_marks, circumflex_combinations)
_O_RULES: Final[tuple[Generator, ...]] = (basic_tone_marks, circumflex_combinations)
_BASIC_RULES: Final[tuple[Generator, ...]] = (basic_tone_marks,)
_D_RULES: Final[tuple[Generator, ...]] = (d_stroke,)

# Letter inferred from each token of a glyph list.
LETTER_RULES: Final[dict[str, tuple[Generator, ...]]] = {
    "A": _A_RULES,
    "a": _A_RULES,
    "E": _E_RULES,
    "e": _E_RULES,
    "I": _BASIC_RULES,
    "i": (_feature_scoped_dotless_i,),
    "D": _D_RULES,
    "d": _D_RULES,
    "O": _O_RULES,
    "o": _O_RULES,
    "U": _BASIC_RULES,
    "u": _BASIC_RULES,
    "Y": _BASIC_RULES,
    "y": _BASIC_RULES,
    "Uhorn": _BASIC_RULES,
    "uhorn": _BASIC_RULES,
    "Ohorn": _BASIC_RULES,
    "ohorn": _BASIC_RULES,
}

# Letters that also get horn combinations when horn creation is enabled.
HORN_LETTERS: Final[frozenset[str]] = frozenset({"O", "o", "U", "u"})

# Character style declared by the caller for single-glyph input.
STYLE_RULES: Final[dict[str, tuple[Generator, ...]]] = {
    "A": _A_RULES,
    "E": _E_RULES,
    "I": _BASIC_RULES,
    "i": (_configured_dotless_i,),
    "D,d": _D_RULES,
    "O": _O_RULES + (horn_combinations,),
    "o": _O_RULES + (horn_combinations,),
    "Ư,Ơ": _BASIC_RULES,
    "Y": _BASIC_RULES,
    "U": _BASIC_RULES + (horn_combinations,),
    "u": _BASIC_RULES + (horn_combinations,),
}


def _run(
    rules: tuple[Generator, ...],
    value: str,
    features: str,
    options: ResolvedGlyphOptions,
) -> GenerationResult:
    result = GenerationResult()
    for rule in rules:
        result.update(rule(value, features, options))
    return result


def generate_variants(token: str, options: ResolvedGlyphOptions) -> GenerationResult:
    """Variants for one `letter.feature` token, rules chosen by its letter.

    Returns an empty result for invalid tokens and unsupported letters.
    """
    if not is_valid_token(token):
        logger.debug("No variants for malformed token %r", token)
        return GenerationResult()

    letter = letter_of(token)
    rules = LETTER_RULES.get(letter)
    if rules is None:
        logger.debug("No variants for unsupported letter %r", letter)
        return GenerationResult()

    if options.should_create_horn and letter in HORN_LETTERS:
        rules = rules + (horn_combinations,)
    return _run(rules, token, feature_of(token), options)


def generate_for_style(style: str, text: str, options: ResolvedGlyphOptions) -> GenerationResult:
    """Variants for a single glyph using a caller-declared character style.

    The style, not the token's letter, selects the rules, and output names
    are scoped to `options.open_type_feature`. For style "i" the plain
    dotless-i pairing is added first when dotless-i creation is enabled.
    """
    if text.count(SEPARATOR) != 1:
        logger.debug("No variants for single glyph %r", text)
        return GenerationResult()

    rules = STYLE_RULES.get(style)
    if rules is None:
        logger.debug("No rules for character style %r", style)
        return GenerationResult()

    features = options.open_type_feature
    result = GenerationResult()
    if style == "i" and options.should_create_dotless_i:
        result.update(dotless_i_pairing(text, features))
    result.update(_run(rules, text, features, options))
    return result

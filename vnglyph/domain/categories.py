from __future__ import annotations

"""Letter categorisation and grouping (domain layer).

This module is the single source of truth for:
  - The letter -> LetterCategory mapping
  - The order in which categories are rendered
  - Which companion bucket (horn, d-stroke, dotless-i) follows which base letter

Buckets are held in a `GlyphBuckets` value created per call, so concurrent
callers never share state.
"""

import logging
from dataclasses import dataclass, field
from typing import Final

from vnglyph.domain.enums import LetterCategory
from vnglyph.domain.glyph_tokens import (
    LIST_DELIMITER,
    feature_of,
    has_interior_separator,
    letter_of,
    split_tokens,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Letter -> category mapping
# -----------------------------------------------------------------------------
#
# Letters not present here are unsupported and silently dropped.

LETTER_TO_CATEGORY: Final[dict[str, LetterCategory]] = {c.value: c for c in LetterCategory}

# Main category -> companion category whose tokens are attached by feature.
COMPANIONS: Final[dict[LetterCategory, LetterCategory]] = {
    LetterCategory.D: LetterCategory.Dcroat,
    LetterCategory.d: LetterCategory.dcroat,
    LetterCategory.O: LetterCategory.Ohorn,
    LetterCategory.U: LetterCategory.Uhorn,
    LetterCategory.o: LetterCategory.ohorn,
    LetterCategory.u: LetterCategory.uhorn,
    LetterCategory.i: LetterCategory.dotlessi,
}

MAIN_ORDER: Final[tuple[LetterCategory, ...]] = (
    LetterCategory.D,
    LetterCategory.d,
    LetterCategory.A,
    LetterCategory.E,
    LetterCategory.I,
    LetterCategory.O,
    LetterCategory.U,
    LetterCategory.Y,
    LetterCategory.a,
    LetterCategory.e,
    LetterCategory.i,
    LetterCategory.o,
    LetterCategory.u,
    LetterCategory.y,
)

# Companion buckets rendered last, for tokens no main token claimed.
LEFTOVER_ORDER: Final[tuple[LetterCategory, ...]] = (
    LetterCategory.Dcroat,
    LetterCategory.dcroat,
    LetterCategory.Ohorn,
    LetterCategory.Uhorn,
    LetterCategory.ohorn,
    LetterCategory.uhorn,
    LetterCategory.dotlessi,
)

GROUP_SEPARATOR: Final[str] = "\r\n"


@dataclass
class GlyphBuckets:
    """Ordered token lists, one per LetterCategory."""

    buckets: dict[LetterCategory, list[str]] = field(
        default_factory=lambda: {c: [] for c in LetterCategory}
    )

    def add(self, category: LetterCategory, token: str) -> None:
        self.buckets[category].append(token)

    def get(self, category: LetterCategory) -> list[str]:
        return self.buckets[category]

    def clear(self) -> None:
        for tokens in self.buckets.values():
            tokens.clear()

    def __len__(self) -> int:
        return sum(len(tokens) for tokens in self.buckets.values())


def category_for_letter(letter: str) -> LetterCategory | None:
    return LETTER_TO_CATEGORY.get(letter)


def categorize_tokens(glyphs_input: str) -> GlyphBuckets:
    """Route each usable token of a glyph list into its letter bucket."""
    buckets = GlyphBuckets()
    for token in split_tokens(glyphs_input):
        if not has_interior_separator(token):
            logger.debug("Skipping malformed glyph token %r", token)
            continue
        category = category_for_letter(letter_of(token))
        if category is None:
            logger.debug("Skipping unsupported glyph token %r", token)
            continue
        buckets.add(category, token)
    return buckets


def _index_by_feature(tokens: list[str]) -> dict[str, list[int]]:
    grouped: dict[str, list[int]] = {}
    for idx, token in enumerate(tokens):
        grouped.setdefault(feature_of(token), []).append(idx)
    return grouped


def group_tokens(buckets: GlyphBuckets) -> list[list[str]]:
    """Reassemble buckets into ordered groups.

    Each base token is followed by the companion tokens sharing its feature
    suffix (e.g. O.ss01 then Ohorn.ss01). Companions never attach across
    features. Companion tokens left unclaimed are emitted in trailing groups.
    """
    groups: list[list[str]] = []
    consumed: dict[LetterCategory, set[int]] = {c: set() for c in LEFTOVER_ORDER}

    for category in MAIN_ORDER:
        main = buckets.get(category)
        if not main:
            continue

        companion_category = COMPANIONS.get(category)
        companions = buckets.get(companion_category) if companion_category is not None else []
        by_feature = _index_by_feature(companions)

        group: list[str] = []
        for token in main:
            group.append(token)
            for idx in by_feature.get(feature_of(token), ()):
                group.append(companions[idx])
                consumed[companion_category].add(idx)
        groups.append(group)

    for category in LEFTOVER_ORDER:
        rest = [t for idx, t in enumerate(buckets.get(category)) if idx not in consumed[category]]
        if rest:
            groups.append(rest)

    return groups


def render_groups(groups: list[list[str]]) -> str:
    """Join groups as "a/b/" lines separated by CRLF."""
    return GROUP_SEPARATOR.join(LIST_DELIMITER.join(g) + LIST_DELIMITER for g in groups if g)


def flatten_groups(groups: list[list[str]]) -> list[str]:
    return [token for group in groups for token in group]

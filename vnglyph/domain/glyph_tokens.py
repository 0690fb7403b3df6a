from __future__ import annotations

"""Glyph-list tokenizing (domain layer).

A glyph list is a slash-delimited string such as "A.ss01/E.ss01/".
A token is `letter.feature`; it is usable when its first '.' is neither the
first nor the last character.

Nothing here raises on malformed input; bad tokens are simply dropped.
"""

import re
from typing import Final


SEPARATOR: Final[str] = "."
LIST_DELIMITER: Final[str] = "/"

_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")
_SLASH_RUN_RE: Final[re.Pattern[str]] = re.compile(r"/{2,}")


def clean_input(glyphs_input: str | None) -> str:
    """Normalise a raw glyph list.

    Removes all whitespace (CR/LF included), collapses runs of '/' and strips
    leading/trailing '/'. Idempotent.
    """
    s = _WHITESPACE_RE.sub("", glyphs_input or "")
    s = _SLASH_RUN_RE.sub(LIST_DELIMITER, s)
    return s.strip(LIST_DELIMITER)


def split_tokens(glyphs_input: str | None) -> list[str]:
    """Return the cleaned list split on '/' ([] for empty input)."""
    cleaned = clean_input(glyphs_input)
    if not cleaned:
        return []
    return cleaned.split(LIST_DELIMITER)


def has_interior_separator(token: str) -> bool:
    idx = token.find(SEPARATOR)
    return 0 < idx < len(token) - 1


def is_valid_token(token: str) -> bool:
    """True for `letter.feature` with exactly one interior '.'."""
    return token.count(SEPARATOR) == 1 and has_interior_separator(token)


def parse_glyph_input(glyphs_input: str | None) -> list[str]:
    """Cleaned tokens whose first '.' sits strictly inside the token."""
    return [t for t in split_tokens(glyphs_input) if has_interior_separator(t)]


def split_token(token: str) -> tuple[str, str]:
    """Split `letter.feature` on the first '.'; feature is "" when absent."""
    letter, _, feature = token.partition(SEPARATOR)
    return letter, feature


def letter_of(token: str) -> str:
    return split_token(token)[0]


def feature_of(token: str) -> str:
    return split_token(token)[1]

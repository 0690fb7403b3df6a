from __future__ import annotations

"""Deterministic placeholder glyph names.

Kept for older build scripts that call `generate_glyph()` to obtain a
stable throwaway name for a label.
"""

from typing import Final

_VOWELS: Final[str] = "aeiouy"


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def generate_glyph(name: str, uppercase: bool = False) -> str:
    """Return a short deterministic name such as "Na42" for `name`."""
    base = (name or "").strip() or "glyph"

    # Hash over UTF-16 code units so names match existing font-build output.
    units = base.encode("utf-16-le")
    h = 0
    for i in range(0, len(units), 2):
        h = _to_int32(h * 31 + int.from_bytes(units[i:i + 2], "little"))

    vowel = _VOWELS[abs(h) % len(_VOWELS)]
    core = "{}{}{}".format(base[0], vowel, abs(h) % 100)
    return core.upper() if uppercase else core

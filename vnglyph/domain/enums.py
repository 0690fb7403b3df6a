from __future__ import annotations

from enum import Enum


class LetterCategory(Enum):
    """Letter buckets used when grouping a glyph list.

    The value is the letter prefix as it appears in a glyph token
    (the part before the first '.').
    """

    D = "D"
    d = "d"
    Dcroat = "Dcroat"
    dcroat = "dcroat"
    A = "A"
    E = "E"
    I = "I"
    O = "O"
    U = "U"
    Ohorn = "Ohorn"
    Uhorn = "Uhorn"
    Y = "Y"
    a = "a"
    e = "e"
    i = "i"
    o = "o"
    u = "u"
    ohorn = "ohorn"
    uhorn = "uhorn"
    y = "y"
    dotlessi = "dotlessi"

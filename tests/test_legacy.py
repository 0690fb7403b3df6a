from vnglyph.domain.legacy import generate_glyph


def test_generate_glyph_is_deterministic():
    assert generate_glyph("Nguyen") == generate_glyph("Nguyen")


def test_generate_glyph_uppercase():
    low = generate_glyph("Tran")
    assert generate_glyph("Tran", uppercase=True) == low.upper()


def test_generate_glyph_empty_input():
    g = generate_glyph("")
    assert isinstance(g, str)
    assert g.startswith("g")
    assert g[1] in "aeiouy"


def test_generate_glyph_known_values():
    assert generate_glyph("A") == "Ay65"
    assert generate_glyph("ab") == "ao5"
    assert generate_glyph("  ab  ") == "ao5"


def test_generate_glyph_hashes_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00.
    assert generate_glyph("\U0001F600") == "\U0001F600e99"

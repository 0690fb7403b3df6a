from __future__ import annotations

"""Generation results and their text/JSON forms.

Text grammar:
  - one rule per line: "<input>=<output>", e.g. "A.ss01+grave=Agrave.ss01"
  - rules for one base glyph form a block; blocks are separated by a blank line
  - lines end with CRLF

In memory a result maps output glyph name -> input combination.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, Final, Mapping

LINE_BREAK: Final[str] = "\r\n"
BLOCK_BREAK: Final[str] = LINE_BREAK + LINE_BREAK
COMBINE: Final[str] = "+"
ASSIGN: Final[str] = "="

_BLOCK_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n\r?\n")
_LINE_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")


def format_rule(input_pattern: str, output_glyph: str) -> str:
    return "{}{}{}".format(input_pattern, ASSIGN, output_glyph)


def parse_rule(line: str) -> tuple[str, str] | None:
    """Split "input=output" on the first '='; None when there is no input side."""
    idx = line.find(ASSIGN)
    if idx <= 0:
        return None
    return line[:idx], line[idx + 1:]


def base_of_input(input_pattern: str) -> str:
    """Base glyph of an input combination: everything before the first '+'."""
    idx = input_pattern.find(COMBINE)
    return input_pattern[:idx] if idx > 0 else input_pattern


@dataclass
class GenerationResult:
    """Variants generated for one base glyph (output -> input)."""

    variants: dict[str, str] = field(default_factory=dict)

    def add_variant(self, output_glyph: str, input_pattern: str) -> None:
        self.variants[output_glyph] = input_pattern

    def update(self, other: GenerationResult) -> None:
        self.variants.update(other.variants)

    def get_variants(self) -> list[str]:
        return list(self.variants)

    def get_input_pattern(self, output_glyph: str) -> str | None:
        return self.variants.get(output_glyph)

    def to_string(self) -> str:
        return LINE_BREAK.join(format_rule(i, o) for o, i in self.variants.items())

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self.variants)


@dataclass
class GlyphGenerationResult:
    """Variants for many base glyphs: base glyph -> (output -> input).

    Built by one generation call and handed to the caller; the generator
    does not touch it afterwards.
    """

    glyphs: dict[str, dict[str, str]] = field(default_factory=dict)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_glyph(self, base_glyph: str, variant: str, value: str) -> None:
        self.glyphs.setdefault(base_glyph, {})[variant] = value

    def merge(self, base_glyph: str, result: GenerationResult) -> None:
        """Add every output -> input pair of `result` under `base_glyph`."""
        for output_glyph, input_pattern in result.variants.items():
            self.add_glyph(base_glyph, output_glyph, input_pattern)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def get_glyph(self, base_glyph: str, output_glyph: str | None = None) -> str | dict[str, str] | None:
        """All variants of a base glyph, or the input pattern of one output glyph."""
        data = self.glyphs.get(base_glyph)
        if data is None:
            return None
        if output_glyph:
            return data.get(output_glyph)
        return data

    def get_variants(self, base_glyph: str) -> list[str]:
        return list(self.glyphs.get(base_glyph, {}))

    def get_input_pattern(self, base_glyph: str, output_glyph: str) -> str | None:
        return self.glyphs.get(base_glyph, {}).get(output_glyph)

    def get_all_base_glyphs(self) -> list[str]:
        return list(self.glyphs)

    def __len__(self) -> int:
        return len(self.glyphs)

    # -------------------------------------------------------------------------
    # Serialisation
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        blocks = []
        for variants in self.glyphs.values():
            if variants:
                blocks.append(LINE_BREAK.join(format_rule(i, o) for o, i in variants.items()))
        return BLOCK_BREAK.join(blocks)

    def __str__(self) -> str:
        return self.to_string()

    def to_json(self) -> str:
        return json.dumps(self.glyphs, indent=2, ensure_ascii=False)

    @classmethod
    def from_string(cls, glyph_string: str) -> GlyphGenerationResult:
        """Parse the text form.

        Entries are stored output -> input, the same way generated results
        hold them, so `to_string()` reproduces every parsed rule line. Older
        parsers keyed each entry by its input side instead.

        The base glyph is recovered from the input side (text before its
        first '+'), so inputs built on a substitute base, such as
        "dotlessi.ss01+grave", are grouped under that substitute.
        Lines without '=' are skipped.
        """
        result = cls()
        if not glyph_string or not glyph_string.strip():
            return result

        for group in _BLOCK_SPLIT_RE.split(glyph_string):
            if not group.strip():
                continue
            for line in _LINE_SPLIT_RE.split(group):
                if not line.strip():
                    continue
                rule = parse_rule(line)
                if rule is None:
                    continue
                input_pattern, output_glyph = rule
                result.add_glyph(base_of_input(input_pattern), output_glyph, input_pattern)

        return result

    @classmethod
    def from_json(cls, raw: str | bytes) -> GlyphGenerationResult:
        """Parse the JSON form; entries that are not strings are ignored."""
        data: Any = json.loads(raw)
        result = cls()
        if not isinstance(data, Mapping):
            return result
        for base_glyph, variants in data.items():
            if not isinstance(variants, Mapping):
                continue
            for output_glyph, input_pattern in variants.items():
                if isinstance(output_glyph, str) and isinstance(input_pattern, str):
                    result.add_glyph(str(base_glyph), output_glyph, input_pattern)
        return result

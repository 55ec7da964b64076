"""
Transliteration helper: Singlish (phonetic Latin) -> Sinhala Unicode.

Single left-to-right longest-match pass over the input:
1. Specials (sanyaka clusters like 'nG')
2. Consonants, fused with the vowel sign that follows
3. Standalone vowels
4. Anything else is copied through unchanged
"""
from enum import Enum
from typing import Optional

from .mappings import Category, MappingTable, get_mapping_table

# Hal kirima (virama), suppresses the inherent vowel inside a cluster
HAL_KIRIMA = "්"


class InputMode(str, Enum):
    """Input language selected in the editor."""
    SINGLISH = "SI"
    ENGLISH = "EN"


def _starts_cluster(table: MappingTable, text: str, position: int) -> bool:
    """True if a consonant or special begins at position."""
    return (
        table.match(Category.SPECIAL, text, position) is not None
        or table.match(Category.CONSONANT, text, position) is not None
    )


def transliterate(text: str, table: Optional[MappingTable] = None) -> str:
    """
    Convert Singlish text to Sinhala Unicode.

    Never fails: characters outside the phonetic scheme (spaces,
    digits, punctuation, existing Sinhala text) are kept as they are.

    Args:
        text: Phonetic Latin input, e.g. "amma"
        table: Mapping table to use (defaults to the shared table)

    Returns:
        Sinhala text, e.g. "අම්ම"
    """
    if not text:
        return ""

    table = table or get_mapping_table()
    output = []
    cur = 0
    end = len(text)

    while cur < end:
        # Specials win over a nasal followed by a plain consonant
        key = table.match(Category.SPECIAL, text, cur)
        if key is not None:
            output.append(table.specials[key])
            cur += len(key)
            continue

        key = table.match(Category.CONSONANT, text, cur)
        if key is not None:
            glyph = table.consonants[key]
            cur += len(key)

            sign = table.match(Category.VOWEL_SIGN, text, cur)
            if sign is not None:
                output.append(glyph + table.vowel_signs[sign])
                cur += len(sign)
            elif _starts_cluster(table, text, cur):
                output.append(glyph + HAL_KIRIMA)
            else:
                output.append(glyph)
            continue

        key = table.match(Category.VOWEL, text, cur)
        if key is not None:
            output.append(table.vowels[key])
            cur += len(key)
            continue

        output.append(text[cur])
        cur += 1

    return "".join(output)


def render(text: str, mode: InputMode = InputMode.SINGLISH) -> str:
    """
    Produce editor output for the selected input mode.

    Singlish input is transliterated, English input is shown as typed.
    """
    if InputMode(mode) == InputMode.ENGLISH:
        return text or ""
    return transliterate(text)

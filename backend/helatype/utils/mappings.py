"""
mappings.py - Singlish to Sinhala Mapping Table

This module holds the static registry of Latin spellings and their
Sinhala glyphs. The registry is split into four lookup spaces:
- Vowels (standalone vowel letters)
- Consonants (base consonant letters)
- Vowel Signs (diacritics attached after a consonant)
- Specials (prenasalized "sanyaka" clusters)

Keys are case sensitive. Capital letters select the aspirated
(mahaprana) or retroflex letters, e.g. 'k' = ක and 'K' = ඛ.
"""
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional


class Category(Enum):
    """Lookup space of a mapping entry."""
    VOWEL = "Vowel"
    CONSONANT = "Consonant"
    VOWEL_SIGN = "VowelSign"
    SPECIAL = "Special"


@dataclass(frozen=True)
class MappingEntry:
    """One Latin spelling and the Sinhala glyph it produces."""
    latin: str
    sinhala: str
    category: Category

    def to_dict(self) -> dict:
        return {
            "latin": self.latin,
            "sinhala": self.sinhala,
            "category": self.category.value
        }


_V = Category.VOWEL
_C = Category.CONSONANT
_VS = Category.VOWEL_SIGN
_SP = Category.SPECIAL

SINHALA_MAPPINGS: tuple = (
    # ස්වර (Vowels)
    MappingEntry('a', 'අ', _V),
    MappingEntry('aa', 'ආ', _V),
    MappingEntry('ae', 'ඇ', _V),
    MappingEntry('aee', 'ඈ', _V),
    MappingEntry('i', 'ඉ', _V),
    MappingEntry('ii', 'ඊ', _V),
    MappingEntry('u', 'උ', _V),
    MappingEntry('uu', 'ඌ', _V),
    MappingEntry('e', 'එ', _V),
    MappingEntry('ee', 'ඒ', _V),
    MappingEntry('ai', 'ඓ', _V),
    MappingEntry('o', 'ඔ', _V),
    MappingEntry('oo', 'ඕ', _V),
    MappingEntry('au', 'ඖ', _V),

    # ව්‍යඤ්ජන (Consonants)
    MappingEntry('k', 'ක', _C),
    MappingEntry('K', 'ඛ', _C),
    MappingEntry('g', 'ග', _C),
    MappingEntry('G', 'ඝ', _C),
    MappingEntry('ch', 'ච', _C),
    MappingEntry('CH', 'ඡ', _C),
    MappingEntry('j', 'ජ', _C),
    MappingEntry('J', 'ඣ', _C),
    MappingEntry('t', 'ට', _C),
    MappingEntry('T', 'ඨ', _C),
    MappingEntry('d', 'ඩ', _C),
    MappingEntry('D', 'ඪ', _C),
    MappingEntry('th', 'ත', _C),
    MappingEntry('TH', 'ථ', _C),
    MappingEntry('dh', 'ද', _C),
    MappingEntry('DH', 'ධ', _C),
    MappingEntry('n', 'න', _C),
    MappingEntry('N', 'ණ', _C),
    MappingEntry('p', 'ප', _C),
    MappingEntry('P', 'ඵ', _C),
    MappingEntry('b', 'බ', _C),
    MappingEntry('B', 'භ', _C),
    MappingEntry('m', 'ම', _C),
    MappingEntry('y', 'ය', _C),
    MappingEntry('r', 'ර', _C),
    MappingEntry('l', 'ල', _C),
    MappingEntry('L', 'ළ', _C),
    MappingEntry('v', 'ව', _C),
    MappingEntry('w', 'ව', _C),
    MappingEntry('s', 'ස', _C),
    MappingEntry('sh', 'ශ', _C),
    MappingEntry('S', 'ෂ', _C),
    MappingEntry('h', 'හ', _C),
    MappingEntry('f', 'ෆ', _C),

    # පිලි (Vowel signs) - 'a' is the inherent vowel, no sign is written
    MappingEntry('a', '', _VS),
    MappingEntry('aa', 'ා', _VS),
    MappingEntry('ae', 'ැ', _VS),
    MappingEntry('aee', 'ෑ', _VS),
    MappingEntry('i', 'ි', _VS),
    MappingEntry('ii', 'ී', _VS),
    MappingEntry('u', 'ු', _VS),
    MappingEntry('uu', 'ූ', _VS),
    MappingEntry('e', 'ෙ', _VS),
    MappingEntry('ee', 'ේ', _VS),
    MappingEntry('ai', 'ෛ', _VS),
    MappingEntry('o', 'ො', _VS),
    MappingEntry('oo', 'ෝ', _VS),
    MappingEntry('au', 'ෞ', _VS),

    # සඤ්ඤක (Special/Prenasalized)
    MappingEntry('nG', 'ඟ', _SP),
    MappingEntry('nD', 'ඳ', _SP),
    MappingEntry('nDh', 'ඬ', _SP),
    MappingEntry('nB', 'ඹ', _SP),
    MappingEntry('ny', 'ඤ', _SP),
    MappingEntry('kn', 'ඥ', _SP),
)

# Categories shown in the alphabet help table
HELP_CATEGORIES = (Category.VOWEL, Category.CONSONANT, Category.SPECIAL)


class MappingTable:
    """
    Read-only lookup spaces built from a list of mapping entries.

    Each category is its own space, so the same Latin key may appear
    once per category (e.g. 'a' as a vowel and as a vowel sign).
    """

    def __init__(self, entries=SINHALA_MAPPINGS):
        spaces: Dict[Category, Dict[str, str]] = {c: {} for c in Category}

        for entry in entries:
            space = spaces[entry.category]
            if not entry.latin:
                raise ValueError(f"Empty latin key in {entry.category.value}")
            if entry.latin in space:
                raise ValueError(
                    f"Duplicate key '{entry.latin}' in {entry.category.value}"
                )
            space[entry.latin] = entry.sinhala

        vowel_keys = set(spaces[Category.VOWEL])
        sign_keys = set(spaces[Category.VOWEL_SIGN])
        if not sign_keys <= vowel_keys:
            raise ValueError(
                f"Vowel signs without a standalone vowel: {sorted(sign_keys - vowel_keys)}"
            )
        if sign_keys and spaces[Category.VOWEL_SIGN].get('a') != '':
            raise ValueError("Vowel sign 'a' must map to the empty diacritic")

        self.entries: tuple = tuple(entries)
        self._spaces: Dict[Category, Mapping[str, str]] = {
            c: MappingProxyType(space) for c, space in spaces.items()
        }
        self._max_key_length: Dict[Category, int] = {
            c: max((len(k) for k in space), default=0)
            for c, space in spaces.items()
        }

    @property
    def vowels(self) -> Mapping[str, str]:
        return self._spaces[Category.VOWEL]

    @property
    def consonants(self) -> Mapping[str, str]:
        return self._spaces[Category.CONSONANT]

    @property
    def vowel_signs(self) -> Mapping[str, str]:
        return self._spaces[Category.VOWEL_SIGN]

    @property
    def specials(self) -> Mapping[str, str]:
        return self._spaces[Category.SPECIAL]

    def match(self, category: Category, text: str, position: int = 0) -> Optional[str]:
        """
        Find the longest key of a lookup space at a position in text.

        Args:
            category: Lookup space to search
            text: Input text
            position: Index where the key must start

        Returns:
            The matched key, or None if no key starts at position
        """
        space = self._spaces[category]
        longest = min(self._max_key_length[category], len(text) - position)

        for size in range(longest, 0, -1):
            candidate = text[position:position + size]
            if candidate in space:
                return candidate

        return None


@lru_cache()
def get_mapping_table() -> MappingTable:
    """Get the shared mapping table (built once)."""
    return MappingTable()


def search_mappings(query: str = "", category: Optional[Category] = None) -> List[MappingEntry]:
    """
    Search the alphabet help table.

    Args:
        query: Latin spelling or Sinhala letter to look for
        category: Restrict results to one category

    Returns:
        Matching entries in table order
    """
    if category is not None:
        entries = [e for e in SINHALA_MAPPINGS if e.category == category]
    else:
        entries = [e for e in SINHALA_MAPPINGS if e.category in HELP_CATEGORIES]

    if not query:
        return entries

    q = query.lower()
    return [
        e for e in entries
        if q in e.latin.lower() or query in e.sinhala
    ]

"""Flavor-aware case normalization."""

from dataclasses import dataclass, field
from typing import Dict, Mapping

from .flavor import Flavor
from .parser import ParsedPath


@dataclass(frozen=True)
class Culture:
    """Case-folding rules for a language."""

    name: str
    # Characters whose lowercase form differs from str.lower()
    lower_overrides: Mapping[str, str] = field(default_factory=dict, hash=False)

    def lower(self, text: str) -> str:
        if not self.lower_overrides:
            return text.lower()
        return ''.join(self.lower_overrides.get(char, char.lower()) for char in text)


INVARIANT_CULTURE = Culture('invariant')

# Turkic languages distinguish dotted and dotless I
TURKISH_CULTURE = Culture('tr', {'I': 'ı', 'İ': 'i'})
AZERBAIJANI_CULTURE = Culture('az', {'I': 'ı', 'İ': 'i'})

CULTURES: Dict[str, Culture] = {
    '': INVARIANT_CULTURE,
    'invariant': INVARIANT_CULTURE,
    'en': INVARIANT_CULTURE,
    'tr': TURKISH_CULTURE,
    'az': AZERBAIJANI_CULTURE,
}


def get_culture(name: str) -> Culture:
    """
    Look up a culture by name.

    Region suffixes are ignored ('tr-TR' and 'tr_TR' resolve to 'tr').
    Unknown languages fall back to the invariant culture.
    """
    language = name.strip().lower().replace('_', '-').split('-')[0]
    return CULTURES.get(language, INVARIANT_CULTURE)


def fold(flavor: Flavor, text: str, culture: Culture = INVARIANT_CULTURE) -> str:
    """Case-fold a single string the way the flavor compares names."""
    if flavor.case_sensitive:
        return text
    return culture.lower(text)


def normcase(flavor: Flavor, path: ParsedPath, culture: Culture = INVARIANT_CULTURE) -> ParsedPath:
    """
    Lowercase every piece of a path on case-insensitive flavors.

    Args:
        flavor: Rules the path was parsed with.
        path: Parsed path to normalize.
        culture: Case-folding rules to apply.

    Returns:
        The same path on case-sensitive flavors, otherwise a lowercased copy.
    """
    if flavor.case_sensitive:
        return path
    return ParsedPath(
        culture.lower(path.drive),
        culture.lower(path.root),
        tuple(culture.lower(part) for part in path.parts),
    )

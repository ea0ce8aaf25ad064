"""
Person Ordering

Two orderings over PersonRecords, used in two different places:

- BIRTH ORDER (bars):          birth.earliest, then sort_key
- SELECTION-LIST ORDER (list): sort_key, then birth.earliest

Both are total and stable: persons tied on every key keep their input order.
They are deliberately separate functions and must not be conflated.

COLLATION:
==========
Sort keys compare in the dataset's sort language. Accents and case are
ignored at the first level, except for letters the language's alphabet
lists as letters of their own (Russian "й", Spanish "ñ", ...). Those keep
their own place after their base letter.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Iterable, List, Tuple
import unicodedata

from ..contracts.person import PersonRecord

DEFAULT_LANGUAGE = "en"

# letter -> (base letter it follows, rank among the letters following it)
ALPHABET_TAILORINGS: Dict[str, Dict[str, Tuple[str, int]]] = {
    "ru": {"й": ("и", 1)},
    "uk": {"ґ": ("г", 1), "є": ("е", 1), "і": ("и", 1), "ї": ("и", 2), "й": ("и", 3)},
    "be": {"і": ("з", 1), "й": ("з", 2), "ў": ("у", 1)},
    "es": {"ñ": ("n", 1)},
}


class Ordering(Enum):
    BEFORE = -1
    EQUAL = 0
    AFTER = 1


def _primary_subtag(language: str) -> str:
    return language.replace("_", "-").split("-")[0].lower()


def collation_key(text: str, language: str = DEFAULT_LANGUAGE):
    """
    Locale-aware comparison key.

    "Émile" sorts with "emile"; in Russian "Йа" sorts after "Иб". The raw
    string breaks remaining ties so the order is total.
    """
    tailoring = ALPHABET_TAILORINGS.get(_primary_subtag(language), {})
    letters: List[Tuple[str, int]] = []
    for ch in text.casefold():
        if ch in tailoring:
            letters.append(tailoring[ch])
            continue
        decomposed = unicodedata.normalize("NFKD", ch)
        letters.extend((c, 0) for c in decomposed if not unicodedata.combining(c))
    return (tuple(letters), text)


def _birth_key(language: str):
    return lambda person: (person.birth.earliest, collation_key(person.sort_key, language))


def _sort_key_key(language: str):
    return lambda person: (collation_key(person.sort_key, language), person.birth.earliest)


def _compare(left, right) -> Ordering:
    if left < right:
        return Ordering.BEFORE
    if left > right:
        return Ordering.AFTER
    return Ordering.EQUAL


def compare_by_birth(
    a: PersonRecord, b: PersonRecord, language: str = DEFAULT_LANGUAGE,
) -> Ordering:
    key = _birth_key(language)
    return _compare(key(a), key(b))


def compare_by_sort_key(
    a: PersonRecord, b: PersonRecord, language: str = DEFAULT_LANGUAGE,
) -> Ordering:
    key = _sort_key_key(language)
    return _compare(key(a), key(b))


def sorted_by_birth(
    people: Iterable[PersonRecord], language: str = DEFAULT_LANGUAGE,
) -> List[PersonRecord]:
    """Display order of bars: earliest possible birth first."""
    return sorted(people, key=_birth_key(language))


def sorted_by_sort_key(
    people: Iterable[PersonRecord], language: str = DEFAULT_LANGUAGE,
) -> List[PersonRecord]:
    """Order of the selection list: alphabetical, birth date breaks ties."""
    return sorted(people, key=_sort_key_key(language))

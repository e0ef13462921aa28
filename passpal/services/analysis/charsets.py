"""
Character class catalog shared by every agent that classifies characters.

Four primitive classes are defined over ASCII:

- lower:    a-z (26)
- upper:    A-Z (26)
- numeric:  0-9 (10)
- symbolic: the 32 characters of ``string.punctuation`` plus space (33)

Anything else (accented letters, non-ASCII punctuation, control
characters) belongs to no class.
"""

import itertools
import string
from dataclasses import dataclass
from typing import ClassVar

LOWER = "lower"
UPPER = "upper"
NUMERIC = "numeric"
SYMBOLIC = "symbolic"

SYMBOLS = string.punctuation + " "

PRIMITIVE_ALPHABETS: dict[str, frozenset[str]] = {
    LOWER: frozenset(string.ascii_lowercase),
    UPPER: frozenset(string.ascii_uppercase),
    NUMERIC: frozenset(string.digits),
    SYMBOLIC: frozenset(SYMBOLS),
}

PRIMITIVE_ORDER: tuple[str, ...] = (LOWER, UPPER, NUMERIC, SYMBOLIC)

# Mask symbol for each primitive class
MASK_SYMBOLS: dict[str, str] = {
    LOWER: "L",
    UPPER: "U",
    NUMERIC: "D",
    SYMBOLIC: "S",
}


@dataclass(frozen=True)
class Charset:
    """A union of primitive classes with its keyspace size."""

    name: str
    primitives: tuple[str, ...]
    alphabet: frozenset[str]

    @property
    def keyspace(self) -> int:
        return len(self.alphabet)

    def matches(self, word: str) -> bool:
        """True if the word is non-empty and uses only this class's characters."""
        return bool(word) and all(char in self.alphabet for char in word)


class CharsetCatalog:
    """
    The fixed catalog of 15 character classes.

    Classes are the four primitives followed by every combination of two,
    three and four primitives, in the canonical order
    lower, upper, numeric, symbolic.
    """

    _char_classes: ClassVar[dict[str, str]] = {
        char: name
        for name, alphabet in PRIMITIVE_ALPHABETS.items()
        for char in alphabet
    }

    def __init__(self):
        charsets = []
        for size in range(1, len(PRIMITIVE_ORDER) + 1):
            for combo in itertools.combinations(PRIMITIVE_ORDER, size):
                alphabet = frozenset().union(*(PRIMITIVE_ALPHABETS[p] for p in combo))
                charsets.append(Charset(name="-".join(combo), primitives=combo, alphabet=alphabet))
        self.charsets: tuple[Charset, ...] = tuple(charsets)
        self._by_name = {charset.name: charset for charset in self.charsets}

    def __iter__(self):
        return iter(self.charsets)

    def __len__(self) -> int:
        return len(self.charsets)

    def get(self, name: str) -> Charset:
        return self._by_name[name]

    def matching(self, word: str) -> list[Charset]:
        """All classes whose predicate holds for the word."""
        return [charset for charset in self.charsets if charset.matches(word)]

    @classmethod
    def classify_char(cls, char: str) -> str | None:
        """Primitive class name of a character, or None if it has none."""
        return cls._char_classes.get(char)


CHARSETS = CharsetCatalog()


def classify_char(char: str) -> str | None:
    """Primitive class name of a single character, or None."""
    return CharsetCatalog.classify_char(char)


def is_symbol(char: str) -> bool:
    return char in PRIMITIVE_ALPHABETS[SYMBOLIC]

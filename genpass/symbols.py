"""
genpass.symbols
Non-empty, immutable sets of symbols to build passwords from.
"""

import enum
import string
from typing import Iterable, Iterator

from .errors import EmptySymbols, InvalidSymbol


class Category(enum.Enum):
    """Base alphabets that can be switched on and off from the command line."""

    LATIN_UPPER = string.ascii_uppercase
    LATIN_LOWER = string.ascii_lowercase
    DIGITS = string.digits
    # all 32 printable ASCII punctuation characters
    SPECIAL = string.punctuation


def _is_scalar_value(symbol) -> bool:
    # surrogates show up from undecodable argv bytes (surrogateescape)
    return isinstance(symbol, str) and len(symbol) == 1 and not 0xD800 <= ord(symbol) <= 0xDFFF


class SymbolSet:
    """
    A set of distinct characters that is never empty.

    Members are kept sorted by codepoint, so iteration, str() and sampling
    order do not depend on how the set was assembled. Every operation that
    could produce an empty set raises EmptySymbols instead.
    """

    __slots__ = ("_symbols",)

    def __init__(self, symbols: Iterable[str]):
        members = set(symbols)
        for symbol in members:
            if not _is_scalar_value(symbol):
                raise InvalidSymbol(symbol)
        if not members:
            raise EmptySymbols()
        object.__setattr__(self, "_symbols", tuple(sorted(members)))

    def __setattr__(self, name, value):
        raise AttributeError("SymbolSet is immutable")

    @classmethod
    def from_category(cls, category: Category) -> "SymbolSet":
        return cls(category.value)

    @classmethod
    def from_text(cls, text: str) -> "SymbolSet":
        """
        Parse free-form user input.
        Raises EmptySymbols for an empty string and InvalidSymbol for lone surrogates.
        """
        return cls(text)

    def union(self, other: "SymbolSet") -> "SymbolSet":
        return SymbolSet(self._symbols + other._symbols)

    def difference(self, other: "SymbolSet") -> "SymbolSet":
        """Members of this set absent from `other`. Raises EmptySymbols if nothing is left."""
        removed = set(other._symbols)
        return SymbolSet(c for c in self._symbols if c not in removed)

    __or__ = union
    __sub__ = difference

    def size(self) -> int:
        return len(self._symbols)

    def sample(self, rng) -> str:
        """
        Pick one member uniformly at random.
        `rng` is anything with a random.Random compatible choice() method.
        """
        return rng.choice(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self._symbols

    def __eq__(self, other) -> bool:
        if not isinstance(other, SymbolSet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __str__(self) -> str:
        return "".join(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolSet({str(self)!r})"

"""
genpass.universe
Assemble the final set of symbols from base categories, allow and deny lists.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import EmptySymbols
from .symbols import Category, SymbolSet

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 24


@dataclass(frozen=True)
class Options:
    """Validated command line configuration."""

    no_latin_lower: bool = False
    no_latin_upper: bool = False
    no_latin: bool = False
    no_digits: bool = False
    no_special: bool = False
    allowed: List[str] = field(default_factory=list)
    disallowed: List[str] = field(default_factory=list)
    verbose: bool = False
    copy: bool = False
    length: int = DEFAULT_LENGTH

    def enabled_categories(self) -> List[Category]:
        """Base categories left on, in merge order."""
        categories = []
        if not (self.no_latin or self.no_latin_upper):
            categories.append(Category.LATIN_UPPER)
        if not (self.no_latin or self.no_latin_lower):
            categories.append(Category.LATIN_LOWER)
        if not self.no_digits:
            categories.append(Category.DIGITS)
        if not self.no_special:
            categories.append(Category.SPECIAL)
        return categories


def _merge(current: Optional[SymbolSet], another: SymbolSet) -> SymbolSet:
    logger.debug("Add symbols %s", another)
    if current is None:
        return another
    return current.union(another)


def build_universe(options: Options) -> SymbolSet:
    """
    Compose the symbols a password is drawn from.

    Enabled categories are merged first, then every allowed string in the
    order given. Denied strings are subtracted afterwards, so a symbol that
    is both allowed and denied is always removed.
    Raises EmptySymbols when nothing is left to generate from.
    """
    symbols = None
    for category in options.enabled_categories():
        symbols = _merge(symbols, SymbolSet.from_category(category))
    for text in options.allowed:
        symbols = _merge(symbols, SymbolSet.from_text(text))
    if symbols is None:
        raise EmptySymbols()

    for text in options.disallowed:
        denied = SymbolSet.from_text(text)
        logger.debug("Remove symbols %s", denied)
        symbols = symbols.difference(denied)

    logger.debug("Symbols to use: %s", symbols)
    if symbols.size() == 1:
        logger.warning("There is only one symbol available for password generation")
    return symbols

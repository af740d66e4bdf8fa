import logging

import pytest

from genpass.errors import EmptySymbols
from genpass.symbols import Category
from genpass.universe import Options, build_universe

NO_BASE = dict(no_latin=True, no_digits=True, no_special=True)


def test_default_universe_has_every_category():
    symbols = build_universe(Options())
    assert symbols.size() == 26 + 26 + 10 + 32


def test_letters_only():
    symbols = build_universe(Options(no_digits=True, no_special=True))
    assert symbols.size() == 52
    assert all(c.isascii() and c.isalpha() for c in symbols)


def test_no_latin_equals_both_halves_off():
    assert build_universe(Options(no_latin=True)) == build_universe(
        Options(no_latin_upper=True, no_latin_lower=True)
    )


def test_enabled_categories_order():
    assert Options().enabled_categories() == [
        Category.LATIN_UPPER,
        Category.LATIN_LOWER,
        Category.DIGITS,
        Category.SPECIAL,
    ]
    assert Options(no_latin_lower=True, no_special=True).enabled_categories() == [
        Category.LATIN_UPPER,
        Category.DIGITS,
    ]


def test_allowed_only():
    symbols = build_universe(Options(allowed=["xyz"], **NO_BASE))
    assert str(symbols) == "xyz"


def test_allowed_extends_categories():
    symbols = build_universe(Options(no_latin=True, no_special=True, allowed=["é", "ß"]))
    assert str(symbols) == "0123456789ßé"


def test_deny_wins_over_allow():
    symbols = build_universe(Options(allowed=["abc"], disallowed=["b"], **NO_BASE))
    assert str(symbols) == "ac"


def test_deny_everything_fails():
    with pytest.raises(EmptySymbols):
        build_universe(Options(allowed=["abc"], disallowed=["abc"], **NO_BASE))


def test_deny_applied_in_order_until_empty():
    with pytest.raises(EmptySymbols):
        build_universe(Options(allowed=["abc"], disallowed=["a", "b", "c", "d"], **NO_BASE))


def test_nothing_enabled_fails():
    with pytest.raises(EmptySymbols):
        build_universe(Options(**NO_BASE))


def test_deny_from_category():
    symbols = build_universe(Options(no_latin=True, no_special=True, disallowed=["0123", "9"]))
    assert str(symbols) == "45678"


def test_single_symbol_warns(caplog, monkeypatch):
    monkeypatch.setattr(logging.getLogger("genpass"), "propagate", True)
    caplog.set_level(logging.WARNING, logger="genpass")
    symbols = build_universe(Options(allowed=["xx"], **NO_BASE))
    assert str(symbols) == "x"
    assert "only one symbol" in caplog.text

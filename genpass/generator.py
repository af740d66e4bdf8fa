"""
genpass.generator
Secure password generator using Python's secrets module.
"""

from dataclasses import dataclass
from secrets import SystemRandom
from typing import Optional

from .errors import EntropyUnavailable
from .symbols import SymbolSet
from .universe import Options, build_universe

_sysrand = SystemRandom()


@dataclass(frozen=True)
class PasswordRequest:
    symbols: SymbolSet
    length: int
    copy: bool = False

    def __post_init__(self):
        if self.length <= 0:
            raise ValueError("length must be > 0")

    @classmethod
    def from_options(cls, options: Options) -> "PasswordRequest":
        return cls(symbols=build_universe(options), length=options.length, copy=options.copy)


def generate(symbols: SymbolSet, length: int = 24, rng=None) -> str:
    """
    Generate a cryptographically secure password of exactly `length` symbols.

    Each symbol is drawn independently from `symbols`. `rng` defaults to the
    OS entropy source and should only be replaced in tests.
    """
    if length <= 0:
        raise ValueError("length must be > 0")
    rng = rng or _sysrand

    try:
        password_chars = [symbols.sample(rng) for _ in range(length)]
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailable() from e
    return "".join(password_chars)


def generate_password(request: PasswordRequest, rng: Optional[SystemRandom] = None) -> str:
    return generate(request.symbols, request.length, rng=rng)

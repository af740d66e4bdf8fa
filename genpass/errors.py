"""
genpass.errors
Errors raised while building the symbol universe, sampling or copying.
"""


class GenpassError(Exception):
    """Base class for every failure that terminates a run."""


class EmptySymbols(GenpassError, ValueError):
    def __init__(self, message: str = "No symbols are allowed to generate password with"):
        super().__init__(message)


class EntropyUnavailable(GenpassError):
    def __init__(self, message: str = "Unable to read from the system entropy source"):
        super().__init__(message)


class ClipboardError(GenpassError):
    pass


class ClipboardInitFailed(ClipboardError):
    def __init__(self, message: str = "Unable to initialize clipboard"):
        super().__init__(message)


class ClipboardStoreFailed(ClipboardError):
    def __init__(self, message: str = "Unable to store the password to the clipboard"):
        super().__init__(message)


class ForkFailed(GenpassError):
    def __init__(self, message: str = "Unable to fork the process"):
        super().__init__(message)


class SessionCreateFailed(GenpassError):
    def __init__(self, message: str = "Unable to create a session (see `man 2 setsid`)"):
        super().__init__(message)


class InvalidSymbol(GenpassError, ValueError):
    """A symbol that is not a single unicode scalar value (e.g. a lone surrogate)."""

    def __init__(self, symbol):
        super().__init__(f"Not a valid symbol: {symbol!r}")
        self.symbol = symbol

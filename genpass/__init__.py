"""genpass: random passwords from a configurable set of symbols."""

__version__ = "0.1.0"

# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every failure raised by the machine and its adapters."""


# ── alphabet ──────────────────────────────────────────────────────
class BadAlphabet(EnigmaError):
    pass


class SymbolOutOfRange(EnigmaError):
    pass


class SymbolIndexError(EnigmaError, IndexError):
    pass


# ── rotor assembly ────────────────────────────────────────────────
class DuplicateRotor(EnigmaError):
    pass


class BadRotorName(EnigmaError):
    pass


class ReflectorPosition(EnigmaError):
    pass


class RotorArityMismatch(EnigmaError):
    pass


# ── configuration text ────────────────────────────────────────────
class BadConfig(EnigmaError):
    pass


__all__ = [
    "EnigmaError",
    "BadAlphabet",
    "SymbolOutOfRange",
    "SymbolIndexError",
    "DuplicateRotor",
    "BadRotorName",
    "ReflectorPosition",
    "RotorArityMismatch",
    "BadConfig",
]

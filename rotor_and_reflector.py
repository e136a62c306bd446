# rotor_and_reflector.py
from __future__ import annotations

from enum import Enum

from alphabet import Alphabet
from debug import Debug
from errors import EnigmaError
from permutation import Permutation

debug = Debug()


class RotorKind(Enum):
    FIXED = "N"
    MOVING = "M"
    REFLECTOR = "R"


class Rotor:
    """A permutation plus a rotational offset.

    The kind decides what the rotor may do: only MOVING rotors step and
    have notches, only REFLECTORs fold the signal back, and FIXED rotors
    just sit in their slot.  Build one with `Rotor.fixed`, `Rotor.moving`
    or `Rotor.reflector`.
    """

    def __init__(
        self,
        name: str,
        perm: Permutation,
        kind: RotorKind = RotorKind.FIXED,
        notches: str = "",
    ) -> None:
        if notches and kind is not RotorKind.MOVING:
            raise EnigmaError(f"Rotor {name}: only moving rotors have notches")
        if not set(notches) <= set(perm.alphabet.symbols):
            raise EnigmaError(f"Rotor {name}: notch characters must be in the alphabet")

        self.name = name
        self.kind = kind
        self.notches = frozenset(notches)
        self._permutation = perm
        self._setting = 0
        self.ring = 0

    # ── factories ────────────────────────────────────────────────
    @classmethod
    def fixed(cls, name: str, perm: Permutation) -> "Rotor":
        return cls(name, perm, RotorKind.FIXED)

    @classmethod
    def moving(cls, name: str, perm: Permutation, notches: str) -> "Rotor":
        return cls(name, perm, RotorKind.MOVING, notches)

    @classmethod
    def reflector(cls, name: str, perm: Permutation) -> "Rotor":
        return cls(name, perm, RotorKind.REFLECTOR)

    # ── plain accessors ──────────────────────────────────────────
    @property
    def permutation(self) -> Permutation:
        return self._permutation

    @property
    def alphabet(self) -> Alphabet:
        return self._permutation.alphabet

    def size(self) -> int:
        return self._permutation.size()

    @property
    def setting(self) -> int:
        return self._setting

    @property
    def position(self) -> str:
        """The symbol showing in the rotor's window."""
        return self.alphabet.to_char(self._setting)

    def set(self, posn: int) -> None:
        if self.kind is RotorKind.REFLECTOR and posn != 0:
            raise EnigmaError(f"Reflector {self.name} has only one position")
        self._setting = posn

    def set_ring(self, ring: int) -> None:
        self.ring = ring

    # ── capabilities ─────────────────────────────────────────────
    def rotates(self) -> bool:
        return self.kind is RotorKind.MOVING

    def reflecting(self) -> bool:
        return self.kind is RotorKind.REFLECTOR

    def at_notch(self) -> bool:
        if self.kind is not RotorKind.MOVING:
            return False
        return self.position in self.notches

    def advance(self) -> None:
        if self.kind is RotorKind.MOVING:
            self._setting = self._permutation.wrap(self._setting + 1)
            debug.log("rotor", f"{self.name} -> {self.position}")

    # ── signal paths ---------------------------------------------
    def convert_forward(self, p: int) -> int:
        perm = self._permutation
        shift = self._setting - self.ring
        return perm.wrap(perm.permute(perm.wrap(p + shift)) - shift)

    def convert_backward(self, e: int) -> int:
        if self.kind is RotorKind.REFLECTOR:
            raise EnigmaError(f"Reflector {self.name} converts in one direction only")
        perm = self._permutation
        shift = self._setting - self.ring
        return perm.wrap(perm.invert(perm.wrap(e + shift)) - shift)

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor {self.name} {self.kind.name} pos={self.position} ring={self.ring}>"

# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence

from alphabet import Alphabet
from debug import Debug
from errors import (
    BadRotorName,
    DuplicateRotor,
    ReflectorPosition,
    RotorArityMismatch,
)
from permutation import Permutation
from rotor_and_reflector import Rotor

debug = Debug()


class Machine:
    """An Enigma-style machine with NUM_ROTORS slots and NUM_PAWLS pawls.

    Slot 0 holds the reflector; the rightmost NUM_PAWLS slots hold moving
    rotors and the slots in between hold fixed ones.  ALL_ROTORS is the
    catalog `insert_rotors` picks from.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        num_pawls: int,
        all_rotors: Iterable[Rotor],
    ) -> None:
        if num_rotors <= 1:
            raise RotorArityMismatch(f"Need more than one rotor slot, got {num_rotors}")
        if not (0 <= num_pawls < num_rotors):
            raise RotorArityMismatch(
                f"Pawl count {num_pawls} must be in 0–{num_rotors - 1}"
            )

        self.alphabet = alphabet
        self._num_rotors = num_rotors
        self._num_pawls = num_pawls
        self._all_rotors: list[Rotor] = list(all_rotors)
        self._rotors: list[Rotor] = []
        self._plugboard: Permutation | None = None

    # ── shape ────────────────────────────────────────────────────
    def num_rotors(self) -> int:
        return self._num_rotors

    def num_pawls(self) -> int:
        return self._num_pawls

    @property
    def rotors(self) -> tuple[Rotor, ...]:
        return tuple(self._rotors)

    @property
    def all_rotors(self) -> tuple[Rotor, ...]:
        return tuple(self._all_rotors)

    @property
    def plugboard(self) -> Permutation | None:
        return self._plugboard

    # ── assembly ─────────────────────────────────────────────────
    def insert_rotors(self, names: Sequence[str]) -> None:
        """Fill my slots with the catalog rotors named NAMES, left to right.

        NAMES[0] names the reflector.  Names match case-insensitively.
        """
        chosen: list[Rotor] = []
        for name in names:
            for rotor in self._all_rotors:
                if rotor.name.upper() != name.upper():
                    continue
                if any(rotor is r for r in chosen):
                    raise DuplicateRotor(f"Duplicate rotor name {name}")
                chosen.append(rotor)

        if len(chosen) != len(names) or len(chosen) != self._num_rotors:
            raise BadRotorName(
                f"Bad rotor name in {' '.join(names)} "
                f"(need {self._num_rotors} rotors from the catalog)"
            )
        self._rotors = chosen
        debug.log("machine", f"inserted {[r.name for r in chosen]}")

    def _slot_indices(self, values: str, what: str) -> list[int]:
        """Validate the slot layout and convert VALUES before anything changes."""
        if not self._rotors or not self._rotors[0].reflecting():
            raise ReflectorPosition("Reflector in wrong place")

        first_pawl = self._num_rotors - self._num_pawls
        for i, rotor in enumerate(self._rotors[1:], start=1):
            if rotor.rotates() != (i >= first_pawl):
                raise RotorArityMismatch(
                    f"Rotor {rotor.name} cannot sit in slot {i}"
                )
        if len(values) != self._num_rotors - 1:
            raise RotorArityMismatch(
                f"Wrong number of {what}: {values!r} "
                f"(need {self._num_rotors - 1})"
            )
        return [self.alphabet.to_int(ch) for ch in values]

    def set_rotors(self, setting: str) -> None:
        """Rotate each non-reflector slot to the matching symbol of SETTING."""
        posns = self._slot_indices(setting, "settings")
        for rotor, posn in zip(self._rotors[1:], posns):
            rotor.set(posn)
        debug.log("machine", f"settings {self.positions()}")

    def set_rings(self, rings: str) -> None:
        """Apply ring offsets, one symbol per non-reflector slot."""
        offsets = self._slot_indices(rings, "ring settings")
        for rotor, ring in zip(self._rotors[1:], offsets):
            rotor.set_ring(ring)
        debug.log("machine", f"rings {rings}")

    def set_plugboard(self, plugboard: Permutation | None) -> None:
        self._plugboard = plugboard

    def positions(self) -> str:
        """The window symbols of every slot, reflector first."""
        return "".join(r.position for r in self._rotors)

    # ── stepping logic  ─────────────────────────────────────────
    def _step_rotors(self) -> None:
        """Advance rotors one key-press, double-step included."""
        if not self._rotors:
            raise ReflectorPosition("No rotors inserted")
        last = self._num_rotors - 1

        # decide which slots step before touching any of them
        move: set[int] = {last}
        for i in range(self._num_rotors - self._num_pawls, last):
            if self._rotors[i + 1].at_notch() or (i - 1) in move:
                move.add(i)
                if self._rotors[i].at_notch():
                    move.add(i - 1)

        for i in move:
            self._rotors[i].advance()
        debug.log("stepping", f"stepped {sorted(move)} -> {self.positions()}")

    # ── convert one symbol  ─────────────────────────────────────
    def convert(self, c: int) -> int:
        """Step the machine, then return the image of index C."""
        self._step_rotors()

        signal = c
        if self._plugboard is not None:
            signal = self._plugboard.permute(signal)

        for rotor in reversed(self._rotors):
            signal = rotor.convert_forward(signal)

        for rotor in self._rotors[1:]:
            signal = rotor.convert_backward(signal)

        if self._plugboard is not None:
            signal = self._plugboard.permute(signal)
        debug.log("machine", f"{c} -> {signal}")
        return signal

    def convert_message(self, msg: str) -> str:
        """Encode or decode MSG, advancing the machine once per symbol."""
        return "".join(
            self.alphabet.to_char(self.convert(self.alphabet.to_int(ch)))
            for ch in msg
        )

    def __repr__(self) -> str:
        names = " ".join(r.name for r in self._rotors) or "empty"
        return f"<Machine {names} pos={self.positions()}>"

# suites.py
from __future__ import annotations

from typing import Callable, Dict

from alphabet import CharacterRange
from errors import BadConfig
from permutation import Permutation
from rotor_and_reflector import Rotor
from utilities import MachineSpec

# Historic wheels: name -> (wiring, notches)
MOVING: Dict[str, tuple[str, str]] = {
    "I":    ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":   ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III":  ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV":   ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V":    ("VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    "VI":   ("JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    "VII":  ("NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    "VIII": ("FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
}

FIXED: Dict[str, str] = {
    "BETA":  "LEYJVCNIXWPBQMDRTAKZGFUHOS",
    "GAMMA": "FSOKANUERHMBTIYCWLQPZXVGJD",
}

REFLECTORS: Dict[str, str] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}

THIN_REFLECTORS: Dict[str, str] = {
    "B-THIN": "ENKQAUYWJICOPBLMDXZVFTHRGS",
    "C-THIN": "RDOBJNTKVEHMLFCWZAXGYIPSUQ",
}


def _moving_rotors(alpha: CharacterRange) -> list[Rotor]:
    return [
        Rotor.moving(name, Permutation.from_wiring(wiring, alpha), notches)
        for name, (wiring, notches) in MOVING.items()
    ]


def _reflectors(alpha: CharacterRange, table: Dict[str, str]) -> list[Rotor]:
    return [
        Rotor.reflector(name, Permutation.from_wiring(wiring, alpha))
        for name, wiring in table.items()
    ]


def legacy_m3() -> MachineSpec:
    """Three-rotor army machine: reflector plus three moving rotors."""
    alpha = CharacterRange("A", "Z")
    rotors = _reflectors(alpha, REFLECTORS) + _moving_rotors(alpha)
    return MachineSpec(alpha, 4, 3, rotors)


def naval_m4() -> MachineSpec:
    """Four-rotor naval machine: thin reflector, fixed Greek wheel, three moving rotors."""
    alpha = CharacterRange("A", "Z")
    greek = [
        Rotor.fixed(name, Permutation.from_wiring(wiring, alpha))
        for name, wiring in FIXED.items()
    ]
    rotors = _reflectors(alpha, THIN_REFLECTORS) + greek + _moving_rotors(alpha)
    return MachineSpec(alpha, 5, 3, rotors)


SUITES: Dict[str, Callable[[], MachineSpec]] = {
    "legacy-m3": legacy_m3,
    "naval-m4": naval_m4,
}


def load_suite(name: str) -> MachineSpec:
    """Return a fresh MachineSpec for suite NAME; wheels are never shared between calls."""
    try:
        return SUITES[name.lower()]()
    except KeyError:
        raise BadConfig(f"Unknown suite '{name}'. Expected one of {list(SUITES)}") from None

# utilities.py
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path

from alphabet import Alphabet, CharacterRange, OrderedAlphabet
from debug import Debug
from errors import BadConfig, RotorArityMismatch
from machine import Machine
from permutation import Permutation
from rotor_and_reflector import Rotor, RotorKind

debug = Debug()

# ────────────────────────────────────────────────────────────────────────
#  0. Regex & containers
# ────────────────────────────────────────────────────────────────────────

_cycle_token_re = re.compile(r"^\(.+\)$")
_glued_re = re.compile(r"\)\s*\(")


@dataclass(slots=True)
class MachineSpec:
    """Everything needed to build a Machine: alphabet, shape and catalog."""

    alphabet: Alphabet
    num_rotors: int
    num_pawls: int
    rotors: list[Rotor]

    def build(self) -> Machine:
        return Machine(self.alphabet, self.num_rotors, self.num_pawls, self.rotors)


@dataclass(slots=True)
class Setting:
    """One parsed settings line."""

    rotors: list[str]
    positions: str
    rings: str | None = None
    plugboard: str = ""


# ────────────────────────────────────────────────────────────────────────
#  1. Machine descriptions
# ────────────────────────────────────────────────────────────────────────


def make_alphabet(token: str) -> Alphabet:
    """A token like A-Z is a contiguous range; any other token is a custom order."""
    if not token:
        raise BadConfig(f"Bad alphabet {token!r}")
    if len(token) == 3 and token[1] == "-":
        return CharacterRange(token[0], token[2])
    return OrderedAlphabet(token)


def make_rotor(name: str, kind: str, perm: Permutation, notches: str = "") -> Rotor:
    try:
        tag = RotorKind(kind)
    except ValueError:
        raise BadConfig(f"Bad rotor description for {name}: type {kind!r}") from None

    if tag is RotorKind.MOVING:
        return Rotor.moving(name, perm, notches)
    if notches:
        raise BadConfig(f"Bad rotor description for {name}: only moving rotors have notches")
    if tag is RotorKind.REFLECTOR:
        involution = all(perm.permute(perm.permute(i)) == i for i in range(perm.size()))
        if not (perm.derangement() and involution):
            raise BadConfig(f"Reflector {name} must pair every symbol with a different one")
        return Rotor.reflector(name, perm)
    return Rotor.fixed(name, perm)


def _int_token(tokens: list[str], what: str) -> int:
    if not tokens:
        raise BadConfig("Configuration file truncated")
    raw = tokens.pop(0)
    try:
        return int(raw)
    except ValueError:
        raise BadConfig(f"Expected {what}, got {raw!r}") from None


def read_config(text: str) -> MachineSpec:
    """Parse the classic text format.

        A-Z 5 3
        I MQ   (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
        B R    (AE) (BN) (CK) ...
    """
    tokens = _glued_re.sub(") (", text).split()
    if not tokens:
        raise BadConfig("Configuration file truncated")

    alphabet = make_alphabet(tokens.pop(0))
    num_rotors = _int_token(tokens, "number of rotor slots")
    num_pawls = _int_token(tokens, "number of pawls")

    rotors: list[Rotor] = []
    while tokens:
        name = tokens.pop(0)
        if not tokens:
            raise BadConfig(f"Bad rotor description for {name}: missing type")
        kind = tokens.pop(0)
        cycles: list[str] = []
        while tokens and _cycle_token_re.match(tokens[0]):
            cycles.append(tokens.pop(0))
        perm = Permutation(" ".join(cycles), alphabet)
        rotors.append(make_rotor(name, kind[0], perm, kind[1:]))
        debug.log("config", f"rotor {name} {kind} {' '.join(cycles)}")

    return MachineSpec(alphabet, num_rotors, num_pawls, rotors)


def spec_from_dict(data: dict) -> MachineSpec:
    """Build a MachineSpec from a decoded JSON configuration."""
    required = {"alphabet", "num_rotors", "num_pawls", "rotors"}
    missing = required - data.keys()
    if missing:
        raise BadConfig(f"Missing keys in config: {', '.join(sorted(missing))}")

    alphabet = make_alphabet(data["alphabet"])
    rotors: list[Rotor] = []
    for entry in data["rotors"]:
        try:
            name, kind = entry["name"], entry["type"]
        except KeyError as exc:
            raise BadConfig(f"Rotor entry {entry!r} lacks {exc.args[0]!r}") from None

        if "wiring" in entry:
            perm = Permutation.from_wiring(entry["wiring"], alphabet)
        else:
            perm = Permutation(entry.get("cycles", ""), alphabet)
        rotors.append(make_rotor(name, kind, perm, entry.get("notches", "")))

    return MachineSpec(alphabet, int(data["num_rotors"]), int(data["num_pawls"]), rotors)


def load_config(path: str | Path) -> MachineSpec:
    """Read a machine description; ``.json`` files are JSON, all else text."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        raise BadConfig(f"could not open {path}") from None

    debug.log("config", f"loading {path}")
    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise BadConfig(f"{path}: {exc}") from None
        return spec_from_dict(data)
    return read_config(text)


# ────────────────────────────────────────────────────────────────────────
#  2. Settings lines
# ────────────────────────────────────────────────────────────────────────


def parse_setting_line(line: str, num_rotors: int) -> Setting:
    """Split "* B BETA III IV I AXLE [RINGS] (HQ) (EX)" into its parts."""
    tokens = _glued_re.sub(") (", line).split()
    if not tokens or not tokens[0].startswith("*"):
        raise BadConfig(f"Not a settings line: {line!r}")

    # "*B" and "* B" both introduce the reflector
    body = [tokens[0][1:]] + tokens[1:] if tokens[0] != "*" else tokens[1:]
    if len(body) < num_rotors + 1:
        raise BadConfig(f"Settings line too short: {line!r}")

    names = body[:num_rotors]
    positions = body[num_rotors]
    rest = body[num_rotors + 1:]

    rings = None
    if rest and not rest[0].startswith("("):
        rings = rest.pop(0)
    for tok in rest:
        if not _cycle_token_re.match(tok):
            raise BadConfig(f"Bad plugboard cycle {tok!r} in {line!r}")
    return Setting(names, positions, rings, " ".join(rest))


def apply_setting(machine: Machine, setting: Setting) -> None:
    """Apply SETTING; symbols and the plugboard are checked before the machine changes."""
    plugboard = Permutation(setting.plugboard, machine.alphabet) if setting.plugboard else None
    for ch in setting.positions + (setting.rings or ""):
        machine.alphabet.to_int(ch)
    if setting.rings is not None and len(setting.rings) != len(setting.positions):
        raise RotorArityMismatch(f"Ring settings {setting.rings!r} do not match {setting.positions!r}")

    machine.insert_rotors(setting.rotors)
    machine.set_rotors(setting.positions)
    if setting.rings is not None:
        machine.set_rings(setting.rings)
    machine.set_plugboard(plugboard)
    debug.log("config", f"setting {setting}")


# ────────────────────────────────────────────────────────────────────────
#  3. Text helpers
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str, upcase: bool = True) -> str:
    """Drop whitespace and, unless told otherwise, upper-case."""
    text = "".join(msg.split())
    return text.upper() if upcase else text


def group_blocks(msg: str, block: int = 5) -> str:
    """Split MSG into space-separated groups of BLOCK symbols."""
    return " ".join(msg[i : i + block] for i in range(0, len(msg), block))


__all__ = [
    "MachineSpec",
    "Setting",
    "make_alphabet",
    "read_config",
    "spec_from_dict",
    "load_config",
    "parse_setting_line",
    "apply_setting",
    "preprocess_message",
    "group_blocks",
]

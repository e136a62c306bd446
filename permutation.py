# permutation.py
from __future__ import annotations

import re
from collections.abc import Sequence

from alphabet import Alphabet
from debug import Debug
from errors import EnigmaError, SymbolOutOfRange

debug = Debug()

_cycle_re = re.compile(r"\(([^()]*)\)")


class Permutation:
    """A bijection on the indices of ALPHABET, given in cycle notation.

    "(AELT) (BK) ()" sends A->E->L->T->A and B<->K; every symbol not named
    in a cycle maps to itself.  Whitespace between and inside the groups is
    ignored.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        self._size = alphabet.size()
        self.result: list[int] = list(range(self._size))

        leftover = _cycle_re.sub("", cycles)
        if leftover.strip():
            raise EnigmaError(f"Malformed cycles {cycles!r}")

        seen: set[str] = set()
        for group in _cycle_re.findall(cycles):
            cycle = "".join(group.split())
            for ch in cycle:
                if ch in seen:
                    raise EnigmaError(f"Character {ch!r} repeated in cycles {cycles!r}")
                seen.add(ch)
            self._add_cycle(cycle)

        self._inverse: list[int] = [0] * self._size
        for i, image in enumerate(self.result):
            self._inverse[image] = i
        debug.log("permutation", f"{cycles!r} -> {self.result}")

    @classmethod
    def from_wiring(cls, wiring: str, alphabet: Alphabet) -> "Permutation":
        """Build from a wiring string: WIRING[i] is the image of symbol i."""
        if sorted(wiring) != sorted(alphabet.symbols):
            raise EnigmaError("wiring must be a permutation of alphabet")
        images = {alphabet.to_char(i): ch for i, ch in enumerate(wiring)}
        return cls(_cycles_of(images, alphabet.symbols), alphabet)

    def _add_cycle(self, cycle: str) -> None:
        if not cycle:
            return
        idx = [self._alphabet.to_int(ch) for ch in cycle]
        for a, b in zip(idx, idx[1:] + idx[:1]):
            self.result[a] = b

    # ── index arithmetic ─────────────────────────────────────────
    def wrap(self, p: int) -> int:
        """Return P modulo the size of this permutation, in [0, size)."""
        return p % self._size   # floored: -1 wraps to size - 1

    def size(self) -> int:
        return self._size

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    # ── lookups ──────────────────────────────────────────────────
    def permute(self, p: int) -> int:
        try:
            return self.result[self.wrap(p)]
        except IndexError:
            return p

    def invert(self, c: int) -> int:
        try:
            return self._inverse[self.wrap(c)]
        except IndexError:
            return c

    # symbols outside the alphabet pass through untouched
    def permute_char(self, p: str) -> str:
        try:
            return self._alphabet.to_char(self.permute(self._alphabet.to_int(p)))
        except SymbolOutOfRange:
            return p

    def invert_char(self, c: str) -> str:
        try:
            return self._alphabet.to_char(self.invert(self._alphabet.to_int(c)))
        except SymbolOutOfRange:
            return c

    def derangement(self) -> bool:
        """True iff no symbol maps to itself."""
        return all(image != i for i, image in enumerate(self.result))

    # ── niceties --------------------------------------------------
    def cycles(self) -> str:
        images = {
            self._alphabet.to_char(i): self._alphabet.to_char(image)
            for i, image in enumerate(self.result)
        }
        return _cycles_of(images, self._alphabet.symbols)

    def __repr__(self) -> str:
        return f"<Permutation {self.cycles() or '()'}>"


def _cycles_of(images: dict[str, str], symbols: str) -> str:
    """Render a symbol map as cycle notation, leaving out fixed points."""
    done: set[str] = set()
    out: list[str] = []
    for start in symbols:
        if start in done or images[start] == start:
            continue
        cycle = []
        ch = start
        while ch not in done:
            done.add(ch)
            cycle.append(ch)
            ch = images[ch]
        out.append("(" + "".join(cycle) + ")")
    return " ".join(out)


# ── plugboard pairs ──────────────────────────────────────────────
def plugboard_cycles(
    pairs: Sequence[str | tuple[str, str]],
    alphabet: Alphabet,
) -> str:
    """Turn swap pairs such as ["AB", "CD"] into "(AB) (CD)"."""
    used: set[str] = set()
    out: list[str] = []

    for raw in pairs:
        # normalise to (a, b)
        if isinstance(raw, str):
            if len(raw) != 2:
                raise EnigmaError(f"Pair {raw!r} must be exactly 2 symbols")
            a, b = raw
        else:
            a, b = raw

        if a == b:
            raise EnigmaError(f"Plugboard cannot map a symbol to itself: {a}")
        if a in used or b in used:
            dup = a if a in used else b
            raise EnigmaError(f"Character {dup!r} already used in plugboard")
        if a not in alphabet or b not in alphabet:
            bad = a if a not in alphabet else b
            raise EnigmaError(f"Symbol {bad!r} not in alphabet")

        out.append(f"({a}{b})")
        used.update((a, b))
    return " ".join(out)

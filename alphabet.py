# alphabet.py
from __future__ import annotations

from debug import Debug
from errors import BadAlphabet, SymbolIndexError, SymbolOutOfRange

debug = Debug()


class Alphabet:
    """An ordered set of symbols, each paired with a dense index 0..size-1."""

    def size(self) -> int:
        raise NotImplementedError

    def contains(self, ch: str) -> bool:
        raise NotImplementedError

    def to_char(self, index: int) -> str:
        raise NotImplementedError

    def to_int(self, ch: str) -> int:
        raise NotImplementedError

    @property
    def symbols(self) -> str:
        return "".join(self.to_char(i) for i in range(self.size()))

    # ── niceties --------------------------------------------------
    def __len__(self) -> int:
        return self.size()

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and self.contains(ch)

    def _check_index(self, index: int) -> None:
        if not (0 <= index < self.size()):
            hi = self.size() - 1
            raise SymbolIndexError(f"Index {index} out of range 0–{hi}")

    def _check_symbol(self, ch: str) -> None:
        if not self.contains(ch):
            raise SymbolOutOfRange(f"Character {ch!r} out of range")


# ── contiguous range ─────────────────────────────────────────────
class CharacterRange(Alphabet):
    """All characters between FIRST and LAST inclusive, in code-point order."""

    def __init__(self, first: str, last: str) -> None:
        if len(first) != 1 or len(last) != 1:
            raise BadAlphabet("Range ends must be single characters")
        if first > last:
            raise BadAlphabet(f"Empty range of characters {first}-{last}")
        self.first = first
        self.last = last
        debug.log("alphabet", f"range {first}-{last} ({self.size()} symbols)")

    def size(self) -> int:
        return ord(self.last) - ord(self.first) + 1

    def contains(self, ch: str) -> bool:
        return len(ch) == 1 and self.first <= ch <= self.last

    def to_char(self, index: int) -> str:
        self._check_index(index)
        return chr(ord(self.first) + index)

    def to_int(self, ch: str) -> int:
        self._check_symbol(ch)
        return ord(ch) - ord(self.first)

    def __repr__(self) -> str:
        return f"<CharacterRange {self.first}-{self.last}>"


# ── custom order ─────────────────────────────────────────────────
class OrderedAlphabet(Alphabet):
    """A contiguous code-point range indexed in a caller-supplied order."""

    def __init__(self, order: str) -> None:
        if not order:
            raise BadAlphabet("Empty range of characters")
        ordered = sorted(order)
        first, last = ordered[0], ordered[-1]
        span = [chr(c) for c in range(ord(first), ord(last) + 1)]
        if ordered != span:
            raise BadAlphabet(
                f"Alphabet {order!r} must hold each character of {first}-{last} exactly once"
            )
        self.first = first
        self.last = last
        self.order = order
        self.char_to_index: dict[str, int] = {ch: i for i, ch in enumerate(order)}
        debug.log("alphabet", f"ordered {order!r}")

    def size(self) -> int:
        return len(self.order)

    def contains(self, ch: str) -> bool:
        return len(ch) == 1 and self.first <= ch <= self.last

    def to_char(self, index: int) -> str:
        self._check_index(index)
        return self.order[index]

    def to_int(self, ch: str) -> int:
        self._check_symbol(ch)
        return self.char_to_index[ch]

    def __repr__(self) -> str:
        return f"<OrderedAlphabet {self.order}>"

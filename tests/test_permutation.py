"""Tests for cycle-notation permutations."""
import unittest

from alphabet import CharacterRange, OrderedAlphabet
from errors import EnigmaError, SymbolOutOfRange
from permutation import Permutation, plugboard_cycles

UPPER = CharacterRange("A", "Z")
NAVY_I = "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)"


class PermutationTests(unittest.TestCase):
    def test_identity_when_no_cycles(self) -> None:
        perm = Permutation("", UPPER)
        for i in range(26):
            self.assertEqual(perm.permute(i), i)
            self.assertEqual(perm.invert(i), i)
        self.assertEqual(perm.size(), 26)

    def test_cycles_close_around(self) -> None:
        perm = Permutation(NAVY_I, UPPER)
        self.assertEqual(perm.permute_char("A"), "E")
        self.assertEqual(perm.permute_char("U"), "A")
        self.assertEqual(perm.permute_char("S"), "S")
        self.assertEqual(perm.invert_char("A"), "U")
        self.assertEqual(perm.invert_char("B"), "W")

    def test_inverse_property(self) -> None:
        perm = Permutation(NAVY_I, UPPER)
        for i in range(26):
            self.assertEqual(perm.invert(perm.permute(i)), i)
            self.assertEqual(perm.permute(perm.invert(i)), i)

    def test_wrap_handles_negatives(self) -> None:
        perm = Permutation("", UPPER)
        for p in (-53, -27, -26, -1, 0, 25, 26, 51, 1000):
            self.assertTrue(0 <= perm.wrap(p) < 26)
        self.assertEqual(perm.wrap(-1), 25)
        self.assertEqual(perm.permute(-1), 25)
        self.assertEqual(perm.invert(27), 1)

    def test_whitespace_and_empty_groups(self) -> None:
        perm = Permutation("  (A B)()(CD)  ", UPPER)
        self.assertEqual(perm.permute_char("A"), "B")
        self.assertEqual(perm.permute_char("D"), "C")

    def test_unmapped_symbol_passes_through(self) -> None:
        # lenient on purpose: partial plugboards act as identity elsewhere
        perm = Permutation("(AB)", UPPER)
        self.assertEqual(perm.permute_char("?"), "?")
        self.assertEqual(perm.invert_char("a"), "a")

    def test_bad_cycle_symbols(self) -> None:
        with self.assertRaises(SymbolOutOfRange):
            Permutation("(A?)", UPPER)
        with self.assertRaises(EnigmaError):
            Permutation("(AB) (BC)", UPPER)
        with self.assertRaises(EnigmaError):
            Permutation("AB", UPPER)

    def test_derangement(self) -> None:
        self.assertFalse(Permutation(NAVY_I, UPPER).derangement())
        alpha = CharacterRange("A", "D")
        self.assertTrue(Permutation("(AC) (BD)", alpha).derangement())
        self.assertFalse(Permutation("(AC)", alpha).derangement())

    def test_custom_order_alphabet(self) -> None:
        alpha = OrderedAlphabet("DCBA")
        perm = Permutation("(DA)", alpha)
        self.assertEqual(perm.permute(0), 3)
        self.assertEqual(perm.permute_char("D"), "A")

    def test_from_wiring_matches_cycles(self) -> None:
        perm = Permutation.from_wiring("EKMFLGDQVZNTOWYHXUSPAIBRCJ", UPPER)
        self.assertEqual(perm.result, Permutation(NAVY_I, UPPER).result)
        self.assertEqual(perm.cycles(), "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ)")
        with self.assertRaises(EnigmaError):
            Permutation.from_wiring("AAB", CharacterRange("A", "C"))


class PlugboardCyclesTests(unittest.TestCase):
    def test_pairs_become_cycles(self) -> None:
        self.assertEqual(plugboard_cycles(["AB", ("C", "D")], UPPER), "(AB) (CD)")
        self.assertEqual(plugboard_cycles([], UPPER), "")

    def test_invalid_pairs(self) -> None:
        for pairs in (["AA"], ["AB", "BC"], ["A?"], ["ABC"]):
            with self.assertRaises(EnigmaError):
                plugboard_cycles(pairs, UPPER)


if __name__ == "__main__":
    unittest.main()

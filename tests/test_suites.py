"""Historic test vectors against the built-in wheel suites."""
import unittest

from errors import BadConfig
from suites import load_suite


class LegacySuiteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.mach = load_suite("legacy-m3").build()
        self.mach.insert_rotors(["B", "I", "II", "III"])

    def test_known_ciphertext(self) -> None:
        self.mach.set_rotors("AAA")
        self.assertEqual(self.mach.convert_message("AAAAA"), "BDZGO")

    def test_known_ciphertext_with_rings(self) -> None:
        self.mach.set_rotors("AAA")
        self.mach.set_rings("BBB")
        self.assertEqual(self.mach.convert_message("AAAAA"), "EWTYX")

    def test_historic_double_step(self) -> None:
        self.mach.set_rotors("ADU")
        seen = []
        for _ in range(3):
            self.mach.convert_message("A")
            seen.append(self.mach.positions()[1:])
        self.assertEqual(seen, ["ADV", "AEW", "BFX"])

    def test_reflectors_are_derangements(self) -> None:
        for rotor in load_suite("legacy-m3").rotors:
            if rotor.reflecting():
                self.assertTrue(rotor.permutation.derangement(), rotor.name)

    def test_round_trip(self) -> None:
        msg = "FROMHISSHOULDERHIAWATHATOOKTHECAMERAOFROSEWOOD"
        self.mach.set_rotors("QEV")
        cipher = self.mach.convert_message(msg)
        self.assertNotEqual(cipher, msg)
        self.mach.set_rotors("QEV")
        self.assertEqual(self.mach.convert_message(cipher), msg)


class NavalSuiteTests(unittest.TestCase):
    def test_thin_reflector_with_beta_matches_wide_b(self) -> None:
        mach = load_suite("naval-m4").build()
        mach.insert_rotors(["B-THIN", "BETA", "I", "II", "III"])
        mach.set_rotors("AAAA")
        self.assertEqual(mach.convert_message("AAAAA"), "BDZGO")

    def test_suites_do_not_share_wheels(self) -> None:
        first = load_suite("legacy-m3")
        second = load_suite("LEGACY-M3")
        self.assertFalse(any(a is b for a in first.rotors for b in second.rotors))

    def test_unknown_suite(self) -> None:
        with self.assertRaises(BadConfig):
            load_suite("swiss-k")


if __name__ == "__main__":
    unittest.main()

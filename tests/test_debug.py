"""Tests for the component switches of the debug logger."""
import unittest

from debug import Debug
from suites import load_suite


class DebugTests(unittest.TestCase):
    def setUp(self) -> None:
        self.dbg = Debug()
        self.saved = self.dbg.status()

    def tearDown(self) -> None:
        for name, on in self.saved.items():
            (self.dbg.enable if on else self.dbg.disable)(name)
        self.dbg.toggle_global(True)

    def test_components_start_disabled(self) -> None:
        self.assertFalse(any(self.saved.values()))

    def test_stepping_is_logged_when_enabled(self) -> None:
        mach = load_suite("legacy-m3").build()
        mach.insert_rotors(["B", "I", "II", "III"])
        mach.set_rotors("AAA")
        self.dbg.enable("stepping")
        with self.assertLogs("ENIGMA", level="DEBUG") as logs:
            mach.convert(0)
        self.assertTrue(any("[STEPPING]" in line for line in logs.output))

    def test_global_switch_silences(self) -> None:
        self.dbg.enable("machine")
        self.dbg.toggle_global(False)
        with self.assertNoLogs("ENIGMA", level="DEBUG"):
            self.dbg.log("machine", "quiet")

    def test_toggle_and_unknown(self) -> None:
        self.dbg.toggle("config")
        self.assertTrue(self.dbg.status()["config"])
        with self.assertRaises(ValueError):
            self.dbg.enable("turbo")


if __name__ == "__main__":
    unittest.main()

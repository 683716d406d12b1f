import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tagfleet.utils import first_present, is_blank  # noqa: E402


class UtilsTests(unittest.TestCase):
    def test_first_present(self):
        self.assertEqual(first_present({"a": None, "b": 0, "c": 1}, ["a", "b", "c"]), 0)
        self.assertIsNone(first_present({}, ["a"]))

    def test_is_blank(self):
        self.assertTrue(is_blank(None))
        self.assertTrue(is_blank(" \t"))
        self.assertFalse(is_blank("x"))
        self.assertFalse(is_blank(0))

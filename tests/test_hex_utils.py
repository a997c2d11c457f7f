"""Tests for hex decoding."""
import sys
import unittest
from pathlib import Path
from unittest import mock

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from signing_fs.config import settings
from signing_fs.utils.errors import InvalidInputError
from signing_fs.utils.hex_utils import hex_to_bytes


class TestHexToBytes(unittest.TestCase):
    def test_decode(self):
        self.assertEqual(hex_to_bytes("48656c6c6f", strict=False), b"Hello")
        self.assertEqual(hex_to_bytes("DEADbeef", strict=False), b"\xde\xad\xbe\xef")
        self.assertEqual(hex_to_bytes("", strict=False), b"")

    def test_lenient_drops_invalid_pairs(self):
        self.assertEqual(hex_to_bytes("4g", strict=False), b"")
        self.assertEqual(hex_to_bytes("48zz65", strict=False), b"He")
        self.assertEqual(hex_to_bytes("48 +6", strict=False), b"H")

    def test_lenient_ignores_trailing_character(self):
        self.assertEqual(hex_to_bytes("486", strict=False), b"H")

    def test_strict_rejects_invalid_pair(self):
        with self.assertRaises(InvalidInputError):
            hex_to_bytes("48zz65", strict=True)

    def test_strict_rejects_odd_length(self):
        with self.assertRaises(InvalidInputError):
            hex_to_bytes("486", strict=True)

    def test_default_follows_settings(self):
        with mock.patch.object(settings, 'HEX_STRICT', False):
            self.assertEqual(hex_to_bytes("4g"), b"")
        with mock.patch.object(settings, 'HEX_STRICT', True):
            with self.assertRaises(InvalidInputError):
                hex_to_bytes("4g")


if __name__ == '__main__':
    unittest.main()

from __future__ import annotations

import unittest

from multitar.codec import block_pad, null_padding, pad_data, to_octal_padded
from multitar.errors import OctalOverflowError


class OctalTests(unittest.TestCase):
    def test_width_and_value(self):
        for value, width in [(0, 11), (1, 6), (8, 3), (511, 3), (0o7777777, 7), (1_700_000_000, 11)]:
            text = to_octal_padded(value, width)
            self.assertEqual(len(text), width)
            self.assertEqual(int(text, 8), value)

    def test_zero_size_field(self):
        self.assertEqual(to_octal_padded(0, 11), "00000000000")

    def test_overflow_raises(self):
        with self.assertRaises(OctalOverflowError):
            to_octal_padded(0o1000, 3)
        with self.assertRaises(ValueError):
            to_octal_padded(8 ** 11, 11)

    def test_negative_raises(self):
        with self.assertRaises(OctalOverflowError):
            to_octal_padded(-1, 6)


class PaddingTests(unittest.TestCase):
    def test_null_padding_is_one_short(self):
        self.assertEqual(null_padding(1), "")
        self.assertEqual(null_padding(101), "\x00" * 100)
        self.assertEqual(null_padding(0), "")

    def test_block_pad_boundaries(self):
        self.assertEqual(block_pad(0), 512)
        self.assertEqual(block_pad(1), 512)
        self.assertEqual(block_pad(512), 512)
        self.assertEqual(block_pad(513), 1024)
        self.assertEqual(block_pad(1024), 1024)
        self.assertEqual(block_pad(1500), 1536)

    def test_pad_data(self):
        self.assertEqual(pad_data(b""), b"\x00" * 512)
        padded = pad_data(b"hello")
        self.assertEqual(len(padded), 512)
        self.assertTrue(padded.startswith(b"hello\x00"))
        self.assertEqual(pad_data(b"x" * 512), b"x" * 512)
        self.assertEqual(len(pad_data(b"x" * 513)), 1024)


if __name__ == "__main__":
    unittest.main()

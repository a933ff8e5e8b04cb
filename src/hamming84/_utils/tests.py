import unittest

from hamming84._utils import get_bit, parity, toggle_bit, unreachable


class TestBitOps(unittest.TestCase):
    def test_parity(self):
        self.assertEqual(parity(), 0)
        self.assertEqual(parity(1), 1)
        self.assertEqual(parity(1, 1), 0)
        self.assertEqual(parity(1, 0, 1, 1), 1)
        self.assertEqual(parity(1, 1, 1, 1, 0, 0, 0), 0)

    def test_toggle(self):
        self.assertEqual(toggle_bit(0), 1)
        self.assertEqual(toggle_bit(1), 0)

    def test_get(self):
        self.assertEqual(get_bit(0b0001, 0), 1)
        self.assertEqual(get_bit(0b0001, 2), 0)
        self.assertEqual(get_bit(0b0001, 4), 0)
        self.assertEqual(get_bit(0b0010, 0), 0)
        self.assertEqual(get_bit(0b0010, 1), 1)
        self.assertEqual(get_bit(0b1000, 3), 1)

    def test_unreachable(self):
        with self.assertRaises(RuntimeError):
            unreachable("value")


if __name__ == "__main__":
    unittest.main()

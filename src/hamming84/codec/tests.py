import unittest

import numpy as np

from hamming84.codec import (
    DATA_POSITIONS,
    HAMMING_COVERAGE,
    HAMMING_POSITIONS,
    Codeword,
    DataBlock,
    InvalidInputShape,
    Position,
    decode,
    decode_verbose,
    encode,
    hamming_bits,
    locate_flip,
)


class TestPosition(unittest.TestCase):
    def test_order(self):
        self.assertEqual(
            [p.name for p in Position],
            ["P", "H1", "H2", "H3", "D1", "D2", "D3", "D4"],
        )
        self.assertEqual([int(p) for p in Position], list(range(8)))

    def test_parse(self):
        self.assertEqual(Position.parse("0"), Position.P)
        self.assertEqual(Position.parse("7"), Position.D4)
        self.assertEqual(Position.parse("h2"), Position.H2)
        self.assertEqual(Position.parse(" D3 "), Position.D3)

    def test_parse_invalid(self):
        for text in ["8", "H4", "", "-1", "x"]:
            with self.subTest(text=text), self.assertRaises(ValueError):
                _ = Position.parse(text)

    def test_data_index(self):
        self.assertEqual([p.data_index() for p in DATA_POSITIONS], [0, 1, 2, 3])
        with self.assertRaises(ValueError):
            _ = Position.H1.data_index()

    def test_redundant(self):
        redundant = [p for p in Position if p.is_redundant()]
        self.assertEqual(redundant, [Position.P, *HAMMING_POSITIONS])


class TestDataBlock(unittest.TestCase):
    def test_from_str(self):
        block = DataBlock("1010")
        self.assertEqual(block.bits, (1, 0, 1, 0))
        self.assertEqual(str(block), "1010")
        self.assertEqual(repr(block), "DataBlock('1010')")

    def test_from_sequence(self):
        self.assertEqual(DataBlock([1, 0, 1, 0]), DataBlock("1010"))
        self.assertEqual(DataBlock((True, False, True, False)), DataBlock("1010"))

    def test_from_array(self):
        block = DataBlock(np.array([0, 1, 1, 0], dtype=np.uint8))
        self.assertEqual(str(block), "0110")
        np.testing.assert_array_equal(block.to_array(), np.array([0, 1, 1, 0]))
        self.assertEqual(block.to_array().dtype, np.uint8)

    def test_int(self):
        self.assertEqual(DataBlock.from_int(0b1010), DataBlock("1010"))
        self.assertEqual(DataBlock("0011").to_int(), 3)
        with self.assertRaises(InvalidInputShape):
            _ = DataBlock.from_int(16)

    def test_all(self):
        blocks = DataBlock.all()
        self.assertEqual(len(blocks), 16)
        self.assertEqual(len(set(blocks)), 16)
        self.assertEqual(str(blocks[0]), "0000")
        self.assertEqual(str(blocks[-1]), "1111")

    def test_immutable(self):
        block = DataBlock("1010")
        with self.assertRaises(AttributeError):
            block.bits = (0, 0, 0, 0)  # pyright: ignore[reportAttributeAccessIssue]

    def test_flip(self):
        block = DataBlock("1010")
        self.assertEqual(block.flip(3), DataBlock("1011"))
        self.assertEqual(block, DataBlock("1010"))
        with self.assertRaises(IndexError):
            _ = block.flip(4)

    def test_invalid_shape(self):
        for value in ["", "101", "10100", "10a0", "1 10", "2010", [1, 0, 2, 0]]:
            with self.subTest(value=value), self.assertRaises(InvalidInputShape):
                _ = DataBlock(value)

    def test_invalid_array(self):
        with self.assertRaises(InvalidInputShape):
            _ = DataBlock(np.zeros((2, 2), dtype=np.uint8))
        with self.assertRaises(InvalidInputShape):
            _ = DataBlock(np.array([0.0, 1.0, 0.0, 1.0]))

    def test_error_message(self):
        with self.assertRaises(InvalidInputShape) as ctx:
            _ = DataBlock("10x0")
        self.assertIn("'10x0'", str(ctx.exception))
        self.assertEqual(ctx.exception.received, "10x0")
        self.assertEqual(ctx.exception.expected_length, 4)

    def test_invalid_input_is_value_error(self):
        with self.assertRaises(ValueError):
            _ = DataBlock(1010)  # pyright: ignore[reportArgumentType]


class TestCodeword(unittest.TestCase):
    def test_fields(self):
        word = Codeword("01011010")
        self.assertEqual(word.p, 0)
        self.assertEqual(word.hamming, (1, 0, 1))
        self.assertEqual(word.data, DataBlock("1010"))
        self.assertEqual(word.bit(Position.H3), 1)

    def test_flip(self):
        word = Codeword("01011010")
        self.assertEqual(word.flip(Position.P), Codeword("11011010"))
        self.assertEqual(word.flip(7), Codeword("01011011"))
        with self.assertRaises(IndexError):
            _ = word.flip(8)
        with self.assertRaises(IndexError):
            _ = word.flip(-1)

    def test_not_equal_to_data_block(self):
        self.assertNotEqual(Codeword("00001010"), DataBlock("1010"))

    def test_invalid_shape(self):
        for value in ["0101101", "010110100", "0101101a", "1010"]:
            with self.subTest(value=value), self.assertRaises(InvalidInputShape):
                _ = Codeword(value)

    def test_error_label(self):
        with self.assertRaises(InvalidInputShape) as ctx:
            _ = Codeword("101")
        self.assertTrue(str(ctx.exception).startswith("Encoded data received: '101'"))


class TestEncode(unittest.TestCase):
    def test_example(self):
        self.assertEqual(str(encode("1010")), "01011010")

    def test_accepts_block(self):
        self.assertEqual(encode(DataBlock("1010")), encode("1010"))
        self.assertEqual(encode([1, 0, 1, 0]), encode("1010"))

    def test_parity_well_formed(self):
        for data in DataBlock.all():
            with self.subTest(data=data):
                d1, d2, d3, d4 = data
                h1, h2, h3 = (d1 + d2 + d4) % 2, (d1 + d3 + d4) % 2, (d2 + d3 + d4) % 2
                word = encode(data)
                self.assertEqual(word.hamming, (h1, h2, h3))
                self.assertEqual(word.p, (h1 + h2 + h3 + d1 + d2 + d3 + d4) % 2)
                # The hamming bits add up to D4.
                self.assertEqual(word.p, (d1 + d2 + d3) % 2)
                self.assertEqual(word.data, data)

    def test_coverage_matches_hamming_bits(self):
        for data in DataBlock.all():
            expected = tuple(
                sum(data[d.data_index()] for d in HAMMING_COVERAGE[h]) % 2
                for h in HAMMING_POSITIONS
            )
            self.assertEqual(hamming_bits(data), expected)

    def test_invalid_shape(self):
        for value in ["", "101", "10101", "10a0", "01011010"]:
            with self.subTest(value=value), self.assertRaises(InvalidInputShape):
                _ = encode(value)


class TestDecode(unittest.TestCase):
    def test_round_trip(self):
        for data in DataBlock.all():
            with self.subTest(data=data):
                self.assertEqual(decode(encode(data)), data)

    def test_round_trip_single_flip(self):
        for data in DataBlock.all():
            for position in Position:
                with self.subTest(data=data, position=position):
                    self.assertEqual(decode(encode(data).flip(position)), data)

    def test_example_parity_flip(self):
        self.assertEqual(str(decode("11011010")), "1010")
        self.assertEqual(decode_verbose("11011010").flipped, Position.P)

    def test_last_data_bit_set(self):
        self.assertEqual(str(encode("0001")), "01110001")
        self.assertEqual(str(decode("01111001")), "0001")

        for data in [d for d in DataBlock.all() if d[3] == 1]:
            self.assertIsNone(decode_verbose(encode(data)).flipped)
            for position in DATA_POSITIONS:
                with self.subTest(data=data, position=position):
                    result = decode_verbose(encode(data).flip(position))
                    self.assertEqual(result.data, data)
                    self.assertEqual(result.flipped, position)

    def test_clean_input(self):
        for data in DataBlock.all():
            result = decode_verbose(encode(data))
            self.assertEqual(result.data, data)
            self.assertIsNone(result.flipped)
            self.assertEqual(result.corrected_bits_count, 0)
            self.assertFalse(result.data_corrected)

    def test_reports_flipped_position(self):
        for data in DataBlock.all():
            for position in Position:
                with self.subTest(data=data, position=position):
                    result = decode_verbose(encode(data).flip(position))
                    self.assertEqual(result.flipped, position)
                    self.assertEqual(result.corrected_bits_count, 1)
                    self.assertEqual(result.data_corrected, position.is_data())

    def test_accepts_array(self):
        word = np.array([1, 1, 0, 1, 1, 0, 1, 0], dtype=np.uint8)
        self.assertEqual(decode(word), DataBlock("1010"))

    def test_invalid_shape(self):
        for value in ["", "0101101", "010110100", "0101a010", "1010"]:
            with self.subTest(value=value), self.assertRaises(InvalidInputShape):
                _ = decode(value)


class TestLocateFlip(unittest.TestCase):
    def test_table(self):
        # (h1_ok, h2_ok, h3_ok) -> flipped position
        table = {
            (False, False, False): Position.D4,
            (False, False, True): Position.D1,
            (False, True, False): Position.D2,
            (True, False, False): Position.D3,
            (False, True, True): Position.H1,
            (True, False, True): Position.H2,
            (True, True, False): Position.H3,
            (True, True, True): Position.P,
        }
        for checks, position in table.items():
            with self.subTest(checks=checks):
                self.assertEqual(locate_flip(*checks), position)

    def test_coverage_fingerprint(self):
        for position in DATA_POSITIONS:
            checks = [position not in HAMMING_COVERAGE[h] for h in HAMMING_POSITIONS]
            self.assertEqual(locate_flip(*checks), position)


if __name__ == "__main__":
    unittest.main()

"""Encoding and decoding a single block of data."""

from hamming84 import Position, decode_verbose, encode


def main():
    initial = "1010"
    print("initial: ", initial)
    encoded = encode(initial)
    print("encoded: ", encoded)
    # Toggling the last data bit, without correction this would decode as 1011.
    faulty = encoded.flip(Position.D4)
    print("faulty:  ", faulty)
    decoded = decode_verbose(faulty)
    assert decoded.flipped is not None
    print("decoded: ", decoded.data, f"(corrected {decoded.flipped.name})")
    assert str(decoded.data) == initial


if __name__ == "__main__":
    main()

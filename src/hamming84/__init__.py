"Hamming(8,4) single error correcting codec"

from hamming84.codec import (
    Codeword,
    DataBlock,
    Decoded,
    InvalidInputShape,
    Position,
    decode,
    decode_verbose,
    encode,
)
from . import selftest

__all__ = [
    "Codeword",
    "DataBlock",
    "Decoded",
    "InvalidInputShape",
    "Position",
    "decode",
    "decode_verbose",
    "encode",
    "selftest",
]

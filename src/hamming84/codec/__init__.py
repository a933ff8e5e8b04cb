"The Hamming(8,4) codec"

from ._block import (
    CODEWORD_BITS_COUNT,
    DATA_BITS_COUNT,
    BitsLike,
    BitVector,
    Codeword,
    DataBlock,
    InvalidInputShape,
)
from ._core import (
    Decoded,
    decode,
    decode_verbose,
    encode,
    hamming_bits,
    locate_flip,
)
from ._position import (
    DATA_POSITIONS,
    HAMMING_COVERAGE,
    HAMMING_POSITIONS,
    Position,
)

__all__ = [
    "BitVector",
    "BitsLike",
    "CODEWORD_BITS_COUNT",
    "Codeword",
    "DATA_BITS_COUNT",
    "DATA_POSITIONS",
    "DataBlock",
    "Decoded",
    "HAMMING_COVERAGE",
    "HAMMING_POSITIONS",
    "InvalidInputShape",
    "Position",
    "decode",
    "decode_verbose",
    "encode",
    "hamming_bits",
    "locate_flip",
]

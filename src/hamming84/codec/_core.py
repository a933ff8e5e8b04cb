from __future__ import annotations

import logging
from dataclasses import dataclass

from hamming84._utils import parity, unreachable

from ._block import BitsLike, Codeword, DataBlock
from ._position import Position

logger = logging.getLogger(__name__)


def hamming_bits(data: DataBlock) -> tuple[int, int, int]:
    """Compute H1, H2 and H3 for a data block."""
    d1, d2, d3, d4 = data
    return parity(d1, d2, d4), parity(d1, d3, d4), parity(d2, d3, d4)


def encode(data: DataBlock | BitsLike) -> Codeword:
    """Encode 4 data bits as P H1 H2 H3 D1 D2 D3 D4.

    P is the parity of the 7 bits following it. Any single flip, including
    one of P itself, then breaks the overall parity of the word.

    Raises:
        InvalidInputShape:
            If `data` isn't exactly 4 bits.
    """
    block = data if isinstance(data, DataBlock) else DataBlock(data)

    h1, h2, h3 = hamming_bits(block)
    p = parity(h1, h2, h3, *block)

    return Codeword((p, h1, h2, h3, *block))


def locate_flip(h1_ok: bool, h2_ok: bool, h3_ok: bool) -> Position:
    """Find the flipped bit of a codeword that failed the overall parity check.

    The arguments tell whether each received hamming bit matches the one
    recomputed from the received data bits. Every data bit is covered by a
    different combination of hamming bits, so two or more mismatches point to
    a data bit. A single mismatch points to that hamming bit and no mismatch
    means P itself was flipped.
    """
    match (h1_ok, h2_ok, h3_ok):
        case (False, False, False):
            return Position.D4
        case (False, False, _):
            return Position.D1
        case (False, _, False):
            return Position.D2
        case (_, False, False):
            return Position.D3
        case (False, True, True):
            return Position.H1
        case (True, False, True):
            return Position.H2
        case (True, True, False):
            return Position.H3
        case (True, True, True):
            return Position.P
        case other:
            unreachable(other)


@dataclass(frozen=True)
class Decoded:
    """The result of decoding a single codeword."""

    data: DataBlock
    # None if the overall parity matched.
    flipped: Position | None

    @property
    def corrected_bits_count(self) -> int:
        return 0 if self.flipped is None else 1

    @property
    def data_corrected(self) -> bool:
        """Whether a data bit had to be inverted."""
        return self.flipped is not None and self.flipped.is_data()


def decode_verbose(codeword: Codeword | BitsLike) -> Decoded:
    """Decode a codeword and report which bit was corrected.

    At most one flipped bit is corrected. Words with more flips decode to
    arbitrary data.

    Raises:
        InvalidInputShape:
            If `codeword` isn't exactly 8 bits.
    """
    word = codeword if isinstance(codeword, Codeword) else Codeword(codeword)
    received = word.data

    if parity(*word.bits[Position.H1 :]) == word.p:
        return Decoded(received, None)

    h1_ok, h2_ok, h3_ok = (
        expected == actual
        for expected, actual in zip(hamming_bits(received), word.hamming, strict=True)
    )
    flipped = locate_flip(h1_ok, h2_ok, h3_ok)
    logger.debug(f"Parity mismatch in {word}, correcting {flipped.name}")

    if flipped.is_redundant():
        return Decoded(received, flipped)

    return Decoded(received.flip(flipped.data_index()), flipped)


def decode(codeword: Codeword | BitsLike) -> DataBlock:
    """Decode a codeword into the original 4 data bits.

    See `decode_verbose` for details.
    """
    return decode_verbose(codeword).data

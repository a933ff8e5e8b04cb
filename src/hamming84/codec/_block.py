from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

import numpy as np
import numpy.typing as npt
from typing_extensions import Self, TypeAliasType, override

from hamming84._utils import get_bit, toggle_bit

from ._position import Position

BitsLike = TypeAliasType(
    "BitsLike", str | Iterable[int] | Iterable[bool] | npt.NDArray[np.generic]
)

DATA_BITS_COUNT = 4
CODEWORD_BITS_COUNT = 8


class InvalidInputShape(ValueError):
    """The input had the wrong length or contained a non-binary symbol."""

    def __init__(
        self, label: str, received: object, expected_length: int, reason: str
    ) -> None:
        self.received: object = received
        self.expected_length: int = expected_length
        super().__init__(
            f"{label} received: '{_display(received)}' is not in correct form\n-> {reason}"
        )


def _display(value: object) -> str:
    if isinstance(value, np.ndarray):
        return np.array2string(value, separator=",")
    return str(value)


def _coerce_symbol(symbol: object) -> int | None:
    match symbol:
        case "0" | "1":
            return int(symbol)
        case bool() | np.bool_():
            return int(symbol)
        case int() | np.integer() if symbol in (0, 1):
            return int(symbol)
        case _:
            return None


def coerce_bits(value: object, length: int, label: str) -> tuple[int, ...]:
    """Convert a bit string, sequence or array into a tuple of exactly `length` bits.

    Raises:
        InvalidInputShape:
            If the length doesn't match or a symbol is not 0 or 1.
    """
    match value:
        case BitVector():
            symbols: list[object] = list(value.bits)
        case str():
            symbols = list(value)
        case np.ndarray():
            if value.ndim != 1:
                raise InvalidInputShape(
                    label,
                    value,
                    length,
                    f"expected a one dimensional array, got shape {value.shape}",
                )
            symbols = value.tolist()
        case Iterable():
            symbols = list(value)
        case _:
            raise InvalidInputShape(
                label, value, length, f"expected a sequence of bits, got {type(value)}"
            )

    if len(symbols) != length:
        raise InvalidInputShape(
            label, value, length, f"expected {length} bits, got {len(symbols)}"
        )

    bits: list[int] = []
    for i, symbol in enumerate(symbols):
        bit = _coerce_symbol(symbol)
        if bit is None:
            raise InvalidInputShape(
                label, value, length, f"symbol `{symbol}` at index {i} is not 0 or 1"
            )
        bits.append(bit)

    return tuple(bits)


@dataclass(frozen=True, init=False)
class BitVector:
    """A fixed length, immutable sequence of bits.

    Subclasses set the length and the label used in error messages.
    """

    LENGTH: ClassVar[int]
    LABEL: ClassVar[str]

    bits: tuple[int, ...]

    def __init__(self, value: BitsLike | BitVector) -> None:
        object.__setattr__(self, "bits", coerce_bits(value, self.LENGTH, self.LABEL))

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Create from an integer, the first bit being the most significant."""
        if not (0 <= value < 2**cls.LENGTH):
            raise InvalidInputShape(
                cls.LABEL,
                value,
                cls.LENGTH,
                f"expected an integer between 0 and {2**cls.LENGTH - 1}",
            )
        return cls([get_bit(value, cls.LENGTH - 1 - i) for i in range(cls.LENGTH)])

    def to_int(self) -> int:
        result = 0
        for bit in self.bits:
            result = (result << 1) | bit
        return result

    def to_array(self) -> npt.NDArray[np.uint8]:
        return np.array(self.bits, dtype=np.uint8)

    def flip(self, index: int) -> Self:
        """Return a copy with the bit at `index` inverted.

        Raises:
            IndexError:
                If `index` is outside of the vector.
        """
        if not (0 <= index < self.LENGTH):
            raise IndexError(
                f"Bit index {index} out of range for {self.LENGTH} bits"
            )
        bits = list(self.bits)
        bits[index] = toggle_bit(bits[index])
        return type(self)(bits)

    def __len__(self) -> int:
        return self.LENGTH

    def __iter__(self) -> Iterator[int]:
        return iter(self.bits)

    def __getitem__(self, index: int) -> int:
        return self.bits[index]

    @override
    def __str__(self) -> str:
        return "".join(str(bit) for bit in self.bits)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"


@dataclass(frozen=True, init=False, repr=False)
class DataBlock(BitVector):
    """The 4 data bits D1 D2 D3 D4."""

    LENGTH: ClassVar[int] = DATA_BITS_COUNT
    LABEL: ClassVar[str] = "Data"

    @classmethod
    def all(cls) -> list[DataBlock]:
        """All 16 possible data blocks in ascending order."""
        return [cls.from_int(i) for i in range(2**cls.LENGTH)]


@dataclass(frozen=True, init=False, repr=False)
class Codeword(BitVector):
    """An encoded byte laid out as P H1 H2 H3 D1 D2 D3 D4."""

    LENGTH: ClassVar[int] = CODEWORD_BITS_COUNT
    LABEL: ClassVar[str] = "Encoded data"

    @property
    def p(self) -> int:
        return self.bits[Position.P]

    @property
    def hamming(self) -> tuple[int, int, int]:
        return (
            self.bits[Position.H1],
            self.bits[Position.H2],
            self.bits[Position.H3],
        )

    @property
    def data(self) -> DataBlock:
        return DataBlock(self.bits[Position.D1 :])

    def bit(self, position: Position) -> int:
        return self.bits[position]

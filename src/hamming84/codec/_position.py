from __future__ import annotations

import enum


class Position(enum.IntEnum):
    """Bit positions of a codeword in transmission order."""

    P = 0
    H1 = 1
    H2 = 2
    H3 = 3
    D1 = 4
    D2 = 5
    D3 = 6
    D4 = 7

    def is_data(self) -> bool:
        return self >= Position.D1

    def is_redundant(self) -> bool:
        """Whether a flip at this position leaves the data bits intact."""
        return not self.is_data()

    def data_index(self) -> int:
        """The index of a data position within a `DataBlock`.

        Raises:
            ValueError:
                For the parity and hamming positions.
        """
        if not self.is_data():
            raise ValueError(f"{self.name} is not a data position")
        return self - Position.D1

    @classmethod
    def parse(cls, text: str) -> Position:
        """Parse a position from an index (`0`-`7`) or a name (`P`, `H1`, `D4`...)."""
        text = text.strip()
        if text.isdigit():
            index = int(text)
            if index >= len(cls):
                raise ValueError(
                    f"Invalid position index `{text}`, expected 0-{len(cls) - 1}"
                )
            return cls(index)

        try:
            return cls[text.upper()]
        except KeyError as e:
            names = ", ".join(p.name for p in cls)
            raise ValueError(
                f"Invalid position `{text}`, expected an index or one of: {names}"
            ) from e


DATA_POSITIONS = (Position.D1, Position.D2, Position.D3, Position.D4)
HAMMING_POSITIONS = (Position.H1, Position.H2, Position.H3)

# The data bits each hamming bit is computed over.
HAMMING_COVERAGE: dict[Position, tuple[Position, ...]] = {
    Position.H1: (Position.D1, Position.D2, Position.D4),
    Position.H2: (Position.D1, Position.D3, Position.D4),
    Position.H3: (Position.D2, Position.D3, Position.D4),
}

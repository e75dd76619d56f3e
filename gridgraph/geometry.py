"""Matrix format errors, compass directions and stepping through a grid."""

from __future__ import annotations

from enum import Enum

Index = tuple[int, int]
Direction = tuple[int, int]

E: Direction = (0, 1)
S: Direction = (1, 0)
W: Direction = (0, -1)
N: Direction = (-1, 0)
NE: Direction = (-1, 1)
SE: Direction = (1, 1)
NW: Direction = (-1, -1)
SW: Direction = (1, -1)

DIRECTIONS_4: tuple[Direction, ...] = (E, S, W, N)
DIRECTIONS_8: tuple[Direction, ...] = (NE, E, SE, S, SW, W, NW, N)


class FormatErrorKind(Enum):
    """The ways in which building or slicing a matrix can fail."""

    EMPTY_ROW = "matrix rows cannot be empty"
    WRONG_INDEX = "index does not point to data inside the matrix"
    WRONG_LENGTH = "provided data does not correspond to the expected length"


class MatrixFormatError(ValueError):
    """Raised when a matrix cannot be built from the given data."""

    def __init__(self, kind: FormatErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def move_in_direction(
    index: Index, direction: Direction, rows: int, columns: int
) -> Index | None:
    """Return the cell reached by one step in ``direction`` from ``index``.

    ``None`` is returned if the starting cell is outside a ``rows`` by
    ``columns`` area, if the direction is ``(0, 0)``, or if the step
    leaves the area.
    """
    row, col = index
    if not (0 <= row < rows and 0 <= col < columns) or tuple(direction) == (0, 0):
        return None
    new_row, new_col = row + direction[0], col + direction[1]
    if 0 <= new_row < rows and 0 <= new_col < columns:
        return (new_row, new_col)
    return None
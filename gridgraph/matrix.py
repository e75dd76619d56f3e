"""Two-dimensional matrix of arbitrary values, stored row by row."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from gridgraph.geometry import (
    Direction,
    FormatErrorKind,
    Index,
    MatrixFormatError,
    move_in_direction,
)
from gridgraph.utils import uint_sqrt


class Matrix:
    """Matrix of arbitrary values with ``rows`` rows and ``columns`` columns.

    Cells are addressed with ``(row, column)`` tuples. Iterating over a
    matrix yields its rows as lists, and ``len()`` gives the number of rows.
    """

    def __init__(self, rows: int, columns: int, value: Any) -> None:
        """Create a matrix filled with ``value``.

        Raises ``ValueError`` if there are rows but no columns.
        """
        if rows != 0 and columns == 0:
            raise ValueError("unable to create a matrix with empty rows")
        self.rows = rows
        self.columns = columns
        self._data: list[Any] = [value] * (rows * columns)

    @classmethod
    def _build(cls, rows: int, columns: int, data: list[Any]) -> Matrix:
        matrix = cls.__new__(cls)
        matrix.rows = rows
        matrix.columns = columns
        matrix._data = data
        return matrix

    @classmethod
    def new_square(cls, size: int, value: Any) -> Matrix:
        """Create a square matrix filled with ``value``."""
        return cls(size, size, value)

    @classmethod
    def from_vec(cls, rows: int, columns: int, values: Iterable[Any]) -> Matrix:
        """Create a matrix from values given row by row."""
        data = list(values)
        if rows != 0 and columns == 0:
            raise MatrixFormatError(FormatErrorKind.EMPTY_ROW)
        if rows * columns != len(data):
            raise MatrixFormatError(FormatErrorKind.WRONG_LENGTH)
        return cls._build(rows, columns, data)

    @classmethod
    def square_from_vec(cls, values: Iterable[Any]) -> Matrix:
        """Create a square matrix; the number of values must be a square."""
        data = list(values)
        size = uint_sqrt(len(data))
        if size is None:
            raise MatrixFormatError(FormatErrorKind.WRONG_LENGTH)
        return cls.from_vec(size, size, data)

    @classmethod
    def new_empty(cls, columns: int) -> Matrix:
        """Create a matrix with no rows, to be grown with ``extend``."""
        return cls._build(0, columns, [])

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> Matrix:
        """Create a matrix from an iterable of rows, each an iterable of values."""
        it = iter(rows)
        try:
            first = next(it)
        except StopIteration:
            return cls.new_empty(0)
        data = list(first)
        number_of_columns = len(data)
        number_of_rows = 1
        for row in it:
            number_of_rows += 1
            data.extend(row)
            if number_of_rows * number_of_columns != len(data):
                raise MatrixFormatError(FormatErrorKind.WRONG_LENGTH)
        return cls.from_vec(number_of_rows, number_of_columns, data)

    def fill(self, value: Any) -> None:
        """Set every cell to ``value``."""
        self._data = [value] * (self.rows * self.columns)

    def slice(self, rows: range, columns: range) -> Matrix:
        """Return a copy of the sub-matrix covering the given ranges."""
        if (
            rows.stop > self.rows
            or columns.stop > self.columns
            or rows.start > rows.stop
            or columns.start > columns.stop
            or rows.start < 0
            or columns.start < 0
        ):
            raise MatrixFormatError(FormatErrorKind.WRONG_INDEX)
        height = rows.stop - rows.start
        width = columns.stop - columns.start
        data: list[Any] = []
        for r in range(rows.start, rows.stop):
            base = r * self.columns
            data.extend(self._data[base + columns.start : base + columns.stop])
        return type(self).from_vec(height, width, data)

    def _transposed_data(self) -> list[Any]:
        return [
            self._data[r * self.columns + c]
            for c in range(self.columns)
            for r in range(self.rows)
        ]

    def rotated_cw(self, times: int) -> Matrix:
        """Return a copy rotated clockwise ``times`` quarter turns."""
        if self.is_square():
            copy = self._copy()
            copy.rotate_cw(times)
            return copy
        turns = times % 4
        if turns == 0:
            return self._copy()
        if turns == 1:
            copy = self.transposed()
            copy.flip_lr()
            return copy
        if turns == 2:
            return type(self)._build(self.rows, self.columns, self._data[::-1])
        copy = self.transposed()
        copy.flip_ud()
        return copy

    def rotated_ccw(self, times: int) -> Matrix:
        """Return a copy rotated counter-clockwise ``times`` quarter turns."""
        return self.rotated_cw(4 - times % 4)

    def flipped_lr(self) -> Matrix:
        """Return a copy flipped around the vertical axis."""
        copy = self._copy()
        copy.flip_lr()
        return copy

    def flipped_ud(self) -> Matrix:
        """Return a copy flipped around the horizontal axis."""
        copy = self._copy()
        copy.flip_ud()
        return copy

    def transposed(self) -> Matrix:
        """Return the transposed matrix."""
        if self.rows == 0 and self.columns != 0:
            raise ValueError("this operation would create a matrix with empty rows")
        return type(self)._build(self.columns, self.rows, self._transposed_data())

    def extend(self, row: Iterable[Any]) -> None:
        """Append one full row to the matrix."""
        values = list(row)
        if not values:
            raise MatrixFormatError(FormatErrorKind.EMPTY_ROW)
        if len(values) != self.columns:
            raise MatrixFormatError(FormatErrorKind.WRONG_LENGTH)
        self.rows += 1
        self._data.extend(values)

    def map(self, transform: Callable[[Any], Any]) -> Matrix:
        """Return a matrix of the same shape with ``transform`` applied to each cell."""
        return type(self)._build(
            self.rows, self.columns, [transform(v) for v in self._data]
        )

    def set_slice(self, pos: Index, other: Matrix) -> None:
        """Copy ``other`` into this matrix with its top-left corner at ``pos``.

        Cells of ``other`` that would fall outside this matrix are ignored.
        """
        row, column = pos
        if not (0 <= row <= self.rows and 0 <= column <= self.columns):
            raise IndexError(f"position {pos} is outside the matrix")
        height = min(self.rows - row, other.rows)
        width = min(self.columns - column, other.columns)
        for r in range(height):
            start = (row + r) * self.columns + column
            self._data[start : start + width] = other._data[
                r * other.columns : r * other.columns + width
            ]

    def __neg__(self) -> Matrix:
        return type(self)._build(self.rows, self.columns, [-v for v in self._data])

    def is_empty(self) -> bool:
        """Return ``True`` if the matrix has no rows."""
        return self.rows == 0

    def is_square(self) -> bool:
        """Return ``True`` if the matrix has as many rows as columns."""
        return self.rows == self.columns

    def idx(self, index: Index) -> int:
        """Return the position of a cell in the row-by-row value list."""
        row, column = index
        if not 0 <= row < self.rows:
            raise IndexError(f"trying to access row {row} (max {self.rows - 1})")
        if not 0 <= column < self.columns:
            raise IndexError(
                f"trying to access column {column} (max {self.columns - 1})"
            )
        return row * self.columns + column

    def within_bounds(self, index: Index) -> bool:
        """Return ``True`` if ``index`` designates a cell of the matrix."""
        row, column = index
        return 0 <= row < self.rows and 0 <= column < self.columns

    def get(self, index: Index, default: Any = None) -> Any:
        """Return the value at ``index``, or ``default`` if it is outside."""
        if self.within_bounds(index):
            return self._data[index[0] * self.columns + index[1]]
        return default

    def __getitem__(self, index: Index) -> Any:
        return self._data[self.idx(index)]

    def __setitem__(self, index: Index, value: Any) -> None:
        self._data[self.idx(index)] = value

    def __iter__(self) -> Iterator[list[Any]]:
        for r in range(self.rows):
            yield self._data[r * self.columns : (r + 1) * self.columns]

    def __len__(self) -> int:
        return self.rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.columns == other.columns
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, columns={self.columns}, data={self._data!r})"

    def _copy(self) -> Matrix:
        return type(self)._build(self.rows, self.columns, list(self._data))

    def flip_lr(self) -> None:
        """Flip the matrix in place around the vertical axis."""
        for r in range(self.rows):
            start, end = r * self.columns, (r + 1) * self.columns
            self._data[start:end] = self._data[start:end][::-1]

    def flip_ud(self) -> None:
        """Flip the matrix in place around the horizontal axis."""
        rows = list(self)
        self._data = [value for row in reversed(rows) for value in row]

    def rotate_cw(self, times: int) -> None:
        """Rotate a square matrix clockwise in place ``times`` quarter turns."""
        if self.rows != self.columns:
            raise ValueError("attempt to rotate a non-square matrix")
        turns = times % 4
        if turns == 0:
            return
        if turns == 2:
            self._data.reverse()
            return
        self._data = self._transposed_data()
        if turns == 1:
            self.flip_lr()
        else:
            self.flip_ud()

    def rotate_ccw(self, times: int) -> None:
        """Rotate a square matrix counter-clockwise in place ``times`` quarter turns."""
        self.rotate_cw(4 - times % 4)

    def neighbours(self, index: Index, diagonals: bool) -> Iterator[Index]:
        """Return an iterator over the cells adjacent to ``index``.

        The neighbours are determined when this method is called. Nothing is
        returned if ``index`` is not a cell of the matrix.
        """
        if not self.within_bounds(index):
            return iter(())
        r, c = index
        found = [
            (rr, cc)
            for rr in range(max(r - 1, 0), min(self.rows, r + 2))
            for cc in range(max(c - 1, 0), min(self.columns, c + 2))
            if (rr != r or cc != c) and (diagonals or rr == r or cc == c)
        ]
        return iter(found)

    def move_in_direction(self, index: Index, direction: Direction) -> Index | None:
        """Return the cell one step in ``direction`` from ``index``, if any."""
        return move_in_direction(index, direction, self.rows, self.columns)

    def in_direction(self, index: Index, direction: Direction) -> Iterator[Index]:
        """Yield successive cells in ``direction``, excluding the starting cell."""
        rows, columns = self.rows, self.columns

        def walk(current: Index) -> Iterator[Index]:
            while (nxt := move_in_direction(current, direction, rows, columns)) is not None:
                yield nxt
                current = nxt

        return walk(index)

    def indices(self) -> Iterator[Index]:
        """Return an iterator over all cell indices, first row first."""
        rows, columns = self.rows, self.columns
        return ((r, c) for r in range(rows) for c in range(columns))

    def values(self) -> Iterator[Any]:
        """Return an iterator over all values, first row first."""
        return iter(self._data)
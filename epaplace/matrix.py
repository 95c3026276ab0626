"""A dense, row-major two-dimensional matrix."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any


class Matrix:
    """Fixed-size matrix stored row by row in a flat list."""

    def __init__(self, rows: int = 0, cols: int = 0, init: Any = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        size = rows * cols
        if isinstance(init, (list, tuple)):
            if len(init) != size:
                raise ValueError(
                    f"initializer has {len(init)} values, matrix needs {size}"
                )
            self._data = list(init)
        else:
            self._data = [init] * size

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        return self._rows * self._cols

    @property
    def data(self) -> list:
        """A copy of the underlying row-major values."""
        return list(self._data)

    def coord(self, row: int, col: int) -> int:
        """Flat index of the cell at ``row``, ``col``."""
        return row * self._cols + col

    def _checked(self, row: int, col: int) -> int:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(
                f"cell ({row}, {col}) outside a {self._rows}x{self._cols} matrix"
            )
        return self.coord(row, col)

    def at(self, row: int, col: int) -> Any:
        """Value at ``row``, ``col``; raises IndexError when out of range."""
        return self._data[self._checked(row, col)]

    def row(self, index: int) -> list:
        if not 0 <= index < self._rows:
            raise IndexError(f"row {index} outside {self._rows} rows")
        start = index * self._cols
        return self._data[start:start + self._cols]

    def col(self, index: int) -> list:
        if not 0 <= index < self._cols:
            raise IndexError(f"column {index} outside {self._cols} columns")
        return self._data[index::self._cols] if self._cols else []

    def swap(self, other: Matrix) -> None:
        """Exchange contents with ``other``."""
        self._rows, other._rows = other._rows, self._rows
        self._cols, other._cols = other._cols, self._cols
        self._data, other._data = other._data, self._data

    def __getitem__(self, key: Sequence[int]) -> Any:
        row, col = key
        return self.at(row, col)

    def __setitem__(self, key: Sequence[int], value: Any) -> None:
        row, col = key
        self._data[self._checked(row, col)] = value

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._data!r})"
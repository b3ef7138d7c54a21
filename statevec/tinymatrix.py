"""Small dense matrices with dimensions fixed at construction."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class TinyMatrix:
    """A small row-major matrix whose shape never changes after construction."""

    def __init__(self, rows: int, cols: int | None = None,
                 values: Any = None, name: str = "") -> None:
        if cols is None:
            cols = rows
        if rows <= 0 or cols <= 0:
            raise ValueError("a zero-dimensional matrix is not allowed")
        self.rows = rows
        self.cols = cols
        self.name = name
        if values is None:
            self._data = [[0j] * cols for _ in range(rows)]
            return
        if isinstance(values, TinyMatrix):
            values = [values.row(i) for i in range(values.rows)]
        data = [list(line) for line in values]
        if len(data) != rows or any(len(line) != cols for line in data):
            raise ValueError(f"values do not form a {rows}x{cols} matrix")
        self._data = data

    def _check(self, i: int, j: int) -> None:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index ({i}, {j}) outside a {self.rows}x{self.cols} matrix")

    def __getitem__(self, key):
        """Return the element at ``(i, j)``, or row ``i`` as a tuple."""
        if isinstance(key, tuple):
            i, j = key
            self._check(i, j)
            return self._data[i][j]
        return self.row(key)

    def __setitem__(self, key, value) -> None:
        i, j = key
        self._check(i, j)
        self._data[i][j] = value

    def __eq__(self, other) -> bool:
        if isinstance(other, TinyMatrix):
            if (other.rows, other.cols) != (self.rows, self.cols):
                return False
            other_rows = [other.row(i) for i in range(other.rows)]
        elif isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            other_rows = [tuple(line) for line in other]
            if len(other_rows) != self.rows or any(len(r) != self.cols for r in other_rows):
                return False
        else:
            return NotImplemented
        return all(tuple(mine) == theirs for mine, theirs in zip(self._data, other_rows))

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self.rows * self.cols

    def __str__(self) -> str:
        parts = ["{"]
        for line in self._data:
            parts.append("{")
            for value in line:
                c = complex(value)
                parts.append(f"{c.real:.3f}+{c.imag:.3f} ")
            parts.append("}")
        parts.append("{")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"TinyMatrix({self.rows}, {self.cols}, {self._data!r}, name={self.name!r})"

    def row(self, i: int) -> tuple:
        """Return row ``i`` as a tuple."""
        if not 0 <= i < self.rows:
            raise IndexError(f"row {i} outside a matrix with {self.rows} rows")
        return tuple(self._data[i])

    def sub_matrix(self, rows: int, cols: int | None = None, i_start: int = 0,
                   j_start: int = 0, i_stride: int = 1, j_stride: int = 1) -> "TinyMatrix":
        """Return the ``rows`` x ``cols`` submatrix taken with the given start and strides."""
        if cols is None:
            cols = rows
        if i_stride <= 0 or j_stride <= 0:
            raise ValueError("strides must be strictly positive")
        if i_start < 0 or j_start < 0:
            raise IndexError("start indices must be non-negative")
        if (rows - 1) * i_stride + i_start >= self.rows or \
                (cols - 1) * j_stride + j_start >= self.cols:
            raise IndexError("submatrix extends beyond the matrix")
        values = [
            [self._data[i_start + a * i_stride][j_start + b * j_stride] for b in range(cols)]
            for a in range(rows)
        ]
        return TinyMatrix(rows, cols, values)

    def describe(self, name: str) -> str:
        """Return a readable listing of the matrix headed by ``name``."""
        lines = [f"name: {name}"]
        for line in self._data:
            text = ""
            for value in line:
                c = complex(value)
                text += f"{c.real:g} + i*{c.imag:g} "
            lines.append(text)
        return "\n".join(lines) + "\n"

    def copy(self) -> "TinyMatrix":
        """Return an independent copy, name included."""
        return TinyMatrix(self.rows, self.cols, self, name=self.name)
"""Dense vectors and matrices whose entries may be plain or autodiff numbers."""

from __future__ import annotations

import numbers
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

import numpy as np

from taylorad.traits import is_arithmetic


def _format_entry(x: Any) -> str:
    if isinstance(x, numbers.Integral):
        return str(int(x))
    if is_arithmetic(x):
        return f"{float(x):g}"
    return str(x)


def _value(x: Any) -> float:
    return float(x)


def _check_index(index: Any, size: int) -> int:
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise TypeError(f"index must be an integer, got {type(index).__name__}")
    index = int(index)
    if not 0 <= index < size:
        raise IndexError(f"index {index} out of range for size {size}")
    return index


def _aligned_lines(rows: list[list[Any]]) -> str:
    texts = [[_format_entry(x) for x in row] for row in rows]
    width = max((len(t) for row in texts for t in row), default=0)
    return "\n".join(" ".join(t.rjust(width) for t in row) for row in texts)


class Vector:
    """A column vector of numbers, which may be autodiff numbers."""

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[Any] | int | Vector = ()) -> None:
        if isinstance(values, numbers.Integral) and not isinstance(values, bool):
            if values < 0:
                raise ValueError(f"vector size must be non-negative, got {values}")
            self._data: list[Any] = [0.0] * int(values)
        else:
            self._data = list(values)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[_check_index(index, len(self._data))]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[_check_index(index, len(self._data))] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __str__(self) -> str:
        return _aligned_lines([[x] for x in self._data])

    def __repr__(self) -> str:
        entries = ", ".join(_format_entry(x) for x in self._data)
        return f"{type(self).__name__}([{entries}])"

    def __neg__(self) -> Vector:
        return type(self)(-x for x in self._data)

    def _pairs(self, other: Vector) -> Iterator[tuple[Any, Any]]:
        if len(other) != len(self):
            raise ValueError(f"size mismatch: {len(self)} and {len(other)}")
        return zip(self._data, other._data)

    def _combine(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        if not isinstance(other, Vector):
            return NotImplemented
        return type(self)(op(a, b) for a, b in self._pairs(other))

    def _combine_in_place(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        if not isinstance(other, Vector):
            return NotImplemented
        self._data = [op(a, b) for a, b in self._pairs(other)]
        return self

    def __add__(self, other: Any) -> Any:
        return self._combine(other, operator.add)

    def __sub__(self, other: Any) -> Any:
        return self._combine(other, operator.sub)

    def __iadd__(self, other: Any) -> Any:
        return self._combine_in_place(other, operator.add)

    def __isub__(self, other: Any) -> Any:
        return self._combine_in_place(other, operator.sub)

    def __imul__(self, scalar: Any) -> Any:
        if isinstance(scalar, (Vector, Matrix)):
            return NotImplemented
        self._data = [x * scalar for x in self._data]
        return self

    def __itruediv__(self, scalar: Any) -> Any:
        if isinstance(scalar, (Vector, Matrix)):
            return NotImplemented
        self._data = [x / scalar for x in self._data]
        return self

    def __eq__(self, other: Any) -> Any:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(other) != len(self):
            return False
        return all(bool(a == b) for a, b in zip(self._data, other._data))

    def asarray(self) -> np.ndarray:
        """Return the values of the entries as a one-dimensional float array."""
        return np.array([_value(x) for x in self._data], dtype=float)


class Matrix:
    """A dense matrix of numbers, which may be autodiff numbers."""

    __slots__ = ("_data", "_ncols")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Iterable[Any]] | Matrix = ()) -> None:
        source = rows._data if isinstance(rows, Matrix) else rows
        data = [list(row) for row in source]
        widths = {len(row) for row in data}
        if len(widths) > 1:
            raise ValueError("all matrix rows must have the same length")
        self._data: list[list[Any]] = data
        self._ncols = widths.pop() if widths else 0

    def __len__(self) -> int:
        return len(self._data) * self._ncols

    def rows(self) -> int:
        """Return the number of rows."""
        return len(self._data)

    def cols(self) -> int:
        """Return the number of columns."""
        return self._ncols

    def _position(self, pos: Any) -> tuple[int, int]:
        if not isinstance(pos, tuple) or len(pos) != 2:
            raise TypeError("matrix index must be a (row, column) pair")
        i, j = pos
        return _check_index(i, self.rows()), _check_index(j, self._ncols)

    def __getitem__(self, pos: tuple[int, int]) -> Any:
        i, j = self._position(pos)
        return self._data[i][j]

    def __setitem__(self, pos: tuple[int, int], value: Any) -> None:
        i, j = self._position(pos)
        self._data[i][j] = value

    def __str__(self) -> str:
        return _aligned_lines(self._data)

    def __repr__(self) -> str:
        parts = [f"{type(self).__name__}([\n"]
        for i, row in enumerate(self._data):
            parts.append("" if i == 0 else "\n")
            parts.extend(
                ("  [" if j == 0 else ", ") + _format_entry(x) for j, x in enumerate(row)
            )
            parts.append("],")
        parts.append("\n])")
        return "".join(parts)

    def __neg__(self) -> Matrix:
        return type(self)([[-x for x in row] for row in self._data])

    def _zipped(self, other: Matrix, op: Callable[[Any, Any], Any]) -> list[list[Any]]:
        if (other.rows(), other.cols()) != (self.rows(), self.cols()):
            raise ValueError(
                f"shape mismatch: {self.rows()}x{self.cols()} and {other.rows()}x{other.cols()}"
            )
        return [
            [op(a, b) for a, b in zip(ra, rb)] for ra, rb in zip(self._data, other._data)
        ]

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        return type(self)(self._zipped(other, operator.add))

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        return type(self)(self._zipped(other, operator.sub))

    def __iadd__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._data = self._zipped(other, operator.add)
        return self

    def __isub__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._data = self._zipped(other, operator.sub)
        return self

    def __imul__(self, scalar: Any) -> Any:
        if isinstance(scalar, (Vector, Matrix)):
            return NotImplemented
        self._data = [[x * scalar for x in row] for row in self._data]
        return self

    def __itruediv__(self, scalar: Any) -> Any:
        if isinstance(scalar, (Vector, Matrix)):
            return NotImplemented
        self._data = [[x / scalar for x in row] for row in self._data]
        return self

    def __eq__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        if (other.rows(), other.cols()) != (self.rows(), self.cols()):
            return False
        return all(
            bool(a == b) for ra, rb in zip(self._data, other._data) for a, b in zip(ra, rb)
        )

    def asarray(self) -> np.ndarray:
        """Return the values of the entries as a two-dimensional float array."""
        values = np.zeros((self.rows(), self._ncols), dtype=float)
        for i, row in enumerate(self._data):
            for j, x in enumerate(row):
                values[i, j] = _value(x)
        return values
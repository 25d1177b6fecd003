"""Histogram capability and its array-backed adapter."""

from typing import NamedTuple, Protocol

import numpy as np

INT64_MAX = int(np.iinfo(np.int64).max)


class Histogram(Protocol):
    """Read-only sequence of non-negative integer bar heights, each bar one unit wide."""

    def width(self) -> int:
        ...

    def height_at(self, index: int) -> int:
        ...


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def as_heights_array(heights, validate: bool = True) -> np.ndarray:
    """Convert bar heights to a 1-D array.

    Heights that fit in int64 give an np.int64 array. Larger heights, which numpy
    infers as uint64 or object, give an object array of Python ints so no value
    is truncated.

    Args:
        heights: Sequence of non-negative integers, or a 1-D integer array.
        validate: If True, reject arrays that are not 1-D, not integer-valued,
            or contain negative heights.

    Returns:
        A one-dimensional np.int64 array, or an object array of Python ints.
    """
    arr = np.asarray(heights)
    if arr.size == 0:
        return np.zeros(0, dtype=np.int64)

    if validate:
        if arr.ndim != 1:
            raise ValueError(f"Histogram heights must be one-dimensional, got shape {arr.shape}")
        if arr.dtype == object:
            if not all(_is_integer(h) for h in arr):
                raise ValueError("Histogram heights must be integers, got non-integer objects")
        elif not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Histogram heights must be integers, got dtype {arr.dtype}")
        if np.any(arr < 0):
            raise ValueError("Histogram heights must be non-negative")

    if arr.dtype != object and arr.dtype.kind != 'u':
        return arr.astype(np.int64, copy=False)
    if int(arr.max()) <= INT64_MAX:
        return arr.astype(np.int64)
    return np.array([int(h) for h in arr], dtype=object)


class ArrayHistogram:
    """Histogram backed by an array of bar heights.

    Example:
        >>> hist = ArrayHistogram([2, 1, 5, 6, 2, 3])
        >>> hist.width(), hist.height_at(2)
        (6, 5)
    """

    def __init__(self, heights, validate: bool = True):
        self._heights = np.array(as_heights_array(heights, validate=validate))
        self._heights.flags.writeable = False

    @property
    def heights(self) -> np.ndarray:
        return self._heights

    def width(self) -> int:
        return len(self._heights)

    def height_at(self, index: int) -> int:
        return int(self._heights[index])

    def __len__(self) -> int:
        return len(self._heights)

    def __repr__(self) -> str:
        return f"ArrayHistogram({self._heights.tolist()!r})"


class Rectangle(NamedTuple):
    """Axis-aligned rectangle under a histogram, spanning bars left..left + width - 1."""

    left: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

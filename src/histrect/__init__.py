"""Histrect: largest rectangle under a histogram.

A linear-time monotonic-stack sweep over any object exposing ``width()`` and
``height_at(index)``, plus a numba-compiled variant for plain height arrays.

Example:
    >>> from histrect import ArrayHistogram, compute_largest_rectangle_area
    >>> compute_largest_rectangle_area(ArrayHistogram([2, 1, 5, 6, 2, 3]))
    10
"""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0"

__all__ = [
    # Histogram
    "Histogram",
    "ArrayHistogram",
    "Rectangle",
    # Search
    "compute_largest_rectangle_area",
    "find_largest_rectangle",
    "LargestRectangleSearcher",
    # Arrays
    "largest_rectangle_area_in_heights",
    "find_largest_rectangle_in_heights",
]

from histrect.histogram import (
    ArrayHistogram,
    Histogram,
    Rectangle,
)

from histrect.search import (
    LargestRectangleSearcher,
    compute_largest_rectangle_area,
    find_largest_rectangle,
)

from histrect.array_search import (
    find_largest_rectangle_in_heights,
    largest_rectangle_area_in_heights,
)

# Report exported names as members of the top-level package, so that
# documentation tools link `histrect.ArrayHistogram` rather than the submodule.
# The defining module is kept in _module_original_.
for _x in __all__:
    _obj = globals().get(_x)
    if _obj is not None and hasattr(_obj, "__module__"):
        _obj._module_original_ = _obj.__module__
        _obj.__module__ = __name__

"""Compiled largest-rectangle sweep over a plain array of bar heights.

Same sentinel and replace-on-tie policy as LargestRectangleSearcher, but the stack
lives in a preallocated int64 array and the loop runs under numba.
"""

import numba
import numpy as np

from .histogram import INT64_MAX, Rectangle, as_heights_array


def largest_rectangle_area_in_heights(heights, validate=True):
    """Area of the largest rectangle under the bars in ``heights``."""
    return find_largest_rectangle_in_heights(heights, validate=validate).area


def find_largest_rectangle_in_heights(heights, validate=True):
    """Largest rectangle under the bars in ``heights``.

    Args:
        heights: 1-D sequence or array of non-negative integers.
        validate: If True, raise ValueError on non-integer, negative or
            multi-dimensional input.

    Returns:
        Rectangle(left, width, height). Empty or all-zero input gives
        Rectangle(0, 0, 0).

    Raises:
        OverflowError: If some rectangle area may not fit in int64. The generic
            sweep in histrect.search handles such histograms exactly.
    """
    heights = as_heights_array(heights, validate=validate)
    if not areas_fit_in_int64(heights):
        raise OverflowError(
            "Rectangle areas of this histogram may exceed int64, "
            "use find_largest_rectangle without fast=True")
    left, width, height = _largest_rectangle(heights)
    return Rectangle(int(left), int(width), int(height))


def areas_fit_in_int64(heights):
    """Whether the compiled sweep can run on ``heights`` without wraparound.

    Every candidate area is at most ``max(heights) * len(heights)``.
    """
    if heights.dtype != np.int64:
        return False
    if len(heights) == 0:
        return True
    return int(heights.max()) * len(heights) <= INT64_MAX


@numba.njit(cache=True)
def _largest_rectangle(heights):
    n = heights.shape[0]
    # Index 0 holds the sentinel -1 until a zero-height bar replaces it.
    stack = np.empty(n + 1, dtype=np.int64)
    stack[0] = -1
    stack_idx = 0

    max_area = 0
    max_left = 0
    max_width = 0
    max_height = 0

    for x in range(n + 1):
        h = heights[x] if x < n else 0

        while stack_idx > 0 and heights[stack[stack_idx]] > h:
            bar_height = heights[stack[stack_idx]]
            stack_idx -= 1
            left = stack[stack_idx] + 1
            area = bar_height * (x - left)
            if area > max_area:
                max_area = area
                max_left = left
                max_width = x - left
                max_height = bar_height

        last_height = heights[stack[stack_idx]] if stack_idx > 0 else 0
        if h > last_height:
            stack_idx += 1
        stack[stack_idx] = x

    return max_left, max_width, max_height

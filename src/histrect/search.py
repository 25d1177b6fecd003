"""
Largest Rectangle in a Histogram
================================

Given a histogram of unit-width bars with non-negative integer heights, find the
axis-aligned rectangle of maximal area that fits entirely under the bars.

The algorithm
-------------

A single left-to-right sweep maintains a stack of "recorded" bar positions whose
heights strictly increase from bottom to top. The bottom of the stack is the
sentinel position -1, a virtual bar of height 0. A second virtual bar of height 0
sits at position ``width``, so the sweep visits ``0..width`` inclusive and the last
step always flushes whatever is still recorded.

For each position x:

- If the new bar is higher than the last recorded bar, push x.
- If it has the same height, replace the last recorded position with x. Equal-height
  runs then occupy a single stack entry, and the entry below still marks the left
  boundary of the whole run.
- If it is lower, this is a closing event: every recorded bar taller than the new
  one has now found its right boundary. Pop them one by one. The rectangle of the
  popped bar's height spans the open interval between the position now on top of
  the stack and x. Afterwards, record x by the same push/replace rule.

Complexity
----------

- Time: O(n). Each position is pushed and popped at most once.
- Space: O(n) for the stack, e.g. a strictly increasing histogram keeps every
  position recorded until the final flush.
"""

import enum
import logging

from .array_search import areas_fit_in_int64, find_largest_rectangle_in_heights
from .histogram import ArrayHistogram, Rectangle

logger = logging.getLogger(__name__)

_SENTINEL = -1


class Recording(enum.Enum):
    """How a newly visited bar is recorded on the stack."""

    PUSH = "push"
    REPLACE_TOP = "replace_top"


def compute_largest_rectangle_area(histogram, fast=False):
    """Return the area of the largest rectangle that fits under the histogram.

    Args:
        histogram: Any object with ``width()`` and ``height_at(index)``.
        fast: If True and ``histogram`` is an ArrayHistogram, run the compiled
            kernel on its heights array instead of the generic sweep.

    Returns:
        The maximal area as a non-negative int. An empty histogram gives 0.
    """
    return find_largest_rectangle(histogram, fast=fast).area


def find_largest_rectangle(histogram, fast=False):
    """Return the largest rectangle under the histogram as a Rectangle.

    Among rectangles of equal area, the one closed first during the sweep wins.
    An empty or all-zero histogram gives ``Rectangle(0, 0, 0)``. With ``fast=True``,
    heights whose areas could overflow int64 go through the generic sweep instead.
    """
    if fast and isinstance(histogram, ArrayHistogram) and areas_fit_in_int64(histogram.heights):
        rect = find_largest_rectangle_in_heights(histogram.heights, validate=False)
        path = 'compiled'
    else:
        rect = LargestRectangleSearcher(histogram).search()
        path = 'generic'

    logger.debug('Largest rectangle under %d bars (%s sweep): %s', histogram.width(), path, rect)
    return rect


class LargestRectangleSearcher:
    """Monotonic-stack sweep over a borrowed histogram.

    The histogram is only read. Every call to ``search`` starts from a fresh stack.
    """

    def __init__(self, histogram):
        self.histogram = histogram
        self.width = histogram.width()
        self.recorded_bars = [_SENTINEL]

    def search(self):
        self.recorded_bars = [_SENTINEL]
        best = Rectangle(0, 0, 0)
        for x in range(self.width + 1):
            if self.height_at(x) < self.height_of_last_recorded_bar():
                candidate = self._close_bars_taller_than(x)
                if candidate.area > best.area:
                    best = candidate
            self._record(x)

        # The end marker has height 0 so only zero-height positions remain.
        assert self.height_of_last_recorded_bar() == 0
        return best

    def height_at(self, x):
        """Bar height at x, with virtual zero-height bars at -1 and width."""
        assert _SENTINEL <= x <= self.width, f'Position {x} outside [-1, {self.width}]'
        if x == _SENTINEL or x == self.width:
            return 0
        return self.histogram.height_at(x)

    def height_of_last_recorded_bar(self):
        assert self.recorded_bars
        return self.height_at(self.recorded_bars[-1])

    def recording_for(self, x):
        new_height = self.height_at(x)
        last_height = self.height_of_last_recorded_bar()
        assert new_height >= last_height, 'Lower bars must close taller ones first'
        return Recording.PUSH if new_height > last_height else Recording.REPLACE_TOP

    def _record(self, x):
        if self.recording_for(x) is Recording.PUSH:
            self.recorded_bars.append(x)
        else:
            self.recorded_bars[-1] = x

    def _close_bars_taller_than(self, x):
        """Pop all recorded bars taller than the bar at x, return the best of their rectangles."""
        current_height = self.height_at(x)
        best = Rectangle(0, 0, 0)
        while self.height_of_last_recorded_bar() > current_height:
            candidate = self._rectangle_at_last_recorded_bar(x)
            if candidate.area > best.area:
                best = candidate
            self.recorded_bars.pop()
        return best

    def _rectangle_at_last_recorded_bar(self, x):
        assert len(self.recorded_bars) >= 2
        left = self.recorded_bars[-2] + 1
        return Rectangle(left, x - left, self.height_of_last_recorded_bar())

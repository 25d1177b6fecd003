"""Shared fixtures and helpers for histrect tests."""

import numpy as np
import pytest

import histrect


# =============================================================================
# Sample histograms with known largest-rectangle areas
# =============================================================================

# (heights, area)
KNOWN_AREAS = [
    ([2, 3], 4),  # Height 2 over both bars
    ([1, 1, 1], 3),  # Constant
    ([1, 2, 1], 3),  # Insignificant peak
    ([2, 1, 2], 3),  # Trough
    ([1, 4, 1], 4),  # Significant peak
    ([2, 1, 5, 6, 2, 3], 10),  # Height 5 over the 5 and 6
    ([7], 7),
    ([0], 0),
    ([0, 0, 0], 0),
    ([3, 0, 3], 3),
    ([1, 2, 3, 4, 5], 9),  # Strictly increasing
    ([5, 4, 3, 2, 1], 9),  # Strictly decreasing
    ([2, 2, 1, 2, 2], 5),
    ([4, 2, 0, 3, 2, 5], 6),
    ([6, 2, 5, 4, 5, 1, 6], 12),
    ([3, 3, 0, 1, 1, 1, 1], 6),
]


# =============================================================================
# Helper functions
# =============================================================================

def brute_force_area(heights):
    """Maximum of (j - i + 1) * min(heights[i..j]) over all index pairs."""
    best = 0
    for i in range(len(heights)):
        lowest = heights[i]
        for j in range(i, len(heights)):
            lowest = min(lowest, heights[j])
            best = max(best, (j - i + 1) * lowest)
    return best


def random_heights(rng, max_width=10, max_height=10):
    """Random list of heights with width in [0, max_width] and heights in [0, max_height]."""
    width = rng.integers(0, max_width + 1)
    return rng.integers(0, max_height + 1, size=width).tolist()


def assert_fits_under(heights, rect):
    """Every bar spanned by the rectangle must be at least as tall as it."""
    assert 0 <= rect.left
    assert rect.left + rect.width <= len(heights)
    for x in range(rect.left, rect.left + rect.width):
        assert heights[x] >= rect.height


class ListHistogram:
    """Minimal Histogram implementation that records every height query."""

    def __init__(self, heights):
        self.heights = list(heights)
        self.queries = []

    def width(self):
        return len(self.heights)

    def height_at(self, index):
        self.queries.append(index)
        return self.heights[index]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def rng():
    """Seeded random generator so randomized checks are reproducible."""
    return np.random.default_rng(0)


@pytest.fixture
def canonical_histogram():
    """The classic six-bar example with largest area 10."""
    return histrect.ArrayHistogram([2, 1, 5, 6, 2, 3])

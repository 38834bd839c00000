"""
Shared fixtures for the test suite.

Centralizes the scales and chords that several test files read from, so
individual tests don't need to rebuild them.
"""

import pytest

from cyclic_vectors.vectors import IntervalVector, PositionVector

# ---------------------------------------------------------------------------
# Scales
# ---------------------------------------------------------------------------


@pytest.fixture
def c_major():
    """C major as pitch positions."""
    return PositionVector((0, 2, 4, 5, 7, 9, 11))


@pytest.fixture
def c_major_steps():
    """C major as a step pattern (W W H W W W H)."""
    return IntervalVector((2, 2, 1, 2, 2, 2, 1))


@pytest.fixture
def natural_minor():
    return PositionVector((0, 2, 3, 5, 7, 8, 10))


# ---------------------------------------------------------------------------
# Chords
# ---------------------------------------------------------------------------


@pytest.fixture
def triad_steps():
    """Stacked thirds as scale-degree steps."""
    return IntervalVector((2, 2, 3))

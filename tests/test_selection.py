"""
Tests for cyclic_vectors/selection.py - the four selection meta-operators.

Validates:
    - Position/Position: degree picking, rotation as a window shift, voices
    - Position/Interval: walking by step sizes from the criterion offset
    - Interval/Interval: merging runs of source steps
    - Interval/Position: summing steps between degrees, fixed output offset
    - select() dispatch and its type guard
"""

import pytest

from cyclic_vectors.selection import (
    select,
    select_intervals_by_intervals,
    select_intervals_by_positions,
    select_positions_by_intervals,
    select_positions_by_positions,
)
from cyclic_vectors.vectors import IntervalVector, PositionVector

C_MAJOR = PositionVector((0, 2, 4, 5, 7, 9, 11))
C_MAJOR_STEPS = IntervalVector((2, 2, 1, 2, 2, 2, 1))
TRIAD_DEGREES = PositionVector((0, 2, 4))
TRIAD_STEPS = IntervalVector((2, 2, 3))

# ---------------------------------------------------------------------------
# Position source
# ---------------------------------------------------------------------------


class TestPositionsByPositions:
    @pytest.mark.parametrize(
        "rotation, expected",
        [
            (0, (0, 4, 7)),
            (1, (2, 5, 9)),
            (2, (4, 7, 11)),
            (-1, (-1, 2, 5)),
            (6, (11, 14, 17)),
        ],
    )
    def test_rotation_moves_window(self, rotation, expected):
        assert select_positions_by_positions(C_MAJOR, TRIAD_DEGREES, rotation).data == expected

    def test_extra_voice_climbs_an_octave(self):
        result = select_positions_by_positions(C_MAJOR, TRIAD_DEGREES, voices=4)
        assert result.data == (0, 4, 7, 12)

    def test_fewer_voices(self):
        assert select_positions_by_positions(C_MAJOR, TRIAD_DEGREES, voices=2).data == (0, 4)

    def test_keeps_source_settings(self):
        source = PositionVector((0, 2, 4), mod=7, user_range=7, user=True)
        result = select_positions_by_positions(source, PositionVector((0, 2)))
        assert (result.mod, result.user_range, result.user) == (7, 7, True)

    def test_empty_criterion_returns_source(self):
        assert select_positions_by_positions(C_MAJOR, PositionVector(())) is C_MAJOR


class TestPositionsByIntervals:
    def test_triad_from_steps(self):
        assert select_positions_by_intervals(C_MAJOR, TRIAD_STEPS).data == (0, 4, 7)

    def test_offset_sets_start_degree(self):
        result = select_positions_by_intervals(C_MAJOR, TRIAD_STEPS.with_offset(1))
        assert result.data == (2, 5, 9)

    def test_rotation_rotates_steps(self):
        assert select_positions_by_intervals(C_MAJOR, TRIAD_STEPS, 1).data == (0, 4, 9)

    def test_voices_extend_walk(self):
        result = select_positions_by_intervals(C_MAJOR, TRIAD_STEPS, voices=4)
        assert result.data == (0, 4, 7, 12)

    def test_empty_criterion_returns_source(self):
        assert select_positions_by_intervals(C_MAJOR, IntervalVector(())) is C_MAJOR


# ---------------------------------------------------------------------------
# Interval source
# ---------------------------------------------------------------------------


class TestIntervalsByIntervals:
    def test_merges_runs(self):
        result = select_intervals_by_intervals(C_MAJOR_STEPS, TRIAD_STEPS)
        assert result.data == (4, 3, 5)
        assert result.offset == 0

    def test_criterion_offset_advances_output_offset(self):
        result = select_intervals_by_intervals(C_MAJOR_STEPS, TRIAD_STEPS.with_offset(1))
        assert result.data == (3, 4, 5)
        assert result.offset == 2

    def test_keeps_source_mod(self):
        source = IntervalVector((1, 1, 1), mod=3)
        assert select_intervals_by_intervals(source, IntervalVector((1, 2))).mod == 3


class TestIntervalsByPositions:
    def test_triad_gaps(self):
        assert select_intervals_by_positions(C_MAJOR_STEPS, TRIAD_DEGREES).data == (4, 3, 5)

    def test_offset_from_first_degree(self):
        result = select_intervals_by_positions(C_MAJOR_STEPS, PositionVector((1, 3, 5)))
        assert result.data == (3, 4, 5)
        assert result.offset == 2

    def test_rotation_does_not_move_offset(self):
        result = select_intervals_by_positions(C_MAJOR_STEPS, TRIAD_DEGREES, 1)
        assert result.data == (3, 4, 5)
        assert result.offset == 0

    def test_empty_criterion(self):
        source = C_MAJOR_STEPS.with_offset(3)
        result = select_intervals_by_positions(source, PositionVector(()))
        assert result == IntervalVector((), offset=3, mod=12)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class TestSelect:
    def test_routes_position_position(self):
        assert select(C_MAJOR, TRIAD_DEGREES, 1).data == (2, 5, 9)

    def test_routes_position_interval(self):
        assert select(C_MAJOR, TRIAD_STEPS).data == (0, 4, 7)

    def test_routes_interval_interval(self):
        assert isinstance(select(C_MAJOR_STEPS, TRIAD_STEPS), IntervalVector)

    def test_routes_interval_position(self):
        assert select(C_MAJOR_STEPS, TRIAD_DEGREES).data == (4, 3, 5)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError, match="Position/Interval"):
            select(C_MAJOR, [0, 2, 4])

"""
Tests for cyclic_vectors/distances.py - metrics between vectors.

Validates:
    - Element-wise metrics over the shared length
    - Levenshtein edit distance
    - Voice transformation steps and their weighted total
    - Probability helpers
"""

import pytest

from cyclic_vectors.distances import (
    StepKind,
    TransformationStep,
    cumulative_distribution,
    difference,
    edit_distance,
    euclidean_distance,
    hamming_distance,
    manhattan_distance,
    normalize_distribution,
    shift_voice,
    transformation_steps,
    weighted_transformation_distance,
)
from cyclic_vectors.errors import ArithmeticPreconditionError
from cyclic_vectors.vectors import PositionVector

# ---------------------------------------------------------------------------
# Element-wise
# ---------------------------------------------------------------------------


class TestElementwise:
    def test_manhattan_on_vectors(self):
        assert manhattan_distance(PositionVector((0, 4, 7)), PositionVector((0, 5, 9))) == 3

    def test_manhattan_is_int(self):
        assert isinstance(manhattan_distance([0, 1], [2, 3]), int)

    def test_manhattan_uses_shared_length(self):
        assert manhattan_distance([0, 4, 7], [0, 4]) == 0

    def test_manhattan_empty_overlap(self):
        assert manhattan_distance([], [1, 2]) == 0

    def test_euclidean(self):
        assert euclidean_distance([0, 0], [3, 4]) == pytest.approx(5.0)

    def test_hamming_counts_differences(self):
        assert hamming_distance([0, 4, 7], [0, 3, 7, 10]) == 1

    def test_difference_is_signed(self):
        assert difference([0, 4, 7], [0, 3, 7]) == 1
        assert difference([0, 3, 7], [0, 4, 7]) == -1


class TestEditDistance:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ([0, 4, 7], [0, 4, 7], 0),
            ([0, 4, 7], [0, 3, 7, 10], 2),
            ([], [1, 2, 3], 3),
            ([1, 2, 3], [], 3),
        ],
    )
    def test_levenshtein(self, a, b, expected):
        assert edit_distance(a, b) == expected


# ---------------------------------------------------------------------------
# Transformation distance
# ---------------------------------------------------------------------------


class TestTransformationSteps:
    def test_shift_and_add(self):
        assert transformation_steps([0, 4, 7], [0, 3, 7, 10]) == [
            TransformationStep(StepKind.SHIFT, 1, -1),
            TransformationStep(StepKind.ADD, 3, 10),
        ]

    def test_remove_surplus_voices(self):
        steps = transformation_steps([0, 4, 7, 10], [0, 4])
        assert [(s.kind, s.position, s.value) for s in steps] == [
            (StepKind.REMOVE, 2, 7),
            (StepKind.REMOVE, 3, 10),
        ]

    def test_identical_chords_need_no_steps(self):
        assert transformation_steps(PositionVector((0, 4, 7)), PositionVector((0, 4, 7))) == []

    def test_weighted_distance(self):
        assert weighted_transformation_distance([0, 4, 7], [0, 3, 7, 10]) == 11
        assert weighted_transformation_distance([0, 4, 7, 10], [0, 4]) == 17

    def test_shift_voice(self):
        assert shift_voice([0, 4, 7], 1, -1) == [0, 3, 7]
        assert shift_voice([0, 4, 7], 5, 2) == [0, 4, 7]


# ---------------------------------------------------------------------------
# Distributions
# ---------------------------------------------------------------------------


class TestDistributions:
    def test_normalize(self):
        assert normalize_distribution([1, 1, 2]) == pytest.approx([0.25, 0.25, 0.5])

    def test_zero_sum_rejected(self):
        with pytest.raises(ArithmeticPreconditionError, match="sum to zero"):
            normalize_distribution([0, 0])

    def test_cumulative(self):
        assert cumulative_distribution([0.25, 0.25, 0.5]) == pytest.approx([0.25, 0.5, 1.0])

"""
cyclic_vectors/distances.py - Distance metrics between vectors.

Every metric takes two vectors (or plain integer sequences) and compares
their raw data element by element over the shorter length, except the
edit and transformation distances which account for the length difference.

    manhattan_distance     Σ |a - b|                 (the ranking default)
    euclidean_distance     sqrt(Σ (a - b)²)
    hamming_distance       count of a != b
    difference             Σ (a - b), signed
    edit_distance          Levenshtein insert/delete/substitute count
    weighted_transformation_distance
                           Σ |value| over transformation_steps(a, b)

Also the distribution helpers used to turn weights into a CDF.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np
from scipy.spatial import distance as scipy_distance

from cyclic_vectors.errors import ArithmeticPreconditionError


def _as_array(vector: Any) -> np.ndarray:
    return np.asarray(getattr(vector, "data", vector), dtype=np.int64)


def _overlap(a: Any, b: Any) -> tuple[np.ndarray, np.ndarray]:
    """Both operands truncated to the shorter length."""
    left, right = _as_array(a), _as_array(b)
    length = min(left.size, right.size)
    return left[:length], right[:length]


# ---------------------------------------------------------------------------
# Element-wise metrics
# ---------------------------------------------------------------------------


def manhattan_distance(a: Any, b: Any) -> int:
    """Sum of absolute differences over the shared length.

    Examples:
        >>> manhattan_distance(PositionVector((0, 4, 7)), PositionVector((0, 5, 9)))
        3
    """
    left, right = _overlap(a, b)
    if left.size == 0:
        return 0
    return int(round(scipy_distance.cityblock(left, right)))


def euclidean_distance(a: Any, b: Any) -> float:
    left, right = _overlap(a, b)
    if left.size == 0:
        return 0.0
    return float(scipy_distance.euclidean(left, right))


def hamming_distance(a: Any, b: Any) -> int:
    """Number of positions that differ (a count, not a proportion)."""
    left, right = _overlap(a, b)
    return int(np.count_nonzero(left != right))


def difference(a: Any, b: Any) -> int:
    """Signed sum of ``a - b``; positive when ``a`` lies higher overall."""
    left, right = _overlap(a, b)
    return int(np.sum(left - right))


def edit_distance(a: Any, b: Any) -> int:
    """Levenshtein distance over the full sequences."""
    left, right = _as_array(a), _as_array(b)
    rows, cols = left.size, right.size
    table = np.zeros((rows + 1, cols + 1), dtype=np.int64)
    table[:, 0] = np.arange(rows + 1)
    table[0, :] = np.arange(cols + 1)
    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            if left[i - 1] == right[j - 1]:
                table[i, j] = table[i - 1, j - 1]
            else:
                table[i, j] = 1 + min(table[i - 1, j], table[i, j - 1], table[i - 1, j - 1])
    return int(table[rows, cols])


# ---------------------------------------------------------------------------
# Transformation distance
# ---------------------------------------------------------------------------


class StepKind(Enum):
    """What a single transformation step does to one voice."""

    SHIFT = "shift"
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class TransformationStep:
    """One voice edit.

    SHIFT moves the voice at ``position`` by ``value``; ADD appends a voice
    with pitch ``value`` at ``position``; REMOVE drops the voice at
    ``position`` whose pitch was ``value``.
    """

    kind: StepKind
    position: int
    value: int


def shift_voice(values: Sequence[int], position: int, amount: int) -> list[int]:
    """Move one voice by ``amount``; out-of-range positions change nothing."""
    out = list(values)
    if 0 <= position < len(out):
        out[position] += amount
    return out


def transformation_steps(start: Any, end: Any) -> list[TransformationStep]:
    """Voice-by-voice edits turning ``start`` into ``end``.

    Shared voices are shifted in order; surplus target voices are added,
    surplus source voices removed.

    Examples:
        >>> [(s.kind.value, s.position, s.value) for s in transformation_steps([0, 4, 7], [0, 3, 7, 10])]
        [('shift', 1, -1), ('add', 3, 10)]
    """
    source = [int(v) for v in _as_array(start)]
    target = [int(v) for v in _as_array(end)]
    shared = min(len(source), len(target))

    steps = []
    current = source
    for i in range(shared):
        delta = target[i] - current[i]
        if delta != 0:
            steps.append(TransformationStep(StepKind.SHIFT, i, delta))
            current = shift_voice(current, i, delta)

    for offset, value in enumerate(target[shared:]):
        steps.append(TransformationStep(StepKind.ADD, len(source) + offset, value))
    for i in range(shared, len(source)):
        steps.append(TransformationStep(StepKind.REMOVE, i, source[i]))
    return steps


def weighted_transformation_distance(a: Any, b: Any) -> int:
    """Total size of the voice edits from ``a`` to ``b``.

    Shifts weigh their semitone distance; added or removed voices weigh
    their pitch value.
    """
    return sum(abs(step.value) for step in transformation_steps(a, b))


# ---------------------------------------------------------------------------
# Distributions
# ---------------------------------------------------------------------------


def normalize_distribution(weights: Sequence[int | float]) -> list[float]:
    """Scale weights so they sum to 1.

    Raises:
        ArithmeticPreconditionError: If the weights sum to zero.
    """
    values = np.asarray(weights, dtype=np.float64)
    total = values.sum()
    if total == 0:
        raise ArithmeticPreconditionError("normalize_distribution", "weights sum to zero")
    return (values / total).tolist()


def cumulative_distribution(pdf: Sequence[float]) -> list[float]:
    """Running sum of a probability distribution."""
    return np.cumsum(np.asarray(pdf, dtype=np.float64)).tolist()

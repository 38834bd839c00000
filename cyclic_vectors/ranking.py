"""
cyclic_vectors/ranking.py - Distance ranking and the complexity dial.

``calculate_distances`` scores every row of a matrix against a reference
vector and sorts the rows from closest to furthest. ``get_by_complexity``
then maps a 0-100 dial linearly onto that order:

    index = floor(complexity / 100 * (count - 1))

so complexity 0 is the closest (simplest) candidate and complexity 100 the
furthest. Nested modal-rototranslation matrices are flattened first, so the
dial spans every mode and every window at once.

Exports:
    RankedRow, RankedMatrix, DistanceFn, calculate_distances
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from numbers import Integral
from typing import Any

import numpy as np

from cyclic_vectors.config import MAX_COMPLEXITY, MIN_COMPLEXITY
from cyclic_vectors.distances import manhattan_distance
from cyclic_vectors.errors import EmptyMatrixError, ParameterRangeError
from cyclic_vectors.matrix import Matrix, NestedMatrix

logger = logging.getLogger(__name__)

DistanceFn = Callable[[Any, Any], float]


@dataclass(frozen=True)
class RankedRow:
    """A matrix row with its distance from the reference.

    Attributes:
        vector:   The candidate vector.
        tag:      The row's tag (mode, transposition or window start).
        distance: Score returned by the distance function.
        mode:     Outer mode tag for rows flattened out of a nested matrix.
    """

    vector: Any
    tag: int
    distance: float
    mode: int | None = None


@dataclass
class RankedMatrix:
    """Scored rows, optionally sorted by ascending distance."""

    rows: list[RankedRow] = field(default_factory=list)
    is_sorted: bool = False

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[RankedRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> RankedRow:
        return self.rows[index]

    def vectors(self) -> list[Any]:
        return [row.vector for row in self.rows]

    def tags(self) -> list[int]:
        return [row.tag for row in self.rows]

    def modes(self) -> list[int | None]:
        return [row.mode for row in self.rows]

    def distances(self) -> list[float]:
        return [row.distance for row in self.rows]

    # --- ordering ------------------------------------------------------------

    def sort_by_distance(self) -> RankedMatrix:
        """Stable ascending sort: rows with equal distance keep their order."""
        if self.is_sorted:
            return self
        order = np.argsort(np.asarray(self.distances(), dtype=np.float64), kind="stable")
        return RankedMatrix(rows=[self.rows[i] for i in order], is_sorted=True)

    def sort_by_mode(self) -> RankedMatrix:
        """Group rows by mode tag (stable, so distance order survives within a mode)."""
        ordered = sorted(self.rows, key=lambda row: -1 if row.mode is None else row.mode)
        return RankedMatrix(rows=ordered, is_sorted=False)

    # --- queries -------------------------------------------------------------

    def get_by_complexity(self, complexity: int) -> RankedRow:
        """Pick a row by percentile of distance.

        Args:
            complexity: Integer dial in [0, 100]. Non-integral values such as
                ``50.7`` are rejected rather than truncated.

        Returns:
            The row at ``floor(complexity / 100 * (count - 1))`` of the
            distance-sorted rows.

        Raises:
            ParameterRangeError: If complexity is not an integer in [0, 100].
            EmptyMatrixError: If there are no rows to choose from.
        """
        in_range = isinstance(complexity, Integral) and MIN_COMPLEXITY <= complexity <= MAX_COMPLEXITY
        if not in_range:
            raise ParameterRangeError("complexity", complexity, MIN_COMPLEXITY, MAX_COMPLEXITY)
        if not self.rows:
            raise EmptyMatrixError("cannot rank an empty matrix")
        ordered = self.sort_by_distance()
        index = int(complexity) * (len(ordered) - 1) // MAX_COMPLEXITY
        return ordered[index]

    def get_closest(self) -> RankedRow:
        """The first row with the smallest distance."""
        return self.get_by_complexity(MIN_COMPLEXITY)

    def get_furthest(self) -> RankedRow:
        """The last row with the largest distance."""
        return self.get_by_complexity(MAX_COMPLEXITY)


def calculate_distances(
    reference: Any,
    matrix: Matrix[Any] | NestedMatrix,
    distance_fn: DistanceFn = manhattan_distance,
    sort: bool = True,
) -> RankedMatrix:
    """Score every matrix row against ``reference``.

    Args:
        reference: Vector to compare against (usually the previous chord).
        matrix: Any generated matrix; nested matrices are flattened so each
            row keeps both its mode tag and its window tag.
        distance_fn: ``fn(reference, candidate) -> number``.
        sort: Stable-sort rows by ascending distance.

    Returns:
        RankedMatrix (possibly empty; querying an empty one raises).

    Examples:
        >>> triad = PositionVector((0, 4, 7))
        >>> calculate_distances(triad, transposition_matrix(triad)).get_closest().tag
        0
    """
    if isinstance(matrix, NestedMatrix):
        rows = [
            RankedRow(row.vector, row.tag, distance_fn(reference, row.vector), mode=mode)
            for mode, row in matrix.flatten()
        ]
    else:
        rows = [RankedRow(row.vector, row.tag, distance_fn(reference, row.vector)) for row in matrix]

    if not rows:
        logger.debug("calculate_distances: empty matrix")
    ranked = RankedMatrix(rows=rows)
    return ranked.sort_by_distance() if sort else ranked

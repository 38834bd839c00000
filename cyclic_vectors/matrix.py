"""
cyclic_vectors/matrix.py - Matrix generators: families of transformed vectors.

A matrix is an ordered list of ``(vector, tag)`` rows. Every generator
enumerates one kind of transformation exhaustively:

    modal_matrix(v)                  every mode (interval rotation), tag = rotation
    transposition_matrix(pv)         every transposition mod ``mod``, tag = semitones
    rototranslation_matrix(pv, c)    every window start in [c - n, c + n], tag = start
    modal_selection(src, crit, d)    a chord per mode of the criterion, tag = root degree
    modal_rototranslation(sel)       every window of every modal chord (nested)

Filters keep only the rows that contain a given set of notes.

Exports:
    MatrixRow, Matrix, NestedRow, NestedMatrix,
    modal_matrix, transposition_matrix, rototranslation_matrix,
    modal_selection, modal_rototranslation,
    filter_modal_matrix, filter_transposition_matrix,
    filter_modal_matrix_in_place, filter_transposition_matrix_in_place
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from cyclic_vectors.arithmetic import euclidean_mod
from cyclic_vectors.conversions import intervals_to_positions, positions_to_intervals
from cyclic_vectors.selection import select_positions_by_intervals
from cyclic_vectors.vectors import IntervalVector, PositionVector

logger = logging.getLogger(__name__)

T = TypeVar("T", PositionVector, IntervalVector)

# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MatrixRow(Generic[T]):
    """One generated vector and the index that produced it."""

    vector: T
    tag: int


@dataclass
class Matrix(Generic[T]):
    """Ordered rows of one generator's output.

    Attributes:
        rows:   Generated rows, in generation order.
        kind:   Generator name ("modal", "transposition", ...).
        center: Window centre, kept for rototranslation matrices.
    """

    rows: list[MatrixRow[T]] = field(default_factory=list)
    kind: str = "matrix"
    center: int | None = None

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[MatrixRow[T]]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> MatrixRow[T]:
        return self.rows[index]

    def vectors(self) -> list[T]:
        return [row.vector for row in self.rows]

    def tags(self) -> list[int]:
        return [row.tag for row in self.rows]


@dataclass(frozen=True)
class NestedRow:
    """A rototranslation matrix of one modal chord, tagged with its mode."""

    matrix: Matrix[PositionVector]
    tag: int


@dataclass
class NestedMatrix:
    """One rototranslation matrix per row of a modal selection."""

    rows: list[NestedRow] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[NestedRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> NestedRow:
        return self.rows[index]

    def total_vector_count(self) -> int:
        return sum(len(row.matrix) for row in self.rows)

    def flatten(self) -> list[tuple[int, MatrixRow[PositionVector]]]:
        """Every inner row paired with its mode tag, in nesting order."""
        return [(outer.tag, inner) for outer in self.rows for inner in outer.matrix]


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


def modal_matrix(vector: T) -> Matrix[T]:
    """All modes of a scale or chord.

    Interval input: row ``i`` is ``vector.rotate(i)``. Position input is
    rotated in interval space and walked back, so every mode starts on the
    original first position.

    Examples:
        >>> [row.vector.data for row in modal_matrix(IntervalVector((2, 2, 3)))]
        [(2, 2, 3), (2, 3, 2), (3, 2, 2)]
    """
    if isinstance(vector, PositionVector):
        steps = positions_to_intervals(vector)
        rows = [
            MatrixRow(intervals_to_positions(steps.rotate(i)), i) for i in range(len(steps))
        ]
    else:
        rows = [MatrixRow(vector.rotate(i), i) for i in range(len(vector))]
    logger.debug("modal_matrix: %d modes", len(rows))
    return Matrix(rows=rows, kind="modal")


def transposition_matrix(vector: PositionVector) -> Matrix[PositionVector]:
    """All ``mod`` transpositions, reduced into ``[0, mod)`` and sorted.

    Examples:
        >>> transposition_matrix(PositionVector((0, 4, 7)))[5].vector.data
        (0, 5, 9)
    """
    rows = [MatrixRow(((vector + i) % vector.mod).sorted(), i) for i in range(vector.mod)]
    return Matrix(rows=rows, kind="transposition")


def rototranslation_matrix(vector: PositionVector, center: int = 0) -> Matrix[PositionVector]:
    """Every window ``vector.roto_translate(i)`` for ``i`` in ``[center - n, center + n]``.

    Produces ``2n + 1`` rows (none for an empty vector); windows below zero
    read down an octave, windows past ``n`` read up.
    """
    size = len(vector)
    if size == 0:
        return Matrix(kind="rototranslation", center=center)
    rows = [
        MatrixRow(vector.roto_translate(i), i) for i in range(center - size, center + size + 1)
    ]
    return Matrix(rows=rows, kind="rototranslation", center=center)


def _criterion_steps(criterion: PositionVector | IntervalVector, source_size: int) -> IntervalVector:
    """Interval form of a criterion; position criteria are degree sets."""
    if isinstance(criterion, IntervalVector):
        return criterion
    return positions_to_intervals(PositionVector(criterion.data, mod=max(source_size, 1)))


def modal_selection(
    source: T,
    criterion: PositionVector | IntervalVector,
    degree: int = 0,
) -> Matrix[T]:
    """Select one chord from ``source`` per mode of ``criterion``.

    Mode ``i`` of the criterion is walked from scale degree ``degree``. The
    tag is the scale degree the selected chord's root sits on:
    ``(degree - sum(criterion[:i])) mod len(source)``.

    Args:
        source: Scale as positions or intervals.
        criterion: Chord shape as degree steps (intervals) or degree set.
        degree: Scale degree every selection starts from.

    Returns:
        Matrix of chords, of the same vector kind as ``source``.

    Examples:
        >>> c_major = PositionVector((0, 2, 4, 5, 7, 9, 11))
        >>> m = modal_selection(c_major, IntervalVector((2, 2, 3)))
        >>> [(row.vector.data, row.tag) for row in m]
        [((0, 4, 7), 0), ((0, 4, 9), 5), ((0, 5, 9), 3)]
    """
    size = len(source)
    steps = _criterion_steps(criterion, size)
    positions = source if isinstance(source, PositionVector) else intervals_to_positions(source)

    rows = []
    prefix = 0
    for mode in modal_matrix(steps):
        walk = mode.vector.with_offset(degree + mode.vector.offset)
        chord = select_positions_by_intervals(positions, walk)
        if isinstance(source, IntervalVector):
            chord = positions_to_intervals(chord)
        tag = euclidean_mod(degree - prefix, size) if size else 0
        rows.append(MatrixRow(chord, tag))
        prefix += steps.element(mode.tag)
    logger.debug("modal_selection: %d chords from %d-note source", len(rows), size)
    return Matrix(rows=rows, kind="modal_selection")


def modal_rototranslation(selection: Matrix[T]) -> NestedMatrix:
    """A centre-0 rototranslation matrix for every chord of a modal selection.

    Interval chords are walked to positions first.
    """
    nested = NestedMatrix()
    for row in selection:
        chord = row.vector
        if isinstance(chord, IntervalVector):
            chord = intervals_to_positions(chord)
        nested.rows.append(NestedRow(rototranslation_matrix(chord, 0), row.tag))
    logger.debug(
        "modal_rototranslation: %d modes, %d windows", len(nested), nested.total_vector_count()
    )
    return nested


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


def _pitch_classes(vector: PositionVector | IntervalVector) -> tuple[set[int], int]:
    positions = vector if isinstance(vector, PositionVector) else intervals_to_positions(vector)
    return {euclidean_mod(v, positions.mod) for v in positions.data}, positions.mod


def _contains_all(vector: PositionVector | IntervalVector, notes: Iterable[int]) -> bool:
    present, mod = _pitch_classes(vector)
    return all(euclidean_mod(note, mod) in present for note in notes)


def _filter_rows(matrix: Matrix[T], notes: Iterable[int]) -> list[MatrixRow[T]]:
    wanted = list(notes)
    if not wanted:
        return list(matrix.rows)
    return [row for row in matrix.rows if _contains_all(row.vector, wanted)]


def filter_modal_matrix(matrix: Matrix[T], notes: Iterable[int]) -> Matrix[T]:
    """Rows whose notes (mod the row's mod) include every one of ``notes``.

    Empty ``notes`` keeps every row. The input matrix is not modified.

    Examples:
        >>> m = modal_selection(PositionVector((0, 2, 4, 5, 7, 9, 11)), IntervalVector((2, 2, 3)))
        >>> [row.tag for row in filter_modal_matrix(m, [9])]
        [5, 3]
    """
    return Matrix(rows=_filter_rows(matrix, notes), kind=matrix.kind, center=matrix.center)


def filter_transposition_matrix(
    matrix: Matrix[PositionVector], notes: Iterable[int]
) -> Matrix[PositionVector]:
    """Transpositions that contain every one of ``notes`` (MIDI numbers allowed)."""
    return Matrix(rows=_filter_rows(matrix, notes), kind=matrix.kind, center=matrix.center)


def filter_modal_matrix_in_place(matrix: Matrix[T], notes: Iterable[int]) -> None:
    matrix.rows[:] = _filter_rows(matrix, notes)


def filter_transposition_matrix_in_place(
    matrix: Matrix[PositionVector], notes: Iterable[int]
) -> None:
    matrix.rows[:] = _filter_rows(matrix, notes)

"""
cyclic_vectors/conversions.py - Moving between the three representations.

    positions_to_intervals([0, 4, 7])           → [4, 3, 5] offset 0
    intervals_to_positions([4, 3, 5] offset 0)  → [0, 4, 7]
    positions_to_binary([0, 4, 7])              → [1,0,0,0,1,0,0,1,0,0,0,0]
    binary_to_positions(...)                    → [0, 4, 7]

The interval view stores one interval per position: the last one is the wrap
interval back to the first position one period up. Walking the intervals
back to positions therefore stops one step early.

Exports:
    positions_to_intervals, intervals_to_positions,
    positions_to_binary, binary_to_positions,
    Vectors  (the three views kept in sync)
"""

from __future__ import annotations

from dataclasses import dataclass

from cyclic_vectors.arithmetic import euclidean_mod
from cyclic_vectors.config import DEFAULT_MOD
from cyclic_vectors.vectors import BinaryVector, IntervalVector, PositionVector

# ---------------------------------------------------------------------------
# Pairwise conversions
# ---------------------------------------------------------------------------


def positions_to_intervals(positions: PositionVector) -> IntervalVector:
    """Distances between consecutive positions, wrap interval included.

    Args:
        positions: Any position vector.

    Returns:
        IntervalVector with ``len(positions)`` intervals, offset = first
        position, same mod. Empty input gives empty intervals at offset 0.

    Examples:
        >>> positions_to_intervals(PositionVector((0, 2, 4, 5, 7, 9, 11))).data
        (2, 2, 1, 2, 2, 2, 1)
    """
    if not positions.data:
        return IntervalVector((), offset=0, mod=positions.mod)
    steps = tuple(positions.element(i + 1) - positions.element(i) for i in range(len(positions)))
    return IntervalVector(steps, offset=positions.element(0), mod=positions.mod)


def intervals_to_positions(intervals: IntervalVector) -> PositionVector:
    """Walk from the offset, accumulating all intervals but the wrap interval.

    Empty intervals give the single position ``[offset]``. An interval vector
    with mod 0 produces positions in the default 12-space.
    """
    mod = intervals.mod or DEFAULT_MOD
    current = intervals.offset
    walked = [current]
    for step in intervals.data[:-1]:
        current += step
        walked.append(current)
    return PositionVector(tuple(walked), mod=mod)


def positions_to_binary(positions: PositionVector) -> BinaryVector:
    """Occupancy pattern over one range.

    Each position sets the bit at its distance from the lowest position,
    reduced into ``[0, range)``. The pattern's offset is the lowest position
    and its mod is the range.
    """
    if not positions.data:
        return BinaryVector((), offset=0, mod=positions.mod)
    span = positions.range
    bits = [0] * span
    low = min(positions.data)
    for value in positions.data:
        bits[euclidean_mod(value - low, span)] = 1
    return BinaryVector(tuple(bits), offset=low, mod=span)


def binary_to_positions(binary: BinaryVector, mod: int | None = None) -> PositionVector:
    """Indices of the set bits, shifted by the pattern's offset.

    Args:
        binary: Presence pattern.
        mod: Modulus of the resulting positions (default: the pattern's mod).

    Returns:
        PositionVector of pulse positions; a silent pattern gives ``[offset]``.
    """
    walked = tuple(i + binary.offset for i in binary.pulse_indices())
    if not walked:
        walked = (binary.offset,)
    return PositionVector(walked, mod=mod or binary.mod)


# ---------------------------------------------------------------------------
# Synchronised triple
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Vectors:
    """The three views of one object, rebuilt together on every change.

    Build with ``from_positions`` / ``from_intervals`` / ``from_binary``; each
    operation edits one view and re-derives the other two from it.
    """

    positions: PositionVector
    intervals: IntervalVector
    binary: BinaryVector
    mod: int = DEFAULT_MOD

    @classmethod
    def from_positions(cls, positions: PositionVector) -> Vectors:
        return cls(
            positions=positions,
            intervals=positions_to_intervals(positions),
            binary=positions_to_binary(positions),
            mod=positions.mod,
        )

    @classmethod
    def from_intervals(cls, intervals: IntervalVector) -> Vectors:
        positions = intervals_to_positions(intervals)
        return cls(
            positions=positions,
            intervals=intervals,
            binary=positions_to_binary(positions),
            mod=positions.mod,
        )

    @classmethod
    def from_binary(cls, binary: BinaryVector, mod: int | None = None) -> Vectors:
        mod = mod or binary.mod
        positions = binary_to_positions(binary, mod)
        return cls(
            positions=positions,
            intervals=positions_to_intervals(positions),
            binary=binary,
            mod=mod,
        )

    # --- position edits ------------------------------------------------------

    def transpose(self, amount: int) -> Vectors:
        return Vectors.from_positions(self.positions + amount)

    def multiply_positions(self, scalar: int) -> Vectors:
        return Vectors.from_positions(self.positions * scalar)

    def negative(self, axis: int = 10) -> Vectors:
        return Vectors.from_positions(self.positions.negative(axis))

    def rotate_positions(self, amount: int) -> Vectors:
        return Vectors.from_positions(self.positions.rotate(amount))

    def roto_translate(self, start: int, length: int = 0) -> Vectors:
        return Vectors.from_positions(self.positions.roto_translate(start, length))

    def invert_positions(self, axis: int, sort_output: bool = True) -> Vectors:
        return Vectors.from_positions(self.positions.inversion(axis, sort_output))

    def complement(self) -> Vectors:
        return Vectors.from_positions(self.positions.complement())

    # --- interval edits ------------------------------------------------------

    def add_to_intervals(self, amount: int) -> Vectors:
        return Vectors.from_intervals(self.intervals + amount)

    def multiply_intervals(self, scalar: int) -> Vectors:
        return Vectors.from_intervals(self.intervals * scalar)

    def rotate_intervals(self, amount: int) -> Vectors:
        return Vectors.from_intervals(self.intervals.rotate(amount))

    def mode(self, degree: int) -> Vectors:
        """The mode starting on ``degree`` (interval rotation, same offset)."""
        return self.rotate_intervals(degree)

    def reverse_intervals(self) -> Vectors:
        return Vectors.from_intervals(self.intervals.reverse())

    def invert_intervals(self, axis: int) -> Vectors:
        return Vectors.from_intervals(self.intervals.inversion(axis))

    # --- binary edits --------------------------------------------------------

    def rotate_binary(self, amount: int) -> Vectors:
        return Vectors.from_binary(self.binary.rotate(amount), self.mod)

    def complement_binary(self) -> Vectors:
        return Vectors.from_binary(self.binary.complement(), self.mod)

    def stretch_binary(self, factor: int) -> Vectors:
        stretched = self.binary.stretch(factor)
        return Vectors.from_binary(stretched, stretched.mod)

    def compress_binary(self, divisor: int) -> Vectors:
        compressed = self.binary.compress(divisor)
        return Vectors.from_binary(compressed, compressed.mod)

    def __or__(self, other: Vectors) -> Vectors:
        return Vectors.from_binary(self.binary | other.binary, self.mod)

    def __and__(self, other: Vectors) -> Vectors:
        return Vectors.from_binary(self.binary & other.binary, self.mod)

    def __xor__(self, other: Vectors) -> Vectors:
        return Vectors.from_binary(self.binary ^ other.binary, self.mod)

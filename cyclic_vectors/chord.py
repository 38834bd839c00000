"""
cyclic_vectors/chord.py - Chord construction from a scale and a criterion.

A chord is a selection from a scale, optionally inverted and reflected.
All knobs live in one ``ChordParams`` record instead of a chain of default
arguments:

    build_chord(c_major, PositionVector((0, 2, 4)))                   → C  [0, 4, 7]
    build_chord(c_major, PositionVector((0, 2, 4)), ChordParams(shift=1))
                                                                      → Dm [2, 5, 9]

Interval scales are walked to positions, selected, and converted back, so
the result keeps the scale's representation.

Exports:
    Chord, build_chord
"""

from __future__ import annotations

from dataclasses import dataclass

from cyclic_vectors.config import DEFAULT_CHORD_PARAMS, ChordParams
from cyclic_vectors.conversions import intervals_to_positions, positions_to_intervals
from cyclic_vectors.selection import select_positions_by_intervals, select_positions_by_positions
from cyclic_vectors.vectors import IntervalVector, PositionVector


@dataclass(frozen=True)
class Chord:
    """A built chord, in the representation of the scale it came from."""

    result: PositionVector | IntervalVector

    @property
    def is_positions(self) -> bool:
        return isinstance(self.result, PositionVector)

    def to_positions(self) -> PositionVector:
        if isinstance(self.result, PositionVector):
            return self.result
        return intervals_to_positions(self.result)

    def to_intervals(self) -> IntervalVector:
        if isinstance(self.result, IntervalVector):
            return self.result
        return positions_to_intervals(self.result)


def _select_from_positions(
    scale: PositionVector,
    criterion: PositionVector | IntervalVector,
    params: ChordParams,
    keep_offset: bool,
) -> PositionVector:
    if isinstance(criterion, PositionVector):
        degrees = criterion + params.shift
        return select_positions_by_positions(scale, degrees, params.rotation, params.voices)
    start = params.shift + (criterion.offset if keep_offset else 0)
    return select_positions_by_intervals(
        scale, criterion.with_offset(start), params.rotation, params.voices
    )


def build_chord(
    scale: PositionVector | IntervalVector,
    criterion: PositionVector | IntervalVector,
    params: ChordParams = DEFAULT_CHORD_PARAMS,
) -> Chord:
    """Select a chord from ``scale`` and apply the optional transformations.

    Steps:
        1. Select with the criterion moved to degree ``params.shift``.
        2. If ``params.invert``: position results are inverted around element
           ``params.axis`` and sorted; interval results are reflected around
           boundary ``params.axis``.
        3. If ``params.negative``: position results take the negative harmony
           around ``params.negative_axis``; interval results are mirrored left
           of ``params.mirror_position``.

    Args:
        scale: Scale as positions or intervals.
        criterion: Degree set (positions) or degree steps (intervals).
        params: Construction parameters.

    Returns:
        Chord wrapping a PositionVector for position scales, an
        IntervalVector for interval scales.

    Examples:
        >>> c_major = PositionVector((0, 2, 4, 5, 7, 9, 11))
        >>> build_chord(c_major, IntervalVector((2, 2, 3)), ChordParams(shift=4)).result.data
        (7, 11, 14)
    """
    if isinstance(scale, PositionVector):
        positions = _select_from_positions(scale, criterion, params, keep_offset=False)
        if params.invert:
            positions = positions.inversion(params.axis, sort_output=True)
        if params.negative:
            positions = positions.negative(params.negative_axis)
        return Chord(positions)

    walked = intervals_to_positions(scale)
    steps = positions_to_intervals(_select_from_positions(walked, criterion, params, keep_offset=True))
    if params.invert:
        steps = steps.inversion(params.axis)
    if params.negative:
        steps = steps.single_mirror(params.mirror_position, left=True)
    return Chord(steps)

"""
cyclic_vectors/quantize.py - Scale quantization and melody transposition.

``quantize`` snaps a pitch class onto a scale. ``transpose_melody`` maps a
melody from one scale and root to another by scale degree, so a C-major
tune becomes its A-minor counterpart degree for degree:

    transpose_melody(C_MAJOR, NATURAL_MINOR, 0, 9, [60, 64, 67]).notes.data
        → (69, 72, 76)

Notes outside the input scale are quantized to a neighbouring degree; if
that would repeat the previous output note while the input moved, the
opposite neighbour is used so the melodic motion survives.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from cyclic_vectors.arithmetic import euclidean_mod
from cyclic_vectors.errors import ValidationError
from cyclic_vectors.vectors import PositionVector


@dataclass(frozen=True)
class TransposedMelody:
    """Result of ``transpose_melody``.

    Attributes:
        degrees: Input-scale degree of every note (mod = input scale size).
        notes:   Transposed notes (same mod and flags as the input scale).
    """

    degrees: PositionVector
    notes: PositionVector


def quantize(note: int, scale: Sequence[int], left: bool = True) -> int:
    """Snap ``note`` to the nearest scale member below (left) or above.

    ``scale`` must be ascending. Notes below the lowest member snap up and
    notes above the highest snap down, whatever ``left`` says.

    Raises:
        ValidationError: If the scale is empty.

    Examples:
        >>> quantize(6, [0, 2, 4, 5, 7, 9, 11])
        5
        >>> quantize(6, [0, 2, 4, 5, 7, 9, 11], left=False)
        7
    """
    if not scale:
        raise ValidationError("cannot quantize to an empty scale")
    lower = None
    upper = None
    for member in scale:
        if member <= note:
            lower = member
        if member >= note:
            upper = member
            break
    if lower is None:
        return upper
    if upper is None:
        return lower
    return lower if left else upper


def _degree_of(pitch_class: int, scale: Sequence[int], left: bool) -> int:
    """Index of the scale member ``pitch_class`` snaps to."""
    return list(scale).index(quantize(pitch_class, scale, left))


def transpose_melody(
    input_scale: PositionVector,
    output_scale: PositionVector,
    in_root: int,
    out_root: int,
    notes: Sequence[int],
) -> TransposedMelody:
    """Carry a melody across scales by scale degree.

    Args:
        input_scale: Scale the melody is written in (pitch classes from its root).
        output_scale: Scale to map onto.
        in_root: Root of the input melody (e.g. 0 for C, or a MIDI number).
        out_root: Root of the output melody.
        notes: Melody notes (MIDI numbers or pitch positions).

    Returns:
        TransposedMelody with the degree sequence and the new notes. Octave
        displacement relative to ``in_root`` is preserved.

    Raises:
        ValidationError: If either scale is empty.
    """
    if not input_scale.data or not output_scale.data:
        raise ValidationError("transpose_melody needs non-empty input and output scales")

    mod = input_scale.mod
    source = input_scale.data
    target = output_scale.data

    degrees: list[int] = []
    out_notes: list[int] = []
    for i, note in enumerate(notes):
        pitch_class = euclidean_mod(note - in_root, mod)
        octave = (note - in_root) // mod
        degree = _degree_of(pitch_class, source, left=True)
        out_note = target[degree % len(target)] + out_root + octave * mod

        # a moving line must not collapse onto the previous note
        if out_notes and out_notes[-1] == out_note and i > 0 and notes[i] != notes[i - 1]:
            degree = _degree_of(pitch_class, source, left=False)
            out_note = target[degree % len(target)] + out_root + octave * mod

        degrees.append(degree)
        out_notes.append(out_note)

    return TransposedMelody(
        degrees=PositionVector(tuple(degrees), mod=len(source)),
        notes=replace(input_scale, data=tuple(out_notes)),
    )

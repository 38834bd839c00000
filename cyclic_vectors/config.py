"""
Configuration constants and parameter records for the vector engine.

Immutable config objects decouple chord construction parameters from function
signatures, so standard settings can be defined once and reused.
"""

from __future__ import annotations

from dataclasses import dataclass

from cyclic_vectors.errors import ValidationError

# Pitch-class space: 12 semitones per octave
DEFAULT_MOD: int = 12

# Binary patterns default to a four-step bar
DEFAULT_BINARY_MOD: int = 4

# Complexity is a percentile over a ranked matrix
MIN_COMPLEXITY: int = 0
MAX_COMPLEXITY: int = 100

# Default reflection point for negative harmony (position results)
DEFAULT_NEGATIVE_AXIS: int = 10


@dataclass(frozen=True)
class ChordParams:
    """
    Parameters for ``build_chord``.

    Attributes:
        shift: Scale degree the selection starts from. Added to position
            criteria, used as the offset of interval criteria.
        rotation: Criterion rotation passed to the selection operator.
        voices: Number of output voices; 0 keeps the criterion length.
        invert: Apply an inversion after selecting.
        axis: Inversion axis (element index for positions, boundary for
            intervals).
        negative: Apply negative harmony (positions) or a left single
            mirror (intervals) as the last step.
        negative_axis: Reflection axis of the negative harmony.
        mirror_position: Boundary of the left mirror applied to interval
            results.

    Example:
        >>> params = ChordParams(shift=1, voices=4)
        >>> build_chord(c_major, triad, params)
    """

    shift: int = 0
    rotation: int = 0
    voices: int = 0
    invert: bool = False
    axis: int = 0
    negative: bool = False
    negative_axis: int = DEFAULT_NEGATIVE_AXIS
    mirror_position: int = 0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.voices < 0:
            raise ValidationError(f"voices must be non-negative, got {self.voices}")


DEFAULT_CHORD_PARAMS = ChordParams()
"""Root-position selection: no shift, no rotation, criterion-length voicing."""

FOUR_VOICE_PARAMS = ChordParams(voices=4)
"""Four voices: the criterion is read cyclically, so a triad doubles its root an octave up."""

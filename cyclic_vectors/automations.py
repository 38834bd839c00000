"""
cyclic_vectors/automations.py - Generative choices driven by the complexity dial.

Each automation builds a candidate matrix, ranks it against a reference and
picks one row by complexity (0 = closest, 100 = furthest):

    degree_automation           modal chords on a degree, every window of each
    voice_leading_automation    windows of one target chord
    modal_interchange_automation
                                modes of a scale that contain given notes
    modulation_automation       transpositions of a scale that contain given notes

The chain helpers voice-lead whole progressions, each chord ranked against
its neighbour's result.

Exports:
    degree_automation, voice_leading_automation,
    modal_interchange_automation, modulation_automation,
    normalize_complexities, voice_leading_per_reference,
    voice_leading_from_reference, forward_voice_leading,
    backward_voice_leading
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from cyclic_vectors.errors import EmptyMatrixError, ValidationError
from cyclic_vectors.matrix import (
    filter_modal_matrix,
    filter_transposition_matrix,
    modal_matrix,
    modal_rototranslation,
    modal_selection,
    rototranslation_matrix,
    transposition_matrix,
)
from cyclic_vectors.ranking import RankedRow, calculate_distances
from cyclic_vectors.vectors import IntervalVector, PositionVector

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Single choices
# ---------------------------------------------------------------------------


def degree_automation(
    scale: PositionVector,
    criterion: IntervalVector,
    degree: int,
    reference: PositionVector,
    complexity: int = 0,
) -> RankedRow:
    """Pick a chord on ``degree`` across every mode and window of the criterion.

    Returns:
        RankedRow whose ``mode`` is the chord's root degree and whose ``tag``
        is the window start.
    """
    candidates = modal_rototranslation(modal_selection(scale, criterion, degree))
    return calculate_distances(reference, candidates).get_by_complexity(complexity)


def voice_leading_automation(
    reference: PositionVector,
    target: PositionVector,
    complexity: int = 0,
) -> RankedRow:
    """Pick the window (inversion/register) of ``target`` nearest ``reference``.

    Examples:
        >>> voice_leading_automation(PositionVector((0, 4, 7)), PositionVector((5, 9, 12))).vector.data
        (0, 5, 9)
    """
    candidates = rototranslation_matrix(target, 0)
    return calculate_distances(reference, candidates).get_by_complexity(complexity)


def modal_interchange_automation(
    scale: PositionVector,
    notes: Iterable[int],
    complexity: int = 0,
) -> RankedRow:
    """Pick a mode of ``scale`` containing every note of ``notes``.

    Raises:
        EmptyMatrixError: If no mode contains all the notes.
    """
    candidates = filter_modal_matrix(modal_matrix(scale), notes)
    return calculate_distances(scale, candidates).get_by_complexity(complexity)


def modulation_automation(
    scale: PositionVector,
    notes: Iterable[int],
    complexity: int = 0,
) -> RankedRow:
    """Pick a transposition of ``scale`` containing every note of ``notes``.

    Raises:
        EmptyMatrixError: If no transposition contains all the notes.
    """
    candidates = filter_transposition_matrix(transposition_matrix(scale), notes)
    return calculate_distances(scale, candidates).get_by_complexity(complexity)


# ---------------------------------------------------------------------------
# Progressions
# ---------------------------------------------------------------------------


def normalize_complexities(complexities: Sequence[int], size: int) -> list[int]:
    """Fit a complexity list to ``size`` entries.

    Empty → all zeros; shorter → repeated cyclically; longer → truncated.
    """
    if not complexities:
        return [0] * size
    return [complexities[i % len(complexities)] for i in range(size)]


def voice_leading_per_reference(
    targets: Sequence[PositionVector],
    references: Sequence[PositionVector],
    complexities: Sequence[int] = (),
) -> list[PositionVector]:
    """Voice-lead each target against its own reference.

    Raises:
        ValidationError: If targets and references differ in length.
    """
    if len(targets) != len(references):
        raise ValidationError(
            f"targets ({len(targets)}) and references ({len(references)}) must have the same length"
        )
    dial = normalize_complexities(complexities, len(targets))
    return [
        voice_leading_automation(reference, target, level).vector
        for target, reference, level in zip(targets, references, dial)
    ]


def voice_leading_from_reference(
    targets: Sequence[PositionVector],
    reference: PositionVector,
    complexities: Sequence[int] = (),
) -> list[PositionVector]:
    """Voice-lead every target against one shared reference."""
    dial = normalize_complexities(complexities, len(targets))
    return [
        voice_leading_automation(reference, target, level).vector
        for target, level in zip(targets, dial)
    ]


def forward_voice_leading(
    targets: Sequence[PositionVector],
    complexities: Sequence[int] = (),
) -> list[PositionVector]:
    """Voice-lead a progression left to right.

    The first chord is kept; every later chord is ranked against the
    previous result.

    Raises:
        EmptyMatrixError: If ``targets`` is empty.
    """
    if not targets:
        raise EmptyMatrixError("forward_voice_leading needs at least one chord")
    result = [targets[0]]
    dial = normalize_complexities(complexities, len(targets) - 1)
    for target, level in zip(targets[1:], dial):
        result.append(voice_leading_automation(result[-1], target, level).vector)
    logger.debug("forward_voice_leading: %d chords", len(result))
    return result


def backward_voice_leading(
    targets: Sequence[PositionVector],
    complexities: Sequence[int] = (),
) -> list[PositionVector]:
    """Voice-lead a progression right to left; the last chord is kept.

    ``complexities[i]`` applies to chord ``i`` (ranked against chord ``i + 1``).

    Raises:
        EmptyMatrixError: If ``targets`` is empty.
    """
    if not targets:
        raise EmptyMatrixError("backward_voice_leading needs at least one chord")
    result = list(targets)
    dial = normalize_complexities(complexities, len(targets) - 1)
    for i in range(len(targets) - 2, -1, -1):
        result[i] = voice_leading_automation(result[i + 1], targets[i], dial[i]).vector
    logger.debug("backward_voice_leading: %d chords", len(result))
    return result

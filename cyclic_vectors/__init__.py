"""
cyclic_vectors/ - Cyclic vector algebra for pitch-class sets and rhythms.

Exports:
    Vectors:     PositionVector, IntervalVector, BinaryVector, RangeMode
    Conversions: positions_to_intervals, intervals_to_positions,
                 positions_to_binary, binary_to_positions, Vectors
    Selection:   select and its four typed variants
    Matrices:    modal_matrix, transposition_matrix, rototranslation_matrix,
                 modal_selection, modal_rototranslation, filters
    Ranking:     calculate_distances, RankedMatrix, RankedRow
    Chords:      build_chord, Chord, ChordParams
    Automations: degree / voice-leading / modal-interchange / modulation
"""

from cyclic_vectors.arithmetic import DivisionResult, euclidean_division, euclidean_mod, gcd, lcm
from cyclic_vectors.automations import (
    backward_voice_leading,
    degree_automation,
    forward_voice_leading,
    modal_interchange_automation,
    modulation_automation,
    normalize_complexities,
    voice_leading_automation,
    voice_leading_from_reference,
    voice_leading_per_reference,
)
from cyclic_vectors.chord import Chord, build_chord
from cyclic_vectors.config import DEFAULT_CHORD_PARAMS, DEFAULT_MOD, ChordParams
from cyclic_vectors.conversions import (
    Vectors,
    binary_to_positions,
    intervals_to_positions,
    positions_to_binary,
    positions_to_intervals,
)
from cyclic_vectors.distances import (
    difference,
    edit_distance,
    euclidean_distance,
    hamming_distance,
    manhattan_distance,
    transformation_steps,
    weighted_transformation_distance,
)
from cyclic_vectors.errors import (
    ArithmeticPreconditionError,
    CyclicVectorError,
    EmptyMatrixError,
    ParameterRangeError,
    ValidationError,
)
from cyclic_vectors.matrix import (
    Matrix,
    MatrixRow,
    NestedMatrix,
    filter_modal_matrix,
    filter_modal_matrix_in_place,
    filter_transposition_matrix,
    filter_transposition_matrix_in_place,
    modal_matrix,
    modal_rototranslation,
    modal_selection,
    rototranslation_matrix,
    transposition_matrix,
)
from cyclic_vectors.quantize import TransposedMelody, quantize, transpose_melody
from cyclic_vectors.ranking import RankedMatrix, RankedRow, calculate_distances
from cyclic_vectors.selection import (
    select,
    select_intervals_by_intervals,
    select_intervals_by_positions,
    select_positions_by_intervals,
    select_positions_by_positions,
)
from cyclic_vectors.vectors import BinaryVector, IntervalVector, PositionVector, RangeMode

__all__ = [
    # Arithmetic
    "DivisionResult",
    "euclidean_division",
    "euclidean_mod",
    "gcd",
    "lcm",
    # Vectors
    "PositionVector",
    "IntervalVector",
    "BinaryVector",
    "RangeMode",
    # Conversions
    "positions_to_intervals",
    "intervals_to_positions",
    "positions_to_binary",
    "binary_to_positions",
    "Vectors",
    # Selection
    "select",
    "select_positions_by_positions",
    "select_positions_by_intervals",
    "select_intervals_by_intervals",
    "select_intervals_by_positions",
    # Matrices
    "Matrix",
    "MatrixRow",
    "NestedMatrix",
    "modal_matrix",
    "transposition_matrix",
    "rototranslation_matrix",
    "modal_selection",
    "modal_rototranslation",
    "filter_modal_matrix",
    "filter_transposition_matrix",
    "filter_modal_matrix_in_place",
    "filter_transposition_matrix_in_place",
    # Distances
    "manhattan_distance",
    "euclidean_distance",
    "hamming_distance",
    "edit_distance",
    "difference",
    "transformation_steps",
    "weighted_transformation_distance",
    # Ranking
    "calculate_distances",
    "RankedMatrix",
    "RankedRow",
    # Chords
    "Chord",
    "ChordParams",
    "DEFAULT_CHORD_PARAMS",
    "DEFAULT_MOD",
    "build_chord",
    # Automations
    "degree_automation",
    "voice_leading_automation",
    "modal_interchange_automation",
    "modulation_automation",
    "normalize_complexities",
    "voice_leading_per_reference",
    "voice_leading_from_reference",
    "forward_voice_leading",
    "backward_voice_leading",
    # Quantization
    "quantize",
    "transpose_melody",
    "TransposedMelody",
    # Errors
    "CyclicVectorError",
    "ArithmeticPreconditionError",
    "ValidationError",
    "ParameterRangeError",
    "EmptyMatrixError",
]

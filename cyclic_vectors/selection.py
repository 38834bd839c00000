"""
cyclic_vectors/selection.py - Selection meta-operators.

A selection reads a sub-vector out of a source vector, steered by a
criterion vector. Position criteria name scale degrees; interval criteria
name step sizes between degrees. Both are read cyclically, so criteria may
reach past the end of the source (reading continues one period up).

    source   criterion   result
    Position Position    source positions at the criterion degrees
    Position Interval    source positions reached by stepping the criterion
    Interval Interval    source intervals summed over criterion-sized spans
    Interval Position    source intervals summed between criterion degrees

Every operator takes ``criterion_rotation`` (shift the read window by whole
degrees / rotate the step pattern) and ``voices`` (fix the output length;
0 keeps the criterion length).

Exports:
    select_positions_by_positions
    select_positions_by_intervals
    select_intervals_by_intervals
    select_intervals_by_positions
    select   (dispatch on the argument types)
"""

from __future__ import annotations

from dataclasses import replace

from cyclic_vectors.vectors import IntervalVector, PositionVector


def _degree_lattice(criterion: PositionVector, source_size: int) -> PositionVector:
    """Criterion degrees re-based on the source's index space.

    Reading past the last criterion degree climbs by whole source periods.
    """
    return PositionVector(criterion.data, mod=max(source_size, 1))


def _rotated_steps(criterion: IntervalVector, rotation: int, voices: int) -> IntervalVector:
    return criterion.rotate(rotation, voices) if rotation != 0 else criterion


# ---------------------------------------------------------------------------
# Position source
# ---------------------------------------------------------------------------


def select_positions_by_positions(
    source: PositionVector,
    criterion: PositionVector,
    criterion_rotation: int = 0,
    voices: int = 0,
) -> PositionVector:
    """Pick source positions at the criterion's degrees.

    Degree ``k`` of the result is ``source[criterion[k] + criterion_rotation]``
    with cyclic access on both vectors, so rotation moves the whole window
    up or down the scale.

    Args:
        source: Scale or set to select from.
        criterion: Degree indices into ``source``.
        criterion_rotation: Degrees to shift the window by.
        voices: Output length (0 = criterion length).

    Returns:
        PositionVector carrying the source's mod, user range and flags.
        An empty criterion returns the source unchanged.

    Examples:
        >>> c_major = PositionVector((0, 2, 4, 5, 7, 9, 11))
        >>> select_positions_by_positions(c_major, PositionVector((0, 2, 4)), 1).data
        (2, 5, 9)
    """
    if not criterion.data or not source.data:
        return source
    lattice = _degree_lattice(criterion, len(source))
    length = voices if voices > 0 else len(criterion)
    picked = [source.element(lattice.element(k) + criterion_rotation) for k in range(length)]
    return replace(source, data=tuple(picked))


def select_positions_by_intervals(
    source: PositionVector,
    criterion: IntervalVector,
    criterion_rotation: int = 0,
    voices: int = 0,
) -> PositionVector:
    """Walk the source by the criterion's step sizes.

    Starts at degree ``criterion.offset``; each output element is the source
    position at the running degree, which then advances by the next
    criterion step. A non-zero rotation rotates the step pattern first.

    Examples:
        >>> c_major = PositionVector((0, 2, 4, 5, 7, 9, 11))
        >>> select_positions_by_intervals(c_major, IntervalVector((2, 2, 3))).data
        (0, 4, 7)
    """
    if not criterion.data or not source.data:
        return source
    steps = _rotated_steps(criterion, criterion_rotation, voices)
    length = voices if voices > 0 else len(steps)
    picked = []
    degree = steps.offset
    for k in range(length):
        picked.append(source.element(degree))
        degree += steps.element(k)
    return replace(source, data=tuple(picked))


# ---------------------------------------------------------------------------
# Interval source
# ---------------------------------------------------------------------------


def select_intervals_by_intervals(
    source: IntervalVector,
    criterion: IntervalVector,
    criterion_rotation: int = 0,
    voices: int = 0,
) -> IntervalVector:
    """Merge runs of source intervals, run lengths given by the criterion.

    The output offset is the source offset advanced by the first
    ``criterion.offset`` source intervals.

    Examples:
        >>> c_major = IntervalVector((2, 2, 1, 2, 2, 2, 1))
        >>> select_intervals_by_intervals(c_major, IntervalVector((2, 2, 3))).data
        (4, 3, 5)
    """
    if not criterion.data or not source.data:
        return source
    steps = _rotated_steps(criterion, criterion_rotation, voices)
    offset = source.offset + sum(source.element(j) for j in range(steps.offset))
    length = voices if voices > 0 else len(steps)

    merged = []
    cursor = steps.offset
    for k in range(length):
        span = steps.element(k)
        merged.append(sum(source.element(cursor + j) for j in range(span)))
        cursor += span
    return IntervalVector(tuple(merged), offset=offset, mod=source.mod)


def select_intervals_by_positions(
    source: IntervalVector,
    criterion: PositionVector,
    criterion_rotation: int = 0,
    voices: int = 0,
) -> IntervalVector:
    """Sum source intervals between consecutive criterion degrees.

    Gap ``k`` spans degrees ``p[k] .. p[k+1]`` of the (shifted) criterion; a
    non-positive gap wraps forward by one source period. The output offset is
    the source offset advanced by the first ``criterion[0]`` source intervals,
    taken from the criterion as given, before rotation.

    Returns:
        IntervalVector with the source's mod. An empty criterion gives empty
        intervals at the source offset.
    """
    if not criterion.data:
        return IntervalVector((), offset=source.offset, mod=source.mod)
    if not source.data:
        return source
    size = len(source)
    lattice = _degree_lattice(criterion, size)
    length = voices if voices > 0 else len(criterion)

    merged = []
    for k in range(length):
        start = lattice.element(k) + criterion_rotation
        gap = lattice.element(k + 1) + criterion_rotation - start
        if gap <= 0:
            gap += size
        merged.append(sum(source.element(start + j) for j in range(gap)))

    offset = source.offset + sum(source.element(j) for j in range(criterion.data[0]))
    return IntervalVector(tuple(merged), offset=offset, mod=source.mod)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def select(
    source: PositionVector | IntervalVector,
    criterion: PositionVector | IntervalVector,
    criterion_rotation: int = 0,
    voices: int = 0,
) -> PositionVector | IntervalVector:
    """Route to the selection operator matching the argument types.

    Raises:
        TypeError: If either argument is not a Position or Interval vector.
    """
    if isinstance(source, PositionVector):
        if isinstance(criterion, PositionVector):
            return select_positions_by_positions(source, criterion, criterion_rotation, voices)
        if isinstance(criterion, IntervalVector):
            return select_positions_by_intervals(source, criterion, criterion_rotation, voices)
    elif isinstance(source, IntervalVector):
        if isinstance(criterion, IntervalVector):
            return select_intervals_by_intervals(source, criterion, criterion_rotation, voices)
        if isinstance(criterion, PositionVector):
            return select_intervals_by_positions(source, criterion, criterion_rotation, voices)
    raise TypeError(
        f"select() needs Position/Interval vectors, got "
        f"{type(source).__name__} and {type(criterion).__name__}"
    )

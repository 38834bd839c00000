"""
cyclic_vectors/vectors.py - The three cyclic vector representations.

A musical object (pitch-class set, scale, rhythm) is an ordered list of
integers read cyclically. Three interchangeable views exist:

    PositionVector  absolute positions; reading past the end climbs by range
    IntervalVector  distances between consecutive positions plus an offset
    BinaryVector    0/1 presence pattern over one full period

All three are frozen dataclasses: every transformation returns a new value
and dependent fields (such as the position range) are derived, never stored,
so they cannot go stale.

Arithmetic against scalars, raw sequences and other vectors is shared by
PositionVector and IntervalVector through ``CyclicArithmetic``. Python
operators delegate to the named methods:

    v + k, v - k, v * k     elementwise with a scalar
    v / k, v // k, v % k    Euclidean quotient / remainder with a scalar
    v + seq, v - seq        componentwise, non-looping by default
    v * seq, v / seq, v % seq
                            componentwise, looping by default

Exports:
    RangeMode, CyclicArithmetic,
    PositionVector, IntervalVector, BinaryVector
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from numbers import Integral
from typing import Any, TypeVar

from cyclic_vectors.arithmetic import euclidean_division, euclidean_mod, lcm
from cyclic_vectors.config import DEFAULT_BINARY_MOD, DEFAULT_MOD
from cyclic_vectors.errors import ArithmeticPreconditionError, ValidationError

V = TypeVar("V", bound="CyclicArithmetic")

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _as_int_tuple(values: Iterable[Any]) -> tuple[int, ...]:
    return tuple(int(v) for v in values)


def _operand_values(operand: Any) -> tuple[int, ...]:
    """Raw integer data of a vector or a plain sequence of integers."""
    return _as_int_tuple(getattr(operand, "data", operand))


def _combine(
    left: Sequence[int],
    right: Sequence[int],
    op: Callable[[int, int], int],
    looping: bool,
) -> tuple[int, ...]:
    """Apply ``op`` pairwise.

    Looping: result length is the longer length, both sides wrap.
    Non-looping: the shared prefix is combined and the longer side's tail is
    carried through unchanged.
    """
    if looping:
        size = max(len(left), len(right))
        return tuple(op(left[i % len(left)], right[i % len(right)]) for i in range(size))

    shared = min(len(left), len(right))
    head = [op(left[i], right[i]) for i in range(shared)]
    tail = left[shared:] if len(left) > shared else right[shared:]
    return tuple(head) + tuple(tail)


def _require_divisors(values: Sequence[int], operation: str) -> None:
    if not values:
        raise ArithmeticPreconditionError(operation, "divisor sequence is empty")
    if any(v == 0 for v in values):
        raise ArithmeticPreconditionError(operation, "divisor sequence contains zero")


def _quotient(a: int, b: int) -> int:
    return euclidean_division(a, b).quotient


def _remainder(a: int, b: int) -> int:
    return euclidean_division(a, b).remainder


def _reverse_span(values: list[int], start: int, stop: int) -> None:
    values[start:stop] = values[start:stop][::-1]


# ---------------------------------------------------------------------------
# Shared arithmetic capability
# ---------------------------------------------------------------------------


class CyclicArithmetic:
    """Scalar and componentwise arithmetic shared by integer-valued vectors.

    Subclasses provide ``data`` and ``_with_data`` (a copy carrying new data
    and every other field unchanged).
    """

    data: tuple[int, ...]

    def _with_data(self: V, values: Iterable[int]) -> V:
        raise NotImplementedError

    def _map(self: V, fn: Callable[[int], int]) -> V:
        return self._with_data(fn(v) for v in self.data)

    # --- componentwise ---------------------------------------------------

    def componentwise_sum(self: V, other: Any, looping: bool = False) -> V:
        """Add another sequence element by element.

        An empty ``other`` returns self; an empty self takes ``other``'s data.
        """
        values = _operand_values(other)
        if not values:
            return self
        if not self.data:
            return self._with_data(values)
        return self._with_data(_combine(self.data, values, operator.add, looping))

    def componentwise_subtraction(self: V, other: Any, looping: bool = False) -> V:
        """Subtract another sequence element by element (same empty rules as sum)."""
        values = _operand_values(other)
        if not values:
            return self
        if not self.data:
            return self._with_data(values)
        return self._with_data(_combine(self.data, values, operator.sub, looping))

    def componentwise_product(self: V, other: Any, looping: bool = True) -> V:
        """Multiply element by element. An empty ``other`` yields an empty vector."""
        values = _operand_values(other)
        if not values:
            return self._with_data(())
        if not self.data:
            return self
        return self._with_data(_combine(self.data, values, operator.mul, looping))

    def componentwise_division(self: V, other: Any, looping: bool = True) -> V:
        """Euclidean quotient element by element.

        Raises:
            ArithmeticPreconditionError: If ``other`` is empty or holds a zero.
        """
        values = _operand_values(other)
        _require_divisors(values, "componentwise division")
        if not self.data:
            return self
        return self._with_data(_combine(self.data, values, _quotient, looping))

    def componentwise_modulo(self: V, other: Any, looping: bool = True) -> V:
        """Euclidean remainder element by element.

        Raises:
            ArithmeticPreconditionError: If ``other`` is empty or holds a zero.
        """
        values = _operand_values(other)
        _require_divisors(values, "componentwise modulo")
        if not self.data:
            return self
        return self._with_data(_combine(self.data, values, _remainder, looping))

    # --- scalar or componentwise ------------------------------------------

    def add(self: V, operand: Any, looping: bool = False) -> V:
        if isinstance(operand, Integral):
            return self._map(lambda v: v + int(operand))
        return self.componentwise_sum(operand, looping)

    def subtract(self: V, operand: Any, looping: bool = False) -> V:
        if isinstance(operand, Integral):
            return self._map(lambda v: v - int(operand))
        return self.componentwise_subtraction(operand, looping)

    def multiply(self: V, operand: Any, looping: bool = True) -> V:
        if isinstance(operand, Integral):
            return self._map(lambda v: v * int(operand))
        return self.componentwise_product(operand, looping)

    def divide(self: V, operand: Any, looping: bool = True) -> V:
        """Euclidean quotient by a scalar or a sequence."""
        if isinstance(operand, Integral):
            if operand == 0:
                raise ArithmeticPreconditionError("scalar division", "divisor is zero")
            return self._map(lambda v: _quotient(v, int(operand)))
        return self.componentwise_division(operand, looping)

    def modulo(self: V, operand: Any, looping: bool = True) -> V:
        """Euclidean remainder by a scalar or a sequence."""
        if isinstance(operand, Integral):
            if operand == 0:
                raise ArithmeticPreconditionError("scalar modulo", "divisor is zero")
            return self._map(lambda v: _remainder(v, int(operand)))
        return self.componentwise_modulo(operand, looping)

    # --- operators ---------------------------------------------------------

    def __add__(self: V, other: Any) -> V:
        return self.add(other)

    def __radd__(self: V, other: Any) -> V:
        return self.add(other)

    def __sub__(self: V, other: Any) -> V:
        return self.subtract(other)

    def __rsub__(self: V, other: Any) -> V:
        if isinstance(other, Integral):
            return self._map(lambda v: int(other) - v)
        return self._with_data(_operand_values(other)).componentwise_subtraction(self.data)

    def __mul__(self: V, other: Any) -> V:
        return self.multiply(other)

    def __rmul__(self: V, other: Any) -> V:
        return self.multiply(other)

    def __truediv__(self: V, other: Any) -> V:
        return self.divide(other)

    def __floordiv__(self: V, other: Any) -> V:
        return self.divide(other)

    def __mod__(self: V, other: Any) -> V:
        return self.modulo(other)


# ---------------------------------------------------------------------------
# PositionVector
# ---------------------------------------------------------------------------


class RangeMode(Enum):
    """How a PositionVector obtains its range.

    AUTO   range is the smallest multiple of the active modulus that is
           strictly greater than the span of the data
    FIXED  range is pinned (``fixed_range``, or the active modulus when no
           explicit value was given)
    """

    AUTO = "auto"
    FIXED = "fixed"


@dataclass(frozen=True)
class PositionVector(CyclicArithmetic):
    """Absolute positions in a modular space, read cyclically by period.

    Reading past the end climbs by the range:
    ``element(i) = data[i mod n] + |range| * floor(i / n)``.

    Attributes:
        data:        Ordered positions (any integers, order preserved).
        mod:         Modulus of the space, e.g. 12 for pitch classes.
        user_range:  Alternative modulus used when ``user`` is set.
                     Values <= 0 are replaced by ``mod``.
        user:        Use ``user_range`` instead of ``mod`` as the active modulus.
        range_mode:  AUTO (derived from data) or FIXED.
        fixed_range: Explicit range for FIXED mode; None means the active modulus.

    Equality and hashing consider ``data``, ``mod``, ``user_range`` and
    ``user`` only.

    Examples:
        >>> PositionVector((0, 4, 7)).element(3)
        12
        >>> PositionVector((0, 4, 7)).element(-1)
        -5
    """

    data: tuple[int, ...] = ()
    mod: int = DEFAULT_MOD
    user_range: int = 0
    user: bool = False
    range_mode: RangeMode = field(default=RangeMode.AUTO, compare=False)
    fixed_range: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _as_int_tuple(self.data))
        if self.mod <= 0:
            raise ValidationError(f"PositionVector mod must be positive, got {self.mod}")
        if self.user_range <= 0:
            object.__setattr__(self, "user_range", self.mod)

    # --- derived -----------------------------------------------------------

    @property
    def active_modulus(self) -> int:
        return self.user_range if self.user else self.mod

    @property
    def range(self) -> int:
        """Period used for cyclic access (derived, never stored)."""
        modulus = self.active_modulus
        if self.range_mode is RangeMode.FIXED:
            return self.fixed_range if self.fixed_range is not None else modulus
        if not self.data:
            return modulus
        span = max(self.data) - min(self.data)
        return modulus * (span // modulus + 1)

    @property
    def range_update(self) -> bool:
        return self.range_mode is RangeMode.AUTO

    # --- access ------------------------------------------------------------

    def element(self, index: int) -> int:
        """Cyclic access with the period term. Empty vectors read as 0."""
        if not self.data:
            return 0
        div = euclidean_division(index, len(self.data))
        return self.data[div.remainder] + abs(self.range) * div.quotient

    def __getitem__(self, index: int) -> int:
        return self.element(index)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def _with_data(self, values: Iterable[int]) -> PositionVector:
        return replace(self, data=_as_int_tuple(values))

    # --- setters -------------------------------------------------------------

    def with_mod(self, mod: int) -> PositionVector:
        return replace(self, mod=mod)

    def with_user_range(self, user_range: int) -> PositionVector:
        return replace(self, user_range=user_range)

    def with_user(self, user: bool) -> PositionVector:
        return replace(self, user=user)

    def with_range(self, value: int) -> PositionVector:
        """Pin the range to ``value`` (switches to FIXED mode)."""
        return replace(self, range_mode=RangeMode.FIXED, fixed_range=value)

    def with_range_update(self, enabled: bool) -> PositionVector:
        """AUTO when enabled; otherwise FIXED at the active modulus."""
        if enabled:
            return replace(self, range_mode=RangeMode.AUTO, fixed_range=None)
        return replace(self, range_mode=RangeMode.FIXED, fixed_range=None)

    # --- transformations -----------------------------------------------------

    def sorted(self) -> PositionVector:
        return self._with_data(sorted(self.data))

    def rotate(self, amount: int) -> PositionVector:
        """Reorder the data by ``|amount|`` places to the right, no period term."""
        if not self.data:
            return self
        size = len(self.data)
        shift = abs(amount)
        rotated = [0] * size
        for i, value in enumerate(self.data):
            rotated[(i + shift) % size] = value
        return self._with_data(rotated)

    def roto_translate(self, start: int, length: int = 0) -> PositionVector:
        """Read ``|length|`` (default: size) consecutive elements from ``start``.

        The period term is included, so windows that wrap climb by range:
        ``[0, 4, 7].roto_translate(1) == [4, 7, 12]``.
        """
        count = abs(length) or len(self.data)
        return self._with_data(self.element(start + i) for i in range(count))

    def inversion(self, axis: int = 0, sort_output: bool = False) -> PositionVector:
        """Reflect every element around ``data[axis mod n]``: ``2·a - x``."""
        if not self.data:
            return self
        axis_value = self.data[euclidean_mod(axis, len(self.data))]
        result = (axis_value * 2) - self
        return result.sorted() if sort_output else result

    def complement(self) -> PositionVector:
        """Positions of ``[min, min + range)`` that are absent from the data."""
        span = self.range
        if not self.data:
            return self._with_data(range(span))
        low = min(self.data)
        present = {v - low for v in self.data}
        return self._with_data(i + low for i in range(span) if i not in present)

    def negative(self, axis: int = 10, standard: bool = True, sort: bool = True) -> PositionVector:
        """Negative-harmony reflection.

        Standard mode reflects around the half step ``axis - 1/2`` (computed
        on doubled values); otherwise reflects around ``axis``. The result is
        roto-translated by -1 so the reflected root lands first.
        """
        result = self
        pivot = axis
        if standard:
            result = result * 2
            pivot = axis * 2 - 1
        result = pivot - (result - pivot)
        if standard:
            result = result / 2
        if sort:
            result = result.sorted()
        return result.roto_translate(-1)

    def concatenate(self, other: PositionVector) -> PositionVector:
        return self._with_data(self.data + other.data)

    def repeat(self, times: int) -> PositionVector:
        if times <= 0:
            return self._with_data(())
        return self._with_data(self.data * times)

    @staticmethod
    def adapt_to_lcm(vectors: Sequence[PositionVector]) -> list[PositionVector]:
        """Rescale vectors to a common modulus (the LCM of their moduli).

        Data, user range and a fixed range scale by ``lcm / mod``. If every
        vector already shares a modulus the input is returned unchanged.
        """
        moduli = {v.mod for v in vectors}
        if len(moduli) <= 1:
            return list(vectors)
        common = lcm(moduli)
        adapted = []
        for vector in vectors:
            factor = common // vector.mod
            adapted.append(
                PositionVector(
                    tuple(v * factor for v in vector.data),
                    mod=common,
                    user_range=vector.user_range * factor,
                    user=vector.user,
                    range_mode=vector.range_mode,
                    fixed_range=None if vector.fixed_range is None else vector.fixed_range * factor,
                )
            )
        return adapted


# ---------------------------------------------------------------------------
# IntervalVector
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IntervalVector(CyclicArithmetic):
    """Successive distances between positions, plus a starting offset.

    Cyclic access is flat: ``element(i) = data[i mod n]``.

    Attributes:
        data:   Interval sizes.
        offset: Absolute starting position.
        mod:    Modulus of the underlying space (0 = unbounded).
    """

    data: tuple[int, ...] = ()
    offset: int = 0
    mod: int = DEFAULT_MOD

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _as_int_tuple(self.data))
        if self.mod < 0:
            raise ValidationError(f"IntervalVector mod must be non-negative, got {self.mod}")

    def element(self, index: int) -> int:
        if not self.data:
            return 0
        return self.data[euclidean_mod(index, len(self.data))]

    def __getitem__(self, index: int) -> int:
        return self.element(index)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __neg__(self) -> IntervalVector:
        return self.negate()

    def _with_data(self, values: Iterable[int]) -> IntervalVector:
        return replace(self, data=_as_int_tuple(values))

    def with_offset(self, offset: int) -> IntervalVector:
        return replace(self, offset=offset)

    def with_mod(self, mod: int) -> IntervalVector:
        return replace(self, mod=mod)

    # --- transformations -----------------------------------------------------

    def rotate(self, amount: int, length: int = 0) -> IntervalVector:
        """Read ``|length|`` (default: size) elements cyclically from ``amount``.

        Rotating the step pattern of a scale yields its modes:
        ``[2, 2, 1, 2, 2, 2, 1].rotate(1) == [2, 1, 2, 2, 2, 1, 2]``.
        """
        count = abs(length) or len(self.data)
        return self._with_data(self.element(amount + i) for i in range(count))

    def reverse(self) -> IntervalVector:
        return self._with_data(reversed(self.data))

    def retrograde(self) -> IntervalVector:
        return self.reverse()

    def inversion(self, axis: int = 0) -> IntervalVector:
        """Reverse the run before the axis and the run after it, separately.

        The axis is a boundary between elements, normalised into ``[0, n]``.
        """
        if not self.data:
            return self
        size = len(self.data)
        boundary = euclidean_mod(axis, size + 1)
        out = list(self.data)
        _reverse_span(out, 0, boundary)
        _reverse_span(out, boundary, size)
        return self._with_data(out)

    def negate(self) -> IntervalVector:
        """Negate every interval and the offset."""
        return replace(self, data=tuple(-v for v in self.data), offset=-self.offset)

    def normalize(self, modulus: int = 0) -> IntervalVector:
        """Reduce each interval into ``[0, modulus)``; modulus 0 means ``mod``."""
        modulus = modulus or self.mod
        if modulus == 0:
            return self
        return self._map(lambda v: euclidean_mod(v, modulus))

    def single_mirror(self, position: int, left: bool) -> IntervalVector:
        """Reverse ``data[:position]`` (left) or ``data[position:]`` (right).

        Positions outside ``[0, n]`` leave the vector unchanged.
        """
        size = len(self.data)
        if position < 0 or position > size:
            return self
        out = list(self.data)
        if left:
            _reverse_span(out, 0, position)
        else:
            _reverse_span(out, position, size)
        return self._with_data(out)

    def double_mirror(self, position: int) -> IntervalVector:
        """Reverse both sides of ``position``. Out-of-range positions are a no-op."""
        size = len(self.data)
        if position < 0 or position > size:
            return self
        out = list(self.data)
        _reverse_span(out, 0, position)
        _reverse_span(out, position, size)
        return self._with_data(out)

    def cross_mirror(self, position: int, left: bool) -> IntervalVector:
        """Copy one side of ``position`` reversed onto the opposite end.

        left:  the first ``position`` elements are written backwards from the end.
        right: the elements from ``position`` on are written backwards from the start.
        """
        size = len(self.data)
        out = list(self.data)
        if left:
            for i in range(min(max(position, 0), size)):
                out[size - 1 - i] = self.data[i]
        else:
            for i in range(max(position, 0), size):
                out[i - position] = self.data[size - 1 - (i - position)]
        return self._with_data(out)

    def concatenate(self, other: IntervalVector) -> IntervalVector:
        return self._with_data(self.data + other.data)

    def repeat(self, times: int) -> IntervalVector:
        if times <= 0:
            return self._with_data(())
        return self._with_data(self.data * times)

    @staticmethod
    def adapt_to_lcm(vectors: Sequence[IntervalVector]) -> list[IntervalVector]:
        """Rescale data and offsets to the LCM of the non-zero moduli.

        Vectors with mod 0 pass through unchanged.
        """
        moduli = {v.mod for v in vectors if v.mod != 0}
        if len(moduli) <= 1:
            return list(vectors)
        common = lcm(moduli)
        adapted = []
        for vector in vectors:
            if vector.mod == 0:
                adapted.append(vector)
                continue
            factor = common // vector.mod
            adapted.append(
                IntervalVector(
                    tuple(v * factor for v in vector.data),
                    offset=vector.offset * factor,
                    mod=common,
                )
            )
        return adapted


# ---------------------------------------------------------------------------
# BinaryVector
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BinaryVector:
    """A 0/1 presence pattern over one period, e.g. a rhythm on a step grid.

    Attributes:
        data:   Steps, each 0 or 1.
        offset: Absolute position of step 0.
        mod:    Period length the pattern is expressed in.

    Raises:
        ValidationError: If any element is not 0 or 1, or mod is not positive.
    """

    data: tuple[int, ...] = (1, 0, 0, 0)
    offset: int = 0
    mod: int = DEFAULT_BINARY_MOD

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _as_int_tuple(self.data))
        bad = [v for v in self.data if v not in (0, 1)]
        if bad:
            raise ValidationError(f"BinaryVector elements must be 0 or 1, got {bad}")
        if self.mod <= 0:
            raise ValidationError(f"BinaryVector mod must be positive, got {self.mod}")

    def element(self, index: int) -> int:
        if not self.data:
            return 0
        return self.data[euclidean_mod(index, len(self.data))]

    def __getitem__(self, index: int) -> int:
        return self.element(index)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def _with_data(self, values: Iterable[int]) -> BinaryVector:
        return replace(self, data=_as_int_tuple(values))

    # --- time scaling --------------------------------------------------------

    def stretch(self, factor: int) -> BinaryVector:
        """Insert ``factor - 1`` silent steps after every step; mod scales too."""
        if factor <= 0:
            raise ValidationError(f"stretch factor must be positive, got {factor}")
        out: list[int] = []
        for value in self.data:
            out.append(value)
            out.extend([0] * (factor - 1))
        return BinaryVector(tuple(out), offset=self.offset, mod=self.mod * factor)

    def compress(self, divisor: int) -> BinaryVector:
        """Divide every run of silence by ``divisor``, keeping the length.

        The compressed pattern is padded with trailing zeros back to the
        original number of steps.
        """
        if divisor <= 0:
            raise ValidationError(f"compress divisor must be positive, got {divisor}")
        if divisor == 1:
            return self
        out: list[int] = []
        silence = 0
        for value in self.data:
            if value == 1:
                out.extend([0] * (silence // divisor))
                out.append(1)
                silence = 0
            else:
                silence += 1
        out.extend([0] * (silence // divisor))
        out.extend([0] * (len(self.data) - len(out)))
        return self._with_data(out[: len(self.data)])

    def __mul__(self, factor: int) -> BinaryVector:
        return self.stretch(factor)

    def __rmul__(self, factor: int) -> BinaryVector:
        return self.stretch(factor)

    def __truediv__(self, divisor: int) -> BinaryVector:
        return self.compress(divisor)

    # --- logic -----------------------------------------------------------------

    def componentwise_or(self, other: Any, looping: bool = False) -> BinaryVector:
        values = _operand_values(other)
        if not values:
            return self
        if not self.data:
            return self._with_data(values)
        return self._with_data(_combine(self.data, values, operator.or_, looping))

    def componentwise_and(self, other: Any, looping: bool = False) -> BinaryVector:
        """AND element by element. An empty ``other`` yields an empty pattern."""
        values = _operand_values(other)
        if not values:
            return self._with_data(())
        if not self.data:
            return self
        return self._with_data(_combine(self.data, values, operator.and_, looping))

    def componentwise_xor(self, other: Any, looping: bool = False) -> BinaryVector:
        values = _operand_values(other)
        if not values:
            return self
        if not self.data:
            return self._with_data(values)
        return self._with_data(_combine(self.data, values, operator.xor, looping))

    def __or__(self, other: BinaryVector) -> BinaryVector:
        left, right = BinaryVector.adapt_to_lcm([self, other])
        return left.componentwise_or(right)

    def __and__(self, other: BinaryVector) -> BinaryVector:
        left, right = BinaryVector.adapt_to_lcm([self, other])
        return left.componentwise_and(right)

    def __xor__(self, other: BinaryVector) -> BinaryVector:
        left, right = BinaryVector.adapt_to_lcm([self, other])
        return left.componentwise_xor(right)

    def nor(self, other: BinaryVector) -> BinaryVector:
        return ~(self | other)

    def nand(self, other: BinaryVector) -> BinaryVector:
        return ~(self & other)

    def xnor(self, other: BinaryVector) -> BinaryVector:
        return ~(self ^ other)

    def complement(self) -> BinaryVector:
        return self._map_bits(lambda v: 1 - v)

    def __invert__(self) -> BinaryVector:
        return self.complement()

    def _map_bits(self, fn: Callable[[int], int]) -> BinaryVector:
        return self._with_data(fn(v) for v in self.data)

    # --- transformations -------------------------------------------------------

    def rotate(self, amount: int) -> BinaryVector:
        """Shift left by ``amount`` steps (Euclidean, so negative shifts right)."""
        if not self.data:
            return self
        size = len(self.data)
        shift = euclidean_mod(amount, size)
        return self._with_data(self.data[(i + shift) % size] for i in range(size))

    def inversion(self, axis: int) -> BinaryVector:
        """Mirror the steps around index ``axis``."""
        if not self.data:
            return self
        size = len(self.data)
        pivot = euclidean_mod(axis, size)
        return self._with_data(self.data[euclidean_mod(2 * pivot - i, size)] for i in range(size))

    def transpose(self, amount: int) -> BinaryVector:
        """Move the pattern in absolute space; only the offset changes."""
        return replace(self, offset=self.offset + amount)

    def concatenate(self, other: BinaryVector) -> BinaryVector:
        return self._with_data(self.data + other.data)

    def repeat(self, times: int) -> BinaryVector:
        if times <= 0:
            return self._with_data(())
        return self._with_data(self.data * times)

    # --- analysis --------------------------------------------------------------

    def pulse_count(self) -> int:
        return sum(self.data)

    def density(self) -> float:
        if not self.data:
            return 0.0
        return self.pulse_count() / len(self.data)

    def pulse_indices(self) -> list[int]:
        return [i for i, v in enumerate(self.data) if v == 1]

    def inter_onset_intervals(self) -> list[int]:
        """Gaps between consecutive pulses, including the wrap back to the first.

        Fewer than two pulses yields an empty list.
        """
        indices = self.pulse_indices()
        if len(indices) < 2:
            return []
        gaps = [b - a for a, b in zip(indices, indices[1:])]
        gaps.append(len(self.data) - indices[-1] + indices[0])
        return gaps

    @staticmethod
    def adapt_to_lcm(vectors: Sequence[BinaryVector]) -> list[BinaryVector]:
        """Stretch every pattern to the LCM of their periods."""
        moduli = {v.mod for v in vectors}
        if len(moduli) <= 1:
            return list(vectors)
        common = lcm(moduli)
        return [v.stretch(common // v.mod) for v in vectors]

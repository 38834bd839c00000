"""
Tests for cyclic_vectors/vectors.py - IntervalVector.

Validates:
    - flat cyclic access and periodicity
    - rotate (modes), reverse / retrograde, two-segment inversion
    - negate (offset too), normalize
    - single, double and cross mirrors
    - scalar arithmetic leaves the offset alone
    - adapt_to_lcm (mod 0 passes through)
"""

import pytest

from cyclic_vectors.errors import ValidationError
from cyclic_vectors.vectors import IntervalVector

MAJOR_STEPS = IntervalVector((2, 2, 1, 2, 2, 2, 1))
FOUR = IntervalVector((1, 2, 3, 4))

# ---------------------------------------------------------------------------
# Access
# ---------------------------------------------------------------------------


class TestAccess:
    def test_flat_wrap(self):
        assert MAJOR_STEPS.element(7) == 2
        assert MAJOR_STEPS.element(-1) == 1

    @pytest.mark.parametrize("index", range(-10, 10))
    def test_periodicity(self, index):
        assert FOUR.element(index + len(FOUR)) == FOUR.element(index)

    def test_empty_reads_zero(self):
        assert IntervalVector(()).element(3) == 0

    def test_defaults(self):
        iv = IntervalVector((3, 4, 5))
        assert (iv.offset, iv.mod) == (0, 12)

    def test_negative_mod_rejected(self):
        with pytest.raises(ValidationError):
            IntervalVector((1,), mod=-1)

    def test_equality_includes_offset(self):
        assert IntervalVector((3, 4), offset=1) != IntervalVector((3, 4), offset=2)


# ---------------------------------------------------------------------------
# Transformations
# ---------------------------------------------------------------------------


class TestRotate:
    def test_first_mode(self):
        assert MAJOR_STEPS.rotate(1).data == (2, 1, 2, 2, 2, 1, 2)

    def test_negative_rotation(self):
        assert MAJOR_STEPS.rotate(-1).data == (1, 2, 2, 1, 2, 2, 2)

    def test_length(self):
        assert MAJOR_STEPS.rotate(1, 3).data == (2, 1, 2)
        assert MAJOR_STEPS.rotate(0, -2).data == (2, 2)

    def test_full_turn_is_identity(self):
        assert MAJOR_STEPS.rotate(len(MAJOR_STEPS)) == MAJOR_STEPS

    def test_offset_preserved(self):
        assert IntervalVector((2, 3), offset=5).rotate(1).offset == 5


class TestReverseAndInversion:
    def test_reverse(self):
        assert IntervalVector((2, 2, 1)).reverse().data == (1, 2, 2)
        assert IntervalVector((2, 2, 1)).retrograde().data == (1, 2, 2)

    def test_inversion_axis_zero_reverses_everything(self):
        assert FOUR.inversion(0).data == (4, 3, 2, 1)

    def test_inversion_reverses_both_segments(self):
        assert FOUR.inversion(2).data == (2, 1, 4, 3)

    def test_inversion_axis_wraps_into_boundaries(self):
        # -1 normalises to boundary 4 (after the last element)
        assert FOUR.inversion(-1).data == (4, 3, 2, 1)
        assert FOUR.inversion(7).data == (2, 1, 4, 3)

    def test_inversion_does_not_sort(self):
        assert IntervalVector((5, 1, 3)).inversion(1).data == (5, 3, 1)

    def test_inversion_empty(self):
        assert IntervalVector(()).inversion(2).data == ()


class TestNegateNormalize:
    def test_negate(self):
        iv = IntervalVector((2, -3), offset=5).negate()
        assert iv.data == (-2, 3)
        assert iv.offset == -5

    def test_unary_minus(self):
        assert -IntervalVector((2,), offset=1) == IntervalVector((-2,), offset=-1)

    def test_normalize_uses_mod(self):
        assert IntervalVector((14, -1)).normalize().data == (2, 11)

    def test_normalize_explicit_modulus(self):
        assert IntervalVector((5, -1)).normalize(4).data == (1, 3)

    def test_normalize_unbounded_is_noop(self):
        iv = IntervalVector((14,), mod=0)
        assert iv.normalize() is iv


class TestMirrors:
    def test_single_mirror_left(self):
        assert FOUR.single_mirror(2, left=True).data == (2, 1, 3, 4)

    def test_single_mirror_right(self):
        assert FOUR.single_mirror(2, left=False).data == (1, 2, 4, 3)

    def test_single_mirror_out_of_range(self):
        assert FOUR.single_mirror(5, left=True) == FOUR
        assert FOUR.single_mirror(-1, left=False) == FOUR

    def test_double_mirror(self):
        assert FOUR.double_mirror(1).data == (1, 4, 3, 2)

    def test_cross_mirror_left(self):
        assert FOUR.cross_mirror(2, left=True).data == (1, 2, 2, 1)

    def test_cross_mirror_right(self):
        assert FOUR.cross_mirror(2, left=False).data == (4, 3, 3, 4)


class TestArithmetic:
    def test_scalar_add_keeps_offset(self):
        iv = IntervalVector((2, 2, 3), offset=1) + 1
        assert iv.data == (3, 3, 4)
        assert iv.offset == 1

    def test_scalar_multiply(self):
        assert (IntervalVector((1, 2)) * 3).data == (3, 6)

    def test_componentwise_sum(self):
        assert IntervalVector((1, 2, 3)).componentwise_sum([1]).data == (2, 2, 3)


class TestUtilities:
    def test_concatenate_keeps_left_offset(self):
        iv = IntervalVector((1,), offset=3).concatenate(IntervalVector((2,), offset=9))
        assert iv == IntervalVector((1, 2), offset=3)

    def test_repeat(self):
        assert IntervalVector((2, 1)).repeat(3).data == (2, 1, 2, 1, 2, 1)

    def test_adapt_to_lcm(self):
        a, b = IntervalVector.adapt_to_lcm(
            [IntervalVector((1, 1), offset=1, mod=2), IntervalVector((3,), mod=3)]
        )
        assert a == IntervalVector((3, 3), offset=3, mod=6)
        assert b == IntervalVector((6,), offset=0, mod=6)

    def test_adapt_to_lcm_skips_unbounded(self):
        free = IntervalVector((5,), mod=0)
        result = IntervalVector.adapt_to_lcm([IntervalVector((1,), mod=2), free, IntervalVector((1,), mod=3)])
        assert result[1] is free
        assert result[0].mod == 6

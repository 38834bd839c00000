"""
Tests for cyclic_vectors/vectors.py - BinaryVector.

Validates:
    - 0/1 validation at construction
    - stretch (*) and compress (/)
    - LCM-adapted logic operators and their negations
    - rotate, inversion, transpose, complement
    - pulse analysis: count, density, indices, inter-onset intervals
"""

import pytest

from cyclic_vectors.errors import ValidationError
from cyclic_vectors.vectors import BinaryVector

# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_default_is_one_pulse_in_four(self):
        bv = BinaryVector()
        assert (bv.data, bv.offset, bv.mod) == ((1, 0, 0, 0), 0, 4)

    def test_rejects_non_binary(self):
        with pytest.raises(ValidationError, match="must be 0 or 1"):
            BinaryVector((0, 2, 1))

    def test_rejects_non_positive_mod(self):
        with pytest.raises(ValidationError):
            BinaryVector((1, 0), mod=0)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            BinaryVector((-1,))

    @pytest.mark.parametrize("index", range(-8, 8))
    def test_flat_periodicity(self, index):
        bv = BinaryVector((1, 0, 1, 1, 0))
        assert bv.element(index + 5) == bv.element(index)


# ---------------------------------------------------------------------------
# Time scaling
# ---------------------------------------------------------------------------


class TestStretchCompress:
    def test_stretch_inserts_silence(self):
        bv = BinaryVector((1, 0, 1), mod=3) * 2
        assert bv.data == (1, 0, 0, 0, 1, 0)
        assert bv.mod == 6

    def test_reflected_stretch(self):
        assert 2 * BinaryVector((1, 1), mod=2) == BinaryVector((1, 0, 1, 0), mod=4)

    def test_stretch_rejects_zero(self):
        with pytest.raises(ValidationError):
            BinaryVector((1, 0)).stretch(0)

    def test_compress_divides_gaps_and_pads(self):
        bv = BinaryVector((1, 0, 0, 0, 1, 0, 0, 0), mod=8) / 2
        assert bv.data == (1, 0, 1, 0, 0, 0, 0, 0)
        assert bv.mod == 8

    def test_compress_by_one_is_identity(self):
        bv = BinaryVector((1, 0, 1, 0))
        assert bv / 1 is bv

    def test_compress_rejects_zero(self):
        with pytest.raises(ValidationError):
            BinaryVector((1, 0)).compress(0)


# ---------------------------------------------------------------------------
# Logic
# ---------------------------------------------------------------------------


class TestLogic:
    A = BinaryVector((1, 1), mod=2)
    B = BinaryVector((1, 1, 1), mod=3)

    def test_or_same_period(self):
        result = BinaryVector((1, 0, 0, 0)) | BinaryVector((0, 0, 1, 0))
        assert result.data == (1, 0, 1, 0)

    def test_or_adapts_periods(self):
        result = self.A | self.B
        assert result.data == (1, 0, 1, 1, 1, 0)
        assert result.mod == 6

    def test_and_adapts_periods(self):
        assert (self.A & self.B).data == (1, 0, 0, 0, 0, 0)

    def test_xor_adapts_periods(self):
        assert (self.A ^ self.B).data == (0, 0, 1, 1, 1, 0)

    def test_nor_nand_xnor(self):
        assert self.A.nor(self.B).data == (0, 1, 0, 0, 0, 1)
        assert self.A.nand(self.B).data == (0, 1, 1, 1, 1, 1)
        assert self.A.xnor(self.B).data == (1, 1, 0, 0, 0, 1)

    def test_complement(self):
        assert (~BinaryVector((1, 0, 1))).data == (0, 1, 0)

    def test_componentwise_or_looping(self):
        bv = BinaryVector((1, 0, 0, 0)).componentwise_or([0, 1], looping=True)
        assert bv.data == (1, 1, 0, 1)

    def test_componentwise_and_with_empty_is_empty(self):
        assert BinaryVector((1, 0)).componentwise_and([]).data == ()

    def test_componentwise_or_rejects_non_binary_operand(self):
        with pytest.raises(ValidationError):
            BinaryVector((1, 0)).componentwise_or([2, 0])


# ---------------------------------------------------------------------------
# Transformations and analysis
# ---------------------------------------------------------------------------


class TestTransformations:
    def test_rotate_left(self):
        assert BinaryVector((1, 0, 0, 1)).rotate(1).data == (0, 0, 1, 1)

    def test_rotate_negative_is_right(self):
        assert BinaryVector((1, 0, 0, 1)).rotate(-1).data == (1, 1, 0, 0)

    def test_inversion_mirrors_indices(self):
        assert BinaryVector((1, 1, 0, 0)).inversion(0).data == (1, 0, 0, 1)

    def test_transpose_only_moves_offset(self):
        bv = BinaryVector((1, 0, 1, 0)).transpose(3)
        assert bv.data == (1, 0, 1, 0)
        assert bv.offset == 3

    def test_concatenate_and_repeat(self):
        bv = BinaryVector((1, 0))
        assert bv.concatenate(BinaryVector((1,))).data == (1, 0, 1)
        assert bv.repeat(2).data == (1, 0, 1, 0)
        assert bv.repeat(-1).data == ()

    def test_adapt_to_lcm_same_period(self):
        vectors = [BinaryVector((1, 0)), BinaryVector((0, 1))]
        assert BinaryVector.adapt_to_lcm(vectors) == vectors


class TestAnalysis:
    BV = BinaryVector((1, 0, 1, 1, 0), mod=5)

    def test_pulse_count(self):
        assert self.BV.pulse_count() == 3

    def test_density(self):
        assert self.BV.density() == pytest.approx(0.6)

    def test_density_empty(self):
        assert BinaryVector(()).density() == 0.0

    def test_pulse_indices(self):
        assert self.BV.pulse_indices() == [0, 2, 3]

    def test_inter_onset_intervals_include_wrap(self):
        assert self.BV.inter_onset_intervals() == [2, 1, 2]

    def test_inter_onset_intervals_single_pulse(self):
        assert BinaryVector((0, 1, 0)).inter_onset_intervals() == []

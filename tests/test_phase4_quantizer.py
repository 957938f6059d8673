"""
Tests for Phase 4: Contours, Quantizers and Conditional Distributions.
"""

import math
import pytest

from contour_frame.core.errors import QuantizationError, ErrorCode
from contour_frame.core.words import TimeValuePair
from contour_frame.shapemodel.contour import Contour
from contour_frame.shapemodel.distribution import ConditionalDistribution, START_SYMBOL
from contour_frame.shapemodel.quantizer import UniformContourQuantizer


class TestContour:
    """Test the contour value type."""

    def test_times(self):
        contour = Contour(start=1.0, step=0.5, values=[1.0, 2.0, 3.0])
        assert list(contour.times()) == [1.0, 1.5, 2.0]
        assert contour.end == 2.5
        assert len(contour) == 3

    def test_from_pairs(self):
        """The first sample time becomes the start."""
        pairs = [TimeValuePair(0.2, 100.0), TimeValuePair(0.21, 110.0)]
        contour = Contour.from_pairs(pairs, step=0.01)

        assert contour.start == 0.2
        assert contour.values == [100.0, 110.0]
        assert [p.value for p in contour.pairs()] == [100.0, 110.0]


class TestUniformQuantizer:
    """Test evenly spaced time and value bins."""

    def test_basic_quantization(self):
        """Segment means land in equal-width levels."""
        cq = UniformContourQuantizer(time_bins=3, value_bins=2, min_value=0, max_value=10)
        assert cq.quantize([1, 2, 6, 7, 9, 9]) == [0, 1, 1]

    def test_accepts_contour(self):
        cq = UniformContourQuantizer(time_bins=2, value_bins=4, min_value=0, max_value=4)
        contour = Contour(values=[0.5, 0.5, 3.5, 3.5])
        assert cq.quantize(contour) == [0, 3]

    def test_max_value_in_top_level(self):
        """The upper bound is inclusive."""
        cq = UniformContourQuantizer(time_bins=1, value_bins=3, min_value=0, max_value=3)
        assert cq.quantize([3.0]) == [2]
        assert cq.quantize([0.0]) == [0]

    def test_uneven_segments(self):
        """Lengths not divisible by time_bins still yield time_bins symbols."""
        cq = UniformContourQuantizer(time_bins=3, value_bins=5, min_value=0, max_value=5)
        assert len(cq.quantize([1.0, 2.0, 3.0, 4.0, 4.5])) == 3

    def test_symbols_are_ints(self):
        cq = UniformContourQuantizer(time_bins=2, value_bins=2, min_value=0, max_value=1)
        assert all(type(s) is int for s in cq.quantize([0.1, 0.9]))

    def test_too_short_raises(self):
        """Fewer samples than time bins cannot be quantized."""
        cq = UniformContourQuantizer(time_bins=4, value_bins=2, min_value=0, max_value=1)

        with pytest.raises(QuantizationError) as exc_info:
            cq.quantize([0.5, 0.5])

        assert exc_info.value.code == ErrorCode.E2001_QUANTIZATION_FAILED

    def test_out_of_range_raises(self):
        cq = UniformContourQuantizer(time_bins=1, value_bins=2, min_value=0, max_value=1)
        with pytest.raises(QuantizationError):
            cq.quantize([5.0])

    def test_non_finite_raises(self):
        cq = UniformContourQuantizer(time_bins=1, value_bins=2, min_value=0, max_value=1)
        with pytest.raises(QuantizationError):
            cq.quantize([math.nan, 0.5])

    def test_non_numeric_raises(self):
        """Values that cannot be read as numbers are quantization errors."""
        cq = UniformContourQuantizer(time_bins=2, value_bins=2, min_value=0.0, max_value=1.0)

        with pytest.raises(QuantizationError) as exc_info:
            cq.quantize(["a", "b"])

        assert exc_info.value.code == ErrorCode.E2001_QUANTIZATION_FAILED
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_non_scalar_sample_raises(self):
        cq = UniformContourQuantizer(time_bins=1, value_bins=2, min_value=0.0, max_value=1.0)
        with pytest.raises(QuantizationError):
            cq.quantize([0.5, {'f0': 1.0}])

    def test_invalid_construction(self):
        with pytest.raises(ValueError):
            UniformContourQuantizer(time_bins=0, value_bins=2, min_value=0, max_value=1)
        with pytest.raises(ValueError):
            UniformContourQuantizer(time_bins=1, value_bins=0, min_value=0, max_value=1)
        with pytest.raises(ValueError):
            UniformContourQuantizer(time_bins=1, value_bins=2, min_value=1, max_value=1)


class TestConditionalDistribution:
    """Test lookup tables."""

    def test_lookup(self):
        dist = ConditionalDistribution.from_dict({START_SYMBOL: {0: 0.5, 1: 0.5}, 0: {2: 1.0}})

        assert dist.lookup('', '0') == 0.5
        assert dist.lookup('0', '2') == 1.0

    def test_unseen_returns_none(self):
        """Unseen conditions and symbols are absent, not zero."""
        dist = ConditionalDistribution.from_dict({'': {0: 1.0}})

        assert dist.lookup('', '1') is None
        assert dist.lookup('7', '0') is None

    def test_contains(self):
        dist = ConditionalDistribution({'1': {'1': 1.0}})
        assert '1' in dist
        assert '' not in dist
        assert list(dist.conditions()) == ['1']
        assert dist.to_dict() == {'1': {'1': 1.0}}

    def test_invalid_probability(self):
        """Probabilities must be in (0, 1]."""
        with pytest.raises(ValueError):
            ConditionalDistribution({'': {'0': 0.0}})
        with pytest.raises(ValueError):
            ConditionalDistribution({'': {'0': 1.5}})


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

"""
Tests for word records, feature shapes and error codes.
"""

import pytest

from contour_frame.core.errors import (
    ErrorCode,
    ERROR_METADATA,
    ContourFrameError,
    ShapeMismatchError,
    QuantizationError,
    ConfigError,
)
from contour_frame.core.words import (
    Word,
    TimeValuePair,
    FeatureShape,
    classify_feature,
    sample_values,
)


class TestClassifyFeature:
    """Test feature shape resolution."""

    def test_scalar(self):
        assert classify_feature(1.5) == FeatureShape.SCALAR
        assert classify_feature(3) == FeatureShape.SCALAR

    def test_samples(self):
        assert classify_feature([TimeValuePair(0.0, 1.0)]) == FeatureShape.SAMPLES
        assert classify_feature((TimeValuePair(0.0, 1.0),)) == FeatureShape.SAMPLES

    def test_empty_sequence_is_samples(self):
        """An empty track is still sequence-typed."""
        assert classify_feature([]) == FeatureShape.SAMPLES

    def test_absent(self):
        assert classify_feature(None) == FeatureShape.ABSENT

    def test_unknown(self):
        assert classify_feature("H*") == FeatureShape.UNKNOWN
        assert classify_feature(True) == FeatureShape.UNKNOWN
        assert classify_feature([1.0, 2.0]) == FeatureShape.UNKNOWN


class TestSampleValues:
    """Test window contributions."""

    def test_contributions(self):
        assert sample_values(2) == [2.0]
        assert sample_values([TimeValuePair(0.0, 1.0), TimeValuePair(0.01, 2.0)]) == [1.0, 2.0]
        assert sample_values(None) == []
        assert sample_values([]) == []
        assert sample_values("L%") == []


class TestWord:
    """Test word attribute access."""

    def test_attributes(self):
        word = Word(start=0.25, end=0.75, label="hello")
        assert word.get_attribute('f0') is None
        assert not word.has_attribute('f0')

        word.set_attribute('f0', 180.0)
        assert word.get_attribute('f0') == 180.0
        assert word.has_attribute('f0')
        assert word.duration == pytest.approx(0.5)

    def test_repr(self):
        assert "hello" in repr(Word(start=0.0, end=1.0, label="hello"))


class TestErrors:
    """Test structured errors."""

    def test_every_code_has_metadata(self):
        for code in ErrorCode:
            assert code in ERROR_METADATA

    def test_subclass_codes(self):
        assert ShapeMismatchError().code == ErrorCode.E1001_SHAPE_MISMATCH
        assert QuantizationError().code == ErrorCode.E2001_QUANTIZATION_FAILED
        assert ConfigError().code == ErrorCode.E3001_INVALID_CONFIG

    def test_message_includes_context(self):
        error = ShapeMismatchError(context={'feature': 'f0'})
        assert 'f0' in str(error)
        assert error.severity == 'error'
        assert not error.recoverable

    def test_to_dict(self):
        error = QuantizationError(context={'samples': 1})
        d = error.to_dict()

        assert d['code'] == 'E2001'
        assert d['context'] == {'samples': 1}

    def test_catchable_as_base(self):
        with pytest.raises(ContourFrameError):
            raise QuantizationError()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

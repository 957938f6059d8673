"""Core record types and errors for contour_frame."""

from .errors import (
    ErrorCode,
    ERROR_METADATA,
    ContourFrameError,
    ShapeMismatchError,
    EmptyWindowError,
    QuantizationError,
    ModelMismatchError,
    ConfigError,
)
from .words import Word, TimeValuePair, FeatureShape, classify_feature, sample_values

__all__ = [
    # Errors
    'ErrorCode',
    'ERROR_METADATA',
    'ContourFrameError',
    'ShapeMismatchError',
    'EmptyWindowError',
    'QuantizationError',
    'ModelMismatchError',
    'ConfigError',
    # Words
    'Word',
    'TimeValuePair',
    'FeatureShape',
    'classify_feature',
    'sample_values',
]

"""
contour_frame v1.0 - Context window statistics and quantized shape models
for prosodic contours.

This package provides:
- core: Word records, contour feature shapes and error codes
- streaming: Running aggregates and word-based context frames
- shapemodel: Contour quantizers and sequential contour models
- config: YAML configuration
"""

__version__ = "1.0.0"

from .core import (
    Word,
    TimeValuePair,
    FeatureShape,
    ErrorCode,
    ContourFrameError,
    ShapeMismatchError,
    EmptyWindowError,
    QuantizationError,
    ModelMismatchError,
    ConfigError,
)
from .streaming import RunningAggregate, ContextFrame, ContextFeatureExtractor
from .shapemodel import (
    Contour,
    ContourQuantizer,
    UniformContourQuantizer,
    ConditionalDistribution,
    QuantizedContourModel,
    LOG_ZERO,
    score_models,
    best_model,
)
from .config import ContourFrameConfig, load_config

__all__ = [
    # Version
    '__version__',
    # Core
    'Word',
    'TimeValuePair',
    'FeatureShape',
    'ErrorCode',
    'ContourFrameError',
    'ShapeMismatchError',
    'EmptyWindowError',
    'QuantizationError',
    'ModelMismatchError',
    'ConfigError',
    # Streaming
    'RunningAggregate',
    'ContextFrame',
    'ContextFeatureExtractor',
    # Shape models
    'Contour',
    'ContourQuantizer',
    'UniformContourQuantizer',
    'ConditionalDistribution',
    'QuantizedContourModel',
    'LOG_ZERO',
    'score_models',
    'best_model',
    # Config
    'ContourFrameConfig',
    'load_config',
]

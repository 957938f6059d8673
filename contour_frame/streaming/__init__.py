"""Sliding context window statistics."""

from .aggregation import RunningAggregate
from .context_frame import ContextFrame
from .extractor import ContextFeatureExtractor, attribute_name, STATISTICS

__all__ = [
    'RunningAggregate',
    'ContextFrame',
    'ContextFeatureExtractor',
    'attribute_name',
    'STATISTICS',
]

"""Quantized contour shape models."""

from .contour import Contour
from .quantizer import ContourQuantizer, UniformContourQuantizer
from .distribution import ConditionalDistribution, START_SYMBOL
from .model import QuantizedContourModel, LOG_ZERO, score_models, best_model

__all__ = [
    'Contour',
    'ContourQuantizer',
    'UniformContourQuantizer',
    'ConditionalDistribution',
    'START_SYMBOL',
    'QuantizedContourModel',
    'LOG_ZERO',
    'score_models',
    'best_model',
]

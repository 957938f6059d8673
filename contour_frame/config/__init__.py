"""Configuration management for contour_frame."""

from .schema import (
    ContourFrameConfig,
    ContextConfig,
    QuantizerConfig,
    load_config,
    generate_default_config,
)

__all__ = [
    'ContourFrameConfig',
    'ContextConfig',
    'QuantizerConfig',
    'load_config',
    'generate_default_config',
]

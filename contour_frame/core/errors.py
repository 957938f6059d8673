"""
Error codes for contour_frame.

Structured error codes for machine-parseable reports.

Format: E{category}{number}
- E1xxx: Data errors
- E2xxx: Scoring errors
- E3xxx: Configuration errors
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Structured error codes."""

    # E1xxx: Data errors
    E1001_SHAPE_MISMATCH = "E1001"
    E1002_EMPTY_WINDOW = "E1002"

    # E2xxx: Scoring errors
    E2001_QUANTIZATION_FAILED = "E2001"
    E2002_MODEL_LENGTH_MISMATCH = "E2002"

    # E3xxx: Configuration errors
    E3001_INVALID_CONFIG = "E3001"


# Error code metadata
ERROR_METADATA = {
    ErrorCode.E1001_SHAPE_MISMATCH: {
        'severity': 'error',
        'message': 'Feature has no recognized contour shape',
        'recoverable': False,
    },
    ErrorCode.E1002_EMPTY_WINDOW: {
        'severity': 'error',
        'message': 'Statistic undefined on an empty window',
        'recoverable': False,
    },
    ErrorCode.E2001_QUANTIZATION_FAILED: {
        'severity': 'error',
        'message': 'Contour cannot be quantized',
        'recoverable': False,
    },
    ErrorCode.E2002_MODEL_LENGTH_MISMATCH: {
        'severity': 'error',
        'message': 'Quantized length does not match model positions',
        'recoverable': False,
    },
    ErrorCode.E3001_INVALID_CONFIG: {
        'severity': 'error',
        'message': 'Invalid configuration',
        'recoverable': False,
    },
}


class ContourFrameError(Exception):
    """
    Structured error with context.

    Example:
        raise ShapeMismatchError(context={'feature': 'f0', 'type': 'str'})
    """

    code: ErrorCode = ErrorCode.E1001_SHAPE_MISMATCH

    def __init__(self, context: Optional[dict] = None, code: Optional[ErrorCode] = None):
        if code is not None:
            self.code = code
        self.context = context
        super().__init__(self.message)

    @property
    def severity(self) -> str:
        return ERROR_METADATA.get(self.code, {}).get('severity', 'error')

    @property
    def message(self) -> str:
        base_msg = ERROR_METADATA.get(self.code, {}).get('message', 'Unknown error')
        if self.context:
            return f"{base_msg}: {self.context}"
        return base_msg

    @property
    def recoverable(self) -> bool:
        return ERROR_METADATA.get(self.code, {}).get('recoverable', False)

    def to_dict(self) -> dict:
        return {
            'code': self.code.value,
            'severity': self.severity,
            'message': self.message,
            'recoverable': self.recoverable,
            'context': self.context,
        }


class ShapeMismatchError(ContourFrameError):
    """Raised when a frame cannot decide between scalar and sample contours."""
    code = ErrorCode.E1001_SHAPE_MISMATCH


class EmptyWindowError(ContourFrameError, ValueError):
    """Raised when mean or stdev is requested from an empty window."""
    code = ErrorCode.E1002_EMPTY_WINDOW


class QuantizationError(ContourFrameError):
    """Raised by quantizers when a contour is malformed or out of range."""
    code = ErrorCode.E2001_QUANTIZATION_FAILED


class ModelMismatchError(ContourFrameError):
    """Raised when a quantized contour and its model disagree on length."""
    code = ErrorCode.E2002_MODEL_LENGTH_MISMATCH


class ConfigError(ContourFrameError):
    """Raised when a configuration fails validation."""
    code = ErrorCode.E3001_INVALID_CONFIG

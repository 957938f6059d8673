"""
Contour quantizers.

A quantizer turns a continuous contour into a fixed-length list of integer
symbols, one per model position. Bin boundaries are chosen outside this
package; UniformContourQuantizer covers the common case of evenly spaced
time segments and value levels.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Union

import numpy as np

from .contour import Contour
from ..core.errors import QuantizationError


class ContourQuantizer(ABC):
    """Abstract base class for contour quantizers."""

    @abstractmethod
    def quantize(self, contour: Union[Contour, Sequence[float]]) -> List[int]:
        """
        Map a contour to one symbol per model position.

        Raises:
            QuantizationError: if the contour cannot be quantized
        """
        pass


class UniformContourQuantizer(ContourQuantizer):
    """
    Split a contour into `time_bins` segments and bin each segment's mean
    into one of `value_bins` equal-width levels over [min_value, max_value].

    Example:
        cq = UniformContourQuantizer(time_bins=3, value_bins=2, min_value=0, max_value=10)
        cq.quantize([1, 2, 6, 7, 9, 9])   # [0, 1, 1]
    """

    def __init__(
        self,
        time_bins: int,
        value_bins: int,
        min_value: float,
        max_value: float,
    ):
        if time_bins < 1:
            raise ValueError(f"time_bins must be >= 1, got {time_bins}")
        if value_bins < 1:
            raise ValueError(f"value_bins must be >= 1, got {value_bins}")
        if min_value >= max_value:
            raise ValueError(f"min_value must be < max_value, got {min_value} >= {max_value}")

        self.time_bins = time_bins
        self.value_bins = value_bins
        self.min_value = min_value
        self.max_value = max_value

    def quantize(self, contour: Union[Contour, Sequence[float]]) -> List[int]:
        try:
            values = np.asarray(list(contour), dtype=float)
        except (TypeError, ValueError) as e:
            raise QuantizationError(context={'reason': str(e)}) from e

        if len(values) < self.time_bins:
            raise QuantizationError(context={
                'samples': len(values),
                'time_bins': self.time_bins,
            })
        if not np.all(np.isfinite(values)):
            raise QuantizationError(context={'reason': 'non-finite values'})

        means = np.array([segment.mean() for segment in np.array_split(values, self.time_bins)])

        if means.min() < self.min_value or means.max() > self.max_value:
            raise QuantizationError(context={
                'range': (float(means.min()), float(means.max())),
                'bounds': (self.min_value, self.max_value),
            })

        width = (self.max_value - self.min_value) / self.value_bins
        levels = np.floor((means - self.min_value) / width).astype(int)
        # max_value itself falls in the top level
        levels = np.clip(levels, 0, self.value_bins - 1)

        return [int(level) for level in levels]

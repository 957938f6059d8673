"""
Word-based context frame sliding over a contour.

The frame is placed at the first word of a sequence and advanced one word
at a time. At each position it holds the contour values of the current word
and its context, and answers max/min/mean/stdev/size queries about them.

Two contour shapes are supported, locked in from the first word:
- SCALAR: one value per word (e.g. mean f0 of the word)
- SAMPLES: a list of TimeValuePair per word (e.g. the f0 track inside it)

NOTE: in the scalar shape every advance drops exactly one value from the
back of the window, so the window spans [position, position + front] and
`back` has no effect. The sample shape honours `back`.
"""

import logging
from collections import deque
from typing import Deque, Sequence, Tuple

from .aggregation import RunningAggregate
from ..core.errors import ShapeMismatchError
from ..core.words import FeatureShape, classify_feature, sample_values

logger = logging.getLogger(__name__)


class ContextFrame:
    """
    Sliding window of contour values over a word sequence.

    Example:
        frame = ContextFrame(words, 'f0', back=2, front=1)
        for word in words:
            word.set_attribute('f0_ctx_max', frame.get_max())
            frame.increment()
    """

    def __init__(self, data: Sequence, feature_name: str, back: int = 0, front: int = 0):
        """
        Initialize a frame at the first word.

        Args:
            data: Words exposing get_attribute(name)
            feature_name: The attribute holding the contour
            back: Number of preceding words in the context
            front: Number of following words in the context
        """
        if back < 0:
            raise ValueError(f"back must be >= 0, got {back}")
        if front < 0:
            raise ValueError(f"front must be >= 0, got {front}")

        self.data = data
        self.feature_name = feature_name
        self.back = back
        self.front = front

        self.current: int = 0
        self.window: Deque[float] = deque()
        self.agg = RunningAggregate()

        if len(data) > 0:
            self.shape = classify_feature(data[0].get_attribute(feature_name))
        else:
            self.shape = FeatureShape.ABSENT

        self._init_window()

    def _init_window(self) -> None:
        """Fill the window with words [current, current + front]."""
        self.window.clear()
        self.agg.reset()

        end = min(len(self.data), self.current + self.front + 1)
        for i in range(self.current, end):
            for d in sample_values(self._feature(i)):
                self._push(d)

    def _feature(self, index: int):
        return self.data[index].get_attribute(self.feature_name)

    def _push(self, value: float) -> None:
        self.window.append(value)
        self.agg.insert(value)

    def _pop(self) -> None:
        self.agg.remove(self.window.popleft())

    def increment(self) -> None:
        """
        Slide the frame forward one word.

        Raises:
            ShapeMismatchError: if the first word's feature is neither a
                scalar nor a sample list
        """
        self.current += 1

        if self.current > len(self.data) - 1:
            if self.window:
                logger.debug(f"Context frame on {self.feature_name} exhausted")
            self.window.clear()
            self.agg = RunningAggregate()
            return

        if self.shape == FeatureShape.SCALAR:
            self._increment_scalar()
        elif self.shape == FeatureShape.SAMPLES:
            self._increment_samples()
        else:
            raise ShapeMismatchError(context={
                'feature': self.feature_name,
                'shape': self.shape.value,
                'position': self.current,
            })

    def _increment_scalar(self) -> None:
        # Remove trailing value
        if self.window:
            self._pop()

        # Add leading value
        lead = self.current + self.front
        if lead < len(self.data):
            value = self._feature(lead)
            if classify_feature(value) == FeatureShape.SCALAR:
                self._push(float(value))

    def _increment_samples(self) -> None:
        # Remove trailing values
        trail = self.current - self.back - 1
        points_to_remove = 0
        if 0 <= trail < len(self.data):
            value = self._feature(trail)
            if classify_feature(value) == FeatureShape.SAMPLES:
                points_to_remove = len(value)
        for _ in range(min(len(self.window), points_to_remove)):
            self._pop()

        # Add leading values
        lead = self.current + self.front
        if lead < len(self.data):
            value = self._feature(lead)
            if value is None:
                logger.debug(f"null feature: {self.feature_name}")
            for d in sample_values(value):
                self._push(d)

    def get_max(self) -> float:
        """Maximum value in the frame (-inf when empty)."""
        return self.agg.get_max()

    def get_min(self) -> float:
        """Minimum value in the frame (+inf when empty)."""
        return self.agg.get_min()

    def get_mean(self) -> float:
        return self.agg.get_mean()

    def get_stdev(self) -> float:
        return self.agg.get_stdev()

    def get_size(self) -> int:
        return self.agg.get_size()

    @property
    def position(self) -> int:
        return self.current

    @property
    def exhausted(self) -> bool:
        """True once the frame has advanced past the last word."""
        return self.current > len(self.data) - 1

    def values(self) -> Tuple[float, ...]:
        """Live contour values, oldest first."""
        return tuple(self.window)

    def __repr__(self) -> str:
        return (
            f"ContextFrame(feature={self.feature_name!r}, "
            f"position={self.current}, "
            f"back={self.back}, front={self.front}, "
            f"size={self.get_size()})"
        )

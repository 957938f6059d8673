"""
Context feature extraction.

Walks a word sequence with one ContextFrame per (feature, back, front)
context and stores the frame statistics on each word.

Attribute naming: "{stat}[{feature}]_{back}_{front}", e.g. "max[f0]_2_1"
is the maximum f0 over two words of back context and one of front context.
"""

import logging
from typing import List, Sequence, Tuple

from .context_frame import ContextFrame
from ..core.words import FeatureShape, classify_feature

logger = logging.getLogger(__name__)

STATISTICS = ('max', 'min', 'mean', 'stdev', 'size')


def attribute_name(feature: str, stat: str, back: int, front: int) -> str:
    """Name of the word attribute holding one context statistic."""
    return f"{stat}[{feature}]_{back}_{front}"


class ContextFeatureExtractor:
    """
    Assign context statistics to words.

    Words whose context window is empty only receive the size attribute,
    since mean and stdev are undefined there.

    Example:
        extractor = ContextFeatureExtractor(['f0'], [(2, 0), (1, 1)])
        extractor.extract(words)
        words[3].get_attribute('mean[f0]_1_1')
    """

    def __init__(self, features: Sequence[str], contexts: Sequence[Tuple[int, int]]):
        for back, front in contexts:
            if back < 0 or front < 0:
                raise ValueError(f"Invalid context ({back}, {front})")

        self.features = list(features)
        self.contexts = [(int(b), int(f)) for b, f in contexts]

    @classmethod
    def from_config(cls, config) -> 'ContextFeatureExtractor':
        """Create from a ContourFrameConfig."""
        return cls(config.context.features, config.context.contexts)

    def output_attributes(self) -> List[str]:
        """Every attribute name extract() can assign."""
        return [
            attribute_name(feature, stat, back, front)
            for feature in self.features
            for back, front in self.contexts
            for stat in STATISTICS
        ]

    def extract(self, words: Sequence) -> None:
        """Compute context statistics for every word, in place."""
        if not words:
            return

        for feature in self.features:
            shape = classify_feature(words[0].get_attribute(feature))
            if shape not in (FeatureShape.SCALAR, FeatureShape.SAMPLES):
                logger.warning(
                    f"Skipping {feature}: first word has no usable contour ({shape.value})"
                )
                continue

            for back, front in self.contexts:
                self._extract_context(words, feature, back, front)

    def _extract_context(self, words: Sequence, feature: str, back: int, front: int) -> None:
        frame = ContextFrame(words, feature, back, front)

        for word in words:
            size = frame.get_size()
            word.set_attribute(attribute_name(feature, 'size', back, front), size)
            if size > 0:
                word.set_attribute(attribute_name(feature, 'max', back, front), frame.get_max())
                word.set_attribute(attribute_name(feature, 'min', back, front), frame.get_min())
                word.set_attribute(attribute_name(feature, 'mean', back, front), frame.get_mean())
                word.set_attribute(attribute_name(feature, 'stdev', back, front), frame.get_stdev())
            frame.increment()

"""
Word records and contour feature shapes.

A word carries named attributes. A contour feature on a word is either a
single value (e.g. mean pitch) or the list of time-stamped samples that fall
inside the word (e.g. the raw pitch track). FeatureShape tags which one a
value is so callers resolve it once instead of probing types repeatedly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class TimeValuePair:
    """A single contour sample."""
    time: float
    value: float


class FeatureShape(Enum):
    """Runtime shape of a word's contour feature."""
    SCALAR = "scalar"
    SAMPLES = "samples"
    ABSENT = "absent"
    UNKNOWN = "unknown"


def classify_feature(value: Any) -> FeatureShape:
    """
    Resolve the shape of an attribute value.

    Examples:
        classify_feature(3.5) = SCALAR
        classify_feature([TimeValuePair(0.0, 1.0)]) = SAMPLES
        classify_feature([]) = SAMPLES       # sequence-typed, zero samples
        classify_feature(None) = ABSENT
        classify_feature("H*") = UNKNOWN
    """
    if value is None:
        return FeatureShape.ABSENT
    if isinstance(value, bool):
        return FeatureShape.UNKNOWN
    if isinstance(value, (int, float)):
        return FeatureShape.SCALAR
    if isinstance(value, (list, tuple)):
        if len(value) == 0 or isinstance(value[0], TimeValuePair):
            return FeatureShape.SAMPLES
    return FeatureShape.UNKNOWN


def sample_values(value: Any) -> List[float]:
    """
    Values a feature contributes to a window.

    Scalars contribute themselves, sample lists contribute every sample
    value in order, anything else contributes nothing.
    """
    shape = classify_feature(value)
    if shape == FeatureShape.SCALAR:
        return [float(value)]
    if shape == FeatureShape.SAMPLES:
        return [float(tvp.value) for tvp in value]
    return []


@dataclass
class Word:
    """
    A word region with named attributes.

    Attributes:
        start: Start time in seconds
        end: End time in seconds
        label: Orthography, if known
        attributes: Feature name -> value
    """
    start: float
    end: float
    label: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    @property
    def duration(self) -> float:
        return self.end - self.start

    def get_attribute(self, name: str) -> Any:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> None:
        self.attributes[name] = value

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def __repr__(self) -> str:
        return (
            f"Word(label={self.label!r}, "
            f"start={self.start:.3f}, "
            f"end={self.end:.3f}, "
            f"attributes={len(self.attributes)})"
        )

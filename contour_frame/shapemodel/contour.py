"""Evenly sampled contours."""

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence

from ..core.words import TimeValuePair


@dataclass
class Contour:
    """
    A contour sampled every `step` seconds from `start`.

    Attributes:
        start: Time of the first sample in seconds
        step: Seconds between samples
        values: Sample values
    """
    start: float = 0.0
    step: float = 0.01
    values: List[float] = field(default_factory=list)

    @classmethod
    def from_pairs(cls, pairs: Sequence[TimeValuePair], step: float = 0.01) -> 'Contour':
        """Build from samples; the time of the first sample becomes `start`."""
        start = pairs[0].time if pairs else 0.0
        return cls(start=start, step=step, values=[p.value for p in pairs])

    def times(self) -> Iterator[float]:
        for i in range(len(self.values)):
            yield self.start + i * self.step

    def pairs(self) -> List[TimeValuePair]:
        return [TimeValuePair(t, v) for t, v in zip(self.times(), self.values)]

    @property
    def end(self) -> float:
        return self.start + len(self.values) * self.step

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

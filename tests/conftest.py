"""Pytest fixtures for contour_frame tests."""

from typing import List

import pytest

from contour_frame.core.words import Word, TimeValuePair
from contour_frame.shapemodel.distribution import ConditionalDistribution


def make_scalar_words(values, feature: str = 'f0') -> List[Word]:
    """One word per value, 0.5 s each."""
    words = []
    for i, v in enumerate(values):
        word = Word(start=i * 0.5, end=(i + 1) * 0.5, label=f"w{i}")
        if v is not None:
            word.set_attribute(feature, v)
        words.append(word)
    return words


def make_sample_words(tracks, feature: str = 'f0', step: float = 0.01) -> List[Word]:
    """One word per track; each track value becomes a TimeValuePair."""
    words = []
    t = 0.0
    for i, track in enumerate(tracks):
        start = t
        if track is None:
            word = Word(start=start, end=start + step, label=f"w{i}")
        else:
            pairs = []
            for v in track:
                pairs.append(TimeValuePair(time=t, value=v))
                t += step
            word = Word(start=start, end=t, label=f"w{i}", attributes={feature: pairs})
        words.append(word)
    return words


@pytest.fixture
def scalar_words() -> List[Word]:
    """Four words with scalar f0."""
    return make_scalar_words([3.0, 7.0, 5.0, 1.0])


@pytest.fixture
def sample_words() -> List[Word]:
    """Four words with f0 tracks of varying length."""
    return make_sample_words([
        [1.0, 2.0],
        [10.0],
        [4.0, 5.0, 6.0],
        [0.5, 3.0],
    ])


@pytest.fixture
def two_position_tables() -> List[ConditionalDistribution]:
    """P0('0' | start) = 0.5, P1('1' | '0') = 0.25."""
    return [
        ConditionalDistribution.from_dict({'': {0: 0.5, 1: 0.5}}),
        ConditionalDistribution.from_dict({'0': {0: 0.75, 1: 0.25}}),
    ]

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Mapping

from .clean import word_histogram


Vocabulary = Mapping[str, int]
TermScores = Mapping[str, float]


def freeze_counts(hist: Counter) -> Vocabulary:
    """Read-only view ordered by word, so every table iterates terms the same way."""
    return MappingProxyType({w: hist[w] for w in sorted(hist)})


def build_vocabulary(document: str) -> Vocabulary:
    """Reference vocabulary: the unique words of one document with their counts."""
    return freeze_counts(word_histogram(document))


def freeze_scores(scores: dict[str, float]) -> TermScores:
    return MappingProxyType(scores)

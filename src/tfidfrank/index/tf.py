from __future__ import annotations

import logging
from collections import Counter
from typing import Sequence

from ..clean import token_count, word_histogram
from ..errors import EmptyDocumentError
from ..vocab import TermScores, Vocabulary, freeze_scores

logger = logging.getLogger(__name__)


def term_frequencies(vocabulary: Vocabulary, hist: Counter, doc_index: int = 0) -> TermScores:
    """tf(t, d) = count(t, d) / |d| for every vocabulary term, 0.0 when absent."""
    n = token_count(hist)
    if n == 0:
        raise EmptyDocumentError(doc_index)
    scores: dict[str, float] = {}
    for word in vocabulary:
        count = hist[word] if word in hist else 0
        scores[word] = count / n
    return freeze_scores(scores)


def compute_tf(
    vocabulary: Vocabulary,
    documents: Sequence[str],
    histograms: Sequence[Counter] | None = None,
) -> list[TermScores]:
    """One TF row per document, in input order.

    Pass precomputed `histograms` (aligned with `documents`) to avoid re-tokenizing.
    """
    if histograms is None:
        histograms = [word_histogram(doc) for doc in documents]
    elif len(histograms) != len(documents):
        raise ValueError("histograms must align with documents")

    table = [term_frequencies(vocabulary, hist, doc_index=i) for i, hist in enumerate(histograms)]
    logger.debug("TF computed for %d documents over %d terms", len(table), len(vocabulary))
    return table

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Sequence

from ..clean import word_histogram
from ..errors import VocabularyTermAbsentEverywhereError
from ..vocab import TermScores, Vocabulary, freeze_scores

logger = logging.getLogger(__name__)


def document_frequencies(vocabulary: Vocabulary, histograms: Sequence[Counter]) -> dict[str, int]:
    """Number of documents containing each vocabulary term."""
    return {word: sum(1 for hist in histograms if word in hist) for word in vocabulary}


def compute_idf(
    vocabulary: Vocabulary,
    documents: Sequence[str],
    n_docs: int | None = None,
    histograms: Sequence[Counter] | None = None,
) -> TermScores:
    """idf(t) = ln(D / df(t)), D defaulting to the number of documents."""
    if histograms is None:
        histograms = [word_histogram(doc) for doc in documents]
    elif len(histograms) != len(documents):
        raise ValueError("histograms must align with documents")
    if n_docs is not None and n_docs < len(histograms):
        raise ValueError(f"n_docs must be >= {len(histograms)}, got {n_docs}")
    D = len(documents) if n_docs is None else n_docs

    scores: dict[str, float] = {}
    for word, df in document_frequencies(vocabulary, histograms).items():
        if df == 0:
            raise VocabularyTermAbsentEverywhereError(word)
        scores[word] = math.log(D / df)

    logger.debug("IDF computed for %d terms across %d documents", len(scores), D)
    return freeze_scores(scores)

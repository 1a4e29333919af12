from __future__ import annotations

import logging
from typing import Sequence

from ..vocab import TermScores, Vocabulary, freeze_scores

logger = logging.getLogger(__name__)


def compute_tfidf(
    vocabulary: Vocabulary,
    tf: Sequence[TermScores],
    idf: TermScores,
) -> list[TermScores]:
    """tfidf(t, d) = tf(t, d) * idf(t), one row per TF row."""
    table: list[TermScores] = []
    for i, row in enumerate(tf):
        scores: dict[str, float] = {}
        for word in vocabulary:
            if word not in row:
                raise ValueError(f"TF row {i} has no entry for {word!r}")
            if word not in idf:
                raise ValueError(f"IDF table has no entry for {word!r}")
            scores[word] = row[word] * idf[word]
        table.append(freeze_scores(scores))
    logger.debug("TF-IDF combined for %d documents", len(table))
    return table

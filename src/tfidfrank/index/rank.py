from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity

from ..errors import InsufficientDocumentsError
from ..vocab import TermScores, Vocabulary

logger = logging.getLogger(__name__)

SCORING_METHODS = ("sum", "cosine")


@dataclass(frozen=True)
class RankedDocument:
    idx: int
    position: int  # 1-based, as reported to callers
    score: float


def tfidf_matrix(vocabulary: Vocabulary, tfidf: Sequence[TermScores]) -> np.ndarray:
    """Documents x terms, columns in vocabulary order."""
    terms = list(vocabulary)
    return np.array([[row[w] for w in terms] for row in tfidf], dtype=float).reshape(len(tfidf), len(terms))


def document_sums(vocabulary: Vocabulary, tfidf: Sequence[TermScores]) -> np.ndarray:
    """Summed TF-IDF weight of each document over the vocabulary, in input order."""
    return tfidf_matrix(vocabulary, tfidf).sum(axis=1)


def reference_cosine(vocabulary: Vocabulary, tfidf: Sequence[TermScores], reference_index: int = 0) -> np.ndarray:
    mat = tfidf_matrix(vocabulary, tfidf)
    if mat.shape[1] == 0:
        return np.zeros(mat.shape[0], dtype=float)
    return cosine_similarity(mat[reference_index : reference_index + 1], mat)[0]


def _check_inputs(n_docs: int, reference_index: int) -> None:
    if n_docs < 2:
        raise InsufficientDocumentsError(n_docs)
    if not 0 <= reference_index < n_docs:
        raise ValueError(f"reference_index {reference_index} out of range for {n_docs} documents")


def rank_documents(
    vocabulary: Vocabulary,
    tfidf: Sequence[TermScores],
    reference_index: int = 0,
    k: int | None = None,
    scoring: str = "sum",
) -> list[RankedDocument]:
    """
    Order every non-reference document by descending score.

    Among equal scores the later document comes first, so the head of the list
    is the last document reaching the maximum.
    """
    _check_inputs(len(tfidf), reference_index)
    if scoring == "sum":
        scores = document_sums(vocabulary, tfidf)
    elif scoring == "cosine":
        scores = reference_cosine(vocabulary, tfidf, reference_index)
    else:
        raise ValueError(f"Unknown scoring method: {scoring}")

    idx = np.array([i for i in range(len(tfidf)) if i != reference_index], dtype=int)
    cand = scores[idx]
    # primary key is the last one: score descending, then index descending
    order = np.lexsort((-idx, -cand))
    if k is not None:
        order = order[: max(0, k)]

    ranked = [RankedDocument(idx=int(idx[o]), position=int(idx[o]) + 1, score=float(cand[o])) for o in order]
    logger.debug("Ranked %d documents against reference %d (%s)", len(idx), reference_index, scoring)
    return ranked


def most_similar_document(
    vocabulary: Vocabulary,
    tfidf: Sequence[TermScores],
    reference_index: int = 0,
    scoring: str = "sum",
) -> int:
    """1-based position of the document scoring highest against the reference."""
    best = rank_documents(vocabulary, tfidf, reference_index=reference_index, k=1, scoring=scoring)[0]
    return best.position

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .clean import word_histogram
from .errors import InsufficientDocumentsError
from .index.idf import compute_idf
from .index.rank import RankedDocument, document_sums, rank_documents
from .index.tf import compute_tf
from .index.tfidf import compute_tfidf
from .vocab import TermScores, Vocabulary, build_vocabulary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    documents: tuple[str, ...]
    reference_index: int
    vocabulary: Vocabulary
    tf: tuple[TermScores, ...]
    idf: TermScores
    tfidf: tuple[TermScores, ...]
    sums: np.ndarray
    ranking: tuple[RankedDocument, ...]

    @property
    def most_similar(self) -> int:
        """1-based position of the best match."""
        return self.ranking[0].position


def analyze(
    documents: Sequence[str],
    reference_index: int = 0,
    vocabulary: Vocabulary | None = None,
    scoring: str = "sum",
) -> PipelineResult:
    """Run every stage and keep the intermediate tables.

    Each document is tokenized once; TF and IDF share the histograms.
    """
    docs = tuple(documents)
    if len(docs) < 2:
        raise InsufficientDocumentsError(len(docs))
    if not 0 <= reference_index < len(docs):
        raise ValueError(f"reference_index {reference_index} out of range for {len(docs)} documents")

    if vocabulary is None:
        vocabulary = build_vocabulary(docs[reference_index])
    logger.debug("Reference vocabulary: %d terms from document %d", len(vocabulary), reference_index)

    histograms = [word_histogram(doc) for doc in docs]
    tf = compute_tf(vocabulary, docs, histograms=histograms)
    idf = compute_idf(vocabulary, docs, histograms=histograms)
    tfidf = compute_tfidf(vocabulary, tf, idf)
    ranking = rank_documents(vocabulary, tfidf, reference_index=reference_index, scoring=scoring)

    sums = document_sums(vocabulary, tfidf)
    sums.setflags(write=False)

    result = PipelineResult(
        documents=docs,
        reference_index=reference_index,
        vocabulary=vocabulary,
        tf=tuple(tf),
        idf=idf,
        tfidf=tuple(tfidf),
        sums=sums,
        ranking=tuple(ranking),
    )
    logger.info("Most similar to document %d: %d", reference_index + 1, result.most_similar)
    return result


def run_pipeline(vocabulary: Vocabulary, documents: Sequence[str]) -> int:
    """1-based index of the document most similar to the first one."""
    return analyze(documents, reference_index=0, vocabulary=vocabulary).most_similar

"""TF-IDF scoring and similarity ranking over a small ordered corpus.

A reference vocabulary is taken from one designated document; every document
is scored against it and the remaining documents are ranked by their summed
TF-IDF weight.
"""

from .errors import (
    EmptyDocumentError,
    InsufficientDocumentsError,
    TfidfRankError,
    VocabularyTermAbsentEverywhereError,
)
from .pipeline import PipelineResult, analyze, run_pipeline
from .vocab import build_vocabulary

__all__ = [
    "EmptyDocumentError",
    "InsufficientDocumentsError",
    "PipelineResult",
    "TfidfRankError",
    "VocabularyTermAbsentEverywhereError",
    "analyze",
    "build_vocabulary",
    "run_pipeline",
]

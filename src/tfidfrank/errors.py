from __future__ import annotations


class TfidfRankError(ValueError):
    """Base class for scoring failures that would otherwise yield NaN or inf."""


class EmptyDocumentError(TfidfRankError):
    def __init__(self, doc_index: int):
        self.doc_index = doc_index
        super().__init__(f"Document {doc_index} has no tokens; term frequency is undefined")


class VocabularyTermAbsentEverywhereError(TfidfRankError):
    def __init__(self, term: str):
        self.term = term
        super().__init__(f"Term {term!r} occurs in no document; inverse document frequency is undefined")


class InsufficientDocumentsError(TfidfRankError):
    def __init__(self, n_docs: int):
        self.n_docs = n_docs
        super().__init__(f"Ranking needs at least 2 documents, got {n_docs}")

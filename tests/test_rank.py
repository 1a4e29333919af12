import math

import numpy as np
import pytest

from tfidfrank.errors import InsufficientDocumentsError
from tfidfrank.index.idf import compute_idf
from tfidfrank.index.rank import document_sums, most_similar_document, rank_documents, reference_cosine
from tfidfrank.index.tf import compute_tf
from tfidfrank.index.tfidf import compute_tfidf
from tfidfrank.vocab import build_vocabulary


def _tfidf(vocab, docs):
    return compute_tfidf(vocab, compute_tf(vocab, docs), compute_idf(vocab, docs))


def test_demo_sums(demo_vocab, demo_docs):
    sums = document_sums(demo_vocab, _tfidf(demo_vocab, demo_docs))
    idf_apple = math.log(4 / 3)
    assert sums.shape == (4,)
    assert sums[1] == pytest.approx((1 / 8 + 1 / 8) * idf_apple)
    assert sums[2] == pytest.approx((2 / 7 + 1 / 7) * idf_apple)
    assert sums[3] == 0.0


def test_demo_most_similar_is_third_document(demo_vocab, demo_docs):
    assert most_similar_document(demo_vocab, _tfidf(demo_vocab, demo_docs)) == 3


def test_demo_full_ranking(demo_vocab, demo_docs):
    ranked = rank_documents(demo_vocab, _tfidf(demo_vocab, demo_docs))
    assert [r.position for r in ranked] == [3, 2, 4]
    assert [r.idx for r in ranked] == [2, 1, 3]
    assert ranked[0].score > ranked[1].score > ranked[2].score


def test_tie_goes_to_later_document():
    docs = ["apple", "apple pie", "pie apple", "orange"]
    vocab = build_vocabulary(docs[0])
    tfidf = _tfidf(vocab, docs)
    assert most_similar_document(vocab, tfidf) == 3
    assert [r.position for r in rank_documents(vocab, tfidf)] == [3, 2, 4]


def test_all_zero_scores_pick_last_document():
    docs = ["apple", "pear", "plum"]
    vocab = build_vocabulary(docs[0])
    assert most_similar_document(vocab, _tfidf(vocab, docs)) == 3


def test_reference_document_is_never_ranked():
    docs = ["an apple", "an apple", "an orange"]
    vocab = build_vocabulary(docs[1])
    ranked = rank_documents(vocab, _tfidf(vocab, docs), reference_index=1)
    assert [r.idx for r in ranked] == [0, 2]
    assert most_similar_document(vocab, _tfidf(vocab, docs), reference_index=1) == 1


def test_top_k_truncates(demo_vocab, demo_docs):
    ranked = rank_documents(demo_vocab, _tfidf(demo_vocab, demo_docs), k=2)
    assert [r.position for r in ranked] == [3, 2]


def test_single_document_raises(demo_vocab):
    tfidf = _tfidf(demo_vocab, ["I'd like an apple"])
    with pytest.raises(InsufficientDocumentsError) as exc:
        most_similar_document(demo_vocab, tfidf)
    assert exc.value.n_docs == 1


def test_no_documents_raises(demo_vocab):
    with pytest.raises(InsufficientDocumentsError):
        rank_documents(demo_vocab, [])


def test_reference_index_out_of_range(demo_vocab, demo_docs):
    with pytest.raises(ValueError):
        rank_documents(demo_vocab, _tfidf(demo_vocab, demo_docs), reference_index=4)


def test_unknown_scoring_rejected(demo_vocab, demo_docs):
    with pytest.raises(ValueError):
        rank_documents(demo_vocab, _tfidf(demo_vocab, demo_docs), scoring="bm25")


def test_cosine_scoring_prefers_balanced_overlap(demo_vocab, demo_docs):
    tfidf = _tfidf(demo_vocab, demo_docs)
    sims = reference_cosine(demo_vocab, tfidf)
    assert sims[0] == pytest.approx(1.0)
    assert sims[3] == 0.0
    assert np.all((sims >= 0.0) & (sims <= 1.0 + 1e-9))

    ranked = rank_documents(demo_vocab, tfidf, scoring="cosine")
    assert [r.position for r in ranked] == [2, 3, 4]
    assert most_similar_document(demo_vocab, tfidf, scoring="cosine") == 2

import pytest

from tfidfrank.datasets import DEMO_DOCUMENTS
from tfidfrank.vocab import build_vocabulary


@pytest.fixture
def demo_docs():
    return list(DEMO_DOCUMENTS)


@pytest.fixture
def demo_vocab(demo_docs):
    return build_vocabulary(demo_docs[0])

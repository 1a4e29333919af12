from __future__ import annotations

from collections import Counter


PUNCTUATION = ".,;:!?\"\n"

_PUNCT_TABLE = str.maketrans({ch: " " for ch in PUNCTUATION})


def normalize_text(text: str) -> str:
    """Lower-case and blank out punctuation, one space per character.

    Apostrophes and hyphens are kept so "I'd" and "scikit-learn" stay whole.
    """
    return text.lower().translate(_PUNCT_TABLE)


def simple_tokenize(text: str) -> list[str]:
    """Split normalized text on single spaces, dropping empty pieces."""
    return [tok for tok in normalize_text(text).split(" ") if tok]


def word_histogram(text: str) -> Counter:
    """Word -> occurrence count for one document."""
    return Counter(simple_tokenize(text))


def token_count(hist: Counter) -> int:
    return sum(hist.values())

"""
N-gram generation and the set/vector coefficients built on it.
"""

from __future__ import annotations

from collections import Counter

from ..models import NGramSet

DEFAULT_GRAM_SIZE = 2


def generate_ngrams(text: str, n: int = DEFAULT_GRAM_SIZE) -> NGramSet:
    """
    Slide a window of ``n`` characters over ``text``.

    When the text is shorter than ``n`` the whole text is a single gram.

    Examples:
        generate_ngrams("abab", 2) -> {"ab": 2, "ba": 1}, total 3
        generate_ngrams("a", 3) -> {"a": 1}, total 1

    Raises:
        ValueError: if ``n`` is smaller than 1
    """
    if n < 1:
        raise ValueError(f"n-gram size must be at least 1, got {n}")
    if len(text) < n:
        return NGramSet(n=n, source=text, grams={text: 1}, total=1)
    counts = Counter(text[i : i + n] for i in range(len(text) - n + 1))
    return NGramSet(n=n, source=text, grams=dict(counts), total=sum(counts.values()))


def dice(a: str, b: str, n: int = DEFAULT_GRAM_SIZE) -> float:
    """Sorensen-Dice coefficient over n-gram multisets."""
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0
    return generate_ngrams(a, n).dice_similarity(generate_ngrams(b, n))


def jaccard(a: str, b: str, n: int = DEFAULT_GRAM_SIZE) -> float:
    """Jaccard index over distinct n-grams."""
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0
    return generate_ngrams(a, n).jaccard_similarity(generate_ngrams(b, n))


def cosine(a: str, b: str, n: int = DEFAULT_GRAM_SIZE) -> float:
    """Cosine similarity of n-gram count vectors."""
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0
    return generate_ngrams(a, n).cosine_similarity(generate_ngrams(b, n))

"""
Similarity Scorer - Bigram Dice Coefficient.

Lexical similarity between two sentences in [0, 1]. Both strings are
lowercased and reduced to ``[a-z0-9]`` before overlapping character
bigrams are counted.
"""

import re
from collections import Counter

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize(text: str) -> str:
    """Lowercase and strip everything outside ``[a-z0-9]``."""
    return _NON_ALNUM.sub("", text.lower())


def get_bigrams(text: str) -> list[str]:
    """All overlapping 2-character substrings of the normalized text, in order."""
    s = normalize(text)
    return [s[i:i + 2] for i in range(len(s) - 1)]


def bigram_counts(text: str) -> Counter:
    """Bigram multiset of the normalized text."""
    return Counter(get_bigrams(text))


def dice_from_counts(bigrams_a: Counter, bigrams_b: Counter) -> float:
    """
    Dice coefficient of two precomputed bigram multisets.

    The comparator counts each sentence once and scores the counters, so
    the pairwise loop does no text normalization.
    """
    total = sum(bigrams_a.values()) + sum(bigrams_b.values())
    if not bigrams_a or not bigrams_b or total == 0:
        return 0.0

    intersection = sum((bigrams_a & bigrams_b).values())
    return (2 * intersection) / total


def dice_coefficient(a: str, b: str) -> float:
    """
    Dice coefficient over bigram multisets.

    A bigram shared by both strings counts as many times as its smaller
    occurrence count, so the score is symmetric and never exceeds 1.

    Args:
        a: First string
        b: Second string

    Returns:
        Similarity in [0, 1]; 0 when either side has no bigrams
    """
    return dice_from_counts(bigram_counts(a), bigram_counts(b))

"""
Sentence Segmenter.

Heuristic splitter: a sentence ends at ``.``, ``?`` or ``!`` when the next
non-space character is an uppercase letter. Abbreviations, initials and
decimals followed by a capital are split too; that is accepted behavior.
"""

import re

from conflict_checker.comparison.schemas import MIN_SENTENCE_LENGTH

_BOUNDARY = re.compile(r"(?<=[.?!])\s*(?=[A-Z])")


def split_sentences(text: str, min_length: int = MIN_SENTENCE_LENGTH) -> list[str]:
    """
    Split raw text into trimmed sentences, in document order.

    Args:
        text: Raw document text
        min_length: Fragments this long or shorter (after trimming) are dropped

    Returns:
        List of sentences
    """
    if not text:
        return []

    sentences = []
    for candidate in _BOUNDARY.split(text):
        candidate = candidate.strip()
        if len(candidate) > min_length:
            sentences.append(candidate)
    return sentences

"""
Comparison Layer - Sentence-Level Conflict Detection.

Deterministic comparison of two documents:
1. Segmenter - splits text into sentences
2. Similarity - bigram Dice coefficient between sentences
3. Comparator - pairs sentences into matches, conflicts and unique content
4. Word diff - shows what changed inside a conflicting pair

Plus pairwise comparison across a set of documents.
"""

from conflict_checker.comparison.comparator import SentenceComparator, compare
from conflict_checker.comparison.multi_doc import (
    InsufficientDocumentsError,
    MultiDocError,
    compare_documents,
)
from conflict_checker.comparison.schemas import (
    CONFLICT_THRESHOLD,
    MATCH_THRESHOLD,
    MIN_SENTENCE_LENGTH,
    ComparisonReport,
    ComparisonThresholds,
    ConflictItem,
    DiffChange,
    DocumentText,
    MultiDocComparison,
    PairwiseComparison,
    SourceDoc,
    UniqueItem,
)
from conflict_checker.comparison.segmenter import split_sentences
from conflict_checker.comparison.similarity import (
    bigram_counts,
    dice_coefficient,
    dice_from_counts,
    get_bigrams,
)
from conflict_checker.comparison.word_diff import word_diff

__all__ = [
    # Comparator
    "SentenceComparator",
    "compare",
    # Multi-Doc
    "compare_documents",
    "MultiDocError",
    "InsufficientDocumentsError",
    # Helpers
    "split_sentences",
    "dice_coefficient",
    "get_bigrams",
    "bigram_counts",
    "dice_from_counts",
    "word_diff",
    # Schemas
    "MATCH_THRESHOLD",
    "CONFLICT_THRESHOLD",
    "MIN_SENTENCE_LENGTH",
    "ComparisonReport",
    "ComparisonThresholds",
    "ConflictItem",
    "DiffChange",
    "DocumentText",
    "MultiDocComparison",
    "PairwiseComparison",
    "SourceDoc",
    "UniqueItem",
]

"""
Sentence Comparator - Deterministic Conflict Detection.

Compares two documents sentence by sentence:
1. Segment both texts into sentences
2. For each sentence of A, find the most similar sentence of B still unmatched
3. Classify the pair as a match, a conflict or unique content
4. Report everything B has left over as unique to B

Exhaustive pairwise scoring, O(|A| x |B|) similarity computations over
bigram counts computed once per sentence.
"""

from collections import Counter

from conflict_checker.comparison.schemas import (
    ComparisonReport,
    ComparisonThresholds,
    ConflictItem,
    SourceDoc,
    UniqueItem,
)
from conflict_checker.comparison.segmenter import split_sentences
from conflict_checker.comparison.similarity import bigram_counts, dice_from_counts
from conflict_checker.comparison.word_diff import word_diff
from conflict_checker.utils.logger import get_logger

logger = get_logger(__name__)


class SentenceComparator:
    """
    Pairs up sentences of two documents by bigram similarity.

    Each call to ``compare`` owns its candidate pool, so one instance can be
    shared freely between callers.

    Usage:
        comparator = SentenceComparator()
        report = comparator.compare(text_a, text_b)
    """

    def __init__(self, thresholds: ComparisonThresholds | None = None) -> None:
        """
        Initialize the comparator.

        Args:
            thresholds: Classification policy, defaults to the standard thresholds
        """
        self.thresholds = thresholds or ComparisonThresholds()

    def compare(self, text_a: str, text_b: str) -> ComparisonReport:
        """
        Compare two plain-text documents.

        Args:
            text_a: Text of document A
            text_b: Text of document B

        Returns:
            ComparisonReport with conflicts, unique sentences and match count
        """
        min_length = self.thresholds.min_sentence_length
        sentences_a = split_sentences(text_a, min_length)
        sentences_b = split_sentences(text_b, min_length)

        conflicts: list[ConflictItem] = []
        unique_to_a: list[UniqueItem] = []
        counts_b = [bigram_counts(s) for s in sentences_b]
        consumed = [False] * len(sentences_b)
        match_count = 0

        for sent_a in sentences_a:
            best_index, best_score = self._best_candidate(bigram_counts(sent_a), counts_b, consumed)

            if best_index is not None and best_score >= self.thresholds.match_threshold:
                consumed[best_index] = True
                match_count += 1
                logger.debug(f"Match ({best_score:.3f}): {sent_a[:60]!r}")

            elif best_index is not None and best_score >= self.thresholds.conflict_threshold:
                consumed[best_index] = True
                sent_b = sentences_b[best_index]
                conflicts.append(
                    ConflictItem(
                        source=sent_a,
                        target=sent_b,
                        diff=word_diff(sent_a, sent_b),
                        score=best_score,
                    )
                )
                logger.debug(f"Conflict ({best_score:.3f}): {sent_a[:60]!r} vs {sent_b[:60]!r}")

            else:
                unique_to_a.append(UniqueItem(text=sent_a, source_doc=SourceDoc.A))

        unique_to_b = [
            UniqueItem(text=sent_b, source_doc=SourceDoc.B)
            for sent_b, used in zip(sentences_b, consumed)
            if not used
        ]

        report = ComparisonReport(
            conflicts=conflicts,
            unique_to_a=unique_to_a,
            unique_to_b=unique_to_b,
            match_count=match_count,
            sentence_count_a=len(sentences_a),
            sentence_count_b=len(sentences_b),
        )

        logger.info(f"Compared documents: {report.to_summary()}")

        return report

    def _best_candidate(
        self,
        sentence: Counter,
        candidates: list[Counter],
        consumed: list[bool],
    ) -> tuple[int | None, float]:
        """
        Find the most similar unconsumed candidate.

        Sentences arrive as bigram counts, built once per sentence. Only a
        strictly higher score replaces the current best, so the earliest
        candidate wins a tie.
        """
        best_index: int | None = None
        best_score = 0.0

        for i, candidate in enumerate(candidates):
            if consumed[i]:
                continue
            score = dice_from_counts(sentence, candidate)
            if score > best_score:
                best_score = score
                best_index = i

        return best_index, best_score


def compare(
    text_a: str,
    text_b: str,
    thresholds: ComparisonThresholds | None = None,
) -> ComparisonReport:
    """
    Convenience function to compare two texts.

    Args:
        text_a: Text of document A
        text_b: Text of document B
        thresholds: Optional classification policy

    Returns:
        ComparisonReport
    """
    return SentenceComparator(thresholds).compare(text_a, text_b)

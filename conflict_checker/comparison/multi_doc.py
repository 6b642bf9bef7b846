"""
Multi-Document Comparison.

Runs the sentence comparator over every pair of documents in a set.
Documents without usable text are dropped first; at least two must remain.
"""

from conflict_checker.comparison.comparator import SentenceComparator
from conflict_checker.comparison.schemas import (
    ComparisonThresholds,
    DocumentText,
    MultiDocComparison,
    PairwiseComparison,
)
from conflict_checker.utils.logger import get_logger

logger = get_logger(__name__)


class MultiDocError(Exception):
    """Raised when a document set cannot be compared."""

    pass


class InsufficientDocumentsError(MultiDocError):
    """Raised when fewer than two documents are available for comparison."""

    pass


def compare_documents(
    documents: list[DocumentText],
    thresholds: ComparisonThresholds | None = None,
) -> MultiDocComparison:
    """
    Compare every unordered pair of documents, in input order.

    Args:
        documents: Documents with extracted text
        thresholds: Optional classification policy

    Returns:
        MultiDocComparison with one PairwiseComparison per pair

    Raises:
        InsufficientDocumentsError: Fewer than two documents, or fewer than
            two with non-blank text
    """
    if len(documents) < 2:
        raise InsufficientDocumentsError("Please upload at least two documents to compare.")

    usable: list[DocumentText] = []
    skipped: list[str] = []
    for doc in documents:
        if doc.text is None or not doc.text.strip():
            logger.warning(f"Skipping document without text: {doc.name}")
            skipped.append(doc.name)
        else:
            usable.append(doc)

    if len(usable) < 2:
        raise InsufficientDocumentsError(
            "At least two documents must have content to be analyzed."
        )

    logger.info(f"Comparing {len(usable)} documents pairwise")

    comparator = SentenceComparator(thresholds)
    comparisons: list[PairwiseComparison] = []

    for i in range(len(usable)):
        for j in range(i + 1, len(usable)):
            doc_a, doc_b = usable[i], usable[j]
            report = comparator.compare(doc_a.text or "", doc_b.text or "")
            logger.info(f"{doc_a.name} vs {doc_b.name}: {report.to_summary()}")
            comparisons.append(
                PairwiseComparison(
                    document_a=doc_a.name,
                    document_b=doc_b.name,
                    report=report,
                )
            )

    result = MultiDocComparison(
        document_names=[doc.name for doc in usable],
        skipped_documents=skipped,
        comparisons=comparisons,
    )

    logger.info(result.to_summary())

    return result

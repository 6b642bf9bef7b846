"""
Document Conflict Checker - Source Package.

This package contains:
- Sentence-level document comparison
- Plain-text extraction for uploaded documents
- Utility functions
"""

from conflict_checker.comparison import (
    ComparisonReport,
    SentenceComparator,
    compare,
    compare_documents,
)
from conflict_checker.ingestion import extract_text

__all__ = [
    # Comparison
    "SentenceComparator",
    "compare",
    "compare_documents",
    "ComparisonReport",
    # Ingestion
    "extract_text",
]

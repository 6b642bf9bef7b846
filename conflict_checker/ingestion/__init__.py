"""
Ingestion Layer - Text Extraction.
"""

from conflict_checker.ingestion.extractor import (
    ExtractionError,
    extract_text,
    is_supported,
)

__all__ = [
    "extract_text",
    "is_supported",
    "ExtractionError",
]

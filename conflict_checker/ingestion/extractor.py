"""
Text Extractor - Plain-Text Documents.

Turns an uploaded file into plain text for the comparator. Only text and
markdown files are understood; every other format yields None so callers
can filter it out before comparing.
"""

from pathlib import PurePath

from conflict_checker.utils.logger import get_logger

logger = get_logger(__name__)

TEXT_EXTENSIONS = {".txt", ".md", ".markdown"}


class ExtractionError(Exception):
    """Raised when a document's content cannot be decoded."""

    pass


def is_supported(filename: str, content_type: str | None = None) -> bool:
    """Whether the file looks like plain text or markdown."""
    if content_type and content_type.startswith("text/"):
        return True
    return PurePath(filename).suffix.lower() in TEXT_EXTENSIONS


def extract_text(
    filename: str,
    content: bytes,
    content_type: str | None = None,
) -> str | None:
    """
    Extract plain text from an uploaded document.

    Args:
        filename: Original filename, used for type detection and logging
        content: Raw file bytes
        content_type: Optional MIME type reported by the uploader

    Returns:
        Decoded text, or None if the type is unsupported, the file is
        empty, or the bytes are not valid UTF-8
    """
    if not is_supported(filename, content_type):
        logger.warning(f"Unsupported document type: {filename} ({content_type or 'unknown'})")
        return None

    if not content:
        logger.warning(f"Empty document: {filename}")
        return None

    try:
        return _decode(content)
    except ExtractionError as e:
        logger.error(f"Error extracting text from {filename}: {e}")
        return None


def _decode(content: bytes) -> str:
    """Decode UTF-8, dropping a leading byte-order mark."""
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ExtractionError(f"Not valid UTF-8 text: {e}") from e

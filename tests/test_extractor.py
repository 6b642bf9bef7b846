"""
Tests for the Text Extractor.
"""

from conflict_checker.ingestion.extractor import extract_text, is_supported


class TestIsSupported:
    """Tests for file type detection."""

    def test_text_extensions(self) -> None:
        """Test that text and markdown extensions are recognized."""
        assert is_supported("policy.txt")
        assert is_supported("NOTES.MD")
        assert is_supported("readme.markdown")

    def test_text_content_type(self) -> None:
        """Test that any text/* content type is accepted."""
        assert is_supported("upload", "text/plain")
        assert is_supported("upload.csv", "text/csv")

    def test_binary_formats(self) -> None:
        """Test that office and PDF formats are not supported."""
        assert not is_supported("contract.pdf", "application/pdf")
        assert not is_supported("contract.docx")
        assert not is_supported("slides.pptx", None)


class TestExtractText:
    """Tests for extract_text."""

    def test_plain_text(self) -> None:
        """Test that UTF-8 text is returned unchanged."""
        assert extract_text("a.txt", "Rent is due monthly.".encode()) == "Rent is due monthly."

    def test_markdown(self) -> None:
        """Test that markdown is treated as text."""
        assert extract_text("a.md", b"# Policy\n\nBe on time.") == "# Policy\n\nBe on time."

    def test_non_ascii(self) -> None:
        """Test that non-ASCII UTF-8 is decoded."""
        assert extract_text("a.txt", "Fee: 50 €.".encode("utf-8")) == "Fee: 50 €."

    def test_strips_byte_order_mark(self) -> None:
        """Test that a UTF-8 BOM is removed."""
        assert extract_text("a.txt", b"\xef\xbb\xbfHello there.") == "Hello there."

    def test_unsupported_type_returns_none(self) -> None:
        """Test that unsupported formats yield None."""
        assert extract_text("a.pdf", b"%PDF-1.7", "application/pdf") is None

    def test_empty_file_returns_none(self) -> None:
        """Test that an empty upload yields None."""
        assert extract_text("a.txt", b"") is None

    def test_invalid_utf8_returns_none(self) -> None:
        """Test that undecodable bytes yield None instead of raising."""
        assert extract_text("a.txt", b"\xff\xfe\xfa invalid") is None

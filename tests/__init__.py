"""
Test suite for the Document Conflict Checker.

Organized by module:
- test_segmenter.py - Sentence splitting
- test_similarity.py - Bigram Dice coefficient
- test_word_diff.py - Word-level diff of conflicting sentences
- test_comparator.py - Sentence comparator and report invariants
- test_multi_doc.py - Pairwise comparison across document sets
- test_extractor.py - Plain-text extraction
- test_config.py - Settings and logging
- test_api.py - FastAPI endpoint tests
"""

# Test fixtures are provided in conftest.py

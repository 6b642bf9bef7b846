"""
Tests for the Word-Level Diff.
"""

from conflict_checker.comparison.word_diff import tokenize, word_diff


def _source_of(changes) -> str:
    return "".join(c.value for c in changes if not c.added)


def _target_of(changes) -> str:
    return "".join(c.value for c in changes if not c.removed)


class TestTokenize:
    """Tests for tokenize."""

    def test_separates_words_punctuation_and_whitespace(self) -> None:
        """Test that every character lands in exactly one token."""
        assert tokenize("Due: 5 days.") == ["Due", ":", " ", "5", " ", "days", "."]

    def test_tokens_rejoin_to_input(self) -> None:
        """Test that tokenization is lossless."""
        text = "  Rent, utilities  and\tparking are included!  "

        assert "".join(tokenize(text)) == text


class TestWordDiff:
    """Tests for word_diff."""

    def test_identical_sentences(self) -> None:
        """Test that identical input is one unchanged run."""
        changes = word_diff("The fee is due.", "The fee is due.")

        assert len(changes) == 1
        assert changes[0].value == "The fee is due."
        assert not changes[0].added
        assert not changes[0].removed

    def test_replaced_word(self) -> None:
        """Test that a swapped word shows as removed then added."""
        changes = word_diff(
            "All staff must work Monday through Thursday in the office.",
            "All staff must work Monday through Friday in the office.",
        )

        removed = [c.value for c in changes if c.removed]
        added = [c.value for c in changes if c.added]

        assert removed == ["Thursday"]
        assert added == ["Friday"]

        removed_index = next(i for i, c in enumerate(changes) if c.removed)
        added_index = next(i for i, c in enumerate(changes) if c.added)
        assert removed_index < added_index

    def test_inserted_word(self) -> None:
        """Test that an insertion produces only an added run."""
        changes = word_diff("The fee is due.", "The late fee is due.")

        assert not any(c.removed for c in changes)
        assert "late" in "".join(c.value for c in changes if c.added)

    def test_deleted_word(self) -> None:
        """Test that a deletion produces only a removed run."""
        changes = word_diff("The annual fee is due.", "The fee is due.")

        assert not any(c.added for c in changes)
        assert "annual" in "".join(c.value for c in changes if c.removed)

    def test_reconstructs_both_sides(self) -> None:
        """Test that the runs rebuild source and target exactly."""
        source = "Employees get 20 vacation days per year, paid quarterly."
        target = "Employees receive 25 vacation days each year, paid monthly."

        changes = word_diff(source, target)

        assert _source_of(changes) == source
        assert _target_of(changes) == target

    def test_adjacent_runs_differ_in_kind(self) -> None:
        """Test that consecutive runs of the same kind are merged."""
        changes = word_diff(
            "Offices open at 8 AM on weekdays.",
            "Offices open at 9 AM on all weekdays and Saturdays.",
        )

        for prev, curr in zip(changes, changes[1:]):
            assert (prev.added, prev.removed) != (curr.added, curr.removed)

    def test_empty_sides(self) -> None:
        """Test that an empty side yields a single added or removed run."""
        assert [c.value for c in word_diff("", "New clause.") if c.added] == ["New clause."]
        assert [c.value for c in word_diff("Old clause.", "") if c.removed] == ["Old clause."]
        assert word_diff("", "") == []

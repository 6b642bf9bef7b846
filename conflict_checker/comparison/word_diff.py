"""
Word-Level Diff.

Tokenizes both sentences into words, punctuation and whitespace and aligns
the token sequences with difflib.SequenceMatcher. Adjacent runs of the same
kind are merged, and in a replacement the removed run precedes the added one.
"""

import difflib
import re

from conflict_checker.comparison.schemas import DiffChange

_TOKEN = re.compile(r"\w+|[^\w\s]|\s+")


def tokenize(text: str) -> list[str]:
    """Split text into word, punctuation and whitespace tokens."""
    return _TOKEN.findall(text)


def word_diff(source: str, target: str) -> list[DiffChange]:
    """
    Compute a word-level diff from ``source`` to ``target``.

    Joining the values of unchanged and removed runs reproduces ``source``;
    joining unchanged and added runs reproduces ``target``.

    Args:
        source: Original sentence
        target: Modified sentence

    Returns:
        Ordered list of DiffChange runs
    """
    old_tokens = tokenize(source)
    new_tokens = tokenize(target)

    changes: list[DiffChange] = []
    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append(changes, "".join(old_tokens[i1:i2]))
        elif tag == "delete":
            _append(changes, "".join(old_tokens[i1:i2]), removed=True)
        elif tag == "insert":
            _append(changes, "".join(new_tokens[j1:j2]), added=True)
        elif tag == "replace":
            _append(changes, "".join(old_tokens[i1:i2]), removed=True)
            _append(changes, "".join(new_tokens[j1:j2]), added=True)

    return changes


def _append(
    changes: list[DiffChange],
    value: str,
    added: bool = False,
    removed: bool = False,
) -> None:
    """Append a run, merging it into the previous one when the kinds agree."""
    if not value:
        return
    if changes and changes[-1].added == added and changes[-1].removed == removed:
        changes[-1] = DiffChange(value=changes[-1].value + value, added=added, removed=removed)
    else:
        changes.append(DiffChange(value=value, added=added, removed=removed))

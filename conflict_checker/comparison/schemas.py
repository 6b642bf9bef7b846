"""
Pydantic Schemas for the Comparison Layer.

Models for sentence-level comparison results: conflicts (modified
restatements), unique statements, and the report that groups them.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Policy defaults. Override through ComparisonThresholds or app settings.
MATCH_THRESHOLD = 0.95
CONFLICT_THRESHOLD = 0.5
MIN_SENTENCE_LENGTH = 5


class SourceDoc(str, Enum):
    """Which side of a comparison a sentence came from."""

    A = "A"
    B = "B"


class ComparisonThresholds(BaseModel):
    """
    Tunable classification policy for the sentence comparator.

    A best score at or above ``match_threshold`` is a match, a score at or
    above ``conflict_threshold`` is a conflict, anything lower is unique.
    """

    model_config = ConfigDict(frozen=True)

    match_threshold: float = Field(
        default=MATCH_THRESHOLD,
        gt=0.0,
        le=1.0,
        description="Minimum similarity for a near-identical match",
    )
    conflict_threshold: float = Field(
        default=CONFLICT_THRESHOLD,
        gt=0.0,
        le=1.0,
        description="Minimum similarity for a modified restatement",
    )
    min_sentence_length: int = Field(
        default=MIN_SENTENCE_LENGTH,
        ge=0,
        description="Sentences of this length or shorter are discarded",
    )

    @model_validator(mode="after")
    def _check_order(self) -> "ComparisonThresholds":
        if self.conflict_threshold > self.match_threshold:
            raise ValueError(
                f"conflict_threshold ({self.conflict_threshold}) must not exceed "
                f"match_threshold ({self.match_threshold})"
            )
        return self


class DiffChange(BaseModel):
    """One run of a word-level diff."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Text of this run, whitespace included")
    added: bool = Field(default=False, description="Present only in the target")
    removed: bool = Field(default=False, description="Present only in the source")


class ConflictItem(BaseModel):
    """A sentence pair judged to be a modified restatement of one statement."""

    model_config = ConfigDict(frozen=True)

    type: Literal["conflict"] = "conflict"
    source: str = Field(..., description="Sentence from document A")
    target: str = Field(..., description="Sentence from document B")
    diff: list[DiffChange] = Field(default_factory=list)
    score: float = Field(..., ge=0.0, le=1.0, description="Dice similarity of the pair")

    @property
    def removed_text(self) -> list[str]:
        return [c.value for c in self.diff if c.removed]

    @property
    def added_text(self) -> list[str]:
        return [c.value for c in self.diff if c.added]


class UniqueItem(BaseModel):
    """A sentence with no sufficiently similar counterpart in the other document."""

    model_config = ConfigDict(frozen=True)

    type: Literal["unique"] = "unique"
    text: str
    source_doc: SourceDoc


class ComparisonReport(BaseModel):
    """
    Result of comparing two documents sentence by sentence.

    Every sentence of A is either matched, a conflict source or unique to A;
    every sentence of B is either matched, a conflict target or unique to B.
    """

    model_config = ConfigDict(frozen=True)

    conflicts: list[ConflictItem] = Field(default_factory=list)
    unique_to_a: list[UniqueItem] = Field(default_factory=list)
    unique_to_b: list[UniqueItem] = Field(default_factory=list)
    match_count: int = Field(default=0, ge=0)

    # Segmentation totals, kept so callers can check the partition
    sentence_count_a: int = Field(default=0, ge=0)
    sentence_count_b: int = Field(default=0, ge=0)

    @property
    def conflict_count(self) -> int:
        return len(self.conflicts)

    @property
    def has_differences(self) -> bool:
        return bool(self.conflicts or self.unique_to_a or self.unique_to_b)

    def to_summary(self) -> str:
        """One-line human-readable summary."""
        return (
            f"{self.match_count} matching, {self.conflict_count} conflicting, "
            f"{len(self.unique_to_a)} unique to A, {len(self.unique_to_b)} unique to B "
            f"({self.sentence_count_a} vs {self.sentence_count_b} sentences)"
        )


class DocumentText(BaseModel):
    """Plain text extracted from one uploaded document."""

    name: str = Field(..., description="Document filename or label")
    text: str | None = Field(None, description="Extracted text, None if extraction failed")


class PairwiseComparison(BaseModel):
    """Comparison of one ordered pair of documents."""

    document_a: str
    document_b: str
    report: ComparisonReport


class MultiDocComparison(BaseModel):
    """All pairwise comparisons across a set of documents."""

    document_names: list[str] = Field(..., description="Documents that were compared")
    skipped_documents: list[str] = Field(
        default_factory=list,
        description="Documents dropped for having no usable text",
    )
    comparisons: list[PairwiseComparison] = Field(default_factory=list)

    @property
    def total_conflicts(self) -> int:
        return sum(c.report.conflict_count for c in self.comparisons)

    @property
    def total_matches(self) -> int:
        return sum(c.report.match_count for c in self.comparisons)

    def to_summary(self) -> str:
        """Generate text summary."""
        return (
            f"Compared {len(self.document_names)} documents in "
            f"{len(self.comparisons)} pairs. "
            f"Found {self.total_conflicts} conflicts and {self.total_matches} matching sentences."
        )

#!/usr/bin/env python3
"""
CLI Script for Document Comparison.

Usage:
    python scripts/compare_documents.py policy.txt memo.txt
    python scripts/compare_documents.py a.md b.md c.md --conflict-threshold 0.6
    python scripts/compare_documents.py a.txt b.txt --json
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from conflict_checker.comparison.multi_doc import InsufficientDocumentsError, compare_documents
from conflict_checker.comparison.schemas import (
    CONFLICT_THRESHOLD,
    MATCH_THRESHOLD,
    MIN_SENTENCE_LENGTH,
    ComparisonReport,
    ComparisonThresholds,
    ConflictItem,
    DocumentText,
)
from conflict_checker.ingestion.extractor import extract_text
from conflict_checker.utils.logger import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def load_documents(paths: list[Path]) -> list[DocumentText]:
    """Read each file and extract its text."""
    documents = []
    for path in paths:
        if not path.is_file():
            console.print(f"[red]File not found: {path}[/red]")
            documents.append(DocumentText(name=path.name, text=None))
            continue
        documents.append(DocumentText(name=path.name, text=extract_text(path.name, path.read_bytes())))
    return documents


def render_diff(conflict: ConflictItem) -> Text:
    """Render a word diff with removals in red and additions in green."""
    text = Text()
    for change in conflict.diff:
        if change.removed:
            text.append(change.value, style="bold red strike")
        elif change.added:
            text.append(change.value, style="bold green")
        else:
            text.append(change.value)
    return text


def display_report(name_a: str, name_b: str, report: ComparisonReport) -> None:
    """Display one pairwise report."""
    console.print(f"\n[bold blue]{name_a}[/] vs [bold blue]{name_b}[/]")
    console.print(f"  {report.to_summary()}")

    if report.conflicts:
        table = Table(title="Conflicts", show_header=True, header_style="bold red")
        table.add_column("#", style="dim", width=3)
        table.add_column("Score", width=6)
        table.add_column("Change")

        for i, conflict in enumerate(report.conflicts, 1):
            table.add_row(str(i), f"{conflict.score:.2f}", render_diff(conflict))

        console.print(table)

    for label, items in ((name_a, report.unique_to_a), (name_b, report.unique_to_b)):
        if items:
            console.print(Panel(
                "\n".join(f"- {item.text}" for item in items),
                title=f"[yellow]Only in {label}[/]",
                border_style="yellow",
            ))

    if not report.has_differences:
        console.print("  [green]✓ Documents agree sentence for sentence.[/]")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Find conflicting, overlapping and unique sentences across documents"
    )
    parser.add_argument(
        "files",
        type=Path,
        nargs="+",
        help="Text or markdown documents to compare (at least two)",
    )
    parser.add_argument(
        "--match-threshold",
        type=float,
        default=MATCH_THRESHOLD,
        help=f"Similarity for a match (default: {MATCH_THRESHOLD})",
    )
    parser.add_argument(
        "--conflict-threshold",
        type=float,
        default=CONFLICT_THRESHOLD,
        help=f"Similarity for a conflict (default: {CONFLICT_THRESHOLD})",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=MIN_SENTENCE_LENGTH,
        help=f"Ignore sentences of this length or shorter (default: {MIN_SENTENCE_LENGTH})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of tables",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = parser.parse_args()

    setup_logging(args.log_level)

    try:
        thresholds = ComparisonThresholds(
            match_threshold=args.match_threshold,
            conflict_threshold=args.conflict_threshold,
            min_sentence_length=args.min_length,
        )
    except ValidationError as e:
        parser.error(f"Invalid thresholds: {e.errors()[0]['msg']}")

    documents = load_documents(args.files)

    try:
        result = compare_documents(documents, thresholds)
    except InsufficientDocumentsError as e:
        console.print(f"[red]Error: {e}[/]")
        sys.exit(1)

    if args.json:
        console.print_json(result.model_dump_json())
        return

    console.print("[bold]Document Conflict Checker[/]")
    console.print("=" * 50)
    console.print(result.to_summary())

    for name in result.skipped_documents:
        console.print(f"[yellow]Skipped {name}: no readable text[/]")

    for comparison in result.comparisons:
        display_report(comparison.document_a, comparison.document_b, comparison.report)

    console.print("\n[dim]Comparison complete.[/]")


if __name__ == "__main__":
    main()

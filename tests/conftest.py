"""
Pytest Configuration and Fixtures.

The comparator is pure and synchronous, so every fixture is a real
component or plain text.
"""

import pytest

from conflict_checker.comparison.comparator import SentenceComparator
from conflict_checker.comparison.schemas import ComparisonThresholds, DocumentText


# ============================================================================
# Comparator Fixtures
# ============================================================================

@pytest.fixture
def thresholds() -> ComparisonThresholds:
    """Default classification policy."""
    return ComparisonThresholds()


@pytest.fixture
def comparator(thresholds: ComparisonThresholds) -> SentenceComparator:
    """Comparator with default thresholds."""
    return SentenceComparator(thresholds)


# ============================================================================
# Text Fixtures
# ============================================================================

@pytest.fixture
def office_policy_a() -> str:
    """Return-to-office policy, first version."""
    return (
        "All staff must work Monday through Thursday in the office. "
        "Employees get 20 vacation days per year. "
        "The meeting is at 3pm on Monday."
    )


@pytest.fixture
def office_policy_b() -> str:
    """Return-to-office policy, revised version."""
    return (
        "The meeting is at 3pm on Monday. "
        "All staff must work Monday through Friday in the office. "
        "The cafeteria is open until 9pm."
    )


@pytest.fixture
def memo_documents() -> list[DocumentText]:
    """Four short memos about the same office policy."""
    return [
        DocumentText(
            name="ceo_announcement.txt",
            text=(
                "To all employees, We are excited to announce our return to the office, "
                "embracing a new hybrid model. We believe in-person collaboration is key "
                "to our culture. Further details will be shared by HR."
            ),
        ),
        DocumentText(
            name="hr_policy_final.txt",
            text=(
                "Official Return-to-Office Policy: Effective October 1st, all employees "
                "are required to work from the office a minimum of 3 days per week "
                "(Tuesday, Wednesday, Thursday)."
            ),
        ),
        DocumentText(
            name="facilities_memo.txt",
            text=(
                "Facilities Update: The office will be fully operational and ready for "
                "staff starting September 25th. All workspaces are available Monday "
                "through Friday, 8 AM to 6 PM."
            ),
        ),
        DocumentText(
            name="engineering_dept_rules.txt",
            text=(
                "Engineering Team Mandate: To maximize collaboration on Project Phoenix, "
                "all engineering staff must be in the office from Monday to Thursday, "
                "starting immediately."
            ),
        ),
    ]

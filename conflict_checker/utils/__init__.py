"""
Utility modules for the Conflict Checker.
"""

from conflict_checker.utils.logger import (
    get_logger,
    setup_logging,
)

__all__ = [
    "get_logger",
    "setup_logging",
]

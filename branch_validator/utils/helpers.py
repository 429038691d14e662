"""
General helper utilities for the branch validator.

This module provides common utility functions that are used
across multiple modules in the application.
"""


def create_progress_bar(current: int, total: int, width: int = 30) -> str:
    """
    Create a text-based progress bar.

    Args:
        current: Current progress (1-based)
        total: Total items
        width: Width of the progress bar

    Returns:
        Progress bar string
    """
    if total == 0:
        return "[" + " " * width + "]"

    filled = int(width * current / total)
    return "[" + "█" * filled + "░" * (width - filled) + "]"

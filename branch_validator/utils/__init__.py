"""
Utilities module for the branch validator.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup and structured records
- General helper functions for common operations
"""

# Logging utilities
from .logging import setup_logging, log_file_verdict

# General helper utilities
from .helpers import create_progress_bar

__all__ = [
    "setup_logging",
    "log_file_verdict",
    "create_progress_bar",
]

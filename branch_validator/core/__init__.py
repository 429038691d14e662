#!/usr/bin/env python3
"""
Core package for branch validator.

This package provides core business logic including input parsing,
validation, report generation and processing coordination.
"""

from .parser import (
    parse_lines,
    parse_input_file,
    read_input_lines,
)

from .validator import (
    validate,
    validate_file,
    unreadable_result,
)

from .report import (
    format_report,
    write_report,
)

from .discovery import (
    list_input_files,
    ensure_output_directory,
)

from .processor import (
    process_files,
    log_progress_update,
    log_processing_start,
    log_processing_summary,
    calculate_processing_stats,
)

__all__ = [
    # Input parsing
    "parse_lines",
    "parse_input_file",
    "read_input_lines",
    # Validation
    "validate",
    "validate_file",
    "unreadable_result",
    # Report generation
    "format_report",
    "write_report",
    # Filesystem collaborators
    "list_input_files",
    "ensure_output_directory",
    # Processing coordination
    "process_files",
    "log_progress_update",
    "log_processing_start",
    "log_processing_summary",
    "calculate_processing_stats",
]

#!/usr/bin/env python3
"""
Branch Validator Package

A Python package for validating branch files: text files whose DATA
section lists branches of single-character bird symbols. Each file is
checked for structure, branch count, uniform branch length and bird
multiplicity, and a human-readable report block is written per file.

This package provides both a command-line interface and a programmatic API.
"""

__version__ = "1.0.0"
__author__ = "Branch Validator"
__description__ = "Validate bird branch files and write a per-file report"
__license__ = "MIT"

# Import models for public API
from .models import (
    ParsedFile,
    FailureReason,
    Valid,
    Invalid,
    ValidationResult,
    ValidationStats,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_INPUT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_OUTPUT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
    DEFAULT_MAX_BRANCHES,
    DEFAULT_MAX_BRANCH_LENGTH,
)

# Import core functionality for public API
from .core import (
    parse_lines,
    parse_input_file,
    validate,
    validate_file,
    format_report,
    list_input_files,
    process_files,
)

# Import CLI functionality for public API
from .cli import (
    main,
    create_argument_parser,
)

# Import utilities for public API
from .utils import (
    setup_logging,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "ParsedFile",
    "FailureReason",
    "Valid",
    "Invalid",
    "ValidationResult",
    "ValidationStats",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_INPUT_ERROR",
    "EXIT_CONFIG_ERROR",
    "EXIT_OUTPUT_ERROR",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    "DEFAULT_MAX_BRANCHES",
    "DEFAULT_MAX_BRANCH_LENGTH",
    # Core functionality
    "parse_lines",
    "parse_input_file",
    "validate",
    "validate_file",
    "format_report",
    "list_input_files",
    "process_files",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
]

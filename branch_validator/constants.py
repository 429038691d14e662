#!/usr/bin/env python3
"""
Application Constants

This module contains the file-format markers, validation bounds and exit
codes used throughout the branch validator application.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_OUTPUT_ERROR = 4
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Input file markers
DATA_MARKER = "DATA"
END_MARKER = "/"
EMPTY_BRANCH_MARKER = "=="

# Validation bounds
DEFAULT_MAX_BRANCHES = 1000
DEFAULT_MAX_BRANCH_LENGTH = 26

# Report layout
REPORT_SEPARATOR = "=" * 60
DEFAULT_REPORT_FILENAME = "validation.log"

#!/usr/bin/env python3
"""
Statistics Models

This module contains data structures related to run statistics
and timing.
"""

from typing import NamedTuple


class ValidationStats(NamedTuple):
    """
    Statistics for a validation run.

    Attributes:
        total_files: Number of input files processed
        valid_files: Files that passed every check
        invalid_files: Files that failed at least one check
        unreadable_files: Files that could not be opened or decoded
        start_time: Processing start timestamp
        end_time: Processing end timestamp
        total_duration: Total processing duration in seconds
        avg_time_per_file: Average processing time per file
    """

    total_files: int
    valid_files: int
    invalid_files: int
    unreadable_files: int
    start_time: float
    end_time: float
    total_duration: float
    avg_time_per_file: float

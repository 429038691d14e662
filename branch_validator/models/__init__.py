#!/usr/bin/env python3
"""
Data Models Module

This module contains all data structures and type definitions used
throughout the branch validator application.
"""

from .branch import Branch, ParsedFile
from .result import FailureReason, Valid, Invalid, ValidationOutcome, ValidationResult
from .stats import ValidationStats

__all__ = [
    "Branch",
    "ParsedFile",
    "FailureReason",
    "Valid",
    "Invalid",
    "ValidationOutcome",
    "ValidationResult",
    "ValidationStats",
]

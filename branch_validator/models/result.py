#!/usr/bin/env python3
"""
Validation Result Models

This module contains the per-file validation summary and the tagged
outcome that tells the reporter why a file failed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, NamedTuple, Optional, Union


class FailureReason(str, Enum):
    """Why a file was classified as invalid."""

    NO_STRUCTURE = "no_structure"
    TOO_MANY_BRANCHES = "too_many_branches"
    BRANCH_TOO_LONG = "branch_too_long"
    NON_UNIFORM_LENGTH = "non_uniform_length"
    SYMBOL_NOT_MULTIPLE = "symbol_not_multiple"
    NO_BIRDS = "no_birds"  # DATA section without a single filled branch


@dataclass(frozen=True)
class Valid:
    """Every check passed."""

    is_valid: ClassVar[bool] = True

    def describe(self) -> str:
        return "all checks passed"


@dataclass(frozen=True)
class Invalid:
    """
    The first failing check of a file, with the facts needed to report it.

    Attributes:
        reason: Which check failed
        symbol: Offending bird symbol (SYMBOL_NOT_MULTIPLE only)
        count: Total count of the offending symbol (SYMBOL_NOT_MULTIPLE only)
        branch_length: Branch length the failure was measured against
        detail: Free-form context, e.g. the read error of an unreadable file
    """

    reason: FailureReason
    symbol: Optional[str] = None
    count: Optional[int] = None
    branch_length: Optional[int] = None
    detail: Optional[str] = None

    is_valid: ClassVar[bool] = False

    def describe(self) -> str:
        if self.reason is FailureReason.NO_STRUCTURE:
            if self.detail:
                return f"file could not be read: {self.detail}"
            return "DATA section not found"
        if self.reason is FailureReason.TOO_MANY_BRANCHES:
            return "too many branches"
        if self.reason is FailureReason.BRANCH_TOO_LONG:
            return f"branch length {self.branch_length} exceeds the limit"
        if self.reason is FailureReason.NON_UNIFORM_LENGTH:
            return "branches have different lengths"
        if self.reason is FailureReason.SYMBOL_NOT_MULTIPLE:
            return (
                f"count of bird '{self.symbol}' ({self.count}) "
                f"is not a multiple of N={self.branch_length}"
            )
        return "no birds found in the DATA section"


ValidationOutcome = Union[Valid, Invalid]


class ValidationResult(NamedTuple):
    """
    Summary of validating a single input file.

    Attributes:
        filename: Label of the validated file, carried through for reporting
        has_structure: File was readable and a DATA section was found
        total_branches: Filled plus empty branches
        filled_branches: Number of branches holding symbols
        empty_branches: Number of "==" branches
        branch_length: Length of the first filled branch, 0 without filled
            branches, None when the file could not be read
        is_length_uniform: Every filled branch has the same length
        bird_counts: Symbol -> total occurrences, keys in sorted order
        are_counts_correct: Every symbol count is a multiple of branch_length
        first_failing_bird: Lowest symbol whose count is not a multiple
        exceeds_max_branches: total_branches is over the branch limit
        exceeds_max_branch_length: branch_length is over the length limit
        outcome: Tagged classification derived from the flags above
        error_message: Read error for unreadable files
    """

    filename: str
    has_structure: bool
    total_branches: int
    filled_branches: int
    empty_branches: int
    branch_length: Optional[int]
    is_length_uniform: bool
    bird_counts: Dict[str, int]
    are_counts_correct: bool
    first_failing_bird: Optional[str]
    exceeds_max_branches: bool
    exceeds_max_branch_length: bool
    outcome: ValidationOutcome
    error_message: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.is_length_uniform and self.are_counts_correct

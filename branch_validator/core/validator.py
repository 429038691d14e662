"""
Branch validation module.

This module turns a ParsedFile into a ValidationResult. Validation never
raises for malformed data: every problem is folded into the result flags
and the tagged outcome.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..constants import DEFAULT_MAX_BRANCH_LENGTH, DEFAULT_MAX_BRANCHES
from ..models import (
    FailureReason,
    Invalid,
    ParsedFile,
    Valid,
    ValidationOutcome,
    ValidationResult,
)
from .parser import parse_lines, read_input_lines

logger = logging.getLogger(__name__)


def _tally_birds(parsed: ParsedFile) -> Dict[str, int]:
    """Count every symbol across all filled branches, keyed in sorted order."""
    counts: Dict[str, int] = {}
    for branch in parsed.filled_branches:
        for bird in branch:
            counts[bird] = counts.get(bird, 0) + 1
    return {bird: counts[bird] for bird in sorted(counts)}


def _classify(
    has_structure: bool,
    exceeds_max_branches: bool,
    exceeds_max_branch_length: bool,
    is_length_uniform: bool,
    are_counts_correct: bool,
    branch_length: int,
    first_failing_bird: Optional[str],
    bird_counts: Dict[str, int],
) -> ValidationOutcome:
    """Pick the single outcome a report should state, first failure wins."""
    if not has_structure:
        return Invalid(FailureReason.NO_STRUCTURE)
    if exceeds_max_branches:
        return Invalid(FailureReason.TOO_MANY_BRANCHES)
    if exceeds_max_branch_length:
        return Invalid(FailureReason.BRANCH_TOO_LONG, branch_length=branch_length)
    if not is_length_uniform:
        return Invalid(FailureReason.NON_UNIFORM_LENGTH)
    if first_failing_bird is not None:
        return Invalid(
            FailureReason.SYMBOL_NOT_MULTIPLE,
            symbol=first_failing_bird,
            count=bird_counts[first_failing_bird],
            branch_length=branch_length,
        )
    if not are_counts_correct:
        return Invalid(FailureReason.NO_BIRDS, branch_length=branch_length)
    return Valid()


def validate(
    parsed: ParsedFile,
    filename: str,
    max_branches: int = DEFAULT_MAX_BRANCHES,
    max_branch_length: int = DEFAULT_MAX_BRANCH_LENGTH,
) -> ValidationResult:
    """
    Validate a parsed branch file.

    Checks, in order:
    1. A DATA section was found
    2. The total branch count is within max_branches
    3. All filled branches share the length of the first one
    4. That length is within max_branch_length
    5. Every bird's total count is a multiple of the branch length

    Without filled branches the length is 0 and uniformity holds vacuously,
    but the multiplicity check still fails, so such a file is never valid.

    Args:
        parsed: Output of the parser
        filename: Label carried through for reporting
        max_branches: Upper bound on filled plus empty branches
        max_branch_length: Upper bound on symbols per branch

    Returns:
        ValidationResult with flags, bird counts and the tagged outcome
    """
    filled = parsed.filled_branches
    total_branches = parsed.total_branches
    has_structure = parsed.has_data_section

    is_length_uniform = True
    # Without a DATA section the counts can never be correct
    are_counts_correct = has_structure
    first_failing_bird: Optional[str] = None

    exceeds_max_branches = total_branches > max_branches
    if exceeds_max_branches:
        are_counts_correct = False

    if filled:
        branch_length = len(filled[0])
        for branch in filled[1:]:
            if len(branch) != branch_length:
                is_length_uniform = False
                break
    else:
        branch_length = 0

    exceeds_max_branch_length = branch_length > max_branch_length
    if exceeds_max_branch_length:
        is_length_uniform = False
        are_counts_correct = False

    bird_counts = _tally_birds(parsed)

    if is_length_uniform and 0 < branch_length <= max_branch_length:
        for bird, count in bird_counts.items():
            if count % branch_length != 0:
                are_counts_correct = False
                first_failing_bird = bird
                break
    else:
        are_counts_correct = False

    outcome = _classify(
        has_structure=has_structure,
        exceeds_max_branches=exceeds_max_branches,
        exceeds_max_branch_length=exceeds_max_branch_length,
        is_length_uniform=is_length_uniform,
        are_counts_correct=are_counts_correct,
        branch_length=branch_length,
        first_failing_bird=first_failing_bird,
        bird_counts=bird_counts,
    )

    return ValidationResult(
        filename=filename,
        has_structure=has_structure,
        total_branches=total_branches,
        filled_branches=len(filled),
        empty_branches=parsed.empty_branch_count,
        branch_length=branch_length,
        is_length_uniform=is_length_uniform,
        bird_counts=bird_counts,
        are_counts_correct=are_counts_correct,
        first_failing_bird=first_failing_bird,
        exceeds_max_branches=exceeds_max_branches,
        exceeds_max_branch_length=exceeds_max_branch_length,
        outcome=outcome,
    )


def unreadable_result(filename: str, error_message: str) -> ValidationResult:
    """Build the failing result for a file that could not be opened or decoded."""
    return ValidationResult(
        filename=filename,
        has_structure=False,
        total_branches=0,
        filled_branches=0,
        empty_branches=0,
        branch_length=None,
        is_length_uniform=False,
        bird_counts={},
        are_counts_correct=False,
        first_failing_bird=None,
        exceeds_max_branches=False,
        exceeds_max_branch_length=False,
        outcome=Invalid(FailureReason.NO_STRUCTURE, detail=error_message),
        error_message=error_message,
    )


def validate_file(
    file_path: str,
    read_lines: Callable[[str], List[str]] = read_input_lines,
    max_branches: int = DEFAULT_MAX_BRANCHES,
    max_branch_length: int = DEFAULT_MAX_BRANCH_LENGTH,
) -> ValidationResult:
    """
    Read, parse and validate one input file.

    A read failure ends validation of this file only: it is logged to the
    error channel and returned as an unreadable result.

    Args:
        file_path: Path of the file, also used as the report label
        read_lines: Callable returning the file's lines, raising OSError or
            UnicodeDecodeError on failure
        max_branches: Upper bound on filled plus empty branches
        max_branch_length: Upper bound on symbols per branch

    Returns:
        ValidationResult for the file
    """
    try:
        lines = read_lines(file_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to open input file {file_path}: {e}")
        return unreadable_result(file_path, str(e))

    return validate(
        parse_lines(lines),
        file_path,
        max_branches=max_branches,
        max_branch_length=max_branch_length,
    )

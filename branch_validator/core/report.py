"""
Report formatting module.

This module renders validation results as human-readable report blocks
and appends them to the report stream.
"""

import logging
from typing import List, TextIO

from ..constants import (
    DEFAULT_MAX_BRANCH_LENGTH,
    DEFAULT_MAX_BRANCHES,
    REPORT_SEPARATOR,
)
from ..models import ValidationResult

logger = logging.getLogger(__name__)

PASS = "✅"
FAIL = "❌"


def _content_lines(result: ValidationResult, max_branch_length: int) -> List[str]:
    """Lines describing branch lengths and bird multiplicity."""
    if result.error_message is not None:
        return [f"{FAIL} DATA section could not be checked."]

    if result.exceeds_max_branch_length:
        return [
            f"{FAIL} Error: more than {max_branch_length} birds on a branch "
            f"-> {result.branch_length}"
        ]
    if not result.is_length_uniform:
        return [f"{FAIL} Error: branches have different lengths"]

    lines = [f"{PASS} All branches have the same length: N = {result.branch_length}"]
    if result.are_counts_correct:
        lines.append(f"{PASS} Count of every bird type is a multiple of N.")
    elif result.first_failing_bird is not None:
        bird = result.first_failing_bird
        lines.append(
            f"{FAIL} Error: count of bird '{bird}' ({result.bird_counts[bird]}) "
            f"is not a multiple of N={result.branch_length}"
        )
    return lines


def format_report(
    result: ValidationResult,
    max_branches: int = DEFAULT_MAX_BRANCHES,
    max_branch_length: int = DEFAULT_MAX_BRANCH_LENGTH,
) -> str:
    """
    Render one validation result as a report block.

    The block states whether the structure was found, the branch count
    against max_branches, the branch length situation, the first bird
    failing the multiplicity check and the final verdict, framed by
    separator lines.

    Args:
        result: The validation result to render
        max_branches: Branch limit the result was validated against
        max_branch_length: Branch length limit the result was validated against

    Returns:
        The report block, ending with a newline
    """
    lines = [
        REPORT_SEPARATOR,
        f"File: {result.filename}",
        "-> Checking file structure...",
    ]

    if result.has_structure:
        lines.append(f"{PASS} File structure is correct (DATA section found).")
    elif result.error_message is not None:
        lines.append(f"{FAIL} File structure error (cannot read file: {result.error_message}).")
    else:
        lines.append(f"{FAIL} File structure error (DATA section not found).")

    if result.exceeds_max_branches:
        lines.append(
            f"{FAIL} Branch count: {result.total_branches} "
            f"(exceeds the limit <= {max_branches})"
        )
    else:
        lines.append(
            f"{PASS} Branch count: {result.total_branches} (limit <= {max_branches})"
        )

    lines.append("-> Checking DATA section contents...")
    lines.extend(_content_lines(result, max_branch_length))

    if result.outcome.is_valid:
        lines.append(f"{PASS} All checks passed.")
        lines.append("Result: OK")
    else:
        lines.append(f"Result: FAILED ({result.outcome.describe()})")

    lines.append(REPORT_SEPARATOR)
    return "\n".join(lines) + "\n"


def write_report(
    result: ValidationResult,
    stream: TextIO,
    max_branches: int = DEFAULT_MAX_BRANCHES,
    max_branch_length: int = DEFAULT_MAX_BRANCH_LENGTH,
) -> None:
    """
    Append a single report block to the report stream.

    Args:
        result: The validation result to write
        stream: Writable text stream receiving the report
        max_branches: Branch limit the result was validated against
        max_branch_length: Branch length limit the result was validated against

    Raises:
        OSError: If writing to the stream fails
    """
    try:
        stream.write(format_report(result, max_branches, max_branch_length))
        stream.flush()
        logger.debug(f"Wrote report block for '{result.filename}'")
    except Exception as e:
        logger.error(f"Failed to write report block for {result.filename}: {e}")
        raise

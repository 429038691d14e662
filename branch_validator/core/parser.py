"""
Input parsing module.

This module handles reading branch files and parsing their DATA section
for the branch validator application.
"""

import logging
from typing import Iterable, List

from ..constants import DATA_MARKER, EMPTY_BRANCH_MARKER, END_MARKER
from ..models import Branch, ParsedFile

logger = logging.getLogger(__name__)


def _strip_line_ending(line: str) -> str:
    """Drop one trailing newline and then one trailing carriage return."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _tokenize_branch(line: str) -> Branch:
    """Split a branch line into symbols, one per non-whitespace character."""
    symbols: List[str] = []
    for token in line.split():
        symbols.extend(token)
    return tuple(symbols)


def parse_lines(lines: Iterable[str]) -> ParsedFile:
    """
    Parse the DATA section of a branch file.

    Expected format:
    - Any number of preamble lines, ignored
    - A line equal to DATA opens the data section
    - Each following line is a branch: "==" for an empty branch, otherwise
      whitespace-separated bird symbols
    - A line equal to "/" closes the data section; the rest is ignored

    Lines inside the data section that hold no symbols are dropped and
    counted neither as empty nor as filled branches. A missing DATA marker
    is not an error here; it yields an empty ParsedFile with
    has_data_section=False.

    Args:
        lines: Raw text lines, with or without line endings

    Returns:
        ParsedFile with the filled branches and the empty branch count
    """
    filled_branches: List[Branch] = []
    empty_branch_count = 0
    has_data_section = False
    dropped_lines = 0

    for raw_line in lines:
        line = _strip_line_ending(raw_line)

        if not has_data_section:
            if line == DATA_MARKER:
                has_data_section = True
            continue

        if line == END_MARKER:
            break

        if line == EMPTY_BRANCH_MARKER:
            empty_branch_count += 1
            continue

        branch = _tokenize_branch(line)
        if branch:
            filled_branches.append(branch)
        else:
            dropped_lines += 1

    if dropped_lines:
        logger.debug(f"Dropped {dropped_lines} data lines without symbols")

    return ParsedFile(
        filled_branches=tuple(filled_branches),
        empty_branch_count=empty_branch_count,
        has_data_section=has_data_section,
    )


def read_input_lines(file_path: str, encoding: str = "utf-8") -> List[str]:
    """
    Read a branch file into lines.

    The file is split on "\\n" only, so a lone carriage return stays part of
    its line; trailing carriage returns are stripped later by parse_lines.

    Args:
        file_path: Path to the input file
        encoding: Text encoding of the file

    Returns:
        List of lines without their "\\n" terminators

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file can't be opened or read
        UnicodeDecodeError: If the file can't be decoded with the encoding
    """
    with open(file_path, "r", encoding=encoding, newline="") as f:
        content = f.read()

    lines = content.split("\n")
    # A terminating newline does not start another line
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_input_file(file_path: str, encoding: str = "utf-8") -> ParsedFile:
    """
    Read and parse a branch file.

    Args:
        file_path: Path to the input file
        encoding: Text encoding of the file

    Returns:
        ParsedFile for the file's DATA section

    Raises:
        OSError: If the file can't be opened or read
        UnicodeDecodeError: If the file can't be decoded with the encoding
    """
    try:
        lines = read_input_lines(file_path, encoding=encoding)
    except FileNotFoundError:
        logger.error(f"Input file not found: {file_path}")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"Unable to decode file as {encoding}: {file_path}, error: {e}")
        raise

    parsed = parse_lines(lines)
    logger.debug(
        f"Parsed {len(parsed.filled_branches)} filled and "
        f"{parsed.empty_branch_count} empty branches from {file_path}"
    )
    return parsed

#!/usr/bin/env python3
"""
Branch Data Models

This module contains data structures describing the parsed DATA section
of an input file.
"""

from typing import NamedTuple, Tuple

# An ordered run of single-character bird symbols
Branch = Tuple[str, ...]


class ParsedFile(NamedTuple):
    """
    Result of parsing the DATA section of an input file.

    Attributes:
        filled_branches: Branches holding at least one symbol, in file order
        empty_branch_count: Number of "==" marker lines
        has_data_section: Whether a DATA marker line was found
    """

    filled_branches: Tuple[Branch, ...] = ()
    empty_branch_count: int = 0
    has_data_section: bool = False

    @property
    def total_branches(self) -> int:
        return len(self.filled_branches) + self.empty_branch_count

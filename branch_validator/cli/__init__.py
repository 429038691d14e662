#!/usr/bin/env python3
"""
CLI package for branch validator.

This package provides command-line interface components including
argument parsing and main application flow.
"""

from .parser import (
    create_argument_parser,
)

from .main import (
    main,
)

__all__ = [
    # Argument parsing
    "create_argument_parser",
    # Main application flow
    "main",
]

#!/usr/bin/env python3
"""
Branch Validator - Entry Point Wrapper

Simple wrapper script so the validator can be run from a source checkout
with: python run_validation.py
"""

import sys

from branch_validator.cli import main as cli_main, create_argument_parser
from branch_validator.constants import EXIT_INTERRUPTED, EXIT_UNEXPECTED_ERROR


def main(argv=None):
    """Main entry point that delegates to the package CLI."""
    try:
        cli_main(argv)
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_UNEXPECTED_ERROR)


__all__ = ['main', 'create_argument_parser']

if __name__ == "__main__":
    main()

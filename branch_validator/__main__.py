#!/usr/bin/env python3
"""
Enable execution of the branch_validator package as a module.

This allows running the package with: python -m branch_validator
"""

from .cli.main import main

if __name__ == "__main__":
    main()

"""
CLI argument parser module.

This module uses the schema-driven configuration system to
automatically generate the argument parser.
"""

from ..config.loader import ConfigLoader


def create_argument_parser():
    """
    Create and configure the argument parser.

    The parser is generated from the configuration schema, so every
    config field gets a matching flag.
    """
    return ConfigLoader.generate_cli_parser()

"""
Configuration management for the branch validator.

This module provides centralized configuration handling with support for
environment variables, .env.local files, and CLI overrides, validated
through a Pydantic schema.
"""

from .schema import ConfigSchema
from .loader import ConfigLoader

__all__ = ["ConfigSchema", "ConfigLoader"]

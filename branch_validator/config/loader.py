"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to automatically load, validate, and merge configuration from multiple sources.
"""

import logging
import os
from argparse import ArgumentParser, Namespace
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import ConfigSchema

logger = logging.getLogger(__name__)

DOTENV_FILE = ".env.local"


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        dotenv_path: str = DOTENV_FILE,
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env.local file (if it exists)
        3. OS environment variables
        4. CLI arguments (highest priority)

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)
            dotenv_path: Path of the dotenv file to read

        Returns:
            Validated configuration instance

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        # Step 1: Load from the dotenv file; it never overrides the real environment
        _load_from_dotenv_file(dotenv_path)

        # Step 2: Load from environment variables based on schema
        for field_name, field_info in schema.model_fields.items():
            env_var = field_info.json_schema_extra.get("env_var") if field_info.json_schema_extra else None
            if env_var:
                env_value = os.getenv(env_var)
                if env_value is not None:
                    stripped = env_value.strip()
                    # Empty strings fall back to the default
                    if stripped:
                        config_dict[field_name] = stripped

        # Step 3: Apply CLI arguments (highest priority)
        if cli_args:
            for field_name, field_info in schema.model_fields.items():
                cli_arg = field_info.json_schema_extra.get("cli_arg") if field_info.json_schema_extra else None
                if cli_arg and hasattr(cli_args, cli_arg):
                    cli_value = getattr(cli_args, cli_arg)
                    if cli_value is not None:
                        if isinstance(cli_value, str):
                            config_dict[field_name] = cli_value.strip()
                        else:
                            config_dict[field_name] = cli_value

        # Step 4: Create and validate the configuration
        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            # Name the env var in each message so users know what to fix
            errors = []
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else "config"
                msg = error["msg"]
                field_info = schema.model_fields.get(field)
                env_var = field_info.json_schema_extra.get("env_var") if field_info and field_info.json_schema_extra else str(field).upper()
                errors.append(f"{env_var}: {msg}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ValueError(error_msg) from e

    @staticmethod
    def generate_cli_parser(
        schema: type[ConfigSchema] = ConfigSchema,
        description: str = "Validate branch files and write a per-file report",
    ) -> ArgumentParser:
        """
        Generate an ArgumentParser from the configuration schema.

        Args:
            schema: The configuration schema class
            description: Parser description

        Returns:
            Configured ArgumentParser
        """
        parser = ArgumentParser(
            description=description,
            epilog="""
Examples:
  branch-validator
  branch-validator --data-dir ./data --log-dir ./logs
  branch-validator --max-branch-length 30 --verbose
  branch-validator --dry-run
            """,
        )

        # Add CLI-only arguments that don't map to config
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Parse the input files and show their branch counts without writing a report",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Enable verbose logging (DEBUG level)",
        )

        # Add schema-based arguments
        for field_name, field_info in schema.model_fields.items():
            if not field_info.json_schema_extra:
                continue

            cli_arg = field_info.json_schema_extra.get("cli_arg")
            if not cli_arg:
                continue

            arg_name = f"--{cli_arg.replace('_', '-')}"

            kwargs = {
                "help": field_info.description or f"Override {field_info.json_schema_extra.get('env_var', field_name.upper())} env var",
                "default": None,  # Don't set schema defaults here - let the loader handle it
            }

            if field_info.annotation is int:
                kwargs["type"] = int

            parser.add_argument(arg_name, **kwargs)

        return parser


def _load_from_dotenv_file(dotenv_path: str) -> None:
    """Load values from the dotenv file if it exists."""
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path, override=False)
        logger.debug(f"Loaded configuration from {dotenv_path} file")
    else:
        logger.debug(f"{dotenv_path} file not found, skipping")

"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all configuration in the application.
"""

import codecs
import os

from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_MAX_BRANCH_LENGTH,
    DEFAULT_MAX_BRANCHES,
    DEFAULT_REPORT_FILENAME,
)


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set via environment variables or CLI arguments.
    """

    # Filesystem layout
    data_dir: str = Field(
        "data",
        min_length=1,
        description="Directory holding the files to validate",
        json_schema_extra={
            "env_var": "BRANCH_DATA_DIR",
            "cli_arg": "data_dir",
        }
    )

    log_dir: str = Field(
        "logs",
        min_length=1,
        description="Directory receiving the report file (created if missing)",
        json_schema_extra={
            "env_var": "BRANCH_LOG_DIR",
            "cli_arg": "log_dir",
        }
    )

    report_file: str = Field(
        DEFAULT_REPORT_FILENAME,
        min_length=1,
        description="Report file name inside the log directory",
        json_schema_extra={
            "env_var": "BRANCH_REPORT_FILE",
            "cli_arg": "report_file",
        }
    )

    # Validation bounds
    max_branches: int = Field(
        DEFAULT_MAX_BRANCHES,
        gt=0,
        description="Maximum number of branches per file",
        json_schema_extra={
            "env_var": "BRANCH_MAX_BRANCHES",
            "cli_arg": "max_branches",
        }
    )

    max_branch_length: int = Field(
        DEFAULT_MAX_BRANCH_LENGTH,
        gt=0,
        description="Maximum number of birds on a single branch",
        json_schema_extra={
            "env_var": "BRANCH_MAX_BRANCH_LENGTH",
            "cli_arg": "max_branch_length",
        }
    )

    input_encoding: str = Field(
        "utf-8",
        description="Text encoding of the input files",
        json_schema_extra={
            "env_var": "BRANCH_INPUT_ENCODING",
            "cli_arg": "input_encoding",
        }
    )

    @field_validator("report_file")
    @classmethod
    def check_bare_filename(cls, v: str) -> str:
        """The report file must live directly in the log directory."""
        if os.path.basename(v) != v or v in (".", ".."):
            raise ValueError(f"Report file must be a bare file name: {v}")
        return v

    @field_validator("input_encoding")
    @classmethod
    def check_encoding(cls, v: str) -> str:
        """Reject encodings Python doesn't know."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        return v

    @property
    def report_path(self) -> str:
        return os.path.join(self.log_dir, self.report_file)

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }

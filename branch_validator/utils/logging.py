"""
Logging utilities for the branch validator.

This module provides centralized logging configuration and structured
per-file verdict records. All log output goes to stderr, separate from
the report file.
"""

import json
import logging
import time
from typing import Optional

from ..models import ValidationResult


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    logging.getLogger("dotenv").setLevel(logging.WARNING)


def log_file_verdict(
    result: ValidationResult,
    duration: float,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None,
):
    """
    Log a machine-readable record of one file's verdict.

    Valid files are logged at INFO as VALIDATION, invalid ones at WARNING,
    and unreadable ones at ERROR as READ_FAILURE.

    Args:
        result: Validation result of the file
        duration: Time taken to validate the file (seconds)
        timestamp: Record timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    outcome = result.outcome
    record = {
        "event_type": "file_validation",
        "timestamp": timestamp,
        "filename": result.filename,
        "duration_seconds": round(duration, 3),
        "valid": result.is_valid,
        "reason": None if outcome.is_valid else outcome.reason.value,
        "total_branches": result.total_branches,
        "branch_length": result.branch_length,
        "first_failing_bird": result.first_failing_bird,
    }

    if result.error_message is not None:
        record["event_type"] = "read_failure"
        record["error_message"] = result.error_message
        logger.error(f"READ_FAILURE: {json.dumps(record, ensure_ascii=False)}")
    elif result.is_valid:
        logger.info(f"VALIDATION: {json.dumps(record, ensure_ascii=False)}")
    else:
        logger.warning(f"VALIDATION: {json.dumps(record, ensure_ascii=False)}")

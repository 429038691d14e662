"""
Processing coordination module.

This module runs validation over a list of input files, writes each
result to the report stream and logs progress and run statistics.
"""

import logging
import time
from datetime import datetime, timedelta
from typing import Callable, Iterable, List, Optional, TextIO

from ..constants import DEFAULT_MAX_BRANCH_LENGTH, DEFAULT_MAX_BRANCHES
from ..models import ValidationResult, ValidationStats
from ..utils import create_progress_bar, log_file_verdict
from .parser import read_input_lines
from .report import write_report
from .validator import validate_file

logger = logging.getLogger(__name__)


def log_processing_start(
    total_files: int,
    data_dir: str,
    report_path: str,
    max_branches: int,
    max_branch_length: int,
) -> float:
    """
    Log the start of processing with configuration details.

    Args:
        total_files: Number of files to validate
        data_dir: Directory the files were listed from
        report_path: Path of the report file
        max_branches: Branch limit in effect
        max_branch_length: Branch length limit in effect

    Returns:
        Start timestamp for timing calculations
    """
    start_time = time.time()
    start_datetime = datetime.fromtimestamp(start_time)

    logger.info("=" * 70)
    logger.info("BRANCH VALIDATION - PROCESSING STARTED")
    logger.info("=" * 70)
    logger.info(f"Start time: {start_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(f"Data directory: {data_dir}")
    logger.info(f"Report file: {report_path}")
    logger.info(f"Total files to validate: {total_files}")
    logger.info(f"Limits: branches <= {max_branches}, birds per branch <= {max_branch_length}")
    logger.info("=" * 70)

    return start_time


def log_progress_update(current: int, total: int, filename: str, valid: bool, duration: float):
    """
    Log progress update for an individual file.

    Args:
        current: Current file number (1-based)
        total: Total number of files
        filename: Name of the validated file
        valid: Whether the file passed validation
        duration: Time taken for this file
    """
    percentage = (current / total) * 100
    status_icon = "✅" if valid else "❌"
    status_text = "OK" if valid else "FAILED"
    progress_bar = create_progress_bar(current, total)

    logger.info(
        f"{progress_bar} [{current:3d}/{total:3d}] ({percentage:5.1f}%) {status_icon} {filename} - {status_text} ({duration:.3f}s)"
    )


def log_processing_summary(stats: ValidationStats):
    """
    Log processing summary with statistics.

    Args:
        stats: Run statistics to log
    """
    end_datetime = datetime.fromtimestamp(stats.end_time)

    logger.info("=" * 70)
    logger.info("VALIDATION SUMMARY")
    logger.info("=" * 70)
    logger.info(f"End time: {end_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(
        f"Total duration: {stats.total_duration:.2f} seconds ({timedelta(seconds=int(stats.total_duration))})"
    )
    logger.info("")
    logger.info("FILE STATISTICS:")
    logger.info(f"  Total files validated: {stats.total_files}")
    logger.info(f"  Valid files: {stats.valid_files}")
    logger.info(f"  Invalid files: {stats.invalid_files}")
    logger.info(f"  Unreadable files: {stats.unreadable_files}")
    if stats.total_files > 0:
        logger.info(f"  Pass rate: {(stats.valid_files / stats.total_files * 100):.1f}%")
    logger.info("")
    logger.info("PERFORMANCE STATISTICS:")
    logger.info(f"  Average time per file: {stats.avg_time_per_file:.3f}s")
    logger.info("=" * 70)

    if stats.unreadable_files > 0:
        logger.warning(f"⚠️  {stats.unreadable_files} files could not be read")


def calculate_processing_stats(
    results: List[ValidationResult],
    start_time: float,
    end_time: float,
) -> ValidationStats:
    """
    Calculate run statistics from the per-file results.

    Args:
        results: Validation results of the run
        start_time: Processing start timestamp
        end_time: Processing end timestamp

    Returns:
        ValidationStats object with calculated statistics
    """
    total_files = len(results)
    valid_files = sum(1 for r in results if r.is_valid)
    unreadable_files = sum(1 for r in results if r.error_message is not None)
    total_duration = end_time - start_time
    avg_time_per_file = total_duration / total_files if total_files > 0 else 0

    return ValidationStats(
        total_files=total_files,
        valid_files=valid_files,
        invalid_files=total_files - valid_files - unreadable_files,
        unreadable_files=unreadable_files,
        start_time=start_time,
        end_time=end_time,
        total_duration=total_duration,
        avg_time_per_file=avg_time_per_file,
    )


def process_files(
    file_paths: Iterable[str],
    report_stream: TextIO,
    read_lines: Optional[Callable[[str], List[str]]] = None,
    max_branches: int = DEFAULT_MAX_BRANCHES,
    max_branch_length: int = DEFAULT_MAX_BRANCH_LENGTH,
) -> List[ValidationResult]:
    """
    Validate files one at a time and append each result to the report.

    Files are processed in the order given; callers pass them already
    sorted. An unreadable file fails on its own and does not stop the run.

    Args:
        file_paths: Paths of the files to validate
        report_stream: Writable text stream receiving the report blocks
        read_lines: Callable returning a file's lines (defaults to UTF-8 reading)
        max_branches: Upper bound on filled plus empty branches
        max_branch_length: Upper bound on symbols per branch

    Returns:
        Validation results in processing order

    Raises:
        OSError: If writing to the report stream fails
    """
    if read_lines is None:
        read_lines = read_input_lines

    paths = list(file_paths)
    results: List[ValidationResult] = []

    for index, path in enumerate(paths, 1):
        file_start = time.time()
        result = validate_file(
            path,
            read_lines=read_lines,
            max_branches=max_branches,
            max_branch_length=max_branch_length,
        )
        write_report(result, report_stream, max_branches, max_branch_length)
        duration = time.time() - file_start

        log_file_verdict(result, duration, logger=logger)
        log_progress_update(index, len(paths), path, result.is_valid, duration)
        results.append(result)

    return results

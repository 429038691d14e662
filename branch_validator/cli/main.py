"""
CLI main application module.

This module contains the main application entry point and high-level
application flow coordination for the branch validator.
"""

import logging
import sys
import time
from functools import partial
from typing import List, Optional

from ..constants import (
    EXIT_CONFIG_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OUTPUT_ERROR,
    EXIT_UNEXPECTED_ERROR,
)

from ..core import (
    calculate_processing_stats,
    ensure_output_directory,
    list_input_files,
    log_processing_start,
    log_processing_summary,
    parse_input_file,
    process_files,
    read_input_lines,
)

from .parser import (
    create_argument_parser,
)

from ..utils import (
    setup_logging,
)

from ..config import ConfigLoader, ConfigSchema

logger = logging.getLogger(__name__)


def _show_dry_run(file_paths: List[str], encoding: str) -> None:
    """Print what each input file holds without validating or reporting."""
    logger.info("=" * 70)
    logger.info("DRY RUN MODE - LISTING INPUT FILES")
    logger.info("=" * 70)
    for i, path in enumerate(file_paths, 1):
        try:
            parsed = parse_input_file(path, encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            print(f"{i}. {path}: unreadable ({e})")
            continue
        if not parsed.has_data_section:
            print(f"{i}. {path}: no DATA section")
            continue
        print(
            f"{i}. {path}: {len(parsed.filled_branches)} filled, "
            f"{parsed.empty_branch_count} empty branches"
        )

    if not file_paths:
        print("No input files found")

    logger.info("=" * 70)
    logger.info("DRY RUN COMPLETED SUCCESSFULLY")
    logger.info("=" * 70)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        config = ConfigLoader.load(schema=ConfigSchema, cli_args=args)
    except Exception as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    try:
        try:
            file_paths = list_input_files(config.data_dir)
        except OSError as e:
            logger.error(f"Failed to list input directory '{config.data_dir}': {e}")
            sys.exit(EXIT_INPUT_ERROR)

        if args.dry_run:
            _show_dry_run(file_paths, config.input_encoding)
            return

        try:
            ensure_output_directory(config.log_dir)
        except OSError:
            sys.exit(EXIT_OUTPUT_ERROR)

        report_path = config.report_path
        try:
            report_stream = open(report_path, "w", encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to create report file {report_path}: {e}")
            sys.exit(EXIT_OUTPUT_ERROR)

        start_time = log_processing_start(
            total_files=len(file_paths),
            data_dir=config.data_dir,
            report_path=report_path,
            max_branches=config.max_branches,
            max_branch_length=config.max_branch_length,
        )

        with report_stream:
            try:
                results = process_files(
                    file_paths,
                    report_stream,
                    read_lines=partial(read_input_lines, encoding=config.input_encoding),
                    max_branches=config.max_branches,
                    max_branch_length=config.max_branch_length,
                )
            except KeyboardInterrupt:
                logger.warning("Processing interrupted by user (Ctrl+C)")
                logger.info(f"Partial report saved to {report_path}")
                sys.exit(EXIT_INTERRUPTED)

        stats = calculate_processing_stats(results, start_time, time.time())
        log_processing_summary(stats)

        print(f"Validation finished. Results saved to {report_path}")

    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except OSError as e:
        logger.error(f"Failed to write report: {e}")
        sys.exit(EXIT_OUTPUT_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)

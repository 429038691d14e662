"""
Filesystem discovery module.

This module lists the input files to validate and prepares the
directory that receives the report.
"""

import logging
import os
from typing import List

logger = logging.getLogger(__name__)


def list_input_files(directory: str) -> List[str]:
    """
    List the regular files in a directory, sorted lexicographically by path.

    Subdirectories and other non-regular entries are skipped; the listing
    is not recursive.

    Args:
        directory: Directory holding the input files

    Returns:
        Sorted list of file paths

    Raises:
        FileNotFoundError: If the directory doesn't exist
        NotADirectoryError: If the path is not a directory
        PermissionError: If the directory can't be listed
    """
    with os.scandir(directory) as entries:
        files = [entry.path for entry in entries if entry.is_file()]
    files.sort()

    logger.info(f"Found {len(files)} input files in {directory}")
    return files


def ensure_output_directory(directory: str) -> None:
    """
    Create the output directory unless it already exists.

    Args:
        directory: Directory that will hold the report file

    Raises:
        OSError: If the directory can't be created, or the path exists
            and is not a directory
    """
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create output directory '{directory}': {e}")
        raise
    logger.debug(f"Output directory ready: {directory}")

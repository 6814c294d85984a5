"""
RearrangePdf - Format Utilities Module

This module provides shared utility functions for formatting values.
Centralizes formatting logic to avoid code duplication.
"""

import re
from datetime import date

from rearrangepdf.config import DEFAULT_OUTPUT_EXTENSION, EDITED_SUFFIX, OUTPUT_DATE_FORMAT
from rearrangepdf.constants import BYTES_PER_KB


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted size string (e.g., "1.5 MB")
    """
    if size_bytes <= 0:
        return "0 B"

    units = ["B", "KB", "MB", "GB"]

    size = float(size_bytes)
    unit_index = 0

    while size >= BYTES_PER_KB and unit_index < len(units) - 1:
        size /= BYTES_PER_KB
        unit_index += 1

    if unit_index == 0:
        return f"{int(size)} {units[unit_index]}"
    elif size >= 100:
        return f"{int(size)} {units[unit_index]}"
    elif size >= 10:
        return f"{size:.1f} {units[unit_index]}"
    else:
        return f"{size:.2f} {units[unit_index]}"


def format_elapsed_time(seconds: float) -> str:
    """Format a commit duration.

    Sub-second durations are shown in milliseconds, everything else in
    seconds with two decimals.

    Args:
        seconds: Elapsed time in seconds

    Returns:
        Formatted time string (e.g., "350ms" or "1.25s")
    """
    if seconds < 0:
        seconds = 0.0

    if seconds < 1:
        return f"{int(round(seconds * 1000))}ms"

    return f"{seconds:.2f}s"


def suggest_output_name(
    original_name: str,
    extension: str = DEFAULT_OUTPUT_EXTENSION,
    today: date | None = None,
) -> str:
    """Build the download name for an edited document.

    Args:
        original_name: File name of the loaded document
        extension: Extension of the output, without the dot
        today: Date stamped into the name (defaults to the current date)

    Returns:
        Name of the form ``{base}_edited_{YYYYMMDD}.{ext}``
    """
    if today is None:
        today = date.today()

    ext = extension.lstrip(".")
    base = re.sub(rf"\.{re.escape(ext)}$", "", original_name, flags=re.IGNORECASE)
    return f"{base}{EDITED_SUFFIX}{today.strftime(OUTPUT_DATE_FORMAT)}.{ext}"

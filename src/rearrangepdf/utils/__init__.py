"""
RearrangePdf - Utils Package

Utility modules for the application.
"""

from rearrangepdf.utils.exceptions import (
    InvalidPdfError,
    NoDocumentError,
    OperationInProgressError,
    OrderValidationError,
    PageCopyError,
    RearrangePdfError,
)
from rearrangepdf.utils.format_utils import (
    format_elapsed_time,
    format_file_size,
    suggest_output_name,
)
from rearrangepdf.utils.i18n import _, setup_i18n
from rearrangepdf.utils.logger import logger
from rearrangepdf.utils.progress_state import ProgressCallback, ProgressState

__all__ = [
    "logger",
    "_",
    "setup_i18n",
    "RearrangePdfError",
    "InvalidPdfError",
    "NoDocumentError",
    "OrderValidationError",
    "PageCopyError",
    "OperationInProgressError",
    "format_file_size",
    "format_elapsed_time",
    "suggest_output_name",
    "ProgressState",
    "ProgressCallback",
]

"""
RearrangePdf - Python package for rearranging the pages of PDF files

This package provides an in-memory page arrangement editor: load a PDF,
reorder, select, delete and restore pages, then write the new
arrangement out as a new PDF.
"""

from rearrangepdf.editor import MoveDirection, PageArrangementEditor, PageType
from rearrangepdf.services import CommitResult
from rearrangepdf.utils.exceptions import (
    InvalidPdfError,
    NoDocumentError,
    OperationInProgressError,
    OrderValidationError,
    PageCopyError,
    RearrangePdfError,
)

__version__ = "1.0.0"
__author__ = "RearrangePdf Team"
__license__ = "GPL-3.0"

__all__ = [
    "PageArrangementEditor",
    "MoveDirection",
    "PageType",
    "CommitResult",
    "RearrangePdfError",
    "InvalidPdfError",
    "NoDocumentError",
    "OrderValidationError",
    "PageCopyError",
    "OperationInProgressError",
    "__version__",
]

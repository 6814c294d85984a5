"""
RearrangePdf - Custom Exceptions Module

This module defines custom exception classes for specific error cases
in the page arrangement editor.
"""


class RearrangePdfError(Exception):
    """Base exception for all RearrangePdf errors.

    All custom exceptions should inherit from this class to allow
    catching any RearrangePdf-specific error.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class InvalidPdfError(RearrangePdfError):
    """Raised when the input bytes cannot be loaded as a document."""

    def __init__(self, source_name: str, reason: str | None = None) -> None:
        """Initialize the exception.

        Args:
            source_name: Name of the document that failed to load
            reason: Optional reason why the document is invalid
        """
        self.source_name = source_name
        self.reason = reason
        msg = f"Failed to process PDF: {source_name}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg, details=f"source={source_name}")


class NoDocumentError(RearrangePdfError):
    """Raised when an operation needs a loaded document and there is none."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__("No PDF loaded", details=f"operation={operation}")


class OrderValidationError(RearrangePdfError):
    """Raised when a page order fails validation before commit."""

    def __init__(
        self,
        field: str,
        reason: str,
        values: list[int] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            field: Name of the violated rule (range, duplicates, completeness)
            reason: User-facing description of the violation
            values: Offending page numbers, if any
        """
        self.field = field
        self.reason = reason
        self.values = values or []
        super().__init__(reason)


class PageCopyError(RearrangePdfError):
    """Raised when a page cannot be copied into the output document.

    A commit that raises this error produces no output at all.
    """

    def __init__(self, page_number: int, reason: str | None = None) -> None:
        """Initialize the exception.

        Args:
            page_number: Original (1-based) number of the page that failed
            reason: Optional reason for the failure
        """
        self.page_number = page_number
        self.reason = reason

        msg = f"Failed to rearrange PDF: could not copy page {page_number}"
        if reason:
            msg += f" - {reason}"

        super().__init__(msg, details=f"page={page_number}")


class OperationInProgressError(RearrangePdfError):
    """Raised when a build or commit is already running for a document."""

    def __init__(self, operation: str, running: str | None = None) -> None:
        """Initialize the exception.

        Args:
            operation: The operation that was rejected
            running: The operation currently in flight
        """
        self.operation = operation
        self.running = running

        msg = f"Cannot {operation} while another operation is in progress"
        details = f"running={running}" if running else None
        super().__init__(msg, details=details)


# Exception hierarchy summary:
# RearrangePdfError (base)
# ├── InvalidPdfError
# ├── NoDocumentError
# ├── OrderValidationError
# ├── PageCopyError
# └── OperationInProgressError

"""
RearrangePdf - Commit Engine

Validates an arrangement and materializes it into a new document.

A commit is all-or-nothing: if any page cannot be copied, no output is
produced and a single PageCopyError describes the failure.
"""

import logging
import time
from collections.abc import Collection, Iterable
from dataclasses import dataclass

from rearrangepdf.services.document_provider import DocumentHandle, DocumentProvider
from rearrangepdf.utils.exceptions import OrderValidationError, PageCopyError, RearrangePdfError
from rearrangepdf.utils.format_utils import format_elapsed_time, format_file_size
from rearrangepdf.utils.i18n import _
from rearrangepdf.utils.progress_state import ProgressCallback

logger = logging.getLogger(__name__)


@dataclass
class CommitResult:
    """Output of a successful commit."""

    data: bytes
    page_count: int
    elapsed_seconds: float
    input_size_bytes: int
    output_size_bytes: int
    file_name: str = ""

    @property
    def elapsed_display(self) -> str:
        return format_elapsed_time(self.elapsed_seconds)

    @property
    def size_display(self) -> str:
        """Size change, e.g. ``"1.20 MB → 850 KB"``."""
        return (
            f"{format_file_size(self.input_size_bytes)} → "
            f"{format_file_size(self.output_size_bytes)}"
        )


def _join(values: Iterable[int]) -> str:
    return ", ".join(str(v) for v in values)


def validate_order(
    order: Iterable[int],
    deleted_pages: Collection[int],
    catalog_size: int,
) -> None:
    """Check that an arrangement can be committed.

    Values must lie in ``[1, catalog_size]`` and appear at most once.
    When nothing has been deleted the arrangement must also contain every
    page: a rearrangement on its own may not lose pages.

    Args:
        order: Arrangement to check
        deleted_pages: Pages the user deleted
        catalog_size: Number of pages in the loaded document

    Raises:
        OrderValidationError: Naming the first violated rule
    """
    order = list(order)

    invalid = [n for n in order if n < 1 or n > catalog_size]
    if invalid:
        raise OrderValidationError(
            "range",
            _("Invalid page numbers: {0}. Valid range: 1-{1}").format(
                _join(invalid), catalog_size
            ),
            invalid,
        )

    seen: set[int] = set()
    duplicates: list[int] = []
    for n in order:
        if n in seen and n not in duplicates:
            duplicates.append(n)
        seen.add(n)
    if duplicates:
        raise OrderValidationError(
            "duplicates",
            _("Duplicate pages in the order: {0}").format(_join(duplicates)),
            duplicates,
        )

    if not deleted_pages:
        missing = [n for n in range(1, catalog_size + 1) if n not in seen]
        if missing:
            raise OrderValidationError(
                "completeness",
                _("Missing pages in the order: {0}. Every page must appear exactly once").format(
                    _join(missing)
                ),
                missing,
            )


class CommitEngine:
    """Drives a DocumentProvider to build the output document."""

    def __init__(self, provider: DocumentProvider) -> None:
        self._provider = provider

    @staticmethod
    def validate(
        order: Iterable[int],
        deleted_pages: Collection[int],
        catalog_size: int,
    ) -> None:
        """See :func:`validate_order`."""
        validate_order(order, deleted_pages, catalog_size)

    def commit(
        self,
        document: DocumentHandle,
        order: Iterable[int],
        on_progress: ProgressCallback | None = None,
    ) -> CommitResult:
        """Copy the pages of *order* into a new document and serialize it.

        Args:
            document: Source document
            order: Original page numbers (1-indexed) in output order
            on_progress: Called with (processed, total, step) after each page

        Returns:
            CommitResult with the output bytes and metrics

        Raises:
            PageCopyError: If any page fails to copy
            RearrangePdfError: If the output cannot be serialized
        """
        pages = list(order)
        total = len(pages)
        start = time.monotonic()

        output = self._provider.create()
        try:
            for i, page_number in enumerate(pages, 1):
                try:
                    self._provider.copy_page(document, page_number - 1, output)
                except Exception as e:
                    logger.error("Failed to copy page %d: %s", page_number, e)
                    raise PageCopyError(page_number, str(e)) from e

                if on_progress:
                    on_progress(i, total, _("Processing page {0} of {1}...").format(i, total))

            try:
                data = self._provider.serialize(output)
            except Exception as e:
                logger.error("Failed to save rearranged document: %s", e)
                raise RearrangePdfError(_("Failed to rearrange PDF"), details=str(e)) from e
        finally:
            self._provider.close(output)

        elapsed = time.monotonic() - start
        result = CommitResult(
            data=data,
            page_count=total,
            elapsed_seconds=elapsed,
            input_size_bytes=document.size_bytes,
            output_size_bytes=len(data),
        )
        logger.info(
            "Committed %d pages in %s (%s)",
            total,
            result.elapsed_display,
            result.size_display,
        )
        return result

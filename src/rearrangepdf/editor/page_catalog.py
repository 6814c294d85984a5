"""
RearrangePdf - Page Catalog

Builds the immutable per-page classification records of a loaded document.
"""

from collections.abc import Iterator

from rearrangepdf.editor.page_model import PageRecord, PageStats, PageType
from rearrangepdf.services.document_provider import DocumentHandle
from rearrangepdf.services.page_classifier import PageClassifier
from rearrangepdf.utils.i18n import _
from rearrangepdf.utils.logger import logger
from rearrangepdf.utils.progress_state import ProgressCallback


class PageCatalog:
    """Read-only mapping from original page number to PageRecord.

    Built once per loaded document with :meth:`build`; the catalog never
    changes afterwards.
    """

    def __init__(self, records: list[PageRecord]) -> None:
        self._records: tuple[PageRecord, ...] = tuple(records)
        self._by_number: dict[int, PageRecord] = {r.original_number: r for r in records}

    @classmethod
    def build(
        cls,
        document: DocumentHandle,
        classifier: PageClassifier,
        on_progress: ProgressCallback | None = None,
    ) -> "PageCatalog":
        """Classify every page of *document* in ascending order.

        A page whose analysis fails gets a fallback record and the build
        carries on with the next page.

        Args:
            document: Loaded document to analyze
            classifier: Classifier asked once per page
            on_progress: Called with (processed, total, step) after each page

        Returns:
            The built catalog
        """
        total = document.page_count
        records: list[PageRecord] = []

        for page_number in range(1, total + 1):
            try:
                result = classifier.classify(document, page_number)
                record = PageRecord.from_classification(page_number, result)
            except Exception as e:
                logger.warning(f"Could not analyze page {page_number}: {e}")
                record = PageRecord.fallback(page_number)

            records.append(record)

            if on_progress:
                on_progress(
                    page_number,
                    total,
                    _("Analyzing page {0} of {1}...").format(page_number, total),
                )

        catalog = cls(records)
        stats = catalog.stats()
        logger.info(
            f"Catalog built: {total} pages, {stats.text_count} with text, "
            f"{stats.image_count} with images"
        )
        return catalog

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PageRecord]:
        return iter(self._records)

    def __contains__(self, original_number: object) -> bool:
        return original_number in self._by_number

    def get(self, original_number: int) -> PageRecord | None:
        """Return the record of an original page, or None if unknown."""
        return self._by_number.get(original_number)

    def __getitem__(self, original_number: int) -> PageRecord:
        return self._by_number[original_number]

    @property
    def size(self) -> int:
        """Number of pages in the loaded document."""
        return len(self._records)

    def identity_order(self) -> list[int]:
        """Return the original arrangement ``[1..N]``."""
        return [r.original_number for r in self._records]

    def stats(self) -> PageStats:
        """Count pages with text, pages with images and form pages."""
        return PageStats(
            text_count=sum(1 for r in self._records if r.has_text),
            image_count=sum(1 for r in self._records if r.has_images),
            form_count=sum(1 for r in self._records if r.page_type is PageType.FORM),
        )

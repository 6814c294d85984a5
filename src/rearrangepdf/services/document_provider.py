"""
RearrangePdf - Document Provider

Loading, page copying and serialization of PDF documents. The editor
only talks to the abstract DocumentProvider; PikepdfDocumentProvider is
the implementation used by default.
"""

import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import pikepdf

from rearrangepdf.utils.exceptions import InvalidPdfError

logger = logging.getLogger(__name__)


@dataclass
class DocumentHandle:
    """An open document owned by a DocumentProvider.

    Attributes:
        page_count: Number of pages in the document
        name: File name the document was loaded from (empty for new documents)
        size_bytes: Size of the bytes the document was loaded from
        native: Provider-specific document object
    """

    page_count: int
    name: str = ""
    size_bytes: int = 0
    native: Any = field(default=None, repr=False)


class DocumentProvider(ABC):
    """Capability for loading, assembling and saving documents."""

    @abstractmethod
    def load(self, data: bytes, name: str = "") -> DocumentHandle:
        """Open a document from raw bytes.

        Raises:
            InvalidPdfError: If the bytes are not a readable document.
        """

    @abstractmethod
    def create(self) -> DocumentHandle:
        """Create a new, empty document."""

    @abstractmethod
    def copy_page(self, source: DocumentHandle, page_index: int, target: DocumentHandle) -> None:
        """Append page *page_index* (0-indexed) of *source* to the end of *target*."""

    @abstractmethod
    def serialize(self, document: DocumentHandle) -> bytes:
        """Write a document out as bytes."""

    def close(self, document: DocumentHandle) -> None:
        """Release resources held by a document."""


class PikepdfDocumentProvider(DocumentProvider):
    """DocumentProvider backed by pikepdf."""

    def load(self, data: bytes, name: str = "") -> DocumentHandle:
        try:
            pdf = pikepdf.Pdf.open(io.BytesIO(data))
        except pikepdf.PasswordError as e:
            raise InvalidPdfError(
                name or "document", "This PDF is password-protected. Remove the password first."
            ) from e
        except pikepdf.PdfError as e:
            raise InvalidPdfError(name or "document", str(e)) from e

        logger.debug("Opened %s with %d pages", name or "document", len(pdf.pages))
        return DocumentHandle(
            page_count=len(pdf.pages),
            name=name,
            size_bytes=len(data),
            native=pdf,
        )

    def create(self) -> DocumentHandle:
        return DocumentHandle(page_count=0, native=pikepdf.Pdf.new())

    def copy_page(self, source: DocumentHandle, page_index: int, target: DocumentHandle) -> None:
        src_pdf: pikepdf.Pdf = source.native
        dst_pdf: pikepdf.Pdf = target.native

        if page_index < 0 or page_index >= len(src_pdf.pages):
            raise IndexError(f"page index {page_index} out of range")

        dst_pdf.pages.append(src_pdf.pages[page_index])
        target.page_count = len(dst_pdf.pages)

    def serialize(self, document: DocumentHandle) -> bytes:
        buf = io.BytesIO()
        document.native.save(buf)
        return buf.getvalue()

    def close(self, document: DocumentHandle) -> None:
        if document.native is not None:
            document.native.close()
            document.native = None

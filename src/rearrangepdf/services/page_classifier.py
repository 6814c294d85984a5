"""
RearrangePdf - Page Classifier

Decides whether a page carries text and/or images. Only the two flags
are reported; the page type is derived from them by the catalog.
"""

import re
from abc import ABC, abstractmethod

import pikepdf

from rearrangepdf.editor.page_model import ClassificationResult
from rearrangepdf.services.document_provider import DocumentHandle

_TEXT_BLOCK_RE = re.compile(r"BT\b(.*?)ET\b", re.DOTALL)
_SHOW_TEXT_RE = re.compile(r"\bTj\b|\bTJ\b")


class PageClassifier(ABC):
    """Capability for inspecting the content of a single page."""

    @abstractmethod
    def classify(self, document: DocumentHandle, page_number: int) -> ClassificationResult:
        """Inspect page *page_number* (1-indexed) of *document*.

        May raise any exception; callers substitute a fallback record.
        """


def _read_content_streams(page: pikepdf.Page) -> list[bytes]:
    """Return the raw bytes of every content stream of a page."""
    contents = page.get("/Contents")
    if contents is None:
        return []
    if isinstance(contents, pikepdf.Array):
        return [stream.read_bytes() for stream in contents]
    return [contents.read_bytes()]


def page_has_text(page: pikepdf.Page) -> bool:
    """Check if a page shows text (a BT/ET block with a Tj/TJ operator)."""
    for raw in _read_content_streams(page):
        text = raw.decode("latin-1", errors="ignore")
        for m in _TEXT_BLOCK_RE.finditer(text):
            if _SHOW_TEXT_RE.search(m.group(1)):
                return True
    return False


def page_has_images(page: pikepdf.Page) -> bool:
    """Check if a page's resources include an image XObject."""
    if "/Resources" not in page or "/XObject" not in page.Resources:
        return False
    for _name, xobj in page.Resources.XObject.items():
        if xobj.get("/Subtype") == "/Image":
            return True
    return False


class PikepdfPageClassifier(PageClassifier):
    """PageClassifier that inspects pikepdf content streams and resources."""

    def classify(self, document: DocumentHandle, page_number: int) -> ClassificationResult:
        pdf: pikepdf.Pdf = document.native
        page = pdf.pages[page_number - 1]
        return ClassificationResult(
            has_text=page_has_text(page),
            has_images=page_has_images(page),
        )

"""Pytest configuration for rearrangepdf tests.

Provides small in-memory PDFs built with pikepdf. Every page of a test
PDF carries a marker string ``(Page N)`` so output documents can be
checked page by page.
"""

import io
import re

import pikepdf
import pytest

from rearrangepdf.editor import PageArrangementEditor
from rearrangepdf.editor.page_model import ClassificationResult

_MARKER_RE = re.compile(rb"\(Page (\d+)\)")


def _text_page(pdf: pikepdf.Pdf, number: int) -> pikepdf.Page:
    return pikepdf.Page(
        pikepdf.Dictionary(
            Type=pikepdf.Name.Page,
            MediaBox=[0, 0, 612, 792],
            Contents=pdf.make_stream(f"BT /F1 12 Tf 100 700 Td (Page {number}) Tj ET".encode()),
        )
    )


def _image_page(pdf: pikepdf.Pdf, number: int, with_text: bool = False) -> pikepdf.Page:
    image = pdf.make_stream(b"\xff\x00\x00")
    image.Type = pikepdf.Name.XObject
    image.Subtype = pikepdf.Name.Image
    image.Width = 1
    image.Height = 1
    image.ColorSpace = pikepdf.Name.DeviceRGB
    image.BitsPerComponent = 8

    content = f"q 100 0 0 100 0 0 cm /Im1 Do Q % (Page {number})".encode()
    if with_text:
        content += f"\nBT /F1 12 Tf 100 700 Td (Caption {number}) Tj ET".encode()

    return pikepdf.Page(
        pikepdf.Dictionary(
            Type=pikepdf.Name.Page,
            MediaBox=[0, 0, 612, 792],
            Resources=pikepdf.Dictionary(XObject=pikepdf.Dictionary(Im1=image)),
            Contents=pdf.make_stream(content),
        )
    )


def _blank_page(pdf: pikepdf.Pdf, number: int) -> pikepdf.Page:
    return pikepdf.Page(
        pikepdf.Dictionary(
            Type=pikepdf.Name.Page,
            MediaBox=[0, 0, 612, 792],
            Contents=pdf.make_stream(f"% (Page {number})".encode()),
        )
    )


def make_pdf_bytes(kinds: list[str]) -> bytes:
    """Build a PDF with one page per entry of *kinds*.

    Kinds: ``text``, ``image``, ``mixed``, ``blank``.
    """
    builders = {
        "text": _text_page,
        "image": _image_page,
        "mixed": lambda pdf, n: _image_page(pdf, n, with_text=True),
        "blank": _blank_page,
    }
    pdf = pikepdf.Pdf.new()
    for number, kind in enumerate(kinds, 1):
        pdf.pages.append(builders[kind](pdf, number))
    buf = io.BytesIO()
    pdf.save(buf)
    pdf.close()
    return buf.getvalue()


def page_markers(data: bytes) -> list[int]:
    """Return the ``(Page N)`` marker of every page of a serialized PDF."""
    markers: list[int] = []
    with pikepdf.Pdf.open(io.BytesIO(data)) as pdf:
        for page in pdf.pages:
            contents = page.Contents
            if isinstance(contents, pikepdf.Array):
                raw = b"".join(s.read_bytes() for s in contents)
            else:
                raw = contents.read_bytes()
            match = _MARKER_RE.search(raw)
            markers.append(int(match.group(1)) if match else -1)
    return markers


class StaticClassifier:
    """Classifier answering from a fixed table; raises for pages listed in *failing*."""

    def __init__(self, answers: dict[int, tuple[bool, bool]] | None = None, failing=()) -> None:
        self.answers = answers or {}
        self.failing = set(failing)
        self.calls: list[int] = []

    def classify(self, document, page_number: int) -> ClassificationResult:
        self.calls.append(page_number)
        if page_number in self.failing:
            raise RuntimeError(f"cannot parse page {page_number}")
        has_text, has_images = self.answers.get(page_number, (True, False))
        return ClassificationResult(has_text=has_text, has_images=has_images)


@pytest.fixture
def five_page_pdf() -> bytes:
    return make_pdf_bytes(["text"] * 5)


@pytest.fixture
def editor(five_page_pdf) -> PageArrangementEditor:
    """Editor with a loaded five page text document."""
    ed = PageArrangementEditor()
    ed.load(five_page_pdf, "report.pdf")
    return ed


@pytest.fixture
def pdf_factory():
    """Return the ``make_pdf_bytes(kinds)`` builder."""
    return make_pdf_bytes


@pytest.fixture
def read_markers():
    """Return the ``page_markers(data)`` reader."""
    return page_markers


@pytest.fixture
def classifier_factory():
    """Return the StaticClassifier class."""
    return StaticClassifier

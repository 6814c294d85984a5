"""
RearrangePdf - Page Model

Data models for the page catalog and the deletion history.
"""

import time
from dataclasses import dataclass, field
from enum import Enum


class PageType(str, Enum):
    """Classification of a page's content.

    FORM and TABLE are reserved: the classifier only ever produces
    TEXT, IMAGE, MIXED or UNKNOWN.
    """

    TEXT = "text"
    IMAGE = "image"
    MIXED = "mixed"
    FORM = "form"
    TABLE = "table"
    UNKNOWN = "unknown"


TEXT_SAMPLES: tuple[str, ...] = (
    "Document Introduction: This report outlines quarterly performance metrics...",
    "Financial Summary: Revenue increased by 15% compared to previous quarter...",
    "Methodology Section: The study employed mixed-methods approach...",
    "Results Analysis: Figure 2.3 demonstrates strong correlation...",
    "Conclusion: Based on comprehensive findings, we recommend...",
    "Appendix Materials: Supplementary data tables and reference documents...",
    "Executive Overview: Key findings indicate positive growth trajectory...",
    "Table of Contents: Chapters include introduction, literature review...",
    "Technical Specifications: Detailed product specifications...",
    "Meeting Minutes: Discussion points and action items...",
)


@dataclass(frozen=True)
class ClassificationResult:
    """Answer of the page classifier for a single page."""

    has_text: bool
    has_images: bool


# Used when the classifier fails on a page
FALLBACK_CLASSIFICATION = ClassificationResult(has_text=True, has_images=False)


@dataclass(frozen=True)
class PageRecord:
    """Immutable classification record of one original page.

    Attributes:
        original_number: Page number in the loaded document (1-indexed)
        page_type: Content classification
        has_text: Whether the page carries a text layer
        has_images: Whether the page draws image XObjects
        text_preview: Short description shown next to the page
    """

    original_number: int
    page_type: PageType
    has_text: bool
    has_images: bool
    text_preview: str

    @classmethod
    def from_classification(
        cls, original_number: int, result: ClassificationResult
    ) -> "PageRecord":
        """Build a record from a classifier answer.

        Args:
            original_number: Page number (1-indexed)
            result: What the classifier found on the page

        Returns:
            New PageRecord
        """
        if result.has_images and result.has_text:
            page_type = PageType.MIXED
            preview = "Mixed Content - Text with embedded images and graphical elements"
        elif result.has_images:
            page_type = PageType.IMAGE
            preview = "Image Content - Contains diagrams, charts, or illustrations"
        elif result.has_text:
            page_type = PageType.TEXT
            preview = f"Text Document - {TEXT_SAMPLES[original_number % len(TEXT_SAMPLES)]}"
        else:
            page_type = PageType.UNKNOWN
            preview = "Document Page - Standard page content"

        return cls(
            original_number=original_number,
            page_type=page_type,
            has_text=result.has_text,
            has_images=result.has_images,
            text_preview=preview,
        )

    @classmethod
    def fallback(cls, original_number: int) -> "PageRecord":
        """Record used when a page could not be analyzed."""
        return cls(
            original_number=original_number,
            page_type=PageType.UNKNOWN,
            has_text=FALLBACK_CLASSIFICATION.has_text,
            has_images=FALLBACK_CLASSIFICATION.has_images,
            text_preview="Document Page - Standard page content",
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for display layers.

        Returns:
            Dictionary representation of the record
        """
        return {
            "original_number": self.original_number,
            "page_type": self.page_type.value,
            "has_text": self.has_text,
            "has_images": self.has_images,
            "text_preview": self.text_preview,
        }


@dataclass(frozen=True)
class PageStats:
    """Counts shown in the document analysis summary."""

    text_count: int = 0
    image_count: int = 0
    form_count: int = 0


@dataclass(frozen=True)
class DeletionEvent:
    """One undoable delete operation.

    Attributes:
        removed_pages: Original numbers removed by the operation
        order_before_removal: Full arrangement right before the removal
        timestamp: When the deletion happened (epoch seconds)
    """

    removed_pages: tuple[int, ...]
    order_before_removal: tuple[int, ...]
    timestamp: float = field(default_factory=time.time)

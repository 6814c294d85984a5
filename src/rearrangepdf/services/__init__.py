"""
RearrangePdf - Services Package

Document backends used by the editor: loading and assembling documents,
classifying pages, and committing an arrangement.
"""

from rearrangepdf.services.document_provider import (
    DocumentHandle,
    DocumentProvider,
    PikepdfDocumentProvider,
)
from rearrangepdf.services.page_classifier import PageClassifier, PikepdfPageClassifier
from rearrangepdf.services.commit_engine import CommitEngine, CommitResult, validate_order

__all__ = [
    "DocumentHandle",
    "DocumentProvider",
    "PikepdfDocumentProvider",
    "PageClassifier",
    "PikepdfPageClassifier",
    "CommitEngine",
    "CommitResult",
    "validate_order",
]

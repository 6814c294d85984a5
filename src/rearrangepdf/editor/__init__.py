"""
RearrangePdf - Page Arrangement Editor Module

This module provides the page arrangement engine: reordering,
multi-selection, bulk moves, deletion with undo, and search over the
pages of a loaded document.

Main Components:
- PageArrangementEditor: Controller for one loaded document
- PageCatalog: Immutable per-page classification records
- OrderState: Current arrangement of original page numbers
- SelectionSet: Positions chosen for bulk operations
- HistoryManager: Bounded undo stack of deletions
"""

from rearrangepdf.editor.page_model import (
    ClassificationResult,
    DeletionEvent,
    PageRecord,
    PageStats,
    PageType,
)
from rearrangepdf.editor.history_manager import HistoryManager
from rearrangepdf.editor.order_state import MoveDirection, OrderState
from rearrangepdf.editor.page_catalog import PageCatalog
from rearrangepdf.editor.search_filter import FILTER_ALL, filter_by_type, search
from rearrangepdf.editor.selection import SelectionSet
from rearrangepdf.editor.editor_session import PageArrangementEditor

__all__ = [
    "PageArrangementEditor",
    "PageCatalog",
    "PageRecord",
    "PageStats",
    "PageType",
    "ClassificationResult",
    "DeletionEvent",
    "HistoryManager",
    "MoveDirection",
    "OrderState",
    "SelectionSet",
    "FILTER_ALL",
    "search",
    "filter_by_type",
]

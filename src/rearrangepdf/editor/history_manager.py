"""
RearrangePdf - Deletion History Manager

Bounded undo stack of delete operations. Each entry remembers the full
arrangement from right before the deletion, so undo restores it exactly.
"""

from rearrangepdf.config import MAX_DELETION_HISTORY
from rearrangepdf.editor.page_model import DeletionEvent
from rearrangepdf.utils.logger import logger


class HistoryManager:
    """Keeps the most recent deletion events, newest first."""

    def __init__(self, max_entries: int = MAX_DELETION_HISTORY) -> None:
        """Initialize the history manager.

        Args:
            max_entries: Number of events kept; older ones are dropped
        """
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self._max_entries = max_entries
        self._entries: list[DeletionEvent] = []

    def push(self, removed_pages: list[int], order_before_removal: tuple[int, ...]) -> DeletionEvent:
        """Record a deletion.

        Args:
            removed_pages: Original page numbers that were removed
            order_before_removal: Arrangement right before the removal

        Returns:
            The created DeletionEvent
        """
        event = DeletionEvent(
            removed_pages=tuple(removed_pages),
            order_before_removal=tuple(order_before_removal),
        )

        # Add to the beginning (most recent first)
        self._entries.insert(0, event)

        # Trim to max size
        if len(self._entries) > self._max_entries:
            dropped = len(self._entries) - self._max_entries
            self._entries = self._entries[: self._max_entries]
            logger.debug(f"Dropped {dropped} oldest deletion(s) from history")

        return event

    def pop(self) -> DeletionEvent | None:
        """Remove and return the most recent event, or None if empty."""
        if not self._entries:
            return None
        return self._entries.pop(0)

    def peek(self) -> DeletionEvent | None:
        """Return the most recent event without removing it."""
        return self._entries[0] if self._entries else None

    def clear(self) -> None:
        self._entries = []

    @property
    def count(self) -> int:
        """Get the number of undoable deletions."""
        return len(self._entries)

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def can_undo(self) -> bool:
        return bool(self._entries)

"""
RearrangePdf - Progress State Module

This module provides a dataclass for tracking the progress of a catalog
build or a commit.
"""

from collections.abc import Callable
from dataclasses import dataclass

# on_progress(processed, total, step)
ProgressCallback = Callable[[int, int, str], None]


@dataclass
class ProgressState:
    """Track the progress of a long page-by-page operation.

    Attributes:
        processed: Number of pages handled so far
        total: Total number of pages the operation will handle
        step: Human-readable description of the current step
    """

    processed: int = 0
    total: int = 0
    step: str = ""

    @property
    def fraction(self) -> float:
        """Progress as a fraction in the range 0.0-1.0."""
        if self.total <= 0:
            return 0.0
        return min(1.0, self.processed / self.total)

    @property
    def percent(self) -> int:
        """Progress rounded to a whole percentage."""
        return round(self.fraction * 100)

    def update(self, processed: int, total: int, step: str) -> bool:
        """Record a new progress value.

        Args:
            processed: Pages handled so far
            total: Total pages
            step: Current step description

        Returns:
            True if anything changed
        """
        changed = (processed, total, step) != (self.processed, self.total, self.step)
        self.processed = processed
        self.total = total
        self.step = step
        return changed

    def reset(self) -> None:
        """Clear progress back to the idle state."""
        self.processed = 0
        self.total = 0
        self.step = ""

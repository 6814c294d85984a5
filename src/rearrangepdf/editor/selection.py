"""
RearrangePdf - Selection Set

Positions chosen for bulk operations.

Selection is kept by position, not by page: after a reorder the same
position may refer to a different page.
"""

from collections.abc import Iterable, Iterator


class SelectionSet:
    """Set of selected positions in the current arrangement."""

    def __init__(self) -> None:
        self._positions: set[int] = set()

    def toggle(self, position: int) -> bool:
        """Select *position* if unselected, unselect it otherwise.

        Returns:
            True if the position is selected afterwards
        """
        if position in self._positions:
            self._positions.discard(position)
            return False
        self._positions.add(position)
        return True

    def select_all(self, count: int) -> None:
        """Select every position of an arrangement of length *count*."""
        self._positions = set(range(count))

    def discard(self, positions: Iterable[int]) -> None:
        """Unselect the given positions."""
        self._positions.difference_update(positions)

    def clear(self) -> None:
        self._positions.clear()

    def prune(self, length: int) -> None:
        """Drop positions that no longer exist in an arrangement of *length*."""
        self._positions = {p for p in self._positions if 0 <= p < length}

    def positions(self) -> list[int]:
        """Return the selected positions in ascending order."""
        return sorted(self._positions)

    def __contains__(self, position: object) -> bool:
        return position in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions())

    def __bool__(self) -> bool:
        return bool(self._positions)

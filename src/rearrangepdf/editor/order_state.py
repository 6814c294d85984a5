"""
RearrangePdf - Order State

The current arrangement of a document: an ordered list of original page
numbers. Every structural edit of the editor is applied here.
"""

import random
from collections.abc import Iterable, Iterator
from enum import Enum

from rearrangepdf.utils.logger import logger


class MoveDirection(str, Enum):
    """Where a page (or a block of selected pages) should go."""

    UP = "up"
    DOWN = "down"
    TOP = "top"
    BOTTOM = "bottom"


_STEP_DIRECTIONS = (MoveDirection.UP, MoveDirection.DOWN)
_EXTREME_DIRECTIONS = (MoveDirection.TOP, MoveDirection.BOTTOM)


def _as_direction(value: "MoveDirection | str", allowed: tuple[MoveDirection, ...]) -> MoveDirection:
    direction = MoveDirection(value)
    if direction not in allowed:
        names = ", ".join(d.value for d in allowed)
        raise ValueError(f"direction must be one of {names}, got {direction.value!r}")
    return direction


class OrderState:
    """Mutable ordered list of original page numbers.

    Positions are 0-indexed. Operations given a position outside the list
    do nothing.
    """

    def __init__(self, order: Iterable[int] = ()) -> None:
        self._order: list[int] = list(order)

    @classmethod
    def identity(cls, page_count: int) -> "OrderState":
        """Create the original arrangement ``[1..page_count]``."""
        return cls(range(1, page_count + 1))

    # -- Read access --------------------------------------------------------

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[int]:
        return iter(self._order)

    def __getitem__(self, position: int) -> int:
        return self._order[position]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderState):
            return self._order == other._order
        if isinstance(other, list):
            return self._order == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"OrderState({self._order!r})"

    def snapshot(self) -> tuple[int, ...]:
        """Return an immutable copy of the current arrangement."""
        return tuple(self._order)

    def to_list(self) -> list[int]:
        """Return a copy of the current arrangement as a list."""
        return list(self._order)

    def is_valid_position(self, position: int) -> bool:
        return 0 <= position < len(self._order)

    # -- Single page moves --------------------------------------------------

    def move_single(self, position: int, direction: MoveDirection | str) -> bool:
        """Swap the page at *position* with its neighbor.

        Args:
            position: Position of the page to move
            direction: ``up`` (towards position 0) or ``down``

        Returns:
            True if the order changed
        """
        direction = _as_direction(direction, _STEP_DIRECTIONS)
        if not self.is_valid_position(position):
            return False

        neighbor = position - 1 if direction is MoveDirection.UP else position + 1
        if not self.is_valid_position(neighbor):
            return False

        order = self._order
        order[position], order[neighbor] = order[neighbor], order[position]
        logger.debug(f"Moved page {order[neighbor]} {direction.value} to position {neighbor}")
        return True

    def move_to_extreme(self, position: int, end: MoveDirection | str) -> bool:
        """Move the page at *position* to the top or the bottom of the list."""
        end = _as_direction(end, _EXTREME_DIRECTIONS)
        if not self.is_valid_position(position):
            return False

        page = self._order.pop(position)
        if end is MoveDirection.TOP:
            self._order.insert(0, page)
        else:
            self._order.append(page)
        logger.debug(f"Moved page {page} to the {end.value}")
        return True

    def drag_reorder(self, source: int, target: int) -> bool:
        """Remove the page at *source* and insert it at *target*."""
        if source == target:
            return False
        if not self.is_valid_position(source) or not self.is_valid_position(target):
            return False

        page = self._order.pop(source)
        self._order.insert(target, page)
        logger.debug(f"Dragged page {page} from position {source} to {target}")
        return True

    # -- Whole list operations ----------------------------------------------

    def sort_ascending(self) -> None:
        self._order.sort()

    def sort_descending(self) -> None:
        self._order.sort(reverse=True)

    def reverse(self) -> None:
        self._order.reverse()

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Apply a uniform random permutation (Fisher-Yates)."""
        rng = rng or random
        order = self._order
        for i in range(len(order) - 1, 0, -1):
            j = rng.randint(0, i)
            order[i], order[j] = order[j], order[i]

    # -- Multi page operations ----------------------------------------------

    def move_positions(self, positions: Iterable[int], direction: MoveDirection | str) -> bool:
        """Move every page at *positions* in one direction.

        ``top``/``bottom`` gather the pages, keeping their relative order,
        into one block at that end. ``up``/``down`` swap each page with its
        neighbor, unless that neighbor is also one of *positions*.

        Returns:
            True if the order changed
        """
        direction = MoveDirection(direction)
        selected = sorted({p for p in positions if self.is_valid_position(p)})
        if not selected:
            return False

        before = self.snapshot()
        order = self._order
        chosen = set(selected)

        if direction in _EXTREME_DIRECTIONS:
            block = [order[p] for p in selected]
            rest = [page for i, page in enumerate(order) if i not in chosen]
            if direction is MoveDirection.TOP:
                self._order = block + rest
            else:
                self._order = rest + block
        elif direction is MoveDirection.UP:
            for p in selected:
                if p > 0 and (p - 1) not in chosen:
                    order[p], order[p - 1] = order[p - 1], order[p]
        else:
            for p in reversed(selected):
                if p < len(order) - 1 and (p + 1) not in chosen:
                    order[p], order[p + 1] = order[p + 1], order[p]

        changed = self.snapshot() != before
        if changed:
            logger.debug(f"Moved {len(selected)} selected page(s) {direction.value}")
        return changed

    def remove_positions(self, positions: Iterable[int]) -> list[int]:
        """Remove the pages at *positions*.

        Returns:
            The removed original page numbers, in arrangement order
        """
        chosen = {p for p in positions if self.is_valid_position(p)}
        removed = [page for i, page in enumerate(self._order) if i in chosen]
        self._order = [page for i, page in enumerate(self._order) if i not in chosen]
        return removed

    def replace(self, order: Iterable[int]) -> None:
        """Replace the whole arrangement."""
        self._order = list(order)

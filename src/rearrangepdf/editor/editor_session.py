"""
RearrangePdf - Page Arrangement Editor

Controller for one loaded document: owns the catalog, the current
arrangement, the selection and the deletion history, and turns the
arrangement into an output document on commit.

Edits run synchronously on the caller's thread. Loading (catalog build)
and committing may run in a background thread; only one of them can be
in flight at a time, and edits are refused while one is running.
"""

import random
import threading
from collections.abc import Callable, Iterable
from contextlib import contextmanager
from typing import Any

from rearrangepdf.config import MAX_DELETION_HISTORY
from rearrangepdf.editor import search_filter
from rearrangepdf.editor.history_manager import HistoryManager
from rearrangepdf.editor.order_state import MoveDirection, OrderState
from rearrangepdf.editor.page_catalog import PageCatalog
from rearrangepdf.editor.page_model import PageRecord, PageStats, PageType
from rearrangepdf.editor.selection import SelectionSet
from rearrangepdf.services.commit_engine import CommitEngine, CommitResult
from rearrangepdf.services.document_provider import (
    DocumentHandle,
    DocumentProvider,
    PikepdfDocumentProvider,
)
from rearrangepdf.services.page_classifier import PageClassifier, PikepdfPageClassifier
from rearrangepdf.utils.exceptions import (
    NoDocumentError,
    OperationInProgressError,
    OrderValidationError,
)
from rearrangepdf.utils.format_utils import suggest_output_name
from rearrangepdf.utils.i18n import _
from rearrangepdf.utils.logger import logger
from rearrangepdf.utils.progress_state import ProgressCallback, ProgressState

# on_complete(result, error): exactly one of the two is None
CompletionCallback = Callable[[Any, Exception | None], None]


class PageArrangementEditor:
    """Interactive page arrangement engine for a single document."""

    def __init__(
        self,
        provider: DocumentProvider | None = None,
        classifier: PageClassifier | None = None,
        max_history: int = MAX_DELETION_HISTORY,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the editor.

        Args:
            provider: Document backend (defaults to pikepdf)
            classifier: Page classifier (defaults to pikepdf inspection)
            max_history: Number of undoable deletions
            rng: Random source used by shuffle
        """
        self._provider = provider or PikepdfDocumentProvider()
        self._classifier = classifier or PikepdfPageClassifier()
        self._commit_engine = CommitEngine(self._provider)
        self._max_history = max_history
        self._rng = rng or random.Random()

        self._document: DocumentHandle | None = None
        self._catalog = PageCatalog([])
        self._order = OrderState()
        self._selection = SelectionSet()
        self._history = HistoryManager(max_history)
        self._deleted: set[int] = set()

        self._edit_lock = threading.RLock()
        self._busy_lock = threading.Lock()
        self._running: str | None = None
        self.progress = ProgressState()

    # -- Background operation guard -----------------------------------------

    def _begin(self, operation: str) -> None:
        with self._busy_lock:
            if self._running is not None:
                raise OperationInProgressError(operation, self._running)
            self._running = operation

    def _end(self) -> None:
        with self._busy_lock:
            self._running = None

    @property
    def is_busy(self) -> bool:
        """Whether a load or commit is in flight."""
        with self._busy_lock:
            return self._running is not None

    @contextmanager
    def _editing(self, operation: str):
        with self._edit_lock:
            with self._busy_lock:
                running = self._running
            if running is not None:
                raise OperationInProgressError(operation, running)
            yield

    def _track_progress(self, on_progress: ProgressCallback | None) -> ProgressCallback:
        def _report(processed: int, total: int, step: str) -> None:
            self.progress.update(processed, total, step)
            if on_progress:
                on_progress(processed, total, step)

        return _report

    def _run_in_background(
        self,
        operation: str,
        work: Callable[[], Any],
        on_complete: CompletionCallback | None,
    ) -> threading.Thread:
        def _worker() -> None:
            result = None
            error: Exception | None = None
            try:
                result = work()
            except Exception as e:
                logger.error(f"Background {operation} failed: {e}")
                error = e
            finally:
                self._end()
            if on_complete:
                on_complete(result, error)

        thread = threading.Thread(target=_worker, name=f"rearrangepdf-{operation}", daemon=True)
        thread.start()
        return thread

    # -- Loading ------------------------------------------------------------

    def load(
        self,
        data: bytes,
        name: str = "",
        on_progress: ProgressCallback | None = None,
    ) -> PageCatalog:
        """Load a document and build its catalog.

        Any previous document and editing state are discarded.

        Args:
            data: Raw document bytes
            name: File name of the document
            on_progress: Called with (processed, total, step) per analyzed page

        Returns:
            The built catalog

        Raises:
            InvalidPdfError: If the bytes cannot be loaded
            OperationInProgressError: If a load or commit is running
        """
        self._begin("load")
        try:
            return self._load(data, name, on_progress)
        finally:
            self._end()

    def load_async(
        self,
        data: bytes,
        name: str = "",
        on_progress: ProgressCallback | None = None,
        on_complete: CompletionCallback | None = None,
    ) -> threading.Thread:
        """Like :meth:`load`, but builds the catalog in a background thread.

        Raises:
            OperationInProgressError: Immediately, if a load or commit is running
        """
        self._begin("load")
        return self._run_in_background(
            "load", lambda: self._load(data, name, on_progress), on_complete
        )

    def _load(self, data: bytes, name: str, on_progress: ProgressCallback | None) -> PageCatalog:
        self.progress.reset()
        document = self._provider.load(data, name)
        try:
            catalog = PageCatalog.build(document, self._classifier, self._track_progress(on_progress))
        except BaseException:
            self._provider.close(document)
            raise

        with self._edit_lock:
            self._release_document()
            self._document = document
            self._catalog = catalog
            self._reset_editing_state()

        logger.info(f"Loaded PDF with {document.page_count} pages: {name or '<bytes>'}")
        return catalog

    def _release_document(self) -> None:
        if self._document is not None:
            self._provider.close(self._document)
            self._document = None

    def _reset_editing_state(self) -> None:
        self._order = OrderState(self._catalog.identity_order())
        self._selection.clear()
        self._history = HistoryManager(self._max_history)
        self._deleted = set()

    def reset(self) -> None:
        """Drop the document and all editing state."""
        with self._editing("reset"):
            self._release_document()
            self._catalog = PageCatalog([])
            self._reset_editing_state()
            self.progress.reset()
        logger.info("Editor reset")

    # -- Read access ----------------------------------------------------------

    @property
    def document(self) -> DocumentHandle | None:
        return self._document

    @property
    def catalog(self) -> PageCatalog:
        return self._catalog

    @property
    def order(self) -> list[int]:
        """Current arrangement (a copy)."""
        with self._edit_lock:
            return self._order.to_list()

    @property
    def selected_positions(self) -> list[int]:
        with self._edit_lock:
            return self._selection.positions()

    @property
    def deleted_pages(self) -> list[int]:
        """Original page numbers currently left out of the arrangement."""
        with self._edit_lock:
            return sorted(self._deleted)

    @property
    def deleted_count(self) -> int:
        return len(self._deleted)

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def history_count(self) -> int:
        return self._history.count

    def record_at(self, position: int) -> PageRecord | None:
        """Return the record of the page shown at *position*."""
        with self._edit_lock:
            if not self._order.is_valid_position(position):
                return None
            return self._catalog.get(self._order[position])

    def stats(self) -> PageStats:
        return self._catalog.stats()

    # -- Moves ----------------------------------------------------------------

    def move_single(self, position: int, direction: MoveDirection | str) -> bool:
        """Swap a page with its upper or lower neighbor."""
        with self._editing("move page"):
            return self._order.move_single(position, direction)

    def move_to_extreme(self, position: int, end: MoveDirection | str) -> bool:
        """Move a page to the top or the bottom."""
        with self._editing("move page"):
            return self._order.move_to_extreme(position, end)

    def drag_reorder(self, source: int, target: int) -> bool:
        with self._editing("reorder pages"):
            return self._order.drag_reorder(source, target)

    def sort_ascending(self) -> None:
        with self._editing("sort pages"):
            self._order.sort_ascending()

    def sort_descending(self) -> None:
        with self._editing("sort pages"):
            self._order.sort_descending()

    def reverse(self) -> None:
        with self._editing("reverse pages"):
            self._order.reverse()

    def shuffle(self) -> None:
        with self._editing("shuffle pages"):
            self._order.shuffle(self._rng)

    # -- Selection ------------------------------------------------------------

    def toggle_selection(self, position: int) -> bool:
        """Select or unselect a position.

        Returns:
            True if the position is selected afterwards
        """
        with self._editing("select page"):
            if not self._order.is_valid_position(position):
                return False
            return self._selection.toggle(position)

    def select_all(self) -> None:
        with self._editing("select pages"):
            self._selection.select_all(len(self._order))

    def clear_selection(self) -> None:
        with self._editing("select pages"):
            self._selection.clear()

    def move_selected(self, direction: MoveDirection | str) -> bool:
        """Move all selected pages, then clear the selection.

        Returns:
            True if the order changed
        """
        direction = MoveDirection(direction)
        with self._editing("move pages"):
            if not self._selection:
                return False
            changed = self._order.move_positions(self._selection.positions(), direction)
            self._selection.clear()
            return changed

    # -- Deletion and undo ----------------------------------------------------

    def delete_at(self, positions: Iterable[int]) -> list[int]:
        """Remove the pages at *positions* as one undoable deletion.

        Returns:
            The removed original page numbers (empty if nothing was removed)
        """
        with self._editing("delete pages"):
            valid = sorted({p for p in positions if self._order.is_valid_position(p)})
            if not valid:
                return []

            before = self._order.snapshot()
            removed = self._order.remove_positions(valid)
            self._history.push(removed, before)
            self._deleted.update(removed)
            self._selection.discard(valid)
            self._selection.prune(len(self._order))

        logger.info(f"Deleted {len(removed)} page(s): {removed}")
        return removed

    def delete_page(self, position: int) -> list[int]:
        return self.delete_at([position])

    def delete_selected(self) -> list[int]:
        """Delete every selected page as one undoable deletion."""
        with self._editing("delete pages"):
            return self.delete_at(self._selection.positions())

    def undo(self) -> bool:
        """Undo the most recent deletion.

        The arrangement goes back to exactly what it was before that
        deletion; edits made after it are discarded.

        Returns:
            True if a deletion was undone
        """
        with self._editing("undo"):
            event = self._history.pop()
            if event is None:
                return False

            self._order.replace(event.order_before_removal)
            self._deleted.difference_update(event.removed_pages)
            self._selection.prune(len(self._order))

        logger.info(f"Restored {len(event.removed_pages)} page(s): {list(event.removed_pages)}")
        return True

    def restore_all(self) -> None:
        """Bring back every page in its original order.

        Any reordering is discarded along with the deletion history.
        """
        with self._editing("restore pages"):
            self._order = OrderState(self._catalog.identity_order())
            self._deleted = set()
            self._history.clear()
            self._selection.clear()
        logger.info("Restored all pages to the original order")

    # -- Search ---------------------------------------------------------------

    def search(self, query: str) -> list[int]:
        """Positions whose page type or preview contains *query*."""
        with self._edit_lock:
            return search_filter.search(self._catalog, self._order, query)

    def filter_by_type(self, page_type: PageType | str) -> list[int]:
        """Pages of the arrangement with the given type (or ``"all"``)."""
        with self._edit_lock:
            return search_filter.filter_by_type(self._catalog, self._order, page_type)

    # -- Commit ---------------------------------------------------------------

    def validate(self) -> None:
        """Check the current arrangement.

        Raises:
            NoDocumentError: If no document is loaded
            OrderValidationError: If the arrangement cannot be committed
        """
        with self._edit_lock:
            if self._document is None:
                raise NoDocumentError("validate")
            self._commit_engine.validate(self._order, self._deleted, self._catalog.size)

    def validation_error(self) -> str | None:
        """Return the message of the first violated rule, or None if valid."""
        try:
            self.validate()
        except (NoDocumentError, OrderValidationError) as e:
            return e.message
        return None

    def commit(self, on_progress: ProgressCallback | None = None) -> CommitResult:
        """Validate the arrangement and build the output document.

        Args:
            on_progress: Called with (processed, total, step) per copied page

        Returns:
            CommitResult with the output bytes, metrics and a file name

        Raises:
            NoDocumentError: If no document is loaded
            OrderValidationError: Before any page is copied
            PageCopyError: If a page fails to copy (no output is produced)
            OperationInProgressError: If a load or commit is running
        """
        self._begin("commit")
        try:
            return self._commit(on_progress)
        finally:
            self._end()

    def commit_async(
        self,
        on_progress: ProgressCallback | None = None,
        on_complete: CompletionCallback | None = None,
    ) -> threading.Thread:
        """Like :meth:`commit`, but runs in a background thread.

        Raises:
            OperationInProgressError: Immediately, if a load or commit is running
        """
        self._begin("commit")
        return self._run_in_background("commit", lambda: self._commit(on_progress), on_complete)

    def _commit(self, on_progress: ProgressCallback | None) -> CommitResult:
        with self._edit_lock:
            document = self._document
            if document is None:
                raise NoDocumentError("commit")
            order = self._order.snapshot()
            self._commit_engine.validate(order, self._deleted, self._catalog.size)

        self.progress.reset()
        result = self._commit_engine.commit(document, order, self._track_progress(on_progress))
        result.file_name = suggest_output_name(document.name or _("document") + ".pdf")
        return result

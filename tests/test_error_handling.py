"""Tests for the exception hierarchy and progress state."""

import pytest

from rearrangepdf.utils.exceptions import (
    InvalidPdfError,
    NoDocumentError,
    OperationInProgressError,
    OrderValidationError,
    PageCopyError,
    RearrangePdfError,
)
from rearrangepdf.utils.progress_state import ProgressState


class TestExceptions:
    @pytest.mark.parametrize(
        "error",
        [
            InvalidPdfError("a.pdf"),
            NoDocumentError("commit"),
            OrderValidationError("range", "bad"),
            PageCopyError(3),
            OperationInProgressError("commit", "load"),
        ],
    )
    def test_all_derive_from_base(self, error):
        assert isinstance(error, RearrangePdfError)

    def test_details_in_str(self):
        err = RearrangePdfError("Something failed", details="page=2")
        assert str(err) == "Something failed (page=2)"
        assert err.message == "Something failed"

    def test_page_copy_error_message(self):
        err = PageCopyError(4, "unsupported structure")
        assert err.page_number == 4
        assert "could not copy page 4 - unsupported structure" in err.message

    def test_validation_error_is_verbatim(self):
        err = OrderValidationError("duplicates", "Duplicate pages in the order: 2", [2])
        assert str(err) == "Duplicate pages in the order: 2"

    def test_in_progress_mentions_running_operation(self):
        err = OperationInProgressError("commit", "load")
        assert "running=load" in str(err)


class TestProgressState:
    def test_fraction_and_percent(self):
        state = ProgressState()
        assert state.update(1, 4, "Analyzing page 1 of 4...") is True
        assert state.fraction == 0.25
        assert state.percent == 25

    def test_unchanged_update(self):
        state = ProgressState(1, 4, "x")
        assert state.update(1, 4, "x") is False

    def test_empty_total(self):
        assert ProgressState().fraction == 0.0

    def test_reset(self):
        state = ProgressState(2, 2, "done")
        state.reset()
        assert (state.processed, state.total, state.step) == (0, 0, "")

"""Tests for page_model module (PageRecord, PageType, DeletionEvent)."""

import dataclasses

import pytest

from rearrangepdf.editor.page_model import (
    ClassificationResult,
    DeletionEvent,
    PageRecord,
    PageType,
)


class TestPageRecord:
    def test_text_and_images_is_mixed(self):
        record = PageRecord.from_classification(1, ClassificationResult(True, True))
        assert record.page_type is PageType.MIXED
        assert record.text_preview.startswith("Mixed Content")

    def test_images_only(self):
        record = PageRecord.from_classification(2, ClassificationResult(False, True))
        assert record.page_type is PageType.IMAGE
        assert "Image Content" in record.text_preview

    def test_text_only_uses_rotating_sample(self):
        first = PageRecord.from_classification(1, ClassificationResult(True, False))
        eleventh = PageRecord.from_classification(11, ClassificationResult(True, False))
        assert first.page_type is PageType.TEXT
        assert first.text_preview.startswith("Text Document - Financial Summary")
        assert first.text_preview == eleventh.text_preview

    def test_nothing_found_is_unknown(self):
        record = PageRecord.from_classification(3, ClassificationResult(False, False))
        assert record.page_type is PageType.UNKNOWN
        assert record.has_text is False

    def test_fallback_record(self):
        record = PageRecord.fallback(4)
        assert record.original_number == 4
        assert record.page_type is PageType.UNKNOWN
        assert record.has_text is True
        assert record.has_images is False

    def test_record_is_immutable(self):
        record = PageRecord.fallback(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.page_type = PageType.TEXT

    def test_to_dict(self):
        d = PageRecord.from_classification(2, ClassificationResult(False, True)).to_dict()
        assert d["original_number"] == 2
        assert d["page_type"] == "image"
        assert d["has_images"] is True


class TestPageType:
    def test_reserved_variants_exist(self):
        assert PageType("form") is PageType.FORM
        assert PageType("table") is PageType.TABLE

    def test_classification_never_yields_reserved_variants(self):
        produced = {
            PageRecord.from_classification(1, ClassificationResult(t, i)).page_type
            for t in (True, False)
            for i in (True, False)
        }
        assert produced == {PageType.TEXT, PageType.IMAGE, PageType.MIXED, PageType.UNKNOWN}


class TestDeletionEvent:
    def test_timestamp_defaults_to_now(self):
        event = DeletionEvent(removed_pages=(1,), order_before_removal=(1, 2))
        assert event.timestamp > 0

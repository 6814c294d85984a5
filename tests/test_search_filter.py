"""Tests for search_filter module."""

from rearrangepdf.editor.order_state import OrderState
from rearrangepdf.editor.page_catalog import PageCatalog
from rearrangepdf.editor.page_model import PageType
from rearrangepdf.editor.search_filter import filter_by_type, search
from rearrangepdf.services.document_provider import DocumentHandle


def _catalog(classifier_factory) -> PageCatalog:
    # 1 text, 2 image, 3 mixed, 4 text, 5 unknown
    classifier = classifier_factory(
        {1: (True, False), 2: (False, True), 3: (True, True), 4: (True, False), 5: (False, False)}
    )
    return PageCatalog.build(DocumentHandle(page_count=5), classifier)


class TestSearch:
    def test_matches_page_type(self, classifier_factory):
        catalog = _catalog(classifier_factory)
        assert search(catalog, OrderState.identity(5), "image") == [1, 2]

    def test_case_insensitive_preview_match(self, classifier_factory):
        catalog = _catalog(classifier_factory)
        assert search(catalog, OrderState.identity(5), "TEXT DOCUMENT") == [0, 3]

    def test_returns_positions_in_current_order(self, classifier_factory):
        catalog = _catalog(classifier_factory)
        order = OrderState([5, 4, 3, 2, 1])
        assert search(catalog, order, "text document") == [1, 4]

    def test_blank_query_matches_nothing(self, classifier_factory):
        catalog = _catalog(classifier_factory)
        assert search(catalog, OrderState.identity(5), "   ") == []

    def test_query_whitespace_is_not_trimmed(self, classifier_factory):
        catalog = _catalog(classifier_factory)
        assert search(catalog, OrderState.identity(5), "unknown") == [4]
        assert search(catalog, OrderState.identity(5), " unknown") == []
        assert search(catalog, OrderState.identity(5), "text document ") == [0, 3]

    def test_no_match(self, classifier_factory):
        catalog = _catalog(classifier_factory)
        assert search(catalog, OrderState.identity(5), "spreadsheet") == []


class TestFilterByType:
    def test_filter_returns_page_numbers(self, classifier_factory):
        catalog = _catalog(classifier_factory)
        order = OrderState([4, 2, 1, 3, 5])
        assert filter_by_type(catalog, order, PageType.TEXT) == [4, 1]
        assert filter_by_type(catalog, order, "mixed") == [3]

    def test_filter_all(self, classifier_factory):
        catalog = _catalog(classifier_factory)
        order = OrderState([2, 1])
        assert filter_by_type(catalog, order, "all") == [2, 1]

    def test_reserved_type_matches_nothing(self, classifier_factory):
        catalog = _catalog(classifier_factory)
        assert filter_by_type(catalog, OrderState.identity(5), "table") == []

    def test_filter_does_not_mutate_order(self, classifier_factory):
        catalog = _catalog(classifier_factory)
        order = OrderState.identity(5)
        filter_by_type(catalog, order, "text")
        assert order.to_list() == [1, 2, 3, 4, 5]

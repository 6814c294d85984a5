"""
RearrangePdf - Search and Filter

Read-only views over the catalog and the current arrangement.
"""

from rearrangepdf.editor.order_state import OrderState
from rearrangepdf.editor.page_catalog import PageCatalog
from rearrangepdf.editor.page_model import PageType

FILTER_ALL = "all"


def search(catalog: PageCatalog, order: OrderState, query: str) -> list[int]:
    """Find positions whose page matches *query*.

    The match is a case-insensitive substring test against the page type
    and the text preview. A blank query matches nothing.

    Args:
        catalog: Page records of the loaded document
        order: Current arrangement
        query: Text typed by the user

    Returns:
        Matching positions, in arrangement order
    """
    if not query.strip():
        return []

    # Surrounding whitespace is part of the match
    needle = query.lower()

    results: list[int] = []
    for position, page_number in enumerate(order):
        record = catalog.get(page_number)
        if record is None:
            continue
        if needle in record.page_type.value or needle in record.text_preview.lower():
            results.append(position)
    return results


def filter_by_type(catalog: PageCatalog, order: OrderState, page_type: PageType | str) -> list[int]:
    """Return the pages of the arrangement whose type is *page_type*.

    ``"all"`` returns the whole arrangement. The arrangement itself is
    not changed.

    Returns:
        Original page numbers, in arrangement order
    """
    if page_type == FILTER_ALL:
        return order.to_list()

    wanted = PageType(page_type)
    pages: list[int] = []
    for page_number in order:
        record = catalog.get(page_number)
        if record is not None and record.page_type is wanted:
            pages.append(page_number)
    return pages

"""Paginator: 1-based page numbers in, zero-based page requests out.

Page sizes belong to the calling context and are never taken from
user input.
"""

from __future__ import annotations

from catalog.domain.exceptions import InvalidPageError, ValidationError
from catalog.domain.model.value_objects import PageRequest, SortDirection

PRODUCTS_PER_PAGE = 10
SEARCH_RESULTS_PAGE = 10
PRODUCTS_PER_ADMIN_PAGE = 5

SORTABLE_FIELDS = frozenset({"id", "title", "alias", "price"})


def build_page(
    page_num: int,
    page_size: int,
    sort_field: str | None = None,
    sort_dir: str | None = None,
) -> PageRequest:
    """Translate a caller's page number and sort options into a PageRequest.

    Raises InvalidPageError for page numbers below 1 and ValidationError
    for a non-positive page size or an unknown sort field.
    """
    if page_num < 1:
        raise InvalidPageError(page_num)
    if page_size < 1:
        raise ValidationError(f"Page size must be positive, got {page_size}")
    if sort_field is not None and sort_field not in SORTABLE_FIELDS:
        raise ValidationError(
            f"Cannot sort by '{sort_field}'; expected one of {sorted(SORTABLE_FIELDS)}"
        )

    return PageRequest(
        page_index=page_num - 1,
        size=page_size,
        sort_field=sort_field,
        direction=SortDirection.parse(sort_dir),
    )

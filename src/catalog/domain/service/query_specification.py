"""Query specification: keyword and category filters for a listing.

A listing request picks exactly one of four filter modes. The modes are
a fixed table, checked in priority order, and callers dispatch on the
filter's type rather than combining partial filters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from catalog.domain.service import category_path


class FilterMode(Enum):
    SEARCH_IN_CATEGORY = "search_in_category"
    SEARCH_ALL = "search_all"
    LIST_IN_CATEGORY = "list_in_category"
    LIST_ALL = "list_all"


@dataclass(frozen=True)
class SearchInCategory:
    mode: ClassVar[FilterMode] = FilterMode.SEARCH_IN_CATEGORY

    keyword: str
    category_id: int
    category_token: str


@dataclass(frozen=True)
class SearchAll:
    mode: ClassVar[FilterMode] = FilterMode.SEARCH_ALL

    keyword: str


@dataclass(frozen=True)
class ListInCategory:
    mode: ClassVar[FilterMode] = FilterMode.LIST_IN_CATEGORY

    category_id: int
    category_token: str


@dataclass(frozen=True)
class ListAll:
    mode: ClassVar[FilterMode] = FilterMode.LIST_ALL


QueryFilter = Union[SearchInCategory, SearchAll, ListInCategory, ListAll]


def build(keyword: str | None = None, category_id: int | None = None) -> QueryFilter:
    """Resolve optional keyword and category id into a single filter.

    1. keyword + category   -> SearchInCategory
    2. keyword only         -> SearchAll
    3. category only        -> ListInCategory
    4. neither              -> ListAll

    An empty keyword counts as absent. A category id of ``None`` or <= 0
    means no category filter.
    """
    category = category_id if category_path.is_category_filter(category_id) else None

    if keyword:
        if category is not None:
            return SearchInCategory(
                keyword=keyword,
                category_id=category,
                category_token=category_path.token_for(category),
            )
        return SearchAll(keyword=keyword)

    if category is not None:
        return ListInCategory(
            category_id=category,
            category_token=category_path.token_for(category),
        )
    return ListAll()

"""In-memory query semantics shared by the local repositories.

The JSON repository and the in-memory fakes used in tests load the
whole catalog and answer queries with these helpers, so every local
store filters, sorts and slices the same way a real store would.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, PageRequest, SortDirection
from catalog.domain.service import category_path

Predicate = Callable[[Product], bool]


def in_category(category_id: int) -> Predicate:
    """Direct category or any ancestor in the category path."""
    return lambda product: category_path.belongs_to(product, category_id)


def directly_in_category(category_id: int) -> Predicate:
    return lambda product: product.category_id == category_id


def title_contains(keyword: str) -> Predicate:
    needle = keyword.lower()

    def predicate(product: Product) -> bool:
        return needle in product.title.lower()

    return predicate


def any_field_contains(keyword: str) -> Predicate:
    """Admin keyword match: id, title or alias."""
    needle = keyword.lower()

    def predicate(product: Product) -> bool:
        haystack = (str(product.id), product.title.lower(), product.alias.lower())
        return any(needle in field for field in haystack)

    return predicate


def both(first: Predicate, second: Predicate) -> Predicate:
    return lambda product: first(product) and second(product)


def select(products: Iterable[Product], predicate: Predicate | None = None) -> list[Product]:
    ordered = sorted(products, key=lambda p: p.id or 0)
    if predicate is None:
        return ordered
    return [p for p in ordered if predicate(p)]


def paginate(products: list[Product], page_request: PageRequest) -> Page[Product]:
    sort_field = page_request.sort_field
    if sort_field is not None:
        products = sorted(
            products,
            key=lambda p: getattr(p, sort_field),
            reverse=page_request.direction is SortDirection.DESC,
        )
    start = page_request.offset
    return Page(
        items=products[start:start + page_request.size],
        total=len(products),
        page_request=page_request,
    )


class InMemoryProductQueries(ABC):
    """Read side of ProductRepository over a fully loaded catalog.

    Category tokens are part of the repository contract for stores that
    match them in a query; here membership is decided per product by
    ``category_path.belongs_to``.
    """

    @abstractmethod
    def _snapshot(self) -> list[Product]:
        """Return every stored product; every query runs against it."""

    def list_by_category(
        self, category_id: int, category_token: str, page_request: PageRequest
    ) -> Page[Product]:
        return paginate(select(self._snapshot(), in_category(category_id)), page_request)

    def search_in_category(
        self,
        category_id: int,
        category_token: str,
        keyword: str,
        page_request: PageRequest,
    ) -> Page[Product]:
        predicate = both(in_category(category_id), any_field_contains(keyword))
        return paginate(select(self._snapshot(), predicate), page_request)

    def find_by_keyword(self, keyword: str, page_request: PageRequest) -> Page[Product]:
        return paginate(
            select(self._snapshot(), any_field_contains(keyword)), page_request
        )

    def find_in_category(
        self, category_id: int, category_token: str, page_request: PageRequest
    ) -> Page[Product]:
        return self.list_by_category(category_id, category_token, page_request)

    def find_page(self, page_request: PageRequest) -> Page[Product]:
        return paginate(select(self._snapshot()), page_request)

    def search(self, keyword: str, page_request: PageRequest) -> Page[Product]:
        return paginate(select(self._snapshot(), title_contains(keyword)), page_request)

    def list_all(self) -> list[Product]:
        return select(self._snapshot())

    def list_by_category_id(self, category_id: int) -> list[Product]:
        return select(self._snapshot(), directly_in_category(category_id))

    def get_by_id(self, product_id: int) -> Product | None:
        for product in self._snapshot():
            if product.id == product_id:
                return product
        return None

    def get_by_alias(self, alias: str) -> Product | None:
        for product in self._snapshot():
            if product.alias == alias:
                return product
        return None

    def get_by_title(self, title: str) -> Product | None:
        for product in self._snapshot():
            if product.title == title:
                return product
        return None

    def count_by_id(self, product_id: int) -> int:
        return sum(1 for p in self._snapshot() if p.id == product_id)

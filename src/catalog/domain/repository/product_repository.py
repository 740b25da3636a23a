"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Category filters receive both the category id and its match token:
a product is in the category when its direct category is the id or its
category path contains the token.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, PageRequest


class ProductRepository(ABC):

    # --- Paged queries --------------------------------------------------------

    @abstractmethod
    def list_by_category(
        self, category_id: int, category_token: str, page_request: PageRequest
    ) -> Page[Product]:
        """Storefront listing of one category and its descendants."""

    @abstractmethod
    def search_in_category(
        self,
        category_id: int,
        category_token: str,
        keyword: str,
        page_request: PageRequest,
    ) -> Page[Product]:
        """Keyword match restricted to one category."""

    @abstractmethod
    def find_by_keyword(self, keyword: str, page_request: PageRequest) -> Page[Product]:
        """Keyword match across every product."""

    @abstractmethod
    def find_in_category(
        self, category_id: int, category_token: str, page_request: PageRequest
    ) -> Page[Product]:
        """Admin listing of one category and its descendants."""

    @abstractmethod
    def find_page(self, page_request: PageRequest) -> Page[Product]:
        """Unfiltered listing."""

    @abstractmethod
    def search(self, keyword: str, page_request: PageRequest) -> Page[Product]:
        """Storefront search."""

    # --- Unpaged queries ------------------------------------------------------

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_by_category_id(self, category_id: int) -> list[Product]:
        """Return every product whose own category is ``category_id``.

        Products of descendant categories are not included.
        """

    # --- Lookups --------------------------------------------------------------

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_alias(self, alias: str) -> Product | None:
        """Return a product by its alias, or None if not found."""

    @abstractmethod
    def get_by_title(self, title: str) -> Product | None:
        """Return a product by its exact title, or None if not found."""

    @abstractmethod
    def count_by_id(self, product_id: int) -> int:
        """Return how many products have this ID (0 or 1)."""

    # --- Mutations ------------------------------------------------------------

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID to new ones."""

    @abstractmethod
    def delete_by_id(self, product_id: int) -> None:
        """Remove a product.

        Raises ProductNotFoundError when it is already gone.
        """

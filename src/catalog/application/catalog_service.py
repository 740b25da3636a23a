"""Application service: the product catalog facade.

Every public operation normalizes its raw arguments (page numbers, sort
options, keyword and category filters), delegates to the repository, and
fills in ``formatted_price`` on whatever it hands back.
"""

from __future__ import annotations

import random

import structlog

from catalog.domain.exceptions import ProductNotFoundError, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, Uniqueness
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service import category_path, paginator, query_specification
from catalog.domain.service.alias import generate_alias, normalize_alias
from catalog.domain.service.query_specification import (
    ListInCategory,
    SearchAll,
    SearchInCategory,
)

logger = structlog.get_logger()

FEATURED_CATEGORY_ID = 4
CURRENCY_SYMBOL = "₪"
RANDOM_SERIES_LENGTH = 1


class ProductCatalogService:

    def __init__(
        self,
        product_repo: ProductRepository,
        featured_category_id: int = FEATURED_CATEGORY_ID,
        currency_symbol: str = CURRENCY_SYMBOL,
        rng: random.Random | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._featured_category_id = featured_category_id
        self._currency_symbol = currency_symbol
        self._rng = rng or random.Random()

    # --- Listings -------------------------------------------------------------

    def list_by_category(self, page_num: int, category_id: int) -> Page[Product]:
        """Storefront listing of a category, including its subcategories."""
        token = category_path.token_for(category_id)
        page_request = paginator.build_page(page_num, paginator.PRODUCTS_PER_PAGE)
        page = self._product_repo.list_by_category(category_id, token, page_request)
        return self._decorate_page(page)

    def list_by_page(
        self,
        page_num: int,
        sort_field: str | None,
        sort_dir: str | None,
        keyword: str | None = None,
        category_id: int | None = None,
    ) -> Page[Product]:
        """Admin listing with optional keyword and category filters."""
        page_request = paginator.build_page(
            page_num, paginator.PRODUCTS_PER_ADMIN_PAGE, sort_field, sort_dir
        )
        spec = query_specification.build(keyword, category_id)

        if isinstance(spec, SearchInCategory):
            page = self._product_repo.search_in_category(
                spec.category_id, spec.category_token, spec.keyword, page_request
            )
        elif isinstance(spec, SearchAll):
            page = self._product_repo.find_by_keyword(spec.keyword, page_request)
        elif isinstance(spec, ListInCategory):
            page = self._product_repo.find_in_category(
                spec.category_id, spec.category_token, page_request
            )
        else:
            page = self._product_repo.find_page(page_request)

        return self._decorate_page(page)

    def search(self, keyword: str, page_num: int) -> Page[Product]:
        page_request = paginator.build_page(page_num, paginator.SEARCH_RESULTS_PAGE)
        page = self._product_repo.search(keyword, page_request)
        return self._decorate_page(page)

    def get_all_products(self) -> list[Product]:
        """Every product in the catalog.

        An empty catalog is an error, not an empty list: callers treat
        it as a broken store rather than "no matches".
        """
        products = self._product_repo.list_all()
        if not products:
            logger.warning("Catalog is empty")
            raise ProductNotFoundError("Couldn't find any product in the catalog")
        return [self._decorate(p) for p in products]

    def get_random_amount_of_products(self) -> list[Product]:
        """One product picked uniformly at random from the featured category.

        Only products filed directly under the featured category qualify;
        products of its subcategories do not.
        """
        category_id = self._featured_category_id
        products = self._product_repo.list_by_category_id(category_id)
        if not products:
            logger.warning("Featured category is empty", category_id=category_id)
            raise ProductNotFoundError(
                f"Couldn't find any product in featured category {category_id}",
                key=category_id,
            )
        products = list(products)
        self._rng.shuffle(products)
        return [self._decorate(p) for p in products[:RANDOM_SERIES_LENGTH]]

    # --- Lookups --------------------------------------------------------------

    def get_product(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(
                f"Couldn't find any product with id {product_id}", key=product_id
            )
        return self._decorate(product)

    def get_product_by_alias(self, alias: str) -> Product:
        product = self._product_repo.get_by_alias(alias)
        if product is None:
            raise ProductNotFoundError(
                f"Couldn't find any product with alias {alias}", key=alias
            )
        return self._decorate(product)

    def check_unique(self, product_id: int | None, title: str) -> Uniqueness:
        """Whether ``title`` is free for a new product or for ``product_id``.

        When creating (no id, or id 0) any product with the title is a
        duplicate. When editing, only a product with a different id is.
        """
        creating_new = product_id is None or product_id == 0
        existing = self._product_repo.get_by_title(title)

        if existing is None:
            return Uniqueness.UNIQUE
        if creating_new or existing.id != product_id:
            return Uniqueness.DUPLICATE
        return Uniqueness.UNIQUE

    # --- Mutations ------------------------------------------------------------

    def save_product(self, product: Product) -> None:
        """Normalize the alias, refresh the display price, and persist."""
        if not product.title or not product.title.strip():
            raise ValidationError("Product title is required")

        # Parsing rejects anything but "-1-4-12-" shaped paths.
        category_path.decode_path(product.category_path)

        if not product.alias or not product.alias.strip():
            product.alias = generate_alias(product.title)
        else:
            product.alias = normalize_alias(product.alias)

        self._decorate(product)
        self._product_repo.save(product)
        logger.info("Product saved", product_id=product.id, alias=product.alias)

    def delete_product(self, product_id: int) -> None:
        # Not atomic: a concurrent delete between the count and the delete
        # surfaces as the repository's own ProductNotFoundError.
        if not self._product_repo.count_by_id(product_id):
            logger.warning("Delete of unknown product", product_id=product_id)
            raise ProductNotFoundError(
                f"Couldn't find any product with ID {product_id}", key=product_id
            )
        self._product_repo.delete_by_id(product_id)
        logger.info("Product deleted", product_id=product_id)

    # --- Presentation ---------------------------------------------------------

    def format_price(self, price: int) -> str:
        return f"{price} {self._currency_symbol}"

    def _decorate(self, product: Product) -> Product:
        product.formatted_price = self.format_price(product.price)
        return product

    def _decorate_page(self, page: Page[Product]) -> Page[Product]:
        for product in page:
            self._decorate(product)
        return page

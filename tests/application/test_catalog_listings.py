"""Integration tests for the catalog service's read operations.

Uses the in-memory fake repository — no file I/O.
"""

import random

import pytest

from catalog.application.catalog_service import ProductCatalogService
from catalog.domain.exceptions import InvalidPageError, ProductNotFoundError, ValidationError
from catalog.domain.model.product import Product
from tests.fakes import FakeProductRepository


def _catalog() -> list[Product]:
    return [
        Product(id=1, title="Red Shoes", alias="red_shoes", price=300, category_path="-1-2-"),
        Product(id=2, title="Blue Shoes", alias="blue_shoes", price=250, category_path="-1-12-"),
        Product(id=3, title="Leather Bag", alias="leather_bag", price=900, category_path="-4-"),
        Product(id=4, title="Canvas Bag", alias="canvas_bag", price=400, category_path="-4-12-"),
        Product(id=5, title="Red Scarf", alias="red_scarf", price=120, category_id=4),
    ]


def _setup(
    products: list[Product] | None = None,
    **kwargs,
) -> tuple[ProductCatalogService, FakeProductRepository]:
    repo = FakeProductRepository(_catalog() if products is None else products)
    return ProductCatalogService(repo, **kwargs), repo


def _ids(page) -> list[int]:
    return [p.id for p in page]


class TestListByCategory:

    def test_end_to_end_single_category(self):
        service, _ = _setup([
            Product(id=1, title="A", price=100, category_path="-2-"),
            Product(id=2, title="B", price=200, category_path="-3-"),
        ])
        page = service.list_by_category(page_num=1, category_id=2)
        assert _ids(page) == [1]
        assert page.items[0].formatted_price == "100 ₪"

    def test_includes_descendants_by_path(self):
        service, _ = _setup()
        assert _ids(service.list_by_category(1, 1)) == [1, 2]

    def test_no_partial_id_collision(self):
        service, _ = _setup()
        assert _ids(service.list_by_category(1, 12)) == [2, 4]
        assert 2 not in _ids(service.list_by_category(1, 2))

    def test_direct_category_matches(self):
        service, _ = _setup()
        assert _ids(service.list_by_category(1, 4)) == [3, 4, 5]

    def test_uses_storefront_page_size(self):
        products = [
            Product(id=i, title=f"P{i}", price=i, category_path="-7-") for i in range(1, 26)
        ]
        service, _ = _setup(products)
        page = service.list_by_category(3, 7)
        assert page.size == 10
        assert _ids(page) == [21, 22, 23, 24, 25]
        assert page.total == 25
        assert page.total_pages == 3

    def test_category_is_required(self):
        service, _ = _setup()
        with pytest.raises(ValidationError):
            service.list_by_category(1, 0)

    def test_page_below_one_rejected(self):
        service, _ = _setup()
        with pytest.raises(InvalidPageError):
            service.list_by_category(0, 1)


class TestListByPage:

    def test_unfiltered_uses_admin_page_size(self):
        service, _ = _setup()
        page = service.list_by_page(1, "id", "asc")
        assert page.size == 5
        assert _ids(page) == [1, 2, 3, 4, 5]

    def test_sort_descending_by_default(self):
        service, _ = _setup()
        page = service.list_by_page(1, "price", None)
        assert [p.price for p in page] == [900, 400, 300, 250, 120]

    def test_sort_ascending(self):
        service, _ = _setup()
        page = service.list_by_page(1, "title", "asc")
        assert [p.title for p in page][:2] == ["Blue Shoes", "Canvas Bag"]

    def test_keyword_only(self):
        service, _ = _setup()
        assert _ids(service.list_by_page(1, "id", "asc", keyword="red")) == [1, 5]

    def test_category_only(self):
        service, _ = _setup()
        assert _ids(service.list_by_page(1, "id", "asc", category_id=12)) == [2, 4]

    def test_keyword_within_category(self):
        service, _ = _setup()
        page = service.list_by_page(1, "id", "asc", keyword="bag", category_id=12)
        assert _ids(page) == [4]

    def test_zero_category_is_no_filter(self):
        service, _ = _setup()
        page = service.list_by_page(1, "id", "asc", keyword="shoes", category_id=0)
        assert _ids(page) == [1, 2]

    def test_second_page(self):
        products = [Product(id=i, title=f"P{i}", price=i) for i in range(1, 8)]
        service, _ = _setup(products)
        page = service.list_by_page(2, "id", "asc")
        assert _ids(page) == [6, 7]
        assert page.has_previous and not page.has_next

    def test_prices_are_formatted(self):
        service, _ = _setup()
        page = service.list_by_page(1, "id", "asc")
        assert all(p.formatted_price == f"{p.price} ₪" for p in page)


class TestSearch:

    def test_matches_title(self):
        service, _ = _setup()
        page = service.search("bag", 1)
        assert _ids(page) == [3, 4]
        assert page.size == 10
        assert page.items[0].formatted_price == "900 ₪"

    def test_no_matches_is_empty_page(self):
        service, _ = _setup()
        page = service.search("umbrella", 1)
        assert page.items == []
        assert page.total == 0


class TestGetAllProducts:

    def test_returns_every_product_formatted(self):
        service, _ = _setup()
        products = service.get_all_products()
        assert len(products) == 5
        assert products[0].formatted_price == "300 ₪"

    def test_empty_catalog_is_an_error(self):
        service, _ = _setup([])
        with pytest.raises(ProductNotFoundError, match="any product"):
            service.get_all_products()


class TestRandomFeaturedProduct:

    @staticmethod
    def _featured_catalog() -> list[Product]:
        return [
            Product(id=1, title="Lamp", price=100, category_id=4, category_path="-1-"),
            Product(id=2, title="Vase", price=200, category_id=4, category_path="-1-"),
            Product(id=3, title="Rug", price=300, category_id=4, category_path="-1-"),
            Product(id=4, title="Desk Lamp", price=150, category_id=12, category_path="-1-4-"),
            Product(id=5, title="Chair", price=400, category_id=2, category_path="-1-"),
        ]

    def test_returns_exactly_one_featured_product(self):
        service, _ = _setup(self._featured_catalog())
        for _ in range(20):
            products = service.get_random_amount_of_products()
            assert len(products) == 1
            assert products[0].id in {1, 2, 3}
            assert products[0].formatted_price is not None

    def test_shuffle_is_not_degenerate(self):
        service, _ = _setup(self._featured_catalog(), rng=random.Random(1234))
        seen = {service.get_random_amount_of_products()[0].id for _ in range(200)}
        assert len(seen) > 1

    def test_subcategory_products_are_never_picked(self):
        service, _ = _setup(self._featured_catalog(), rng=random.Random(7))
        seen = {service.get_random_amount_of_products()[0].id for _ in range(200)}
        assert 4 not in seen

    def test_ancestor_path_alone_does_not_qualify(self):
        service, _ = _setup([
            Product(id=1, title="A", price=1, category_id=12, category_path="-4-"),
        ])
        with pytest.raises(ProductNotFoundError) as exc_info:
            service.get_random_amount_of_products()
        assert exc_info.value.key == 4

    def test_empty_featured_category_is_an_error(self):
        service, _ = _setup([Product(id=1, title="A", price=1, category_id=2)])
        with pytest.raises(ProductNotFoundError) as exc_info:
            service.get_random_amount_of_products()
        assert exc_info.value.key == 4

    def test_featured_category_is_configurable(self):
        service, _ = _setup(self._featured_catalog(), featured_category_id=2)
        assert service.get_random_amount_of_products()[0].id == 5

    def test_does_not_match_partial_ids(self):
        service, _ = _setup([Product(id=1, title="A", price=1, category_id=14)])
        with pytest.raises(ProductNotFoundError):
            service.get_random_amount_of_products()


class TestGetProduct:

    def test_by_id(self):
        service, _ = _setup()
        product = service.get_product(3)
        assert product.title == "Leather Bag"
        assert product.formatted_price == "900 ₪"

    def test_unknown_id(self):
        service, _ = _setup()
        with pytest.raises(ProductNotFoundError, match="id 99") as exc_info:
            service.get_product(99)
        assert exc_info.value.key == 99

    def test_by_alias(self):
        service, _ = _setup()
        assert service.get_product_by_alias("canvas_bag").id == 4

    def test_unknown_alias(self):
        service, _ = _setup()
        with pytest.raises(ProductNotFoundError, match="alias nope") as exc_info:
            service.get_product_by_alias("nope")
        assert exc_info.value.key == "nope"


class TestFormatPrice:

    def test_default_symbol(self):
        service, _ = _setup()
        assert service.format_price(100) == "100 ₪"

    def test_custom_symbol(self):
        service, _ = _setup(currency_symbol="$")
        assert service.format_price(0) == "0 $"

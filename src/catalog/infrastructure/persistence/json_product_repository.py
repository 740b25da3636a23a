"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.product_queries import InMemoryProductQueries


class JsonProductRepository(InMemoryProductQueries, ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository mutations ------------------------------------------

    def save(self, product: Product) -> None:
        products = self._load()
        product_id = product.id
        if not product_id:
            product_id = max(products, default=0) + 1
            product.id = product_id
        products[product_id] = product
        self._persist(products)

    def delete_by_id(self, product_id: int) -> None:
        products = self._load()
        if product_id not in products:
            raise ProductNotFoundError(
                f"Couldn't find any product with ID {product_id}", key=product_id
            )
        del products[product_id]
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _snapshot(self) -> list[Product]:
        return list(self._load().values())

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                title=item["title"],
                price=item["price"],
                alias=item.get("alias", ""),
                category_path=item.get("category_path", ""),
                category_id=item.get("category_id"),
            )
            for item in raw
        }

    def _persist(self, products: dict[int, Product]) -> None:
        # formatted_price is derived on read and never stored
        raw = [
            {
                "id": p.id,
                "title": p.title,
                "alias": p.alias,
                "price": p.price,
                "category_id": p.category_id,
                "category_path": p.category_path,
            }
            for p in sorted(products.values(), key=lambda p: p.id or 0)
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

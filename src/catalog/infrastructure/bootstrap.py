"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.catalog_service import ProductCatalogService
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(settings.data_dir / "products.json")


def catalog_service(settings: Settings | None = None) -> ProductCatalogService:
    settings = settings or get_settings()
    return ProductCatalogService(
        product_repo=product_repository(settings),
        featured_category_id=settings.featured_category_id,
        currency_symbol=settings.currency_symbol,
    )

"""Product entity.

A product belongs to one direct category and, through its category path,
to every ancestor of that category.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Product:
    """A product in the catalog.

    ``formatted_price`` is a presentation artifact filled in by the
    catalog service on every read. Repositories never persist it.
    """

    id: int | None
    title: str
    price: int
    alias: str = ""
    category_path: str = ""
    category_id: int | None = None
    formatted_price: str | None = field(default=None, compare=False)

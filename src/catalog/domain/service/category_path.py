"""Category membership tokens.

A product's ``category_path`` stores every category it belongs to as
dash-delimited integers, e.g. ``-1-4-12-`` for categories 1, 4 and 12.
Membership is a substring test against ``-<id>-``: the dash on both
sides keeps category 1 from matching ``-12-``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product

DELIMITER = "-"

_PATH_RE = re.compile(r"^(?:-(?:[1-9][0-9]*))+-$")


def _check_category_id(category_id: int) -> None:
    if isinstance(category_id, bool) or not isinstance(category_id, int):
        raise ValidationError(
            f"Category id must be an integer, got {type(category_id).__name__}"
        )
    if category_id <= 0:
        raise ValidationError(f"Category id must be positive, got {category_id}")


def is_category_filter(category_id: int | None) -> bool:
    """``None`` and ids <= 0 mean "do not filter by category"."""
    return category_id is not None and category_id > 0


def token_for(category_id: int) -> str:
    _check_category_id(category_id)
    return f"{DELIMITER}{category_id}{DELIMITER}"


def matches(category_path: str | None, category_id: int) -> bool:
    return token_for(category_id) in (category_path or "")


def belongs_to(product: Product, category_id: int) -> bool:
    """True when the product sits directly in the category or below it."""
    return product.category_id == category_id or matches(
        product.category_path, category_id
    )


def encode_path(category_ids: Iterable[int]) -> str:
    ids = list(category_ids)
    if not ids:
        return ""
    for category_id in ids:
        _check_category_id(category_id)
    return DELIMITER + DELIMITER.join(str(i) for i in ids) + DELIMITER


def decode_path(category_path: str | None) -> list[int]:
    if not category_path:
        return []
    if not _PATH_RE.match(category_path):
        raise ValidationError(f"Malformed category path: {category_path!r}")
    return [int(part) for part in category_path.strip(DELIMITER).split(DELIMITER)]

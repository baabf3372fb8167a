"""Static menu catalog built from the editable constants."""

from __future__ import annotations

from typing import Mapping

from lunchtray.constant import MENU_ITEM_DATA
from lunchtray.errors import CatalogMiss
from lunchtray.models import Category, MenuItem


def _build_menu_item(raw: Mapping[str, object]) -> MenuItem:
    price = float(raw["price"])  # type: ignore[arg-type]
    if price < 0:
        raise ValueError(f"negative price for {raw['name']!r}: {price}")
    return MenuItem(
        name=str(raw["name"]),
        description=str(raw.get("description", "")),
        price=price,
        category=Category(str(raw["category"])),
    )


MENU_ITEMS: dict[str, MenuItem] = {item_id: _build_menu_item(raw) for item_id, raw in MENU_ITEM_DATA.items()}


def lookup_menu_item(item_id: str, catalog: Mapping[str, MenuItem] | None = None) -> MenuItem:
    """Resolve an item id, raising CatalogMiss when it is unknown."""
    source = MENU_ITEMS if catalog is None else catalog
    try:
        return source[item_id]
    except KeyError:
        raise CatalogMiss(item_id) from None


def menu_for_category(
    category: Category, catalog: Mapping[str, MenuItem] | None = None
) -> list[tuple[str, MenuItem]]:
    """List (item id, item) pairs for one category in catalog order."""
    source = MENU_ITEMS if catalog is None else catalog
    return [(item_id, item) for item_id, item in source.items() if item.category == category]

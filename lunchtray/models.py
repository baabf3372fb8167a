"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """One of the three order slots."""

    ENTREE = "entree"
    SIDE = "side"
    ACCOMPANIMENT = "accompaniment"

    @property
    def label(self) -> str:
        return self.value.title()


@dataclass(frozen=True)
class MenuItem:
    """A catalog entry. Owned by the catalog, never mutated."""

    name: str
    price: float
    description: str = ""
    category: Category | None = None


@dataclass(frozen=True)
class CategorySelection:
    """The item chosen for one category and the price it contributes to subtotal."""

    item: MenuItem | None = None
    counted_price: float = 0.0

    @property
    def is_selected(self) -> bool:
        return self.item is not None


@dataclass(frozen=True)
class OrderSnapshot:
    """Read-only view of an order handed to observers."""

    entree: MenuItem | None
    side: MenuItem | None
    accompaniment: MenuItem | None
    subtotal: float
    tax: float
    total: float

    def selection(self, category: Category) -> MenuItem | None:
        return getattr(self, category.value)

    @property
    def is_empty(self) -> bool:
        return self.entree is None and self.side is None and self.accompaniment is None

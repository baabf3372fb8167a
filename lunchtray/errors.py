"""Errors raised by the menu catalog and the order state."""

from __future__ import annotations


class CatalogMiss(LookupError):
    """Raised when an item id is not present in the menu catalog."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"unknown menu item: {item_id!r}")
        self.item_id = item_id


class InconsistentTotals(AssertionError):
    """Raised when tax or total no longer derive from subtotal. Always a bug."""

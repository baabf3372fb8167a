"""In-progress order selections and the totals derived from them."""

from __future__ import annotations

import logging
import math
import sys
from typing import Callable, Mapping

from lunchtray.config import TAX_RATE, TOTALS_EPSILON
from lunchtray.data import MENU_ITEMS, lookup_menu_item
from lunchtray.errors import CatalogMiss, InconsistentTotals
from lunchtray.models import Category, CategorySelection, MenuItem, OrderSnapshot

logger = logging.getLogger(__name__)

OrderObserver = Callable[[OrderSnapshot], None]


class OrderState:
    """Tracks one order being edited by one actor.

    Each category keeps the price it currently contributes to ``subtotal``.
    Swapping a selection subtracts that price before adding the new one, so
    the other categories' contributions are never touched. ``tax`` and
    ``total`` are only ever written by :meth:`recompute_tax_and_total`.

    Observers registered with :meth:`subscribe` receive an
    :class:`OrderSnapshot` once every mutating call has settled.
    """

    def __init__(self, catalog: Mapping[str, MenuItem] | None = None, tax_rate: float = TAX_RATE) -> None:
        self.catalog: Mapping[str, MenuItem] = MENU_ITEMS if catalog is None else catalog
        self.tax_rate = tax_rate
        self._selections: dict[Category, CategorySelection] = {}
        self._observers: list[OrderObserver] = []
        self.subtotal = 0.0
        self.tax = 0.0
        self.total = 0.0
        self._rounding_scale = 0.0
        self._clear()

    @property
    def entree(self) -> MenuItem | None:
        return self._selections[Category.ENTREE].item

    @property
    def side(self) -> MenuItem | None:
        return self._selections[Category.SIDE].item

    @property
    def accompaniment(self) -> MenuItem | None:
        return self._selections[Category.ACCOMPANIMENT].item

    def selection(self, category: Category) -> MenuItem | None:
        return self._selections[category].item

    def previous_price(self, category: Category) -> float:
        """Price this category currently contributes to subtotal (0.0 when absent)."""
        return self._selections[category].counted_price

    def set_entree(self, item_id: str) -> MenuItem | None:
        return self.set_category(Category.ENTREE, item_id)

    def set_side(self, item_id: str) -> MenuItem | None:
        return self.set_category(Category.SIDE, item_id)

    def set_accompaniment(self, item_id: str) -> MenuItem | None:
        return self.set_category(Category.ACCOMPANIMENT, item_id)

    def set_category(self, category: Category, item_id: str) -> MenuItem | None:
        """Replace the selection for ``category`` with the item named ``item_id``.

        An unknown id leaves the category absent and adds no price. The miss is
        logged and ``None`` is returned so the caller can re-prompt.
        """
        # Shadow prices start at 0.0, so subtracting with no prior selection is a no-op.
        self.subtotal -= self._selections[category].counted_price
        self._track_rounding()

        try:
            item = lookup_menu_item(item_id, self.catalog)
        except CatalogMiss as exc:
            logger.warning("%s lookup failed: %s", category.value, exc)
            self._selections[category] = CategorySelection()
            self.recompute_tax_and_total()
            self._settle()
            return None

        self._selections[category] = CategorySelection(item=item, counted_price=item.price)
        self.add_to_subtotal(item.price)
        logger.info("%s value: %s", category.value, item)
        self._settle()
        return item

    def add_to_subtotal(self, price: float) -> None:
        """Add ``price`` to subtotal and bring tax and total in line with it."""
        self.subtotal = (self.subtotal or 0.0) + price
        self._track_rounding()
        self.recompute_tax_and_total()
        logger.info("subtotal: %s", self.subtotal)

    def recompute_tax_and_total(self) -> None:
        self.tax = self.tax_rate * self.subtotal
        self.total = self.subtotal + self.tax
        logger.info("tax: %s", self.tax)
        logger.info("total: %s", self.total)

    def reset(self) -> None:
        """Return to the creation-time state. Called on submit and on cancel."""
        self._clear()
        logger.info("order reset")
        self._settle()

    def snapshot(self) -> OrderSnapshot:
        return OrderSnapshot(
            entree=self.entree,
            side=self.side,
            accompaniment=self.accompaniment,
            subtotal=self.subtotal,
            tax=self.tax,
            total=self.total,
        )

    def subscribe(self, observer: OrderObserver) -> Callable[[], None]:
        """Register ``observer`` and return a function that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def check_totals(self) -> None:
        """Raise InconsistentTotals if tax or total drifted from subtotal."""
        expected_subtotal = math.fsum(selection.counted_price for selection in self._selections.values())
        # Each add or subtract rounds by at most half an ulp of its result.
        subtotal_tol = TOTALS_EPSILON + sys.float_info.epsilon * self._rounding_scale
        if not math.isclose(self.subtotal, expected_subtotal, abs_tol=subtotal_tol):
            raise InconsistentTotals(f"subtotal {self.subtotal} != selected prices {expected_subtotal}")
        if not math.isclose(self.tax, self.tax_rate * self.subtotal, rel_tol=1e-12, abs_tol=TOTALS_EPSILON):
            raise InconsistentTotals(f"tax {self.tax} != {self.tax_rate} * {self.subtotal}")
        if not math.isclose(self.total, self.subtotal + self.tax, rel_tol=1e-12, abs_tol=TOTALS_EPSILON):
            raise InconsistentTotals(f"total {self.total} != {self.subtotal} + {self.tax}")

    def _clear(self) -> None:
        self._selections = {category: CategorySelection() for category in Category}
        self.subtotal = 0.0
        self.tax = 0.0
        self.total = 0.0
        self._rounding_scale = 0.0

    def _track_rounding(self) -> None:
        self._rounding_scale += abs(self.subtotal)

    def _settle(self) -> None:
        self.check_totals()
        snapshot = self.snapshot()
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception:
                logger.exception("order observer %r failed", observer)

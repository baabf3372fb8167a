"""Main Textual app class."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from lunchtray.checkout_modal import BACK, CANCEL, SUBMIT, CheckoutModal
from lunchtray.data import menu_for_category
from lunchtray.models import Category, MenuItem, OrderSnapshot
from lunchtray.order_state import OrderState
from lunchtray.rendering import format_category_badge, format_currency, format_menu_item_label, format_order_summary

logger = logging.getLogger(__name__)

# Index 0 is the start screen; the rest are the menu steps in order.
ORDER_FLOW: tuple[Category | None, ...] = (None, Category.ENTREE, Category.SIDE, Category.ACCOMPANIMENT)


class LunchTrayApp(App):
    """A Textual app for picking an entree, side and accompaniment."""

    TITLE = "Lunch Tray"
    SUB_TITLE = "Entree / Side / Accompaniment"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #order-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-top: 1;
        height: 4;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #order-summary {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    step_index = reactive(0)
    cursor_index = reactive(0)

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous item"),
        ("down", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous item"),
        ("j", "move_cursor(1)", "Next item"),
        ("enter", "select_current", "Start / Select"),
        ("space", "select_current", "Select"),
        ("n", "next_step", "Next"),
        ("b", "previous_step", "Back"),
        Binding("ctrl+c", "cancel_order", "Cancel order", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, order: OrderState | None = None) -> None:
        super().__init__()
        self.order = order if order is not None else OrderState()
        self.system_status = ""
        self._unsubscribe = self.order.subscribe(self._on_order_changed)

    @property
    def category(self) -> Category | None:
        return ORDER_FLOW[self.step_index]

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(classes="pane-title", id="menu-title")
                yield Static(id="menu-list")
                yield Static(id="status-bar")
            with Vertical(id="order-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static(id="order-summary")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_unmount(self) -> None:
        self._unsubscribe()

    def action_move_cursor(self, delta: int) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        items = self._menu_items()
        if not items:
            return
        self.cursor_index = (self.cursor_index + delta) % len(items)
        self._refresh_menu()

    def action_select_current(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        category = self.category
        if category is None:
            self._go_to_step(1)
            return

        items = self._menu_items()
        if not items:
            return
        item_id, _ = items[self.cursor_index]
        self.order.set_category(category, item_id)
        self.system_status = ""
        self._refresh_menu()

    def action_next_step(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        category = self.category
        if category is None:
            self._go_to_step(1)
            return
        if self.order.selection(category) is None:
            self.system_status = f"Choose your {category.value} first"
            self._refresh_status()
            return

        if self.step_index + 1 < len(ORDER_FLOW):
            self._go_to_step(self.step_index + 1)
            return
        self.push_screen(CheckoutModal(self.order.snapshot()), self._on_checkout_result)

    def action_previous_step(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        if self.step_index <= 1:
            return
        self._go_to_step(self.step_index - 1)

    def action_cancel_order(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            self.screen.action_cancel_order()
            return
        self._finish_order("Order cancelled")

    def _on_checkout_result(self, result: str | None) -> None:
        logger.info("checkout result=%s", result)
        if result == SUBMIT:
            self.notify("Order submitted")
            self._finish_order("Order submitted")
        elif result == CANCEL:
            self._finish_order("Order cancelled")
        elif result == BACK:
            self._refresh_all()

    def _finish_order(self, status: str) -> None:
        self.order.reset()
        self.system_status = status
        self._go_to_step(0)

    def _go_to_step(self, index: int) -> None:
        self.step_index = index
        self.cursor_index = self._selected_row(self.category)
        self._refresh_all()

    def _selected_row(self, category: Category | None) -> int:
        if category is None:
            return 0
        chosen = self.order.selection(category)
        for idx, (_, item) in enumerate(self._menu_items()):
            if item == chosen:
                return idx
        return 0

    def _menu_items(self) -> list[tuple[str, MenuItem]]:
        category = self.category
        if category is None:
            return []
        return menu_for_category(category, self.order.catalog)

    def _on_order_changed(self, snapshot: OrderSnapshot) -> None:
        self._refresh_summary(snapshot)

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_summary(self.order.snapshot())

    def _refresh_menu(self) -> None:
        title = self._main_widget("#menu-title")
        menu_widget = self._main_widget("#menu-list")
        if title is None or menu_widget is None:
            return

        category = self.category
        if category is None:
            title.update("Lunch Tray")
            menu_widget.update("Press Enter to start an order.")
            self._refresh_status()
            return

        title.update(format_category_badge(category))
        chosen = self.order.selection(category)
        lines = Text()
        for idx, (_, item) in enumerate(self._menu_items()):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            lines.append(pointer)
            lines.append_text(format_menu_item_label(item, selected=item == chosen))
        menu_widget.update(lines)
        self._refresh_status()

    def _refresh_summary(self, snapshot: OrderSnapshot) -> None:
        summary_widget = self._main_widget("#order-summary")
        if summary_widget is None:
            return
        summary_widget.update(format_order_summary(snapshot))

    def _refresh_status(self) -> None:
        bar = self._main_widget("#status-bar")
        if bar is None:
            return

        status = self.system_status or "Ready"
        if self.category is None:
            bar.update(f"Enter start. Ctrl+Q quit.\n{status}")
            return
        bar.update(
            f"Subtotal {format_currency(self.order.subtotal)}. "
            "J/K/↑/↓ move, Enter select, N next, B back, Ctrl+C cancel.\n"
            f"{status}"
        )

    def _main_widget(self, selector: str) -> Static | None:
        # The checkout modal sits on top of the main screen; always query the base screen.
        if not self.screen_stack:
            return None
        try:
            return self.screen_stack[0].query_one(selector, Static)
        except NoMatches:
            return None

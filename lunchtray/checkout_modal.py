"""Checkout modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from lunchtray.models import OrderSnapshot
from lunchtray.rendering import format_order_summary

SUBMIT = "submit"
BACK = "back"
CANCEL = "cancel"


class CheckoutModal(ModalScreen[str]):
    """Show the order summary and ask to submit, go back or cancel."""

    BINDINGS = [
        ("enter", "submit", "Submit"),
        ("escape", "back", "Back"),
        ("b", "back", "Back"),
    ]

    CSS = """
    CheckoutModal {
        align: center middle;
        background: $background 60%;
    }

    #checkout-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #checkout-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #checkout-body {
        color: white;
        margin-bottom: 1;
    }

    #checkout-help {
        color: #dddddd;
    }
    """

    def __init__(self, snapshot: OrderSnapshot) -> None:
        super().__init__()
        self.snapshot = snapshot

    def compose(self) -> ComposeResult:
        with Container(id="checkout-dialog"):
            yield Static("Order Summary", id="checkout-title")
            yield Static(id="checkout-body")
            yield Static("Enter submit. Esc/b back. Ctrl+C cancel order.", id="checkout-help")

    def on_mount(self) -> None:
        self.query_one("#checkout-body", Static).update(format_order_summary(self.snapshot))

    def action_submit(self) -> None:
        self.dismiss(SUBMIT)

    def action_back(self) -> None:
        self.dismiss(BACK)

    def action_cancel_order(self) -> None:
        self.dismiss(CANCEL)

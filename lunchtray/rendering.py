"""Currency formatting and rich rendering helpers."""

from __future__ import annotations

from rich.text import Text

from lunchtray.config import CURRENCY_SYMBOL
from lunchtray.models import Category, MenuItem, OrderSnapshot


def format_currency(amount: float) -> str:
    """Format an amount as a currency string, e.g. ``$1,234.50``."""
    # round() can leave -0.0 behind after float subtraction.
    amount = round(amount, 2) or 0.0
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def badge_style(category: Category) -> str:
    """Return a consistent badge style for category tags."""
    if category is Category.ENTREE:
        return "bold #ffffff on #b23a48"
    if category is Category.SIDE:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_category_badge(category: Category) -> Text:
    text = Text()
    text.append(f" {category.label} ", style=badge_style(category))
    return text


def format_menu_item_label(item: MenuItem, selected: bool = False) -> Text:
    """Render one menu row: radio mark, name, price and a dim description line."""
    text = Text()
    text.append("(•) " if selected else "( ) ", style="bold" if selected else "")
    text.append(item.name, style="bold" if selected else "")
    text.append(f"  {format_currency(item.price)}")
    if item.description:
        text.append(f"\n      {item.description}", style="dim")
    return text


def format_order_summary(snapshot: OrderSnapshot) -> Text:
    """Render selections with their prices followed by subtotal, tax and total."""
    text = Text()
    for category in Category:
        item = snapshot.selection(category)
        text.append_text(format_category_badge(category))
        if item is None:
            text.append("  (not chosen)\n", style="dim")
        else:
            text.append(f"  {item.name}  {format_currency(item.price)}\n")
    text.append("\n")
    text.append(f"Subtotal: {format_currency(snapshot.subtotal)}\n")
    text.append(f"Tax: {format_currency(snapshot.tax)}\n")
    text.append(f"Total: {format_currency(snapshot.total)}", style="bold")
    return text

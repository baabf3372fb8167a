"""
Headless tests for the ordering flow.
"""

from __future__ import annotations

import pytest

from lunchtray.checkout_modal import CheckoutModal
from lunchtray.lunch_tray_app import LunchTrayApp
from lunchtray.models import Category


async def pick_full_order(pilot) -> None:
    await pilot.press("enter")  # start
    await pilot.press("enter")  # first entree
    await pilot.press("n")
    await pilot.press("j", "enter")  # second side
    await pilot.press("n")
    await pilot.press("enter")  # first accompaniment
    await pilot.pause()


async def test_start_then_pick_entree():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        assert app.category is None
        await pilot.press("enter")
        assert app.category is Category.ENTREE

        await pilot.press("down", "down", "enter")
        await pilot.pause()
        assert app.order.entree.name == "Mushroom Pasta"
        assert app.order.subtotal == pytest.approx(5.50)


async def test_next_requires_a_selection():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        await pilot.press("enter", "n")
        await pilot.pause()
        assert app.category is Category.ENTREE
        assert app.system_status == "Choose your entree first"


async def test_back_keeps_selection_and_swaps_price():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        await pilot.press("enter", "enter", "n", "enter", "b")
        await pilot.pause()
        assert app.category is Category.ENTREE
        assert app.order.subtotal == pytest.approx(7.00 + 2.50)

        await pilot.press("j", "enter")
        await pilot.pause()
        assert app.order.entree.name == "Three Bean Chili"
        assert app.order.subtotal == pytest.approx(4.00 + 2.50)


async def test_submit_resets_order():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        await pick_full_order(pilot)
        assert app.order.subtotal == pytest.approx(7.00 + 3.00 + 0.50)

        await pilot.press("n")
        await pilot.pause()
        assert isinstance(app.screen, CheckoutModal)

        await pilot.press("enter")
        await pilot.pause()
        assert not isinstance(app.screen, CheckoutModal)
        assert app.category is None
        assert app.order.snapshot().is_empty
        assert app.order.total == 0.0
        assert app.system_status == "Order submitted"


async def test_checkout_back_keeps_order():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        await pick_full_order(pilot)
        await pilot.press("n")
        await pilot.pause()
        await pilot.press("escape")
        await pilot.pause()
        assert app.category is Category.ACCOMPANIMENT
        assert app.order.accompaniment.name == "Lunch Roll"


async def test_cancel_resets_from_any_step():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        await pilot.press("enter", "enter", "n", "enter")
        await pilot.press("ctrl+c")
        await pilot.pause()
        assert app.category is None
        assert app.order.entree is None
        assert app.order.side is None
        assert app.order.subtotal == 0.0
        assert app.system_status == "Order cancelled"


async def test_cancel_from_checkout_resets_order():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        await pick_full_order(pilot)
        await pilot.press("n")
        await pilot.pause()
        await pilot.press("ctrl+c")
        await pilot.pause()
        assert not isinstance(app.screen, CheckoutModal)
        assert app.category is None
        assert app.order.snapshot().is_empty

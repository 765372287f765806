"""
Test cases for the Textual app, driven through a headless pilot.
"""

import asyncio

import pytest

from chefs_menu.add_item_modal import AddItemModal
from chefs_menu.confirm_remove_modal import ConfirmRemoveModal
from chefs_menu.menu_app import ChefsMenuApp
from chefs_menu.models import ALL, Course
from chefs_menu.store import MenuStore


@pytest.fixture
def make_app(tmp_path):
    def factory(store=None):
        if store is None:
            store = MenuStore.with_demo_menu()
        return ChefsMenuApp(store=store, debug_log_path=tmp_path / "debug.log")

    return factory


def run(app, scenario):
    async def runner():
        async with app.run_test() as pilot:
            await pilot.pause()
            await scenario(pilot)

    asyncio.run(runner())


class TestAddFlow:
    def test_adds_dish_from_form(self, make_app, tmp_path):
        app = make_app()

        async def scenario(pilot):
            await pilot.press("a")
            await pilot.pause()
            assert isinstance(app.screen, AddItemModal)

            await pilot.press("p", "i", "e", "down", "a", "p", "p", "l", "e", "down", "right", "right", "down", "2", "5")
            await pilot.press("enter")
            await pilot.pause()

            assert not isinstance(app.screen, AddItemModal)

        run(app, scenario)

        last = app.store.snapshot()[-1]
        assert len(app.store) == 4
        assert (last.dish_name, last.description, last.course, last.price) == ("pie", "apple", Course.MAIN, 25)
        assert "item_added" in (tmp_path / "debug.log").read_text()

    def test_invalid_form_keeps_modal_open(self, make_app):
        app = make_app()

        async def scenario(pilot):
            await pilot.press("a")
            await pilot.pause()
            await pilot.press("p", "i", "e", "enter")
            await pilot.pause()

            assert isinstance(app.screen, AddItemModal)
            assert app.screen.error == "Please fill all fields."

            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, AddItemModal)

        run(app, scenario)
        assert len(app.store) == 3

    def test_large_prices_keep_home_rendering(self, make_app):
        app = make_app()

        async def scenario(pilot):
            await pilot.press("a")
            await pilot.pause()
            await pilot.press("g", "o", "l", "d", "down", "l", "e", "a", "f", "down", "right", "down")
            await pilot.press("1", "e", "3", "0", "enter")
            await pilot.pause()

            assert isinstance(app.screen, AddItemModal)
            assert app.screen.error == "Price must be a valid positive number."

            await pilot.press("backspace", "backspace", "backspace", "backspace")
            await pilot.press("9", "9", "9", "9", "9", "9", "9", "9", "9", "enter")
            await pilot.pause()

            assert not isinstance(app.screen, AddItemModal)
            assert app.active_view == "home"
            assert app.query_one("#overview").display
            assert app.query_one("#menu-list").display

        run(app, scenario)

        assert len(app.store) == 4
        assert app.store.snapshot()[-1].price == 999999999

    def test_field_limit_shows_hint(self, make_app):
        app = make_app()

        async def scenario(pilot):
            await pilot.press("a")
            await pilot.pause()
            await pilot.press("down", "down", "down")
            await pilot.press(*["1"] * 13)
            await pilot.pause()

            modal = app.screen
            assert isinstance(modal, AddItemModal)
            assert modal.values["price"] == "1" * 12
            assert modal.error == "Price is limited to 12 characters."

            await pilot.press("backspace")
            await pilot.pause()
            assert modal.error == ""

        run(app, scenario)


class TestRemoveFlow:
    def test_confirmed_removal(self, make_app):
        app = make_app()

        async def scenario(pilot):
            await pilot.press("j", "j", "d")
            await pilot.pause()
            assert isinstance(app.screen, ConfirmRemoveModal)

            await pilot.press("y")
            await pilot.pause()

        run(app, scenario)
        assert [item.dish_name for item in app.store.snapshot()] == ["Tomato Soup", "Chocolate Brownie"]

    def test_cancelled_removal(self, make_app):
        app = make_app()

        async def scenario(pilot):
            await pilot.press("j", "d")
            await pilot.pause()
            await pilot.press("n")
            await pilot.pause()
            assert not isinstance(app.screen, ConfirmRemoveModal)

        run(app, scenario)
        assert len(app.store) == 3

    def test_remove_without_selection(self, make_app):
        app = make_app()

        async def scenario(pilot):
            await pilot.press("d")
            await pilot.pause()
            assert not isinstance(app.screen, ConfirmRemoveModal)

        run(app, scenario)
        assert len(app.store) == 3


class TestGuestFilter:
    def test_cycles_course(self, make_app):
        app = make_app()

        async def scenario(pilot):
            await pilot.press("g")
            await pilot.pause()
            assert app.active_view == "filter"
            assert app.course_filter == ALL
            assert len(app.visible_items()) == 3

            await pilot.press("c", "c")
            await pilot.pause()
            assert app.course_filter == Course.MAIN
            assert [item.dish_name for item in app.visible_items()] == ["Grilled Chicken"]

            await pilot.press("h")
            await pilot.pause()
            assert app.active_view == "home"
            assert len(app.visible_items()) == 3

        run(app, scenario)

    def test_removal_disabled_in_filter_view(self, make_app):
        app = make_app()

        async def scenario(pilot):
            await pilot.press("g", "j", "d")
            await pilot.pause()
            assert not isinstance(app.screen, ConfirmRemoveModal)

        run(app, scenario)
        assert len(app.store) == 3

    def test_empty_store_starts_clean(self, make_app):
        app = make_app(MenuStore())

        async def scenario(pilot):
            await pilot.press("g")
            await pilot.pause()
            assert app.visible_items() == ()

        run(app, scenario)

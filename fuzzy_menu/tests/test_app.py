"""Tests for the Textual application, driven through Pilot."""

import asyncio

from fuzzy_menu.app import Services
from fuzzy_menu.models.exceptions import InputReadError, NoInputError
from fuzzy_menu.screens.menu import MenuScreen, ResultItem
from fuzzy_menu.services.config import MenuConfig


async def wait_until(predicate, timeout: float = 3.0) -> None:
    """Poll until predicate holds; the app keeps running meanwhile."""
    for _ in range(int(timeout / 0.02)):
        if predicate():
            return
        await asyncio.sleep(0.02)
    raise AssertionError("condition not met in time")


def texts(screen: MenuScreen) -> list[str]:
    return [r.candidate.original for r in screen.results]


class TestServices:
    """Tests for the service container."""

    def test_create_wires_config(self, fake_loader):
        config = MenuConfig(include_index=True, strict_runs=True)
        services = Services.create(config, loader=fake_loader)
        assert services.loader is fake_loader
        assert services.writer.include_index
        assert services.engine.scoring.strict_runs


class TestStartup:
    """Tests for loading and the initial listing."""

    async def test_initial_listing_keeps_input_order(self, fake_loader, make_app):
        app = make_app(fake_loader, debounce_ms=0)
        async with app.run_test() as pilot:
            await wait_until(lambda: app.menu is not None and app.menu.loaded)
            await pilot.pause()
            assert texts(app.menu) == ["Firefox", "Safari", "Chrome"]
            assert len(app.menu.query(ResultItem)) == 3
        assert fake_loader.calls == 1

    async def test_no_input_exits_with_error(self, make_app, loader_factory):
        app = make_app(loader_factory(error=NoInputError("no input provided")))
        async with app.run_test():
            await wait_until(lambda: app.load_error is not None)
        assert isinstance(app.load_error, NoInputError)
        assert app.return_value is None

    async def test_read_error_exits_with_error(self, make_app, loader_factory):
        app = make_app(loader_factory(error=InputReadError("input is not valid utf-8")))
        async with app.run_test():
            await wait_until(lambda: app.load_error is not None)
        assert isinstance(app.load_error, InputReadError)


class TestSearching:
    """Tests for typing, navigation and selection."""

    async def test_typing_filters_and_enter_selects(self, fake_loader, make_app):
        app = make_app(fake_loader, debounce_ms=0)
        async with app.run_test() as pilot:
            await wait_until(lambda: app.menu is not None and app.menu.loaded)
            await pilot.press("f", "i", "r", "e")
            await pilot.pause()
            assert texts(app.menu) == ["Firefox"]
            await pilot.press("enter")
        assert app.return_value is not None
        assert app.return_value.candidate.original == "Firefox"

    async def test_no_match_shows_placeholder(self, fake_loader, make_app):
        app = make_app(fake_loader, debounce_ms=0)
        async with app.run_test() as pilot:
            await wait_until(lambda: app.menu is not None and app.menu.loaded)
            await pilot.press("x", "y", "z")
            await pilot.pause()
            assert app.menu.results == []
            # Enter with nothing to pick keeps the menu open
            await pilot.press("enter")
            await pilot.pause()
            assert app.screen is app.menu
            await pilot.press("escape")
        assert app.return_value is None

    async def test_arrow_keys_move_selection(self, fake_loader, make_app):
        app = make_app(fake_loader, debounce_ms=0)
        async with app.run_test() as pilot:
            await wait_until(lambda: app.menu is not None and app.menu.loaded)
            await pilot.press("down", "down", "down")
            await pilot.pause()
            # Clamped to the last row
            assert app.menu.selected_index == 2
            await pilot.press("up")
            await pilot.pause()
            assert app.menu.selected_index == 1
            await pilot.press("enter")
        assert app.return_value.candidate.original == "Safari"
        assert app.return_value.candidate.index == 1

    async def test_escape_cancels(self, fake_loader, make_app):
        app = make_app(fake_loader, debounce_ms=0)
        async with app.run_test() as pilot:
            await wait_until(lambda: app.menu is not None and app.menu.loaded)
            await pilot.press("escape")
        assert app.return_value is None

    async def test_max_results_limits_rows(self, make_app, loader_factory):
        loader = loader_factory([f"item {i}" for i in range(10)])
        app = make_app(loader, debounce_ms=0, max_results=4)
        async with app.run_test() as pilot:
            await wait_until(lambda: app.menu is not None and app.menu.loaded)
            await pilot.pause()
            assert len(app.menu.results) == 10
            assert len(app.menu.query(ResultItem)) == 4


class TestDebounce:
    """Searches wait for a quiet period after typing."""

    async def test_search_waits_for_quiet_period(self, fake_loader, make_app):
        app = make_app(fake_loader, debounce_ms=500)
        async with app.run_test() as pilot:
            await wait_until(lambda: app.menu is not None and app.menu.loaded)
            await pilot.press("f", "i", "r", "e")
            # Not settled yet - still the unfiltered list
            assert len(app.menu.results) == 3
            await wait_until(lambda: texts(app.menu) == ["Firefox"])

    async def test_enter_flushes_pending_query(self, fake_loader, make_app):
        app = make_app(fake_loader, debounce_ms=5000)
        async with app.run_test() as pilot:
            await wait_until(lambda: app.menu is not None and app.menu.loaded)
            await pilot.press("c", "h", "r")
            await pilot.press("enter")
        assert app.return_value.candidate.original == "Chrome"

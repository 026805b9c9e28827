#!/usr/bin/env python3
"""Drive the Textual selection UI with simulated key presses."""

import asyncio
import sys
from pathlib import Path

import pytest

# Add the src directory to the Python path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from kamae.app import KamaeApp
from kamae.modules.catalog import Application, CatalogItem, Priority
from kamae.modules.session import SessionEvent, SessionOutcome
from kamae.ui.keymap import KEY_BINDINGS, key_to_event, keys_for
from kamae.ui.screens.selection import SelectionScreen


def make_catalog():
    return (
        CatalogItem.create(Application("A", "a", "brew"), "dev", Priority.RECOMMENDED),
        CatalogItem.create(Application("B", "b", "brew_cask"), "dev", Priority.OPTIONAL),
        CatalogItem.create(Application("C", "c", "mas", mas_id="123"), "util", Priority.RECOMMENDED),
    )


async def press_keys(*keys):
    """Run the app headless, press ``keys`` and return (app, last screen session)."""
    app = KamaeApp(make_catalog())
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert isinstance(screen, SelectionScreen)
        await pilot.press(*keys)
        session = screen.session
    return app, session


def test_keymap():
    assert key_to_event("k") is SessionEvent.MOVE_UP
    assert key_to_event("down") is SessionEvent.MOVE_DOWN
    assert key_to_event("space") is SessionEvent.TOGGLE_CURRENT
    assert key_to_event("enter") is SessionEvent.CONFIRM
    assert key_to_event("ctrl+c") is SessionEvent.QUIT
    assert key_to_event("x") is None
    assert keys_for(SessionEvent.QUIT) == ["q", "ctrl+c"]
    assert {event for event, _ in KEY_BINDINGS.values()} == set(SessionEvent)


def test_navigation_and_toggle_update_session():
    print("🔄 Pressing j, space in the selection screen")
    app, session = asyncio.run(press_keys("j", "space"))

    assert session.cursor == 1
    assert session.selected == frozenset({0, 1, 2})
    assert not session.terminal
    print("   ✅ Session updated without leaving the screen")


def test_view_is_redrawn_after_each_event():
    async def run():
        app = KamaeApp(make_catalog())
        async with app.run_test() as pilot:
            await pilot.pause()
            screen = app.screen
            await pilot.press("down", "space")
            await pilot.pause()
            return screen._render_view().plain

    text = asyncio.run(run())
    assert "    > [✓] B (optional)" in text
    assert "Selected: 3 applications" in text


def test_enter_confirms_and_returns_session():
    print("🔄 Confirming the default selection with enter")
    app, _ = asyncio.run(press_keys("space", "down", "down", "space", "enter"))

    result = app.return_value
    assert result is not None
    assert result.outcome is SessionOutcome.CONFIRMED
    assert result.final_selection() == frozenset()
    print("   ✅ Confirmed session returned from the app")


@pytest.mark.parametrize("key", ["q", "ctrl+c"])
def test_quit_keys_end_session(key):
    app, _ = asyncio.run(press_keys(key))

    result = app.return_value
    assert result is not None
    assert result.outcome is SessionOutcome.QUIT
    assert result.selected == frozenset({0, 2})
    assert result.final_selection() == frozenset()


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))

"""Application selection screen."""

from typing import Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import ScrollableContainer
from textual.screen import Screen
from textual.widgets import Header, Static

from ...modules.catalog import CatalogItem
from ...modules.session import Session, SessionEvent, new_session, transition
from ...utils.logger import get_ui_logger
from ..keymap import KEY_BINDINGS
from ..renderer import RenderStyle, render


class SelectionScreen(Screen):
    """Checklist of catalog items driven by the selection session."""

    BINDINGS = [
        Binding(key, f"session_event('{event.value}')", description, show=False, priority=True)
        for key, (event, description) in KEY_BINDINGS.items()
    ]

    CSS = """
    SelectionScreen {
        layout: vertical;
    }

    #catalog-scroll {
        height: 1fr;
        padding: 0 1;
    }

    #catalog-view {
        height: auto;
    }
    """

    def __init__(self, catalog: Sequence[CatalogItem], style: RenderStyle = None):
        super().__init__()
        self.catalog = tuple(catalog)
        self.view_style = style or RenderStyle()
        self.session: Session = new_session(self.catalog)
        self.logger = get_ui_logger("selection")
        self.logger.info(f"Selection screen initialized with {len(self.catalog)} items")

    def compose(self) -> ComposeResult:
        """Compose the selection interface."""
        yield Header()
        with ScrollableContainer(id="catalog-scroll"):
            yield Static(self._render_view(), id="catalog-view")

    def _render_view(self) -> Text:
        return Text.from_markup(render(self.catalog, self.session, self.view_style))

    def action_session_event(self, event_name: str) -> None:
        """Feed a session event and redraw."""
        self.send_event(SessionEvent(event_name))

    def send_event(self, event: SessionEvent) -> None:
        """Apply ``event`` to the session, then redraw or exit."""
        previous = self.session
        self.session = transition(self.session, event)
        self.logger.debug(f"{event.value}: cursor={self.session.cursor} selected={len(self.session.selected)}")

        if self.session.terminal:
            self.logger.info(f"Selection finished: {self.session.outcome.value}")
            self.app.exit(self.session)
            return

        if self.session != previous:
            self.query_one("#catalog-view", Static).update(self._render_view())
            if self.session.cursor != previous.cursor:
                self._scroll_to_cursor()

    def _scroll_to_cursor(self) -> None:
        """Keep the highlighted line visible in long catalogs."""
        container = self.query_one("#catalog-scroll", ScrollableContainer)
        plain = self._render_view().plain.splitlines()
        marker = f"    {self.view_style.cursor_marker} ["
        for line_number, line in enumerate(plain):
            if line.startswith(marker):
                top = container.scroll_offset.y
                visible = container.size.height
                if visible and not top <= line_number < top + visible:
                    container.scroll_to(y=max(0, line_number - visible // 2), animate=False)
                break

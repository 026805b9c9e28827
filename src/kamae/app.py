"""Main application class for kamae."""

from typing import Optional, Sequence

from textual.app import App

from .modules.catalog import CatalogItem
from .modules.session import Session
from .ui.renderer import RenderStyle
from .ui.screens.selection import SelectionScreen
from .utils.logger import get_app_logger


class KamaeApp(App[Session]):
    """Interactive application picker.

    Runs until the selection screen confirms or quits; ``run()`` returns the
    terminal Session (or None if the app was closed some other way).
    """

    TITLE = "kamae"
    SUB_TITLE = "Bootstrap Application Installer"

    def __init__(self, catalog: Sequence[CatalogItem], style: Optional[RenderStyle] = None,
                 title: Optional[str] = None, sub_title: Optional[str] = None):
        super().__init__()
        self.catalog = tuple(catalog)
        self.view_style = style or RenderStyle()
        self.logger = get_app_logger()

        if title:
            self.title = title
        if sub_title:
            self.sub_title = sub_title

        self.logger.info(f"Application initialized with {len(self.catalog)} catalog items")

    def on_mount(self) -> None:
        """Called when app starts."""
        self.push_screen(SelectionScreen(self.catalog, self.view_style))

"""Catalog view rendering.

Projects a catalog and a session onto Rich console markup: recommended
applications first, then optional ones, each grouped by category in the
order the categories first appear in the catalog.
"""

import re
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from rich.markup import escape

from ..config_manager import DEFAULT_THEME
from ..modules.catalog import CatalogItem, Priority, categories_by_priority
from ..modules.session import Session


HELP_TEXT = "Navigation: ↑/↓ or j/k to move, space to toggle, enter to install, q to quit"

SECTION_TITLES = {
    Priority.RECOMMENDED: "RECOMMENDED APPLICATIONS",
    Priority.OPTIONAL: "OPTIONAL APPLICATIONS",
}


@dataclass(frozen=True)
class RenderStyle:
    """Colours and markers used by ``render``."""
    title: str = "kamae - Bootstrap Application Installer"
    title_color: str = DEFAULT_THEME["title"]
    category_color: str = DEFAULT_THEME["category"]
    selected_color: str = DEFAULT_THEME["selected"]
    unselected_color: str = DEFAULT_THEME["unselected"]
    help_color: str = DEFAULT_THEME["help"]
    summary_color: str = DEFAULT_THEME["summary"]
    cursor_marker: str = ">"
    check_marker: str = "✓"

    @classmethod
    def from_theme(cls, theme: Mapping[str, str], title: Optional[str] = None) -> "RenderStyle":
        """Build a style from a theme mapping as returned by ConfigManager.get_theme_config."""
        defaults = cls()
        return cls(
            title=title or defaults.title,
            title_color=theme.get("title", defaults.title_color),
            category_color=theme.get("category", defaults.category_color),
            selected_color=theme.get("selected", defaults.selected_color),
            unselected_color=theme.get("unselected", defaults.unselected_color),
            help_color=theme.get("help", defaults.help_color),
            summary_color=theme.get("summary", defaults.summary_color),
        )


def _styled(text: str, color: str, bold: bool = False) -> str:
    style = f"bold {color}" if bold else color
    return f"[{style}]{text}[/{style}]"


def _category_title(category: str) -> str:
    # Capitalise every word start, including after punctuation ("dev-tools" -> "Dev-Tools")
    return re.sub(r"(?<!\w)\w", lambda match: match.group(0).upper(), category)


def render_item(item: CatalogItem, index: int, session: Session, style: RenderStyle) -> str:
    """Render one catalog line: cursor marker, check marker and label."""
    cursor = style.cursor_marker if session.cursor == index else " "
    checked = style.check_marker if session.is_selected(index) else " "
    color = style.selected_color if session.is_selected(index) else style.unselected_color
    line = f"    {cursor} [{checked}] {item.display_name}"
    return _styled(escape(line), color)


def render(catalog: Sequence[CatalogItem], session: Session, style: Optional[RenderStyle] = None) -> str:
    """Render the selection screen.

    Args:
        catalog: Catalog the session indexes into
        session: Current session
        style: Colours and markers; defaults to RenderStyle()

    Returns:
        Rich markup text; empty once the session is terminal
    """
    if session.terminal:
        return ""

    style = style or RenderStyle()
    lines = [_styled(escape(style.title), style.title_color, bold=True), ""]

    for priority, categories in categories_by_priority(catalog).items():
        if not categories:
            continue

        lines.append(_styled(SECTION_TITLES[priority], style.category_color, bold=True))
        for category, indices in categories.items():
            lines.append("")
            lines.append(f"  {escape(_category_title(category))}:")
            lines.extend(render_item(catalog[i], i, session, style) for i in indices)
        lines.append("")

    lines.append(_styled(escape(HELP_TEXT), style.help_color))
    lines.append(_styled(f"Selected: {len(session.selected)} applications", style.summary_color, bold=True))
    return "\n".join(lines)

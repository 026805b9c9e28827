"""Catalog data models: applications, priorities and selectable catalog items."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Mapping, Optional, Sequence, Tuple

from .errors import EmptyCatalogError, UnknownMechanismError
from ..utils.logger import get_module_logger


class InstallMechanism(Enum):
    """How an application gets installed."""
    BREW = "brew"            # Homebrew formula
    BREW_CASK = "brew_cask"  # Homebrew cask
    MAS = "mas"              # Mac App Store

    @classmethod
    def parse(cls, app_id: str, install: str) -> "InstallMechanism":
        """Resolve a raw manifest value, raising UnknownMechanismError if unrecognized."""
        try:
            return cls(install)
        except ValueError:
            raise UnknownMechanismError(app_id, install) from None

    @classmethod
    def is_known(cls, install: str) -> bool:
        return install in {member.value for member in cls}


class Priority(Enum):
    """Catalog priority; recommended items start out selected."""
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class Application:
    """Represents an application entry of the manifest."""
    name: str
    id: str
    install: str
    mas_id: Optional[str] = None

    def __post_init__(self):
        # mas_id is required for App Store entries and meaningless elsewhere
        is_mas = self.install == InstallMechanism.MAS.value
        if is_mas and not self.mas_id:
            raise ValueError(f"Application '{self.id}' installs with 'mas' but has no mas_id")
        if not is_mas and self.mas_id:
            raise ValueError(f"Application '{self.id}' sets mas_id but installs with '{self.install}'")

    @property
    def mechanism(self) -> InstallMechanism:
        """Install mechanism of this application."""
        return InstallMechanism.parse(self.id, self.install)


@dataclass(frozen=True)
class CatalogItem:
    """An application together with its grouping and selection metadata."""
    app: Application
    category: str
    priority: Priority
    display_name: str
    default_selected: bool

    @classmethod
    def create(cls, app: Application, category: str, priority: Priority) -> "CatalogItem":
        return cls(
            app=app,
            category=category,
            priority=priority,
            display_name=f"{app.name} ({priority.value})",
            default_selected=priority is Priority.RECOMMENDED,
        )


Catalog = Tuple[CatalogItem, ...]
CategoryGroups = Mapping[str, Sequence[Application]]


def build_catalog(recommended: Optional[CategoryGroups],
                  optional: Optional[CategoryGroups]) -> Catalog:
    """Flatten the grouped manifest into an ordered catalog.

    Recommended categories come first, then optional ones, each in mapping
    order. The returned tuple is the fixed ordering every session index
    refers to.

    Args:
        recommended: Category name -> applications pre-selected by default
        optional: Category name -> applications not pre-selected

    Returns:
        Tuple of catalog items

    Raises:
        EmptyCatalogError: If neither group holds a single application
    """
    logger = get_module_logger("catalog")
    items = []

    for priority, groups in ((Priority.RECOMMENDED, recommended), (Priority.OPTIONAL, optional)):
        for category, apps in (groups or {}).items():
            for app in apps or ():
                items.append(CatalogItem.create(app, category, priority))

    if not items:
        logger.error("Catalog is empty")
        raise EmptyCatalogError()

    logger.info(f"Built catalog with {len(items)} items "
                f"({sum(1 for item in items if item.default_selected)} recommended)")
    return tuple(items)


def default_selection(catalog: Sequence[CatalogItem]) -> FrozenSet[int]:
    """Indices of the items that start out selected."""
    return frozenset(i for i, item in enumerate(catalog) if item.default_selected)


def categories_by_priority(catalog: Sequence[CatalogItem]) -> Dict[Priority, Dict[str, list]]:
    """Group catalog indices by priority then category, in first-seen order.

    Returns:
        {priority: {category: [index, ...]}}; a category only appears under a
        priority that has at least one of its items
    """
    grouped: Dict[Priority, Dict[str, list]] = {priority: {} for priority in Priority}
    for index, item in enumerate(catalog):
        grouped[item.priority].setdefault(item.category, []).append(index)
    return grouped

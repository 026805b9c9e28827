"""Installation plan - the final selection partitioned by install mechanism."""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from .catalog import Application, CatalogItem, InstallMechanism
from ..utils.logger import get_module_logger


@dataclass(frozen=True)
class InstallationPlan:
    """Application identifiers to install, one sequence per mechanism.

    Attributes:
        brew: Homebrew formula ids
        brew_cask: Homebrew cask ids
        mas: (id, App Store id) pairs
        applications: The selected applications in catalog order
    """
    brew: Tuple[str, ...] = ()
    brew_cask: Tuple[str, ...] = ()
    mas: Tuple[Tuple[str, str], ...] = ()
    applications: Tuple[Application, ...] = ()

    @classmethod
    def empty(cls) -> "InstallationPlan":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.applications

    @property
    def total(self) -> int:
        """Number of applications across all mechanisms."""
        return len(self.brew) + len(self.brew_cask) + len(self.mas)


def build_plan(catalog: Sequence[CatalogItem], selected_indices: Iterable[int]) -> InstallationPlan:
    """Partition the selected applications by install mechanism.

    Args:
        catalog: The catalog the indices refer to
        selected_indices: Indices of the applications to install

    Returns:
        InstallationPlan; explicitly empty when nothing is selected

    Raises:
        UnknownMechanismError: If a selected application has an unrecognized mechanism
        ValueError: If an index falls outside the catalog
    """
    logger = get_module_logger("plan")
    indices = sorted(set(selected_indices))
    if not indices:
        logger.info("Nothing selected, returning empty plan")
        return InstallationPlan.empty()

    brew, brew_cask, mas, applications = [], [], [], []
    for index in indices:
        if not 0 <= index < len(catalog):
            raise ValueError(f"Selected index {index} is outside the catalog (size {len(catalog)})")

        app = catalog[index].app
        mechanism = app.mechanism
        if mechanism is InstallMechanism.BREW:
            brew.append(app.id)
        elif mechanism is InstallMechanism.BREW_CASK:
            brew_cask.append(app.id)
        elif mechanism is InstallMechanism.MAS:
            mas.append((app.id, app.mas_id))
        applications.append(app)

    plan = InstallationPlan(
        brew=tuple(brew),
        brew_cask=tuple(brew_cask),
        mas=tuple(mas),
        applications=tuple(applications),
    )
    logger.info(f"Built plan: {len(plan.brew)} formulae, {len(plan.brew_cask)} casks, "
                f"{len(plan.mas)} App Store apps")
    return plan

"""Installation step: turns a plan into package manager commands and reports them.

Commands are only shown, never executed.
"""

import shlex
import shutil
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .plan import InstallationPlan
from ..utils.logger import get_module_logger


class AppInstaller:
    """Builds and reports the commands for an installation plan."""

    BREW_COMMAND = "brew"
    MAS_COMMAND = "mas"

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.logger = get_module_logger("app_installer")

    def get_install_commands(self, plan: InstallationPlan) -> List[str]:
        """Get the shell commands that would install the plan.

        Args:
            plan: Installation plan

        Returns:
            One command per Homebrew group plus one per App Store app
        """
        commands = []
        if plan.brew:
            commands.append(shlex.join([self.BREW_COMMAND, "install", *plan.brew]))
        if plan.brew_cask:
            commands.append(shlex.join([self.BREW_COMMAND, "install", "--cask", *plan.brew_cask]))
        for _, mas_id in plan.mas:
            commands.append(shlex.join([self.MAS_COMMAND, "install", mas_id]))
        return commands

    def required_tools(self, plan: InstallationPlan) -> List[str]:
        """Executables the plan needs."""
        tools = []
        if plan.brew or plan.brew_cask:
            tools.append(self.BREW_COMMAND)
        if plan.mas:
            tools.append(self.MAS_COMMAND)
        return tools

    def missing_tools(self, plan: InstallationPlan) -> List[str]:
        """Required executables that are not on PATH."""
        missing = [tool for tool in self.required_tools(plan) if shutil.which(tool) is None]
        if missing:
            self.logger.warning(f"Missing tools for plan: {', '.join(missing)}")
        return missing

    def report(self, plan: InstallationPlan) -> None:
        """Print the per-application progress lines and the installation summary."""
        if plan.is_empty:
            self.console.print("No applications selected. Exiting.")
            return

        self.logger.info(f"Reporting plan for {plan.total} applications")
        self.console.print("\n--- Installing the following applications (stub):\n")
        for app in plan.applications:
            self.console.print(escape(f"Installing {app.name}... [stub]"))

        self.console.print("\n--- Installation Summary (stub) ---")
        if plan.brew:
            self.console.print(escape(f"Homebrew packages: brew install {' '.join(plan.brew)}"))
        if plan.brew_cask:
            self.console.print(escape(f"Homebrew casks: brew install --cask {' '.join(plan.brew_cask)}"))
        if plan.mas:
            entries = ", ".join(f"{app_id} (ID: {mas_id})" for app_id, mas_id in plan.mas)
            self.console.print(escape(f"Mac App Store apps: {entries}"))

        for tool in self.missing_tools(plan):
            self.console.print(f"[yellow]Warning: '{tool}' was not found on PATH[/yellow]")

        self.console.print(f"\nTotal applications: {plan.total}")
        self.console.print("Done!")

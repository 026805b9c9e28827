#!/usr/bin/env python3
"""
kamae - Bootstrap Application Installer
Description: Pick the applications to install on a fresh machine from a YAML manifest
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from .config_manager import ConfigManager
from .modules.catalog import Catalog
from .modules.errors import EmptyCatalogError, ManifestLoadError, UnknownMechanismError
from .modules.manifest import get_default_manifest_path, load_manifest
from .modules.app_installer import AppInstaller
from .modules.plan import build_plan
from .modules.session import Session, SessionOutcome, confirm_defaults
from .ui.renderer import RenderStyle
from .utils.logger import init_logging, get_app_logger


console = Console()


def load_catalog(manifest_path: Path) -> Catalog:
    """Load the manifest and build the catalog, exiting on fatal errors."""
    try:
        manifest = load_manifest(manifest_path)
        return manifest.get_app_items()
    except ManifestLoadError as e:
        console.print(f"[red]Error loading manifest from {escape(str(e.path))}: {escape(e.reason)}[/red]")
        sys.exit(1)
    except EmptyCatalogError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


def run_interactive(catalog: Catalog, config_manager: ConfigManager) -> Optional[Session]:
    """Run the Textual selection UI and return the terminal session."""
    from .app import KamaeApp

    app_config = config_manager.get_app_config()
    style = RenderStyle.from_theme(config_manager.get_theme_config(app_config.theme), title=app_config.title)
    app = KamaeApp(catalog, style=style, title=app_config.name, sub_title=f"v{app_config.version}")
    return app.run()


def report_cancelled() -> None:
    """Quit path: nothing gets installed."""
    get_app_logger().info("Selection cancelled by user")
    console.print("Selection cancelled. Nothing will be installed.")


def handle_installation(catalog: Catalog, session: Optional[Session], installer: AppInstaller) -> None:
    """Turn the terminal session into a plan and report it."""
    logger = get_app_logger()

    if session is None or session.outcome is SessionOutcome.QUIT:
        report_cancelled()
        return

    try:
        plan = build_plan(catalog, session.final_selection())
    except UnknownMechanismError as e:
        logger.error(str(e))
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    installer.report(plan)


@click.group()
@click.version_option(package_name="kamae")
def cli():
    """kamae - bootstrap application installer."""


@cli.command()
@click.option('--manifest', '-m', type=click.Path(path_type=Path), help='Path to the application manifest')
@click.option('--config-dir', '-c', default='config', type=click.Path(path_type=Path),
              help='Configuration directory path')
@click.option('--test', 'batch', is_flag=True, help='Non-interactive mode: install the default selections')
@click.option('--debug', is_flag=True, help='Enable debug mode')
def init(manifest: Optional[Path], config_dir: Path, batch: bool, debug: bool):
    """Interactive application selection and installation."""

    try:
        init_logging(config_dir, debug)
        logger = get_app_logger()

        config_manager = ConfigManager(config_dir)
        manifest_path = manifest or get_default_manifest_path(config_dir)
        logger.info(f"Using manifest: {manifest_path}")

        catalog = load_catalog(manifest_path)
        installer = AppInstaller(console)

        if batch:
            console.print("--- Test Mode: Using default selections ---")
            session = confirm_defaults(catalog)
        else:
            session = run_interactive(catalog, config_manager)

        handle_installation(catalog, session, installer)

    except KeyboardInterrupt:
        # Same as pressing q
        console.print()
        report_cancelled()
        sys.exit(0)
    except Exception as e:
        console.print(f"[red]Error running program: {escape(str(e))}[/red]")
        if debug:
            console.print_exception()
        sys.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()

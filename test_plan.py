#!/usr/bin/env python3
"""Tests for plan building and the installation report."""

import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add the src directory to the Python path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from kamae.modules.app_installer import AppInstaller
from kamae.modules.catalog import Application, CatalogItem, Priority
from kamae.modules.errors import UnknownMechanismError
from kamae.modules.plan import InstallationPlan, build_plan


def make_catalog():
    return (
        CatalogItem.create(Application("Git", "git", "brew"), "dev", Priority.RECOMMENDED),
        CatalogItem.create(Application("VS Code", "visual-studio-code", "brew_cask"), "dev", Priority.RECOMMENDED),
        CatalogItem.create(Application("Things 3", "things-3", "mas", mas_id="904280696"), "prod", Priority.OPTIONAL),
        CatalogItem.create(Application("jq", "jq", "brew"), "dev", Priority.OPTIONAL),
        CatalogItem.create(Application("Mystery", "mystery", "unknown"), "misc", Priority.OPTIONAL),
    )


def test_plan_partitions_selection_by_mechanism():
    print("🧪 Building plan for four applications")
    catalog = make_catalog()
    plan = build_plan(catalog, {3, 0, 2, 1})

    assert plan.brew == ("git", "jq")
    assert plan.brew_cask == ("visual-studio-code",)
    assert plan.mas == (("things-3", "904280696"),)
    assert [app.id for app in plan.applications] == ["git", "visual-studio-code", "things-3", "jq"]
    assert plan.total == 4
    assert not plan.is_empty
    print("   ✅ Every selected app lands in exactly one sequence")


def test_every_selection_is_a_partition():
    catalog = make_catalog()[:4]
    for mask in range(16):
        selected = {i for i in range(4) if mask & (1 << i)}
        plan = build_plan(catalog, selected)
        ids = list(plan.brew) + list(plan.brew_cask) + [app_id for app_id, _ in plan.mas]
        assert sorted(ids) == sorted(catalog[i].app.id for i in selected)
        assert plan.total == len(selected)


def test_empty_selection_gives_empty_plan():
    plan = build_plan(make_catalog(), [])
    assert plan == InstallationPlan.empty()
    assert plan.is_empty
    assert plan.total == 0


def test_unknown_mechanism_is_not_dropped():
    with pytest.raises(UnknownMechanismError) as excinfo:
        build_plan(make_catalog(), {0, 4})
    assert excinfo.value.app_id == "mystery"


def test_out_of_range_index_is_rejected():
    with pytest.raises(ValueError):
        build_plan(make_catalog(), {7})


def test_install_commands():
    installer = AppInstaller(Console(file=None, record=True))
    plan = build_plan(make_catalog(), {0, 1, 2, 3})

    assert installer.get_install_commands(plan) == [
        "brew install git jq",
        "brew install --cask visual-studio-code",
        "mas install 904280696",
    ]
    assert installer.required_tools(plan) == ["brew", "mas"]
    assert installer.required_tools(InstallationPlan.empty()) == []


def test_report_lists_each_app_and_summary():
    console = Console(record=True, width=120)
    installer = AppInstaller(console)
    installer.report(build_plan(make_catalog(), {0, 1, 2}))
    output = console.export_text()

    assert "Installing Git... [stub]" in output
    assert "Installing Things 3... [stub]" in output
    assert "Homebrew packages: brew install git" in output
    assert "Homebrew casks: brew install --cask visual-studio-code" in output
    assert "Mac App Store apps: things-3 (ID: 904280696)" in output
    assert "Total applications: 3" in output
    assert output.rstrip().endswith("Done!")


def test_report_for_empty_plan():
    console = Console(record=True)
    AppInstaller(console).report(InstallationPlan.empty())
    assert console.export_text().strip() == "No applications selected. Exiting."


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))

"""Application manifest loading.

The manifest is a YAML file with two top-level sections, ``recommended`` and
``optional``, each mapping a category name to a list of applications::

    recommended:
      development:
        - name: Visual Studio Code
          id: visual-studio-code
          install: brew_cask
    optional:
      productivity:
        - name: Things 3
          id: things
          install: mas
          mas_id: "904280696"
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .catalog import Application, Catalog, InstallMechanism, build_catalog
from .errors import ManifestLoadError
from ..utils.logger import get_module_logger


REQUIRED_FIELDS = ("name", "id", "install")


@dataclass
class Manifest:
    """Parsed manifest: category name -> applications, per priority."""
    recommended: Dict[str, List[Application]] = field(default_factory=dict)
    optional: Dict[str, List[Application]] = field(default_factory=dict)
    path: Optional[Path] = None

    def get_app_items(self) -> Catalog:
        """Build the ordered catalog with recommended apps pre-selected."""
        return build_catalog(self.recommended, self.optional)

    @property
    def app_count(self) -> int:
        return sum(len(apps) for groups in (self.recommended, self.optional) for apps in groups.values())


def load_manifest(manifest_path: Union[str, Path]) -> Manifest:
    """Load the manifest from a YAML file.

    Args:
        manifest_path: Path to the manifest

    Returns:
        Parsed Manifest

    Raises:
        ManifestLoadError: If the file cannot be read, parsed or has the wrong shape
    """
    logger = get_module_logger("manifest")
    path = Path(manifest_path)
    logger.info(f"Loading manifest: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as file:
            data = yaml.safe_load(file)
    except OSError as e:
        logger.error(f"Failed to read manifest [{path}]: {e}")
        raise ManifestLoadError(path, e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing failed [{path}]: {e}")
        raise ManifestLoadError(path, f"invalid YAML: {e}") from e

    if data is None:
        logger.warning(f"Manifest is empty: {path}")
        data = {}
    if not isinstance(data, dict):
        raise ManifestLoadError(path, "top level must be a mapping")

    manifest = Manifest(
        recommended=_parse_section(path, data, "recommended"),
        optional=_parse_section(path, data, "optional"),
        path=path,
    )
    logger.info(f"Manifest loaded: {manifest.app_count} applications")
    return manifest


def _parse_section(path: Path, data: Dict[str, Any], section: str) -> Dict[str, List[Application]]:
    """Parse one priority section into category -> applications."""
    raw_section = data.get(section) or {}
    if not isinstance(raw_section, dict):
        raise ManifestLoadError(path, f"'{section}' must map category names to application lists")

    categories: Dict[str, List[Application]] = {}
    for category, entries in raw_section.items():
        entries = entries or []
        if not isinstance(entries, list):
            raise ManifestLoadError(path, f"category '{section}.{category}' must be a list")
        categories[str(category)] = [
            _parse_application(path, f"{section}.{category}[{position}]", entry)
            for position, entry in enumerate(entries)
        ]
    return categories


def _parse_application(path: Path, where: str, entry: Any) -> Application:
    """Validate a single manifest entry and turn it into an Application."""
    logger = get_module_logger("manifest")

    if not isinstance(entry, dict):
        raise ManifestLoadError(path, f"{where} must be a mapping")

    missing = [key for key in REQUIRED_FIELDS if not entry.get(key)]
    if missing:
        raise ManifestLoadError(path, f"{where} is missing {', '.join(missing)}")

    install = str(entry["install"])
    mas_id = entry.get("mas_id")
    mas_id = str(mas_id) if mas_id is not None and mas_id != "" else None

    if install == InstallMechanism.MAS.value and mas_id is None:
        raise ManifestLoadError(path, f"{where} uses 'mas' but has no mas_id")
    if install != InstallMechanism.MAS.value and mas_id is not None:
        raise ManifestLoadError(path, f"{where} sets mas_id but installs with '{install}'")
    if not InstallMechanism.is_known(install):
        # Kept so the plan builder can reject it if the user selects it
        logger.warning(f"{where}: unknown install mechanism '{install}'")

    return Application(
        name=str(entry["name"]),
        id=str(entry["id"]),
        install=install,
        mas_id=mas_id,
    )


def get_default_manifest_path(config_dir: Optional[Path] = None) -> Path:
    """Find the manifest when none was given on the command line.

    Lookup order: ``../modules/apps.yaml`` next to the running executable,
    ``modules/apps.yaml`` in the working directory, then ``apps.yaml`` in the
    configuration directory.
    """
    candidates = []
    executable = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if executable is not None:
        candidates.append(executable.resolve().parent / ".." / "modules" / "apps.yaml")
    candidates.append(Path("modules") / "apps.yaml")
    if config_dir is not None:
        candidates.append(Path(config_dir) / "apps.yaml")

    for candidate in candidates:
        if os.path.isfile(candidate):
            return candidate

    return Path("modules") / "apps.yaml"

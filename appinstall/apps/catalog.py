"""
Application catalogue - loads the applications managed by the install units
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from appinstall import config
from appinstall.common.errors import CatalogError
from appinstall.packages.pacman_client import PackageOrigin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppDefinition:
    name: str
    package: str
    display_name: str
    origin: PackageOrigin = PackageOrigin.OFFICIAL
    notes: List[str] = field(default_factory=list)
    post_install: List[str] = field(default_factory=list)

    @property
    def needs_aur_helper(self) -> bool:
        return self.origin is PackageOrigin.AUR


def default_catalog_path() -> Path:
    return Path(__file__).resolve().parent.parent / config.CATALOG_FILE


def _as_lines(value, name, key) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise CatalogError(f"App '{name}': '{key}' must be a string or a list of strings")


def parse_app(name: str, entry) -> AppDefinition:
    """Build an AppDefinition from one catalogue entry"""
    if not isinstance(entry, dict):
        raise CatalogError(f"App '{name}' must be a mapping")

    package = entry.get('package')
    if not package or not isinstance(package, str):
        raise CatalogError(f"App '{name}' has no package name")

    origin_value = entry.get('origin', PackageOrigin.OFFICIAL.value)
    try:
        origin = PackageOrigin(origin_value)
    except ValueError:
        raise CatalogError(
            f"App '{name}' has unknown origin '{origin_value}' (expected 'official' or 'aur')"
        ) from None

    return AppDefinition(
        name=name,
        package=package,
        display_name=entry.get('display_name') or package,
        origin=origin,
        notes=_as_lines(entry.get('notes'), name, 'notes'),
        post_install=_as_lines(entry.get('post_install'), name, 'post_install'),
    )


def load_catalog(path: Optional[Path] = None) -> Dict[str, AppDefinition]:
    """
    Load every application from the catalogue file.

    Raises:
        CatalogError: if the file is missing, is not valid YAML or has a bad entry
    """
    path = Path(path) if path else default_catalog_path()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise CatalogError(f"Application catalogue not found: {path}") from None
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {path}: {e}") from None

    apps = data.get('apps') if isinstance(data, dict) else None
    if not isinstance(apps, dict):
        raise CatalogError(f"{path} must contain an 'apps' mapping")

    return {str(name): parse_app(str(name), entry) for name, entry in apps.items()}


def get_app(name: str, path: Optional[Path] = None) -> AppDefinition:
    catalog = load_catalog(path)
    try:
        return catalog[name]
    except KeyError:
        raise CatalogError(
            f"Unknown application '{name}'. Known applications: {', '.join(sorted(catalog))}"
        ) from None

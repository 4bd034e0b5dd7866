"""
Unit discovery - finds the *-install units the batch runner executes
"""

import abc
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

from appinstall import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallUnit:
    identifier: str
    path: Path
    supports_dry_run: bool = True
    supports_force: bool = True

    @property
    def file_name(self) -> str:
        return self.path.name


def declared_flags(path: Path) -> Tuple[bool, bool]:
    """(supports --dry-run, supports --force) as declared in the unit's usage text"""
    try:
        content = path.read_bytes()
    except OSError as e:
        logger.warning(f"Could not read {path.name}: {e}")
        return False, False
    return b'--dry-run' in content, b'--force' in content


def unit_stem(file_name: str) -> str:
    """File name with at most one extension removed"""
    return Path(file_name).stem


def is_unit_file(file_name: str, suffix: str = config.UNIT_SUFFIX,
                 orchestrator_name: str = config.ORCHESTRATOR_NAME) -> bool:
    stem = unit_stem(file_name)
    return stem.endswith(suffix) and stem != suffix and stem != orchestrator_name


def unit_identifier(file_name: str, suffix: str = config.UNIT_SUFFIX) -> str:
    """'fish-install.py' -> 'fish'"""
    return unit_stem(file_name)[:-len(suffix)]


class UnitSource(abc.ABC):
    """Produces the ordered list of units for one batch run"""

    @abc.abstractmethod
    def discover(self) -> List[InstallUnit]:
        """Units in execution order"""

    @abc.abstractmethod
    def describe(self) -> str:
        """Where units are looked for, for messages"""


class DirectoryUnitSource(UnitSource):
    """Scans one directory (not recursively) for files named <app>-install[.ext]"""

    def __init__(self, root_dir, suffix=config.UNIT_SUFFIX, orchestrator_name=config.ORCHESTRATOR_NAME):
        self.root_dir = Path(root_dir)
        self.suffix = suffix
        self.orchestrator_name = orchestrator_name

    def describe(self):
        return str(self.root_dir)

    def discover(self):
        if not self.root_dir.is_dir():
            logger.warning(f"Unit directory does not exist: {self.root_dir}")
            return []

        units = []
        # Sorted by code point so the order never depends on the locale
        for path in sorted(self.root_dir.iterdir(), key=lambda p: p.name):
            if not path.is_file() or not is_unit_file(path.name, self.suffix, self.orchestrator_name):
                continue
            supports_dry_run, supports_force = declared_flags(path)
            units.append(InstallUnit(
                identifier=unit_identifier(path.name, self.suffix),
                path=path,
                supports_dry_run=supports_dry_run,
                supports_force=supports_force,
            ))

        logger.debug(f"Discovered {len(units)} unit(s) in {self.root_dir}")
        return units


class StaticUnitSource(UnitSource):
    """Fixed, already ordered list of units"""

    def __init__(self, units: Iterable[InstallUnit], description='<static>'):
        self.units = list(units)
        self.description = description

    def describe(self):
        return self.description

    def discover(self):
        return list(self.units)

"""
Application modules package
"""

from .app_unit import AppInstaller, UnitAction, build_package_manager, run_unit
from .catalog import AppDefinition, get_app, load_catalog

__all__ = [
    'AppInstaller',
    'UnitAction',
    'build_package_manager',
    'run_unit',
    'AppDefinition',
    'get_app',
    'load_catalog',
]

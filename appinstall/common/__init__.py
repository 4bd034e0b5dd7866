"""
Common modules package
"""

from .config_loader import ConfigLoader
from .environment import validate_environment
from .logging_utils import setup_logging
from .shell_executor import ShellExecutor

__all__ = ['ConfigLoader', 'validate_environment', 'setup_logging', 'ShellExecutor']

"""
Orchestrator modules package
"""

from .batch_runner import BatchRunner, SubprocessUnitRunner, UnitRunner
from .discovery import DirectoryUnitSource, InstallUnit, StaticUnitSource, UnitSource
from .state import RunOutcome, RunStatus, RunSummary

__all__ = [
    'BatchRunner',
    'SubprocessUnitRunner',
    'UnitRunner',
    'DirectoryUnitSource',
    'InstallUnit',
    'StaticUnitSource',
    'UnitSource',
    'RunOutcome',
    'RunStatus',
    'RunSummary',
]

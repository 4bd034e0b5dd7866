"""
Batch Runner Module - Executes every discovered install unit in order
"""

import abc
import logging
import sys
from typing import List, Sequence

from appinstall.common.errors import NoUnitsFoundError, UnitExecutionError
from appinstall.orchestrator.discovery import InstallUnit
from appinstall.orchestrator.state import RunOutcome, RunStatus, RunSummary

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 50
LAUNCH_NOT_EXECUTABLE = 126
LAUNCH_NOT_FOUND = 127


class UnitRunner(abc.ABC):
    """Runs one install unit to completion"""

    @abc.abstractmethod
    def command_for(self, unit: InstallUnit, args: Sequence[str]) -> List[str]:
        """Command line that would run the unit"""

    @abc.abstractmethod
    def run(self, unit: InstallUnit, args: Sequence[str]) -> None:
        """Run the unit, raising UnitExecutionError when it exits non-zero"""


class SubprocessUnitRunner(UnitRunner):
    """Python units run with the current interpreter, anything else as an executable"""

    def __init__(self, shell_executor):
        self.shell_executor = shell_executor

    def command_for(self, unit, args):
        if unit.path.suffix == '.py':
            return [sys.executable, str(unit.path), *args]
        return [str(unit.path), *args]

    def run(self, unit, args):
        # Unit output streams to the terminal; no timeout, the runner waits for exit
        try:
            result = self.shell_executor.run_command(
                self.command_for(unit, args), cwd=unit.path.parent, capture=False
            )
        except OSError as e:
            logger.error(f"Could not start {unit.file_name}: {e}")
            # Shell conventions: 127 command not found, 126 found but not executable
            returncode = LAUNCH_NOT_FOUND if isinstance(e, FileNotFoundError) else LAUNCH_NOT_EXECUTABLE
            raise UnitExecutionError(unit.file_name, returncode) from e
        if result.returncode != 0:
            raise UnitExecutionError(unit.file_name, result.returncode)


class BatchRunner:
    """Discovers units, runs them one after another and reports the outcome"""

    def __init__(self, unit_runner: UnitRunner):
        self.unit_runner = unit_runner

    def list_units(self, source) -> int:
        """Print the discovered units; returns the exit status for --list"""
        units = source.discover()
        if not units:
            print(f"No *-install scripts found in {source.describe()}")
            return 1

        print("Available install scripts:")
        for unit in units:
            undeclared = [flag for flag, supported in (('--dry-run', unit.supports_dry_run),
                                                        ('--force', unit.supports_force)) if not supported]
            note = f" [no {', '.join(undeclared)}]" if undeclared else ""
            print(f"  - {unit.file_name} ({unit.identifier}){note}")
        return 0

    def run_source(self, source, options) -> RunSummary:
        """
        Discover units and run them.

        Raises:
            NoUnitsFoundError: if discovery finds nothing
        """
        units = source.discover()
        if not units:
            raise NoUnitsFoundError(f"No *-install scripts found in {source.describe()}")
        return self.run(units, options)

    def run(self, units: Sequence[InstallUnit], options) -> RunSummary:
        summary = RunSummary(dry_run=options.dry_run, continue_on_error=options.continue_on_error)
        args = options.unit_args()

        logger.info(f"Found {len(units)} install script(s) to execute")

        for index, unit in enumerate(units):
            logger.info(SEPARATOR)
            logger.info(f"Executing: {unit.file_name} ({unit.identifier})")
            logger.info(SEPARATOR)

            if options.force and not unit.supports_force:
                logger.warning(f"{unit.file_name} does not declare --force support")

            if options.dry_run:
                if not unit.supports_dry_run:
                    logger.warning(f"{unit.file_name} does not declare --dry-run support")
                command = self.unit_runner.command_for(unit, args)
                logger.info(f"[DRY RUN] Would execute: {' '.join(command)}")
                summary.record(RunOutcome(unit.identifier, unit.file_name, RunStatus.SKIPPED_DRY_RUN))
                continue

            try:
                self.unit_runner.run(unit, args)
            except UnitExecutionError as e:
                summary.record(RunOutcome(unit.identifier, unit.file_name, RunStatus.FAILED, e.returncode))
                logger.warning(f"✗ {unit.file_name} failed (exit status {e.returncode})")

                if not options.continue_on_error:
                    summary.aborted = True
                    summary.not_run = [u.identifier for u in units[index + 1:]]
                    logger.error(
                        f"Stopping due to failure in {unit.file_name}. Use --continue to skip failed scripts."
                    )
                    break
                logger.warning("Continuing with remaining scripts...")
            else:
                summary.record(RunOutcome(unit.identifier, unit.file_name, RunStatus.SUCCEEDED, 0))
                logger.info(f"✓ {unit.file_name} completed successfully")

        summary.finish()
        logger.debug(f"Run summary: {summary.get_summary()}")
        self.report(summary)
        return summary

    def report(self, summary: RunSummary):
        logger.info(SEPARATOR)
        logger.info("INSTALLATION SUMMARY")
        logger.info(SEPARATOR)

        if summary.dry_run:
            logger.info("DRY RUN completed - no actual changes made")
            logger.info(f"Would have processed {summary.processed} script(s)")
            return

        logger.info(f"Successful installations ({len(summary.succeeded)}):")
        for name in summary.succeeded:
            logger.info(f"  ✓ {name}")

        if summary.failed:
            logger.info(f"Failed installations ({len(summary.failed)}):")
            for name in summary.failed:
                logger.info(f"  ✗ {name}")

        if summary.not_run:
            logger.info(f"Not run ({len(summary.not_run)}):")
            for name in summary.not_run:
                logger.info(f"  - {name}")

        logger.info(f"Duration: {summary.elapsed:.1f}s")

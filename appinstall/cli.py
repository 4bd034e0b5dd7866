"""
Command line entry points for install units and the batch runner
"""

import argparse
import logging
import sys
import textwrap
from pathlib import Path

from appinstall.apps.app_unit import run_unit
from appinstall.apps.catalog import get_app
from appinstall.common.config_loader import ConfigLoader
from appinstall.common.errors import InstallerError, UsageError
from appinstall.common.logging_utils import setup_logging
from appinstall.common.options import RunOptions
from appinstall.common.shell_executor import ShellExecutor
from appinstall.helper.aur_helper import default_confirm
from appinstall.orchestrator.batch_runner import BatchRunner, SubprocessUnitRunner
from appinstall.orchestrator.discovery import DirectoryUnitSource

logger = logging.getLogger(__name__)

UNIT_DESCRIPTION = """\
This script will:
    1. Check if {display_name} is already installed
    2. If installed, check if an update is available
    3. Install or update as needed
    4. Do nothing if already installed and up to date
"""

BATCH_DESCRIPTION = """\
Install or update all applications using individual *-install scripts.

This script will automatically discover and execute all *-install scripts
in the unit directory. Each script will be run with the same --dry-run and
--force options passed to this wrapper script.

Available install scripts will be executed in alphabetical order.

By default, the script stops on the first error. Use --continue to
keep installing other applications even if one fails.
"""


class InstallerArgumentParser(argparse.ArgumentParser):
    """Reports bad command lines as UsageError instead of exiting with status 2"""

    def error(self, message):
        raise UsageError(f"{message}. Use --help for usage information.")


def _parse(parser, argv):
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        raise UsageError(f"Unknown option: {unknown[0]}. Use --help for usage information.")
    return args


def _add_common_flags(parser):
    parser.add_argument('--dry-run', action='store_true',
                        help='Show what would be done without executing')
    parser.add_argument('--force', action='store_true',
                        help='Force reinstallation even if up to date')


def build_unit_parser(app=None, prog=None):
    if app is not None:
        description = f"Install or update {app.display_name} on Manjaro Linux."
        epilog = UNIT_DESCRIPTION.format(display_name=app.display_name)
        if app.notes:
            # Package names contain hyphens and must stay on one line
            epilog += "\n" + "\n".join(
                textwrap.fill(note, 72, initial_indent='Note: ', break_on_hyphens=False) for note in app.notes
            )
    else:
        description = "Install or update an application on Manjaro Linux."
        epilog = None

    parser = InstallerArgumentParser(
        prog=prog,
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    if app is None:
        parser.add_argument('app', help='Application name from the catalogue (e.g. fish, vscode)')
    _add_common_flags(parser)
    return parser


def build_batch_parser(prog=None):
    parser = InstallerArgumentParser(
        prog=prog,
        description=BATCH_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    _add_common_flags(parser)
    parser.add_argument('--continue', dest='continue_on_error', action='store_true',
                        help="Continue on errors (don't stop if one script fails)")
    parser.add_argument('--list', dest='list_only', action='store_true',
                        help='List all available install scripts and exit')
    parser.add_argument('--units-dir', type=Path, default=None,
                        help='Directory scanned for *-install scripts')
    return parser


def unit_main(app_name=None, argv=None, confirm=None, shell_executor=None):
    """Entry point of a single install unit

    Args:
        app_name: Catalogue entry handled by this unit; when None it is taken
            from the command line (the generic 'app-install' command)
        argv: Command line arguments, defaults to sys.argv[1:]
        confirm: Prompt capability for helper installation, defaults to the
            terminal when stdin is interactive
        shell_executor: ShellExecutor override

    Returns:
        Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        env_config = ConfigLoader.load_environment_config()
    except InstallerError as e:
        setup_logging()
        logger.error(str(e))
        return 1

    setup_logging(env_config['debug_mode'], env_config['log_file'])

    try:
        app = get_app(app_name) if app_name else None
        args = _parse(build_unit_parser(app), argv)
        if app is None:
            app = get_app(args.app)

        options = RunOptions(dry_run=args.dry_run, force=args.force)
        if options.dry_run:
            logger.info("DRY RUN MODE - No actual changes will be made")

        if shell_executor is None:
            shell_executor = ShellExecutor(env_config['debug_mode'])
        if confirm is None:
            confirm = default_confirm()

        run_unit(app, shell_executor, options, confirm=confirm, aur_query=env_config['aur_query'])
        return 0
    except InstallerError as e:
        logger.error(str(e))
        return 1


def orchestrator_main(argv=None, units_dir=None, unit_runner=None):
    """Entry point of the batch runner ('install-all')

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]
        units_dir: Directory to scan; --units-dir and APPINSTALL_UNITS_DIR
            take precedence, the bundled units directory is the fallback
        unit_runner: UnitRunner override

    Returns:
        Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        env_config = ConfigLoader.load_environment_config()
    except InstallerError as e:
        setup_logging()
        logger.error(str(e))
        return 1

    setup_logging(env_config['debug_mode'], env_config['log_file'])

    try:
        args = _parse(build_batch_parser(), argv)
        root_dir = (
            args.units_dir
            or env_config['units_dir']
            or units_dir
            or ConfigLoader.get_default_units_dir()
        )
        source = DirectoryUnitSource(root_dir)

        if unit_runner is None:
            unit_runner = SubprocessUnitRunner(ShellExecutor(env_config['debug_mode']))
        runner = BatchRunner(unit_runner)

        if args.list_only:
            return runner.list_units(source)

        options = RunOptions(
            dry_run=args.dry_run,
            force=args.force,
            continue_on_error=args.continue_on_error,
        )

        logger.info("Starting batch installation of all applications...")
        if options.dry_run:
            logger.info("DRY RUN MODE - No actual changes will be made")
        if options.continue_on_error:
            logger.info("CONTINUE MODE - Will attempt all scripts even if some fail")

        summary = runner.run_source(source, options)
        if summary.exit_status == 0:
            logger.info("Batch installation completed successfully!")
        elif not summary.aborted:
            logger.error(f"{len(summary.failed)} install script(s) failed: {', '.join(summary.failed)}")
        return summary.exit_status
    except InstallerError as e:
        logger.error(str(e))
        return 1


def app_install():
    sys.exit(unit_main())


def install_all():
    sys.exit(orchestrator_main())

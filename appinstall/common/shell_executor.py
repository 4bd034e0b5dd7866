"""
Shell Executor Module - Runs external commands with logging
"""

import os
import shutil
import subprocess
import logging

logger = logging.getLogger(__name__)


class ShellExecutor:
    """Runs external commands one at a time and waits for each to exit.

    There are no retries and no timeout: a hung package manager blocks the
    installer. Callers inspect the exit status themselves.
    """

    def __init__(self, debug_mode: bool = False):
        self.debug_mode = debug_mode

    def which(self, name):
        """Return the absolute path of an executable on PATH, or None"""
        return shutil.which(name)

    def run_command(self, cmd, cwd=None, capture=True, log_cmd=False, extra_env=None):
        """Run command with logging and optional extra environment variables

        Args:
            cmd: Command as an argument list
            cwd: Working directory for the command
            capture: Capture stdout/stderr as text instead of inheriting the terminal
            log_cmd: Log the command line at INFO level
            extra_env: Variables added on top of the current environment

        Returns:
            subprocess.CompletedProcess

        Raises:
            OSError: if the command cannot be started at all
        """
        cmd_text = ' '.join(cmd)
        if log_cmd:
            logger.info(f"RUNNING COMMAND: {cmd_text}")
        elif self.debug_mode:
            logger.debug(f"RUNNING COMMAND: {cmd_text}")

        env = os.environ.copy()
        if extra_env:
            env.update(extra_env)

        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture,
            text=True,
            env=env
        )

        if self.debug_mode:
            if capture and result.stdout:
                logger.debug(f"STDOUT: {result.stdout[:500]}")
            if capture and result.stderr:
                logger.debug(f"STDERR: {result.stderr[:500]}")
            logger.debug(f"EXIT CODE: {result.returncode}")

        return result

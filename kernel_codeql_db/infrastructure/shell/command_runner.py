"""Synchronous execution of external commands."""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from kernel_codeql_db.domain.models import ExternalCommand, StepResult

logger = logging.getLogger(__name__)

# Shell conventions for "not executable" and "command not found".
EXIT_NOT_EXECUTABLE = 126
EXIT_COMMAND_NOT_FOUND = 127
# Shell convention for a process killed by signal N: 128 + N.
EXIT_SIGNAL_BASE = 128


class CommandRunner:
    """Runs commands to completion without a shell."""

    def run(
        self,
        step: str,
        command: ExternalCommand,
        cwd: Optional[Path] = None,
        quiet: bool = False,
    ) -> StepResult:
        """Run ``command`` and report its exit status.

        Output is inherited from this process unless ``quiet`` is set, in
        which case both streams are discarded. Never raises on a non-zero
        exit status.

        Args:
            step: Human-readable step name used in results and logs
            command: The command to execute
            cwd: Working directory (defaults to the current directory)
            quiet: Discard stdout and stderr

        Returns:
            StepResult carrying the exit status
        """
        display = command.display()
        logger.debug(f"[{step}] running: {display} (cwd={cwd or '.'})")

        sink = subprocess.DEVNULL if quiet else None
        try:
            completed = subprocess.run(
                command.argv,
                cwd=str(cwd) if cwd else None,
                stdout=sink,
                stderr=sink,
            )
        except FileNotFoundError:
            logger.error(f"[{step}] executable not found: {command.program}")
            return StepResult(
                step=step,
                exit_code=EXIT_COMMAND_NOT_FOUND,
                command=display,
                message=f"executable not found: {command.program}",
            )
        except PermissionError as e:
            logger.error(f"[{step}] cannot execute {command.program}: {e}")
            return StepResult(
                step=step,
                exit_code=EXIT_NOT_EXECUTABLE,
                command=display,
                message=f"cannot execute {command.program}: {e}",
            )

        exit_code = completed.returncode
        if exit_code < 0:
            logger.error(f"[{step}] terminated by signal {-exit_code}")
            exit_code = EXIT_SIGNAL_BASE - exit_code
        logger.debug(f"[{step}] exit code {exit_code}")
        return StepResult(step=step, exit_code=exit_code, command=display)

    @staticmethod
    def which(program: str) -> Optional[str]:
        """Resolve ``program`` on PATH, or return None."""
        return shutil.which(program)

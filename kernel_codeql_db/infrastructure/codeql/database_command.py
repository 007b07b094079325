"""Construction of ``codeql database create`` invocations."""

import logging
import os
from pathlib import Path
from typing import Optional

from kernel_codeql_db.domain.exceptions import ToolNotFoundError
from kernel_codeql_db.domain.models import BuildTarget, ExternalCommand
from kernel_codeql_db.infrastructure.shell.command_runner import CommandRunner

logger = logging.getLogger(__name__)


class CodeQLDatabaseCommandBuilder:
    """Builds CodeQL database-creation commands for kernel targets."""

    def __init__(self, codeql_bin: str = "codeql", language: str = "cpp"):
        self.codeql_bin = codeql_bin
        self.language = language

    def ensure_available(self, runner: Optional[CommandRunner] = None) -> str:
        """Resolve the CodeQL executable or raise ToolNotFoundError.

        The resolved path is made absolute and kept for every command built
        afterwards, since commands run from the kernel tree rather than the
        invoking directory.
        """
        resolved = (runner or CommandRunner()).which(self.codeql_bin)
        if not resolved:
            raise ToolNotFoundError(
                self.codeql_bin,
                f"'{self.codeql_bin}' command not found. "
                "Please ensure CodeQL is installed and configured in your PATH.",
            )
        self.codeql_bin = os.path.abspath(resolved)
        logger.debug(f"Using CodeQL at {self.codeql_bin}")
        return self.codeql_bin

    def traced_build(self, db_path: str, build_target: BuildTarget) -> ExternalCommand:
        """Database created by tracing ``build_target``'s make invocation."""
        return self._create(
            db_path,
            f"--command={build_target.build_command.display()}",
        )

    def source_scan(self, db_path: str, source_root: Path) -> ExternalCommand:
        """Database created from source text only (``--build-mode=none``)."""
        return self._create(
            db_path,
            f"--source-root={source_root}",
            "--build-mode=none",
        )

    def _create(self, db_path: str, *mode_args: str) -> ExternalCommand:
        return ExternalCommand(
            self.codeql_bin,
            (
                "database",
                "create",
                "--overwrite",
                db_path,
                f"--language={self.language}",
                *mode_args,
            ),
        )

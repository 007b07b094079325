"""Validation of positional command-line arguments."""

import logging
from typing import Optional, Sequence

from kernel_codeql_db.domain.exceptions import UsageError
from kernel_codeql_db.domain.models import AnalysisRequest
from kernel_codeql_db.domain.value_objects import BuildMode, VersionChoice
from kernel_codeql_db.infrastructure.codeql.database_command import CodeQLDatabaseCommandBuilder
from kernel_codeql_db.infrastructure.shell.command_runner import CommandRunner

logger = logging.getLogger(__name__)

USAGE = "<ver> <commit> <cve> <db_path> <mode> <target> [config]"
REQUIRED_ARGUMENTS = 6
MAX_ARGUMENTS = 7


class InputValidator:
    """Turns raw positional arguments into an AnalysisRequest.

    Checks run in a fixed order and all of them finish before the kernel tree
    is touched:

    1. argument count
    2. CodeQL availability
    3. version choice
    4. build mode
    5. config option presence in build mode
    """

    def __init__(
        self,
        command_builder: CodeQLDatabaseCommandBuilder,
        runner: Optional[CommandRunner] = None,
        prog: str = "analyze-kernel",
    ):
        self.command_builder = command_builder
        self.runner = runner or CommandRunner()
        self.prog = prog

    def validate(self, arguments: Sequence[str]) -> AnalysisRequest:
        """Validate ``arguments`` and build the request.

        Raises:
            UsageError: wrong count, bad selector or missing config option
            ToolNotFoundError: CodeQL is not installed
        """
        if len(arguments) < REQUIRED_ARGUMENTS:
            raise UsageError(
                "Incorrect number of arguments.\n"
                f"Usage: {self.prog} {USAGE}"
            )
        if len(arguments) > MAX_ARGUMENTS:
            logger.debug(f"Ignoring extra arguments: {list(arguments[MAX_ARGUMENTS:])}")

        self.command_builder.ensure_available(self.runner)

        version_raw, commit_hash, cve_name, db_base_path, mode_raw, target_path = arguments[:6]
        config_option = arguments[6] if len(arguments) > 6 else None

        version_choice = self._parse_version(version_raw)
        build_mode = self._parse_mode(mode_raw)

        if build_mode is BuildMode.BUILD and not config_option:
            raise UsageError("The [config] argument is required for Build Mode (Mode 1).")

        try:
            return AnalysisRequest(
                version_choice=version_choice,
                commit_hash=commit_hash,
                cve_name=cve_name,
                db_base_path=db_base_path,
                build_mode=build_mode,
                target_path=target_path,
                config_option=config_option or None,
            )
        except ValueError as e:
            raise UsageError(str(e)) from e

    @staticmethod
    def _parse_version(raw: str) -> VersionChoice:
        try:
            return VersionChoice(raw)
        except ValueError:
            raise UsageError(
                f"Invalid version choice '{raw}'. Must be '1' (before fix) or '2' (after fix)."
            ) from None

    @staticmethod
    def _parse_mode(raw: str) -> BuildMode:
        try:
            return BuildMode(raw)
        except ValueError:
            raise UsageError(
                f"Invalid build mode '{raw}'. Must be '1' (Build) or '2' (No-Build)."
            ) from None

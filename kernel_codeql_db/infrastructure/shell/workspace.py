"""The kernel source tree as an explicit, injectable resource."""

import logging
from pathlib import Path
from typing import Optional

from kernel_codeql_db.domain.models import ExternalCommand, StepResult
from kernel_codeql_db.domain.services.targets import MAKE_PROGRAM
from kernel_codeql_db.infrastructure.shell.command_runner import CommandRunner

logger = logging.getLogger(__name__)

GIT_PROGRAM = "git"
KCONFIG_SCRIPT = "./scripts/config"


class KernelWorkspace:
    """A kernel checkout whose working tree is mutated in place.

    Every operation runs with the tree root as working directory. Concurrent
    use of the same tree is unsupported; a clean tree is assumed.
    """

    def __init__(self, root: Path, runner: Optional[CommandRunner] = None):
        self.root = Path(root)
        self.runner = runner or CommandRunner()

    def checkout(self, revision: str) -> StepResult:
        """Make the working tree match ``revision``."""
        return self._run("git checkout", ExternalCommand(GIT_PROGRAM, ("checkout", revision)))

    def clean(self) -> StepResult:
        """Remove generated files and configuration (``make mrproper``)."""
        return self._run("make mrproper", ExternalCommand(MAKE_PROGRAM, ("mrproper",)), quiet=True)

    def defconfig(self) -> StepResult:
        """Generate the default configuration (``make defconfig``)."""
        return self._run("make defconfig", ExternalCommand(MAKE_PROGRAM, ("defconfig",)), quiet=True)

    def enable_config(self, option: str) -> StepResult:
        """Enable a single Kconfig option in the generated ``.config``."""
        return self._run(
            "scripts/config --enable",
            ExternalCommand(KCONFIG_SCRIPT, ("--enable", option)),
        )

    def execute(self, step: str, command: ExternalCommand) -> StepResult:
        """Run an arbitrary command in the tree with inherited output."""
        return self._run(step, command)

    def source_root(self, target_path: str) -> Path:
        """Absolute location of ``target_path`` inside the tree.

        The path is always joined under the root, even when it starts with a
        slash.
        """
        return Path(f"{self.root.absolute()}/{target_path}")

    def is_directory(self, path: Path) -> bool:
        return path.is_dir()

    def _run(self, step: str, command: ExternalCommand, quiet: bool = False) -> StepResult:
        result = self.runner.run(step, command, cwd=self.root, quiet=quiet)
        if not result.success:
            logger.warning(f"{step} failed with exit code {result.exit_code}")
        return result

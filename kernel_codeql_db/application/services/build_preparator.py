"""Kernel configuration ahead of a traced build."""

import logging
from typing import Callable, List

import click

from kernel_codeql_db.domain.models import StepResult
from kernel_codeql_db.infrastructure.shell.workspace import KernelWorkspace

logger = logging.getLogger(__name__)


class BuildPreparator:
    """Resets the tree, generates defconfig and enables one option.

    Steps run in order and stop at the first failure. Nothing is reverted.
    """

    def __init__(self, echo: Callable[[str], None] = click.echo):
        self.echo = echo

    def prepare(self, workspace: KernelWorkspace, config_option: str) -> List[StepResult]:
        """Run the preparation steps.

        Returns:
            Results of the steps that ran; the last one failed if any did
        """
        steps = [
            ("Cleaning environment (make mrproper)...", workspace.clean),
            ("Generating default config (make defconfig)...", workspace.defconfig),
            (f"Enabling specified config: {config_option}...",
             lambda: workspace.enable_config(config_option)),
        ]

        results: List[StepResult] = []
        for description, action in steps:
            self.echo(f"  - {description}")
            result = action()
            results.append(result)
            if not result.success:
                logger.error(f"Kernel preparation stopped at {result.step}")
                return results

        self.echo("Kernel preparation complete.")
        return results

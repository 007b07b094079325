"""Main orchestrator service that coordinates the database build workflow."""

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

import click

from kernel_codeql_db.application.dto.analysis_data import AnalysisOutput, AnalysisPlan
from kernel_codeql_db.application.services.build_preparator import BuildPreparator
from kernel_codeql_db.domain.exceptions import DomainException, SourceDirectoryNotFoundError
from kernel_codeql_db.domain.models import AnalysisRequest, ExternalCommand
from kernel_codeql_db.domain.services.naming import (
    build_database_path,
    build_output_identifier,
    resolve_revision,
)
from kernel_codeql_db.domain.services.targets import resolve_build_target
from kernel_codeql_db.infrastructure.codeql.database_command import CodeQLDatabaseCommandBuilder
from kernel_codeql_db.infrastructure.shell.workspace import KernelWorkspace

logger = logging.getLogger(__name__)

RULE = "=" * 50


class KernelAnalysisOrchestrator:
    """Orchestrates the 3-step kernel database workflow.

    1. Check out the target commit
    2. Prepare the kernel configuration (build mode only)
    3. Create the CodeQL database

    Each step runs once. The first failing step ends the run and its exit
    status becomes the run's exit status.
    """

    def __init__(
        self,
        command_builder: CodeQLDatabaseCommandBuilder,
        make_flags: Sequence[str] = ("LLVM=1",),
        build_preparator: Optional[BuildPreparator] = None,
        echo: Callable[[str], None] = click.echo,
    ):
        """Initialize the orchestrator.

        Args:
            command_builder: Builder for CodeQL database commands
            make_flags: Flags passed to make ahead of the build target
            build_preparator: Service running the kernel configuration steps
            echo: Sink for progress messages
        """
        self.command_builder = command_builder
        self.make_flags = tuple(make_flags)
        self.build_preparator = build_preparator or BuildPreparator(echo=echo)
        self.echo = echo

    @staticmethod
    def plan(request: AnalysisRequest) -> AnalysisPlan:
        """Derive the revision and database location for ``request``.

        A relative database base path is anchored at the invoking directory,
        not the kernel tree CodeQL runs in.
        """
        db_name = build_output_identifier(
            request.cve_name,
            request.build_mode,
            request.version_choice,
        )
        db_base_path = request.db_base_path
        if not Path(db_base_path).is_absolute():
            db_base_path = str(Path.cwd() / db_base_path)
        return AnalysisPlan(
            request=request,
            target_revision=resolve_revision(request.commit_hash, request.version_choice),
            db_name=db_name,
            db_path=build_database_path(db_base_path, db_name),
        )

    def execute(self, request: AnalysisRequest, workspace: KernelWorkspace) -> AnalysisOutput:
        """Execute the complete workflow against ``workspace``.

        Args:
            request: Validated invocation parameters
            workspace: The kernel tree to check out, configure and analyze

        Returns:
            AnalysisOutput describing every step that ran
        """
        output = AnalysisOutput(plan=self.plan(request))
        self._print_banner(output.plan)

        try:
            self._run(request, workspace, output)
        except DomainException as e:
            logger.error(f"[{request.cve_name}] {e}")
            output.success = False
            output.exit_code = e.exit_code
            output.error_message = str(e)
        return output

    def _run(self, request: AnalysisRequest, workspace: KernelWorkspace, output: AnalysisOutput) -> None:
        plan = output.plan

        self.echo("Step 1/3: Checking out target commit...")
        checkout = workspace.checkout(plan.target_revision)
        output.steps.append(checkout)
        checkout.raise_for_status()

        if request.is_build_mode:
            self.echo("\nStep 2/3: Preparing kernel for build...")
            results = self.build_preparator.prepare(workspace, request.config_option)
            output.steps.extend(results)
            for result in results:
                result.raise_for_status()
        else:
            self.echo("\nStep 2/3: Skipping kernel build preparation (No-Build Mode).")

        self.echo("\nStep 3/3: Creating CodeQL database...")
        self.echo(f"  Mode: {request.build_mode.label}")
        output.command = self._build_command(request, workspace, output)

        self.echo("  Executing CodeQL command...")
        result = workspace.execute("codeql database create", output.command)
        output.steps.append(result)
        output.exit_code = result.exit_code
        output.success = result.success
        if not result.success:
            output.error_message = f"CodeQL exited with status {result.exit_code}"

    def _build_command(
        self,
        request: AnalysisRequest,
        workspace: KernelWorkspace,
        output: AnalysisOutput,
    ) -> ExternalCommand:
        if request.is_build_mode:
            target = resolve_build_target(request.target_path, self.make_flags)
            output.build_target = target
            if target.was_converted:
                self.echo(
                    f"  Info: Converted input '{target.converted_from}' "
                    f"to build target '{target.make_target}'"
                )
            self.echo(f"  Build Command:     {target.build_command.display()}")
            return self.command_builder.traced_build(output.db_path, target)

        source_root = workspace.source_root(request.target_path)
        if not workspace.is_directory(source_root):
            raise SourceDirectoryNotFoundError(str(source_root))
        self.echo(f"  Source Directory:  {source_root}")
        return self.command_builder.source_scan(output.db_path, source_root)

    def _print_banner(self, plan: AnalysisPlan) -> None:
        request = plan.request
        self.echo(RULE)
        self.echo("Starting Kernel Analysis Workflow")
        self.echo(f"  CVE Name:          {request.cve_name}")
        self.echo(f"  Fix Commit:        {request.commit_hash}")
        self.echo(f"  Target Commit:     {plan.target_revision} ({request.version_choice.label})")
        self.echo(f"  Database Path:     {plan.db_path}")
        self.echo(RULE)

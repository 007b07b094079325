"""Command-line interface for building kernel CodeQL databases."""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from dotenv import load_dotenv

from kernel_codeql_db.application.dto.analysis_data import AnalysisOutput
from kernel_codeql_db.application.services.analysis_orchestrator import KernelAnalysisOrchestrator
from kernel_codeql_db.application.services.input_validator import USAGE, InputValidator
from kernel_codeql_db.domain.exceptions import DomainException
from kernel_codeql_db.infrastructure.codeql.database_command import CodeQLDatabaseCommandBuilder
from kernel_codeql_db.infrastructure.config.settings import AnalyzerSettings
from kernel_codeql_db.infrastructure.shell.workspace import KernelWorkspace

__version__ = "0.1.0"

PROG_NAME = "analyze-kernel"


@click.command(
    name=PROG_NAME,
    epilog=(
        "<ver>: '1' analyzes the commit before the fix (commit~1), '2' the fix commit itself.  "
        "<mode>: '1' traces a build of the target (.c file, .o file or module directory), "
        "'2' scans the target source directory without building.  "
        "[config]: kernel CONFIG option to enable, required for mode 1."
    ),
)
@click.version_option(version=__version__)
@click.argument('arguments', nargs=-1, metavar=USAGE)
@click.option(
    '--workspace',
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help='Kernel source tree (defaults to the current directory)',
)
@click.option(
    '--codeql',
    'codeql_bin',
    help='CodeQL executable (overrides KERNEL_DB_CODEQL)',
)
@click.option(
    '--language',
    help='CodeQL extractor language (overrides KERNEL_DB_LANGUAGE)',
)
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
def cli(
    arguments: Tuple[str, ...],
    workspace: Optional[Path],
    codeql_bin: Optional[str],
    language: Optional[str],
    verbose: bool,
):
    """Check out a kernel revision and create a CodeQL database for a CVE."""
    _configure_logging(verbose)

    settings = AnalyzerSettings(codeql_bin=codeql_bin, language=language)
    logging.getLogger(__name__).debug(f"Loaded {settings}")

    command_builder = CodeQLDatabaseCommandBuilder(
        codeql_bin=settings.codeql_bin,
        language=settings.language,
    )
    validator = InputValidator(command_builder, prog=PROG_NAME)

    try:
        request = validator.validate(arguments)
    except DomainException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)

    orchestrator = KernelAnalysisOrchestrator(
        command_builder=command_builder,
        make_flags=settings.make_flags,
    )
    output = orchestrator.execute(request, KernelWorkspace(workspace or Path.cwd()))

    _report(output)
    sys.exit(output.exit_code)


def _report(output: AnalysisOutput) -> None:
    """Print the final banner for a finished run."""
    if output.database_step is None:
        click.echo(f"Error: {output.error_message}", err=True)
        return

    if output.success:
        click.secho("\n✅ Workflow completed successfully!", fg='green')
        click.echo(f"Database saved to: {output.db_path}")
    else:
        click.secho("\n❌ Workflow failed during database creation.", fg='red', err=True)
        click.echo(
            "Please check the error messages, kernel configuration, and command arguments.",
            err=True,
        )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        force=True,
    )


def main():
    """Entry point for the CLI."""
    load_dotenv()
    cli()


if __name__ == '__main__':
    main()

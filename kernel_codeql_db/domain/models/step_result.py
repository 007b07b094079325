"""Result model for external workflow steps."""

from dataclasses import dataclass
from typing import Optional

from kernel_codeql_db.domain.exceptions import StepExecutionError


@dataclass(frozen=True)
class StepResult:
    """Outcome of running one external command."""

    step: str
    exit_code: int
    command: str = ''
    message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    def raise_for_status(self) -> None:
        if not self.success:
            raise StepExecutionError(
                self.step,
                self.exit_code,
                self.message or f"command exited with status {self.exit_code}: {self.command}",
            )

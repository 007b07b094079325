"""Data Transfer Objects for the analysis workflow."""

from dataclasses import dataclass, field
from typing import List, Optional

from kernel_codeql_db.domain.models import AnalysisRequest, BuildTarget, ExternalCommand, StepResult


@dataclass(frozen=True)
class AnalysisPlan:
    """Names derived from a request before anything touches the tree."""

    request: AnalysisRequest
    target_revision: str
    db_name: str
    db_path: str


@dataclass
class AnalysisOutput:
    """Output from the analysis orchestrator."""

    plan: AnalysisPlan
    steps: List[StepResult] = field(default_factory=list)
    build_target: Optional[BuildTarget] = None
    command: Optional[ExternalCommand] = None
    success: bool = False
    exit_code: int = 1
    error_message: Optional[str] = None

    @property
    def db_path(self) -> str:
        return self.plan.db_path

    @property
    def database_step(self) -> Optional[StepResult]:
        """Result of the CodeQL invocation, if it ran."""
        if self.command is None or not self.steps:
            return None
        return self.steps[-1]

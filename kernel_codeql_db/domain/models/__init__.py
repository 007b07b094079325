"""Domain models package."""

from .command import BuildTarget, ExternalCommand
from .request import AnalysisRequest
from .step_result import StepResult

__all__ = [
    'AnalysisRequest',
    'BuildTarget',
    'ExternalCommand',
    'StepResult',
]

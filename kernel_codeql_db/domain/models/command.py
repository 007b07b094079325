"""Structured external command models."""

import shlex
from dataclasses import dataclass, field
from typing import List, Tuple

from kernel_codeql_db.domain.value_objects import TargetKind


@dataclass(frozen=True)
class ExternalCommand:
    """A program and its arguments, never interpolated into a shell string."""

    program: str
    args: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]

    def display(self) -> str:
        """Render the command for humans; quoting is cosmetic only."""
        return ' '.join(shlex.quote(part) for part in self.argv)


@dataclass(frozen=True)
class BuildTarget:
    """The make target CodeQL should observe in build mode."""

    kind: TargetKind
    make_target: str
    build_command: ExternalCommand
    converted_from: str = ''

    @property
    def was_converted(self) -> bool:
        return bool(self.converted_from)

"""Core domain model for a single kernel analysis invocation."""

from dataclasses import dataclass
from typing import Optional

from kernel_codeql_db.domain.value_objects import BuildMode, VersionChoice


@dataclass(frozen=True)
class AnalysisRequest:
    """Validated invocation parameters for one database build."""

    version_choice: VersionChoice
    commit_hash: str
    cve_name: str
    db_base_path: str
    build_mode: BuildMode
    target_path: str
    config_option: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.commit_hash:
            raise ValueError("commit_hash cannot be empty")
        if not self.cve_name:
            raise ValueError("cve_name cannot be empty")
        if not self.target_path:
            raise ValueError("target_path cannot be empty")
        if self.build_mode is BuildMode.BUILD and not self.config_option:
            raise ValueError("config_option is required in build mode")
        if self.build_mode is BuildMode.NO_BUILD and self.config_option is not None:
            # The option has no meaning without a kernel build.
            object.__setattr__(self, 'config_option', None)

    @property
    def is_build_mode(self) -> bool:
        return self.build_mode is BuildMode.BUILD

"""Environment-driven settings for the analyzer."""

import os
import shlex
from typing import Optional, Tuple

ENV_CODEQL = "KERNEL_DB_CODEQL"
ENV_LANGUAGE = "KERNEL_DB_LANGUAGE"
ENV_MAKE_FLAGS = "KERNEL_DB_MAKE_FLAGS"

DEFAULT_CODEQL = "codeql"
DEFAULT_LANGUAGE = "cpp"
DEFAULT_MAKE_FLAGS = "LLVM=1"


class AnalyzerSettings:
    """Settings for locating CodeQL and building kernel targets."""

    def __init__(
        self,
        codeql_bin: Optional[str] = None,
        language: Optional[str] = None,
        make_flags: Optional[str] = None,
    ):
        self.codeql_bin = codeql_bin or os.environ.get(ENV_CODEQL) or DEFAULT_CODEQL
        self.language = language or os.environ.get(ENV_LANGUAGE) or DEFAULT_LANGUAGE
        self.make_flags: Tuple[str, ...] = self._parse_make_flags(
            make_flags if make_flags is not None else os.environ.get(ENV_MAKE_FLAGS)
        )

    @staticmethod
    def _parse_make_flags(raw: Optional[str]) -> Tuple[str, ...]:
        """Split a flag string like ``"LLVM=1 W=1"``; unset means the default."""
        if raw is None:
            raw = DEFAULT_MAKE_FLAGS
        return tuple(shlex.split(raw))

    def __repr__(self) -> str:
        return (
            f"AnalyzerSettings(codeql_bin={self.codeql_bin!r}, "
            f"language={self.language!r}, make_flags={self.make_flags!r})"
        )

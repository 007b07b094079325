"""Selector value objects and enumerations."""

from enum import Enum


class VersionChoice(str, Enum):
    """Which side of the fix commit to analyze."""

    BEFORE_FIX = "1"
    AFTER_FIX = "2"

    @property
    def label(self) -> str:
        return "before fix" if self is VersionChoice.BEFORE_FIX else "after fix"


class BuildMode(str, Enum):
    """How CodeQL observes the kernel sources."""

    BUILD = "1"
    NO_BUILD = "2"

    @property
    def label(self) -> str:
        return "Build Mode" if self is BuildMode.BUILD else "No-Build Mode"


class TargetKind(str, Enum):
    """Kind of make target derived from a build-mode target path."""

    OBJECT = "object"
    MODULE = "module"


# Git suffix selecting the immediate ancestor of a revision.
PARENT_REVISION_SUFFIX = "~1"

SOURCE_SUFFIX = ".c"
OBJECT_SUFFIX = ".o"

"""Domain value objects package."""

from .selectors import (
    BuildMode,
    OBJECT_SUFFIX,
    PARENT_REVISION_SUFFIX,
    SOURCE_SUFFIX,
    TargetKind,
    VersionChoice,
)

__all__ = [
    'BuildMode',
    'OBJECT_SUFFIX',
    'PARENT_REVISION_SUFFIX',
    'SOURCE_SUFFIX',
    'TargetKind',
    'VersionChoice',
]

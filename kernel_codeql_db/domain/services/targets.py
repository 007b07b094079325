"""Classification of build-mode target paths into make invocations."""

from typing import Sequence

from kernel_codeql_db.domain.models import BuildTarget, ExternalCommand
from kernel_codeql_db.domain.value_objects import OBJECT_SUFFIX, SOURCE_SUFFIX, TargetKind

MAKE_PROGRAM = "make"


def normalize_module_dir(target_path: str) -> str:
    """Collapse any trailing slashes into exactly one."""
    return target_path.rstrip('/') + '/'


def resolve_build_target(target_path: str, make_flags: Sequence[str]) -> BuildTarget:
    """Derive the make invocation CodeQL should trace for ``target_path``.

    ``foo.c`` is built as ``foo.o``, ``foo.o`` is built as is, and anything
    else is treated as an external module directory (``M=dir/``).
    """
    flags = tuple(make_flags)

    if target_path.endswith(SOURCE_SUFFIX):
        object_path = target_path[:-len(SOURCE_SUFFIX)] + OBJECT_SUFFIX
        return BuildTarget(
            kind=TargetKind.OBJECT,
            make_target=object_path,
            build_command=ExternalCommand(MAKE_PROGRAM, flags + (object_path,)),
            converted_from=target_path,
        )

    if target_path.endswith(OBJECT_SUFFIX):
        return BuildTarget(
            kind=TargetKind.OBJECT,
            make_target=target_path,
            build_command=ExternalCommand(MAKE_PROGRAM, flags + (target_path,)),
        )

    module_dir = normalize_module_dir(target_path)
    return BuildTarget(
        kind=TargetKind.MODULE,
        make_target=module_dir,
        build_command=ExternalCommand(MAKE_PROGRAM, flags + (f"M={module_dir}",)),
    )

"""Deterministic revision and database naming rules."""

import re

from kernel_codeql_db.domain.value_objects import (
    BuildMode,
    PARENT_REVISION_SUFFIX,
    VersionChoice,
)

_CVE_PREFIX = re.compile(r'^cve-', re.IGNORECASE)

DB_NAME_PREFIX = "db_"
NO_BUILD_SUFFIX = "_none"
FIXED_SUFFIX = "_fixed"


def resolve_revision(commit_hash: str, version_choice: VersionChoice) -> str:
    """Return the revision to check out for the requested side of the fix.

    The revision is not checked for existence; a bad hash surfaces as a
    checkout failure.
    """
    if version_choice is VersionChoice.BEFORE_FIX:
        return f"{commit_hash}{PARENT_REVISION_SUFFIX}"
    return commit_hash


def normalize_cve_name(cve_name: str) -> str:
    """Strip a leading ``cve-`` (any case) and turn hyphens into underscores."""
    return _CVE_PREFIX.sub('', cve_name, count=1).replace('-', '_')


def build_output_identifier(
    cve_name: str,
    build_mode: BuildMode,
    version_choice: VersionChoice,
) -> str:
    """Build the database directory name.

    Examples:
        CVE-2025-38245, build, before fix   -> db_2025_38245
        CVE-2025-38245, no-build, after fix -> db_2025_38245_none_fixed
    """
    name = f"{DB_NAME_PREFIX}{normalize_cve_name(cve_name)}"
    if build_mode is BuildMode.NO_BUILD:
        name += NO_BUILD_SUFFIX
    if version_choice is VersionChoice.AFTER_FIX:
        name += FIXED_SUFFIX
    return name


def build_database_path(db_base_path: str, identifier: str) -> str:
    return f"{db_base_path}/{identifier}"

"""Unit tests for revision and database naming rules."""

import pytest

from kernel_codeql_db.domain.services.naming import (
    build_database_path,
    build_output_identifier,
    normalize_cve_name,
    resolve_revision,
)
from kernel_codeql_db.domain.value_objects import BuildMode, VersionChoice


class TestResolveRevision:
    """Tests for resolve_revision."""

    def test_before_fix_uses_parent(self):
        assert resolve_revision("abc123", VersionChoice.BEFORE_FIX) == "abc123~1"

    def test_after_fix_uses_commit(self):
        assert resolve_revision("abc123", VersionChoice.AFTER_FIX) == "abc123"

    def test_revision_is_not_validated(self):
        """Unknown revisions pass through untouched."""
        assert resolve_revision("not-a-hash", VersionChoice.BEFORE_FIX) == "not-a-hash~1"


class TestNormalizeCveName:
    """Tests for normalize_cve_name."""

    @pytest.mark.parametrize("cve", ["CVE-2025-38245", "cve-2025-38245", "Cve-2025-38245"])
    def test_prefix_stripped_in_any_case(self, cve):
        assert normalize_cve_name(cve) == "2025_38245"

    def test_only_leading_prefix_stripped(self):
        assert normalize_cve_name("CVE-2025-cve-1") == "2025_cve_1"

    def test_name_without_prefix(self):
        assert normalize_cve_name("GHSA-xxxx-yyyy") == "GHSA_xxxx_yyyy"


class TestBuildOutputIdentifier:
    """Tests for the database naming convention."""

    @pytest.mark.parametrize(
        "mode,version,expected",
        [
            (BuildMode.BUILD, VersionChoice.BEFORE_FIX, "db_2025_38245"),
            (BuildMode.BUILD, VersionChoice.AFTER_FIX, "db_2025_38245_fixed"),
            (BuildMode.NO_BUILD, VersionChoice.BEFORE_FIX, "db_2025_38245_none"),
            (BuildMode.NO_BUILD, VersionChoice.AFTER_FIX, "db_2025_38245_none_fixed"),
        ],
    )
    def test_naming_convention(self, mode, version, expected):
        assert build_output_identifier("CVE-2025-38245", mode, version) == expected

    def test_none_suffix_precedes_fixed(self):
        name = build_output_identifier("cve-2024-1", BuildMode.NO_BUILD, VersionChoice.AFTER_FIX)
        assert name.endswith("_none_fixed")
        assert "_fixed_none" not in name

    def test_database_path_joins_base(self):
        assert build_database_path("/dbs", "db_2025_38245") == "/dbs/db_2025_38245"

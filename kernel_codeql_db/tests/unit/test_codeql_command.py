"""Unit tests for CodeQL command construction."""

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from kernel_codeql_db.domain.exceptions import ToolNotFoundError
from kernel_codeql_db.domain.services.targets import resolve_build_target
from kernel_codeql_db.infrastructure.codeql.database_command import CodeQLDatabaseCommandBuilder
from kernel_codeql_db.infrastructure.shell.command_runner import CommandRunner


class TestCodeQLDatabaseCommandBuilder:
    """Tests for CodeQLDatabaseCommandBuilder."""

    def test_traced_build_command(self):
        builder = CodeQLDatabaseCommandBuilder()
        target = resolve_build_target("net/atm/mpoa.c", ("LLVM=1",))

        command = builder.traced_build("/dbs/db_2025_38245", target)

        assert command.argv == [
            "codeql",
            "database",
            "create",
            "--overwrite",
            "/dbs/db_2025_38245",
            "--language=cpp",
            "--command=make LLVM=1 net/atm/mpoa.o",
        ]

    def test_module_build_command(self):
        builder = CodeQLDatabaseCommandBuilder()
        target = resolve_build_target("drivers/net", ("LLVM=1",))

        command = builder.traced_build("/dbs/db_x", target)

        assert command.argv[-1] == "--command=make LLVM=1 M=drivers/net/"

    def test_source_scan_command(self):
        builder = CodeQLDatabaseCommandBuilder()

        command = builder.source_scan("/dbs/db_2025_38245_none", Path("/src/linux/net/atm"))

        assert command.argv == [
            "codeql",
            "database",
            "create",
            "--overwrite",
            "/dbs/db_2025_38245_none",
            "--language=cpp",
            "--source-root=/src/linux/net/atm",
            "--build-mode=none",
        ]

    def test_both_modes_overwrite(self):
        builder = CodeQLDatabaseCommandBuilder()
        traced = builder.traced_build("/dbs/a", resolve_build_target("a.o", ()))
        scanned = builder.source_scan("/dbs/b", Path("/src"))

        assert "--overwrite" in traced.args
        assert "--overwrite" in scanned.args

    def test_custom_binary_and_language(self):
        builder = CodeQLDatabaseCommandBuilder(codeql_bin="/opt/codeql/codeql", language="c")

        command = builder.source_scan("/dbs/x", Path("/src"))

        assert command.program == "/opt/codeql/codeql"
        assert "--language=c" in command.args

    def test_ensure_available_returns_resolved_path(self):
        runner = MagicMock(spec=CommandRunner)
        runner.which.return_value = "/usr/bin/codeql"

        assert CodeQLDatabaseCommandBuilder().ensure_available(runner) == "/usr/bin/codeql"
        runner.which.assert_called_once_with("codeql")

    def test_ensure_available_raises_when_missing(self):
        runner = MagicMock(spec=CommandRunner)
        runner.which.return_value = None

        with pytest.raises(ToolNotFoundError) as exc_info:
            CodeQLDatabaseCommandBuilder().ensure_available(runner)

        assert exc_info.value.tool == "codeql"
        assert exc_info.value.exit_code == 1

    def test_ensure_available_pins_absolute_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = MagicMock(spec=CommandRunner)
        runner.which.return_value = "./tools/codeql"
        builder = CodeQLDatabaseCommandBuilder(codeql_bin="./tools/codeql")

        resolved = builder.ensure_available(runner)
        command = builder.source_scan("/dbs/x", Path("/src"))

        assert resolved == os.path.join(os.getcwd(), "tools", "codeql")
        assert command.program == resolved

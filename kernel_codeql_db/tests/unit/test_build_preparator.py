"""Unit tests for BuildPreparator."""

from unittest.mock import MagicMock

from kernel_codeql_db.application.services.build_preparator import BuildPreparator
from kernel_codeql_db.domain.models import StepResult
from kernel_codeql_db.infrastructure.shell.workspace import KernelWorkspace


def _workspace(clean=0, defconfig=0, enable=0):
    workspace = MagicMock(spec=KernelWorkspace)
    workspace.clean.return_value = StepResult(step="make mrproper", exit_code=clean)
    workspace.defconfig.return_value = StepResult(step="make defconfig", exit_code=defconfig)
    workspace.enable_config.return_value = StepResult(step="scripts/config --enable", exit_code=enable)
    return workspace


class TestBuildPreparator:
    """Tests for the kernel preparation sequence."""

    def test_runs_all_steps_in_order(self):
        workspace = _workspace()
        messages = []

        results = BuildPreparator(echo=messages.append).prepare(workspace, "CONFIG_ATM")

        assert [r.step for r in results] == [
            "make mrproper",
            "make defconfig",
            "scripts/config --enable",
        ]
        assert all(r.success for r in results)
        workspace.enable_config.assert_called_once_with("CONFIG_ATM")
        assert messages[-1] == "Kernel preparation complete."
        assert "  - Enabling specified config: CONFIG_ATM..." in messages

    def test_stops_after_first_failure(self):
        workspace = _workspace(defconfig=2)
        messages = []

        results = BuildPreparator(echo=messages.append).prepare(workspace, "CONFIG_ATM")

        assert len(results) == 2
        assert results[-1].exit_code == 2
        workspace.enable_config.assert_not_called()
        assert "Kernel preparation complete." not in messages

    def test_failed_enable_reported_last(self):
        workspace = _workspace(enable=1)

        results = BuildPreparator(echo=lambda message: None).prepare(workspace, "CONFIG_NOPE")

        assert len(results) == 3
        assert results[-1].success is False

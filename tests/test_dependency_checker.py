"""Tests for executable detection (infra/dependency_checker.py).

All tests mock :func:`shutil.which`; no system dependency.

Coverage:
* ``detect_executable`` when found and when missing.
* ``require_dependencies`` fails fast on the first missing executable,
  in declared order.
* Declared orders for both commands.
* Platform-specific install commands.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from sforg_wrap.exceptions import ErrorCode, MissingDependencyError
from sforg_wrap.infra.dependency_checker import (
    JQ,
    ORG_DISPLAY_DEPENDENCIES,
    SCRATCH_ORG_DEPENDENCIES,
    SF,
    ExecutableStatus,
    _platform_install_commands,
    detect_executable,
    require_dependencies,
)


def _which_only(*present: str):  # type: ignore[no-untyped-def]
    probed: list[str] = []

    def fake_which(name: str) -> str | None:
        probed.append(name)
        return f"/usr/bin/{name}" if name in present else None

    return fake_which, probed


# ---------------------------------------------------------------------------
# detect_executable
# ---------------------------------------------------------------------------

class TestDetectExecutable:
    @patch("sforg_wrap.infra.dependency_checker.shutil.which")
    def test_found(self, mock_which: object) -> None:
        mock_which.return_value = "/usr/bin/jq"  # type: ignore[attr-defined]
        status = detect_executable(JQ)

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.install_commands == ()
        assert status.dependency is JQ

    @patch("sforg_wrap.infra.dependency_checker.shutil.which")
    def test_not_found(self, mock_which: object) -> None:
        mock_which.return_value = None  # type: ignore[attr-defined]
        status = detect_executable(SF)

        assert status.found is False
        assert status.path is None
        assert len(status.install_commands) > 0

    def test_status_is_frozen(self) -> None:
        status = ExecutableStatus(dependency=SF, found=True, path=None, install_commands=())
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]


# ---------------------------------------------------------------------------
# require_dependencies
# ---------------------------------------------------------------------------

class TestRequireDependencies:
    def test_all_present(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake_which, probed = _which_only("sf", "jq")
        monkeypatch.setattr("sforg_wrap.infra.dependency_checker.shutil.which", fake_which)

        require_dependencies(SCRATCH_ORG_DEPENDENCIES)

        assert probed == ["sf", "jq"]

    def test_missing_sf_stops_before_jq(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake_which, probed = _which_only("jq")
        monkeypatch.setattr("sforg_wrap.infra.dependency_checker.shutil.which", fake_which)

        with pytest.raises(MissingDependencyError, match=r"Salesforce CLI \(sf\)") as exc_info:
            require_dependencies(SCRATCH_ORG_DEPENDENCIES)

        assert probed == ["sf"]
        assert exc_info.value.code is ErrorCode.MISSING_DEPENDENCY
        assert exc_info.value.details == "Install Salesforce CLI to continue."

    def test_missing_jq_reported_first_for_org_display(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        fake_which, probed = _which_only()
        monkeypatch.setattr("sforg_wrap.infra.dependency_checker.shutil.which", fake_which)

        with pytest.raises(MissingDependencyError, match="jq is required") as exc_info:
            require_dependencies(ORG_DISPLAY_DEPENDENCIES)

        assert probed == ["jq"]
        assert exc_info.value.details == "Install jq to continue."

    def test_declared_orders(self) -> None:
        assert SCRATCH_ORG_DEPENDENCIES == (SF, JQ)
        assert ORG_DISPLAY_DEPENDENCIES == (JQ, SF)


# ---------------------------------------------------------------------------
# Platform install commands
# ---------------------------------------------------------------------------

class TestPlatformInstallCommands:
    @patch("sforg_wrap.infra.dependency_checker.platform.system", return_value="Windows")
    def test_windows_jq(self, _mock_sys: object) -> None:
        assert "winget install jqlang.jq" in _platform_install_commands(JQ)

    @patch("sforg_wrap.infra.dependency_checker.platform.system", return_value="Linux")
    def test_linux_jq(self, _mock_sys: object) -> None:
        cmds = _platform_install_commands(JQ)
        assert any("apt" in c for c in cmds)
        assert any("dnf" in c for c in cmds)

    @patch("sforg_wrap.infra.dependency_checker.platform.system", return_value="Darwin")
    def test_darwin_jq(self, _mock_sys: object) -> None:
        assert _platform_install_commands(JQ) == ("brew install jq",)

    @pytest.mark.parametrize("system", ["Windows", "Linux", "Darwin", "FreeBSD"])
    def test_sf_uses_npm_everywhere(self, system: str) -> None:
        with patch("sforg_wrap.infra.dependency_checker.platform.system", return_value=system):
            assert _platform_install_commands(SF) == ("npm install --global @salesforce/cli",)

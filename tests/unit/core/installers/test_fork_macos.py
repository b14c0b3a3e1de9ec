"""Tests for the Fork installer backed by the macOS preference domain."""

from pathlib import Path

import pytest

from gitshim.core.errors import CommandFailedError
from gitshim.core.installers.base import CheckResult, InstallerParams
from gitshim.core.installers.fork import (
    FORK_BUNDLE_ID,
    ForkAppInstaller,
    create_mac_fork_installer,
)
from gitshim.gateway.mac_prefs.fake import FakeAppLocator, FakePreferenceDomain

SHIM = "/Users/me/.gitshim/bin/git"
PARAMS = InstallerParams(git_shim_path=Path(SHIM))
FORK_APP = Path("/Applications/Fork.app")


def _installer(
    prefs: FakePreferenceDomain, *, installed: bool = True
) -> tuple[ForkAppInstaller, FakeAppLocator]:
    locator = FakeAppLocator({FORK_BUNDLE_ID: FORK_APP} if installed else {})
    return create_mac_fork_installer(app_locator=locator, prefs=prefs), locator


def test_identity() -> None:
    installer, _ = _installer(FakePreferenceDomain(FORK_BUNDLE_ID))

    assert installer.name == "Fork"
    assert installer.id == "fork"
    assert installer.is_platform_supported() is True


def test_check_when_fork_missing_does_not_read_prefs() -> None:
    prefs = FakePreferenceDomain(
        FORK_BUNDLE_ID, values={"gitInstanceType": 2, "customGitInstancePath": SHIM}
    )
    installer, locator = _installer(prefs, installed=False)

    assert installer.check(PARAMS) == CheckResult.not_installed()
    assert locator.lookups == [FORK_BUNDLE_ID]


def test_check_with_empty_domain() -> None:
    installer, _ = _installer(FakePreferenceDomain(FORK_BUNDLE_ID))

    assert installer.check(PARAMS) == CheckResult(
        client_installed=True, prefs_configured=False, prefs_up_to_date=False
    )


def test_check_custom_type_without_path_is_not_configured() -> None:
    prefs = FakePreferenceDomain(FORK_BUNDLE_ID, values={"gitInstanceType": 2})
    installer, _ = _installer(prefs)

    result = installer.check(PARAMS)

    assert result.prefs_configured is False
    assert result.prefs_up_to_date is False


def test_check_path_without_custom_type_is_not_configured() -> None:
    prefs = FakePreferenceDomain(
        FORK_BUNDLE_ID, values={"gitInstanceType": 1, "customGitInstancePath": SHIM}
    )
    installer, _ = _installer(prefs)

    assert installer.check(PARAMS).prefs_configured is False


def test_check_unknown_type_code_is_not_configured() -> None:
    prefs = FakePreferenceDomain(
        FORK_BUNDLE_ID, values={"gitInstanceType": 7, "customGitInstancePath": SHIM}
    )
    installer, _ = _installer(prefs)

    assert installer.check(PARAMS).prefs_configured is False


def test_check_configured_for_other_git() -> None:
    prefs = FakePreferenceDomain(
        FORK_BUNDLE_ID,
        values={"gitInstanceType": 2, "customGitInstancePath": "/opt/homebrew/bin/git"},
    )
    installer, _ = _installer(prefs)

    assert installer.check(PARAMS) == CheckResult(
        client_installed=True, prefs_configured=True, prefs_up_to_date=False
    )


def test_check_up_to_date() -> None:
    prefs = FakePreferenceDomain(
        FORK_BUNDLE_ID, values={"gitInstanceType": 2, "customGitInstancePath": SHIM}
    )
    installer, _ = _installer(prefs)

    assert installer.check(PARAMS).prefs_up_to_date is True


def test_install_writes_type_then_path() -> None:
    prefs = FakePreferenceDomain(FORK_BUNDLE_ID, values={"theme": "dark"})
    installer, _ = _installer(prefs)

    diff = installer.install(PARAMS, dry_run=False)

    assert diff == (
        "+++ com.DanPristupov.Fork\n"
        "+gitInstanceType = 2\n"
        f"+customGitInstancePath = {SHIM}\n"
    )
    assert prefs.writes == [("gitInstanceType", 2), ("customGitInstancePath", SHIM)]
    assert prefs.values["theme"] == "dark"


def test_install_is_idempotent() -> None:
    prefs = FakePreferenceDomain(FORK_BUNDLE_ID)
    installer, _ = _installer(prefs)

    first = installer.install(PARAMS, dry_run=False)
    second = installer.install(PARAMS, dry_run=False)

    assert first is not None
    assert second is None
    assert len(prefs.writes) == 2


def test_install_dry_run_does_not_write() -> None:
    prefs = FakePreferenceDomain(FORK_BUNDLE_ID, values={"gitInstanceType": 0})
    installer, _ = _installer(prefs)

    predicted = installer.install(PARAMS, dry_run=True)

    assert prefs.writes == []
    assert prefs.values == {"gitInstanceType": 0}
    assert installer.install(PARAMS, dry_run=False) == predicted


def test_install_returns_none_when_fork_missing() -> None:
    prefs = FakePreferenceDomain(FORK_BUNDLE_ID)
    installer, _ = _installer(prefs, installed=False)

    assert installer.install(PARAMS, dry_run=False) is None
    assert prefs.writes == []


def test_install_normalizes_windows_style_shim_path() -> None:
    prefs = FakePreferenceDomain(FORK_BUNDLE_ID)
    installer, _ = _installer(prefs)
    params = InstallerParams(git_shim_path=Path("\\\\?\\C:\\Users\\x\\.bin\\git.exe"))

    installer.install(params, dry_run=False)

    assert prefs.values["customGitInstancePath"] == "C:/Users/x/.bin/git.exe"


def test_install_path_write_failure_leaves_type_applied() -> None:
    prefs = FakePreferenceDomain(
        FORK_BUNDLE_ID, failing_keys=frozenset({"customGitInstancePath"})
    )
    installer, _ = _installer(prefs)

    with pytest.raises(CommandFailedError):
        installer.install(PARAMS, dry_run=False)

    # Each key is its own write; the type write is not rolled back
    assert prefs.values == {"gitInstanceType": 2}
    assert installer.check(PARAMS).prefs_configured is False


def test_uninstall_reports_removed_values() -> None:
    prefs = FakePreferenceDomain(
        FORK_BUNDLE_ID, values={"gitInstanceType": 2, "customGitInstancePath": SHIM}
    )
    installer, _ = _installer(prefs)

    diff = installer.uninstall(PARAMS, dry_run=False)

    assert diff == (
        "--- com.DanPristupov.Fork\n"
        "-gitInstanceType = 2\n"
        f"-customGitInstancePath = {SHIM}\n"
    )
    assert prefs.values == {"gitInstanceType": 0}
    assert prefs.deletes == ["customGitInstancePath"]


def test_uninstall_dry_run_does_not_write() -> None:
    values: dict[str, int | str] = {"gitInstanceType": 2, "customGitInstancePath": SHIM}
    prefs = FakePreferenceDomain(FORK_BUNDLE_ID, values=values)
    installer, _ = _installer(prefs)

    diff = installer.uninstall(PARAMS, dry_run=True)

    assert diff is not None
    assert prefs.values == values
    assert prefs.writes == []
    assert prefs.deletes == []


def test_uninstall_when_not_configured_returns_none() -> None:
    prefs = FakePreferenceDomain(FORK_BUNDLE_ID, values={"gitInstanceType": 1})
    installer, _ = _installer(prefs)

    assert installer.uninstall(PARAMS, dry_run=False) is None
    assert prefs.writes == []


def test_uninstall_removes_other_custom_git_too() -> None:
    prefs = FakePreferenceDomain(
        FORK_BUNDLE_ID,
        values={"gitInstanceType": 2, "customGitInstancePath": "/usr/local/bin/git"},
    )
    installer, _ = _installer(prefs)

    diff = installer.uninstall(PARAMS, dry_run=False)

    assert diff is not None
    assert "-customGitInstancePath = /usr/local/bin/git" in diff


def test_install_then_uninstall_restores_check() -> None:
    prefs = FakePreferenceDomain(FORK_BUNDLE_ID)
    installer, _ = _installer(prefs)
    before = installer.check(PARAMS)

    installer.install(PARAMS, dry_run=False)
    assert installer.check(PARAMS).prefs_up_to_date is True
    installer.uninstall(PARAMS, dry_run=False)

    assert installer.check(PARAMS) == before

"""Degraded installer for platforms where a client cannot exist."""

from gitshim.core.installers.base import CheckResult, GitClientInstaller, InstallerParams


class UnsupportedPlatformInstaller(GitClientInstaller):
    """Installer that never finds its client and never changes anything.

    Used in place of a real variant when the current OS has no preference
    backend for the client. All operations return neutral values so that
    orchestration code can drive every client the same way.
    """

    def __init__(self, *, name: str, client_id: str) -> None:
        self._name = name
        self._client_id = client_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def id(self) -> str:
        return self._client_id

    def is_platform_supported(self) -> bool:
        return False

    def check(self, params: InstallerParams) -> CheckResult:
        return CheckResult.not_installed()

    def install(self, params: InstallerParams, *, dry_run: bool) -> str | None:
        return None

    def uninstall(self, params: InstallerParams, *, dry_run: bool) -> str | None:
        return None

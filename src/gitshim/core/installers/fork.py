"""Installer for the Fork git client (https://git-fork.com).

Fork persists "which git to use" as two settings:

- an instance type (0 = system git, 1 = bundled git, 2 = custom git)
- the custom git path, consulted only when the type is custom

On macOS both live in the `com.DanPristupov.Fork` preference domain. On
Windows they live in `%LOCALAPPDATA%\\Fork\\settings.json`. Fork has no Linux
build, so Linux hosts get an UnsupportedPlatformInstaller.
"""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from gitshim.core.errors import CommandFailedError
from gitshim.core.installers.base import (
    CheckResult,
    GitClientInstaller,
    GitInstanceType,
    InstallerParams,
)
from gitshim.core.installers.diff import DiffEntry, format_added, format_removed
from gitshim.core.installers.unsupported import UnsupportedPlatformInstaller
from gitshim.core.paths import normalize_shim_path
from gitshim.core.platform import HostPlatform
from gitshim.gateway.mac_prefs.abc import AppLocator, PreferenceDomain
from gitshim.gateway.settings_file.abc import SettingsFileStore

logger = logging.getLogger(__name__)

FORK_NAME = "Fork"
FORK_ID = "fork"
FORK_BUNDLE_ID = "com.DanPristupov.Fork"

MAC_TYPE_KEY = "gitInstanceType"
MAC_PATH_KEY = "customGitInstancePath"
WINDOWS_TYPE_KEY = "GitInstanceType"
WINDOWS_PATH_KEY = "CustomGitInstancePath"

# Fork's own encoding of the instance type; never used outside this module
_INSTANCE_TYPE_CODES: dict[GitInstanceType, int] = {
    GitInstanceType.SYSTEM: 0,
    GitInstanceType.BUNDLED: 1,
    GitInstanceType.CUSTOM: 2,
}


def encode_instance_type(instance_type: GitInstanceType) -> int:
    return _INSTANCE_TYPE_CODES[instance_type]


def decode_instance_type(code: int | None) -> GitInstanceType | None:
    """Decode Fork's numeric instance type. Unknown codes decode to None."""
    if code is None:
        return None
    for instance_type, known_code in _INSTANCE_TYPE_CODES.items():
        if known_code == code:
            return instance_type
    logger.debug("Unrecognized Fork git instance type code: %s", code)
    return None


@dataclass(frozen=True)
class ForkGitSettings:
    """Fork's git settings as read together.

    Either field is None when absent or unrecognized.
    """

    instance_type: GitInstanceType | None
    custom_path: str | None


class ForkPreferences(ABC):
    """Fork's git settings as stored by one platform's persistence backend."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Where the settings live, used as the diff header."""
        ...

    @property
    @abstractmethod
    def type_key(self) -> str: ...

    @property
    @abstractmethod
    def path_key(self) -> str: ...

    @abstractmethod
    def read_settings(self) -> ForkGitSettings:
        """Fresh read of both settings from a single view of the store."""
        ...

    @abstractmethod
    def apply_custom(self, shim_path: str) -> None:
        """Persist type=custom and path=shim_path."""
        ...

    @abstractmethod
    def apply_system(self) -> None:
        """Persist type=system and remove the custom path."""
        ...


class MacForkPreferences(ForkPreferences):
    """Fork settings in the macOS preference domain.

    Keys are written one at a time: type first, then path. If the path write
    fails the domain is left with type=custom and no path, which check()
    reports as not configured.
    """

    def __init__(self, prefs: PreferenceDomain) -> None:
        self._prefs = prefs

    @property
    def location(self) -> str:
        return self._prefs.domain

    @property
    def type_key(self) -> str:
        return MAC_TYPE_KEY

    @property
    def path_key(self) -> str:
        return MAC_PATH_KEY

    def read_settings(self) -> ForkGitSettings:
        return ForkGitSettings(
            instance_type=decode_instance_type(self._prefs.read_int(MAC_TYPE_KEY)),
            custom_path=self._prefs.read_string(MAC_PATH_KEY),
        )

    def apply_custom(self, shim_path: str) -> None:
        self._prefs.write_int(MAC_TYPE_KEY, encode_instance_type(GitInstanceType.CUSTOM))
        self._prefs.write_string(MAC_PATH_KEY, shim_path)

    def apply_system(self) -> None:
        self._prefs.write_int(MAC_TYPE_KEY, encode_instance_type(GitInstanceType.SYSTEM))
        # Once the type is system the path is ignored by Fork, so a stale
        # path left behind by a failed delete is harmless
        try:
            self._prefs.delete(MAC_PATH_KEY)
        except CommandFailedError as e:
            logger.debug("Could not delete %s %s: %s", self._prefs.domain, MAC_PATH_KEY, e)


class WindowsForkPreferences(ForkPreferences):
    """Fork settings in its JSON settings file on Windows."""

    def __init__(self, store: SettingsFileStore, settings_path: Path) -> None:
        self._store = store
        self._settings_path = settings_path

    @property
    def location(self) -> str:
        return str(self._settings_path)

    @property
    def type_key(self) -> str:
        return WINDOWS_TYPE_KEY

    @property
    def path_key(self) -> str:
        return WINDOWS_PATH_KEY

    def read_settings(self) -> ForkGitSettings:
        document = self._store.read(self._settings_path)
        type_value = document.get(WINDOWS_TYPE_KEY)
        path_value = document.get(WINDOWS_PATH_KEY)
        # bool is an int subclass; a JSON true is not a valid type code
        if isinstance(type_value, bool) or not isinstance(type_value, int):
            instance_type = None
        else:
            instance_type = decode_instance_type(type_value)
        return ForkGitSettings(
            instance_type=instance_type,
            custom_path=path_value if isinstance(path_value, str) else None,
        )

    def apply_custom(self, shim_path: str) -> None:
        document = dict(self._store.read(self._settings_path))
        document[WINDOWS_TYPE_KEY] = encode_instance_type(GitInstanceType.CUSTOM)
        document[WINDOWS_PATH_KEY] = shim_path
        self._store.write(self._settings_path, document)

    def apply_system(self) -> None:
        document = dict(self._store.read(self._settings_path))
        document[WINDOWS_TYPE_KEY] = encode_instance_type(GitInstanceType.SYSTEM)
        document.pop(WINDOWS_PATH_KEY, None)
        self._store.write(self._settings_path, document)


class ForkAppInstaller(GitClientInstaller):
    """Points Fork at the git shim.

    The check/install/uninstall logic is shared by every platform; what
    differs is how Fork is detected and where its settings are persisted.
    """

    def __init__(self, *, detect: Callable[[], bool], preferences: ForkPreferences) -> None:
        """Initialize ForkAppInstaller.

        Args:
            detect: Returns True if Fork is installed on this machine
            preferences: Platform backend holding Fork's git settings
        """
        self._detect = detect
        self._preferences = preferences

    @property
    def name(self) -> str:
        return FORK_NAME

    @property
    def id(self) -> str:
        return FORK_ID

    def is_platform_supported(self) -> bool:
        return True

    def check(self, params: InstallerParams) -> CheckResult:
        result, _ = self._inspect(params)
        return result

    def _inspect(self, params: InstallerParams) -> tuple[CheckResult, ForkGitSettings | None]:
        """Check status plus the settings it was computed from (None if Fork is absent)."""
        if not self._detect():
            logger.debug("Fork not detected")
            return CheckResult.not_installed(), None

        settings = self._preferences.read_settings()
        prefs_configured = (
            settings.instance_type is GitInstanceType.CUSTOM and settings.custom_path is not None
        )
        prefs_up_to_date = prefs_configured and settings.custom_path == normalize_shim_path(
            params.git_shim_path
        )
        result = CheckResult(
            client_installed=True,
            prefs_configured=prefs_configured,
            prefs_up_to_date=prefs_up_to_date,
        )
        return result, settings

    def install(self, params: InstallerParams, *, dry_run: bool) -> str | None:
        check = self.check(params)
        if not check.client_installed or check.prefs_up_to_date:
            return None

        shim_path = normalize_shim_path(params.git_shim_path)
        prefs = self._preferences
        diff = format_added(
            prefs.location,
            [
                (prefs.type_key, str(encode_instance_type(GitInstanceType.CUSTOM))),
                (prefs.path_key, shim_path),
            ],
        )

        if not dry_run:
            prefs.apply_custom(shim_path)
        return diff

    def uninstall(self, params: InstallerParams, *, dry_run: bool) -> str | None:
        check, settings = self._inspect(params)
        if settings is None or not check.prefs_configured:
            return None

        prefs = self._preferences
        old_type = settings.instance_type or GitInstanceType.SYSTEM
        old_path = settings.custom_path or ""

        entries: list[DiffEntry] = [(prefs.type_key, str(encode_instance_type(old_type)))]
        if old_path:
            entries.append((prefs.path_key, old_path))
        diff = format_removed(prefs.location, entries)

        if not dry_run:
            prefs.apply_system()
        return diff


@dataclass(frozen=True)
class ForkWindowsLocations:
    """Filesystem locations used to detect and configure Fork on Windows."""

    settings_dir: Path
    app_path: Path

    @property
    def settings_path(self) -> Path:
        return self.settings_dir / "settings.json"

    @classmethod
    def from_environ(cls, environ: Mapping[str, str], home: Path) -> "ForkWindowsLocations":
        local_app_data = environ.get("LOCALAPPDATA")
        if local_app_data:
            settings_dir = Path(local_app_data) / "Fork"
        else:
            settings_dir = home / "AppData" / "Local" / "Fork"
        program_files = Path(environ.get("ProgramFiles") or "C:\\Program Files")
        return cls(settings_dir=settings_dir, app_path=program_files / "Fork" / "Fork.exe")

    def is_fork_installed(self) -> bool:
        return self.settings_dir.exists() or self.app_path.exists()


def create_mac_fork_installer(
    *, app_locator: AppLocator, prefs: PreferenceDomain
) -> ForkAppInstaller:
    return ForkAppInstaller(
        detect=lambda: app_locator.find_app_by_bundle_id(FORK_BUNDLE_ID) is not None,
        preferences=MacForkPreferences(prefs),
    )


def create_windows_fork_installer(
    *, store: SettingsFileStore, locations: ForkWindowsLocations
) -> ForkAppInstaller:
    return ForkAppInstaller(
        detect=locations.is_fork_installed,
        preferences=WindowsForkPreferences(store, locations.settings_path),
    )


def create_fork_installer(host: HostPlatform) -> GitClientInstaller:
    """Create the Fork installer variant for the host platform.

    Args:
        host: Host platform, one of "macos", "windows", "linux"

    Returns:
        A real installer on macOS and Windows, a no-op installer elsewhere
    """
    if host == "macos":
        from gitshim.gateway.mac_prefs.real import RealAppLocator, RealPreferenceDomain

        return create_mac_fork_installer(
            app_locator=RealAppLocator(), prefs=RealPreferenceDomain(FORK_BUNDLE_ID)
        )
    if host == "windows":
        from gitshim.gateway.settings_file.real import RealSettingsFileStore

        return create_windows_fork_installer(
            store=RealSettingsFileStore(),
            locations=ForkWindowsLocations.from_environ(os.environ, Path.home()),
        )
    return UnsupportedPlatformInstaller(name=FORK_NAME, client_id=FORK_ID)

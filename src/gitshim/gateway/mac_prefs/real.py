"""Real macOS preference access using the `defaults` and `mdfind` tools."""

import logging
import plistlib
import subprocess
from pathlib import Path

from gitshim.core.subprocess_utils import run_subprocess_with_context
from gitshim.gateway.mac_prefs.abc import AppLocator, PreferenceDomain

logger = logging.getLogger(__name__)


class RealPreferenceDomain(PreferenceDomain):
    """Production implementation backed by `defaults(1)`.

    `defaults` goes through cfprefsd, so values written here are seen by the
    application the next time it reads its preferences.
    """

    def __init__(self, domain: str) -> None:
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _read_raw(self, key: str) -> str | None:
        result = subprocess.run(
            ["defaults", "read", self._domain, key],
            capture_output=True,
            text=True,
            check=False,
        )
        # Non-zero exit means the domain or key does not exist
        if result.returncode != 0:
            return None
        return result.stdout.rstrip("\n")

    def read_int(self, key: str) -> int | None:
        raw = self._read_raw(key)
        if raw is None:
            return None
        try:
            return int(raw.strip())
        except ValueError:
            logger.debug("%s %s is not an integer: %r", self._domain, key, raw)
            return None

    def read_string(self, key: str) -> str | None:
        return self._read_raw(key)

    def write_int(self, key: str, value: int) -> None:
        run_subprocess_with_context(
            cmd=["defaults", "write", self._domain, key, "-int", str(value)],
            operation_context=f"write {self._domain} {key}",
        )

    def write_string(self, key: str, value: str) -> None:
        run_subprocess_with_context(
            cmd=["defaults", "write", self._domain, key, "-string", value],
            operation_context=f"write {self._domain} {key}",
        )

    def delete(self, key: str) -> None:
        if self._read_raw(key) is None:
            return
        run_subprocess_with_context(
            cmd=["defaults", "delete", self._domain, key],
            operation_context=f"delete {self._domain} {key}",
        )


class RealAppLocator(AppLocator):
    """Locates application bundles via Spotlight, then the Applications folders."""

    def __init__(self, search_dirs: list[Path] | None = None) -> None:
        if search_dirs is None:
            search_dirs = [Path("/Applications"), Path.home() / "Applications"]
        self._search_dirs = search_dirs

    def find_app_by_bundle_id(self, bundle_id: str) -> Path | None:
        found = self._find_with_spotlight(bundle_id)
        if found is not None:
            return found
        return self._find_in_search_dirs(bundle_id)

    def _find_with_spotlight(self, bundle_id: str) -> Path | None:
        try:
            result = subprocess.run(
                ["mdfind", f"kMDItemCFBundleIdentifier == '{bundle_id}'"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError:
            logger.debug("mdfind unavailable, falling back to directory scan")
            return None
        if result.returncode != 0:
            return None
        for line in result.stdout.splitlines():
            if line.strip():
                return Path(line.strip())
        return None

    def _find_in_search_dirs(self, bundle_id: str) -> Path | None:
        for search_dir in self._search_dirs:
            if not search_dir.is_dir():
                continue
            for app_path in sorted(search_dir.glob("*.app")):
                if _read_bundle_id(app_path) == bundle_id:
                    return app_path
        return None


def _read_bundle_id(app_path: Path) -> str | None:
    info_plist = app_path / "Contents" / "Info.plist"
    if not info_plist.is_file():
        return None
    try:
        with info_plist.open("rb") as f:
            info = plistlib.load(f)
    except (OSError, plistlib.InvalidFileException, ValueError):
        return None
    bundle_id = info.get("CFBundleIdentifier")
    if isinstance(bundle_id, str):
        return bundle_id
    return None

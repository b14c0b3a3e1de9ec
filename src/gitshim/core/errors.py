"""Error types shared across gitshim.

Expected, frequent outcomes (client not installed, already up to date, not
configured) are never errors; they are ordinary return values.
"""

from pathlib import Path


class GitShimError(Exception):
    """Base class for all gitshim errors."""


class MissingEnvironmentError(GitShimError):
    """A required environment variable or file is absent."""


class SettingsParseError(GitShimError):
    """A client settings document could not be parsed.

    Raised instead of falling back to an empty document so that a corrupt
    file is never silently replaced (and the user's other settings lost).
    """

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Failed to parse settings file {path}: {detail}")
        self.path = path
        self.detail = detail


class CommandFailedError(GitShimError):
    """An external command exited with a non-zero status."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str) -> None:
        message = f"Command failed with exit code {returncode}: {' '.join(cmd)}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message)
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr


class ConfigError(GitShimError):
    """config.toml parsed but holds a value of the wrong shape."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Invalid config {path}: {detail}")
        self.path = path

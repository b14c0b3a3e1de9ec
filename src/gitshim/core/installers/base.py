"""Base classes and types for the git client installer system.

A git client installer points one third-party Git GUI at the git shim by
editing that application's own persisted preferences. Every client is driven
through the same contract:

- name / id: static identity
- is_platform_supported(): whether the client can exist on this OS
- check(): read-only snapshot of the client's current configuration
- install(): point the client at the shim (idempotent, supports dry run)
- uninstall(): revert the client to the system git (supports dry run)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class GitInstanceType(Enum):
    """Which git a client application invokes.

    Values are symbolic on purpose: each backend owns the encoding it
    persists, so a numeric code never leaks out of the backend.
    """

    SYSTEM = "system"
    BUNDLED = "bundled"
    CUSTOM = "custom"


@dataclass(frozen=True)
class InstallerParams:
    """Per-invocation parameters supplied by the caller."""

    git_shim_path: Path


@dataclass(frozen=True)
class CheckResult:
    """Snapshot of a client's shim configuration.

    Attributes:
        client_installed: The client application exists on this machine
        prefs_configured: The client uses some custom git instance
        prefs_up_to_date: The custom git instance is the desired shim path
    """

    client_installed: bool
    prefs_configured: bool
    prefs_up_to_date: bool

    def __post_init__(self) -> None:
        if self.prefs_up_to_date and not self.prefs_configured:
            raise ValueError("prefs_up_to_date requires prefs_configured")
        if self.prefs_configured and not self.client_installed:
            raise ValueError("prefs_configured requires client_installed")

    @classmethod
    def not_installed(cls) -> "CheckResult":
        return cls(client_installed=False, prefs_configured=False, prefs_up_to_date=False)


class GitClientInstaller(ABC):
    """Abstract base class for git client installers.

    Each implementation must provide:
    - name: Human-readable client name (e.g., 'Fork')
    - id: CLI-facing identifier (e.g., 'fork')
    - is_platform_supported(): Whether the client exists on the current OS
    - check(): Inspect configuration without mutating it
    - install(): Configure the shim, returning a diff or None
    - uninstall(): Revert to the system git, returning a diff or None
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable client name (e.g., 'Fork')."""
        ...

    @property
    @abstractmethod
    def id(self) -> str:
        """CLI-facing identifier for this client (e.g., 'fork')."""
        ...

    @abstractmethod
    def is_platform_supported(self) -> bool:
        """Whether this client can exist on the current operating system.

        Orchestration code skips clients that return False.
        """
        ...

    @abstractmethod
    def check(self, params: InstallerParams) -> CheckResult:
        """Inspect the client's current configuration.

        Never mutates anything and performs a fresh read on every call. When
        the client is not detected, returns all-false without reading prefs.

        Raises:
            SettingsParseError: If the client's settings document is malformed
            OSError: If the settings cannot be read
        """
        ...

    @abstractmethod
    def install(self, params: InstallerParams, *, dry_run: bool) -> str | None:
        """Point the client at the shim.

        Args:
            params: Installer parameters holding the desired shim path
            dry_run: If True, compute the diff but do not write anything

        Returns:
            The diff that was (or, in dry-run mode, would be) applied, or None
            when the client is not installed or already up to date
        """
        ...

    @abstractmethod
    def uninstall(self, params: InstallerParams, *, dry_run: bool) -> str | None:
        """Revert the client to the system git.

        Args:
            params: Installer parameters holding the desired shim path
            dry_run: If True, compute the diff but do not write anything

        Returns:
            The diff describing the removed values, or None when the client is
            not installed or not configured with a custom git
        """
        ...

"""Abstract interfaces for macOS per-application preferences.

Two gateways live here:
- PreferenceDomain: typed per-key access to one application's preference domain
- AppLocator: finds installed application bundles by bundle identifier
"""

from abc import ABC, abstractmethod
from pathlib import Path


class PreferenceDomain(ABC):
    """Typed accessor over a named macOS preference domain.

    Each write is independent and durable as soon as it returns; there is no
    multi-key transaction. Reading a missing key returns None.

    Implementations:
    - RealPreferenceDomain: drives the `defaults` tool
    - FakePreferenceDomain: in-memory, for tests
    """

    @property
    @abstractmethod
    def domain(self) -> str:
        """Bundle identifier addressing the domain (e.g. 'com.DanPristupov.Fork')."""
        ...

    @abstractmethod
    def read_int(self, key: str) -> int | None:
        """Read an integer value, or None if the key is absent or not an integer."""
        ...

    @abstractmethod
    def read_string(self, key: str) -> str | None:
        """Read a string value, or None if the key is absent."""
        ...

    @abstractmethod
    def write_int(self, key: str, value: int) -> None:
        """Write an integer value.

        Raises:
            CommandFailedError: If the preference system rejects the write
        """
        ...

    @abstractmethod
    def write_string(self, key: str, value: str) -> None:
        """Write a string value.

        Raises:
            CommandFailedError: If the preference system rejects the write
        """
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete a key. Deleting an absent key is not an error.

        Raises:
            CommandFailedError: If the preference system rejects the delete
        """
        ...


class AppLocator(ABC):
    """Finds installed macOS applications."""

    @abstractmethod
    def find_app_by_bundle_id(self, bundle_id: str) -> Path | None:
        """Return the path of the application bundle, or None if not installed."""
        ...

"""Abstract base class for JSON settings-file operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class SettingsFileStore(ABC):
    """Abstract interface for reading and writing a client's JSON settings file.

    The settings file belongs to a third-party application. Callers must
    read, clone, and modify only the keys they own, then write the whole
    document back; unknown keys are carried through untouched.

    Two implementations:
    - RealSettingsFileStore: Production - reads/writes the real filesystem
    - FakeSettingsFileStore: Testing - in-memory documents, never touches disk
    """

    @abstractmethod
    def read(self, path: Path) -> dict[str, object]:
        """Read and parse the settings document at path.

        Returns:
            The parsed document, or an empty dict if the file does not exist
            or is blank

        Raises:
            SettingsParseError: If the file is not a valid JSON object
            OSError: If the file cannot be read
        """
        ...

    @abstractmethod
    def write(self, path: Path, document: dict[str, object]) -> None:
        """Replace the settings file atomically with `document`.

        Readers observe either the previous or the new complete file, never a
        partial write. The parent directory is created if missing.

        Raises:
            OSError: If the file cannot be written; the previous file is left intact
        """
        ...

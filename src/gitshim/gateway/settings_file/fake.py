"""Fake implementation of SettingsFileStore for testing."""

import copy
from pathlib import Path

from gitshim.core.errors import SettingsParseError
from gitshim.gateway.settings_file.abc import SettingsFileStore


class FakeSettingsFileStore(SettingsFileStore):
    """Test implementation - in-memory storage, no filesystem access.

    This fake provides:
    - Constructor injection for initial documents
    - `corrupt_paths` that raise SettingsParseError on read
    - `write_error` raised on every write, leaving stored documents unchanged
    - Mutation tracking via read-only properties

    Usage:
        store = FakeSettingsFileStore(
            documents={Path("/fake/Fork/settings.json"): {"Theme": "dark"}}
        )
        store.write(path, new_document)
        assert store.writes == [(path, new_document)]
    """

    def __init__(
        self,
        *,
        documents: dict[Path, dict[str, object]] | None = None,
        corrupt_paths: frozenset[Path] = frozenset(),
        write_error: OSError | None = None,
    ) -> None:
        self._documents: dict[Path, dict[str, object]] = copy.deepcopy(documents or {})
        self._corrupt_paths = corrupt_paths
        self._write_error = write_error
        self._writes: list[tuple[Path, dict[str, object]]] = []
        self._reads: list[Path] = []

    def read(self, path: Path) -> dict[str, object]:
        self._reads.append(path)
        if path in self._corrupt_paths:
            raise SettingsParseError(path, "injected parse error")
        # Hand out a copy so callers cannot mutate stored state without write()
        return copy.deepcopy(self._documents.get(path, {}))

    def write(self, path: Path, document: dict[str, object]) -> None:
        if self._write_error is not None:
            raise self._write_error
        stored = copy.deepcopy(document)
        self._documents[path] = stored
        self._writes.append((path, copy.deepcopy(document)))

    @property
    def documents(self) -> dict[Path, dict[str, object]]:
        """Current stored documents, for test assertions."""
        return copy.deepcopy(self._documents)

    @property
    def writes(self) -> list[tuple[Path, dict[str, object]]]:
        return list(self._writes)

    @property
    def reads(self) -> list[Path]:
        return list(self._reads)

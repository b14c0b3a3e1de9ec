"""Fake macOS preference gateways for testing."""

from pathlib import Path

from gitshim.core.errors import CommandFailedError
from gitshim.gateway.mac_prefs.abc import AppLocator, PreferenceDomain


class FakePreferenceDomain(PreferenceDomain):
    """In-memory preference domain.

    Constructor Injection: initial values passed via `values`.
    Mutation Tracking: `writes` and `deletes` record every mutation in order.
    Failure Injection: keys listed in `failing_keys` raise CommandFailedError
    on write, to exercise partial (non-transactional) updates.
    """

    def __init__(
        self,
        domain: str,
        *,
        values: dict[str, int | str] | None = None,
        failing_keys: frozenset[str] = frozenset(),
    ) -> None:
        self._domain = domain
        self._values: dict[str, int | str] = dict(values or {})
        self._failing_keys = failing_keys
        self._writes: list[tuple[str, int | str]] = []
        self._deletes: list[str] = []

    @property
    def domain(self) -> str:
        return self._domain

    def read_int(self, key: str) -> int | None:
        value = self._values.get(key)
        if isinstance(value, int):
            return value
        return None

    def read_string(self, key: str) -> str | None:
        value = self._values.get(key)
        if value is None:
            return None
        return str(value)

    def write_int(self, key: str, value: int) -> None:
        self._write(key, value)

    def write_string(self, key: str, value: str) -> None:
        self._write(key, value)

    def delete(self, key: str) -> None:
        self._deletes.append(key)
        self._values.pop(key, None)

    def _write(self, key: str, value: int | str) -> None:
        if key in self._failing_keys:
            raise CommandFailedError(
                ["defaults", "write", self._domain, key], 1, "injected failure"
            )
        self._writes.append((key, value))
        self._values[key] = value

    @property
    def values(self) -> dict[str, int | str]:
        """Current contents of the domain, for test assertions."""
        return dict(self._values)

    @property
    def writes(self) -> list[tuple[str, int | str]]:
        return list(self._writes)

    @property
    def deletes(self) -> list[str]:
        return list(self._deletes)


class FakeAppLocator(AppLocator):
    """App locator with a fixed mapping of bundle id -> path."""

    def __init__(self, apps: dict[str, Path] | None = None) -> None:
        self._apps = dict(apps or {})
        self._lookups: list[str] = []

    def find_app_by_bundle_id(self, bundle_id: str) -> Path | None:
        self._lookups.append(bundle_id)
        return self._apps.get(bundle_id)

    @property
    def lookups(self) -> list[str]:
        return list(self._lookups)

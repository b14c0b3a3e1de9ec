"""Fake implementation of GitExecutable for testing."""

from gitshim.core.errors import CommandFailedError
from gitshim.gateway.git.abc import GitExecutable


class FakeGitExecutable(GitExecutable):
    """In-memory fake returning canned output per argument list.

    Unknown argument lists fail the way git does for an unknown command.
    """

    def __init__(self, outputs: dict[tuple[str, ...], str] | None = None) -> None:
        self._outputs = dict(outputs or {})
        self._calls: list[list[str]] = []

    def run(self, args: list[str]) -> str:
        self._calls.append(list(args))
        key = tuple(args)
        if key not in self._outputs:
            raise CommandFailedError(["git", *args], 1, f"fake git: no output for {args}")
        return self._outputs[key]

    @property
    def calls(self) -> list[list[str]]:
        return list(self._calls)

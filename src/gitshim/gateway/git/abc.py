"""Abstract interface for invoking the real git executable."""

from abc import ABC, abstractmethod


class GitExecutable(ABC):
    """Runs the real git binary (never the shim) with an argument list."""

    @abstractmethod
    def run(self, args: list[str]) -> str:
        """Run git with `args` and return its stdout.

        Raises:
            CommandFailedError: If git exits with a non-zero status
            OSError: If git cannot be started
        """
        ...

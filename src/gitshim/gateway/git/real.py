"""Real implementation of GitExecutable using subprocess."""

import shutil

from gitshim.core.errors import MissingEnvironmentError
from gitshim.core.subprocess_utils import run_subprocess_with_context
from gitshim.gateway.git.abc import GitExecutable


class RealGitExecutable(GitExecutable):
    """Production implementation - runs git via subprocess.

    Args:
        git_path: Path of the real git binary. If None, git is looked up on PATH
            when first needed.
    """

    def __init__(self, git_path: str | None = None) -> None:
        self._git_path = git_path

    def _resolve(self) -> str:
        if self._git_path is not None:
            return self._git_path
        found = shutil.which("git")
        if found is None:
            raise MissingEnvironmentError("git executable not found on PATH")
        self._git_path = found
        return found

    def run(self, args: list[str]) -> str:
        result = run_subprocess_with_context(
            cmd=[self._resolve(), *args],
            operation_context=f"git {' '.join(args)}",
        )
        return result.stdout

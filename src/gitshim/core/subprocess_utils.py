"""Helpers for running external commands."""

import logging
import subprocess
from pathlib import Path

from gitshim.core.errors import CommandFailedError

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, raising CommandFailedError on a non-zero exit.

    Args:
        cmd: Command and arguments
        operation_context: Short description used in debug logs (e.g. "write Fork pref")
        cwd: Optional working directory

    Returns:
        The completed process with captured text output

    Raises:
        CommandFailedError: If the command exits with a non-zero status
        OSError: If the executable cannot be started
    """
    logger.debug("%s: %s", operation_context, cmd)
    result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=False)
    if result.returncode != 0:
        raise CommandFailedError(cmd, result.returncode, result.stderr)
    return result

"""Shim environment provisioning.

The shim directory layout mirrors a git installation:

    <base>/bin/git         the shim
    <base>/libexec         link to the real git's libexec directory

Some clients resolve git helpers relative to the git binary they are given,
so `<base>/libexec` must point at the real git's tooling. Fork on Windows also
refuses a custom git that has no `bash.exe` beside it.
"""

import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path, PurePath

from gitshim.core.errors import GitShimError
from gitshim.core.platform import HostPlatform
from gitshim.core.subprocess_utils import run_subprocess_with_context
from gitshim.gateway.git.abc import GitExecutable

logger = logging.getLogger(__name__)

# Read-only store; the package build is responsible for the link there
NIX_STORE_MARKER = "/nix/store"


def ensure_git_symlinks(shim_path: Path, git: GitExecutable, *, host: HostPlatform) -> None:
    """Ensure `<base>/libexec` links to the real git's libexec directory.

    On Windows also ensure `bash.exe` sits next to the shim.

    Args:
        shim_path: Path of the git shim (e.g. ~/.gitshim/bin/git)
        git: Gateway running the real git
        host: Host platform

    Raises:
        GitShimError: If the shim layout or git's exec path is unusable
        CommandFailedError: If git or the junction command fails
        OSError: If the link cannot be replaced or bash.exe cannot be copied
    """
    if NIX_STORE_MARKER in shim_path.as_posix():
        logger.debug("Shim %s is in the nix store, skipping provisioning", shim_path)
        return

    binary_dir = shim_path.parent
    base_dir = binary_dir.parent
    if binary_dir == shim_path or base_dir == binary_dir:
        raise GitShimError(f"Cannot determine shim base directory from {shim_path}")

    exec_path = Path(git.run(["--exec-path"]).strip())
    libexec_target = exec_path.parent
    if libexec_target == exec_path:
        raise GitShimError(f"Cannot get libexec directory from exec-path {exec_path}")

    link_path = base_dir / "libexec"
    _remove_existing_link(link_path, host=host)

    if host == "windows":
        _create_junction(link_path, libexec_target)
        ensure_bash_shim(binary_dir, find_git_bash(exec_path, _windows_git_roots()))
    else:
        link_path.symlink_to(libexec_target, target_is_directory=True)
    logger.debug("Linked %s -> %s", link_path, libexec_target)


def _remove_existing_link(link_path: Path, *, host: HostPlatform) -> None:
    if not (link_path.exists() or link_path.is_symlink()):
        return
    if host == "windows":
        # Junctions are directories; symlinks created by other tools are files
        try:
            link_path.rmdir()
        except OSError:
            link_path.unlink(missing_ok=True)
        return
    link_path.unlink()


def _create_junction(junction_path: Path, target: Path) -> None:
    """Create a directory junction, which does not require admin rights."""
    run_subprocess_with_context(
        cmd=["cmd", "/C", "mklink", "/J", str(junction_path), str(target)],
        operation_context="create libexec junction",
    )


def _windows_git_roots() -> list[Path]:
    program_files = Path(os.environ.get("ProgramFiles") or "C:\\Program Files")
    return [
        program_files / "Git",
        Path("C:\\Program Files\\Git"),
        Path("C:\\Program Files (x86)\\Git"),
    ]


def find_git_bash(exec_path: PurePath, install_roots: Sequence[Path]) -> Path | None:
    """Locate bash.exe from a Git for Windows installation.

    The exec path is typically `<git root>/mingw64/libexec/git-core`, so the
    git root is its third ancestor. Well-known install roots are tried next.
    """
    roots: list[Path] = []
    parents = Path(exec_path).parents
    if len(parents) > 2:
        roots.append(parents[2])
    roots.extend(install_roots)

    for root in roots:
        for candidate in (root / "bin" / "bash.exe", root / "usr" / "bin" / "bash.exe"):
            if candidate.is_file():
                return candidate
    return None


def ensure_bash_shim(binary_dir: Path, real_bash: Path | None) -> None:
    """Copy bash.exe next to the shim unless one is already there.

    Missing Git for Windows bash is not an error; Fork will report it itself.
    """
    bash_shim = binary_dir / "bash.exe"
    if bash_shim.exists():
        return
    if real_bash is None:
        logger.debug("No Git for Windows bash.exe found, skipping bash shim")
        return
    try:
        shutil.copy2(real_bash, bash_shim)
    except OSError as e:
        raise GitShimError(f"Failed to copy bash.exe from {real_bash} to {bash_shim}: {e}") from e

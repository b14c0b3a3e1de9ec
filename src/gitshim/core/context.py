"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from gitshim.cli.config import GitShimConfig, get_gitshim_home, load_config
from gitshim.core.installers.base import GitClientInstaller
from gitshim.core.installers.registry import build_installers
from gitshim.core.platform import HostPlatform, detect_host_platform
from gitshim.gateway.git.abc import GitExecutable
from gitshim.gateway.git.real import RealGitExecutable


@dataclass(frozen=True)
class GitShimContext:
    """Immutable context holding all dependencies for gitshim commands.

    Created once at the CLI entry point. Tests construct it directly with
    installers built on fake gateways.
    """

    host: HostPlatform
    installers: tuple[GitClientInstaller, ...]
    config: GitShimConfig
    git: GitExecutable


def create_context() -> GitShimContext:
    """Create the production context for the current machine."""
    host = detect_host_platform()
    gitshim_home = get_gitshim_home(os.environ, Path.home())
    return GitShimContext(
        host=host,
        installers=build_installers(host),
        config=load_config(gitshim_home, host=host),
        git=RealGitExecutable(),
    )

"""Installer registry - hardcoded list of all supported git clients."""

from collections.abc import Sequence

from gitshim.core.installers.base import GitClientInstaller
from gitshim.core.installers.fork import create_fork_installer
from gitshim.core.platform import HostPlatform


def build_installers(host: HostPlatform) -> tuple[GitClientInstaller, ...]:
    """Create every known client installer for the host platform.

    Variants are chosen once here; callers drive the returned installers
    through the GitClientInstaller interface without platform branching.
    """
    return (create_fork_installer(host),)


def get_installer(
    installers: Sequence[GitClientInstaller], client_id: str
) -> GitClientInstaller | None:
    """Get an installer by its id.

    Args:
        installers: Installers to search
        client_id: The client id (e.g., 'fork')

    Returns:
        The installer if found, None otherwise
    """
    for installer in installers:
        if installer.id == client_id:
            return installer
    return None

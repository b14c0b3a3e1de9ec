"""Host operating system detection."""

import platform
from typing import Literal

HostPlatform = Literal["macos", "windows", "linux"]


def detect_host_platform() -> HostPlatform:
    """Map the running operating system onto a HostPlatform.

    Anything that is neither macOS nor Windows is treated as linux, which
    every client variant handles with its no-op installer.
    """
    system = platform.system()
    if system == "Darwin":
        return "macos"
    if system == "Windows":
        return "windows"
    return "linux"

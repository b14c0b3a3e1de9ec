"""User configuration loaded from `<gitshim home>/config.toml`.

Example config.toml:

    [shim]
    # Defaults to <gitshim home>/bin/git (git.exe on Windows)
    path = "/Users/me/.gitshim/bin/git"

    [clients]
    # Client ids that `gitshim install` / `uninstall` leave alone
    disabled = ["fork"]
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from gitshim.core.errors import ConfigError
from gitshim.core.platform import HostPlatform

GITSHIM_HOME_ENV = "GITSHIM_HOME"


@dataclass(frozen=True)
class GitShimConfig:
    """In-memory representation of config.toml merged with defaults."""

    shim_path: Path
    disabled_clients: frozenset[str]


def get_gitshim_home(environ: Mapping[str, str], home: Path) -> Path:
    """Directory holding the shim and config, `$GITSHIM_HOME` or `~/.gitshim`."""
    override = environ.get(GITSHIM_HOME_ENV)
    if override:
        return Path(override)
    return home / ".gitshim"


def default_shim_path(gitshim_home: Path, host: HostPlatform) -> Path:
    executable = "git.exe" if host == "windows" else "git"
    return gitshim_home / "bin" / executable


def load_config(config_dir: Path, *, host: HostPlatform) -> GitShimConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Raises:
        tomllib.TOMLDecodeError: If config.toml is not valid TOML
        ConfigError: If a section or value has the wrong type
    """
    defaults = GitShimConfig(
        shim_path=default_shim_path(config_dir, host),
        disabled_clients=frozenset(),
    )

    cfg_path = config_dir / "config.toml"
    if not cfg_path.exists():
        return defaults

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    shim = data.get("shim", {})
    if not isinstance(shim, dict):
        raise ConfigError(cfg_path, "[shim] must be a table")
    clients = data.get("clients", {})
    if not isinstance(clients, dict):
        raise ConfigError(cfg_path, "[clients] must be a table")

    shim_path = defaults.shim_path
    raw_path = shim.get("path")
    if raw_path is not None:
        if not isinstance(raw_path, str):
            raise ConfigError(cfg_path, "shim.path must be a string")
        shim_path = Path(raw_path).expanduser()

    raw_disabled = clients.get("disabled", [])
    if not isinstance(raw_disabled, list) or not all(isinstance(x, str) for x in raw_disabled):
        raise ConfigError(cfg_path, "clients.disabled must be a list of client ids")
    disabled = frozenset(raw_disabled)
    return GitShimConfig(shim_path=shim_path, disabled_clients=disabled)

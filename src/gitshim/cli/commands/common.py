"""Helpers shared by the client commands."""

from pathlib import Path

import click

from gitshim.cli.ensure import UserFacingCliError
from gitshim.cli.output import user_output
from gitshim.core.context import GitShimContext
from gitshim.core.installers.base import GitClientInstaller, InstallerParams
from gitshim.core.installers.registry import get_installer

client_argument = click.argument("client", required=False)
shim_path_option = click.option(
    "--shim-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Git shim clients should invoke (defaults to the configured shim path).",
)
dry_run_option = click.option(
    "--dry-run", is_flag=True, help="Show the changes without writing anything."
)


def resolve_params(ctx: GitShimContext, shim_path: Path | None) -> InstallerParams:
    if shim_path is None:
        shim_path = ctx.config.shim_path
    return InstallerParams(git_shim_path=shim_path.expanduser())


def select_installers(ctx: GitShimContext, client: str | None) -> list[GitClientInstaller]:
    """Installers a command should act on.

    Without CLIENT: every installer supported on this platform and not
    disabled in config. With CLIENT: that installer alone (config is
    overridden by an explicit request), or nothing if unsupported here.

    Raises:
        UserFacingCliError: If CLIENT is not a known client id
    """
    if client is not None:
        installer = get_installer(ctx.installers, client)
        if installer is None:
            known = ", ".join(i.id for i in ctx.installers)
            raise UserFacingCliError(f"Unknown client: {client} (known clients: {known})")
        if not installer.is_platform_supported():
            user_output(f"{installer.name} is not supported on {ctx.host}, skipping")
            return []
        return [installer]

    selected: list[GitClientInstaller] = []
    for installer in ctx.installers:
        if not installer.is_platform_supported():
            continue
        if installer.id in ctx.config.disabled_clients:
            user_output(click.style("- ", dim=True) + f"{installer.name}: disabled in config")
            continue
        selected.append(installer)
    return selected

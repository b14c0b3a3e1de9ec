"""Install and uninstall the git shim in git clients."""

from pathlib import Path

import click

from gitshim.cli.commands.common import (
    client_argument,
    dry_run_option,
    resolve_params,
    select_installers,
    shim_path_option,
)
from gitshim.cli.ensure import UserFacingCliError
from gitshim.cli.output import machine_output, user_output
from gitshim.core.context import GitShimContext
from gitshim.core.errors import GitShimError


@click.command("install")
@client_argument
@dry_run_option
@shim_path_option
@click.pass_obj
def install_cmd(
    ctx: GitShimContext, client: str | None, dry_run: bool, shim_path: Path | None
) -> None:
    """Point git clients at the git shim.

    CLIENT limits the change to one client id (see `gitshim list`).
    Clients already using the shim are left untouched.
    """
    params = resolve_params(ctx, shim_path)
    if not dry_run and not params.git_shim_path.exists():
        raise UserFacingCliError(
            f"Git shim not found at {params.git_shim_path}. "
            "Pass --shim-path or set [shim] path in config.toml."
        )

    for installer in select_installers(ctx, client):
        try:
            diff = installer.install(params, dry_run=dry_run)
        except (GitShimError, OSError) as e:
            raise UserFacingCliError(f"{installer.name}: {e}") from e
        _report(
            installer.name, diff, dry_run=dry_run, unchanged="already up to date or not installed"
        )


@click.command("uninstall")
@client_argument
@dry_run_option
@shim_path_option
@click.pass_obj
def uninstall_cmd(
    ctx: GitShimContext, client: str | None, dry_run: bool, shim_path: Path | None
) -> None:
    """Revert git clients to the system git.

    CLIENT limits the change to one client id (see `gitshim list`).
    """
    params = resolve_params(ctx, shim_path)
    for installer in select_installers(ctx, client):
        try:
            diff = installer.uninstall(params, dry_run=dry_run)
        except (GitShimError, OSError) as e:
            raise UserFacingCliError(f"{installer.name}: {e}") from e
        _report(
            installer.name, diff, dry_run=dry_run, unchanged="not configured or not installed"
        )


def _report(name: str, diff: str | None, *, dry_run: bool, unchanged: str) -> None:
    if diff is None:
        user_output(click.style("○ ", fg="white") + f"{name}: {unchanged}")
        return
    if dry_run:
        user_output(click.style("◆ ", fg="cyan") + f"{name}: would apply")
    else:
        user_output(click.style("✓ ", fg="green") + f"{name}: applied")
    machine_output(diff, nl=False)

"""Check git client configuration status."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from gitshim.cli.commands.common import (
    client_argument,
    resolve_params,
    select_installers,
    shim_path_option,
)
from gitshim.cli.ensure import UserFacingCliError
from gitshim.cli.output import user_output
from gitshim.core.context import GitShimContext
from gitshim.core.errors import GitShimError


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


@click.command("check")
@client_argument
@shim_path_option
@click.pass_obj
def check_cmd(ctx: GitShimContext, client: str | None, shim_path: Path | None) -> None:
    """Show whether each git client is installed and pointed at the shim.

    Reads client preferences only; nothing is modified.
    """
    params = resolve_params(ctx, shim_path)
    installers = select_installers(ctx, client)
    if not installers:
        user_output(f"No git clients to check on {ctx.host}.")
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Client", style="cyan", no_wrap=True)
    table.add_column("Installed", no_wrap=True)
    table.add_column("Configured", no_wrap=True)
    table.add_column("Up to date", no_wrap=True)

    for installer in installers:
        try:
            result = installer.check(params)
        except (GitShimError, OSError) as e:
            raise UserFacingCliError(f"{installer.name}: {e}") from e
        table.add_row(
            installer.name,
            _flag(result.client_installed),
            _flag(result.prefs_configured),
            _flag(result.prefs_up_to_date),
        )

    user_output(f"Shim: {params.git_shim_path}")
    console = Console(stderr=True, force_terminal=True, width=200)
    console.print(table)

"""List known git clients."""

import click
from rich.console import Console
from rich.table import Table

from gitshim.core.context import GitShimContext


@click.command("list")
@click.pass_obj
def list_cmd(ctx: GitShimContext) -> None:
    """List the git clients gitshim knows how to configure."""
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Client", no_wrap=True)
    table.add_column("Platform", no_wrap=True)
    table.add_column("Config", no_wrap=True)

    for installer in ctx.installers:
        if installer.is_platform_supported():
            platform_display = "[green]supported[/green]"
        else:
            platform_display = "[dim]unsupported[/dim]"
        if installer.id in ctx.config.disabled_clients:
            config_display = "[yellow]disabled[/yellow]"
        else:
            config_display = "enabled"
        table.add_row(installer.id, installer.name, platform_display, config_display)

    # Output table to stderr (consistent with user_output convention)
    console = Console(stderr=True, force_terminal=True, width=200)
    console.print(table)

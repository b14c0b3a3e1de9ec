import logging
import tomllib

import click

from gitshim.cli.commands.check_cmd import check_cmd
from gitshim.cli.commands.install_cmd import install_cmd, uninstall_cmd
from gitshim.cli.commands.list_cmd import list_cmd
from gitshim.cli.commands.provision_cmd import provision_cmd
from gitshim.cli.ensure import UserFacingCliError
from gitshim.core.context import create_context
from gitshim.core.errors import ConfigError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitshim")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Point third-party git clients at the git shim."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except tomllib.TOMLDecodeError as e:
            raise UserFacingCliError(f"Invalid config.toml: {e}") from e
        except ConfigError as e:
            raise UserFacingCliError(str(e)) from e


cli.add_command(list_cmd)
cli.add_command(check_cmd)
cli.add_command(install_cmd)
cli.add_command(uninstall_cmd)
cli.add_command(provision_cmd)


def main() -> None:
    """CLI entry point used by the `gitshim` console script."""
    cli()

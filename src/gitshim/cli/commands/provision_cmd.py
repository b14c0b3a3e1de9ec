"""Provision the directory layout around the git shim."""

from pathlib import Path

import click

from gitshim.cli.commands.common import resolve_params, shim_path_option
from gitshim.cli.ensure import UserFacingCliError
from gitshim.cli.output import user_output
from gitshim.core.context import GitShimContext
from gitshim.core.errors import GitShimError
from gitshim.core.provisioning import ensure_git_symlinks


@click.command("provision")
@shim_path_option
@click.pass_obj
def provision_cmd(ctx: GitShimContext, shim_path: Path | None) -> None:
    """Link the shim's libexec directory to the real git's tooling.

    On Windows this also places bash.exe beside the shim, which Fork
    requires before it accepts a custom git.
    """
    params = resolve_params(ctx, shim_path)
    try:
        ensure_git_symlinks(params.git_shim_path, ctx.git, host=ctx.host)
    except (GitShimError, OSError) as e:
        raise UserFacingCliError(str(e)) from e
    base_dir = params.git_shim_path.parent.parent
    user_output(click.style("✓ ", fg="green") + f"Provisioned {base_dir}")

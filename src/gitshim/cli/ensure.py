"""CLI error type for failures the user needs to see."""

import click


class UserFacingCliError(click.ClickException):
    """Error shown as `Error: <message>` on stderr, exiting with status 1."""

    def show(self, file=None) -> None:
        click.echo(click.style("Error: ", fg="red") + self.format_message(), err=True)

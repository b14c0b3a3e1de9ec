"""Output helpers shared by CLI commands.

- user_output: human-facing status messages, written to stderr
- machine_output: command results (diffs), written to stdout so they can be piped
"""

import click


def user_output(message: str = "") -> None:
    click.echo(message, err=True)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    click.echo(message, nl=nl)

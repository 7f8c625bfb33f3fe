"""Output utilities for CLI commands with clear intent.

user_output() is for humans and goes to stderr. machine_output() is for
programs consuming the JSON document and goes to stdout. Keeping the two on
separate streams means diagnostics never corrupt the payload.
"""

import click


def user_output(message: str) -> None:
    """Write a human-readable message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Write machine-readable output to stdout."""
    click.echo(message)


def error_message(message: str) -> str:
    """Format an error line with the red "Error:" prefix."""
    return click.style("Error: ", fg="red") + message

"""Output utilities for CLI commands with clear intent.

Human-readable messages go to stderr, machine-readable data to stdout, so
`cicfacts fact --json | jq` never sees diagnostics.
"""

import click


def user_output(message: str = "") -> None:
    """Print a message for the person at the terminal (stderr)."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Print data meant for scripts and pipes (stdout)."""
    click.echo(message)


def format_fact_value(value: object) -> str:
    """Render a fact value the way facter prints it."""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)

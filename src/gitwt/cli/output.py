"""Output utilities for CLI commands with clear intent.

Human-readable messages and machine-readable results go to different streams
so the shell wrapper can capture stdout (a script path, or JSON) while the
user still sees progress on stderr.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Output informational message for human users.

    Routes to stderr so stdout stays clean for machine_output().
    """
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Output structured data for machine or shell-wrapper consumption.

    Routes to stdout.
    """
    click.echo(message, nl=nl)

"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency and exit with status 1.
"""

from pathlib import Path
from typing import NoReturn

import click

from gitwt.cli.output import user_output


def _fail(error_message: str) -> NoReturn:
    user_output(click.style("Error: ", fg="red") + error_message)
    raise SystemExit(1)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            _fail(error_message)

    @staticmethod
    def directory_exists(path: Path, error_message: str | None = None) -> None:
        """Ensure `path` is an existing directory, otherwise exit.

        Args:
            path: Directory expected to exist
            error_message: Optional custom message (defaults to "Path not found: {path}")

        Raises:
            SystemExit: If path is not a directory (with exit code 1)
        """
        if not path.is_dir():
            _fail(error_message if error_message is not None else f"Path not found: {path}")

"""JSON output utilities for CLI commands with machine-parseable output."""

from pydantic import BaseModel

from gitwt.cli.output import machine_output


def emit_json(response: BaseModel) -> None:
    """Output a validated response model as JSON on stdout.

    Routes JSON through machine_output() so data lands on stdout while human
    messages stay on stderr.
    """
    machine_output(response.model_dump_json(indent=2))

import click

from gitwt.cli.commands.create import create_cmd
from gitwt.cli.commands.list import list_cmd
from gitwt.cli.commands.remove import remove_cmd
from gitwt.cli.commands.shell_init import shell_init_cmd
from gitwt.cli.debug import configure_debug_logging
from gitwt.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitwt")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Create, list and remove git worktrees beside the repository."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    configure_debug_logging(ctx.obj.config.debug)


cli.add_command(create_cmd)
cli.add_command(list_cmd)
cli.add_command(remove_cmd)
cli.add_command(shell_init_cmd)


def main() -> None:
    """CLI entry point used by the `gitwt` console script."""
    cli()

import click

from gitwt.cli.ensure import Ensure
from gitwt.cli.output import machine_output
from gitwt.cli.shell_integration.wrappers import SUPPORTED_SHELLS, render_shell_functions
from gitwt.core.context import GitwtContext

DEFAULT_SHELL = "bash"


@click.command("shell-init")
@click.argument("shell", required=False)
@click.pass_obj
def shell_init_cmd(ctx: GitwtContext, shell: str | None) -> None:
    """Print the wt, wt-list and wt-remove shell functions.

    \b
    Add to ~/.bashrc or ~/.zshrc:
        eval "$(gitwt shell-init)"
    Or, for fish:
        gitwt shell-init fish | source

    SHELL defaults to $GITWT_SHELL, then the name of $SHELL, then bash. A
    detected shell without its own wrappers (sh, dash) also gets bash's.
    """
    if shell is not None:
        selected = shell
    elif ctx.config.shell is not None and ctx.config.shell in SUPPORTED_SHELLS:
        selected = ctx.config.shell
    else:
        selected = DEFAULT_SHELL
    Ensure.invariant(
        selected in SUPPORTED_SHELLS,
        f"Unsupported shell: {selected} (supported: {', '.join(SUPPORTED_SHELLS)})",
    )
    machine_output(render_shell_functions(selected), nl=False)

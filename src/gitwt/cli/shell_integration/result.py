"""Shell integration result helpers for command completion.

Commands that end by moving the caller's shell somewhere call finish_with_cd(),
which encapsulates:
- Script generation (a plain cd)
- Script writing through the context's ScriptWriter
- Output routing (script path in script mode, instructions in normal mode)
- Success exit (SystemExit(0))
"""

from pathlib import Path

from gitwt.cli.debug import debug_log
from gitwt.cli.output import machine_output, user_output
from gitwt.cli.shell_utils import render_cd_script
from gitwt.core.context import GitwtContext


def emit_script_path(script_path: Path) -> None:
    """Emit script path to stdout without newline for shell wrapper capture.

    The absence of a newline (nl=False) lets the wrapper use the captured
    output directly as a file name.
    """
    machine_output(str(script_path), nl=False)


def finish_with_cd(
    ctx: GitwtContext,
    target_path: Path,
    script: bool,
    command_name: str,
    *,
    success_message: str,
) -> None:
    """Finish command by changing the caller's directory to `target_path`.

    In script mode a cd script is written and its path printed on stdout for
    the shell wrapper to source. Otherwise the user is told how to enable
    shell integration and how to get there by hand.

    Args:
        ctx: Gitwt context (for script_writer)
        target_path: Directory the caller's shell should end up in
        script: Whether to output script path or user message
        command_name: Name of the command (for script naming and debug logging)
        success_message: Message the script echoes after changing directory

    Raises:
        SystemExit: Always (successful exit code 0)
    """
    if script:
        comment = f"cd to {target_path.name}"
        script_content = render_cd_script(
            target_path,
            comment=comment,
            success_message=success_message,
        )
        script_path = ctx.script_writer.write_script(
            script_content,
            command_name=command_name,
            comment=comment,
        )

        debug_log(f"{command_name.capitalize()}: Generated script at {script_path}")
        debug_log(f"{command_name.capitalize()}: Script content:\n{script_content}")

        emit_script_path(script_path)
    else:
        user_output(
            "\nShell integration not detected. "
            "Run 'eval \"$(gitwt shell-init)\"' to set up automatic directory changes."
        )
        user_output(f"Or use: cd {target_path}")
    raise SystemExit(0)

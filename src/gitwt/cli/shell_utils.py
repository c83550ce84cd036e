"""Rendering of the small shell scripts sourced by the shell wrappers."""

import shlex
from pathlib import Path


def render_cd_script(path: Path, *, comment: str, success_message: str) -> str:
    """Generate a shell script that changes to `path` and reports it.

    The script is POSIX sh, so bash and zsh source it as-is. The fish wrapper
    reads the same file through `source`, which accepts these two commands.

    Args:
        path: Directory to change to
        comment: Description placed in a comment at the top of the script
        success_message: Message echoed after the directory change

    Returns:
        Script body ending in a newline
    """
    quoted_path = shlex.quote(str(path))
    quoted_message = shlex.quote(success_message)
    lines = [
        f"# {comment}",
        f"cd {quoted_path}",
        f"echo {quoted_message}",
    ]
    return "\n".join(lines) + "\n"

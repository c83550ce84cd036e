from pathlib import Path

import click

from gitwt.cli.core import discover_repo_context, require_branch_argument
from gitwt.cli.ensure import Ensure
from gitwt.cli.output import user_output
from gitwt.cli.shell_integration.result import finish_with_cd
from gitwt.core.context import GitwtContext
from gitwt.core.worktree_paths import (
    remove_empty_dirs_up_to,
    remove_if_empty,
    resolve_worktree_target,
)


def _is_within(path: Path, directory: Path) -> bool:
    return path == directory or directory in path.parents


@click.command("remove")
@click.argument("branch_name", metavar="BRANCH_NAME", required=False, default="")
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Remove the worktree even if it has uncommitted changes or is locked.",
)
@click.option(
    "--script",
    is_flag=True,
    hidden=True,
    help="Output shell script for directory change instead of messages.",
)
@click.pass_obj
def remove_cmd(ctx: GitwtContext, branch_name: str, force: bool, script: bool) -> None:
    """Remove the worktree for BRANCH_NAME.

    The branch itself is kept. Once the last worktree is gone the empty
    <repo>_worktrees directory is deleted as well.
    """
    branch = require_branch_argument(branch_name)
    repo = discover_repo_context(ctx)
    target = resolve_worktree_target(repo, branch)

    Ensure.directory_exists(
        target.path,
        f"Worktree not found: {target.path}\nUse 'gitwt list' to see existing worktrees.",
    )

    try:
        ctx.git.remove_worktree(repo.root, target.path, force=force)
    except RuntimeError as e:
        user_output(
            click.style("Error: ", fg="red") + f"Failed to remove worktree at {target.path}"
        )
        if not force:
            user_output(
                "Hint: it may have uncommitted changes or be locked. "
                f"Retry with 'gitwt remove --force {branch}' to discard them."
            )
        user_output()
        user_output(str(e))
        raise SystemExit(1) from e

    user_output(click.style("✓", fg="green") + f" Removed worktree at {target.path}")

    # Nested branch names ("team/feature") leave intermediate directories behind
    remove_empty_dirs_up_to(target.path.parent, target.worktrees_dir)
    if remove_if_empty(target.worktrees_dir):
        user_output(f"Removed empty worktrees directory {target.worktrees_dir}")

    if _is_within(ctx.cwd.resolve(), target.path.resolve()):
        finish_with_cd(
            ctx,
            repo.root,
            script,
            "remove",
            success_message=f"✓ Switched to repository root: {repo.root}",
        )

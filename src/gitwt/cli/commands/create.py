import click

from gitwt.cli.core import discover_repo_context, require_branch_argument
from gitwt.cli.output import user_output
from gitwt.cli.shell_integration.result import finish_with_cd
from gitwt.core.branch_resolution import BranchResolution, classify_branch, creation_strategy
from gitwt.core.constants import DEFAULT_REMOTE
from gitwt.core.context import GitwtContext
from gitwt.core.git.abc import find_worktree_for_branch
from gitwt.core.worktree_paths import WorktreeTarget, resolve_worktree_target


def _describe_resolution(resolution: BranchResolution, branch: str) -> str:
    match resolution:
        case BranchResolution.LOCAL:
            return f"Using existing local branch '{branch}'"
        case BranchResolution.REMOTE:
            return f"Creating local branch '{branch}' tracking '{DEFAULT_REMOTE}/{branch}'"
        case BranchResolution.NOT_FOUND:
            return f"Creating new branch '{branch}' from current HEAD"


def _report_add_failure(
    ctx: GitwtContext, target: WorktreeTarget, resolution: BranchResolution, error: RuntimeError
) -> None:
    user_output(click.style("Error: ", fg="red") + f"Failed to create worktree at {target.path}")

    if resolution is not BranchResolution.NOT_FOUND:
        # LOCAL and REMOTE both name an existing branch; git refuses double checkouts
        checked_out_at = find_worktree_for_branch(ctx.git.list_worktrees(ctx.cwd), target.branch)
        if checked_out_at is not None:
            user_output(
                f"Hint: branch '{target.branch}' is already checked out at {checked_out_at}"
            )
        else:
            user_output(f"Hint: branch '{target.branch}' may be checked out in another worktree")
    else:
        user_output(f"Hint: '{target.branch}' may not be a valid branch name")

    user_output()
    user_output(str(error))


@click.command("create")
@click.argument("branch_name", metavar="BRANCH_NAME", required=False, default="")
@click.option(
    "--script",
    is_flag=True,
    hidden=True,
    help="Output shell script for directory change instead of messages.",
)
@click.pass_obj
def create_cmd(ctx: GitwtContext, branch_name: str, script: bool) -> None:
    """Create a worktree for BRANCH_NAME beside the repository and switch to it.

    The worktree lives at <parent>/<repo>_worktrees/<BRANCH_NAME>. An existing
    local branch is checked out as-is; a branch that only exists as
    origin/<BRANCH_NAME> gets a local branch tracking it; anything else becomes
    a new branch from the current HEAD.

    Only remote-tracking refs already fetched are consulted. Run `git fetch`
    first if the branch was pushed from elsewhere.
    """
    branch = require_branch_argument(branch_name)
    repo = discover_repo_context(ctx)
    target = resolve_worktree_target(repo, branch)

    user_output(f"Project: {click.style(repo.repo_name, fg='cyan', bold=True)}")
    user_output(f"Worktrees directory: {target.worktrees_dir}")
    user_output(f"Target: {target.path}")

    if target.path.is_dir():
        current_branch = ctx.git.get_current_branch(target.path)
        user_output(f"Worktree already exists at {target.path}")
        branch_display = (
            click.style(current_branch, fg="yellow")
            if current_branch is not None
            else "(detached HEAD)"
        )
        user_output(f"Checked out: {branch_display}")
        finish_with_cd(
            ctx,
            target.path,
            script,
            "create",
            success_message=f"✓ Switched to existing worktree: {target.path}",
        )

    target.worktrees_dir.mkdir(parents=True, exist_ok=True)

    resolution = classify_branch(ctx.git, ctx.cwd, branch)
    user_output(_describe_resolution(resolution, branch))
    if resolution is BranchResolution.NOT_FOUND:
        user_output(
            click.style("Note: ", fg="yellow")
            + f"only locally cached '{DEFAULT_REMOTE}' refs were checked. "
            + "If the branch exists upstream, run 'git fetch' and remove this worktree."
        )

    creation = creation_strategy(resolution, branch)
    try:
        ctx.git.add_worktree(
            ctx.cwd,
            target.path,
            branch=creation.branch,
            create_branch=creation.create_branch,
            start_point=creation.start_point,
            track=creation.track,
        )
    except RuntimeError as e:
        _report_add_failure(ctx, target, resolution, e)
        raise SystemExit(1) from e

    checked_out = ctx.git.get_current_branch(target.path) or branch
    user_output(click.style("✓", fg="green") + f" Created worktree at {target.path}")
    user_output(f"Checked out: {click.style(checked_out, fg='yellow')}")

    finish_with_cd(
        ctx,
        target.path,
        script,
        "create",
        success_message=f"✓ Switched to new worktree: {target.path}",
    )

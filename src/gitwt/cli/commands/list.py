import click

from gitwt.cli.core import discover_repo_context
from gitwt.cli.json_output import emit_json
from gitwt.cli.json_schemas import ListCommandResponse, WorktreeEntry
from gitwt.cli.output import user_output
from gitwt.core.constants import SHORT_SHA_LENGTH
from gitwt.core.context import GitwtContext
from gitwt.core.git.abc import WorktreeInfo


def format_worktree_line(info: WorktreeInfo) -> str:
    """Render one worktree as a single display line.

    Example:
        feature  /work/demo_worktrees/feature  [feature]  1a2b3c4d
    """
    name = click.style(info.path.name, fg="cyan", bold=True)
    if info.branch is not None:
        branch = click.style(f"[{info.branch}]", fg="yellow")
    else:
        branch = click.style("(detached HEAD)", fg="red")
    commit = info.head[:SHORT_SHA_LENGTH] if info.head else "-"

    parts = [name, str(info.path), branch, click.style(commit, dim=True)]
    if info.is_root:
        parts.append(click.style("(root)", fg="white", dim=True))
    if info.is_locked:
        parts.append(click.style("locked", fg="magenta"))
    if info.is_prunable:
        parts.append(click.style("prunable", fg="magenta"))
    return "  ".join(parts)


@click.command("list")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON with worktree information instead of a table.",
)
@click.pass_obj
def list_cmd(ctx: GitwtContext, output_json: bool) -> None:
    """List the repository's worktrees in the order git reports them."""
    repo = discover_repo_context(ctx)
    worktrees = ctx.git.list_worktrees(ctx.cwd)

    if output_json:
        response = ListCommandResponse(
            repo_name=repo.repo_name,
            worktrees=[WorktreeEntry.from_info(info) for info in worktrees],
        )
        emit_json(response)
        return

    user_output(f"Worktrees for {click.style(repo.repo_name, fg='cyan', bold=True)}:")
    for info in worktrees:
        user_output(format_worktree_line(info))

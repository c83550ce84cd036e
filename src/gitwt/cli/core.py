import click

from gitwt.cli.output import user_output
from gitwt.core.context import GitwtContext
from gitwt.core.repo_discovery import NoRepoSentinel, RepoContext, discover_repo_or_sentinel


def discover_repo_context(ctx: GitwtContext) -> RepoContext:
    """Locate the repository for ctx.cwd or exit with a user-facing error.

    Raises:
        SystemExit: If ctx.cwd is not inside a git repository (exit code 1)
    """
    repo = discover_repo_or_sentinel(ctx.cwd, ctx.git)
    if isinstance(repo, NoRepoSentinel):
        user_output(click.style("Error: ", fg="red") + repo.message)
        user_output("Please run this command from within a git repository")
        raise SystemExit(1)
    return repo


def require_branch_argument(branch_name: str | None) -> str:
    """Return the branch argument, or exit with an error and usage if it is missing.

    The argument is declared optional on the click command and checked here so
    a missing or empty name exits with status 1 rather than click's usage code.
    """
    if not branch_name:
        user_output(click.style("Error: ", fg="red") + "Branch name is required")
        user_output(click.get_current_context().get_usage())
        raise SystemExit(1)
    return branch_name

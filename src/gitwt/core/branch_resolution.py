"""Branch classification and the worktree creation strategy it selects."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from gitwt.core.constants import DEFAULT_REMOTE
from gitwt.core.git.abc import Git


class BranchResolution(Enum):
    """Where a branch name was found."""

    LOCAL = "local"
    REMOTE = "remote"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class WorktreeCreation:
    """Arguments for Git.add_worktree() derived from a BranchResolution."""

    branch: str
    create_branch: bool
    start_point: str | None
    track: bool


def classify_branch(
    git_ops: Git, cwd: Path, branch: str, *, remote: str = DEFAULT_REMOTE
) -> BranchResolution:
    """Classify `branch` as local, remote-only, or unknown.

    A local branch wins over a same-named remote-tracking branch so existing
    local commits are never silently swapped for the remote's.

    Only locally cached remote-tracking refs are consulted; nothing is
    fetched. A branch that exists upstream but was never fetched classifies
    as NOT_FOUND.
    """
    if git_ops.local_branch_exists(cwd, branch):
        return BranchResolution.LOCAL
    if git_ops.remote_branch_exists(cwd, remote, branch):
        return BranchResolution.REMOTE
    return BranchResolution.NOT_FOUND


def creation_strategy(
    resolution: BranchResolution, branch: str, *, remote: str = DEFAULT_REMOTE
) -> WorktreeCreation:
    """Select how the worktree for `branch` is created.

    - LOCAL: check out the existing local branch
    - REMOTE: create a local branch from `<remote>/<branch>` tracking it
    - NOT_FOUND: create a new branch from the caller's current HEAD
    """
    match resolution:
        case BranchResolution.LOCAL:
            return WorktreeCreation(
                branch=branch, create_branch=False, start_point=None, track=False
            )
        case BranchResolution.REMOTE:
            return WorktreeCreation(
                branch=branch,
                create_branch=True,
                start_point=f"{remote}/{branch}",
                track=True,
            )
        case BranchResolution.NOT_FOUND:
            return WorktreeCreation(
                branch=branch, create_branch=True, start_point=None, track=False
            )

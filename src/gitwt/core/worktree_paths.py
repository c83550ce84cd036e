"""Derivation of sibling worktree locations.

Worktrees of `<parent>/<repo>` live under `<parent>/<repo>_worktrees/<branch>`.
Keeping them beside the repository rather than inside it stops git from
treating them as untracked content of the main working tree.
"""

from dataclasses import dataclass
from pathlib import Path

from gitwt.core.constants import WORKTREES_DIR_SUFFIX
from gitwt.core.repo_discovery import RepoContext


@dataclass(frozen=True)
class WorktreeTarget:
    """Where the worktree for a branch lives."""

    branch: str
    worktrees_dir: Path
    path: Path


def worktrees_dir_for(repo: RepoContext) -> Path:
    """Return the sibling directory that holds every worktree of `repo`."""
    return repo.parent_dir / f"{repo.repo_name}{WORKTREES_DIR_SUFFIX}"


def resolve_worktree_target(repo: RepoContext, branch: str) -> WorktreeTarget:
    """Compute the worktree location for `branch`.

    The branch name is used verbatim as a path segment, so "team/feature"
    lands in a nested directory, mirroring how git lays out refs.

    Raises:
        ValueError: If branch is empty
    """
    if not branch:
        raise ValueError("Branch name must not be empty")

    worktrees_dir = worktrees_dir_for(repo)
    return WorktreeTarget(
        branch=branch,
        worktrees_dir=worktrees_dir,
        path=Path(f"{worktrees_dir}/{branch}"),
    )


def remove_empty_dirs_up_to(start: Path, stop: Path) -> list[Path]:
    """Remove `start` and its empty ancestors, stopping before `stop`.

    Used after a nested worktree ("team/feature") is removed so that its
    now-empty parent directories do not linger. Directories that still have
    content, and `stop` itself, are left alone.

    Returns:
        Directories that were removed, innermost first
    """
    removed: list[Path] = []
    current = start
    while current != stop and stop in current.parents:
        if not current.is_dir() or any(current.iterdir()):
            break
        current.rmdir()
        removed.append(current)
        current = current.parent
    return removed


def remove_if_empty(directory: Path) -> bool:
    """Remove `directory` if it exists and has no entries.

    Returns:
        True if the directory was removed
    """
    if not directory.is_dir() or any(directory.iterdir()):
        return False
    directory.rmdir()
    return True

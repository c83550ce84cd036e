"""Repository discovery functionality.

Discovers git repository information from an injected working directory. The
git gateway carries the injected environment, so nothing here reads ambient
process state.
"""

from dataclasses import dataclass
from pathlib import Path

from gitwt.core.git.abc import Git


@dataclass(frozen=True)
class RepoContext:
    """Represents a git repo root and where its sibling worktrees live."""

    root: Path
    repo_name: str
    parent_dir: Path


@dataclass(frozen=True)
class NoRepoSentinel:
    """Sentinel value indicating execution outside a git repository.

    Commands that require repo context check for this sentinel and fail fast.
    """

    message: str = "Not in a git repository"


def discover_repo_or_sentinel(cwd: Path, git_ops: Git) -> RepoContext | NoRepoSentinel:
    """Locate the repository containing `cwd`.

    Resolves the repository's top-level directory rather than the caller's
    possibly nested subdirectory. From inside a linked worktree this is the
    main working tree, so sibling directories never nest.

    Args:
        cwd: Current working directory to start from
        git_ops: Git operations interface

    Returns:
        RepoContext if inside a git repository, NoRepoSentinel otherwise
    """
    root = git_ops.get_repository_root(cwd)
    if root is None:
        return NoRepoSentinel()

    return RepoContext(root=root, repo_name=root.name, parent_dir=root.parent)

"""High-level git operations interface.

This module provides a narrow abstraction over the git subprocess calls gitwt
needs, making the command handlers testable without a real repository.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess (gitwt.core.git.real)
- FakeGit: In-memory implementation for tests (gitwt.core.git.fake)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WorktreeInfo:
    """Information about a single git worktree."""

    path: Path
    branch: str | None
    head: str | None
    is_root: bool = False
    is_locked: bool = False
    is_prunable: bool = False


def find_worktree_for_branch(worktrees: list[WorktreeInfo], branch: str) -> Path | None:
    """Find the path of the worktree that has the given branch checked out.

    Args:
        worktrees: List of worktrees to search
        branch: Branch name to find

    Returns:
        Path to the worktree with the branch checked out, or None if not found
    """
    for wt in worktrees:
        if wt.branch == branch:
            return wt.path
    return None


# ============================================================================
# Abstract Interface
# ============================================================================


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the root of the repository containing cwd.

        When cwd is inside a linked worktree, returns the root of the main
        working tree rather than the linked worktree's own top level.

        Args:
            cwd: Directory to start from

        Returns:
            Absolute repository root, or None if cwd is not inside a repository
        """
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch, or None for a detached HEAD."""
        ...

    @abstractmethod
    def local_branch_exists(self, cwd: Path, branch: str) -> bool:
        """Check whether refs/heads/<branch> exists."""
        ...

    @abstractmethod
    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        """Check whether refs/remotes/<remote>/<branch> exists.

        Only locally cached remote-tracking refs are consulted. This never
        contacts the remote.
        """
        ...

    @abstractmethod
    def add_worktree(
        self,
        cwd: Path,
        path: Path,
        *,
        branch: str,
        create_branch: bool,
        start_point: str | None = None,
        track: bool = False,
    ) -> None:
        """Add a new git worktree.

        Args:
            cwd: Directory to run git from (its HEAD is the default start point)
            path: Path where the worktree should be created
            branch: Branch to check out in the new worktree
            create_branch: True to create `branch`, False to check out an existing one
            start_point: Ref the new branch starts from (None means HEAD of cwd)
            track: Set up `start_point` as the upstream of the new branch

        Raises:
            RuntimeError: If git refuses to add the worktree
        """
        ...

    @abstractmethod
    def list_worktrees(self, cwd: Path) -> list[WorktreeInfo]:
        """List all worktrees registered with the repository, in git's order."""
        ...

    @abstractmethod
    def remove_worktree(self, cwd: Path, path: Path, *, force: bool) -> None:
        """Remove a worktree.

        Args:
            cwd: Directory to run git from
            path: Path to the worktree to remove
            force: True to remove even with uncommitted changes or locks

        Raises:
            RuntimeError: If git refuses to remove the worktree
        """
        ...

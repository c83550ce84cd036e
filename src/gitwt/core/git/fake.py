"""Fake implementation of Git for testing.

Branches, remote-tracking refs and the worktree registry are held in memory.
Like git itself, adding a worktree creates its directory and removing one
deletes it, so command handlers that inspect the filesystem behave the same
against the fake as against a real repository.
"""

import shutil
from pathlib import Path

from gitwt.core.git.abc import Git, WorktreeInfo, find_worktree_for_branch


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    Constructor Injection:
    - Initial state is provided via constructor parameters
    - add_worktree/remove_worktree mutate the registry the way git would

    Examples:
        >>> git = FakeGit(
        ...     repository_roots={Path("/work/demo"): Path("/work/demo")},
        ...     worktrees={
        ...         Path("/work/demo"): [
        ...             WorktreeInfo(path=Path("/work/demo"), branch="main", head="abc123")
        ...         ]
        ...     },
        ...     local_branches={"main": "abc123"},
        ...     remote_branches={"origin/feature": "def456"},
        ... )
        >>> git.local_branch_exists(Path("/work/demo"), "main")
        True
    """

    def __init__(
        self,
        *,
        repository_roots: dict[Path, Path] | None = None,
        worktrees: dict[Path, list[WorktreeInfo]] | None = None,
        local_branches: dict[str, str] | None = None,
        remote_branches: dict[str, str] | None = None,
        dirty_worktrees: set[Path] | None = None,
        add_worktree_error: str | None = None,
        remove_worktree_error: str | None = None,
    ) -> None:
        """Initialize fake with repository state.

        Args:
            repository_roots: Mapping of directory -> repository root. Any
                descendant of a key resolves to the same root.
            worktrees: Mapping of repository root -> registered worktrees
            local_branches: Mapping of local branch name -> commit SHA
            remote_branches: Mapping of "<remote>/<branch>" -> commit SHA
            dirty_worktrees: Worktree paths that refuse non-forced removal
            add_worktree_error: If set, add_worktree() raises RuntimeError with it
            remove_worktree_error: If set, remove_worktree() raises RuntimeError with it
        """
        self._repository_roots = repository_roots or {}
        self._worktrees = {root: list(wts) for root, wts in (worktrees or {}).items()}
        self._local_branches = dict(local_branches or {})
        self._remote_branches = dict(remote_branches or {})
        self._dirty_worktrees = set(dirty_worktrees or set())
        self._add_worktree_error = add_worktree_error
        self._remove_worktree_error = remove_worktree_error
        self._upstreams: dict[str, str] = {}
        self._added_worktrees: list[tuple[Path, str, bool, str | None]] = []
        self._removed_worktrees: list[tuple[Path, bool]] = []

    # ------------------------------------------------------------------
    # Git interface
    # ------------------------------------------------------------------

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Return the configured root for cwd or any of its ancestors.

        Directories inside a registered linked worktree resolve to the main
        root, as git does.
        """
        for candidate in [cwd, *cwd.parents]:
            if candidate in self._repository_roots:
                return self._repository_roots[candidate]
        for root, worktrees in self._worktrees.items():
            for wt in worktrees:
                if cwd == wt.path or wt.path in cwd.parents:
                    return root
        return None

    def get_current_branch(self, cwd: Path) -> str | None:
        """Return the branch of the worktree containing cwd."""
        worktree = self._worktree_containing(cwd)
        if worktree is None:
            return None
        return worktree.branch

    def local_branch_exists(self, cwd: Path, branch: str) -> bool:
        """Check the in-memory local branch table."""
        return branch in self._local_branches

    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        """Check the in-memory remote-tracking branch table."""
        return f"{remote}/{branch}" in self._remote_branches

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
        """Register a worktree and create its directory, failing where git would."""
        if self._add_worktree_error is not None:
            raise RuntimeError(self._add_worktree_error)

        root = self._require_root(cwd)
        registered = self._worktrees.setdefault(root, [])

        if path.exists() and any(path.iterdir()):
            raise RuntimeError(f"'{path}' already exists")

        if create_branch:
            if branch in self._local_branches:
                raise RuntimeError(f"a branch named '{branch}' already exists")
            head = self._resolve_start_point(cwd, start_point)
            self._local_branches[branch] = head
            if track and start_point is not None:
                self._upstreams[branch] = start_point
        else:
            if branch not in self._local_branches:
                raise RuntimeError(f"invalid reference: {branch}")
            checked_out_at = find_worktree_for_branch(registered, branch)
            if checked_out_at is not None:
                raise RuntimeError(f"'{branch}' is already checked out at '{checked_out_at}'")
            head = self._local_branches[branch]

        path.mkdir(parents=True, exist_ok=True)
        registered.append(WorktreeInfo(path=path, branch=branch, head=head))
        self._added_worktrees.append((path, branch, create_branch, start_point))

    def list_worktrees(self, cwd: Path) -> list[WorktreeInfo]:
        """Return registered worktrees for the repository containing cwd."""
        root = self._require_root(cwd)
        return list(self._worktrees.get(root, []))

    def remove_worktree(self, cwd: Path, path: Path, *, force: bool) -> None:
        """Unregister a worktree and delete its directory, failing where git would."""
        if self._remove_worktree_error is not None:
            raise RuntimeError(self._remove_worktree_error)

        root = self._require_root(cwd)
        registered = self._worktrees.get(root, [])
        matching = [wt for wt in registered if wt.path == path]
        if not matching:
            raise RuntimeError(f"'{path}' is not a working tree")
        if matching[0].is_root:
            raise RuntimeError(f"'{path}' is a main working tree")
        if path in self._dirty_worktrees and not force:
            raise RuntimeError(
                f"'{path}' contains modified or untracked files, use --force to delete it"
            )

        self._worktrees[root] = [wt for wt in registered if wt.path != path]
        if path.exists():
            shutil.rmtree(path)
        self._removed_worktrees.append((path, force))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_root(self, cwd: Path) -> Path:
        root = self.get_repository_root(cwd)
        if root is None:
            raise RuntimeError(f"not a git repository: {cwd}")
        return root

    def _worktree_containing(self, cwd: Path) -> WorktreeInfo | None:
        root = self.get_repository_root(cwd)
        if root is None:
            return None
        # Deepest match wins so linked worktrees nested under the root resolve correctly
        best: WorktreeInfo | None = None
        for wt in self._worktrees.get(root, []):
            if cwd == wt.path or wt.path in cwd.parents:
                if best is None or len(wt.path.parts) > len(best.path.parts):
                    best = wt
        return best

    def _resolve_start_point(self, cwd: Path, start_point: str | None) -> str:
        if start_point is None:
            worktree = self._worktree_containing(cwd)
            if worktree is None or worktree.head is None:
                raise RuntimeError("invalid reference: HEAD")
            return worktree.head
        if start_point in self._local_branches:
            return self._local_branches[start_point]
        if start_point in self._remote_branches:
            return self._remote_branches[start_point]
        raise RuntimeError(f"invalid reference: {start_point}")

    # ------------------------------------------------------------------
    # Test assertions
    # ------------------------------------------------------------------

    @property
    def local_branches(self) -> dict[str, str]:
        """Current local branch table (branch -> SHA).

        This property is for test assertions only.
        """
        return dict(self._local_branches)

    @property
    def upstreams(self) -> dict[str, str]:
        """Upstream configured for branches created with track=True.

        This property is for test assertions only.
        """
        return dict(self._upstreams)

    @property
    def added_worktrees(self) -> list[tuple[Path, str, bool, str | None]]:
        """Get the list of add_worktree() calls that succeeded.

        Returns list of (path, branch, create_branch, start_point) tuples.

        This property is for test assertions only.
        """
        return self._added_worktrees.copy()

    @property
    def removed_worktrees(self) -> list[tuple[Path, bool]]:
        """Get the list of remove_worktree() calls that succeeded.

        Returns list of (path, force) tuples.

        This property is for test assertions only.
        """
        return self._removed_worktrees.copy()

"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import logging
import subprocess
from collections.abc import Mapping
from pathlib import Path

from gitwt.core.git.abc import Git, WorktreeInfo
from gitwt.core.git.parsing import parse_worktree_porcelain
from gitwt.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess. The
    environment handed to git is injected at construction time so callers
    control GIT_DIR, GIT_WORK_TREE and friends explicitly.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = dict(env) if env is not None else None

    def _probe(self, cmd: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
        """Run a read-only query whose non-zero exit is an answer, not an error."""
        logger.debug("Probing %s (cwd=%s)", " ".join(cmd), cwd)
        return subprocess.run(
            cmd,
            cwd=cwd,
            env=self._env,
            capture_output=True,
            text=True,
            check=False,
        )

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the main working tree root for the repository containing cwd."""
        if not cwd.exists():
            return None

        result = self._probe(
            ["git", "rev-parse", "--path-format=absolute", "--show-toplevel"], cwd
        )
        if result.returncode != 0:
            return None

        toplevel = result.stdout.strip()
        if not toplevel:
            return None

        # The first listed worktree is always the main one, whatever the git dir is called
        listing = self._probe(["git", "worktree", "list", "--porcelain"], cwd)
        if listing.returncode == 0:
            worktrees = parse_worktree_porcelain(listing.stdout)
            if worktrees and worktrees[0].head is not None:
                return worktrees[0].path.resolve()

        # Bare repositories list the git dir first; stay in the caller's checkout
        return Path(toplevel).resolve()

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        result = self._probe(["git", "branch", "--show-current"], cwd)
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if not branch:
            return None
        return branch

    def local_branch_exists(self, cwd: Path, branch: str) -> bool:
        """Check whether refs/heads/<branch> exists."""
        result = self._probe(
            ["git", "show-ref", "--verify", "--quiet", f"refs/heads/{branch}"], cwd
        )
        return result.returncode == 0

    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        """Check whether refs/remotes/<remote>/<branch> exists."""
        result = self._probe(
            ["git", "show-ref", "--verify", "--quiet", f"refs/remotes/{remote}/{branch}"], cwd
        )
        return result.returncode == 0

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
        """Add a new git worktree."""
        if create_branch:
            cmd = ["git", "worktree", "add"]
            if track:
                cmd.append("--track")
            cmd.extend(["-b", branch, str(path)])
            if start_point is not None:
                cmd.append(start_point)
            context = f"add worktree with new branch '{branch}' at {path}"
        else:
            cmd = ["git", "worktree", "add", str(path), branch]
            context = f"add worktree for branch '{branch}' at {path}"

        run_subprocess_with_context(cmd, operation_context=context, cwd=cwd, env=self._env)

    def list_worktrees(self, cwd: Path) -> list[WorktreeInfo]:
        """List all worktrees in the repository."""
        result = run_subprocess_with_context(
            ["git", "worktree", "list", "--porcelain"],
            operation_context="list worktrees",
            cwd=cwd,
            env=self._env,
        )
        return parse_worktree_porcelain(result.stdout)

    def remove_worktree(self, cwd: Path, path: Path, *, force: bool) -> None:
        """Remove a worktree."""
        cmd = ["git", "worktree", "remove"]
        if force:
            cmd.append("--force")
        cmd.append(str(path))
        run_subprocess_with_context(
            cmd,
            operation_context=f"remove worktree at {path}",
            cwd=cwd,
            env=self._env,
        )

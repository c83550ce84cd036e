from gitwt.core.git.abc import Git, WorktreeInfo, find_worktree_for_branch
from gitwt.core.git.real import RealGit

__all__ = ["Git", "RealGit", "WorktreeInfo", "find_worktree_for_branch"]

"""Pydantic models for JSON output schemas.

These models validate the structure emitted by `gitwt list --json`.
"""

from pydantic import BaseModel, ConfigDict, Field

from gitwt.core.constants import SHORT_SHA_LENGTH
from gitwt.core.git.abc import WorktreeInfo


class WorktreeEntry(BaseModel):
    """One registered worktree.

    Attributes:
        path: Absolute path to the worktree directory
        branch: Checked-out branch, or None for a detached HEAD
        commit: Full commit SHA the worktree points at (None for bare entries)
        short_commit: Abbreviated commit SHA
        is_root: Whether this is the main working tree
        is_locked: Whether git reports the worktree as locked
        is_prunable: Whether git reports the worktree as prunable
    """

    model_config = ConfigDict(strict=True)

    path: str
    branch: str | None
    commit: str | None
    short_commit: str | None = Field(default=None, max_length=SHORT_SHA_LENGTH)
    is_root: bool
    is_locked: bool
    is_prunable: bool

    @classmethod
    def from_info(cls, info: WorktreeInfo) -> "WorktreeEntry":
        return cls(
            path=str(info.path),
            branch=info.branch,
            commit=info.head,
            short_commit=info.head[:SHORT_SHA_LENGTH] if info.head else None,
            is_root=info.is_root,
            is_locked=info.is_locked,
            is_prunable=info.is_prunable,
        )


class ListCommandResponse(BaseModel):
    """JSON response schema for the `gitwt list` command.

    Attributes:
        repo_name: Name of the repository
        worktrees: Worktrees in the order git reports them
    """

    model_config = ConfigDict(strict=True)

    repo_name: str
    worktrees: list[WorktreeEntry]

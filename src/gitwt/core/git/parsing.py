"""Parsing for `git worktree list --porcelain` output."""

from pathlib import Path

from gitwt.core.git.abc import WorktreeInfo

_BRANCH_REF_PREFIX = "refs/heads/"


def parse_worktree_porcelain(output: str) -> list[WorktreeInfo]:
    """Parse porcelain worktree listing into WorktreeInfo entries.

    Format (one attribute per line, blank line between entries):

        worktree /path/to/worktree
        HEAD <sha>
        branch refs/heads/<name>      (or "detached", or "bare")
        locked [reason]               (optional)
        prunable [reason]             (optional)

    The first entry is always the main working tree and is marked as root.
    Entry order is preserved exactly as git reports it.
    """
    worktrees: list[WorktreeInfo] = []
    current: dict[str, str | bool] | None = None

    def flush() -> None:
        if current is None:
            return
        path = current.get("path")
        if not isinstance(path, str):
            return
        branch = current.get("branch")
        head = current.get("head")
        worktrees.append(
            WorktreeInfo(
                path=Path(path),
                branch=branch if isinstance(branch, str) else None,
                head=head if isinstance(head, str) else None,
                is_root=not worktrees,
                is_locked=bool(current.get("locked", False)),
                is_prunable=bool(current.get("prunable", False)),
            )
        )

    # Values run to the end of the line; paths may carry leading or trailing spaces
    for line in output.split("\n"):
        if not line:
            flush()
            current = None
            continue

        key, _, value = line.partition(" ")
        if key == "worktree":
            flush()
            current = {"path": value}
            continue
        if current is None:
            continue

        if key == "HEAD":
            current["head"] = value
        elif key == "branch":
            if value.startswith(_BRANCH_REF_PREFIX):
                current["branch"] = value[len(_BRANCH_REF_PREFIX) :]
            else:
                current["branch"] = value
        elif key == "locked":
            current["locked"] = True
        elif key == "prunable":
            current["prunable"] = True

    flush()
    return worktrees

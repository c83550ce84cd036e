"""Tests for sibling worktree path derivation and empty-directory cleanup."""

from pathlib import Path

import pytest

from gitwt.core.repo_discovery import RepoContext
from gitwt.core.worktree_paths import (
    remove_empty_dirs_up_to,
    remove_if_empty,
    resolve_worktree_target,
    worktrees_dir_for,
)

DEMO = RepoContext(root=Path("/work/demo"), repo_name="demo", parent_dir=Path("/work"))


def test_worktrees_dir_is_sibling_of_root() -> None:
    worktrees_dir = worktrees_dir_for(DEMO)

    assert worktrees_dir == Path("/work/demo_worktrees")
    assert worktrees_dir.parent == DEMO.root.parent
    assert DEMO.root not in worktrees_dir.parents


def test_resolve_simple_branch() -> None:
    target = resolve_worktree_target(DEMO, "x")

    assert target.branch == "x"
    assert target.worktrees_dir == Path("/work/demo_worktrees")
    assert target.path == Path("/work/demo_worktrees/x")


def test_resolve_branch_with_slash_nests() -> None:
    assert resolve_worktree_target(DEMO, "a/b").path == Path("/work/demo_worktrees/a/b")


def test_resolve_is_deterministic() -> None:
    first = resolve_worktree_target(DEMO, "team/feature")
    resolve_worktree_target(DEMO, "other")

    assert resolve_worktree_target(DEMO, "team/feature") == first


def test_resolve_rejects_empty_branch() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        resolve_worktree_target(DEMO, "")


def test_remove_if_empty_removes_empty_directory(tmp_path: Path) -> None:
    directory = tmp_path / "demo_worktrees"
    directory.mkdir()

    assert remove_if_empty(directory) is True
    assert not directory.exists()


def test_remove_if_empty_keeps_non_empty_directory(tmp_path: Path) -> None:
    directory = tmp_path / "demo_worktrees"
    (directory / "other").mkdir(parents=True)

    assert remove_if_empty(directory) is False
    assert directory.is_dir()


def test_remove_if_empty_missing_directory(tmp_path: Path) -> None:
    assert remove_if_empty(tmp_path / "missing") is False


def test_remove_empty_dirs_up_to_stops_at_boundary(tmp_path: Path) -> None:
    stop = tmp_path / "demo_worktrees"
    start = stop / "team" / "sub"
    start.mkdir(parents=True)

    removed = remove_empty_dirs_up_to(start, stop)

    assert removed == [start, stop / "team"]
    assert stop.is_dir()


def test_remove_empty_dirs_up_to_keeps_directories_with_content(tmp_path: Path) -> None:
    stop = tmp_path / "demo_worktrees"
    (stop / "team" / "other").mkdir(parents=True)
    start = stop / "team" / "gone"
    start.mkdir()

    removed = remove_empty_dirs_up_to(start, stop)

    assert removed == [start]
    assert (stop / "team" / "other").is_dir()


def test_remove_empty_dirs_up_to_start_equal_to_stop(tmp_path: Path) -> None:
    stop = tmp_path / "demo_worktrees"
    stop.mkdir()

    assert remove_empty_dirs_up_to(stop, stop) == []
    assert stop.is_dir()

"""End-to-end tests against a real git binary in a temporary directory."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest
from click.testing import CliRunner

from gitwt.cli.cli import cli
from gitwt.core.context import GitwtContext, create_context
from gitwt.core.git.real import RealGit

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _git_env() -> dict[str, str]:
    env = dict(os.environ)
    env.update(
        {
            "GIT_AUTHOR_NAME": "Test",
            "GIT_AUTHOR_EMAIL": "test@example.com",
            "GIT_COMMITTER_NAME": "Test",
            "GIT_COMMITTER_EMAIL": "test@example.com",
            "GIT_CONFIG_NOSYSTEM": "1",
        }
    )
    return env


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, env=_git_env(), capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


@pytest.fixture
def demo_repo(tmp_path: Path) -> Path:
    root = tmp_path / "demo"
    root.mkdir()
    _git(root, "init", "-b", "main")
    (root / "README.md").write_text("demo\n", encoding="utf-8")
    _git(root, "add", "README.md")
    _git(root, "commit", "-m", "initial")
    return root.resolve()


def _ctx(cwd: Path) -> GitwtContext:
    return create_context(cwd=cwd, env=_git_env())


def test_repository_root_from_subdirectory(demo_repo: Path) -> None:
    nested = demo_repo / "src"
    nested.mkdir()

    assert RealGit(env=_git_env()).get_repository_root(nested) == demo_repo


def test_repository_root_outside_repository(tmp_path: Path) -> None:
    outside = tmp_path / "plain"
    outside.mkdir()

    assert RealGit(env=_git_env()).get_repository_root(outside) is None


def test_create_list_remove_roundtrip(demo_repo: Path) -> None:
    runner = CliRunner()
    head = _git(demo_repo, "rev-parse", "HEAD")
    worktrees_dir = demo_repo.parent / "demo_worktrees"

    created = runner.invoke(cli, ["create", "x"], obj=_ctx(demo_repo))
    assert created.exit_code == 0, created.output
    assert (worktrees_dir / "x").is_dir()
    assert _git(worktrees_dir / "x", "rev-parse", "HEAD") == head
    assert _git(worktrees_dir / "x", "branch", "--show-current") == "x"

    listed = runner.invoke(cli, ["list"], obj=_ctx(demo_repo))
    assert listed.exit_code == 0, listed.output
    assert "[x]" in listed.stderr
    assert head[:8] in listed.stderr

    removed = runner.invoke(cli, ["remove", "x"], obj=_ctx(demo_repo))
    assert removed.exit_code == 0, removed.output
    assert not worktrees_dir.exists()


def test_create_from_linked_worktree_does_not_nest(demo_repo: Path) -> None:
    runner = CliRunner()
    worktrees_dir = demo_repo.parent / "demo_worktrees"
    runner.invoke(cli, ["create", "first"], obj=_ctx(demo_repo))

    result = runner.invoke(cli, ["create", "second"], obj=_ctx(worktrees_dir / "first"))

    assert result.exit_code == 0, result.output
    assert (worktrees_dir / "second").is_dir()
    assert not (worktrees_dir.parent / "first_worktrees").exists()


def test_create_from_linked_worktree_with_separate_git_dir(tmp_path: Path) -> None:
    """The main tree is found even when the git dir is not named .git."""
    _git(tmp_path, "init", "-b", "main", "--separate-git-dir", "gitdir", "demo")
    root = (tmp_path / "demo").resolve()
    (root / "README.md").write_text("demo\n", encoding="utf-8")
    _git(root, "add", "README.md")
    _git(root, "commit", "-m", "initial")
    runner = CliRunner()
    worktrees_dir = root.parent / "demo_worktrees"
    runner.invoke(cli, ["create", "first"], obj=_ctx(root))

    assert RealGit(env=_git_env()).get_repository_root(worktrees_dir / "first") == root

    result = runner.invoke(cli, ["create", "second"], obj=_ctx(worktrees_dir / "first"))

    assert result.exit_code == 0, result.output
    assert (worktrees_dir / "second").is_dir()
    assert not (worktrees_dir / "first_worktrees").exists()


def test_create_tracks_remote_only_branch(demo_repo: Path) -> None:
    head = _git(demo_repo, "rev-parse", "HEAD")
    _git(demo_repo, "remote", "add", "origin", str(demo_repo))
    _git(demo_repo, "update-ref", "refs/remotes/origin/y", head)

    result = CliRunner().invoke(cli, ["create", "y"], obj=_ctx(demo_repo))

    assert result.exit_code == 0, result.output
    worktree = demo_repo.parent / "demo_worktrees" / "y"
    assert _git(worktree, "rev-parse", "--abbrev-ref", "y@{upstream}") == "origin/y"


def test_remove_dirty_worktree_requires_force(demo_repo: Path) -> None:
    runner = CliRunner()
    runner.invoke(cli, ["create", "x"], obj=_ctx(demo_repo))
    worktree = demo_repo.parent / "demo_worktrees" / "x"
    (worktree / "scratch.txt").write_text("wip\n", encoding="utf-8")

    refused = runner.invoke(cli, ["remove", "x"], obj=_ctx(demo_repo))
    assert refused.exit_code == 1
    assert "--force" in refused.stderr
    assert worktree.is_dir()

    forced = runner.invoke(cli, ["remove", "--force", "x"], obj=_ctx(demo_repo))
    assert forced.exit_code == 0, forced.output
    assert not worktree.exists()

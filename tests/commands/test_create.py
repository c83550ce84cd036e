"""Tests for the create command."""

from pathlib import Path

from click.testing import CliRunner

from gitwt.cli.cli import cli
from gitwt.core.git.abc import WorktreeInfo
from tests.test_utils.env_helpers import ROOT_HEAD, simulated_gitwt_env


def test_create_new_branch_from_current_head() -> None:
    """Unknown branch: a new branch is created at the caller's HEAD."""
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        git = env.build_git()
        test_ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["create", "x"], obj=test_ctx)

        assert result.exit_code == 0, result.output
        expected = env.worktrees_dir / "x"
        assert expected.is_dir()
        assert git.added_worktrees == [(expected, "x", True, None)]
        assert git.local_branches["x"] == ROOT_HEAD
        assert "Creating new branch 'x' from current HEAD" in result.stderr
        assert f"Created worktree at {expected}" in result.stderr


def test_create_reports_project_and_target() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        result = runner.invoke(cli, ["create", "x"], obj=env.build_context())

        assert result.exit_code == 0, result.output
        assert "Project: demo" in result.stderr
        assert f"Worktrees directory: {env.worktrees_dir}" in result.stderr
        assert f"Target: {env.worktrees_dir / 'x'}" in result.stderr


def test_create_not_found_mentions_fetch_caveat() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        result = runner.invoke(cli, ["create", "x"], obj=env.build_context())

        assert result.exit_code == 0, result.output
        assert "git fetch" in result.stderr


def test_create_remote_only_branch_tracks_origin() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        git = env.build_git(remote_branches={"origin/y": "bbb222"})
        test_ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["create", "y"], obj=test_ctx)

        assert result.exit_code == 0, result.output
        expected = env.worktrees_dir / "y"
        assert git.added_worktrees == [(expected, "y", True, "origin/y")]
        assert git.local_branches["y"] == "bbb222"
        assert git.upstreams == {"y": "origin/y"}
        assert "tracking 'origin/y'" in result.stderr
        assert "git fetch" not in result.stderr


def test_create_local_branch_wins_over_remote() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        git = env.build_git(
            local_branches={"feature": "aaa111"},
            remote_branches={"origin/feature": "bbb222"},
        )
        test_ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["create", "feature"], obj=test_ctx)

        assert result.exit_code == 0, result.output
        assert git.added_worktrees == [(env.worktrees_dir / "feature", "feature", False, None)]
        worktrees = git.list_worktrees(env.root)
        assert worktrees[-1].head == "aaa111"
        assert git.upstreams == {}
        assert "Using existing local branch 'feature'" in result.stderr


def test_create_then_list_shows_new_entry() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        git = env.build_git()
        test_ctx = env.build_context(git=git)
        before = len(git.list_worktrees(env.root))

        runner.invoke(cli, ["create", "x"], obj=test_ctx)
        result = runner.invoke(cli, ["list"], obj=test_ctx)

        worktrees = git.list_worktrees(env.root)
        assert len(worktrees) == before + 1
        assert [wt.branch for wt in worktrees].count("x") == 1
        assert "[x]" in result.stderr


def test_create_twice_navigates_to_existing_worktree() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        git = env.build_git()
        test_ctx = env.build_context(git=git)

        first = runner.invoke(cli, ["create", "x"], obj=test_ctx)
        second = runner.invoke(cli, ["create", "x", "--script"], obj=test_ctx)

        assert first.exit_code == 0, first.output
        assert second.exit_code == 0, second.output
        assert len(git.added_worktrees) == 1
        assert "Worktree already exists" in second.stderr
        assert "Checked out: x" in second.stderr

        script_path = Path(second.stdout)
        script_content = env.script_writer.get_script_content(script_path)
        assert script_content is not None
        assert f"cd {env.worktrees_dir / 'x'}" in script_content


def test_create_existing_directory_is_not_validated() -> None:
    """Any existing directory at the target counts as the worktree."""
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        (env.worktrees_dir / "x").mkdir(parents=True)
        git = env.build_git()

        result = runner.invoke(cli, ["create", "x"], obj=env.build_context(git=git))

        assert result.exit_code == 0, result.output
        assert git.added_worktrees == []
        assert "Checked out: (detached HEAD)" in result.stderr


def test_create_script_mode_outputs_only_script_path() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        result = runner.invoke(cli, ["create", "x", "--script"], obj=env.build_context())

        assert result.exit_code == 0, result.output
        assert not result.stdout.endswith("\n")
        script_content = env.script_writer.get_script_content(Path(result.stdout))
        assert script_content is not None
        assert f"cd {env.worktrees_dir / 'x'}" in script_content
        assert "Switched to new worktree" in script_content


def test_create_without_script_prints_shell_integration_hint() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        result = runner.invoke(cli, ["create", "x"], obj=env.build_context())

        assert result.exit_code == 0, result.output
        assert result.stdout == ""
        assert "Shell integration not detected" in result.stderr
        assert f"Or use: cd {env.worktrees_dir / 'x'}" in result.stderr
        assert env.script_writer.written_scripts == {}


def test_create_nested_branch_name() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        result = runner.invoke(cli, ["create", "team/feature"], obj=env.build_context())

        assert result.exit_code == 0, result.output
        assert (env.worktrees_dir / "team" / "feature").is_dir()


def test_create_empty_branch_fails_without_changes() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        git = env.build_git()

        result = runner.invoke(cli, ["create", ""], obj=env.build_context(git=git))

        assert result.exit_code == 1
        assert "Branch name is required" in result.stderr
        assert "Usage:" in result.stderr
        assert not env.worktrees_dir.exists()
        assert git.added_worktrees == []


def test_create_missing_argument_exits_1_with_usage() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        result = runner.invoke(cli, ["create"], obj=env.build_context())

        assert result.exit_code == 1
        assert "Usage:" in result.stderr


def test_create_outside_repository_fails() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        outside = env.root.parent / "elsewhere"

        result = runner.invoke(cli, ["create", "x"], obj=env.build_context(cwd=outside))

        assert result.exit_code == 1
        assert "Not in a git repository" in result.stderr
        assert not env.worktrees_dir.exists()


def test_create_branch_checked_out_elsewhere_reports_location() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        elsewhere = env.root.parent / "scratch"
        git = env.build_git(
            local_branches={"feature": "aaa111"},
            linked_worktrees=[WorktreeInfo(path=elsewhere, branch="feature", head="aaa111")],
        )

        result = runner.invoke(
            cli, ["create", "feature", "--script"], obj=env.build_context(git=git)
        )

        assert result.exit_code == 1
        assert f"already checked out at {elsewhere}" in result.stderr
        assert result.stdout == ""
        assert env.script_writer.written_scripts == {}


def test_create_git_failure_for_new_branch_hints_invalid_name() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        git = env.build_git(add_worktree_error="fatal: 'bad..name' is not a valid branch name")

        result = runner.invoke(cli, ["create", "bad..name"], obj=env.build_context(git=git))

        assert result.exit_code == 1
        assert "may not be a valid branch name" in result.stderr
        assert "is not a valid branch name" in result.stderr


def test_create_from_linked_worktree_uses_main_root() -> None:
    """Running create from inside a worktree does not nest sibling directories."""
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        linked = env.worktrees_dir / "feature"
        git = env.build_git(
            local_branches={"feature": "aaa111"},
            linked_worktrees=[WorktreeInfo(path=linked, branch="feature", head="aaa111")],
        )

        result = runner.invoke(cli, ["create", "x"], obj=env.build_context(git=git, cwd=linked))

        assert result.exit_code == 0, result.output
        assert (env.worktrees_dir / "x").is_dir()
        # New branch starts from the linked worktree's HEAD, where the caller stands
        assert git.local_branches["x"] == "aaa111"


def test_create_git_failure_for_remote_branch_hints_existing_branch() -> None:
    runner = CliRunner()
    with simulated_gitwt_env(runner) as env:
        git = env.build_git(
            remote_branches={"origin/y": "bbb222"},
            add_worktree_error="fatal: cannot lock ref 'refs/heads/y'",
        )

        result = runner.invoke(cli, ["create", "y"], obj=env.build_context(git=git))

        assert result.exit_code == 1
        assert "Hint: branch 'y' may be checked out in another worktree" in result.stderr
        assert "may not be a valid branch name" not in result.stderr
        assert "cannot lock ref" in result.stderr

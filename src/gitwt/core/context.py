"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from gitwt.core.config import GitwtConfig, load_config
from gitwt.core.git.abc import Git
from gitwt.core.git.real import RealGit
from gitwt.core.script_writer import RealScriptWriter, ScriptWriter


@dataclass(frozen=True)
class GitwtContext:
    """Immutable context holding all dependencies for gitwt operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    The working directory is captured once here. The environment is read once
    into `config` and handed to the git gateway; nothing downstream reads
    either from the process.
    """

    git: Git
    script_writer: ScriptWriter
    cwd: Path  # Current working directory at CLI invocation
    config: GitwtConfig

    @staticmethod
    def for_test(
        git: Git | None = None,
        script_writer: ScriptWriter | None = None,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        config: GitwtConfig | None = None,
    ) -> "GitwtContext":
        """Create test context with optional pre-configured dependencies.

        Args:
            git: Optional Git implementation. If None, creates empty FakeGit.
            script_writer: Optional ScriptWriter. If None, creates FakeScriptWriter.
            cwd: Optional current working directory. If None, uses
                Path("/test/default/cwd") to prevent accidental use of Path.cwd().
            env: Optional environment used to derive config. If None, uses an
                empty mapping.
            config: Optional GitwtConfig. If None, derived from `env`.

        Returns:
            GitwtContext configured with provided values and test defaults

        Example:
            >>> git = FakeGit(repository_roots={Path("/work/demo"): Path("/work/demo")})
            >>> ctx = GitwtContext.for_test(git=git, cwd=Path("/work/demo"))
        """
        from gitwt.core.git.fake import FakeGit
        from gitwt.core.script_writer import FakeScriptWriter

        if git is None:
            git = FakeGit()

        if script_writer is None:
            script_writer = FakeScriptWriter()

        if cwd is None:
            cwd = Path("/test/default/cwd")

        if env is None:
            env = {}

        if config is None:
            config = load_config(env)

        return GitwtContext(
            git=git,
            script_writer=script_writer,
            cwd=cwd,
            config=config,
        )


def create_context(
    *, cwd: Path | None = None, env: Mapping[str, str] | None = None
) -> GitwtContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        cwd: Working directory to operate from (defaults to the process cwd)
        env: Environment to read settings from and hand to git
            (defaults to a snapshot of os.environ)

    Returns:
        GitwtContext with real implementations

    Example:
        >>> ctx = create_context()
        >>> worktrees = ctx.git.list_worktrees(ctx.cwd)
    """
    resolved_cwd = cwd if cwd is not None else Path.cwd()
    resolved_env = dict(env) if env is not None else dict(os.environ)

    return GitwtContext(
        git=RealGit(env=resolved_env),
        script_writer=RealScriptWriter(),
        cwd=resolved_cwd,
        config=load_config(resolved_env),
    )

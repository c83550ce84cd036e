"""Fixed names shared across gitwt."""

# Only this remote is consulted when looking for remote-tracking branches.
DEFAULT_REMOTE = "origin"

# "<parent>/<repo><suffix>" holds every worktree of a repository.
WORKTREES_DIR_SUFFIX = "_worktrees"

SHORT_SHA_LENGTH = 8

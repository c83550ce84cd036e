"""gitwt - git worktrees in a sibling directory of the repository."""

"""Runtime settings derived from the environment.

gitwt has no configuration file. The few knobs it has are read from the
injected environment once, at the CLI entry point.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEBUG_ENV_VAR = "GITWT_DEBUG"
SHELL_ENV_VAR = "GITWT_SHELL"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class GitwtConfig:
    """Immutable runtime configuration.

    Attributes:
        debug: Emit debug logging (git commands, generated scripts) on stderr
        shell: Shell name used when rendering shell integration, if known
    """

    debug: bool
    shell: str | None


def load_config(env: Mapping[str, str]) -> GitwtConfig:
    """Build GitwtConfig from environment variables.

    GITWT_DEBUG enables debug logging when set to 1/true/yes/on.
    GITWT_SHELL names the shell explicitly; otherwise the basename of SHELL
    is used when present.
    """
    debug = env.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY

    shell: str | None = env.get(SHELL_ENV_VAR) or None
    if shell is None:
        login_shell = env.get("SHELL")
        if login_shell:
            shell = Path(login_shell).name

    return GitwtConfig(debug=debug, shell=shell)

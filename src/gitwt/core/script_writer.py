"""Writing shell-integration scripts for the caller's shell to source.

A subprocess cannot change its parent shell's directory, so commands that
"navigate" write a tiny script and print its path; the shell wrapper sources
it. Writing goes through ScriptWriter so tests never touch the temp dir.
"""

import tempfile
import uuid
from abc import ABC, abstractmethod
from pathlib import Path


class ScriptWriter(ABC):
    """Abstract interface for persisting shell-integration scripts."""

    @abstractmethod
    def write_script(self, content: str, *, command_name: str, comment: str) -> Path:
        """Persist `content` and return the path the shell wrapper should source.

        Args:
            content: Script body
            command_name: Command producing the script (used in the file name)
            comment: One-line description written as a header comment
        """
        ...


class RealScriptWriter(ScriptWriter):
    """Writes scripts to uniquely named files in the system temp directory."""

    def write_script(self, content: str, *, command_name: str, comment: str) -> Path:
        """Write script to a temp file that the shell wrapper deletes after sourcing."""
        unique_id = uuid.uuid4().hex[:8]
        script_path = Path(tempfile.gettempdir()) / f"gitwt-{command_name}-{unique_id}.sh"

        header = f"# gitwt {command_name}: {comment}\n"
        script_path.write_text(header + content, encoding="utf-8")
        return script_path


class FakeScriptWriter(ScriptWriter):
    """In-memory script writer for tests.

    Scripts are stored under sentinel paths that never exist on disk.
    """

    def __init__(self) -> None:
        self._scripts: dict[Path, str] = {}

    def write_script(self, content: str, *, command_name: str, comment: str) -> Path:
        """Record the script and return a sentinel path."""
        script_path = Path(f"/test/scripts/gitwt-{command_name}-{len(self._scripts)}.sh")
        self._scripts[script_path] = content
        return script_path

    def get_script_content(self, path: Path) -> str | None:
        """Return the content written to `path`, if any.

        This method is for test assertions only.
        """
        return self._scripts.get(path)

    @property
    def written_scripts(self) -> dict[Path, str]:
        """All scripts written so far.

        This property is for test assertions only.
        """
        return dict(self._scripts)

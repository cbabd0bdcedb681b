"""
Workspace Lifecycle

A workspace is a private temporary directory holding one invocation's LaTeX
source, the compiler log, and the compiled PDF.
"""

import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from gridpaper.contexts.rendering.exceptions import WorkspaceError
from gridpaper.contexts.rendering.logger import _log_debug

# Stem of every file inside the workspace
BASENAME = "gridpaper"


@dataclass(frozen=True)
class Workspace:
    """
    Temporary directory owned by a single invocation.

    Attributes:
        path: Root of the workspace
    """

    path: Path

    @classmethod
    def create(cls, prefix: str = BASENAME) -> "Workspace":
        """
        Create a uniquely named workspace in the system temp directory.

        Raises:
            WorkspaceError: If the directory cannot be created
        """
        try:
            path = Path(tempfile.mkdtemp(prefix=prefix))
        except OSError as e:
            raise WorkspaceError(f"Cannot create work directory: {e}") from e
        _log_debug(f"Created work directory: {path}")
        return cls(path=path)

    @property
    def source_path(self) -> Path:
        return self.path / f"{BASENAME}.tex"

    @property
    def log_path(self) -> Path:
        return self.path / f"{BASENAME}.log"

    @property
    def pdf_path(self) -> Path:
        return self.path / f"{BASENAME}.pdf"

    def write_source(self, latex: str) -> Path:
        """
        Write the LaTeX source into the workspace, replacing any previous one.

        Raises:
            WorkspaceError: If the file cannot be written
        """
        try:
            self.source_path.write_text(latex, encoding="utf-8")
        except OSError as e:
            raise WorkspaceError(f"Cannot write {self.source_path}: {e}") from e
        _log_debug(f"Wrote LaTeX source: {self.source_path}")
        return self.source_path

    def exists(self) -> bool:
        return self.path.is_dir()

    def remove(self) -> None:
        """
        Delete the workspace and everything in it.

        Raises:
            WorkspaceError: If removal fails
        """
        try:
            shutil.rmtree(self.path)
        except OSError as e:
            raise WorkspaceError(f"Cannot remove work directory {self.path}: {e}") from e
        _log_debug(f"Removed work directory: {self.path}")

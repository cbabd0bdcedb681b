"""Custom exceptions for rendering context."""

from gridpaper.exceptions import GridPaperError


class WorkspaceError(GridPaperError):
    """Raised when the temporary workspace cannot be created, written, or removed."""

    pass


class CompilationError(GridPaperError):
    """
    Raised when the LaTeX compiler fails.

    The workspace is intentionally left on disk so the compiler log can be
    inspected.

    Attributes:
        result: CompilationResult of the failed run
        workspace: Workspace holding the source and compiler log
    """

    def __init__(self, result, workspace):
        self.result = result
        self.workspace = workspace

        if result.returncode is None:
            parts = [f"{result.compiler} failed to start"]
        else:
            parts = [f"{result.compiler} failed (exit status {result.returncode})"]
        for error in result.errors[:3]:
            parts.append(f"  {error}")
        parts.append(f"{result.compiler} log file: {result.log_path}")

        super().__init__("\n".join(parts))


class DeliveryError(GridPaperError):
    """Raised when copying the compiled PDF to its destination fails."""

    pass

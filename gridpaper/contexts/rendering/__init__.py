"""
Rendering Context

Responsibilities:
- Creates and removes the per-invocation temporary workspace
- Compiles LaTeX to PDF
- Delivers the PDF to a file or stdout
- Handles LaTeX errors and provides diagnostic information

Owns: LaTeX compilation, PDF generation, output management
Never: Modifies template content
"""

from gridpaper.contexts.rendering.compiler import (
    DEFAULT_COMPILER,
    CompilationResult,
    compile_latex,
)
from gridpaper.contexts.rendering.delivery import deliver_pdf
from gridpaper.contexts.rendering.exceptions import (
    CompilationError,
    DeliveryError,
    WorkspaceError,
)
from gridpaper.contexts.rendering.pipeline import GridPaperResult, make_grid_pdf
from gridpaper.contexts.rendering.workspace import Workspace

__all__ = [
    "DEFAULT_COMPILER",
    "CompilationError",
    "CompilationResult",
    "DeliveryError",
    "GridPaperResult",
    "Workspace",
    "WorkspaceError",
    "compile_latex",
    "deliver_pdf",
    "make_grid_pdf",
]

"""
Grid PDF Pipeline

Orchestrates one invocation: render the template, compile it in a fresh
workspace, deliver the PDF, then remove or preserve the workspace.

On compilation failure the workspace is always kept, whatever the
preserve_workspace setting, so the compiler log can be inspected.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union

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
from gridpaper.contexts.rendering.logger import _log_debug, setup_rendering_logger
from gridpaper.contexts.rendering.workspace import Workspace
from gridpaper.contexts.templating import RenderParameters, render_document
from gridpaper.utils.logger import detach_handler


@dataclass
class GridPaperResult:
    """
    Outcome of a successful pipeline run.

    Attributes:
        destination: Where the PDF was delivered ("-" for stdout)
        compilation: Result of the compiler run
        workspace: Workspace used for the run
        preserved: True if the workspace was left on disk
    """

    destination: str
    compilation: CompilationResult
    workspace: Workspace
    preserved: bool


def make_grid_pdf(
    params: RenderParameters,
    destination: Union[str, Path],
    compiler: str = DEFAULT_COMPILER,
    preserve_workspace: bool = False,
    verbose: bool = False,
    stream: Optional[BinaryIO] = None,
) -> GridPaperResult:
    """
    Produce a grid PDF and deliver it to destination.

    Args:
        params: Resolved render parameters
        destination: Output PDF path, or "-" for stdout
        compiler: LaTeX compiler executable
        preserve_workspace: Keep the workspace after a successful run
        verbose: Log full compiler output
        stream: Binary stream used when destination is "-"

    Returns:
        GridPaperResult describing the run

    Raises:
        TemplateRenderError: If the template cannot be rendered
        WorkspaceError: If the workspace cannot be created, written, or removed
        CompilationError: If the compiler fails (workspace is kept)
        DeliveryError: If the PDF cannot be copied to destination
    """
    latex = render_document(params)

    workspace = Workspace.create()
    _, handler_id = setup_rendering_logger(workspace.path, compiler)
    try:
        workspace.write_source(latex)

        result = compile_latex(workspace, compiler=compiler, verbose=verbose)
        if not result.success:
            raise CompilationError(result, workspace)

        deliver_pdf(result.pdf_path, destination, stream=stream)
    except (WorkspaceError, DeliveryError) as e:
        # The run stops here; report where its files were left
        e.workspace = workspace
        raise
    finally:
        # Close render.log before the workspace can be removed
        detach_handler(handler_id)

    if preserve_workspace:
        _log_debug(f"Keeping work directory: {workspace.path}")
        return GridPaperResult(str(destination), result, workspace, preserved=True)

    try:
        workspace.remove()
    except WorkspaceError as e:
        e.workspace = workspace
        raise
    return GridPaperResult(str(destination), result, workspace, preserved=False)

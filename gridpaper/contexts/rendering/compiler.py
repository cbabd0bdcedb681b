"""
LaTeX Compilation Module

Runs the LaTeX compiler against the source file in a workspace and reports
the outcome as a CompilationResult. Never raises for compiler failures and
never removes the workspace: the caller decides what to do with it.
"""

import re
import subprocess
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from gridpaper.contexts.rendering.logger import (
    _log_debug,
    log_compilation_result,
    log_compilation_start,
)
from gridpaper.contexts.rendering.workspace import Workspace

DEFAULT_COMPILER = "pdflatex"


@dataclass
class CompilationResult:
    """
    Result of LaTeX compilation.

    Attributes:
        success: Whether compilation succeeded (exit status 0 and PDF present)
        compiler: Compiler executable that was invoked
        returncode: Compiler exit status (None if it could not be started)
        log_path: Path to the compiler's own log file
        pdf_path: Path to generated PDF (None if failed)
        stdout: Standard output from the compiler
        stderr: Standard error from the compiler
        errors: List of parsed LaTeX errors
        warnings: List of parsed LaTeX warnings
    """

    success: bool
    compiler: str
    log_path: Path
    returncode: Optional[int] = None
    pdf_path: Optional[Path] = None
    stdout: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _parse_latex_log(log_content: str) -> Tuple[List[str], List[str]]:
    """
    Parse LaTeX log file for errors and warnings.

    Args:
        log_content: Content of the .log file

    Returns:
        Tuple of (errors, warnings)
    """
    errors = []
    warnings = []

    # LaTeX error pattern: "! Error message"
    error_pattern = re.compile(r"^! (.+)$", re.MULTILINE)
    for match in error_pattern.finditer(log_content):
        errors.append(match.group(1).strip())

    warning_patterns = [
        r"LaTeX Warning: (.+)",
        r"Package \w+ Warning: (.+)",
        r"Overfull \\hbox \((.+)\)",
        r"Underfull \\hbox \((.+)\)",
    ]
    for pattern in warning_patterns:
        compiled = re.compile(pattern, re.MULTILINE)
        for match in compiled.finditer(log_content):
            warnings.append(match.group(1).strip())

    return errors, warnings


def build_command(compiler: str, workspace: Workspace) -> List[str]:
    """Command line that compiles the workspace source into the workspace."""
    return [
        compiler,
        "-output-directory",
        str(workspace.path),
        # Stop at the first error instead of prompting for a fix
        "-interaction=nonstopmode",
        "-halt-on-error",
        str(workspace.source_path),
    ]


def compile_latex(
    workspace: Workspace,
    compiler: str = DEFAULT_COMPILER,
    verbose: bool = False,
) -> CompilationResult:
    """
    Compile the workspace's LaTeX source to PDF.

    Blocks until the compiler exits; there is no timeout. Compiler output is
    captured so it never mixes with a PDF streamed to stdout.

    Args:
        workspace: Workspace whose source file has been written
        compiler: LaTeX compiler executable (resolved on PATH)
        verbose: Log full compiler output and all warnings

    Returns:
        CompilationResult with success status and diagnostic information
    """
    cmd = build_command(compiler, workspace)
    log_compilation_start(compiler, workspace.source_path, workspace.path)
    _log_debug(f"  Command: {' '.join(cmd)}")

    start_time = time.time()
    try:
        completed = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",  # Replace invalid UTF-8 bytes instead of crashing
        )
    except OSError as e:
        result = CompilationResult(
            success=False,
            compiler=compiler,
            log_path=workspace.log_path,
            errors=[f"Cannot run {compiler}: {e}"],
        )
        log_compilation_result(result, time.time() - start_time, verbose=verbose)
        return result

    errors: List[str] = []
    warnings: List[str] = []
    if workspace.log_path.exists():
        # pdflatex writes log files in latin-1 encoding (font metadata contains non-UTF-8)
        errors, warnings = _parse_latex_log(workspace.log_path.read_text(encoding="latin-1"))

    pdf_exists = workspace.pdf_path.exists()
    success = completed.returncode == 0 and pdf_exists
    if not success and not errors:
        if completed.returncode == 0:
            errors.append("PDF file was not generated")
        else:
            errors.append(f"{compiler} exited with status {completed.returncode}")

    result = CompilationResult(
        success=success,
        compiler=compiler,
        log_path=workspace.log_path,
        returncode=completed.returncode,
        pdf_path=workspace.pdf_path if pdf_exists else None,
        stdout=completed.stdout,
        stderr=completed.stderr,
        errors=errors,
        warnings=warnings,
    )
    log_compilation_result(result, time.time() - start_time, verbose=verbose)
    return result

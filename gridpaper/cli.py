#!/usr/bin/env python3
"""
Graph Paper PDF CLI

Creates a PDF with a single page of graph paper, typeset by pdflatex from a
LaTeX/TikZ template. By default the page carries a 43x64 grid of 4.25mm cells.

Examples:\n

    gridpaper grid.pdf                                 # Default grid

    gridpaper --line-style dotted grid.pdf             # Dotted lines

    gridpaper --hoffset -2mm grid.pdf                  # Shifted 2mm to the left

    gridpaper -c configs/dotted.yaml - > grid.pdf      # Preset file, PDF on stdout
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from gridpaper.contexts.rendering import DEFAULT_COMPILER, CompilationError, make_grid_pdf
from gridpaper.contexts.templating import resolve_parameters, template_source
from gridpaper.exceptions import GridPaperError
from gridpaper.utils.logger import setup_logger

load_dotenv()

HELP_EPILOG = """
Length values use LaTeX length syntax, e.g. 1cm, -2.34cm, 3.0mm, 4pt, 5in, 6ex, 7em.

Line widths are TikZ widths: ultra thin, very thin, thin, semithick, thick,
very thick, ultra thick, or "line width=5pt".

Line colors are TikZ colors, e.g. gray, blue, red.

Line styles are TikZ dash patterns: solid, dotted, densely dotted, dashed,
densely dashed, dash dot, dash dot dot.

Requires a LaTeX installation with the memoir, geometry and tikz packages and
pdflatex on the PATH (or set LATEX_COMPILER / --compiler).
"""

GEOMETRY_PANEL = "Page geometry"
GRID_PANEL = "Grid"

app = typer.Typer(
    help="Create a PDF with a single page of graph paper",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command(epilog=HELP_EPILOG)
def main(
    ctx: typer.Context,
    output: Annotated[
        Optional[str],
        typer.Argument(help="Output PDF file, or '-' to write the PDF to stdout", show_default=False),
    ] = None,
    margin: Annotated[
        Optional[str],
        typer.Option(help='Margin around the grid [default: "1cm"]', rich_help_panel=GEOMETRY_PANEL),
    ] = None,
    hoffset: Annotated[
        Optional[str],
        typer.Option(help='Horizontal shift of the grid [default: "0cm"]', rich_help_panel=GEOMETRY_PANEL),
    ] = None,
    voffset: Annotated[
        Optional[str],
        typer.Option(help='Vertical shift of the grid [default: "0cm"]', rich_help_panel=GEOMETRY_PANEL),
    ] = None,
    show_frame: Annotated[
        Optional[bool],
        typer.Option(
            "--show-frame/--no-show-frame",
            help="Draw the page layout reference frame [default: no]",
            rich_help_panel=GEOMETRY_PANEL,
        ),
    ] = None,
    cell_width: Annotated[
        Optional[str],
        typer.Option(help='Cell width [default: "4.25mm"]', rich_help_panel=GRID_PANEL),
    ] = None,
    cell_height: Annotated[
        Optional[str],
        typer.Option(help='Cell height [default: "4.25mm"]', rich_help_panel=GRID_PANEL),
    ] = None,
    step: Annotated[
        Optional[str],
        typer.Option(help='Grid step [default: "4.25mm"]', rich_help_panel=GRID_PANEL),
    ] = None,
    line_width: Annotated[
        Optional[str],
        typer.Option(help='Line width [default: "very thin"]', rich_help_panel=GRID_PANEL),
    ] = None,
    line_color: Annotated[
        Optional[str],
        typer.Option(help='Line color [default: "gray"]', rich_help_panel=GRID_PANEL),
    ] = None,
    line_style: Annotated[
        Optional[str],
        typer.Option(help='Line style [default: "solid"]', rich_help_panel=GRID_PANEL),
    ] = None,
    grid_columns: Annotated[
        Optional[int],
        typer.Option(help="Number of cells horizontally [default: 43]", rich_help_panel=GRID_PANEL),
    ] = None,
    grid_rows: Annotated[
        Optional[int],
        typer.Option(help="Number of cells vertically [default: 64]", rich_help_panel=GRID_PANEL),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="YAML file with parameter values (command line options take precedence)",
        ),
    ] = None,
    compiler: Annotated[
        str,
        typer.Option(envvar="LATEX_COMPILER", help="LaTeX compiler executable"),
    ] = DEFAULT_COMPILER,
    preserve_workspace: Annotated[
        bool,
        typer.Option(
            "--preserve-workspace",
            "--work",
            "-w",
            help="Print the temporary work directory and do not remove it",
        ),
    ] = False,
    show_template: Annotated[
        bool,
        typer.Option("--template", help="Print the LaTeX template and exit"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed output (compiler stdout/stderr)"),
    ] = False,
):
    """
    Create a PDF with a single page of graph paper.

    The grid is drawn with TikZ and typeset by pdflatex in a temporary work
    directory, then copied to OUTPUT. If compilation fails the work directory
    is kept and the path to the compiler log is printed.
    """
    if show_template:
        typer.echo(template_source(), nl=False)
        raise typer.Exit()

    if output is None:
        typer.secho("Error: missing argument with the output PDF file name", fg=typer.colors.RED, err=True)
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(code=2)

    setup_logger(verbose=verbose)

    overrides = {
        "margin": margin,
        "hoffset": hoffset,
        "voffset": voffset,
        "show_frame": show_frame,
        "cell_width": cell_width,
        "cell_height": cell_height,
        "step": step,
        "line_width": line_width,
        "line_color": line_color,
        "line_style": line_style,
        "grid_columns": grid_columns,
        "grid_rows": grid_rows,
    }

    try:
        params = resolve_parameters(config_path=config, overrides=overrides)
        result = make_grid_pdf(
            params,
            output,
            compiler=compiler,
            preserve_workspace=preserve_workspace,
            verbose=verbose,
        )
    except CompilationError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        typer.echo(f"Work directory kept: {e.workspace.path}", err=True)
        raise typer.Exit(code=1)
    except GridPaperError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        if e.workspace is not None and e.workspace.exists():
            typer.echo(f"Work directory kept: {e.workspace.path}", err=True)
        raise typer.Exit(code=1)

    if result.preserved:
        typer.echo(f"Work directory: {result.workspace.path}", err=True)


if __name__ == "__main__":
    app()

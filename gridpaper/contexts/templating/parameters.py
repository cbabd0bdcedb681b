"""
Render parameters for the grid document.

A flat, immutable record of the geometric and stylistic knobs substituted
into the LaTeX template. Length, width, color and style values are opaque
strings handed to pdflatex verbatim; invalid values only surface as
compilation errors.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class RenderParameters:
    """
    Geometry and line style of a single grid page.

    Attributes:
        margin: Margin around the drawing (LaTeX length)
        hoffset: Horizontal shift of the page body (LaTeX length)
        voffset: Vertical shift of the page body (LaTeX length)
        show_frame: Draw the geometry package reference frame
        cell_width: Horizontal unit of the TikZ picture (LaTeX length)
        cell_height: Vertical unit of the TikZ picture (LaTeX length)
        step: Grid step (LaTeX length)
        line_width: TikZ line width keyword (e.g. "very thin", "line width=5pt")
        line_color: TikZ color (e.g. "gray", "blue")
        line_style: TikZ dash pattern keyword (e.g. "solid", "densely dotted")
        grid_columns: Number of cells horizontally
        grid_rows: Number of cells vertically
    """

    margin: str = "1cm"
    hoffset: str = "0cm"
    voffset: str = "0cm"
    show_frame: bool = False
    cell_width: str = "4.25mm"
    cell_height: str = "4.25mm"
    step: str = "4.25mm"
    line_width: str = "very thin"
    line_color: str = "gray"
    line_style: str = "solid"
    grid_columns: int = 43
    grid_rows: int = 64

    def to_template_context(self) -> Dict[str, Any]:
        """Return the fields as a dict keyed by template variable name."""
        return asdict(self)

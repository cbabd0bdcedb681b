"""
LaTeX Generator

Converts render parameters to the LaTeX source of the grid document.
"""

from typing import Optional

from gridpaper.contexts.templating.logger import _log_debug
from gridpaper.contexts.templating.parameters import RenderParameters
from gridpaper.contexts.templating.template_registry import TemplateRegistry

_default_registry: Optional[TemplateRegistry] = None


def _registry() -> TemplateRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def render_document(
    params: RenderParameters, template_registry: TemplateRegistry = None
) -> str:
    """
    Generate the complete LaTeX document for a grid page.

    Pure substitution: the same parameters always yield the same text.

    Args:
        params: Geometry and line style of the page
        template_registry: Registry to render with (default: shared registry)

    Returns:
        LaTeX source ready for pdflatex

    Raises:
        TemplateRenderError: If the template cannot be loaded or rendered
    """
    registry = template_registry or _registry()
    context = params.to_template_context()
    _log_debug(f"Rendering grid template with {context}")
    return registry.render(context)


def template_source(template_registry: TemplateRegistry = None) -> str:
    """Return the raw grid template, placeholders included."""
    registry = template_registry or _registry()
    return registry.get_template_source()

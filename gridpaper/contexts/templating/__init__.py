"""
Templating Context

Responsibilities:
- Resolves render parameters from defaults, config files and CLI options
- Populates the LaTeX grid template

Owns: RenderParameters, template loading and substitution
Never: Writes files or runs the compiler
"""

from gridpaper.contexts.templating.config_resolver import resolve_parameters
from gridpaper.contexts.templating.exceptions import ConfigurationError, TemplateRenderError
from gridpaper.contexts.templating.latex_generator import render_document, template_source
from gridpaper.contexts.templating.parameters import RenderParameters

__all__ = [
    "ConfigurationError",
    "RenderParameters",
    "TemplateRenderError",
    "render_document",
    "resolve_parameters",
    "template_source",
]

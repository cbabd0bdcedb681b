from pathlib import Path
from typing import Any, Dict

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
)

from gridpaper.contexts.templating.exceptions import TemplateRenderError

TEMPLATES_PATH = Path(__file__).parent / "templates"
GRID_TEMPLATE = "grid.tex.jinja"


def texbool(value: Any) -> str:
    """Render a Python truth value as a LaTeX key-value boolean."""
    return "true" if value else "false"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX generation.

    Templates are stored in gridpaper/contexts/templating/templates/ and use
    custom delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """

    def __init__(self, templates_path: Path = TEMPLATES_PATH):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the .tex.jinja templates
        """
        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Custom delimiters to avoid LaTeX brace conflicts
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Every placeholder must be supplied
            undefined=StrictUndefined,
            # Preserve whitespace (important for LaTeX)
            trim_blocks=False,
            lstrip_blocks=False,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self.env.filters["texbool"] = texbool

    def get_template(self, name: str = GRID_TEMPLATE) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Raises:
            TemplateRenderError: If the template is missing or has syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(name)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Cannot load template '{name}'",
                template_path=self.get_template_path(name),
                original_error=e,
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str = GRID_TEMPLATE) -> Path:
        """Return the file path of a template."""
        return self.templates_path / name

    def get_template_source(self, name: str = GRID_TEMPLATE) -> str:
        """Return the raw, unrendered text of a template."""
        return self.get_template_path(name).read_text(encoding="utf-8")

    def render(self, context: Dict[str, Any], name: str = GRID_TEMPLATE) -> str:
        """
        Render a template with the given context.

        Raises:
            TemplateRenderError: If a placeholder is unresolved or rendering fails
        """
        template = self.get_template(name)
        try:
            return template.render(context)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render template '{name}'",
                template_path=self.get_template_path(name),
                original_error=e,
            ) from e

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a template is in the cache."""
        return name in self._cache

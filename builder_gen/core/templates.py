"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Dict, Any
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Path):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = Path(template_dir)
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        self._env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            # Generated source code, not markup
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        # Add custom filters for code generation
        self._env.filters["indent_lines"] = self._indent_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {str(e)}")

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        return template_name in self._env.loader.list_templates()

    # Template filters for code generation

    def _indent_filter(self, value: str, prefix: str = "    ") -> str:
        """Prefix every non-blank line with the given indentation."""
        lines = str(value).split("\n")
        return "\n".join(prefix + line if line.strip() else line for line in lines)


def create_template_engine(template_dir: Path) -> TemplateEngine:
    """Create a template engine bound to a template directory."""
    return TemplateEngine(template_dir)

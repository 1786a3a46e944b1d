"""
Reporting Registries

Loads and caches the Jinja2 templates used for admin text reports.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
DEFAULT_TEMPLATES_PATH = Path(__file__).parent / "templates"
REPORT_TEMPLATES_PATH = os.getenv("REPORT_TEMPLATES_PATH")


class TemplateRegistry:
    """
    Registry for loading and caching report templates.

    Templates are stored as {templates_path}/{report_name}.txt.jinja.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding report templates. Defaults to
                            REPORT_TEMPLATES_PATH from environment, then the
                            packaged templates/ directory
        """
        if templates_path is None:
            templates_path = Path(REPORT_TEMPLATES_PATH) if REPORT_TEMPLATES_PATH else DEFAULT_TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, report_name: str) -> Template:
        """
        Get a template by report name, loading and caching it if necessary.

        Args:
            report_name: Name of the report (e.g., 'coverage')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if report_name in self._cache:
            return self._cache[report_name]

        template_file = f"{report_name}.txt.jinja"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for report '{report_name}' at {self.templates_path / template_file}"
            ) from e

        self._cache[report_name] = template
        return template

    def get_template_path(self, report_name: str) -> Path:
        return self.templates_path / f"{report_name}.txt.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, report_name: str) -> bool:
        return report_name in self._cache

"""
Jinja2 rendering for backend fragments.

Every backend keeps one small template per emitted fragment (a function
declaration, a method, a header) next to its generator. Templates render a
single fragment; indentation of the surrounding scope is applied by the
CodeWriter, not by the template.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    UndefinedError,
)

from ...logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


@lru_cache(maxsize=None)
def _environment(template_dir: Optional[str]) -> Environment:
    loader = FileSystemLoader(template_dir) if template_dir else None
    # Generated source is never HTML, so autoescaping stays off
    return Environment(
        loader=loader,
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
    )


class TemplateEngine:
    """Renders the fragment templates of one backend."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing ``*.j2`` fragment templates.
                Without one only ``render_string`` is usable.
        """
        self.template_dir = Path(template_dir) if template_dir else None
        if self.template_dir is not None and not self.template_dir.is_dir():
            raise TemplateError(f"Template directory not found: {self.template_dir}")
        self._env = _environment(str(self.template_dir) if self.template_dir else None)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a fragment template.

        Args:
            template_name: File name inside the template directory
            context: Variables to pass to template

        Returns:
            Rendered fragment

        Raises:
            TemplateError: If the template is missing or uses an undefined
                variable
        """
        if self.template_dir is None:
            raise TemplateError(f"No template directory to load {template_name} from")

        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(
                f"Template {template_name} not found in {self.template_dir}"
            ) from e

        try:
            return template.render(**context)
        except UndefinedError as e:
            logger.debug("Context for %s: %s", template_name, sorted(context))
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, source: str, context: Dict[str, Any]) -> str:
        """Render an inline template with the same environment settings."""
        try:
            return self._env.from_string(source).render(**context)
        except UndefinedError as e:
            raise TemplateError(f"Failed to render template string: {e}") from e


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally bound to a template directory."""
    return TemplateEngine(template_dir)

"""
Jinja2 environment for stylesheet and config templates.

Templates live in ``prsm_theme/templates``. Output is CSS / JS, so
autoescaping is off and undefined variables are errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from prsm_theme.core.categorize import css_var_name, format_css_value

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"


def create_jinja_env(templates_dir: Path | None = None) -> Environment:
    """Create and configure the Jinja2 environment.

    Args:
        templates_dir: Optional override directory (tests use this).

    Returns:
        Configured Jinja2 Environment.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["css_value"] = format_css_value
    env.filters["css_var"] = css_var_name
    return env


_env: Environment | None = None


def get_jinja_env() -> Environment:
    """Get the shared Jinja2 environment (lazy singleton)."""
    global _env
    if _env is None:
        _env = create_jinja_env()
    return _env


def render_template(template_name: str, **kwargs: Any) -> str:
    """
    Render a template to text.

    Args:
        template_name: Template path relative to templates/.
        **kwargs: Template variables.

    Returns:
        Rendered text.
    """
    env = get_jinja_env()
    template = env.get_template(template_name)
    return template.render(**kwargs)

"""
Read accessors for consumers of the theme (content router, parser).

These work on the cached token document and generate output in memory;
nothing is written to disk. Every function accepts an explicit
``TokenStore``; without one, the shared store for the configured token
document is used, which is the same store ``compiler.build`` reloads.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path
from typing import Any

from prsm_theme.core.categorize import css_var_name
from prsm_theme.core.config import CompilerConfig
from prsm_theme.core.flatten import flatten_tokens, format_font_stack
from prsm_theme.core.store import TokenDocument, TokenStore, clear_shared_stores, get_shared_store
from prsm_theme.generators import GENERATORS, artifact_filename
from prsm_theme.generators.common import lookup

logger = logging.getLogger(__name__)


class Framework(StrEnum):
    """Supported presentation frameworks."""

    SLIDEV = "slidev"
    REVEAL = "reveal"
    WEBSLIDES = "webslides"


# Stylesheets a consumer can ask for
STYLESHEETS = ("base", Framework.SLIDEV, Framework.REVEAL, Framework.WEBSLIDES)


def get_default_store() -> TokenStore:
    """Get the shared store for the configured token document (the one ``build`` reloads)."""
    return get_shared_store(CompilerConfig.from_env().tokens_path)


def reset_default_store() -> None:
    """Forget the shared stores so the next access re-reads the document."""
    clear_shared_stores()


def get_design_tokens(store: TokenStore | None = None) -> TokenDocument | None:
    """Return the cached token document, or None if it cannot be loaded."""
    return (store or get_default_store()).get()


def _normalize_stylesheet(framework: str) -> str:
    key = str(framework).lower()
    if key not in STYLESHEETS:
        raise ValueError(
            f"Unknown framework '{framework}'. Expected one of: {', '.join(STYLESHEETS)}"
        )
    return key


def get_theme_css(framework: str = Framework.SLIDEV, store: TokenStore | None = None) -> str | None:
    """
    Generate the stylesheet for a framework from the cached tokens.

    Args:
        framework: ``base``, ``slidev``, ``reveal`` or ``webslides``
        store: Token store (defaults to the shared one)

    Returns:
        CSS text, or None when no token document is available.

    Raises:
        ValueError: For an unknown framework.
        MalformedTokenError: If the tokens cannot be rendered.
    """
    key = _normalize_stylesheet(framework)
    tokens = get_design_tokens(store)
    if tokens is None:
        return None
    return GENERATORS[key](tokens)


def get_css_variables(store: TokenStore | None = None) -> dict[str, Any]:
    """Return ``{"--prsm-<key>": value}`` for every flattened token."""
    tokens = get_design_tokens(store)
    if tokens is None:
        return {}
    return {css_var_name(key): value for key, value in flatten_tokens(tokens).items()}


def get_inline_styles(dark: bool = False, store: TokenStore | None = None) -> dict[str, str]:
    """
    Build an inline style mapping for embedding slides in other pages.

    Colours come from the ``dark`` group when ``dark`` is set, otherwise
    from the ``slide`` group. Missing tokens are left out.
    """
    tokens = get_design_tokens(store)
    if tokens is None:
        return {}

    scheme = lookup(tokens, "dark" if dark else "slide") or {}
    styles: dict[str, str] = {}

    fonts = lookup(tokens, "typography.fontFamily.sans")
    if isinstance(fonts, list):
        styles["fontFamily"] = format_font_stack(fonts, "typography-fontFamily-sans")
    elif isinstance(fonts, str):
        styles["fontFamily"] = fonts

    for style_key, token_key in (
        ("backgroundColor", "background"),
        ("color", "text"),
        ("--heading-color", "heading"),
        ("--link-color", "link"),
    ):
        value = scheme.get(token_key) if isinstance(scheme, dict) else None
        if value is not None:
            styles[style_key] = str(value)

    return styles


def get_theme_path(framework: str = Framework.SLIDEV, config: CompilerConfig | None = None) -> Path | None:
    """
    Path of the compiled stylesheet for a framework.

    Returns None (with a warning) if the theme has not been built yet.
    """
    key = _normalize_stylesheet(framework)
    config = config or CompilerConfig.from_env()
    css_path = config.output_dir / artifact_filename(key)

    if not css_path.exists():
        logger.warning("Theme CSS not found: %s. Run 'prsm-theme' first.", css_path)
        return None

    return css_path

"""
WebSlides theme generator.

Targets ``#webslides``; adds background/text colour utilities, the card
component, grid utilities, and the navigation/counter footer.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prsm_theme.render import render_template

from .common import lookup_scalar

DEFAULT_PADDING = "80px"
DEFAULT_BLOCKQUOTE_BORDER_WIDTH = "4px"

# (class suffix, background declaration, text colour)
BACKGROUND_UTILITIES: tuple[tuple[str, str, str], ...] = (
    ("primary", "background-color: var(--prsm-colors-primary-500)", "var(--prsm-colors-neutral-50)"),
    (
        "secondary",
        "background-color: var(--prsm-colors-secondary-500)",
        "var(--prsm-colors-neutral-50)",
    ),
    ("gradient", "background: var(--prsm-gradients-primary)", "var(--prsm-colors-neutral-50)"),
    ("dark", "background: var(--prsm-dark-background)", "var(--prsm-dark-text)"),
)

TEXT_UTILITIES: tuple[tuple[str, str], ...] = (
    ("primary", "var(--prsm-colors-primary-500)"),
    ("secondary", "var(--prsm-colors-secondary-500)"),
)

# (column count, gap)
GRID_UTILITIES: tuple[tuple[int, str], ...] = (
    (2, "var(--prsm-spacing-xl)"),
    (3, "var(--prsm-spacing-lg)"),
)


def generate_webslides(doc: Mapping[str, Any]) -> str:
    """Generate the WebSlides stylesheet."""
    return render_template(
        "webslides.css.j2",
        padding=lookup_scalar(doc, "slide.padding.webslides", DEFAULT_PADDING),
        blockquote_border_width=lookup_scalar(
            doc, "components.blockquote.borderWidth", DEFAULT_BLOCKQUOTE_BORDER_WIDTH
        ),
        background_utilities=BACKGROUND_UTILITIES,
        text_utilities=TEXT_UTILITIES,
        grid_utilities=GRID_UTILITIES,
    )

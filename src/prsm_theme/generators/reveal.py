"""
Reveal.js theme generator.

Targets ``.reveal``; adds tables, the title slide, progress bar,
controls, and the slide number indicator.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prsm_theme.render import render_template

from .common import lookup_scalar

DEFAULT_PADDING = "40px 80px"
DEFAULT_BLOCKQUOTE_BORDER_WIDTH = "4px"
CODE_MAX_HEIGHT = "400px"


def generate_reveal(doc: Mapping[str, Any]) -> str:
    """Generate the Reveal.js stylesheet."""
    return render_template(
        "reveal.css.j2",
        padding=lookup_scalar(doc, "slide.padding.reveal", DEFAULT_PADDING),
        blockquote_border_width=lookup_scalar(
            doc, "components.blockquote.borderWidth", DEFAULT_BLOCKQUOTE_BORDER_WIDTH
        ),
        code_max_height=CODE_MAX_HEIGHT,
    )

"""
Slidev theme generator.

Targets ``.slidev-layout``; adds the cover variant, a two-column grid
layout, and the PRSMTECH brand footer.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prsm_theme.render import render_template

from .common import lookup_scalar

DEFAULT_WIDTH = 980
DEFAULT_HEIGHT = 552
DEFAULT_PADDING = "40px"
DEFAULT_BLOCKQUOTE_BORDER_WIDTH = "4px"
BRAND_TEXT = "PRSMTECH"


def generate_slidev(doc: Mapping[str, Any]) -> str:
    """Generate the Slidev stylesheet."""
    return render_template(
        "slidev.css.j2",
        slide_width=lookup_scalar(doc, "slide.dimensions.slidev.width", DEFAULT_WIDTH),
        slide_height=lookup_scalar(doc, "slide.dimensions.slidev.height", DEFAULT_HEIGHT),
        padding=lookup_scalar(doc, "slide.padding.slidev", DEFAULT_PADDING),
        blockquote_border_width=lookup_scalar(
            doc, "components.blockquote.borderWidth", DEFAULT_BLOCKQUOTE_BORDER_WIDTH
        ),
        brand=BRAND_TEXT,
    )

"""
Base stylesheet generator.

Binds every flattened token to a ``--prsm-*`` custom property on
``:root``, grouped by category, followed by the dark mode overrides.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prsm_theme.core.categorize import CATEGORY_TITLES, CategoryBucket, categorize
from prsm_theme.core.flatten import FlatTokenMap, flatten_tokens
from prsm_theme.render import render_template

# Sections always rendered, in this order; OTHER is appended only if non-empty
_SECTION_ORDER = (
    CategoryBucket.COLORS,
    CategoryBucket.TYPOGRAPHY,
    CategoryBucket.SPACING,
    CategoryBucket.BORDERS_SHADOWS,
    CategoryBucket.TRANSITIONS,
)

# Slide properties re-bound to their dark counterparts under dark mode selectors
DARK_MODE_PROPERTIES: tuple[tuple[str, str], ...] = tuple(
    (f"slide-{name}", f"dark-{name}")
    for name in (
        "background",
        "backgroundAlt",
        "text",
        "textMuted",
        "heading",
        "link",
        "linkHover",
        "border",
        "codeBg",
        "codeText",
    )
)


def generate_base(doc: Mapping[str, Any], flat: FlatTokenMap | None = None) -> str:
    """
    Generate the base stylesheet.

    Args:
        doc: Token document
        flat: Pre-flattened tokens (flattened from ``doc`` when omitted)

    Returns:
        CSS text

    Raises:
        MalformedTokenError: If the document cannot be flattened.
    """
    if flat is None:
        flat = flatten_tokens(doc)
    buckets = categorize(flat)

    sections = [(CATEGORY_TITLES[bucket], buckets[bucket]) for bucket in _SECTION_ORDER]
    if buckets[CategoryBucket.OTHER]:
        sections.append((CATEGORY_TITLES[CategoryBucket.OTHER], buckets[CategoryBucket.OTHER]))

    return render_template(
        "base.css.j2",
        sections=sections,
        dark_mode_properties=DARK_MODE_PROPERTIES,
    )

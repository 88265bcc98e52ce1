"""
Category bucketing for flattened tokens.

Groups ``--prsm-*`` declarations into readable sections of the base
stylesheet. Classification is by key prefix, first match wins.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum

from .flatten import Scalar

CSS_VAR_PREFIX = "--prsm-"


class CategoryBucket(StrEnum):
    """Section of the base stylesheet a token belongs to."""

    COLORS = "colors"
    TYPOGRAPHY = "typography"
    SPACING = "spacing"
    BORDERS_SHADOWS = "borders-shadows"
    TRANSITIONS = "transitions"
    OTHER = "other"


# Checked in order; OTHER is the fallback
_PREFIX_RULES: tuple[tuple[tuple[str, ...], CategoryBucket], ...] = (
    (("colors", "slide", "dark"), CategoryBucket.COLORS),
    (("typography", "font"), CategoryBucket.TYPOGRAPHY),
    (("spacing",), CategoryBucket.SPACING),
    (("border", "shadow"), CategoryBucket.BORDERS_SHADOWS),
    (("transition",), CategoryBucket.TRANSITIONS),
)

CATEGORY_TITLES: dict[CategoryBucket, str] = {
    CategoryBucket.COLORS: "Colors",
    CategoryBucket.TYPOGRAPHY: "Typography",
    CategoryBucket.SPACING: "Spacing",
    CategoryBucket.BORDERS_SHADOWS: "Borders & Shadows",
    CategoryBucket.TRANSITIONS: "Transitions",
    CategoryBucket.OTHER: "Other",
}


def classify_key(key: str) -> CategoryBucket:
    """Return the bucket for a flattened token key."""
    for prefixes, bucket in _PREFIX_RULES:
        if key.startswith(prefixes):
            return bucket
    return CategoryBucket.OTHER


def css_var_name(key: str) -> str:
    return f"{CSS_VAR_PREFIX}{key}"


def format_css_value(value: Scalar) -> str:
    """Render a token value for CSS; whole floats drop the trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def css_declaration(key: str, value: Scalar) -> str:
    """Format one custom property declaration, e.g. ``--prsm-spacing-md: 1rem;``."""
    return f"{css_var_name(key)}: {format_css_value(value)};"


def categorize(flat: Mapping[str, Scalar]) -> dict[CategoryBucket, list[str]]:
    """
    Bucket flattened tokens into declaration lines.

    Every bucket is present in the result (possibly empty) and lines keep
    the flattening order.
    """
    buckets: dict[CategoryBucket, list[str]] = {bucket: [] for bucket in CategoryBucket}
    for key, value in flat.items():
        buckets[classify_key(key)].append(css_declaration(key, value))
    return buckets

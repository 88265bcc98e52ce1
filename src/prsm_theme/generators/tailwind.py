"""
Tailwind CSS config generator.

Unlike the stylesheets this keeps the token structure: colour ramps,
font stacks, radii and shadows are copied as nested objects into
``theme.extend`` so Tailwind can build its own utility classes.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from typing import Any

from prsm_theme.core.errors import make_malformed_token_error
from prsm_theme.core.flatten import VALUE_KEY, is_scalar
from prsm_theme.render import render_template

from .common import lookup, require_mapping

COLOR_RAMPS = ("primary", "secondary", "neutral")
FONT_ROLES = ("sans", "heading", "mono", "display")
REQUIRE_PATH = "./themes/prsmtech/dist/config.js"


def _normalize_font_sizes(font_sizes: Mapping[str, Any]) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for key, value in font_sizes.items():
        if isinstance(value, Mapping):
            if not is_scalar(value.get(VALUE_KEY)):
                raise make_malformed_token_error(
                    "Font size objects need a scalar 'value'",
                    token_path=f"typography-fontSize-{key}",
                )
            normalized[key] = value[VALUE_KEY]
        else:
            normalized[key] = value
    return normalized


def generate_config_object(doc: Mapping[str, Any]) -> dict[str, Any]:
    """
    Build the Tailwind ``theme.extend`` structure from the token document.

    Raises:
        MalformedTokenError: If ``colors`` or ``typography.fontFamily`` is missing.
    """
    colors = require_mapping(doc, "colors")
    font_families = require_mapping(doc, "typography.fontFamily")

    prsm_colors: dict[str, Any] = {}
    for ramp in COLOR_RAMPS:
        if ramp in colors:
            prsm_colors[ramp] = copy.deepcopy(colors[ramp])
    semantic = lookup(doc, "colors.semantic")
    if isinstance(semantic, Mapping):
        prsm_colors.update(copy.deepcopy(dict(semantic)))

    extend: dict[str, Any] = {
        "colors": {"prsm": prsm_colors},
        "fontFamily": {
            role: copy.deepcopy(font_families[role]) for role in FONT_ROLES if role in font_families
        },
    }

    font_sizes = lookup(doc, "typography.fontSize")
    if isinstance(font_sizes, Mapping):
        extend["fontSize"] = _normalize_font_sizes(font_sizes)

    border_radius = lookup(doc, "borderRadius")
    if border_radius is not None:
        extend["borderRadius"] = copy.deepcopy(border_radius)

    shadows = lookup(doc, "shadows")
    if shadows is not None:
        extend["boxShadow"] = copy.deepcopy(shadows)

    return {"theme": {"extend": extend}}


def generate_config(doc: Mapping[str, Any]) -> str:
    """Generate the Tailwind config module text."""
    config = generate_config_object(doc)
    return render_template(
        "config.js.j2",
        require_path=REQUIRE_PATH,
        config_json=json.dumps(config, indent=2, ensure_ascii=False),
    )

"""
Token flattening.

Turns the nested token document into a flat mapping of dash-joined paths
to scalar values, e.g. ``{"colors": {"primary": {"500": "#0057e6"}}}``
becomes ``{"colors-primary-500": "#0057e6"}``.

Every nested object is classified before recursion:

- VALUE_WRAPPER: ``{"value": "3rem", ...}`` collapses to ``"3rem"``
- DEFAULTABLE: ``{"DEFAULT": x, "50": y, ...}`` emits ``x`` at the parent
  path and still flattens every child
- FONT_FAMILY: the object under ``fontFamily``; each font list is joined
  into one CSS font stack
- GENERIC: anything else, recursed into with no value of its own

Keys starting with ``$`` are metadata and never appear in the output.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any

from .errors import make_malformed_token_error

Scalar = str | int | float
FlatTokenMap = dict[str, Scalar]

METADATA_PREFIX = "$"
DEFAULT_KEY = "DEFAULT"
VALUE_KEY = "value"
FONT_FAMILY_KEY = "fontFamily"


class NodeKind(StrEnum):
    """Shape of a nested token object."""

    VALUE_WRAPPER = "value_wrapper"
    DEFAULTABLE = "defaultable"
    FONT_FAMILY = "font_family"
    GENERIC = "generic"


def is_scalar(value: Any) -> bool:
    """True for str/int/float token values (bool is not a token value)."""
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def is_metadata_key(key: str) -> bool:
    return key.startswith(METADATA_PREFIX)


def join_path(prefix: str, key: str) -> str:
    return f"{prefix}-{key}" if prefix else key


def classify_node(key: str, node: Mapping[str, Any]) -> NodeKind:
    """
    Classify a nested token object by its shape.

    Precedence: value wrapper, DEFAULT group, font family group, generic.
    """
    if VALUE_KEY in node and is_scalar(node[VALUE_KEY]):
        return NodeKind.VALUE_WRAPPER
    if DEFAULT_KEY in node:
        return NodeKind.DEFAULTABLE
    if key == FONT_FAMILY_KEY:
        return NodeKind.FONT_FAMILY
    return NodeKind.GENERIC


def format_font_stack(fonts: Sequence[Any], token_path: str = "") -> str:
    """
    Join a font list into a CSS font stack.

    Names containing whitespace are double-quoted:
    ``["Space Grotesk", "system-ui"]`` -> ``'"Space Grotesk", system-ui'``.
    """
    names = []
    for font in fonts:
        if not isinstance(font, str):
            raise make_malformed_token_error(
                f"Font stack entries must be strings, got {type(font).__name__}",
                token_path=token_path or None,
            )
        names.append(f'"{font}"' if any(ch.isspace() for ch in font) else font)
    return ", ".join(names)


def flatten_tokens(doc: Mapping[str, Any], prefix: str = "") -> FlatTokenMap:
    """
    Flatten a token document into dash-joined path -> scalar entries.

    Args:
        doc: Token document (or a nested group of one)
        prefix: Path accumulated so far ("" at the top level)

    Returns:
        Flat mapping in document order.

    Raises:
        MalformedTokenError: On lists outside ``fontFamily``, booleans,
            nulls, or anything else that is not a scalar or an object.
    """
    flat: FlatTokenMap = {}
    _flatten_into(flat, doc, prefix)
    return flat


def _flatten_into(flat: FlatTokenMap, doc: Mapping[str, Any], prefix: str) -> None:
    for key, value in doc.items():
        key = str(key)
        if is_metadata_key(key):
            continue

        path = join_path(prefix, key)

        if is_scalar(value):
            flat[path] = value
            continue

        if not isinstance(value, Mapping):
            raise make_malformed_token_error(
                f"Unsupported token value of type {type(value).__name__}",
                token_path=path,
            )

        kind = classify_node(key, value)

        if kind is NodeKind.VALUE_WRAPPER:
            flat[path] = value[VALUE_KEY]
        elif kind is NodeKind.DEFAULTABLE:
            default = value[DEFAULT_KEY]
            if not is_scalar(default):
                raise make_malformed_token_error(
                    "DEFAULT must be a string or number",
                    token_path=join_path(path, DEFAULT_KEY),
                )
            flat[path] = default
            _flatten_into(flat, value, path)
        elif kind is NodeKind.FONT_FAMILY:
            _flatten_font_family(flat, value, path)
        else:
            _flatten_into(flat, value, path)


def _flatten_font_family(flat: FlatTokenMap, group: Mapping[str, Any], path: str) -> None:
    for role, fonts in group.items():
        role = str(role)
        if is_metadata_key(role):
            continue
        role_path = join_path(path, role)
        if is_scalar(fonts):
            flat[role_path] = fonts
        elif isinstance(fonts, (list, tuple)):
            flat[role_path] = format_font_stack(fonts, role_path)
        else:
            raise make_malformed_token_error(
                f"Font family must be a list of names or a string, got {type(fonts).__name__}",
                token_path=role_path,
            )

"""
Helpers shared by the artifact generators.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prsm_theme.core.errors import make_malformed_token_error
from prsm_theme.core.flatten import Scalar, is_scalar

_MISSING = object()


def lookup(doc: Mapping[str, Any], dotted_path: str) -> Any:
    """Walk ``a.b.c`` through nested mappings; returns None when any step is missing."""
    node: Any = doc
    for part in dotted_path.split("."):
        if not isinstance(node, Mapping):
            return None
        node = node.get(part, _MISSING)
        if node is _MISSING:
            return None
    return node


def lookup_scalar(doc: Mapping[str, Any], dotted_path: str, default: Scalar) -> Scalar:
    """
    Read a scalar token with a hardcoded fallback.

    Missing values, ``""`` and numeric zero fall back to ``default``.
    Anything that is present but not a scalar raises MalformedTokenError.
    """
    value = lookup(doc, dotted_path)
    if value is None or value == "" or (isinstance(value, (int, float)) and value == 0):
        return default
    if not is_scalar(value):
        raise make_malformed_token_error(
            f"Expected a string or number, got {type(value).__name__}",
            token_path=dotted_path.replace(".", "-"),
        )
    return value


def require_mapping(doc: Mapping[str, Any], dotted_path: str) -> Mapping[str, Any]:
    """Return the mapping at ``dotted_path`` or raise MalformedTokenError."""
    value = lookup(doc, dotted_path)
    if not isinstance(value, Mapping):
        raise make_malformed_token_error(
            "Required token group is missing" if value is None else "Token group must be an object",
            token_path=dotted_path.replace(".", "-"),
        )
    return value

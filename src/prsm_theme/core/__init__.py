"""
Core token handling: loading, flattening, categorization, and errors.
"""

from prsm_theme.core.categorize import CategoryBucket, categorize, classify_key
from prsm_theme.core.config import CompilerConfig
from prsm_theme.core.errors import (
    MalformedTokenError,
    MissingInputError,
    ThemeError,
    TokenContext,
    WriteError,
)
from prsm_theme.core.flatten import NodeKind, classify_node, flatten_tokens, format_font_stack
from prsm_theme.core.store import TokenStore, clear_shared_stores, get_shared_store, load_tokens

__all__ = [
    "CategoryBucket",
    "CompilerConfig",
    "MalformedTokenError",
    "MissingInputError",
    "NodeKind",
    "ThemeError",
    "TokenContext",
    "TokenStore",
    "WriteError",
    "categorize",
    "classify_key",
    "classify_node",
    "clear_shared_stores",
    "flatten_tokens",
    "format_font_stack",
    "get_shared_store",
    "load_tokens",
]

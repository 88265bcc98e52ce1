"""
Token document persistence layer.

Reads the design token document (``variables.json`` by default) and holds
it in memory for the build and read paths. JSON is the canonical format;
YAML documents are accepted as well since JSON is a subset of YAML.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

import yaml

from .errors import MissingInputError, TokenContext

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}

TokenDocument = dict[str, Any]


def load_tokens(path: Path) -> TokenDocument:
    """Load a token document from disk.

    Args:
        path: Path to a ``.json`` (or ``.yaml``/``.yml``) token document.

    Returns:
        The parsed document, keys in file order.

    Raises:
        MissingInputError: If the file is absent, unreadable, unparseable,
            or its top level is not a mapping.
    """
    context = TokenContext(file=path)

    if not path.is_file():
        raise MissingInputError("Token document not found", context)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MissingInputError(f"Cannot read token document: {e}", context) from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MissingInputError(f"Invalid JSON: {e}", context) from e
    except yaml.YAMLError as e:
        raise MissingInputError(f"Invalid YAML: {e}", context) from e

    if not isinstance(data, dict):
        raise MissingInputError(
            f"Token document must be an object, got {type(data).__name__}", context
        )

    logger.debug("Loaded %d top-level token groups from %s", len(data), path)
    return data


class TokenStore:
    """
    Owns the in-memory copy of one token document.

    The document is loaded lazily on first access and kept until
    ``reload()`` or ``invalidate()``. Generator failures never touch the
    cache.
    """

    def __init__(self, path: Path):
        self.path = path
        self._document: TokenDocument | None = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._document is not None

    def load(self) -> TokenDocument:
        """Return the cached document, loading it from disk if needed."""
        with self._lock:
            if self._document is None:
                self._document = load_tokens(self.path)
            return self._document

    def reload(self) -> TokenDocument:
        """Drop the cached document and load it again from disk."""
        with self._lock:
            self._document = None
            self._document = load_tokens(self.path)
            return self._document

    def invalidate(self) -> None:
        """Forget the cached document."""
        with self._lock:
            self._document = None

    def get(self) -> TokenDocument | None:
        """Return the document, or None when it cannot be loaded."""
        try:
            return self.load()
        except MissingInputError as e:
            logger.warning("%s", e)
            return None


_shared_stores: dict[Path, TokenStore] = {}
_shared_lock = threading.Lock()


def get_shared_store(path: Path) -> TokenStore:
    """
    Get the process-wide store for a token document.

    The build path and the read accessors both go through this, so a
    reload done by a build is what later reads see.
    """
    key = Path(path).resolve()
    with _shared_lock:
        store = _shared_stores.get(key)
        if store is None:
            store = _shared_stores[key] = TokenStore(Path(path))
        return store


def clear_shared_stores() -> None:
    """Forget every shared store."""
    with _shared_lock:
        _shared_stores.clear()

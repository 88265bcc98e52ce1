"""
Artifact generators.

Each generator is a pure function of the token document returning the
artifact text. ``GENERATORS`` is the fixed, ordered registry the compiler
iterates; the key is the artifact name and file stem.
"""

from collections.abc import Callable, Mapping
from typing import Any

from prsm_theme.generators.base import generate_base
from prsm_theme.generators.reveal import generate_reveal
from prsm_theme.generators.slidev import generate_slidev
from prsm_theme.generators.tailwind import generate_config, generate_config_object
from prsm_theme.generators.webslides import generate_webslides

Generator = Callable[[Mapping[str, Any]], str]

GENERATORS: dict[str, Generator] = {
    "base": generate_base,
    "slidev": generate_slidev,
    "reveal": generate_reveal,
    "webslides": generate_webslides,
    "config": generate_config,
}

ARTIFACT_EXTENSIONS: dict[str, str] = {
    "config": ".js",
}
DEFAULT_EXTENSION = ".css"


def artifact_filename(name: str) -> str:
    """File name for an artifact, e.g. ``reveal`` -> ``reveal.css``."""
    return f"{name}{ARTIFACT_EXTENSIONS.get(name, DEFAULT_EXTENSION)}"


__all__ = [
    "ARTIFACT_EXTENSIONS",
    "GENERATORS",
    "Generator",
    "artifact_filename",
    "generate_base",
    "generate_config",
    "generate_config_object",
    "generate_reveal",
    "generate_slidev",
    "generate_webslides",
]

"""
Version lookup for prsm-theme.

An installed distribution reports its own metadata. A source checkout
that was never installed falls back to the ``[project]`` table of the
repository's pyproject.toml.
"""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DISTRIBUTION = "prsm-theme"
PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"
UNKNOWN_VERSION = "0.0.0+unknown"


def _pyproject_version(pyproject: Path) -> str | None:
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return None
    project = data.get("project", {})
    if project.get("name") != DISTRIBUTION:
        return None
    return project.get("version")


def get_version() -> str:
    """Return the installed version, the checkout's version, or ``0.0.0+unknown``."""
    try:
        return _metadata_version(DISTRIBUTION)
    except PackageNotFoundError:
        return _pyproject_version(PYPROJECT) or UNKNOWN_VERSION


__version__ = get_version()

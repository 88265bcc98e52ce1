"""Shared pytest fixtures for prsm-theme tests."""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from prsm_theme.core.config import DEFAULT_TOKENS_PATH


@pytest.fixture
def sample_tokens() -> dict[str, Any]:
    """Return a small token document exercising every node shape."""
    return {
        "$schema": "https://example.com/tokens.schema.json",
        "colors": {
            "primary": {"50": "#e6f0ff", "500": "#0057e6", "DEFAULT": "#0057e6"},
            "secondary": {"500": "#5c00e6", "DEFAULT": "#5c00e6"},
            "neutral": {"50": "#f8f9fa", "900": "#212529", "DEFAULT": "#6c757d"},
            "semantic": {
                "success": {"light": "#d4edda", "DEFAULT": "#28a745", "dark": "#1e7e34"},
            },
        },
        "slide": {"background": "#ffffff", "text": "#212529", "heading": "#00244d", "link": "#0057e6"},
        "dark": {"background": "#0d1117", "text": "#e6edf3", "heading": "#ffffff", "link": "#4d94ff"},
        "typography": {
            "fontFamily": {
                "sans": ["Inter", "system-ui"],
                "heading": ["Space Grotesk", "sans-serif"],
                "mono": ["Maple Mono", "monospace"],
                "display": ["Space Grotesk", "Inter"],
            },
            "fontSize": {"sm": "0.875rem", "5xl": {"value": "3rem", "lineHeight": "1.1"}},
            "fontWeight": {"bold": 700},
        },
        "spacing": {"md": "1rem"},
        "borderRadius": {"DEFAULT": "0.5rem", "lg": "1rem"},
        "shadows": {"md": "0 4px 6px -1px rgba(0, 0, 0, 0.1)"},
        "transitions": {"duration": {"fast": "150ms"}},
        "gradients": {"primary": "linear-gradient(135deg, #0057e6 0%, #5c00e6 100%)"},
    }


@pytest.fixture
def tokens_file(tmp_path: Path, sample_tokens: dict[str, Any]) -> Path:
    """Write the sample tokens to a temporary variables.json."""
    path = tmp_path / "variables.json"
    path.write_text(json.dumps(sample_tokens, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def bundled_tokens() -> dict[str, Any]:
    """Return the bundled PRSMTECH token document."""
    return json.loads(DEFAULT_TOKENS_PATH.read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def _fresh_shared_stores() -> Iterator[None]:
    """Start and end every test without cached token documents."""
    from prsm_theme.core.store import clear_shared_stores

    clear_shared_stores()
    yield
    clear_shared_stores()

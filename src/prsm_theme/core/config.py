"""
Compiler configuration.

Locations default to the bundled PRSMTECH theme directory and can be
overridden with environment variables or CLI options:

    PRSM_TOKENS_PATH     - token document (default: themes/prsmtech/variables.json)
    PRSM_OUTPUT_DIR      - output directory (default: themes/prsmtech/dist)
    PRSM_WATCH_INTERVAL  - watch polling interval in seconds (default: 0.5)
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

THEME_DIR = Path(__file__).parent.parent / "themes" / "prsmtech"
DEFAULT_TOKENS_PATH = THEME_DIR / "variables.json"
DEFAULT_OUTPUT_DIR = THEME_DIR / "dist"
DEFAULT_POLL_INTERVAL = 0.5

TOKENS_PATH_ENV_VAR = "PRSM_TOKENS_PATH"
OUTPUT_DIR_ENV_VAR = "PRSM_OUTPUT_DIR"
WATCH_INTERVAL_ENV_VAR = "PRSM_WATCH_INTERVAL"


class CompilerConfig(BaseModel):
    """Where to read tokens from and where to write artifacts."""

    model_config = ConfigDict(frozen=True)

    tokens_path: Path = Field(default=DEFAULT_TOKENS_PATH, description="Token document")
    output_dir: Path = Field(default=DEFAULT_OUTPUT_DIR, description="Artifact directory")
    poll_interval: float = Field(
        default=DEFAULT_POLL_INTERVAL, gt=0, description="Watch polling interval (seconds)"
    )

    @classmethod
    def from_env(
        cls,
        *,
        tokens_path: Path | None = None,
        output_dir: Path | None = None,
        poll_interval: float | None = None,
    ) -> CompilerConfig:
        """Build a config from environment variables, with explicit values taking precedence."""
        env_tokens = os.environ.get(TOKENS_PATH_ENV_VAR, "").strip()
        env_output = os.environ.get(OUTPUT_DIR_ENV_VAR, "").strip()
        env_interval = os.environ.get(WATCH_INTERVAL_ENV_VAR, "").strip()

        values: dict[str, object] = {}
        if tokens_path is not None:
            values["tokens_path"] = tokens_path
        elif env_tokens:
            values["tokens_path"] = Path(env_tokens)
        if output_dir is not None:
            values["output_dir"] = output_dir
        elif env_output:
            values["output_dir"] = Path(env_output)
        if poll_interval is not None:
            values["poll_interval"] = poll_interval
        elif env_interval:
            values["poll_interval"] = env_interval

        return cls(**values)

"""Tests for the prsm-theme CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

runner = CliRunner()


class TestCompileCommand:
    def test_builds_all_artifacts(self, tmp_path: Path, tokens_file: Path) -> None:
        from prsm_theme.cli import app

        out = tmp_path / "dist"
        result = runner.invoke(app, ["-t", str(tokens_file), "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in out.iterdir()) == [
            "base.css",
            "config.js",
            "reveal.css",
            "slidev.css",
            "webslides.css",
        ]
        assert "webslides" in result.output

    def test_missing_tokens_exits_1(self, tmp_path: Path) -> None:
        from prsm_theme.cli import app

        out = tmp_path / "dist"
        result = runner.invoke(app, ["--tokens", str(tmp_path / "nope.json"), "--out-dir", str(out)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not out.exists()

    def test_partial_failure_exits_1(
        self, tmp_path: Path, tokens_file: Path, sample_tokens: dict[str, Any]
    ) -> None:
        from prsm_theme.cli import app

        sample_tokens["shadows"] = {"layered": ["a", "b"]}
        tokens_file.write_text(json.dumps(sample_tokens))
        out = tmp_path / "dist"

        result = runner.invoke(app, ["-t", str(tokens_file), "-o", str(out)])

        assert result.exit_code == 1
        assert "failed" in result.output
        assert not (out / "base.css").exists()
        assert (out / "slidev.css").exists()

    def test_environment_configuration(
        self, tmp_path: Path, tokens_file: Path, monkeypatch
    ) -> None:
        from prsm_theme.cli import app

        out = tmp_path / "env-dist"
        monkeypatch.setenv("PRSM_TOKENS_PATH", str(tokens_file))
        monkeypatch.setenv("PRSM_OUTPUT_DIR", str(out))

        result = runner.invoke(app, [])
        assert result.exit_code == 0, result.output
        assert (out / "config.js").exists()

    def test_invalid_interval(self, tmp_path: Path, tokens_file: Path) -> None:
        from prsm_theme.cli import app

        result = runner.invoke(app, ["-t", str(tokens_file), "--interval", "0", "--watch"])
        assert result.exit_code == 1
        assert "invalid configuration" in result.output

    def test_version(self) -> None:
        from prsm_theme.cli import app

        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("prsm-theme ")


class TestConfigureLogging:
    def test_verbose_is_debug(self, monkeypatch) -> None:
        import logging

        from prsm_theme import cli

        calls: list[dict[str, Any]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        cli.configure_logging(verbose=True)
        assert calls[-1]["level"] == logging.DEBUG

    def test_watch_defaults_to_info(self, monkeypatch) -> None:
        import logging

        from prsm_theme import cli

        calls: list[dict[str, Any]] = []
        monkeypatch.delenv("PRSM_LOG_LEVEL", raising=False)
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        cli.configure_logging(watch=True)
        assert calls[-1]["level"] == logging.INFO
        cli.configure_logging()
        assert calls[-1]["level"] == logging.WARNING

    def test_environment_level(self, monkeypatch) -> None:
        import logging

        from prsm_theme import cli

        calls: list[dict[str, Any]] = []
        monkeypatch.setenv("PRSM_LOG_LEVEL", "error")
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        cli.configure_logging()
        assert calls[-1]["level"] == logging.ERROR


class TestVersion:
    def test_checkout_version(self, tmp_path: Path) -> None:
        from prsm_theme._version import _pyproject_version

        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "prsm-theme"\nversion = "1.2.3"\n')
        assert _pyproject_version(pyproject) == "1.2.3"

    def test_other_project_ignored(self, tmp_path: Path) -> None:
        from prsm_theme._version import _pyproject_version

        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "something-else"\nversion = "9.9.9"\n')
        assert _pyproject_version(pyproject) is None
        assert _pyproject_version(tmp_path / "missing.toml") is None

    def test_uninstalled_falls_back(self, monkeypatch, tmp_path: Path) -> None:
        from importlib.metadata import PackageNotFoundError

        from prsm_theme import _version

        def not_installed(name: str) -> str:
            raise PackageNotFoundError(name)

        monkeypatch.setattr(_version, "_metadata_version", not_installed)
        monkeypatch.setattr(_version, "PYPROJECT", tmp_path / "missing.toml")
        assert _version.get_version() == "0.0.0+unknown"

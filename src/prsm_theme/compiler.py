"""
Theme compiler orchestration.

One compile pass runs every registered generator against the same token
document. A generator that raises yields a failed artifact; its siblings
still run. ``compile_tokens`` does no I/O; ``write_artifacts`` and
``build`` handle the file system.

Usage::

    from prsm_theme.compiler import build
    from prsm_theme.core.config import CompilerConfig

    report = build(CompilerConfig.from_env())
    if not report.success:
        ...
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from prsm_theme.core.config import CompilerConfig
from prsm_theme.core.errors import make_write_error
from prsm_theme.core.store import TokenStore, get_shared_store
from prsm_theme.generators import GENERATORS, Generator, artifact_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedArtifact:
    """Output of one generator for one compile pass."""

    name: str
    filename: str
    success: bool
    content: str | None = None
    error: str | None = None
    error_type: str | None = None


@dataclass
class CompileResult:
    """Ordered artifacts of one compile pass."""

    artifacts: list[GeneratedArtifact] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(artifact.success for artifact in self.artifacts)

    @property
    def failed(self) -> list[GeneratedArtifact]:
        return [artifact for artifact in self.artifacts if not artifact.success]

    def get(self, name: str) -> GeneratedArtifact | None:
        for artifact in self.artifacts:
            if artifact.name == name:
                return artifact
        return None


@dataclass
class BuildReport:
    """Result of compiling and writing all artifacts."""

    output_dir: Path
    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    paths: dict[str, Path] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return bool(self.artifacts) and all(artifact.success for artifact in self.artifacts)


def compile_tokens(
    doc: Mapping[str, Any],
    generators: Mapping[str, Generator] | None = None,
) -> CompileResult:
    """
    Run every generator against one token document.

    Args:
        doc: Loaded token document
        generators: Registry to use (defaults to ``GENERATORS``)

    Returns:
        CompileResult with one artifact per generator, in registry order.
        Never raises for generator failures.
    """
    registry = GENERATORS if generators is None else generators
    result = CompileResult()

    for name, generator in registry.items():
        filename = artifact_filename(name)
        try:
            content = generator(doc)
        except Exception as e:
            logger.warning("Generator %s failed: %s", name, e)
            result.artifacts.append(
                GeneratedArtifact(
                    name=name,
                    filename=filename,
                    success=False,
                    error=str(e),
                    error_type=type(e).__name__,
                )
            )
            continue

        logger.debug("Generated %s (%d chars)", filename, len(content))
        result.artifacts.append(
            GeneratedArtifact(name=name, filename=filename, success=True, content=content)
        )

    return result


def write_artifacts(result: CompileResult, output_dir: Path) -> BuildReport:
    """
    Write successful artifacts to ``output_dir``.

    Write failures are recorded on the affected artifact as a WriteError;
    other artifacts are still written.
    """
    report = BuildReport(output_dir=output_dir)

    dir_error: str | None = None
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        dir_error = str(make_write_error(f"Cannot create output directory: {e}", output_dir))
        logger.error("%s", dir_error)

    for artifact in result.artifacts:
        if not artifact.success:
            report.artifacts.append(artifact)
            continue

        path = output_dir / artifact.filename
        if dir_error is not None:
            report.artifacts.append(_as_write_failure(artifact, dir_error))
            continue

        try:
            path.write_text(artifact.content or "", encoding="utf-8")
        except OSError as e:
            error = make_write_error(f"Cannot write artifact: {e}", path)
            logger.error("%s", error)
            report.artifacts.append(_as_write_failure(artifact, str(error)))
            continue

        report.paths[artifact.name] = path
        report.artifacts.append(artifact)

    return report


def _as_write_failure(artifact: GeneratedArtifact, message: str) -> GeneratedArtifact:
    return dataclasses.replace(artifact, success=False, error=message, error_type="WriteError")


def build(config: CompilerConfig | None = None, store: TokenStore | None = None) -> BuildReport:
    """
    Load tokens, compile every artifact, and write them out.

    Args:
        config: Compiler configuration (defaults from the environment)
        store: Token store to (re)load from; created from ``config`` if omitted

    Returns:
        BuildReport for the pass

    Raises:
        MissingInputError: If the token document cannot be loaded. No
            generator runs in that case.
    """
    config = config or CompilerConfig.from_env()
    store = store or get_shared_store(config.tokens_path)

    logger.info("Loading %s", store.path)
    doc = store.reload()

    result = compile_tokens(doc)
    report = write_artifacts(result, config.output_dir)

    for artifact in report.artifacts:
        if artifact.success:
            logger.info("Generated %s", report.paths[artifact.name])
        else:
            logger.error("Failed %s: %s", artifact.filename, artifact.error)

    return report

"""
Watch mode for the theme compiler.

Polls the token document's mtime and rebuilds every artifact when it
changes. The rebuild runs inside the watcher thread, so a new change is
only noticed after the current build finished and builds never overlap.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from prsm_theme.compiler import BuildReport, build
from prsm_theme.core.config import CompilerConfig
from prsm_theme.core.errors import ThemeError
from prsm_theme.core.store import TokenStore, get_shared_store

logger = logging.getLogger(__name__)


class TokenWatcher:
    """
    Watches a single file for changes using polling (cross-platform compatible).

    Uses mtime-based change detection to avoid external dependencies.
    """

    def __init__(
        self,
        path: Path,
        on_change: Callable[[Path], None],
        poll_interval: float = 0.5,
    ):
        """
        Initialize the watcher.

        Args:
            path: File to watch
            on_change: Callback when the file changes
            poll_interval: How often to check for changes (seconds)
        """
        self.path = path
        self.on_change = on_change
        self.poll_interval = poll_interval

        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._mtime: float | None = None

    def snapshot(self) -> None:
        """Record the current mtime as the baseline for change detection."""
        self._mtime = self._current_mtime()

    def start(self, *, snapshot: bool = True) -> None:
        """
        Start watching for file changes.

        Args:
            snapshot: Take a fresh baseline first. Pass False when
                ``snapshot()`` was called earlier, so edits made since then
                still count as changes.
        """
        if snapshot:
            self.snapshot()
        self._thread = threading.Thread(target=self._watch_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop watching for file changes."""
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=2)

    def _current_mtime(self) -> float | None:
        try:
            return self.path.stat().st_mtime
        except OSError:
            return None

    def check(self) -> bool:
        """
        Poll once and run the callback if the file changed.

        A file that disappears is not a change; it triggers a rebuild once
        it reappears.

        Returns:
            True if the callback ran.
        """
        mtime = self._current_mtime()
        changed = mtime is not None and (self._mtime is None or mtime > self._mtime)
        self._mtime = mtime
        if not changed:
            return False

        try:
            self.on_change(self.path)
        except Exception:
            logger.exception("Error in change callback")
        return True

    def _watch_loop(self) -> None:
        """Main watch loop that polls for file changes."""
        while not self._stop_event.is_set():
            self.check()
            self._stop_event.wait(self.poll_interval)


def rebuild(config: CompilerConfig, store: TokenStore) -> BuildReport | None:
    """Run one build pass, logging failures instead of raising them."""
    try:
        report = build(config, store)
    except ThemeError as e:
        logger.error("Rebuild failed: %s", e)
        return None

    if report.success:
        logger.info("Rebuilt %d artifacts in %s", len(report.artifacts), report.output_dir)
    else:
        failed = ", ".join(a.name for a in report.artifacts if not a.success)
        logger.error("Rebuild finished with failures: %s", failed)
    return report


def run_watch(
    config: CompilerConfig,
    *,
    store: TokenStore | None = None,
    stop_event: threading.Event | None = None,
    on_rebuild: Callable[[BuildReport | None], None] | None = None,
) -> None:
    """
    Build once, then rebuild whenever the token document changes.

    Blocks until ``stop_event`` is set or the process is interrupted.
    """
    store = store or get_shared_store(config.tokens_path)
    stop_event = stop_event or threading.Event()

    def _build_and_report() -> None:
        report = rebuild(config, store)
        if on_rebuild is not None:
            on_rebuild(report)

    def _on_change(path: Path) -> None:
        logger.info("%s changed, rebuilding...", path.name)
        _build_and_report()

    watcher = TokenWatcher(config.tokens_path, _on_change, poll_interval=config.poll_interval)
    # Baseline before the first build so a save during it triggers a rebuild
    watcher.snapshot()
    _build_and_report()

    watcher.start(snapshot=False)
    logger.info("Watching %s for changes", config.tokens_path)

    try:
        while not stop_event.wait(config.poll_interval):
            pass
    except KeyboardInterrupt:
        logger.info("Watch mode stopped")
    finally:
        watcher.stop()

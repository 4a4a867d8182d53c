"""Scratch directory owned by a single conversion."""

from __future__ import annotations

import logging
from pathlib import Path
from tempfile import TemporaryDirectory
from types import TracebackType

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "pdf2cbz-"


class ScratchWorkspace:
    """Temporary directory removed on every exit path.

    Wraps ``TemporaryDirectory`` and adds the ``pages`` subdirectory the
    rasterizer writes into. The tree is deleted whether the block returns,
    raises or is interrupted; a hard kill can still leave it behind.
    """

    def __init__(self, *, prefix: str = WORKSPACE_PREFIX, base_dir: Path | None = None) -> None:
        self._prefix = prefix
        self._base_dir = base_dir
        self._tmpdir: TemporaryDirectory[str] | None = None
        self._released = False

    @property
    def path(self) -> Path:
        if self._tmpdir is None or self._released:
            raise RuntimeError("workspace is not active")
        return Path(self._tmpdir.name)

    @property
    def pages_dir(self) -> Path:
        return self.path / "pages"

    def __enter__(self) -> ScratchWorkspace:
        if self._tmpdir is not None:
            raise RuntimeError("workspace cannot be reused")
        self._tmpdir = TemporaryDirectory(
            prefix=self._prefix, dir=self._base_dir, ignore_cleanup_errors=True
        )
        self.pages_dir.mkdir()
        logger.debug("created workspace %s", self._tmpdir.name)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def release(self) -> None:
        """Remove the directory tree; safe to call more than once."""
        if self._tmpdir is None or self._released:
            return
        self._released = True
        path = Path(self._tmpdir.name)
        self._tmpdir.cleanup()
        if path.exists():
            logger.warning("could not remove workspace %s", path)
        else:
            logger.debug("removed workspace %s", path)

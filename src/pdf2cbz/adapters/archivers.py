"""Archive writers implementing the ``Archiver`` port."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile

from pdf2cbz.errors import ArchiveError

logger = logging.getLogger(__name__)


class ZipArchiver:
    """Write images into a zip container (the CBZ format)."""

    def __init__(self, *, compression: int = ZIP_DEFLATED) -> None:
        self.compression = compression

    def pack(self, image_paths: Sequence[Path], destination: Path) -> Path:
        """Store ``image_paths`` under their base names, in the given order.

        A partially written archive is removed before ``ArchiveError`` is raised.
        """
        if not image_paths:
            raise ArchiveError("Failed to create CBZ archive: no images to pack")
        names = [path.name for path in image_paths]
        if len(set(names)) != len(names):
            raise ArchiveError("Failed to create CBZ archive: duplicate image names")

        try:
            with ZipFile(destination, "w", self.compression) as archive:
                for path in image_paths:
                    archive.write(path, arcname=path.name)
        except (OSError, ValueError) as exc:
            destination.unlink(missing_ok=True)
            raise ArchiveError(f"Failed to create CBZ archive: {exc}") from exc

        logger.debug("packed %d image(s) into %s", len(image_paths), destination)
        return destination

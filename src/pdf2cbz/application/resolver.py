"""Classify a user-supplied argument and expand it into candidate PDF paths."""

from __future__ import annotations

import glob
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pdf2cbz.errors import InputNotFoundError

logger = logging.getLogger(__name__)

GLOB_CHARS = ("*", "?")
PDF_SUFFIX = ".pdf"


class InputKind(str, Enum):
    """How an input argument was interpreted."""

    SINGLE_FILE = "file"
    DIRECTORY = "directory"
    GLOB = "glob"


@dataclass(frozen=True)
class ResolvedInput:
    """Classified argument plus its ordered candidate paths."""

    kind: InputKind
    argument: str
    candidates: tuple[Path, ...]


def is_pdf(path: Path) -> bool:
    """Return ``True`` when the suffix is ``.pdf`` in any letter case."""
    return path.suffix.lower() == PDF_SUFFIX


def has_glob_chars(argument: str) -> bool:
    return any(char in argument for char in GLOB_CHARS)


def resolve_directory(directory: Path) -> tuple[Path, ...]:
    """List PDF files directly inside ``directory`` in enumeration order.

    Raises
    ------
    InputNotFoundError
        If ``directory`` does not exist, is not a directory or cannot be read.
    """
    if not directory.is_dir():
        raise InputNotFoundError(f"Directory not found: {directory}")
    try:
        with os.scandir(directory) as entries:
            return tuple(
                Path(entry.path)
                for entry in entries
                if entry.is_file() and is_pdf(Path(entry.name))
            )
    except OSError as exc:
        raise InputNotFoundError(f"Cannot read directory: {directory}: {exc}") from exc


def resolve_glob(pattern: str) -> tuple[Path, ...]:
    """Expand ``pattern`` and keep existing regular files, in expansion order."""
    return tuple(Path(match) for match in glob.glob(pattern) if os.path.isfile(match))


def resolve(argument: str) -> ResolvedInput:
    """Classify ``argument`` as a directory, glob pattern or single file.

    A single-file argument is returned verbatim; its existence is checked
    later by the conversion engine. The raw string is tested, so an empty
    argument stays a single file instead of naming the working directory.
    """
    path = Path(argument)
    if os.path.isdir(argument):
        kind = InputKind.DIRECTORY
        candidates = resolve_directory(path)
    elif has_glob_chars(argument):
        kind = InputKind.GLOB
        candidates = resolve_glob(argument)
    else:
        kind = InputKind.SINGLE_FILE
        candidates = (path,)
    logger.debug("resolved %r as %s with %d candidate(s)", argument, kind.value, len(candidates))
    return ResolvedInput(kind=kind, argument=argument, candidates=candidates)

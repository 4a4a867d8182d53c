"""Shared type aliases for conversion modules."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Literal, TypeAlias

if TYPE_CHECKING:
    from pdf2cbz.application.results import ConversionResult

ErrorKind: TypeAlias = Literal[
    "InputNotFound",
    "NotAPdf",
    "AlreadyConverted",
    "NoPages",
    "RasterizeError",
    "ArchiveError",
    "PublishError",
    "ConversionError",
]
ResultCallback: TypeAlias = Callable[["ConversionResult"], None]

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union
from urllib.parse import unquote, urlparse

from common.errors import InvalidImportError


@dataclass(frozen=True)
class LocalFile:
    path: Path


@dataclass(frozen=True)
class LocalDirectory:
    path: Path


@dataclass(frozen=True)
class Remote:
    url: str


Location = Union[LocalFile, LocalDirectory, Remote]


def _local_path(path_or_url: str) -> Path | None:
    """Return the filesystem path for bare paths and file: URLs, None for anything remote."""
    parsed = urlparse(path_or_url)
    scheme = parsed.scheme.lower()
    # "C:\realms" parses with scheme "c"
    if not scheme or len(scheme) == 1:
        return Path(path_or_url)
    if scheme == "file":
        if parsed.netloc and parsed.netloc != "localhost":
            return Path(unquote(f"//{parsed.netloc}{parsed.path}"))
        return Path(unquote(parsed.path))
    return None


def classify_location(path_or_url: str) -> Location:
    """
    Decide once whether the configured import path is a local file,
    a local directory or a remote URL.
    """
    if not path_or_url:
        raise InvalidImportError("Import path is not configured")

    path = _local_path(path_or_url)
    if path is None:
        return Remote(path_or_url)

    if not path.exists() or not os.access(path, os.R_OK):
        raise InvalidImportError(f"Import path does not exist: {path.absolute()}")
    if path.is_dir():
        return LocalDirectory(path)
    return LocalFile(path)

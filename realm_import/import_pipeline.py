from __future__ import annotations

from pathlib import Path
from typing import List

from tqdm import tqdm

from common.config import ImportSettings, get_settings
from common.errors import InvalidImportError
from common.logger import get_logger
from realm_import.document_models import ImportSet, RawDoc, RealmDocument, stamp
from realm_import.formats import decode, resolve_format
from realm_import.hash_utils import checksum
from realm_import.interpolation import build_interpolator
from realm_import.loaders import read_local, read_remote, split_userinfo
from realm_import.locations import LocalDirectory, LocalFile, classify_location

log = get_logger(__name__)


def discover_files(root: Path) -> List[Path]:
    """
    Regular files directly inside `root`. Subdirectories are not descended into.
    """
    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise InvalidImportError(f"Cannot list import directory {root}: {e}") from e

    paths: List[Path] = []
    for p in entries:
        if p.is_file():
            paths.append(p)
        else:
            log.debug("Skipping non-file entry: %s", p)
    return paths


class RealmImportProvider:
    def __init__(self, settings: ImportSettings | None = None):
        """
        Resolves the configured import path into an ImportSet.
        Uses IMPORT_* environment settings when none are given.
        """
        self.settings = settings or get_settings()
        self.interpolator = build_interpolator(self.settings)

    def get(self) -> ImportSet:
        path = self.settings.path
        try:
            location = classify_location(path)
            if isinstance(location, LocalDirectory):
                log.info("Importing realms from directory %s", location.path)
                imports = self.from_directory(location.path)
            elif isinstance(location, LocalFile):
                log.info("Importing realm file %s", location.path)
                imports = self.from_file(location.path)
            else:
                log.info("Importing realm from %s", split_userinfo(location.url)[0])
                imports = self.from_remote(location.url)
        except OSError as e:
            safe_path, _ = split_userinfo(path)
            raise InvalidImportError(f"Cannot import from {safe_path}: {e}") from e

        log.info("Resolved %d realm import(s)", len(imports))
        return imports

    def from_directory(self, directory: Path) -> ImportSet:
        files = discover_files(Path(directory))
        log.info("Discovered %d files in %s", len(files), directory)

        docs = (
            (f.name, self.read_file(f))
            for f in tqdm(
                files, desc="Loading realm files", disable=not self.settings.show_progress
            )
        )
        return ImportSet(docs)

    def from_file(self, file: Path) -> ImportSet:
        file = Path(file)
        return ImportSet.single(file.name, self.read_file(file))

    def from_remote(self, url: str) -> ImportSet:
        raw = read_remote(
            url, timeout=self.settings.timeout, user_agent=self.settings.user_agent
        )
        return ImportSet.single(raw.filename, self.read_document(raw))

    def read_file(self, file: Path) -> RealmDocument:
        return self.read_document(read_local(file))

    def read_document(self, raw: RawDoc) -> RealmDocument:
        """Pick the format, interpolate, checksum the effective text, then decode and stamp."""
        fmt = resolve_format(raw.filename, self.settings.file_type)
        text = raw.text
        if self.interpolator is not None:
            text = self.interpolator.interpolate(text)

        digest = checksum(text.encode("utf-8"))
        realm = decode(raw.filename, text, fmt)
        log.debug("Decoded %s (realm=%s, checksum=%s)", raw.filename, realm.realm, digest)
        return stamp(realm, digest)


def resolve_imports(settings: ImportSettings | None = None) -> ImportSet:
    return RealmImportProvider(settings).get()

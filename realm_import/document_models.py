from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple

from common.errors import DuplicateImportError
from realm_import.realm_models import RealmImport


@dataclass(frozen=True)
class RawDoc:
    filename: str  # source-relative name (file name or last URL segment)
    text: str  # full raw text, before interpolation


@dataclass(frozen=True)
class RealmDocument:
    realm: RealmImport
    checksum: str  # sha256 of the interpolated text

    @property
    def realm_name(self) -> str | None:
        return self.realm.realm


def stamp(realm: RealmImport, checksum: str) -> RealmDocument:
    return RealmDocument(realm=realm, checksum=checksum)


class ImportSet(Mapping):
    """
    Read-only mapping of source name -> RealmDocument.
    Keys are unique and iterate in sorted order.
    """

    def __init__(self, entries: Iterable[Tuple[str, RealmDocument]] = ()):
        docs: Dict[str, RealmDocument] = {}
        for key, doc in entries:
            if key in docs:
                raise DuplicateImportError(key)
            docs[key] = doc
        self._docs = dict(sorted(docs.items()))

    @classmethod
    def single(cls, key: str, doc: RealmDocument) -> "ImportSet":
        return cls([(key, doc)])

    def __getitem__(self, key: str) -> RealmDocument:
        return self._docs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._docs)

    def __len__(self) -> int:
        return len(self._docs)

    def __repr__(self) -> str:
        return f"ImportSet({list(self._docs)})"

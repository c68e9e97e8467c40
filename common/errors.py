from __future__ import annotations


class InvalidImportError(Exception):
    """Raised when an import source cannot be located, read, interpolated or decoded."""


class DuplicateImportError(InvalidImportError):
    def __init__(self, key: str):
        super().__init__(f"Duplicate key {key}")
        self.key = key

from __future__ import annotations

from typing import Any, Callable, Dict

import orjson
import yaml
from pydantic import ValidationError

from common.config import FileType
from common.errors import InvalidImportError
from realm_import.realm_models import RealmImport


def _load_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def _load_json(text: str) -> Any:
    return orjson.loads(text)


DECODERS: Dict[FileType, Callable[[str], Any]] = {
    FileType.YAML: _load_yaml,
    FileType.JSON: _load_json,
}

EXTENSIONS: Dict[str, FileType] = {
    "yaml": FileType.YAML,
    "yml": FileType.YAML,
    "json": FileType.JSON,
}


def file_extension(filename: str) -> str:
    """Text after the last dot, case preserved; "" when there is none."""
    _, dot, ext = filename.rpartition(".")
    return ext if dot else ""


def resolve_format(filename: str, file_type: FileType | str) -> FileType:
    """
    Pick the decoder for one file: an explicit YAML/JSON setting wins,
    AUTO goes by the file extension.
    """
    try:
        file_type = FileType(file_type)
    except ValueError as e:
        raise InvalidImportError(f"Unknown import file type: {file_type}") from e

    if file_type in DECODERS:
        return file_type
    if file_type == FileType.AUTO:
        ext = file_extension(filename)
        if ext not in EXTENSIONS:
            raise InvalidImportError(f"Unknown file extension: {ext}")
        return EXTENSIONS[ext]
    raise InvalidImportError(f"Unknown import file type: {file_type.value}")


def decode(filename: str, text: str, file_type: FileType | str) -> RealmImport:
    """Parse `text` and validate it against the realm schema; unknown fields fail."""
    fmt = resolve_format(filename, file_type)
    try:
        raw = DECODERS[fmt](text)
    except (yaml.YAMLError, orjson.JSONDecodeError) as e:
        raise InvalidImportError(f"Cannot parse {filename} as {fmt.value}: {e}") from e

    try:
        return RealmImport.model_validate(raw)
    except ValidationError as e:
        raise InvalidImportError(f"Invalid realm import {filename}: {e}") from e

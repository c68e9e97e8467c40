from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FileType(str, Enum):
    YAML = "yaml"
    JSON = "json"
    AUTO = "auto"

    @classmethod
    def _missing_(cls, value):
        # Accept "YAML", "Json", ... as written in env vars or config files
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class ImportSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="IMPORT_", env_file=".env", extra="ignore"
    )

    # Local path, file: URL or http(s) URL
    path: str = ""
    file_type: FileType = FileType.AUTO

    # Variable substitution
    var_substitution: bool = False
    var_substitution_in_variables: bool = True
    var_substitution_undefined_throws_exceptions: bool = True

    # Remote loader
    timeout: float | None = Field(default=None, gt=0)
    user_agent: str = "realm-import/1.0"

    show_progress: bool = False


def load_yaml_config(path: Path = Path("config/config.yaml")) -> ImportSettings:
    """
    Build settings from the `import:` section of a YAML file.
    Fields the file omits still fall back to IMPORT_* environment variables.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return ImportSettings(**(raw.get("import") or {}))


@lru_cache(maxsize=1)
def get_settings() -> ImportSettings:
    return ImportSettings()

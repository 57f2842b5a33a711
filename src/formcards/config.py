"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (FORMCARDS__DOCUMENTS__EXPORT_FORMAT=html)
  2. formcards.yaml         (searched in cwd, then platform config dir)
  3. Hardcoded defaults

The config file is optional; all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from formcards.models.cache import EvictionPolicy
from formcards.render import DEFAULT_MERGE_TAG_PATTERN


def _find_config_file() -> str | None:
    """Return the path of the first formcards.yaml found, or None."""
    candidates = [
        Path("formcards.yaml"),
        Path(platformdirs.user_config_dir("formcards")) / "formcards.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class HttpSettings(BaseModel):
    timeout_seconds: float = 30.0
    user_agent: str = "formcards/1.0"
    max_connections: int = 10
    max_keepalive_connections: int = 5


class DocumentSettings(BaseModel):
    export_url: str = "https://docs.google.com/feeds/download/documents/export/Export"
    export_format: str = "html"
    metadata_url: str = "https://www.googleapis.com/drive/v2/files"
    # Cached documents live for the lifetime of the DocumentCache that owns them.
    eviction_policy: EvictionPolicy = EvictionPolicy.NEVER


class AuthSettings(BaseModel):
    token: str | None = None


class EditorSettings(BaseModel):
    base_url: str = "https://gdev.edmonton.ca/mailman/tinymce/"
    skin_url: str = "https://cloud.tinymce.com/dev/skins/lightgray"
    toolbar: str = "fullscreen | window "
    menubar: bool = False
    plugins: str = (
        "lists advlist autolink link image charmap paste anchor textcolor table code "
        "fullscreen window preview placeholder suggestions"
    )
    branding: bool = False
    code_dialog_width: int = 250
    plugin_preview_width: int = 250
    contextmenu: str = "link image inserttable | cell row column deletetable"


class RenderSettings(BaseModel):
    merge_tag_pattern: str = DEFAULT_MERGE_TAG_PATTERN


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: FORMCARDS__HTTP__TIMEOUT_SECONDS=10
        env_prefix="FORMCARDS__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    http: HttpSettings = HttpSettings()
    documents: DocumentSettings = DocumentSettings()
    auth: AuthSettings = AuthSettings()
    editor: EditorSettings = EditorSettings()
    render: RenderSettings = RenderSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )

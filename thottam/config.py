# thottam/config.py

import os
from typing import Optional
import yaml
from pydantic import BaseModel, Field, field_validator
import anyio


SUPPORTED_FORMATS = ("mdx", "md")
SUPPORTED_LANGUAGES = ("ta", "en")


def _normalize_formats(value: list[str]) -> list[str]:
    formats = [fmt.strip().lower().lstrip(".") for fmt in value if fmt.strip()]
    if not formats:
        raise ValueError("At least one content format is required")
    unknown = sorted(set(formats) - set(SUPPORTED_FORMATS))
    if unknown:
        raise ValueError(f"Unsupported content formats: {', '.join(unknown)}")
    return list(dict.fromkeys(formats))


def _check_language(value: str) -> str:
    if value not in SUPPORTED_LANGUAGES:
        raise ValueError(f"default_language must be one of {SUPPORTED_LANGUAGES}")
    return value


class ContentConfig(BaseModel):
    path: str = "./contents"
    translations_file: str = "_translations.json"
    # Order does not matter: mdx is always tried before md
    formats: list[str] = Field(default_factory=lambda: list(SUPPORTED_FORMATS))
    default_language: str = "ta"
    reserved_categories: list[str] = Field(default_factory=lambda: ["intro", "history"])
    ignore_hidden: bool = True

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, value: list[str]) -> list[str]:
        return _normalize_formats(value)

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, value: str) -> str:
        return _check_language(value)


class APIConfig(BaseModel):
    """Configuration for REST API server."""
    host: str = "0.0.0.0"
    port: int = 8001
    # Browsers treat localhost and 127.0.0.1 as different origins
    cors_origins: list[str] = Field(default_factory=lambda: [
        "http://localhost:3000",   # Site dev server (hostname)
        "http://localhost:5173",   # Vite alternate port
        "http://127.0.0.1:3000",   # Site dev server (IP variant)
        "http://127.0.0.1:5173",   # Vite alternate port (IP variant)
    ])
    cors_methods: list[str] = Field(default_factory=lambda: ["GET", "OPTIONS"])
    cors_headers: list[str] = Field(default_factory=lambda: ["Content-Type", "X-Request-ID"])
    debug: bool = False


class Config(BaseModel):
    content: ContentConfig = Field(default_factory=ContentConfig)
    api: APIConfig = Field(default_factory=APIConfig)


def _get_env_value(name: str) -> Optional[str]:
    """Get environment variable value, treating empty as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _get_env_int(name: str) -> Optional[int]:
    value = _get_env_value(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer") from e


def _apply_env_overrides(config: Config) -> Config:
    api_host = _get_env_value("API_HOST")
    if api_host is not None:
        config.api.host = api_host

    api_port = _get_env_int("API_PORT")
    if api_port is not None:
        config.api.port = api_port

    contents_path = _get_env_value("CONTENTS_PATH")
    if contents_path is not None:
        config.content.path = contents_path

    formats = _get_env_value("CONTENT_FORMATS")
    if formats is not None:
        config.content.formats = _normalize_formats(formats.split(","))

    default_language = _get_env_value("DEFAULT_LANGUAGE")
    if default_language is not None:
        config.content.default_language = _check_language(default_language)

    return config


async def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file (async)."""
    path = anyio.Path(config_path or "configs/settings.yaml")
    if await path.exists():
        text = await path.read_text(encoding="utf-8")
        # Run YAML parsing in a thread to avoid blocking the event loop
        data = await anyio.to_thread.run_sync(yaml.safe_load, text)
        config = Config(**data) if data else Config()
        return _apply_env_overrides(config)

    return _apply_env_overrides(Config())

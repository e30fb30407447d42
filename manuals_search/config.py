# manuals_search/config.py

import os
from typing import Optional
import yaml
from pydantic import BaseModel, Field
import anyio


DEFAULT_CONFIG_PATH = "configs/settings.yaml"


class DriveConfig(BaseModel):
    """Configuration for the Google Drive source folder."""
    service_key: Optional[str] = None      # Raw service-account JSON
    folder_id: Optional[str] = None        # Root folder of the manuals tree
    scopes: list[str] = Field(default_factory=lambda: [
        "https://www.googleapis.com/auth/drive.readonly",
    ])
    api_base_url: str = "https://www.googleapis.com/drive/v3"
    page_size: int = Field(default=1000, ge=1, le=1000)
    target_mime_type: str = "application/pdf"
    timeout: float = 30.0

    def missing_settings(self) -> list[str]:
        """Return the env var names of required settings that are unset."""
        missing = []
        if not self.service_key:
            missing.append("GOOGLE_SERVICE_KEY")
        if not self.folder_id:
            missing.append("GOOGLE_DRIVE_FOLDER_ID")
        return missing


class APIConfig(BaseModel):
    """Configuration for REST API server."""
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ])
    cors_methods: list[str] = Field(default_factory=lambda: ["GET", "OPTIONS"])
    cors_headers: list[str] = Field(default_factory=lambda: ["Content-Type"])
    debug: bool = False


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_format: bool = False


class Config(BaseModel):
    drive: DriveConfig = Field(default_factory=DriveConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


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
    service_key = _get_env_value("GOOGLE_SERVICE_KEY")
    if service_key is not None:
        config.drive.service_key = service_key

    folder_id = _get_env_value("GOOGLE_DRIVE_FOLDER_ID")
    if folder_id is not None:
        config.drive.folder_id = folder_id

    api_host = _get_env_value("API_HOST")
    if api_host is not None:
        config.api.host = api_host

    api_port = _get_env_int("API_PORT")
    if api_port is not None:
        config.api.port = api_port

    log_level = _get_env_value("LOG_LEVEL")
    if log_level is not None:
        config.logging.level = log_level.upper()

    return config


async def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file (async)."""
    path = anyio.Path(
        config_path or _get_env_value("MANUALS_CONFIG") or DEFAULT_CONFIG_PATH
    )
    if await path.exists():
        text = await path.read_text()
        # Run YAML parsing in a thread to avoid blocking the event loop
        data = await anyio.to_thread.run_sync(yaml.safe_load, text)
        config = Config(**data) if data else Config()
        return _apply_env_overrides(config)

    return _apply_env_overrides(Config())

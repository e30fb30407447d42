# manuals_search/api/dependencies.py
"""FastAPI dependency injection."""

from functools import lru_cache
from typing import Annotated, AsyncIterator, Optional
import anyio

from fastapi import Depends

from ..config import Config, DriveConfig, load_config
from ..drive.auth import ServiceAccountAuth
from ..drive.client import DriveClient
from ..errors import ConfigurationError
from ..library.walker import FolderWalker


# =============================================================================
# Configuration
# =============================================================================


@lru_cache()
def get_config_sync() -> Config:
    """Get configuration synchronously (cached).

    Note: uses async AnyIO filesystem operations under the hood.
    """
    return anyio.run(load_config)


_config: Optional[Config] = None
_config_lock: Optional[anyio.Lock] = None


def _get_config_lock() -> anyio.Lock:
    """Get or create the config lock (lazy initialization)."""
    global _config_lock
    if _config_lock is None:
        _config_lock = anyio.Lock()
    return _config_lock


async def get_config() -> Config:
    """Get configuration (async, cached)."""
    global _config

    if _config is None:
        async with _get_config_lock():
            if _config is None:
                _config = await load_config()

    return _config


ConfigDep = Annotated[Config, Depends(get_config)]


async def get_drive_config(config: ConfigDep) -> DriveConfig:
    """Drive settings, with the credential and root folder required."""
    missing = config.drive.missing_settings()
    if missing:
        raise ConfigurationError(missing)
    return config.drive


DriveConfigDep = Annotated[DriveConfig, Depends(get_drive_config)]


# =============================================================================
# Folder Walker
# =============================================================================


async def get_folder_walker(drive: DriveConfigDep) -> AsyncIterator[FolderWalker]:
    """Build a walker with a fresh Drive client for this request."""
    auth = ServiceAccountAuth.from_service_key(drive.service_key, scopes=drive.scopes)

    async with DriveClient(
        token_provider=auth.get_token,
        base_url=drive.api_base_url,
        page_size=drive.page_size,
        timeout=drive.timeout,
    ) as client:
        yield FolderWalker(client, target_mime_type=drive.target_mime_type)


FolderWalkerDep = Annotated[FolderWalker, Depends(get_folder_walker)]


# =============================================================================
# Cleanup on shutdown
# =============================================================================


async def cleanup_dependencies():
    """Reset cached instances on shutdown."""
    global _config, _config_lock

    _config = None
    _config_lock = None

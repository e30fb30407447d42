# manuals_search/api/__init__.py
"""REST API for the manuals search.

Usage:
    from manuals_search.api import create_app

    app = create_app()
    # Run with: uvicorn manuals_search.api:app --reload
"""

from .main import create_app, app
from .dependencies import (
    get_config,
    get_config_sync,
    ConfigDep,
    get_drive_config,
    DriveConfigDep,
    get_folder_walker,
    FolderWalkerDep,
    cleanup_dependencies,
)
from .errors import error_response
from .schemas import DebugResponse, ErrorResponse, HealthResponse

__all__ = [
    "create_app",
    "app",
    "get_config",
    "get_config_sync",
    "ConfigDep",
    "get_drive_config",
    "DriveConfigDep",
    "get_folder_walker",
    "FolderWalkerDep",
    "cleanup_dependencies",
    "error_response",
    "DebugResponse",
    "ErrorResponse",
    "HealthResponse",
]

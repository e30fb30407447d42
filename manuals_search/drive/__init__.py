"""Google Drive access: service-account auth and folder listing."""

from .auth import ServiceAccountAuth, parse_service_key
from .client import DriveClient, children_query

__all__ = [
    "ServiceAccountAuth",
    "parse_service_key",
    "DriveClient",
    "children_query",
]

# manuals_search/errors.py
"""Exceptions raised while building the manuals listing."""

from typing import Optional


class ManualsError(Exception):
    """Base class for manuals listing failures."""


class ConfigurationError(ManualsError):
    """A required setting (credential or root folder) is missing."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__("Missing GOOGLE_SERVICE_KEY or GOOGLE_DRIVE_FOLDER_ID")


class CredentialError(ManualsError):
    """The service-account credential could not be parsed or used."""


class DriveAPIError(ManualsError):
    """A Drive API call failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)

"""Data models for the manuals listing."""

from .manual import DriveEntry, Manual

__all__ = [
    "DriveEntry",
    "Manual",
]

"""List and search PDF service manuals stored in a Google Drive folder tree."""

__version__ = "0.1.0"

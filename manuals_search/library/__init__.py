"""Manual discovery and filtering."""

from .walker import FolderWalker
from .search import filter_manuals, searchable_text

__all__ = [
    "FolderWalker",
    "filter_manuals",
    "searchable_text",
]

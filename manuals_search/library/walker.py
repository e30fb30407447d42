# manuals_search/library/walker.py
"""
Recursive folder walk over Drive.

Collects every file of the target type under a root folder and tags it with
the chain of folder names leading to it.
"""

import logging
from typing import List, Protocol

from ..logging_config import log_duration
from ..models.manual import DriveEntry, Manual

logger = logging.getLogger(__name__)


class FolderLister(Protocol):
    async def list_children(self, parent_id: str) -> List[DriveEntry]: ...


class FolderWalker:
    """Walk a Drive folder tree and collect manuals."""

    def __init__(self, lister: FolderLister, target_mime_type: str = "application/pdf"):
        self.lister = lister
        self.target_mime_type = target_mime_type
        self.folders_visited = 0

    @log_duration("folder walk")
    async def walk(self, root_id: str) -> List[Manual]:
        """
        Collect all target-type files under a folder.

        Args:
            root_id: Drive id of the search root

        Returns:
            Manuals in walk order: a folder's subtrees come before its own files
        """
        self.folders_visited = 0
        manuals: List[Manual] = []
        await self._walk(root_id, (), manuals)

        logger.info(
            "Found %d manuals in %d folders under %s",
            len(manuals), self.folders_visited, root_id,
        )
        return manuals

    async def _walk(self, folder_id: str, path: tuple[str, ...], out: List[Manual]) -> None:
        children = await self.lister.list_children(folder_id)
        self.folders_visited += 1

        folders = [c for c in children if c.is_folder]
        files = [c for c in children if c.is_type(self.target_mime_type)]
        logger.debug(
            "Folder %s (%s): %d subfolders, %d files",
            folder_id, "/".join(path) or "<root>", len(folders), len(files),
        )

        for folder in folders:
            if folder.id and folder.name:
                await self._walk(folder.id, path + (folder.name,), out)

        for entry in files:
            if not entry.id:
                continue
            out.append(Manual.from_entry(entry, path))

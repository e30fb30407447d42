# manuals_search/models/manual.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
VIEW_URL_TEMPLATE = "https://drive.google.com/file/d/{file_id}/view"


class DriveEntry(BaseModel):
    """
    A file or folder as returned by the Drive files.list call.

    Drive may leave out any field, so all of them are optional.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    web_view_link: Optional[str] = Field(default=None, alias="webViewLink")

    @property
    def is_folder(self) -> bool:
        return self.mime_type == FOLDER_MIME_TYPE

    def is_type(self, mime_type: str) -> bool:
        return self.mime_type == mime_type


class Manual(BaseModel):
    """
    A manual found during the folder walk.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    url: str
    path: tuple[str, ...] = ()         # Folder names from the root to the parent
    brand: Optional[str] = None        # path[1]
    category: Optional[str] = None     # path[0]
    tags: tuple[str, ...] = ()

    @classmethod
    def from_entry(cls, entry: DriveEntry, path: tuple[str, ...]) -> "Manual":
        if not entry.id:
            raise ValueError("Drive entry has no id")
        return cls(
            id=entry.id,
            title=entry.name or "Untitled",
            url=entry.web_view_link or VIEW_URL_TEMPLATE.format(file_id=entry.id),
            path=path,
            category=path[0] if len(path) > 0 else None,
            brand=path[1] if len(path) > 1 else None,
        )

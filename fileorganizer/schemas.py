"""Request and response schemas for the HTTP API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import Category


class APIModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# -----------------------------------------------------------------------------
# Request schemas
# -----------------------------------------------------------------------------


class ScanRequest(APIModel):
    directory: str | None = Field(default=None, description="Directory to scan")


class OrganizeRequest(APIModel):
    directory: str | None = Field(default=None, description="Directory to organize")
    dry_run: bool = Field(default=False, description="Preview without moving files")


# -----------------------------------------------------------------------------
# Response schemas
# -----------------------------------------------------------------------------


class FileEntryModel(APIModel):
    name: str
    size: int
    modified: datetime
    category: Category


class FolderEntryModel(APIModel):
    name: str
    item_count: int


class DirectoryStructureModel(APIModel):
    files: list[FileEntryModel]
    folders: list[FolderEntryModel]


class ScanResponse(APIModel):
    success: bool = True
    directory: str
    structure: DirectoryStructureModel


class OrganizedFileModel(APIModel):
    original: str
    category: Category
    destination: str


class FileErrorModel(APIModel):
    file: str
    error: str


class OrganizeStatsModel(APIModel):
    files_moved: int
    folders_created: int
    errors: list[FileErrorModel]
    organized_files: list[OrganizedFileModel]


class OrganizeResponse(APIModel):
    success: bool = True
    directory: str
    dry_run: bool
    stats: OrganizeStatsModel


class HealthResponse(APIModel):
    status: str = "ok"
    message: str = "File Organizer API is running"


class ErrorResponse(APIModel):
    success: bool = False
    error: str


__all__ = [
    "APIModel",
    "DirectoryStructureModel",
    "ErrorResponse",
    "FileEntryModel",
    "FileErrorModel",
    "FolderEntryModel",
    "HealthResponse",
    "OrganizeRequest",
    "OrganizeResponse",
    "OrganizeStatsModel",
    "OrganizedFileModel",
    "ScanRequest",
    "ScanResponse",
]

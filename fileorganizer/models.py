from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List


class Category(str, Enum):
    IMAGES = "images"
    DOCUMENTS = "documents"
    VIDEOS = "videos"
    AUDIO = "audio"
    ARCHIVES = "archives"
    CODE = "code"
    EXECUTABLES = "executables"
    SPREADSHEETS = "spreadsheets"
    PRESENTATIONS = "presentations"
    FONTS = "fonts"
    OTHERS = "others"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FileEntry:
    name: str
    size: int
    modified: datetime
    category: Category

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "size": self.size,
            "modified": self.modified.isoformat(),
            "category": self.category.value,
        }


@dataclass(frozen=True)
class FolderEntry:
    name: str
    item_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "itemCount": self.item_count}


@dataclass
class DirectoryStructure:
    files: List[FileEntry] = field(default_factory=list)
    folders: List[FolderEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files": [f.to_dict() for f in self.files],
            "folders": [f.to_dict() for f in self.folders],
        }


@dataclass(frozen=True)
class OrganizedFile:
    original: str
    category: Category
    destination: str  # relative to the organized directory, "/" separated

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "category": self.category.value,
            "destination": self.destination,
        }


@dataclass(frozen=True)
class FileError:
    file_name: str
    error_message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"file": self.file_name, "error": self.error_message}


@dataclass
class OrganizeStats:
    """Report of one organize pass. Counters stay at 0 on a dry run."""
    files_moved: int = 0
    folders_created: int = 0
    errors: List[FileError] = field(default_factory=list)
    organized_files: List[OrganizedFile] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filesMoved": self.files_moved,
            "foldersCreated": self.folders_created,
            "errors": [e.to_dict() for e in self.errors],
            "organizedFiles": [o.to_dict() for o in self.organized_files],
        }

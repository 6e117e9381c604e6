from pathlib import Path
from datetime import datetime, timezone
from typing import Union

from .classifier import classify
from .errors import DirectoryAccessError
from .models import DirectoryStructure, FileEntry, FolderEntry
from .utils import ensure_directory


class FolderScanner:
    """Lists one folder level: files with their metadata, subfolders with item counts."""

    def __init__(self, root: Union[str, Path]):
        self.root = root

    def scan(self) -> DirectoryStructure:
        try:
            root = ensure_directory(str(self.root))
            structure = DirectoryStructure()
            for p in root.iterdir():
                # Symlinks are neither regular files nor directories here.
                if p.is_symlink():
                    continue
                if p.is_file():
                    stat = p.stat()
                    structure.files.append(
                        FileEntry(
                            name=p.name,
                            size=stat.st_size,
                            modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                            category=classify(p.name),
                        )
                    )
                elif p.is_dir():
                    structure.folders.append(
                        FolderEntry(name=p.name, item_count=sum(1 for _ in p.iterdir()))
                    )
            return structure
        except (OSError, DirectoryAccessError) as e:
            raise DirectoryAccessError(f"Failed to read directory: {e}") from e


def scan(directory: Union[str, Path]) -> DirectoryStructure:
    return FolderScanner(directory).scan()

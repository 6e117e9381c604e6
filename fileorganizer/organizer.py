from pathlib import Path
from typing import Union

from .classifier import classify
from .errors import DirectoryAccessError, PerFileOperationError
from .models import FileError, OrganizedFile, OrganizeStats
from .utils import ensure_directory, unique_path


class FileOrganizer:
    """Moves the files of one folder level into per-category subfolders.

    Subfolders are never descended into. Failures on a single file are
    collected in the returned stats; only an unusable root aborts the run.
    """

    def __init__(self, directory: Union[str, Path], dry_run: bool = False):
        self.directory = directory
        self.dry_run = dry_run

    def organize(self) -> OrganizeStats:
        try:
            root = ensure_directory(str(self.directory))
            files = [p for p in root.iterdir() if p.is_file() and not p.is_symlink()]
        except (OSError, DirectoryAccessError) as e:
            raise DirectoryAccessError(f"Failed to organize directory: {e}") from e

        folder_name = self._folder_name(root)
        stats = OrganizeStats()
        for src in files:
            try:
                self.move_one(root, folder_name, src, stats)
            except PerFileOperationError as e:
                stats.errors.append(FileError(e.file_name, str(e)))
        return stats

    def _folder_name(self, root: Path) -> str:
        # Last segment as given by the caller, so a symlinked folder keeps its own name.
        name = Path(str(self.directory).rstrip("/\\")).expanduser().name
        if name in ("", ".", ".."):
            return root.name
        return name

    def move_one(self, root: Path, folder_name: str, src: Path, stats: OrganizeStats) -> None:
        try:
            category = classify(src.name)

            # Already inside a folder of this category
            if folder_name == category.value:
                return

            if self.dry_run:
                stats.organized_files.append(
                    OrganizedFile(src.name, category, f"{category.value}/{src.name}")
                )
                return

            dest_dir = root / category.value
            if not dest_dir.exists():
                dest_dir.mkdir(parents=True, exist_ok=True)
                stats.folders_created += 1

            dest_file = unique_path(dest_dir / src.name)
            src.rename(dest_file)
        except Exception as e:
            raise PerFileOperationError(src.name, e) from e

        stats.files_moved += 1
        stats.organized_files.append(
            OrganizedFile(src.name, category, dest_file.relative_to(root).as_posix())
        )


def organize(directory: Union[str, Path], dry_run: bool = False) -> OrganizeStats:
    return FileOrganizer(directory, dry_run=dry_run).organize()

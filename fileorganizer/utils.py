import math
from pathlib import Path

from .errors import DirectoryAccessError


def ensure_directory(path_str: str) -> Path:
    """Resolve a user-supplied folder path; raise DirectoryAccessError unless it is a directory."""
    p = Path(path_str).expanduser().resolve()
    if not p.exists():
        raise DirectoryAccessError(f"Directory does not exist: {p}")
    if not p.is_dir():
        raise DirectoryAccessError(f"Path is not a directory: {p}")
    return p


def unique_path(dest: Path) -> Path:
    """First free destination inside a category folder: name.ext, name_1.ext, name_2.ext, ..."""
    if not dest.exists():
        return dest

    stem = dest.stem
    suffix = dest.suffix
    parent = dest.parent
    i = 1
    while True:
        candidate = parent / f"{stem}_{i}{suffix}"
        if not candidate.exists():
            return candidate
        i += 1


def format_bytes(size: int) -> str:
    if size == 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    i = min(int(math.floor(math.log(size, 1024))), len(units) - 1)
    value = round(size / 1024 ** i, 2)
    return f"{value:g} {units[i]}"

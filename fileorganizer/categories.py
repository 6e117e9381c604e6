# Built-in taxonomy. Order matters: the first category listing an extension wins,
# so xls/xlsx/ods land in documents and ppt/pptx/odp too.
from typing import FrozenSet, Tuple

from .models import Category

CATEGORY_EXTENSIONS: Tuple[Tuple[Category, FrozenSet[str]], ...] = (
    (Category.IMAGES, frozenset({
        "jpg", "jpeg", "png", "gif", "bmp", "svg", "webp", "ico",
    })),
    (Category.DOCUMENTS, frozenset({
        "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx",
        "txt", "rtf", "odt", "ods", "odp",
    })),
    (Category.VIDEOS, frozenset({
        "mp4", "avi", "mov", "wmv", "flv", "webm", "mkv", "m4v",
    })),
    (Category.AUDIO, frozenset({
        "mp3", "wav", "flac", "aac", "ogg", "wma", "m4a",
    })),
    (Category.ARCHIVES, frozenset({
        "zip", "rar", "7z", "tar", "gz", "bz2", "xz",
    })),
    (Category.CODE, frozenset({
        "js", "ts", "html", "css", "py", "java", "cpp", "c",
        "json", "xml", "yaml", "yml", "m", "mlx",
    })),
    (Category.EXECUTABLES, frozenset({
        "exe", "msi", "dmg", "pkg", "deb", "rpm", "app",
    })),
    (Category.SPREADSHEETS, frozenset({"csv", "xls", "xlsx", "ods"})),
    (Category.PRESENTATIONS, frozenset({"ppt", "pptx", "odp"})),
    (Category.FONTS, frozenset({"ttf", "otf", "woff", "woff2"})),
)
DEFAULT_CATEGORY = Category.OTHERS

from .categories import CATEGORY_EXTENSIONS, DEFAULT_CATEGORY
from .models import Category


def file_extension(file_name: str) -> str:
    """Lowercased text after the last dot, or "" when there is none."""
    _, dot, ext = file_name.rpartition(".")
    return ext.lower() if dot else ""


def classify(file_name: str) -> Category:
    ext = file_extension(file_name)
    if ext == "":
        return DEFAULT_CATEGORY
    for category, extensions in CATEGORY_EXTENSIONS:
        if ext in extensions:
            return category
    return DEFAULT_CATEGORY

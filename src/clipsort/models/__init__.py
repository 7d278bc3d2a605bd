from clipsort.models.category import Category, normalize_name
from clipsort.models.clipboarditem import ClipboardItem

__all__ = [
    'Category',
    'ClipboardItem',
    'normalize_name',
]

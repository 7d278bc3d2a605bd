"""
Record layout for the key-value store.

clipboardHistory: [
    {"id": "i_01H...", "timestamp": 1704103200000, "content": "...",
     "category": {"id": "c_01H...", "name": "Work"} | null},
    ...
]

categories: [
    {"id": "c_01H...", "name": "Work"},
    ...
]

Both records are read and written whole. For display and startup loading a
value that fails validation is treated as if it were absent. Mutations read
with `require_items` / `require_categories`, which raise
`MalformedRecordError` instead, so a record that cannot be parsed is never
replaced by a rewrite.

Unparseable JSON under a key is handled the same way: `RedisStore` raises
`MalformedRecordError`, which reads treat as absent and mutations refuse.
"""

import logging
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from clipsort.database.store import MalformedRecordError
from clipsort.models import Category, ClipboardItem

logger = logging.getLogger(__name__)

CLIPBOARD_HISTORY = "clipboardHistory"
CATEGORIES = "categories"

_items_adapter = TypeAdapter(List[ClipboardItem])
_categories_adapter = TypeAdapter(List[Category])


def parse_items(raw: Any) -> Optional[List[ClipboardItem]]:
    if raw is None:
        return None
    try:
        return _items_adapter.validate_python(raw)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed {CLIPBOARD_HISTORY} record: {e.error_count()} errors")
        return None


def parse_categories(raw: Any) -> Optional[List[Category]]:
    if raw is None:
        return None
    try:
        return _categories_adapter.validate_python(raw)
    except ValidationError as e:
        logger.warning(f"Ignoring malformed {CATEGORIES} record: {e.error_count()} errors")
        return None


def dump_items(items: List[ClipboardItem]) -> List[dict]:
    return _items_adapter.dump_python(items, mode="json")


def dump_categories(categories: List[Category]) -> List[dict]:
    return _categories_adapter.dump_python(categories, mode="json")


def require_items(raw: Any) -> List[ClipboardItem]:
    """Absent means empty; present but invalid raises MalformedRecordError."""
    if raw is None:
        return []
    try:
        return _items_adapter.validate_python(raw)
    except ValidationError as e:
        raise MalformedRecordError(
            f"{CLIPBOARD_HISTORY} record is malformed ({e.error_count()} errors); refusing to rewrite it") from e


def require_categories(raw: Any) -> List[Category]:
    if raw is None:
        return []
    try:
        return _categories_adapter.validate_python(raw)
    except ValidationError as e:
        raise MalformedRecordError(
            f"{CATEGORIES} record is malformed ({e.error_count()} errors); refusing to rewrite it") from e

"""
Storage package for ClipSort.

Provides the key-value store adapters the history layer persists through.
"""

from clipsort.database.store import KeyValueStore, MalformedRecordError, StoreError
from clipsort.database.memory_store import MemoryStore
from clipsort.database.redis_store import RedisStore
from clipsort.database.records import (
    CATEGORIES,
    CLIPBOARD_HISTORY,
    dump_categories,
    dump_items,
    parse_categories,
    parse_items,
    require_categories,
    require_items,
)

__all__ = [
    'KeyValueStore',
    'StoreError',
    'MalformedRecordError',
    'MemoryStore',
    'RedisStore',
    'CATEGORIES',
    'CLIPBOARD_HISTORY',
    'dump_categories',
    'dump_items',
    'parse_categories',
    'parse_items',
    'require_categories',
    'require_items',
]

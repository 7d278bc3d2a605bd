"""Service layer for ClipSort."""

from clipsort.services.category_registry import CategoryRegistry
from clipsort.services.config import StoreConfig
from clipsort.services.grouping import (
    GroupedViews,
    group_items_by_category,
    group_items_by_date,
)
from clipsort.services.history_service import HistoryService
from clipsort.services.item_store import ClipboardItemStore
from clipsort.services.state import HistoryState
from clipsort.services.sync_loader import SyncLoader

__all__ = [
    "CategoryRegistry",
    "ClipboardItemStore",
    "GroupedViews",
    "HistoryService",
    "HistoryState",
    "StoreConfig",
    "SyncLoader",
    "group_items_by_category",
    "group_items_by_date",
]

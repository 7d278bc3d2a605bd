import logging
import time
from typing import List, Optional

from clipsort.database import (
    CLIPBOARD_HISTORY,
    KeyValueStore,
    StoreError,
    dump_items,
    require_items,
)
from clipsort.models import ClipboardItem
from clipsort.services.category_registry import CategoryRegistry
from clipsort.services.state import HistoryState
from clipsort.utils.ids import new_item_id

logger = logging.getLogger(__name__)


class ClipboardItemStore:

    def __init__(
        self,
        store: KeyValueStore,
        state: HistoryState,
        registry: CategoryRegistry,
    ) -> None:
        self.store = store
        self.state = state
        self.registry = registry

    async def _read(self) -> List[ClipboardItem]:
        result = await self.store.get([CLIPBOARD_HISTORY])
        return require_items(result.get(CLIPBOARD_HISTORY))

    async def _write(self, items: List[ClipboardItem]) -> None:
        await self.store.set({CLIPBOARD_HISTORY: dump_items(items)})
        self.state.set_items(items)

    async def hydrate(self) -> List[ClipboardItem]:
        try:
            return await self._read()
        except StoreError as e:
            logger.error(f"Failed to hydrate clipboard history: {e}")
            return []

    async def assign_category(self, item_id: str, category_name: str) -> Optional[List[ClipboardItem]]:
        category = await self.registry.ensure_category(category_name)
        if category is None:
            logger.error(f"Could not resolve category {category_name!r}; item {item_id} left as is")
            return None

        try:
            items = await self._read()
            updated = [item.with_category(category) if item.id == item_id else item
                       for item in items]
            await self._write(updated)
        except StoreError as e:
            logger.error(f"Error assigning {item_id} to {category.name!r}: {e}")
            return None

        logger.info(f"Assigned {item_id} to category {category.name!r}")
        return updated

    async def append_item(self, content: str, timestamp: Optional[int] = None) -> Optional[ClipboardItem]:
        """Record a new uncategorized entry at the end of the history."""
        item = ClipboardItem(
            id=new_item_id(),
            timestamp=timestamp if timestamp is not None else int(time.time() * 1000),
            content=content,
        )
        try:
            items = await self._read()
            await self._write([*items, item])
        except StoreError as e:
            logger.error(f"Error saving clipboard entry: {e}")
            return None
        return item

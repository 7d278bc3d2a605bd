from __future__ import annotations

from datetime import tzinfo
from typing import Dict, List, Optional

from clipsort.database import KeyValueStore, MemoryStore
from clipsort.models import Category, ClipboardItem
from clipsort.services.category_registry import CategoryRegistry, Notifier
from clipsort.services.config import StoreConfig
from clipsort.services.grouping import Grouped, GroupedViews
from clipsort.services.item_store import ClipboardItemStore
from clipsort.services.state import HistoryState
from clipsort.services.sync_loader import SyncLoader


class HistoryService:
    """Everything a front end needs: grouped views plus the two mutations.

    Nothing is pushed to callers; re-read the views after an awaited
    operation completes.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        config: Optional[StoreConfig] = None,
        *,
        notify: Optional[Notifier] = None,
        tz: Optional[tzinfo] = None,
    ) -> None:
        self.config = config or StoreConfig.from_env()
        self.store = store or self.config.create_store()
        self.state = HistoryState()
        self.registry = CategoryRegistry(
            self.store,
            self.state,
            notify=notify,
            serialize_writes=self.config.serialize_category_writes,
        )
        self.items_store = ClipboardItemStore(self.store, self.state, self.registry)
        self.loader = SyncLoader(self.store)
        self.views = GroupedViews(tz=tz)

    @classmethod
    def in_memory(cls, initial: Optional[Dict] = None, *,
                  config: Optional[StoreConfig] = None, **kwargs) -> "HistoryService":
        return cls(store=MemoryStore(initial), config=config or StoreConfig(), **kwargs)

    @property
    def items(self) -> List[ClipboardItem]:
        return self.state.items

    @property
    def categories(self) -> List[Category]:
        return self.state.categories

    async def load(self) -> Dict[str, bool]:
        return await self.loader.load(self.state)

    def by_date(self) -> Grouped:
        return self.views.by_date(self.state.items)

    def by_category(self) -> Grouped:
        return self.views.by_category(self.state.items, self.state.categories)

    async def create_category(self, name: str) -> Optional[Category]:
        return await self.registry.create_category(name)

    async def ensure_category(self, name: str) -> Optional[Category]:
        return await self.registry.ensure_category(name)

    async def assign_category(self, item_id: str, category_name: str) -> Optional[List[ClipboardItem]]:
        return await self.items_store.assign_category(item_id, category_name)

    async def add_item(self, content: str, timestamp: Optional[int] = None) -> Optional[ClipboardItem]:
        return await self.items_store.append_item(content, timestamp)

    async def close(self) -> None:
        await self.store.close()

    async def __aenter__(self) -> "HistoryService":
        await self.load()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

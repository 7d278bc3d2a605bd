import asyncio
import logging
from typing import Any, Callable, Dict, Optional

from clipsort.database import (
    CATEGORIES,
    CLIPBOARD_HISTORY,
    KeyValueStore,
    StoreError,
    parse_categories,
    parse_items,
)
from clipsort.services.state import HistoryState

logger = logging.getLogger(__name__)


class SyncLoader:
    """Hydrates a HistoryState from the store at startup.

    Items and categories are fetched by two independent reads. Whatever
    arrives valid replaces the in-memory collection; anything absent,
    malformed or failed leaves the previous value in place.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    async def _fetch(self, record: str, parse: Callable[[Any], Optional[list]]) -> Optional[list]:
        try:
            result = await self.store.get([record])
        except StoreError as e:
            logger.error(f"Failed to load {record}: {e}")
            return None
        return parse(result.get(record))

    async def load(self, state: HistoryState) -> Dict[str, bool]:
        applied = {CLIPBOARD_HISTORY: False, CATEGORIES: False}

        async def load_items() -> None:
            items = await self._fetch(CLIPBOARD_HISTORY, parse_items)
            if items is not None:
                state.set_items(items)
                applied[CLIPBOARD_HISTORY] = True
                logger.info(f"Loaded {len(items)} clipboard items")

        async def load_categories() -> None:
            categories = await self._fetch(CATEGORIES, parse_categories)
            if categories is not None:
                state.set_categories(categories)
                applied[CATEGORIES] = True
                logger.info(f"Loaded {len(categories)} categories")

        await asyncio.gather(load_items(), load_categories())
        return applied

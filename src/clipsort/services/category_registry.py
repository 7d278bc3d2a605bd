import asyncio
import contextlib
import logging
from typing import Callable, List, Optional

from clipsort.database import (
    CATEGORIES,
    KeyValueStore,
    StoreError,
    dump_categories,
    require_categories,
)
from clipsort.models import Category, normalize_name
from clipsort.services.state import HistoryState

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


def _log_notice(message: str) -> None:
    logger.warning(message)


class CategoryRegistry:
    """Owns the persisted category collection.

    Two creation paths share the uniqueness check but differ on duplicates:
    `ensure_category` silently reuses the existing entry, `create_category`
    refuses and notifies the user.

    Each call reads the collection, checks it and writes it back with no
    guard in between, so overlapping calls for the same new name can both
    append. Pass ``serialize_writes=True`` to run those steps under a lock.
    """

    def __init__(
        self,
        store: KeyValueStore,
        state: HistoryState,
        notify: Optional[Notifier] = None,
        serialize_writes: bool = False,
    ) -> None:
        self.store = store
        self.state = state
        self.notify = notify or _log_notice
        self._lock: Optional[asyncio.Lock] = asyncio.Lock() if serialize_writes else None

    def _guard(self):
        return self._lock if self._lock is not None else contextlib.nullcontext()

    async def _load(self) -> List[Category]:
        result = await self.store.get([CATEGORIES])
        return require_categories(result.get(CATEGORIES))

    async def _append(self, categories: List[Category], display_name: str) -> Category:
        category = Category(name=display_name)
        updated = [*categories, category]
        await self.store.set({CATEGORIES: dump_categories(updated)})
        self.state.set_categories(updated)
        logger.info(f"Created category {category.name!r} ({category.id})")
        return category

    async def ensure_category(self, name: str) -> Optional[Category]:
        display_name = name.strip()
        if not display_name:
            logger.error("Refusing to ensure a category with an empty name")
            return None

        key = normalize_name(name)
        try:
            async with self._guard():
                categories = await self._load()
                existing = next((c for c in categories if c.key == key), None)
                if existing is not None:
                    return existing
                return await self._append(categories, display_name)
        except StoreError as e:
            logger.error(f"Error ensuring category {display_name!r}: {e}")
            return None

    async def create_category(self, name: str) -> Optional[Category]:
        display_name = name.strip()
        if not display_name:
            self.notify("Category name cannot be empty.")
            return None

        key = normalize_name(name)
        try:
            async with self._guard():
                categories = await self._load()
                if any(c.key == key for c in categories):
                    self.notify(f'Category "{name}" already exists.')
                    return None
                return await self._append(categories, display_name)
        except StoreError as e:
            logger.error(f"Error creating category {display_name!r}: {e}")
            return None

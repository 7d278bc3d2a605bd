"""Shared store doubles for ClipSort tests."""

import asyncio
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Set

import pytest

from clipsort.database import MemoryStore, StoreError


def ms(year, month, day, hour=0, minute=0, tz=None) -> int:
    return int(datetime(year, month, day, hour, minute, tzinfo=tz).timestamp() * 1000)


class FlakyStore(MemoryStore):
    """MemoryStore that rejects reads or writes for chosen records."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None,
                 fail_get: Iterable[str] = (), fail_set: Iterable[str] = ()) -> None:
        super().__init__(initial)
        self.fail_get: Set[str] = set(fail_get)
        self.fail_set: Set[str] = set(fail_set)
        self.writes = []

    async def get(self, keys):
        keys = list(keys)
        if self.fail_get.intersection(keys):
            raise StoreError(f"read rejected: {keys}")
        return await super().get(keys)

    async def set(self, values):
        if self.fail_set.intersection(values):
            raise StoreError(f"write rejected: {sorted(values)}")
        self.writes.append(sorted(values))
        await super().set(values)


class YieldingStore(FlakyStore):
    """Gives control back to the event loop at every store call."""

    async def get(self, keys):
        await asyncio.sleep(0)
        return await super().get(keys)

    async def set(self, values):
        await asyncio.sleep(0)
        await super().set(values)


@pytest.fixture
def run():
    return asyncio.run

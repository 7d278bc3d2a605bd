import copy
import logging
from typing import Any, Dict, Iterable, Optional

logger = logging.getLogger(__name__)


class MemoryStore:
    """Process-local store. Values are deep-copied in and out so callers
    never share structure with what is stored."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(initial or {})

    async def get(self, keys: Iterable[str]) -> Dict[str, Any]:
        return {key: copy.deepcopy(self._data[key]) for key in keys if key in self._data}

    async def set(self, values: Dict[str, Any]) -> None:
        for key, value in values.items():
            self._data[key] = copy.deepcopy(value)
        logger.debug(f"MemoryStore wrote {sorted(values)}")

    async def close(self) -> None:
        pass

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

from typing import Any, Dict, Iterable, Protocol, runtime_checkable


class StoreError(Exception):
    """A read or write against the key-value store was rejected."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Asynchronous get/set service holding whole records by key.

    `get` returns only the keys that are present. Neither call is atomic
    across keys.
    """

    async def get(self, keys: Iterable[str]) -> Dict[str, Any]:
        ...

    async def set(self, values: Dict[str, Any]) -> None:
        ...

    async def close(self) -> None:
        ...


class MalformedRecordError(StoreError):
    """A record is present but cannot be parsed; it must not be overwritten."""

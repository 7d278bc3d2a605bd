import json
import logging
from typing import Any, Dict, Iterable, List, Optional

import redis
import redis.asyncio as aioredis

from clipsort.database.store import MalformedRecordError, StoreError

logger = logging.getLogger(__name__)


class RedisStore:
    """Each record is one Redis string key holding JSON.

    Keys are namespaced as ``<prefix>:<record>``. Multi-key writes go out in
    a single non-transactional pipeline.
    """

    def __init__(self, host: str = 'localhost', port: int = 6379, db: int = 0,
                 password: Optional[str] = None, prefix: str = 'clipsort',
                 ssl: bool = False, client: Optional[aioredis.Redis] = None):
        self.prefix = prefix
        self.ssl = ssl
        self.client = client or aioredis.Redis(
            host=host,
            port=port,
            db=db,
            password=password,
            ssl=ssl,
            decode_responses=True
        )

    def key_for(self, record: str) -> str:
        return f"{self.prefix}:{record}"

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except redis.RedisError as e:
            raise StoreError(f"Redis ping failed: {e}") from e

    async def get(self, keys: Iterable[str]) -> Dict[str, Any]:
        records: List[str] = list(keys)
        if not records:
            return {}

        try:
            raw_values = await self.client.mget([self.key_for(r) for r in records])
        except redis.RedisError as e:
            raise StoreError(f"Redis read failed for {records}: {e}") from e

        result: Dict[str, Any] = {}
        for record, raw in zip(records, raw_values):
            if raw is None:
                continue
            try:
                result[record] = json.loads(raw)
            except json.JSONDecodeError as e:
                raise MalformedRecordError(f"Corrupt JSON under {self.key_for(record)}: {e}") from e
        return result

    async def set(self, values: Dict[str, Any]) -> None:
        try:
            encoded = {self.key_for(record): json.dumps(value)
                       for record, value in values.items()}
        except (TypeError, ValueError) as e:
            raise StoreError(f"Could not encode {sorted(values)}: {e}") from e

        try:
            async with self.client.pipeline(transaction=False) as pipe:
                for key, payload in encoded.items():
                    pipe.set(key, payload)
                await pipe.execute()
        except redis.RedisError as e:
            raise StoreError(f"Redis write failed for {sorted(values)}: {e}") from e

    async def close(self) -> None:
        await self.client.aclose()

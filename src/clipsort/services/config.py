from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from clipsort.database import RedisStore


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_env_file(env_path: Optional[Path] = None) -> None:
    path = env_path or Path.cwd() / ".env"
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


@dataclass(frozen=True)
class StoreConfig:
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None
    prefix: str = "clipsort"
    serialize_category_writes: bool = False
    ssl: bool = False

    @classmethod
    def from_env(cls, *, env_path: Optional[Path] = None) -> "StoreConfig":
        _load_env_file(env_path)

        prefix = os.getenv("CLIPSORT_KEY_PREFIX", cls.prefix)
        serialize = _to_bool(os.getenv("CLIPSORT_SERIALIZE_CATEGORY_WRITES"))

        uri = os.getenv("CLIPSORT_REDIS_URI")
        if uri:
            return cls.from_uri(uri, prefix=prefix, serialize_category_writes=serialize)

        host = os.getenv("CLIPSORT_REDIS_HOST", cls.host)
        port_raw = os.getenv("CLIPSORT_REDIS_PORT")
        db_raw = os.getenv("CLIPSORT_REDIS_DB")
        password = os.getenv("CLIPSORT_REDIS_PASSWORD") or None
        use_ssl = _to_bool(os.getenv("CLIPSORT_REDIS_SSL"))

        port = int(port_raw) if port_raw else cls.port
        db = int(db_raw) if db_raw else cls.db

        return cls(host=host, port=port, db=db, password=password,
                   prefix=prefix, serialize_category_writes=serialize, ssl=use_ssl)

    @classmethod
    def from_uri(cls, uri: str, *, prefix: str = "clipsort",
                 serialize_category_writes: bool = False) -> "StoreConfig":
        parsed = urlparse(uri)
        if parsed.scheme not in {"redis", "rediss"}:
            raise ValueError(
                f"Unsupported Redis URI scheme: {parsed.scheme!r}")

        host = parsed.hostname or cls.host
        port = parsed.port or cls.port
        password = parsed.password or None
        db_fragment = parsed.path.lstrip("/")
        db = int(db_fragment) if db_fragment else cls.db

        return cls(host=host, port=port, db=db, password=password,
                   prefix=prefix, serialize_category_writes=serialize_category_writes,
                   ssl=parsed.scheme == "rediss")

    def create_store(self) -> RedisStore:
        return RedisStore(
            host=self.host,
            port=self.port,
            db=self.db,
            password=self.password,
            prefix=self.prefix,
            ssl=self.ssl,
        )

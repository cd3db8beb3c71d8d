"""Key-value persistence gateway with a local JSON file fallback."""

from __future__ import annotations

import json
import os
import re
from typing import Any, Protocol

from loguru import logger

from sponsorscout.config import Settings
from sponsorscout.utils.file_storage import delete_file, file_exists, load_file, save_file

# Logical keys
JOBS_KEY = "data:jobs"
TIER_KEY_PREFIX = "data:tier:"

# Local file names for the logical keys, matching the files the tier builder writes
_LOCAL_FILENAMES: dict[str, str] = {
    JOBS_KEY: "jobs.json",
    f"{TIER_KEY_PREFIX}top": "top-tier.json",
    f"{TIER_KEY_PREFIX}middle": "middle-tier.json",
    f"{TIER_KEY_PREFIX}lower": "lower-tier.json",
    f"{TIER_KEY_PREFIX}lowest": "lowest-tier.json",
}

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def tier_key(tier: str) -> str:
    """Logical store key for a tier roster."""
    return f"{TIER_KEY_PREFIX}{tier}"


class StorageError(Exception):
    """Raised when the backing store cannot be read or written."""


class KeyValueStore(Protocol):
    """Named JSON blob storage."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> bool: ...

    def delete(self, key: str) -> bool: ...

    def list_keys_by_prefix(self, prefix: str) -> list[str]: ...


class RedisStore:
    """
    Upstash Redis (REST) backend.

    Values are stored as JSON strings; every ``set`` overwrites the full value.
    """

    def __init__(self, url: str, token: str, client: Any | None = None) -> None:
        """
        Initialize the Redis store.

        Args:
            url: Upstash REST URL
            token: Upstash REST token
            client: Pre-built client (used by tests); created from url/token if omitted
        """
        if client is None:
            from upstash_redis import Redis

            client = Redis(url=url, token=token)
        self.client = client

    def get(self, key: str) -> Any | None:
        try:
            raw = self.client.get(key)
        except Exception as e:
            logger.error("Redis read failed for {}: {}", key, e)
            raise StorageError(f"Failed to read {key} from Redis: {e}") from e
        if raw is None:
            return None
        if isinstance(raw, (bytes, str)):
            try:
                return json.loads(raw)
            except json.JSONDecodeError as e:
                raise StorageError(f"Stored value for {key} is not valid JSON: {e}") from e
        return raw

    def set(self, key: str, value: Any) -> bool:
        try:
            self.client.set(key, json.dumps(value))
        except Exception as e:
            logger.error("Redis write failed for {}: {}", key, e)
            raise StorageError(f"Failed to save {key} to Redis: {e}") from e
        return True

    def delete(self, key: str) -> bool:
        try:
            return bool(self.client.delete(key))
        except Exception as e:
            raise StorageError(f"Failed to delete {key} from Redis: {e}") from e

    def list_keys_by_prefix(self, prefix: str) -> list[str]:
        try:
            return sorted(self.client.keys(f"{prefix}*"))
        except Exception as e:
            raise StorageError(f"Failed to list keys with prefix {prefix}: {e}") from e


class LocalFileStore:
    """
    One JSON file per logical key under a directory.

    Used for local development when Redis is not configured. A missing file reads
    as ``None`` (no data available).
    """

    def __init__(self, root: str) -> None:
        self.root = root

    def path_for(self, key: str) -> str:
        """Absolute file path that backs ``key``."""
        filename = _LOCAL_FILENAMES.get(key)
        if filename is None:
            filename = _UNSAFE_FILENAME_CHARS.sub("_", key.replace(":", "__")) + ".json"
        return os.path.join(self.root, filename)

    def key_for(self, filename: str) -> str:
        """Inverse of ``path_for`` for a file name in the store directory."""
        for key, known in _LOCAL_FILENAMES.items():
            if known == filename:
                return key
        return filename.removesuffix(".json").replace("__", ":")

    def get(self, key: str) -> Any | None:
        path = self.path_for(key)
        if not file_exists(path):
            return None
        try:
            return json.loads(load_file(path))
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def set(self, key: str, value: Any) -> bool:
        path = self.path_for(key)
        try:
            save_file(json.dumps(value, indent=2), path)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
        return True

    def delete(self, key: str) -> bool:
        return delete_file(self.path_for(key))

    def list_keys_by_prefix(self, prefix: str) -> list[str]:
        if not os.path.isdir(self.root):
            return []
        keys = [
            self.key_for(name)
            for name in os.listdir(self.root)
            if name.endswith(".json") and not name.startswith(".tmp-")
        ]
        return sorted(k for k in keys if k.startswith(prefix))


def create_store(settings: Settings) -> KeyValueStore:
    """
    Pick the storage backend once, at startup.

    Args:
        settings: Application settings

    Returns:
        RedisStore when Redis credentials are configured, LocalFileStore otherwise
    """
    if settings.redis_configured:
        logger.info("Using Redis store at {}", settings.kv_rest_api_url)
        return RedisStore(settings.kv_rest_api_url, settings.kv_rest_api_token)
    logger.info("Redis not configured, using local JSON files in {}", settings.data_root)
    return LocalFileStore(settings.data_root)

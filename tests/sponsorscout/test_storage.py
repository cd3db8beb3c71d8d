"""Tests for the key-value storage backends."""

import json
from unittest.mock import MagicMock, patch

import pytest

from sponsorscout.config import Settings
from sponsorscout.services.storage import (
    JOBS_KEY,
    LocalFileStore,
    RedisStore,
    StorageError,
    create_store,
    tier_key,
)


@pytest.fixture
def store(tmp_path):
    """Local store rooted in a temporary directory."""
    return LocalFileStore(str(tmp_path))


class TestLocalFileStore:
    """Tests for the local JSON file backend."""

    def test_get_missing_returns_none(self, store):
        """Test that an absent key reads as no data."""
        assert store.get(JOBS_KEY) is None

    def test_set_and_get(self, store):
        """Test a write followed by a read."""
        assert store.set(JOBS_KEY, {"totalJobs": 1, "jobs": []}) is True
        assert store.get(JOBS_KEY) == {"totalJobs": 1, "jobs": []}

    def test_known_keys_use_tier_file_names(self, store, tmp_path):
        """Test that logical keys map to the tier builder's file names."""
        store.set(tier_key("top"), {"count": 0})
        store.set(JOBS_KEY, {})
        assert (tmp_path / "top-tier.json").exists()
        assert (tmp_path / "jobs.json").exists()

    def test_invalid_json_raises(self, store, tmp_path):
        """Test that a corrupt file is a storage error."""
        (tmp_path / "jobs.json").write_text("{broken")
        with pytest.raises(StorageError):
            store.get(JOBS_KEY)

    def test_delete(self, store):
        """Test deleting present and absent keys."""
        store.set(JOBS_KEY, {})
        assert store.delete(JOBS_KEY) is True
        assert store.get(JOBS_KEY) is None
        assert store.delete(JOBS_KEY) is False

    def test_list_keys_by_prefix(self, store):
        """Test listing keys, including ones without a fixed file name."""
        store.set("company-links:ACME", ["https://acme.test/careers"])
        store.set("company-links:GLOBEX", [])
        store.set(JOBS_KEY, {})
        assert store.list_keys_by_prefix("company-links:") == [
            "company-links:ACME",
            "company-links:GLOBEX",
        ]
        assert store.list_keys_by_prefix("data:") == [JOBS_KEY]

    def test_list_keys_missing_root(self, tmp_path):
        """Test listing keys before anything was written."""
        assert LocalFileStore(str(tmp_path / "absent")).list_keys_by_prefix("") == []


class TestRedisStore:
    """Tests for the Upstash Redis backend."""

    def test_get_decodes_json(self):
        """Test that stored JSON strings are decoded."""
        client = MagicMock()
        client.get.return_value = json.dumps({"count": 2})
        store = RedisStore("https://example.upstash.io", "token", client=client)
        assert store.get(tier_key("top")) == {"count": 2}
        client.get.assert_called_once_with("data:tier:top")

    def test_get_missing_returns_none(self):
        """Test that a missing key reads as no data."""
        client = MagicMock()
        client.get.return_value = None
        assert RedisStore("u", "t", client=client).get(JOBS_KEY) is None

    def test_set_encodes_json(self):
        """Test that values are written as JSON strings."""
        client = MagicMock()
        store = RedisStore("u", "t", client=client)
        assert store.set(JOBS_KEY, {"jobs": []}) is True
        client.set.assert_called_once_with(JOBS_KEY, '{"jobs": []}')

    def test_read_failure_raises_storage_error(self):
        """Test that client errors are wrapped."""
        client = MagicMock()
        client.get.side_effect = ConnectionError("unreachable")
        with pytest.raises(StorageError, match="unreachable"):
            RedisStore("u", "t", client=client).get(JOBS_KEY)

    def test_write_failure_raises_storage_error(self):
        """Test that write errors are wrapped."""
        client = MagicMock()
        client.set.side_effect = ConnectionError("unreachable")
        with pytest.raises(StorageError):
            RedisStore("u", "t", client=client).set(JOBS_KEY, {})

    def test_delete_and_list(self):
        """Test delete results and prefix listing."""
        client = MagicMock()
        client.delete.return_value = 1
        client.keys.return_value = ["company-links:B", "company-links:A"]
        store = RedisStore("u", "t", client=client)
        assert store.delete("company-links:A") is True
        assert store.list_keys_by_prefix("company-links:") == ["company-links:A", "company-links:B"]
        client.keys.assert_called_once_with("company-links:*")

    def test_client_built_from_credentials(self):
        """Test that the Upstash client is created from url and token."""
        with patch("upstash_redis.Redis") as redis_class:
            store = RedisStore("https://example.upstash.io", "token")
        redis_class.assert_called_once_with(url="https://example.upstash.io", token="token")
        assert store.client is redis_class.return_value


class TestCreateStore:
    """Tests for backend selection."""

    def test_local_when_redis_unconfigured(self, tmp_path):
        """Test the local fallback."""
        settings = Settings(_env_file=None, data_root=str(tmp_path), kv_rest_api_url=None, kv_rest_api_token=None)
        store = create_store(settings)
        assert isinstance(store, LocalFileStore)
        assert store.root == str(tmp_path.resolve())

    def test_redis_when_configured(self, tmp_path):
        """Test that credentials select Redis."""
        settings = Settings(
            _env_file=None,
            data_root=str(tmp_path),
            kv_rest_api_url="https://example.upstash.io",
            kv_rest_api_token="token",
        )
        with patch("upstash_redis.Redis"):
            assert isinstance(create_store(settings), RedisStore)

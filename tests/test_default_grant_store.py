"""
Tests for the generic typed grant store.
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from grantstore.common.utils import hash_string
from grantstore.grants import DefaultGrantStore, HandleGenerationService, JsonGrantSerializer
from grantstore.store import (
    ConstructionError,
    InMemoryPersistedGrantStore,
    PersistedGrant,
    PersistedGrantFilter,
)


T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class SequentialHandles(HandleGenerationService):
    """Handle generator returning predictable handles"""

    def __init__(self, prefix="H"):
        self.prefix = prefix
        self.count = 0

    async def generate(self) -> str:
        self.count += 1
        return f"{self.prefix}{self.count}"


@pytest.fixture
def backend():
    return InMemoryPersistedGrantStore()


@pytest.fixture
def grants(backend):
    """Create a typed store for plain dictionary payloads"""
    return DefaultGrantStore("test_grant", dict, backend, handle_generation_service=SequentialHandles())


class TestConstruction:
    """Test construction checks"""

    @pytest.mark.parametrize("grant_type", [None, "", "   "])
    def test_missing_grant_type(self, backend, grant_type):
        """Test a grant type is required up front"""
        with pytest.raises(ConstructionError):
            DefaultGrantStore(grant_type, dict, backend)

    def test_construction_error_is_value_error(self, backend):
        """Test callers can catch construction failures as ValueError"""
        with pytest.raises(ValueError):
            DefaultGrantStore("", dict, backend)

    def test_defaults(self, backend):
        """Test default collaborators are provided"""
        store = DefaultGrantStore("test_grant", dict, backend)

        assert isinstance(store.serializer, JsonGrantSerializer)
        assert store.handle_generation_service is not None


class TestKeyDerivation:
    """Test storage key hashing"""

    def test_key_is_hash_of_handle_and_type(self, grants):
        """Test the key is the base64 SHA-256 of handle, separator and type"""
        key = grants.get_hashed_key("abc")

        assert key == hash_string("abc:test_grant")
        assert key != "abc"
        assert len(key) == 44

    def test_key_is_deterministic(self, grants):
        assert grants.get_hashed_key("abc") == grants.get_hashed_key("abc")

    def test_grant_types_hash_differently(self, backend, grants):
        """Test the same handle yields different keys for different grant types"""
        other = DefaultGrantStore("other_grant", dict, backend)

        assert grants.get_hashed_key("abc") != other.get_hashed_key("abc")


class TestItemLifecycle:
    """Test create, store, get and remove"""

    @pytest.mark.asyncio
    async def test_create_and_get_round_trip(self, grants, backend):
        """Test created items can be read back by handle"""
        handle = await grants.create_item(
            {"scope": "api1"}, "app1", "alice", "s1", "desc", T0, 3600
        )

        assert handle == "H1"
        assert await grants.get_item(handle) == {"scope": "api1"}

        record = await backend.get(grants.get_hashed_key(handle))
        assert record.type == "test_grant"
        assert record.client_id == "app1"
        assert record.subject_id == "alice"
        assert record.session_id == "s1"
        assert record.description == "desc"
        assert record.creation_time == T0
        assert record.expiration == T0 + timedelta(seconds=3600)
        assert record.consumed_time is None
        assert "api1" in record.data

    @pytest.mark.asyncio
    async def test_raw_handle_never_stored(self, grants, backend):
        """Test the backend only ever sees the hashed key"""
        handle = await grants.create_item({}, "app1", "alice", None, None, T0, 60)

        assert await backend.get(handle) is None
        assert all(g.key != handle for g in await backend.get_all(PersistedGrantFilter()))

    @pytest.mark.asyncio
    async def test_store_item_upserts(self, grants, backend):
        """Test storing twice under one handle keeps only the latest payload"""
        await grants.store_item("h", {"v": 1}, "app1", "alice", None, None, T0, None)
        await grants.store_item("h", {"v": 2}, "app1", "alice", None, None, T0, None)

        assert await grants.get_item("h") == {"v": 2}
        assert backend.count() == 1

    @pytest.mark.asyncio
    async def test_store_item_records_consumption(self, grants, backend):
        """Test re-storing with a consumed time marks the grant consumed"""
        expiration = T0 + timedelta(minutes=5)
        await grants.store_item("h", {"v": 1}, "app1", "alice", None, None, T0, expiration)
        await grants.store_item("h", {"v": 1}, "app1", "alice", None, None, T0, expiration,
                                consumed_time=T0 + timedelta(seconds=30))

        record = await backend.get(grants.get_hashed_key("h"))
        assert record.consumed_time == T0 + timedelta(seconds=30)
        assert record.expiration == expiration

    @pytest.mark.asyncio
    async def test_non_expiring_item(self, grants, backend):
        """Test a missing expiration is persisted as None"""
        await grants.store_item("h", {}, None, None, None, None, T0, None)

        record = await backend.get(grants.get_hashed_key("h"))
        assert record.expiration is None
        assert record.client_id is None

    @pytest.mark.asyncio
    async def test_remove_item_is_idempotent(self, grants):
        """Test removing twice does not raise and the item is gone"""
        handle = await grants.create_item({"a": 1}, "app1", "alice", None, None, T0, 60)

        await grants.remove_item(handle)
        await grants.remove_item(handle)

        assert await grants.get_item(handle) is None

    @pytest.mark.asyncio
    async def test_unknown_handle(self, grants, caplog):
        """Test unknown handles yield None and a debug message"""
        caplog.set_level(logging.DEBUG, "grantstore.grants.default")

        assert await grants.get_item("nope") is None
        assert "not found in store" in caplog.text


class TestTypeIsolation:
    """Test grant kinds sharing one backend cannot read each other's records"""

    @pytest.mark.asyncio
    async def test_same_handle_different_types(self, backend):
        first = DefaultGrantStore("type_a", dict, backend)
        second = DefaultGrantStore("type_b", dict, backend)

        await first.store_item("shared", {"owner": "a"}, "app1", "alice", None, None, T0, None)

        assert await first.get_item("shared") == {"owner": "a"}
        assert await second.get_item("shared") is None

    @pytest.mark.asyncio
    async def test_mismatched_type_under_own_key(self, backend, grants, caplog):
        """Test a record of another type under this store's key reads as absent"""
        caplog.set_level(logging.DEBUG, "grantstore.grants.default")
        await backend.store(PersistedGrant(
            key=grants.get_hashed_key("h"),
            type="intruder",
            creation_time=T0,
            data='{"v": 1}',
        ))

        assert await grants.get_item("h") is None
        assert "not found in store" in caplog.text


class TestCorruptPayload:
    """Test unreadable payloads are reported as absent"""

    @pytest.mark.asyncio
    async def test_invalid_json(self, backend, grants, caplog):
        await backend.store(PersistedGrant(
            key=grants.get_hashed_key("h"),
            type="test_grant",
            creation_time=T0,
            data="{not json",
        ))

        assert await grants.get_item("h") is None
        assert any(
            r.levelno == logging.ERROR and "Failed to deserialize" in r.getMessage()
            for r in caplog.records
        )

    @pytest.mark.asyncio
    async def test_payload_of_wrong_shape(self, backend, grants):
        """Test a JSON payload that is not the expected type reads as absent"""
        await backend.store(PersistedGrant(
            key=grants.get_hashed_key("h"),
            type="test_grant",
            creation_time=T0,
            data="[1, 2, 3]",
        ))

        assert await grants.get_item("h") is None

    @pytest.mark.asyncio
    async def test_backend_errors_propagate(self, grants):
        """Test failures other than deserialization reach the caller"""
        class BrokenBackend(InMemoryPersistedGrantStore):
            async def get(self, key):
                raise ConnectionError("backend down")

        broken = DefaultGrantStore("test_grant", dict, BrokenBackend())

        with pytest.raises(ConnectionError):
            await broken.get_item("h")

    @pytest.mark.asyncio
    async def test_serialization_errors_propagate(self, grants):
        """Test payloads that cannot be serialized raise on store"""
        with pytest.raises(TypeError):
            await grants.store_item("h", {"bad": object()}, None, None, None, None, T0, None)


class TestRemoveAll:
    """Test bulk removal scoped to subject, client and grant type"""

    @pytest.mark.asyncio
    async def test_only_matching_type_subject_and_client(self, backend, grants):
        other = DefaultGrantStore("other_grant", dict, backend)

        await grants.store_item("a1", {}, "app1", "alice", None, None, T0, None)
        await grants.store_item("a2", {}, "app1", "alice", None, None, T0, None)
        await grants.store_item("a3", {}, "app2", "alice", None, None, T0, None)
        await grants.store_item("b1", {}, "app1", "bob", None, None, T0, None)
        await other.store_item("a1", {}, "app1", "alice", None, None, T0, None)

        await grants.remove_all("alice", "app1")

        assert await grants.get_item("a1") is None
        assert await grants.get_item("a2") is None
        assert await grants.get_item("a3") == {}
        assert await grants.get_item("b1") == {}
        assert await other.get_item("a1") == {}

"""
Unit tests for InMemoryLicenseRepository.
"""
import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from core.domain.exceptions import DuplicateLicenseKeyError
from core.domain.value_objects import BindStatus, LicenseType
from licenses.domain.license import LicenseRecord
from licenses.infrastructure.repositories.in_memory_license_repository import (
    InMemoryLicenseRepository,
)


@pytest.mark.asyncio
class TestInMemoryLicenseRepository:
    """Tests for the in-memory license store."""

    async def test_lookup(self, license_store):
        record = await license_store.lookup("TALLERPRO-ANUAL-ABCD-EFGH")

        assert record is not None
        assert record.license_type is LicenseType.YEARLY
        assert record.bound is False

    async def test_lookup_missing(self, license_store):
        assert await license_store.lookup("NOPE-0000") is None

    async def test_first_bind(self, license_store):
        result = await license_store.try_bind("TALLERPRO-ANUAL-ABCD-EFGH", "a.example.com")

        assert result.status is BindStatus.BOUND
        assert result.is_bound
        assert result.first_bind is True
        assert result.record.bound_domain == "a.example.com"

        stored = await license_store.lookup("TALLERPRO-ANUAL-ABCD-EFGH")
        assert stored.bound_domain == "a.example.com"

    async def test_rebind_same_domain_is_idempotent(self, license_store):
        first = await license_store.try_bind("TALLERPRO-ANUAL-ABCD-EFGH", "a.example.com")
        second = await license_store.try_bind("TALLERPRO-ANUAL-ABCD-EFGH", "a.example.com")

        assert second.status is BindStatus.BOUND
        assert second.first_bind is False
        assert second.record.bound_at == first.record.bound_at

    async def test_bind_other_domain(self, license_store):
        await license_store.try_bind("TALLERPRO-ANUAL-ABCD-EFGH", "a.example.com")

        result = await license_store.try_bind("TALLERPRO-ANUAL-ABCD-EFGH", "b.example.com")

        assert result.status is BindStatus.ALREADY_BOUND_ELSEWHERE
        assert not result.is_bound
        stored = await license_store.lookup("TALLERPRO-ANUAL-ABCD-EFGH")
        assert stored.bound_domain == "a.example.com"

    async def test_bind_missing_key(self, license_store):
        result = await license_store.try_bind("NOPE-0000", "a.example.com")

        assert result.status is BindStatus.NOT_FOUND
        assert result.record is None

    async def test_add(self):
        store = InMemoryLicenseRepository()
        record = LicenseRecord.create(key="NEW-KEY-0001", license_type=LicenseType.LIFETIME)

        await store.add(record)

        assert await store.lookup("NEW-KEY-0001") == record

    async def test_unknown_keys_leave_no_state(self, license_store):
        """Probing unknown keys does not grow the store."""
        for i in range(50):
            result = await license_store.try_bind(f"UNKNOWN-{i:04d}", "a.example.com")
            assert result.status is BindStatus.NOT_FOUND

        assert set(license_store._locks) == {
            "TALLERPRO-VALIDA-1234-5678",
            "TALLERPRO-ANUAL-ABCD-EFGH",
        }

    async def test_added_key_can_be_bound(self):
        store = InMemoryLicenseRepository()
        await store.add(LicenseRecord.create(key="NEW-KEY-0002", license_type=LicenseType.YEARLY))

        result = await store.try_bind("NEW-KEY-0002", "a.example.com")

        assert result.first_bind is True

    async def test_add_duplicate(self, license_store):
        record = LicenseRecord.create(
            key="TALLERPRO-VALIDA-1234-5678", license_type=LicenseType.YEARLY
        )

        with pytest.raises(DuplicateLicenseKeyError):
            await license_store.add(record)


class TestConcurrentBinding:
    """Racing first binds of one key must produce exactly one winner."""

    def test_single_winner(self):
        store = InMemoryLicenseRepository(
            [LicenseRecord.create(key="RACE-KEY-0001", license_type=LicenseType.YEARLY)]
        )
        domains = [f"site{i}.example.com" for i in range(16)]
        barrier = threading.Barrier(len(domains))

        def attempt(domain):
            barrier.wait()
            return asyncio.run(store.try_bind("RACE-KEY-0001", domain))

        with ThreadPoolExecutor(max_workers=len(domains)) as pool:
            results = list(pool.map(attempt, domains))

        winners = [r for r in results if r.first_bind]
        assert len(winners) == 1
        assert all(
            r.status is BindStatus.ALREADY_BOUND_ELSEWHERE for r in results if not r.first_bind
        )

        stored = asyncio.run(store.lookup("RACE-KEY-0001"))
        assert stored.bound_domain == winners[0].record.bound_domain

"""
In-memory implementation of LicenseRepository port.

Single-process store used by tests and local development.
Binding is serialized per key with a mutex around the check-and-set.
"""
import threading
from typing import Dict, Iterable, Optional

from core.domain.exceptions import DuplicateLicenseKeyError
from core.domain.value_objects import BindStatus
from licenses.domain.license import LicenseRecord
from licenses.ports.license_repository import BindResult, LicenseRepository


class InMemoryLicenseRepository(LicenseRepository):
    """
    Dict-backed LicenseRepository with per-key locking.

    Records are never removed, so a lock exists exactly for each stored key.
    """

    def __init__(self, records: Iterable[LicenseRecord] = ()):
        """Initialize the store, optionally seeded with records."""
        self._records: Dict[str, LicenseRecord] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        for record in records:
            self._locks[record.key] = threading.Lock()
            self._records[record.key] = record

    async def lookup(self, key: str) -> Optional[LicenseRecord]:
        """Find a license record by key."""
        return self._records.get(key)

    async def try_bind(self, key: str, domain: str) -> BindResult:
        """Atomically bind a license to a domain."""
        lock = self._locks.get(key)
        if lock is None:
            return BindResult(BindStatus.NOT_FOUND)

        with lock:
            record = self._records[key]
            if record.is_bound_to(domain):
                return BindResult(BindStatus.BOUND, record)
            if record.bound:
                return BindResult(BindStatus.ALREADY_BOUND_ELSEWHERE, record)

            bound = record.bind(domain)
            self._records[key] = bound
            return BindResult(BindStatus.BOUND, bound, first_bind=True)

    async def add(self, record: LicenseRecord) -> LicenseRecord:
        """Provision a new license record."""
        with self._registry_lock:
            if record.key in self._locks:
                raise DuplicateLicenseKeyError(f"License key {record.key} already exists")
            # Binding looks up the lock first, so the record must be in place before it
            self._records[record.key] = record
            self._locks[record.key] = threading.Lock()
        return record

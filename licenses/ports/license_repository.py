"""
License repository port (interface).

This defines the contract for the license store.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from core.domain.value_objects import BindStatus
from licenses.domain.license import LicenseRecord


@dataclass(frozen=True)
class BindResult:
    """Result of an atomic bind attempt."""

    status: BindStatus
    record: Optional[LicenseRecord] = None
    first_bind: bool = False

    @property
    def is_bound(self) -> bool:
        """True when the license is bound to the requested domain."""
        return self.status is BindStatus.BOUND


class LicenseRepository(ABC):
    """
    Abstract repository for LicenseRecord entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def lookup(self, key: str) -> Optional[LicenseRecord]:
        """
        Find a license record by key.

        Args:
            key: License key

        Returns:
            LicenseRecord entity or None if not found
        """
        pass

    @abstractmethod
    async def try_bind(self, key: str, domain: str) -> BindResult:
        """
        Atomically bind a license to a domain.

        Must be atomic with respect to concurrent callers using the same key:
        an unbound record is bound and BOUND returned; a record already bound
        to the same domain returns BOUND without mutation; a record bound to
        another domain returns ALREADY_BOUND_ELSEWHERE without mutation;
        a missing key returns NOT_FOUND.

        Args:
            key: License key
            domain: Activation domain

        Returns:
            BindResult describing the outcome
        """
        pass

    @abstractmethod
    async def add(self, record: LicenseRecord) -> LicenseRecord:
        """
        Provision a new license record.

        Args:
            record: LicenseRecord entity to store

        Returns:
            Stored license record

        Raises:
            DuplicateLicenseKeyError: If the key already exists
        """
        pass

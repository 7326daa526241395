"""
Django implementation of LicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction
from django.utils import timezone

from core.domain.exceptions import DuplicateLicenseKeyError
from core.domain.value_objects import BindStatus, LicenseType
from licenses.domain.license import LicenseRecord
from licenses.infrastructure.models import License as LicenseModel
from licenses.ports.license_repository import BindResult, LicenseRepository


class DjangoLicenseRepository(LicenseRepository):
    """
    Django ORM implementation of LicenseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Binds with a conditional UPDATE (compare-and-set on ``bound``)
    3. Implements repository interface
    """

    def _to_domain(self, model: LicenseModel) -> LicenseRecord:
        """
        Convert Django model to domain entity.

        Args:
            model: Django License model

        Returns:
            LicenseRecord domain entity
        """
        return LicenseRecord(
            key=model.key,
            license_type=LicenseType(model.license_type),
            bound=model.bound,
            bound_domain=model.bound_domain,
            bound_at=model.bound_at,
            created_at=model.created_at,
        )

    @sync_to_async
    def lookup(self, key: str) -> Optional[LicenseRecord]:
        """
        Find a license record by key.

        Args:
            key: License key

        Returns:
            LicenseRecord entity or None if not found
        """
        model = LicenseModel.objects.filter(key=key).first()  # pylint: disable=no-member
        return self._to_domain(model) if model else None

    @sync_to_async
    def try_bind(self, key: str, domain: str) -> BindResult:
        """
        Atomically bind a license to a domain.

        The UPDATE only matches unbound rows, so concurrent binds of the
        same key serialize on the row and at most one of them succeeds.

        Args:
            key: License key
            domain: Activation domain

        Returns:
            BindResult describing the outcome
        """
        now = timezone.now()
        with transaction.atomic():
            # pylint: disable=no-member
            updated = LicenseModel.objects.filter(key=key, bound=False).update(
                bound=True,
                bound_domain=domain,
                bound_at=now,
                updated_at=now,
            )
            model = LicenseModel.objects.filter(key=key).first()

        if model is None:
            return BindResult(BindStatus.NOT_FOUND)

        record = self._to_domain(model)
        if updated:
            return BindResult(BindStatus.BOUND, record, first_bind=True)
        if record.is_bound_to(domain):
            return BindResult(BindStatus.BOUND, record)
        return BindResult(BindStatus.ALREADY_BOUND_ELSEWHERE, record)

    @sync_to_async
    def add(self, record: LicenseRecord) -> LicenseRecord:
        """
        Provision a new license record.

        Args:
            record: LicenseRecord entity to store

        Returns:
            Stored license record

        Raises:
            DuplicateLicenseKeyError: If the key already exists
        """
        try:
            with transaction.atomic():
                # pylint: disable=no-member
                model = LicenseModel.objects.create(
                    key=record.key,
                    license_type=record.license_type.value,
                    bound=record.bound,
                    bound_domain=record.bound_domain,
                    bound_at=record.bound_at,
                )
        except IntegrityError as exc:
            raise DuplicateLicenseKeyError(f"License key {record.key} already exists") from exc
        return self._to_domain(model)
